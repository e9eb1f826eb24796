from typing import List

from pydantic import BaseModel, ConfigDict


class MovieSchema(BaseModel):
    title: str
    director: str
    year: int
    duration_minutes: int
    genre: str


class MoviePublic(BaseModel):
    id: int
    title: str
    director: str
    year: int
    duration_minutes: int
    genre: str
    model_config = ConfigDict(from_attributes=True)


class MovieList(BaseModel):
    movies: list[MoviePublic]


class GenreList(BaseModel):
    genres: List[str]
