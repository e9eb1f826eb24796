from typing import Optional

from pydantic import BaseModel

from movie_catalog.domain.models.genre import Genre

TITLE_MAX_LENGTH = 100
MIN_YEAR = 1900
MIN_DURATION_MINUTES = 1
MAX_DURATION_MINUTES = 999
# Largest value a 32-bit INTEGER column holds
MAX_STORED_INT = 2_147_483_647


class Movie(BaseModel):
    title: str
    director: str
    year: int
    duration_minutes: int
    genre: Genre
    id: Optional[int] = None
