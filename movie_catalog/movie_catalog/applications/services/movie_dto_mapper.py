from typing import List, Optional

from movie_catalog.applications.interfaces.dtos.movie import MovieList, MoviePublic, MovieSchema
from movie_catalog.domain.exceptions import ValidationError
from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.models.movie import Movie


class MovieDtoMapper:
    """Maps between movie DTOs and the domain model"""

    @staticmethod
    def to_domain(movie_data: MovieSchema, movie_id: Optional[int] = None) -> Movie:
        if not movie_data.genre or not movie_data.genre.strip():
            raise ValidationError("Genre is required")
        try:
            genre = Genre.parse(movie_data.genre)
        except ValueError as e:
            raise ValidationError(str(e))

        return Movie(
            id=movie_id,
            title=movie_data.title,
            director=movie_data.director,
            year=movie_data.year,
            duration_minutes=movie_data.duration_minutes,
            genre=genre,
        )

    @staticmethod
    def to_public(movie: Movie) -> MoviePublic:
        if movie.id is None:
            raise RuntimeError("Cannot publish a movie without an id")
        return MoviePublic(
            id=movie.id,
            title=movie.title,
            director=movie.director,
            year=movie.year,
            duration_minutes=movie.duration_minutes,
            genre=movie.genre.value,
        )

    @staticmethod
    def to_list(movies: List[Movie]) -> MovieList:
        return MovieList(movies=[MovieDtoMapper.to_public(movie) for movie in movies])
