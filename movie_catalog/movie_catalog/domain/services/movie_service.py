from datetime import date
from typing import Callable, List, Optional, Union

from movie_catalog.domain.exceptions import ConstraintViolationError, DuplicateError, NotFoundError, ValidationError
from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.models.movie import (
    MAX_DURATION_MINUTES,
    MAX_STORED_INT,
    MIN_DURATION_MINUTES,
    MIN_YEAR,
    TITLE_MAX_LENGTH,
    Movie,
)
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort

GenreInput = Union[Genre, str, None]


def _system_year() -> int:
    return date.today().year


class MovieService:
    """Domain service guarding the movie store.

    Validates fields before any mutation reaches the repository, turns store
    uniqueness violations into ``DuplicateError`` and picks the narrowest
    repository query for a filter combination.
    """

    def __init__(
        self,
        movie_repository: MovieRepository,
        logger: LoggerPort,
        reject_partial_year_range: bool = False,
        current_year: Callable[[], int] = _system_year,
    ):
        self.movie_repository = movie_repository
        self.logger = logger
        self.reject_partial_year_range = reject_partial_year_range
        self._current_year = current_year

    async def create(self, movie: Movie) -> int:
        self._validate_fields(movie)

        try:
            movie_id = await self.movie_repository.create(movie)
        except ConstraintViolationError:
            self.logger.warning(f"Duplicate movie rejected: '{movie.title}' ({movie.year})")
            raise DuplicateError("A movie with the same title and year already exists")

        movie.id = movie_id
        self.logger.info(f"Movie created: '{movie.title}' ({movie.year}) with id {movie_id}")
        return movie_id

    async def find_by_id(self, movie_id: int) -> Movie:
        self._validate_id(movie_id)
        self._ensure_storable_id(movie_id)

        movie = await self.movie_repository.get_by_id(movie_id)
        if movie is None:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return movie

    async def find_all(self) -> List[Movie]:
        return await self.movie_repository.get_all()

    async def find_by_title(self, query: Optional[str]) -> List[Movie]:
        if query is None or not query.strip():
            raise ValidationError("Search term must not be empty")
        return await self.movie_repository.find_by_title_like(query.strip())

    async def update(self, movie: Movie) -> None:
        if movie.id is None or movie.id <= 0:
            raise ValidationError("Invalid movie id")
        self._validate_fields(movie)
        self._ensure_storable_id(movie.id)

        try:
            updated = await self.movie_repository.update(movie)
        except ConstraintViolationError:
            self.logger.warning(f"Duplicate movie rejected on update of id {movie.id}")
            raise DuplicateError("Another movie with the same title and year already exists")

        if not updated:
            raise NotFoundError(f"Movie with id {movie.id} not found")
        self.logger.info(f"Movie updated: id {movie.id}")

    async def delete(self, movie_id: int) -> Movie:
        self._validate_id(movie_id)
        self._ensure_storable_id(movie_id)

        # Not atomic with the delete below; concurrent deletes are not handled.
        existing = await self.movie_repository.get_by_id(movie_id)
        if existing is None:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        await self.movie_repository.delete(movie_id)
        self.logger.info(f"Movie deleted: '{existing.title}' (id {movie_id})")
        return existing

    async def find_by_genre(self, genre: GenreInput) -> List[Movie]:
        parsed = self._require_genre(genre)
        return await self.movie_repository.find_by_genre(parsed)

    async def find_by_year_range(self, year_from: int, year_to: int) -> List[Movie]:
        self._validate_year_range(year_from, year_to)
        return await self.movie_repository.find_by_year_range(year_from, year_to)

    async def find_by_genre_and_year_range(self, genre: GenreInput, year_from: int, year_to: int) -> List[Movie]:
        parsed = self._require_genre(genre)
        self._validate_year_range(year_from, year_to)
        return await self.movie_repository.find_by_genre_and_year_range(parsed, year_from, year_to)

    async def find_with_filters(
        self,
        genre: GenreInput = None,
        year_from: Optional[int] = None,
        year_to: Optional[int] = None,
    ) -> List[Movie]:
        if year_from is not None and year_to is not None and year_from > year_to:
            raise ValidationError("'year_from' must not be greater than 'year_to'")
        for bound in (year_from, year_to):
            if bound is not None and abs(bound) > MAX_STORED_INT:
                raise ValidationError(f"Year filter {bound} is out of range")

        parsed = self._optional_genre(genre)
        has_range = year_from is not None and year_to is not None
        no_bounds = year_from is None and year_to is None

        if parsed is None and no_bounds:
            return await self.movie_repository.get_all()
        if parsed is not None and no_bounds:
            return await self.movie_repository.find_by_genre(parsed)
        if parsed is None and has_range:
            return await self.movie_repository.find_by_year_range(year_from, year_to)
        if parsed is not None and has_range:
            return await self.movie_repository.find_by_genre_and_year_range(parsed, year_from, year_to)

        # Only one year bound was given.
        if self.reject_partial_year_range:
            raise ValidationError("Both 'year_from' and 'year_to' are required to filter by year")
        self.logger.warning(
            f"Unsupported filter combination (genre={parsed}, year_from={year_from}, year_to={year_to}), "
            "returning all movies"
        )
        return await self.movie_repository.get_all()

    def _validate_fields(self, movie: Movie) -> None:
        if not movie.title.strip():
            raise ValidationError("Title is required")
        if len(movie.title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must not exceed {TITLE_MAX_LENGTH} characters")
        if not movie.director.strip():
            raise ValidationError("Director is required")
        max_year = self._current_year() + 1
        if movie.year < MIN_YEAR or movie.year > max_year:
            raise ValidationError(f"Year must be between {MIN_YEAR} and {max_year}")
        if movie.duration_minutes < MIN_DURATION_MINUTES or movie.duration_minutes > MAX_DURATION_MINUTES:
            raise ValidationError(
                f"Duration must be between {MIN_DURATION_MINUTES} and {MAX_DURATION_MINUTES} minutes"
            )

    def _validate_id(self, movie_id: int) -> None:
        if movie_id <= 0:
            raise ValidationError("Invalid movie id")

    def _ensure_storable_id(self, movie_id: int) -> None:
        # Ids past the column range can never have been assigned by the store.
        if movie_id > MAX_STORED_INT:
            raise NotFoundError(f"Movie with id {movie_id} not found")

    def _validate_year_range(self, year_from: int, year_to: int) -> None:
        # Range filters stop at the current year while create/update accept current year + 1.
        max_year = self._current_year()
        if year_from < MIN_YEAR or year_to > max_year or year_from > year_to:
            raise ValidationError(f"Invalid year range, must be between {MIN_YEAR} and {max_year}")

    def _require_genre(self, genre: GenreInput) -> Genre:
        parsed = self._optional_genre(genre)
        if parsed is None:
            raise ValidationError("Genre must not be empty")
        return parsed

    def _optional_genre(self, genre: GenreInput) -> Optional[Genre]:
        if genre is None:
            return None
        if isinstance(genre, Genre):
            return genre
        if not genre.strip():
            return None
        try:
            return Genre.parse(genre)
        except ValueError as e:
            raise ValidationError(str(e))
