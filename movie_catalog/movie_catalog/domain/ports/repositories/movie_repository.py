from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.models.movie import Movie


class MovieRepository(ABC):
    """Record store for movies.

    ``create`` and ``update`` raise ``ConstraintViolationError`` when another
    record already holds the same (title, year) pair.
    """

    @abstractmethod
    async def create(self, movie: Movie) -> int:
        pass

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_title_like(self, title: str) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_genre(self, genre: Genre) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_year_range(self, year_from: int, year_to: int) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_genre_and_year_range(self, genre: Genre, year_from: int, year_to: int) -> List[Movie]:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> bool:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> bool:
        pass
