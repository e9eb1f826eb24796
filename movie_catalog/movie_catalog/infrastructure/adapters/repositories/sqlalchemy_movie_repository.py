import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import ConstraintViolationError
from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie

logger = logging.getLogger(__name__)


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            title=sql_movie.title,
            director=sql_movie.director,
            year=sql_movie.year,
            duration_minutes=sql_movie.duration_minutes,
            genre=sql_movie.genre,
        )

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Integrity constraint violated: {e.orig}")
            raise ConstraintViolationError("Movie with the same title and year already exists") from e

    async def _select(self, *criteria) -> List[DomainMovie]:
        query = select(SQLMovie).where(*criteria).order_by(SQLMovie.id)
        movies = await self.session.scalars(query)
        return [self._to_domain(movie) for movie in movies.all()]

    async def create(self, movie: DomainMovie) -> int:
        sql_movie = SQLMovie(
            title=movie.title,
            director=movie.director,
            year=movie.year,
            duration_minutes=movie.duration_minutes,
            genre=movie.genre,
        )
        self.session.add(sql_movie)
        await self._commit()
        await self.session.refresh(sql_movie)
        return sql_movie.id

    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        return self._to_domain(sql_movie) if sql_movie else None

    async def get_all(self) -> List[DomainMovie]:
        return await self._select()

    async def find_by_title_like(self, title: str) -> List[DomainMovie]:
        return await self._select(SQLMovie.title.icontains(title, autoescape=True))

    async def find_by_genre(self, genre: Genre) -> List[DomainMovie]:
        return await self._select(SQLMovie.genre == genre)

    async def find_by_year_range(self, year_from: int, year_to: int) -> List[DomainMovie]:
        return await self._select(SQLMovie.year.between(year_from, year_to))

    async def find_by_genre_and_year_range(self, genre: Genre, year_from: int, year_to: int) -> List[DomainMovie]:
        return await self._select(SQLMovie.genre == genre, SQLMovie.year.between(year_from, year_to))

    async def update(self, movie: DomainMovie) -> bool:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie.id))
        if not sql_movie:
            return False

        sql_movie.title = movie.title
        sql_movie.director = movie.director
        sql_movie.year = movie.year
        sql_movie.duration_minutes = movie.duration_minutes
        sql_movie.genre = movie.genre

        await self._commit()
        return True

    async def delete(self, movie_id: int) -> bool:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        if not sql_movie:
            return False

        await self.session.delete(sql_movie)
        await self.session.commit()
        return True
