from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.applications.services.submission_gate import SubmissionGate
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.services.movie_service import MovieService
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.config.settings import CatalogSettings, Settings
from movie_catalog.infrastructure.logging.logger import StdLoggerAdapter
from movie_catalog.infrastructure.persistence.database import get_session

_create_movie_gate = SubmissionGate("movie creation")


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_catalog")


def get_settings() -> Settings:
    return Settings()


def get_catalog_settings() -> CatalogSettings:
    return CatalogSettings()


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def get_create_movie_gate() -> SubmissionGate:
    return _create_movie_gate


def get_movie_service(
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    catalog_settings: Annotated[CatalogSettings, Depends(get_catalog_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieService:
    return MovieService(
        movie_repository=movie_repository,
        logger=logger,
        reject_partial_year_range=catalog_settings.reject_partial_year_range,
    )
