from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from movie_catalog.applications.interfaces.dtos.filter_page import MovieFilter, YearRange
from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.movie import GenreList, MovieList, MoviePublic, MovieSchema
from movie_catalog.applications.services.submission_gate import SubmissionGate
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.search_movies import (
    GetMoviesByGenreUseCase,
    GetMoviesByYearRangeUseCase,
    SearchMoviesByTitleUseCase,
)
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.exceptions import (
    DomainError,
    DuplicateError,
    NotFoundError,
    SubmissionInProgressError,
    ValidationError,
)
from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.services.movie_service import MovieService
from movie_catalog.infrastructure.config.dependencies import get_create_movie_gate, get_movie_service

router = APIRouter(prefix="/movies", tags=["movies"])

MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
CreateGateDep = Annotated[SubmissionGate, Depends(get_create_movie_gate)]

_STATUS_BY_ERROR = {
    ValidationError: HTTPStatus.BAD_REQUEST,
    NotFoundError: HTTPStatus.NOT_FOUND,
    DuplicateError: HTTPStatus.CONFLICT,
    SubmissionInProgressError: HTTPStatus.TOO_MANY_REQUESTS,
}


def _http_error(error: DomainError) -> HTTPException:
    status_code = _STATUS_BY_ERROR.get(type(error), HTTPStatus.INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=str(error))


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, movie_service: MovieServiceDep, create_gate: CreateGateDep):
    try:
        use_case = CreateMovieUseCase(movie_service, create_gate)
        return await use_case.execute(movie)
    except DomainError as e:
        raise _http_error(e)


@router.get("/", response_model=MovieList)
async def read_movies(movie_filter: Annotated[MovieFilter, Query()], movie_service: MovieServiceDep):
    try:
        use_case = GetMoviesUseCase(movie_service)
        return await use_case.execute(movie_filter)
    except DomainError as e:
        raise _http_error(e)


@router.get("/genres", response_model=GenreList)
async def read_genres():
    return GenreList(genres=Genre.names())


@router.get("/search", response_model=MovieList)
async def search_movies(title: str, movie_service: MovieServiceDep):
    try:
        use_case = SearchMoviesByTitleUseCase(movie_service)
        return await use_case.execute(title)
    except DomainError as e:
        raise _http_error(e)


@router.get("/years", response_model=MovieList)
async def read_movies_by_year_range(year_range: Annotated[YearRange, Query()], movie_service: MovieServiceDep):
    try:
        use_case = GetMoviesByYearRangeUseCase(movie_service)
        return await use_case.execute(year_range)
    except DomainError as e:
        raise _http_error(e)


@router.get("/genre/{genre}", response_model=MovieList)
async def read_movies_by_genre(
    genre: str,
    movie_service: MovieServiceDep,
    year_from: Optional[int] = None,
    year_to: Optional[int] = None,
):
    if (year_from is None) != (year_to is None):
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST, detail="Both 'year_from' and 'year_to' are required"
        )

    year_range = None
    if year_from is not None and year_to is not None:
        year_range = YearRange(year_from=year_from, year_to=year_to)

    try:
        use_case = GetMoviesByGenreUseCase(movie_service)
        return await use_case.execute(genre, year_range)
    except DomainError as e:
        raise _http_error(e)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: int, movie_service: MovieServiceDep):
    try:
        use_case = GetMovieUseCase(movie_service)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise _http_error(e)


@router.put("/{movie_id}", response_model=MoviePublic)
async def update_movie(movie_id: int, movie: MovieSchema, movie_service: MovieServiceDep):
    try:
        use_case = UpdateMovieUseCase(movie_service)
        return await use_case.execute(movie_id, movie)
    except DomainError as e:
        raise _http_error(e)


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: int, movie_service: MovieServiceDep):
    try:
        use_case = DeleteMovieUseCase(movie_service)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise _http_error(e)
