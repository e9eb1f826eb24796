from typing import Optional

from movie_catalog.applications.interfaces.dtos.filter_page import YearRange
from movie_catalog.applications.interfaces.dtos.movie import MovieList
from movie_catalog.applications.services.movie_dto_mapper import MovieDtoMapper
from movie_catalog.domain.services.movie_service import MovieService


class SearchMoviesByTitleUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, title: str) -> MovieList:
        movies = await self.movie_service.find_by_title(title)
        return MovieDtoMapper.to_list(movies)


class GetMoviesByGenreUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, genre: str, year_range: Optional[YearRange] = None) -> MovieList:
        if year_range is None:
            movies = await self.movie_service.find_by_genre(genre)
        else:
            movies = await self.movie_service.find_by_genre_and_year_range(
                genre, year_range.year_from, year_range.year_to
            )
        return MovieDtoMapper.to_list(movies)


class GetMoviesByYearRangeUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, year_range: YearRange) -> MovieList:
        movies = await self.movie_service.find_by_year_range(year_range.year_from, year_range.year_to)
        return MovieDtoMapper.to_list(movies)
