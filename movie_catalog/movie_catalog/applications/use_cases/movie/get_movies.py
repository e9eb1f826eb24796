from movie_catalog.applications.interfaces.dtos.filter_page import MovieFilter
from movie_catalog.applications.interfaces.dtos.movie import MovieList
from movie_catalog.applications.services.movie_dto_mapper import MovieDtoMapper
from movie_catalog.domain.services.movie_service import MovieService


class GetMoviesUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, movie_filter: MovieFilter) -> MovieList:
        movies = await self.movie_service.find_with_filters(
            genre=movie_filter.genre,
            year_from=movie_filter.year_from,
            year_to=movie_filter.year_to,
        )
        return MovieDtoMapper.to_list(movies)
