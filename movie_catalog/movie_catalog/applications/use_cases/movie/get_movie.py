from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.applications.services.movie_dto_mapper import MovieDtoMapper
from movie_catalog.domain.services.movie_service import MovieService


class GetMovieUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, movie_id: int) -> MoviePublic:
        movie = await self.movie_service.find_by_id(movie_id)
        return MovieDtoMapper.to_public(movie)
