from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.applications.services.movie_dto_mapper import MovieDtoMapper
from movie_catalog.domain.services.movie_service import MovieService


class UpdateMovieUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, movie_id: int, movie_data: MovieSchema) -> MoviePublic:
        movie = MovieDtoMapper.to_domain(movie_data, movie_id=movie_id)
        await self.movie_service.update(movie)
        return MovieDtoMapper.to_public(movie)
