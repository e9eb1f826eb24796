from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.applications.services.movie_dto_mapper import MovieDtoMapper
from movie_catalog.applications.services.submission_gate import SubmissionGate
from movie_catalog.domain.services.movie_service import MovieService


class CreateMovieUseCase:
    def __init__(self, movie_service: MovieService, submission_gate: SubmissionGate):
        self.movie_service = movie_service
        self.submission_gate = submission_gate

    async def execute(self, movie_data: MovieSchema) -> MoviePublic:
        async with self.submission_gate.hold():
            movie = MovieDtoMapper.to_domain(movie_data)
            await self.movie_service.create(movie)

        return MovieDtoMapper.to_public(movie)
