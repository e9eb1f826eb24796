from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.domain.services.movie_service import MovieService


class DeleteMovieUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, movie_id: int) -> Message:
        deleted_movie = await self.movie_service.delete(movie_id)
        return Message(message=f"Movie '{deleted_movie.title}' deleted successfully")
