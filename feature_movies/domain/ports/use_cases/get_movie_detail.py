from abc import ABC, abstractmethod

from feature_movies.domain.models.movie import MovieDetail


class GetMovieDetailUseCasePort(ABC):
    @abstractmethod
    async def execute(self, movie_id: int) -> MovieDetail:
        pass
