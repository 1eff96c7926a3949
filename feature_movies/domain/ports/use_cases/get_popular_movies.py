from abc import ABC, abstractmethod
from typing import List

from feature_movies.domain.models.movie import MovieSummary


class GetPopularMoviesUseCasePort(ABC):
    @abstractmethod
    async def execute(self, page: int) -> List[MovieSummary]:
        """Return one 1-based page of popular movies, raising FetchError on failure"""
        pass
