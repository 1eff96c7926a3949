from abc import ABC, abstractmethod
from typing import List

from feature_movies.domain.models.movie import MovieSummary


class GetTrendingMoviesUseCasePort(ABC):
    @abstractmethod
    async def execute(self, page: int) -> List[MovieSummary]:
        pass
