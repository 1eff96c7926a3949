from typing import Dict, List, Optional
from unittest.mock import AsyncMock, Mock

import pytest

from feature_movies.applications.services.feed_aggregator import FeedAggregator
from feature_movies.domain.models.movie import MovieSummary
from feature_movies.domain.ports.services.logger import LoggerPort
from feature_movies.domain.ports.services.navigator import AppNavigatorPort
from feature_movies.domain.ports.use_cases.get_movie_detail import GetMovieDetailUseCasePort
from feature_movies.domain.ports.use_cases.get_popular_movies import GetPopularMoviesUseCasePort
from feature_movies.domain.ports.use_cases.get_trending_movies import GetTrendingMoviesUseCasePort
from feature_movies.domain.ports.use_cases.toggle_favorite import ToggleFavoriteUseCasePort


class MovieFactory:
    """Factory for creating test movies"""

    def create(
        self,
        id: int,
        title: Optional[str] = None,
        is_favorite: bool = False,
        vote_average: Optional[float] = 7.0,
        poster_path: Optional[str] = None,
    ) -> MovieSummary:
        return MovieSummary(
            id=id,
            title=title if title is not None else f"Movie {id:03d}",
            poster_path=poster_path if poster_path is not None else f"/posters/{id}.jpg",
            vote_average=vote_average,
            is_favorite=is_favorite,
        )

    def create_range(self, start: int, count: int, prefix: str = "Movie") -> List[MovieSummary]:
        return [self.create(id=movie_id, title=f"{prefix} {movie_id:03d}") for movie_id in range(start, start + count)]


def pages_side_effect(pages: Dict[int, List[MovieSummary]]):
    """Serve fixed pages by number; unknown pages are empty"""

    async def execute(page: int) -> List[MovieSummary]:
        return list(pages.get(page, []))

    return execute


@pytest.fixture
def serve_pages():
    return pages_side_effect


@pytest.fixture
def movie_factory():
    return MovieFactory()


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def mock_navigator():
    return Mock(spec=AppNavigatorPort)


@pytest.fixture
def mock_get_popular_movies():
    use_case = AsyncMock(spec=GetPopularMoviesUseCasePort)
    use_case.execute.return_value = []
    return use_case


@pytest.fixture
def mock_get_trending_movies():
    use_case = AsyncMock(spec=GetTrendingMoviesUseCasePort)
    use_case.execute.return_value = []
    return use_case


@pytest.fixture
def mock_get_movie_detail():
    return AsyncMock(spec=GetMovieDetailUseCasePort)


@pytest.fixture
def mock_toggle_favorite():
    use_case = AsyncMock(spec=ToggleFavoriteUseCasePort)
    use_case.execute.return_value = None
    return use_case


@pytest.fixture
def make_aggregator(mock_get_popular_movies, mock_get_trending_movies, mock_toggle_favorite, mock_logger):
    def _make(page_size: int = 20) -> FeedAggregator:
        return FeedAggregator(
            get_popular_movies=mock_get_popular_movies,
            get_trending_movies=mock_get_trending_movies,
            toggle_favorite_use_case=mock_toggle_favorite,
            logger=mock_logger,
            page_size=page_size,
        )

    return _make


@pytest.fixture
def aggregator(make_aggregator):
    return make_aggregator()
