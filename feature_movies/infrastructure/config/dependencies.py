from typing import Optional

from feature_movies.applications.services.feed_aggregator import FeedAggregator
from feature_movies.domain.ports.services.logger import LoggerPort
from feature_movies.domain.ports.services.navigator import AppNavigatorPort
from feature_movies.domain.ports.use_cases.get_movie_detail import GetMovieDetailUseCasePort
from feature_movies.domain.ports.use_cases.get_popular_movies import GetPopularMoviesUseCasePort
from feature_movies.domain.ports.use_cases.get_trending_movies import GetTrendingMoviesUseCasePort
from feature_movies.domain.ports.use_cases.toggle_favorite import ToggleFavoriteUseCasePort
from feature_movies.infrastructure.config.settings import FeedSettings
from feature_movies.infrastructure.logging.logger import setup_logging
from feature_movies.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from feature_movies.presentation.view_models.movie_detail_view_model import MovieDetailViewModel
from feature_movies.presentation.view_models.movie_list_view_model import MovieListViewModel


def get_settings() -> FeedSettings:
    return FeedSettings()


def get_logger(name: Optional[str] = None) -> LoggerPort:
    return StdLoggerAdapter(name or __name__)


def configure_logging(settings: Optional[FeedSettings] = None) -> FeedSettings:
    settings = settings or get_settings()
    setup_logging(level=settings.log_level)
    return settings


def build_feed_aggregator(
    get_popular_movies: GetPopularMoviesUseCasePort,
    get_trending_movies: GetTrendingMoviesUseCasePort,
    toggle_favorite_use_case: ToggleFavoriteUseCasePort,
    settings: Optional[FeedSettings] = None,
    logger: Optional[LoggerPort] = None,
) -> FeedAggregator:
    settings = settings or get_settings()
    return FeedAggregator(
        get_popular_movies=get_popular_movies,
        get_trending_movies=get_trending_movies,
        toggle_favorite_use_case=toggle_favorite_use_case,
        logger=logger or get_logger("feature_movies.feed"),
        page_size=settings.page_size,
    )


def build_movie_list_view_model(
    get_popular_movies: GetPopularMoviesUseCasePort,
    get_trending_movies: GetTrendingMoviesUseCasePort,
    toggle_favorite_use_case: ToggleFavoriteUseCasePort,
    app_navigator: AppNavigatorPort,
    settings: Optional[FeedSettings] = None,
    logger: Optional[LoggerPort] = None,
) -> MovieListViewModel:
    """Wire a list view-model around a fresh, empty feed"""
    aggregator = build_feed_aggregator(
        get_popular_movies=get_popular_movies,
        get_trending_movies=get_trending_movies,
        toggle_favorite_use_case=toggle_favorite_use_case,
        settings=settings,
        logger=logger,
    )
    return MovieListViewModel(
        aggregator=aggregator,
        app_navigator=app_navigator,
        logger=logger or get_logger("feature_movies.movie_list"),
    )


def build_movie_detail_view_model(
    movie_id: int,
    get_movie_detail: GetMovieDetailUseCasePort,
    toggle_favorite_use_case: ToggleFavoriteUseCasePort,
    app_navigator: AppNavigatorPort,
    logger: Optional[LoggerPort] = None,
) -> MovieDetailViewModel:
    return MovieDetailViewModel(
        movie_id=movie_id,
        get_movie_detail=get_movie_detail,
        toggle_favorite_use_case=toggle_favorite_use_case,
        app_navigator=app_navigator,
        logger=logger or get_logger("feature_movies.movie_detail"),
    )


async def open_movie_list_view_model(
    get_popular_movies: GetPopularMoviesUseCasePort,
    get_trending_movies: GetTrendingMoviesUseCasePort,
    toggle_favorite_use_case: ToggleFavoriteUseCasePort,
    app_navigator: AppNavigatorPort,
    settings: Optional[FeedSettings] = None,
    logger: Optional[LoggerPort] = None,
) -> MovieListViewModel:
    """Configure logging, build the list view-model and run its initial load"""
    settings = configure_logging(settings)
    view_model = build_movie_list_view_model(
        get_popular_movies=get_popular_movies,
        get_trending_movies=get_trending_movies,
        toggle_favorite_use_case=toggle_favorite_use_case,
        app_navigator=app_navigator,
        settings=settings,
        logger=logger,
    )
    await view_model.on_appear()
    return view_model
