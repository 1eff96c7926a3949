from typing import Callable, List, Optional

from feature_movies.applications.interfaces.dtos.operation_result import OperationResult
from feature_movies.applications.services.feed_aggregator import FeedAggregator
from feature_movies.domain.models.feed_state import FeedState
from feature_movies.domain.models.movie import MovieSummary
from feature_movies.domain.models.navigation import AppRoute, AppTab
from feature_movies.domain.ports.services.logger import LoggerPort
from feature_movies.domain.ports.services.navigator import AppNavigatorPort
from feature_movies.presentation.view_models.screen_state import ScreenState

LOAD_ERROR_PREFIX = "Failed to load movies"
FAVORITE_ERROR_PREFIX = "Failed to toggle favorite"


class MovieListViewModel:
    """View-model for the movie list screen.

    Feed state lives in the FeedAggregator; this class only derives what the
    screen shows from it and forwards user intents to the aggregator or the
    navigator.
    """

    def __init__(self, aggregator: FeedAggregator, app_navigator: AppNavigatorPort, logger: LoggerPort):
        self.aggregator = aggregator
        self.app_navigator = app_navigator
        self.logger = logger
        self._error_prefix = LOAD_ERROR_PREFIX

    @property
    def state(self) -> FeedState:
        return self.aggregator.state

    @property
    def movies(self) -> List[MovieSummary]:
        return self.state.items

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading_initial

    @property
    def is_loading_more(self) -> bool:
        return self.state.is_loading_more

    @property
    def can_load_more_pages(self) -> bool:
        return self.state.has_more

    @property
    def error_message(self) -> Optional[str]:
        last_error = self.state.last_error
        if last_error is None:
            return None
        return f"{self._error_prefix}: {last_error}"

    @property
    def has_reached_end(self) -> bool:
        state = self.state
        return not state.has_more and not state.is_loading_more and bool(state.items)

    @property
    def screen_state(self) -> ScreenState:
        state = self.state
        if state.is_loading_initial:
            return ScreenState.LOADING
        if state.last_error is not None:
            return ScreenState.ERROR
        if not state.items and not state.is_loading_more:
            return ScreenState.EMPTY
        return ScreenState.CONTENT

    def subscribe(self, listener: Callable[[FeedState], None]) -> Callable[[], None]:
        return self.aggregator.subscribe(listener)

    async def on_appear(self) -> Optional[OperationResult]:
        """Start the initial load for a fresh, empty feed; populated feeds are left as they are"""
        if self.state.items:
            return None
        return await self.load_movies()

    async def load_movies(self) -> OperationResult:
        self._error_prefix = LOAD_ERROR_PREFIX
        return await self.aggregator.load_initial()

    async def load_next_page(self) -> OperationResult:
        self._error_prefix = LOAD_ERROR_PREFIX
        return await self.aggregator.load_next_page()

    async def retry_load_movies(self) -> OperationResult:
        self.logger.info("Retrying movie list load")
        return await self.load_movies()

    async def on_movie_appear(self, movie_id: int) -> Optional[OperationResult]:
        """Infinite scroll: reaching the last movie requests the next page"""
        items = self.state.items
        if not items or items[-1].id != movie_id:
            return None
        return await self.load_next_page()

    async def toggle_favorite(self, movie_id: int) -> OperationResult:
        result = await self.aggregator.toggle_favorite(movie_id)
        if not result.ok:
            self._error_prefix = FAVORITE_ERROR_PREFIX
        return result

    def navigate_to_movie_detail(self, movie_id: int) -> None:
        self.app_navigator.navigate(AppRoute.movie_detail(movie_id), tab=AppTab.MOVIES)

    def present_global_search(self) -> None:
        self.app_navigator.navigate(AppRoute.search(), tab=AppTab.MOVIES, hide_tab_bar=True)

    def show_sheet(self) -> None:
        self.app_navigator.present_sheet(AppRoute.search())
