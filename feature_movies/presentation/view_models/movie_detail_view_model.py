from typing import Callable, Optional

from feature_movies.applications.interfaces.dtos.operation_result import OperationResult
from feature_movies.applications.services.state_publisher import StatePublisher
from feature_movies.domain.exceptions import FetchError
from feature_movies.domain.models.movie import MovieDetail
from feature_movies.domain.models.movie_detail_state import MovieDetailState
from feature_movies.domain.models.navigation import AppTab
from feature_movies.domain.ports.services.logger import LoggerPort
from feature_movies.domain.ports.services.navigator import AppNavigatorPort
from feature_movies.domain.ports.use_cases.get_movie_detail import GetMovieDetailUseCasePort
from feature_movies.domain.ports.use_cases.toggle_favorite import ToggleFavoriteUseCasePort
from feature_movies.presentation.view_models.screen_state import ScreenState

DEFAULT_TITLE = "Movie Detail"


class MovieDetailViewModel:
    def __init__(
        self,
        movie_id: int,
        get_movie_detail: GetMovieDetailUseCasePort,
        toggle_favorite_use_case: ToggleFavoriteUseCasePort,
        app_navigator: AppNavigatorPort,
        logger: LoggerPort,
    ):
        self.movie_id = movie_id
        self.get_movie_detail = get_movie_detail
        self.toggle_favorite_use_case = toggle_favorite_use_case
        self.app_navigator = app_navigator
        self.logger = logger
        self._state = MovieDetailState()
        self._publisher: StatePublisher[MovieDetailState] = StatePublisher(logger)

    @property
    def state(self) -> MovieDetailState:
        return self._state.model_copy(deep=True)

    @property
    def movie(self) -> Optional[MovieDetail]:
        return self.state.movie

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error_message(self) -> Optional[str]:
        return self._state.error_message

    @property
    def title(self) -> str:
        return self._state.movie.title if self._state.movie else DEFAULT_TITLE

    @property
    def screen_state(self) -> ScreenState:
        if self._state.is_loading:
            return ScreenState.LOADING
        if self._state.error_message is not None:
            return ScreenState.ERROR
        if self._state.movie is not None:
            return ScreenState.CONTENT
        return ScreenState.NOT_FOUND

    def subscribe(self, listener: Callable[[MovieDetailState], None]) -> Callable[[], None]:
        return self._publisher.subscribe(listener)

    async def load_movie_detail(self) -> OperationResult:
        self._state.is_loading = True
        self._state.error_message = None
        self._notify()

        try:
            movie = await self.get_movie_detail.execute(movie_id=self.movie_id)
        except FetchError as e:
            self.logger.error(f"Error loading movie detail {self.movie_id}: {e.message}")
            self._state.error_message = f"Failed to load movie details: {e.message}"
            result = OperationResult.failure(e)
        else:
            self._state.movie = movie
            result = OperationResult.success()
        finally:
            self._state.is_loading = False
            self._notify()
        return result

    async def retry_load_movie_detail(self) -> OperationResult:
        return await self.load_movie_detail()

    async def toggle_favorite(self) -> OperationResult:
        movie = self._state.movie
        if movie is None:
            return OperationResult.success()

        target = not movie.is_favorite
        try:
            await self.toggle_favorite_use_case.execute(movie_id=movie.id, is_favorite=target)
        except FetchError as e:
            self.logger.error(f"Error toggling favorite for movie {movie.id}: {e.message}")
            self._state.error_message = f"Failed to toggle favorite: {e.message}"
            self._notify()
            return OperationResult.failure(e)

        self._state.movie = movie.model_copy(update={"is_favorite": target})
        self._notify()
        return OperationResult.success()

    def navigate_back(self) -> None:
        self.app_navigator.pop(tab=AppTab.MOVIES)

    def _notify(self) -> None:
        self._publisher.publish(self.state)
