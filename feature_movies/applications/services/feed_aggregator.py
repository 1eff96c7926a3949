import asyncio
from typing import Callable, Iterable, List

from feature_movies.applications.interfaces.dtos.operation_result import OperationResult
from feature_movies.applications.services.state_publisher import StatePublisher
from feature_movies.domain.exceptions import FetchError
from feature_movies.domain.models.feed_state import FeedState
from feature_movies.domain.models.movie import MovieSummary
from feature_movies.domain.ports.services.logger import LoggerPort
from feature_movies.domain.ports.use_cases.get_popular_movies import GetPopularMoviesUseCasePort
from feature_movies.domain.ports.use_cases.get_trending_movies import GetTrendingMoviesUseCasePort
from feature_movies.domain.ports.use_cases.toggle_favorite import ToggleFavoriteUseCasePort
from feature_movies.domain.services.feed_merger import FeedMerger


class FeedAggregator:
    """Merges the popular and trending feeds into one paginated, duplicate-free list.

    The aggregator is the only writer of its FeedState. Readers get deep
    copies through ``state`` or through subscribed listeners, which are
    notified after every mutation. The loading flags are re-entrancy guards
    for a single asyncio caller, not locks.
    """

    def __init__(
        self,
        get_popular_movies: GetPopularMoviesUseCasePort,
        get_trending_movies: GetTrendingMoviesUseCasePort,
        toggle_favorite_use_case: ToggleFavoriteUseCasePort,
        logger: LoggerPort,
        page_size: int = 20,
    ):
        self.get_popular_movies = get_popular_movies
        self.get_trending_movies = get_trending_movies
        self.toggle_favorite_use_case = toggle_favorite_use_case
        self.logger = logger
        self._merger = FeedMerger(page_size=page_size)
        self._state = FeedState()
        self._publisher: StatePublisher[FeedState] = StatePublisher(logger)

    @property
    def state(self) -> FeedState:
        return self._state.model_copy(deep=True)

    def subscribe(self, listener: Callable[[FeedState], None]) -> Callable[[], None]:
        return self._publisher.subscribe(listener)

    async def load_initial(self) -> OperationResult:
        """Replace the feed with page 1, unless it already holds data without an error"""
        if self._state.is_loading_initial or self._state.is_loading_more:
            self.logger.debug("Initial load suppressed: a load is already in flight")
            return OperationResult.success()
        if self._state.items and self._state.last_error is None:
            self.logger.debug("Initial load suppressed: feed already populated")
            return OperationResult.success()

        self._state.is_loading_initial = True
        self._state.page = 1
        self._state.has_more = True
        self._state.last_error = None
        self._notify()

        try:
            batch = await self._merge_round(page=1, seen_ids=())
        except FetchError as e:
            result = self._record_load_failure(e)
        else:
            self._state.items = batch
            self.logger.info(f"Initial feed loaded with {len(batch)} movies, has_more={self._state.has_more}")
            result = OperationResult.success()
        finally:
            self._state.is_loading_initial = False
            self._notify()
        return result

    async def load_next_page(self) -> OperationResult:
        """Append the next merge round to the end of the feed"""
        if not self._state.has_more or self._state.is_loading_more or self._state.is_loading_initial:
            self.logger.debug(
                f"Next page suppressed: has_more={self._state.has_more}, "
                f"loading_initial={self._state.is_loading_initial}, loading_more={self._state.is_loading_more}"
            )
            return OperationResult.success()

        page = self._state.page
        self._state.is_loading_more = True
        self._state.last_error = None
        self._notify()

        try:
            batch = await self._merge_round(page=page, seen_ids=self._state.item_ids)
        except FetchError as e:
            result = self._record_load_failure(e)
        else:
            self._state.items.extend(batch)
            self.logger.info(f"Page {page} appended {len(batch)} movies, has_more={self._state.has_more}")
            result = OperationResult.success()
        finally:
            self._state.is_loading_more = False
            self._notify()
        return result

    async def toggle_favorite(self, movie_id: int) -> OperationResult:
        index = self._state.index_of(movie_id)
        current = self._state.items[index].is_favorite if index is not None else False
        target = not current

        try:
            await self.toggle_favorite_use_case.execute(movie_id=movie_id, is_favorite=target)
        except FetchError as e:
            self.logger.error(f"Failed to toggle favorite for movie {movie_id}: {e.message}")
            self._state.last_error = e.message
            self._notify()
            return OperationResult.failure(e)

        # the feed may have been replaced while the call was pending
        index = self._state.index_of(movie_id)
        if index is None:
            self.logger.debug(f"Movie {movie_id} not in feed, favorite persisted only upstream")
            return OperationResult.success()

        movie = self._state.items[index]
        self._state.items[index] = movie.model_copy(update={"is_favorite": target})
        self._notify()
        return OperationResult.success()

    async def _merge_round(self, page: int, seen_ids: Iterable[int]) -> List[MovieSummary]:
        self.logger.info(f"Fetching popular and trending movies for page {page}")
        popular, trending = await self._fetch_both(page)

        batch = self._merger.merge(popular, trending, seen_ids)
        if self._merger.is_exhausted(popular, trending):
            self._state.has_more = False
        else:
            self._state.page = page + 1
        return batch

    async def _fetch_both(self, page: int):
        tasks = [
            asyncio.ensure_future(self.get_popular_movies.execute(page)),
            asyncio.ensure_future(self.get_trending_movies.execute(page)),
        ]
        try:
            popular, trending = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        return popular, trending

    def _record_load_failure(self, error: FetchError) -> OperationResult:
        self.logger.error(f"Failed to load movies: {error.message}")
        self._state.last_error = error.message
        self._state.has_more = False
        return OperationResult.failure(error)

    def _notify(self) -> None:
        self._publisher.publish(self.state)
