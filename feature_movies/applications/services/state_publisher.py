from typing import Callable, Generic, List, TypeVar

from feature_movies.domain.ports.services.logger import LoggerPort

T = TypeVar("T")

Listener = Callable[[T], None]


class StatePublisher(Generic[T]):
    """Notifies subscribed listeners with a state snapshot after each mutation"""

    def __init__(self, logger: LoggerPort):
        self.logger = logger
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        self.logger.debug(f"Listener subscribed, {len(self._listeners)} active")

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
                self.logger.debug(f"Listener unsubscribed, {len(self._listeners)} active")

        return unsubscribe

    def publish(self, state: T) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                self.logger.exception("State listener %r failed", listener)
