from abc import ABC, abstractmethod

from feature_movies.domain.models.navigation import AppRoute, AppTab


class AppNavigatorPort(ABC):
    @abstractmethod
    def navigate(self, route: AppRoute, tab: AppTab, hide_tab_bar: bool = False) -> None:
        pass

    @abstractmethod
    def pop(self, tab: AppTab) -> None:
        pass

    @abstractmethod
    def present_sheet(self, route: AppRoute) -> None:
        pass
