from abc import ABC, abstractmethod


class ToggleFavoriteUseCasePort(ABC):
    @abstractmethod
    async def execute(self, movie_id: int, is_favorite: bool) -> None:
        """Persist the new favorite flag for a single movie"""
        pass
