from typing import List, Optional

from pydantic import BaseModel, Field

from feature_movies.domain.models.movie import MovieSummary


class FeedState(BaseModel):
    """Snapshot of the merged popular/trending feed"""

    items: List[MovieSummary] = Field(default_factory=list)
    page: int = 1
    has_more: bool = True
    is_loading_initial: bool = False
    is_loading_more: bool = False
    last_error: Optional[str] = None

    @property
    def item_ids(self) -> set[int]:
        return {movie.id for movie in self.items}

    def index_of(self, movie_id: int) -> Optional[int]:
        for index, movie in enumerate(self.items):
            if movie.id == movie_id:
                return index
        return None
