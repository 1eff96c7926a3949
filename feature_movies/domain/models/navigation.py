from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator


class AppTab(str, Enum):
    MOVIES = "movies"
    TV_SHOWS = "tv_shows"
    SEARCH = "search"
    FAVORITES = "favorites"


class RouteKind(str, Enum):
    MOVIE_DETAIL = "movie_detail"
    SEARCH = "search"


class AppRoute(BaseModel):
    """Destination understood by the app navigator"""

    kind: RouteKind
    movie_id: Optional[int] = None

    @model_validator(mode="after")
    def check_movie_id(self) -> "AppRoute":
        if self.kind == RouteKind.MOVIE_DETAIL and self.movie_id is None:
            raise ValueError("movie_detail route requires a movie_id")
        return self

    @classmethod
    def movie_detail(cls, movie_id: int) -> "AppRoute":
        return cls(kind=RouteKind.MOVIE_DETAIL, movie_id=movie_id)

    @classmethod
    def search(cls) -> "AppRoute":
        return cls(kind=RouteKind.SEARCH)
