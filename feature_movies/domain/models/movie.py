from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class Genre(BaseModel):
    id: int
    name: str


class MovieSummary(BaseModel):
    id: int
    title: str
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    is_favorite: bool = False


class MovieDetail(MovieSummary):
    overview: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[date] = None
    genres: List[Genre] = Field(default_factory=list)

    @property
    def genre_names(self) -> str:
        return ", ".join(genre.name for genre in self.genres)
