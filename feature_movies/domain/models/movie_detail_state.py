from typing import Optional

from pydantic import BaseModel

from feature_movies.domain.models.movie import MovieDetail


class MovieDetailState(BaseModel):
    movie: Optional[MovieDetail] = None
    is_loading: bool = False
    error_message: Optional[str] = None
