from typing import Iterable, List, Sequence

from feature_movies.domain.models.movie import MovieSummary


class FeedMerger:
    """Domain service for one merge round of the popular and trending feeds.

    Popular movies take priority over trending ones on id collision, the
    batch is sorted by title with a stable sort, and a page where both
    sources return fewer than ``page_size`` movies marks the end of data.
    The end-of-data rule is a heuristic: the upstream API gives no total count.
    """

    def __init__(self, page_size: int = 20):
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.page_size = page_size

    def merge(
        self,
        popular: Sequence[MovieSummary],
        trending: Sequence[MovieSummary],
        seen_ids: Iterable[int] = (),
    ) -> List[MovieSummary]:
        seen = set(seen_ids)
        batch: List[MovieSummary] = []

        for source in (popular, trending):
            for movie in source:
                if movie.id in seen:
                    continue
                batch.append(movie)
                seen.add(movie.id)

        return sorted(batch, key=lambda movie: movie.title)

    def is_exhausted(self, popular: Sequence[MovieSummary], trending: Sequence[MovieSummary]) -> bool:
        return len(popular) < self.page_size and len(trending) < self.page_size
