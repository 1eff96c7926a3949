from dataclasses import dataclass
from typing import Optional

from feature_movies.domain.exceptions import FetchError


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a feed or view-model operation; failures carry the FetchError"""

    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls()

    @classmethod
    def failure(cls, error: FetchError) -> "OperationResult":
        return cls(error=error)
