from dataclasses import dataclass
from typing import Union

from app.models.search_response import PaginatedSearchResponse

UNEXPECTED_FAILURE_MESSAGE = "An unexpected error occurred. Please check logs."


@dataclass(frozen=True)
class EngineInvalidQuery:
    """The engine answered but rejected the query (e.g. malformed syntax)."""
    diagnostic: str

    @property
    def message(self) -> str:
        return f"Search query failed: {self.diagnostic}"


@dataclass(frozen=True)
class UnexpectedFailure:
    """Anything else. The cause is for the logs only, never for the caller."""
    cause: BaseException

    @property
    def message(self) -> str:
        return UNEXPECTED_FAILURE_MESSAGE


SearchFailure = Union[EngineInvalidQuery, UnexpectedFailure]
SearchOutcome = Union[PaginatedSearchResponse, EngineInvalidQuery, UnexpectedFailure]
