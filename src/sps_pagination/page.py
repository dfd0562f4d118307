"""Page-based pagination types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

MIN_PER_PAGE = 1
MAX_PER_PAGE = 100


class PerPageValidationError(ValueError):
    """Raised when per_page is out of valid range."""

    def __init__(self, value: int) -> None:
        super().__init__(
            f"invalid per_page: {value} (must be between {MIN_PER_PAGE} and {MAX_PER_PAGE})"
        )
        self.value = value


class PageRangeError(ValueError):
    """Raised when a page index falls outside 1..last_page."""

    def __init__(self, page: int, last_page: int | None = None) -> None:
        if last_page is None:
            msg = f"invalid page: {page} (must be >= 1)"
        else:
            msg = f"invalid page: {page} (must be between 1 and {last_page})"
        super().__init__(msg)
        self.page = page
        self.last_page = last_page


def validate_per_page(per_page: int) -> int:
    """Validate that per_page is between 1 and 100."""
    if per_page < MIN_PER_PAGE or per_page > MAX_PER_PAGE:
        raise PerPageValidationError(per_page)
    return per_page


@dataclass(frozen=True)
class PaginationState:
    """Currently displayed page and the highest valid page."""

    current_page: int
    last_page: int

    def __post_init__(self) -> None:
        if self.last_page < 1:
            raise PageRangeError(self.current_page, self.last_page)
        if not 1 <= self.current_page <= self.last_page:
            raise PageRangeError(self.current_page, self.last_page)


@dataclass
class PageData(Generic[T]):
    """One page of items plus the last page index reported by the server."""

    items: list[T] = field(default_factory=list)
    last_page: int = 0
