"""Abbreviated page selector computation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .page import PageRangeError

# Up to this many pages every index is shown; above it the list is abbreviated.
PAGE_WINDOW_THRESHOLD = 6


class ControlKind(StrEnum):
    """Kind of a page selector entry."""

    PAGE = "page"
    ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class PageControl:
    """A single page selector entry."""

    kind: ControlKind
    index: int | None = None
    is_active: bool = False

    @classmethod
    def page(cls, index: int, current_page: int) -> PageControl:
        return cls(kind=ControlKind.PAGE, index=index, is_active=index == current_page)

    @classmethod
    def ellipsis(cls) -> PageControl:
        return cls(kind=ControlKind.ELLIPSIS)

    @property
    def label(self) -> str:
        if self.kind is ControlKind.ELLIPSIS:
            return ".."
        return str(self.index)


def _check_range(last_page: int, current_page: int) -> None:
    if not isinstance(last_page, int) or isinstance(last_page, bool):
        raise TypeError(f"last_page must be int, got {type(last_page).__name__}")
    if not isinstance(current_page, int) or isinstance(current_page, bool):
        raise TypeError(f"current_page must be int, got {type(current_page).__name__}")
    if last_page < 1:
        raise PageRangeError(current_page, last_page)
    if current_page < 1 or current_page > last_page:
        raise PageRangeError(current_page, last_page)


def compute_controls(last_page: int, current_page: int) -> list[PageControl]:
    """Return the page selector entries for ``current_page`` out of ``last_page``.

    Small result sets list every page. Larger ones keep the first page,
    the last page and the neighbours of the current page, with an ellipsis
    wherever indices are skipped::

        compute_controls(10, 5)  ->  [1][..][4][5*][6][..][10]
        compute_controls(10, 2)  ->  [1][2*][3][..][10]

    Raises:
        PageRangeError: ``last_page < 1`` or ``current_page`` outside
            ``1..last_page``. Out-of-range input is never clamped.
    """
    _check_range(last_page, current_page)

    if last_page <= PAGE_WINDOW_THRESHOLD:
        return [PageControl.page(i, current_page) for i in range(1, last_page + 1)]

    controls: list[PageControl] = []
    if current_page >= 3:
        controls.append(PageControl.page(1, current_page))
        if current_page > 3:
            controls.append(PageControl.ellipsis())

    first = max(1, current_page - 1)
    last = min(last_page, current_page + 1)
    controls.extend(PageControl.page(i, current_page) for i in range(first, last + 1))

    if current_page <= last_page - 2:
        if current_page < last_page - 2:
            controls.append(PageControl.ellipsis())
        controls.append(PageControl.page(last_page, current_page))
    return controls


def format_controls(controls: list[PageControl]) -> str:
    """Render controls in bracket notation, e.g. ``[1][..][4][5*][6]``."""
    parts = []
    for control in controls:
        suffix = "*" if control.is_active else ""
        parts.append(f"[{control.label}{suffix}]")
    return "".join(parts)
