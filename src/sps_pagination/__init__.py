"""Portfolio comments pagination library."""

from .controller import PaginationController
from .controls import (
    PAGE_WINDOW_THRESHOLD,
    ControlKind,
    PageControl,
    compute_controls,
    format_controls,
)
from .page import (
    MAX_PER_PAGE,
    MIN_PER_PAGE,
    PageData,
    PageRangeError,
    PaginationState,
    PerPageValidationError,
    validate_per_page,
)
from .view import (
    ControlNode,
    ListContainer,
    make_control_node,
    render_control_list,
    render_item_list,
)

__all__ = [
    "ControlKind",
    "ControlNode",
    "ListContainer",
    "MAX_PER_PAGE",
    "MIN_PER_PAGE",
    "PAGE_WINDOW_THRESHOLD",
    "PageControl",
    "PageData",
    "PageRangeError",
    "PaginationController",
    "PaginationState",
    "PerPageValidationError",
    "compute_controls",
    "format_controls",
    "make_control_node",
    "render_control_list",
    "render_item_list",
    "validate_per_page",
]
