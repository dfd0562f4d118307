"""page types unit tests."""

import pytest

from sps_pagination import (
    PageData,
    PageRangeError,
    PaginationState,
    PerPageValidationError,
    validate_per_page,
)


def test_validate_per_page_valid() -> None:
    assert validate_per_page(1) == 1
    assert validate_per_page(5) == 5
    assert validate_per_page(100) == 100


def test_validate_per_page_zero() -> None:
    with pytest.raises(PerPageValidationError):
        validate_per_page(0)


def test_validate_per_page_over_max() -> None:
    with pytest.raises(PerPageValidationError) as exc_info:
        validate_per_page(101)
    assert exc_info.value.value == 101


def test_pagination_state_fields() -> None:
    state = PaginationState(current_page=3, last_page=10)
    assert state.current_page == 3
    assert state.last_page == 10


@pytest.mark.parametrize(("current", "last"), [(0, 5), (6, 5), (1, 0)])
def test_pagination_state_invariant(current: int, last: int) -> None:
    with pytest.raises(PageRangeError):
        PaginationState(current_page=current, last_page=last)


def test_page_range_error_without_last_page() -> None:
    err = PageRangeError(0)
    assert err.page == 0
    assert err.last_page is None
    assert "must be >= 1" in str(err)


def test_page_data_defaults() -> None:
    data: PageData[str] = PageData()
    assert data.items == []
    assert data.last_page == 0
