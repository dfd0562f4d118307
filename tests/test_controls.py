"""page selector computation unit tests."""

import pytest

from sps_pagination import (
    ControlKind,
    PageControl,
    PageRangeError,
    compute_controls,
    format_controls,
)


def notation(last_page: int, current_page: int) -> str:
    return format_controls(compute_controls(last_page, current_page))


@pytest.mark.parametrize("last_page", range(1, 7))
def test_small_result_sets_list_every_page(last_page: int) -> None:
    for current in range(1, last_page + 1):
        controls = compute_controls(last_page, current)
        assert [c.index for c in controls] == list(range(1, last_page + 1))
        assert all(c.kind is ControlKind.PAGE for c in controls)
        active = [c.index for c in controls if c.is_active]
        assert active == [current]


@pytest.mark.parametrize(
    ("last_page", "current_page", "expected"),
    [
        (10, 1, "[1*][2][..][10]"),
        (10, 2, "[1][2*][3][..][10]"),
        (10, 3, "[1][2][3*][4][..][10]"),
        (10, 4, "[1][..][3][4*][5][..][10]"),
        (10, 5, "[1][..][4][5*][6][..][10]"),
        (10, 7, "[1][..][6][7*][8][..][10]"),
        (10, 8, "[1][..][7][8*][9][10]"),
        (10, 9, "[1][..][8][9*][10]"),
        (10, 10, "[1][..][9][10*]"),
        (7, 1, "[1*][2][..][7]"),
        (7, 4, "[1][..][3][4*][5][..][7]"),
        (7, 7, "[1][..][6][7*]"),
    ],
)
def test_abbreviated_window(last_page: int, current_page: int, expected: str) -> None:
    assert notation(last_page, current_page) == expected


def test_abbreviated_window_has_single_active_control() -> None:
    for current in range(1, 21):
        controls = compute_controls(20, current)
        active = [c for c in controls if c.is_active]
        assert len(active) == 1
        assert active[0].index == current


def test_page_indices_strictly_increase() -> None:
    for current in range(1, 16):
        indices = [c.index for c in compute_controls(15, current) if c.index is not None]
        assert indices == sorted(set(indices))
        assert indices[0] == 1
        assert indices[-1] == 15


def test_ellipsis_never_adjacent_to_ellipsis() -> None:
    for current in range(1, 16):
        kinds = [c.kind for c in compute_controls(15, current)]
        for a, b in zip(kinds, kinds[1:]):
            assert not (a is ControlKind.ELLIPSIS and b is ControlKind.ELLIPSIS)


def test_compute_controls_is_idempotent() -> None:
    assert compute_controls(12, 6) == compute_controls(12, 6)


def test_ellipsis_control_shape() -> None:
    control = PageControl.ellipsis()
    assert control.index is None
    assert control.is_active is False
    assert control.label == ".."


@pytest.mark.parametrize(
    ("last_page", "current_page"),
    [(10, 0), (10, 11), (10, -1), (0, 1), (0, 0), (6, 7)],
)
def test_out_of_range_is_rejected(last_page: int, current_page: int) -> None:
    with pytest.raises(PageRangeError):
        compute_controls(last_page, current_page)


def test_page_range_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="between 1 and 10"):
        compute_controls(10, 11)


def test_non_int_is_rejected() -> None:
    with pytest.raises(TypeError):
        compute_controls(10, 2.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        compute_controls(True, 1)  # type: ignore[arg-type]
