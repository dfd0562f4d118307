"""View containers for rendering items and page selectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TypeVar

from .controls import ControlKind, PageControl

T = TypeVar("T")


@dataclass
class ControlNode:
    """Rendered page selector."""

    label: str
    index: int | None = None
    is_active: bool = False
    on_click: Callable[[], Any] | None = None

    def click(self) -> Any:
        """Invoke the bound activation callback, if any."""
        if self.on_click is None:
            return None
        return self.on_click()


@dataclass
class ListContainer:
    """Ordered container of rendered nodes."""

    name: str = ""
    children: list[Any] = field(default_factory=list)

    def clear(self) -> None:
        self.children = []

    def append(self, node: Any) -> None:
        self.children.append(node)

    def __len__(self) -> int:
        return len(self.children)


def render_item_list(
    container: ListContainer,
    items: Iterable[T],
    factory: Callable[[T], Any],
) -> None:
    """Replace the container contents with ``factory(item)`` for each item."""
    container.clear()
    for item in items:
        container.append(factory(item))


def _bind(on_activate: Callable[[int], Any], index: int) -> Callable[[], Any]:
    def activate() -> Any:
        return on_activate(index)

    return activate


def make_control_node(control: PageControl, on_activate: Callable[[int], Any]) -> ControlNode:
    """Build a node for ``control``; page nodes get an activation callback."""
    if control.kind is ControlKind.ELLIPSIS or control.index is None:
        return ControlNode(label=control.label)
    return ControlNode(
        label=control.label,
        index=control.index,
        is_active=control.is_active,
        on_click=_bind(on_activate, control.index),
    )


def render_control_list(
    container: ListContainer,
    controls: Iterable[PageControl],
    on_activate: Callable[[int], Any],
    factory: Callable[[PageControl, Callable[[int], Any]], Any] = make_control_node,
) -> None:
    """Clear the container, then append one node per control.

    Nodes from the previous render are dropped together with their
    callbacks, so repeated navigation never accumulates stale selectors.
    """
    container.clear()
    for control in controls:
        container.append(factory(control, on_activate))
