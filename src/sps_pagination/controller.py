"""Pagination controller driving fetch and render of a paged item list."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generic, TypeVar

import structlog

from .controls import PageControl, compute_controls, format_controls
from .page import PageData, PageRangeError, PaginationState

T = TypeVar("T")

FetchPage = Callable[[int], Awaitable[PageData[T]]]
RenderItems = Callable[[list[T]], None]
RenderControls = Callable[[list[PageControl]], None]
ErrorHook = Callable[[int, Exception], None]


class PaginationController(Generic[T]):
    """Fetches pages on demand and renders items and page selectors.

    Requests may overlap. Each one is tagged with a generation number and
    only the most recent request is allowed to render or change state;
    completions of superseded requests are dropped (last request wins).

    A failed fetch leaves the previously rendered page untouched. The
    error is passed to ``on_error`` when provided, otherwise re-raised.
    """

    def __init__(
        self,
        fetch_page: FetchPage[T],
        render_items: RenderItems[T],
        render_controls: RenderControls,
        *,
        on_error: ErrorHook | None = None,
        logger: Any | None = None,
        first_page: int = 1,
    ) -> None:
        if first_page < 1:
            raise PageRangeError(first_page)
        self._fetch_page = fetch_page
        self._render_items = render_items
        self._render_controls = render_controls
        self._on_error = on_error
        self._logger = logger or structlog.get_logger(__name__)
        self._generation = 0
        self._loading = False
        self._state: PaginationState | None = None
        self._first_page = first_page
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> PaginationState | None:
        """Last accepted pagination state, None before the first page or when empty."""
        return self._state

    @property
    def is_loading(self) -> bool:
        """Whether the most recent request is still in flight."""
        return self._loading

    async def load(self, index: int | None = None) -> None:
        """Initial load of ``index``, or of ``first_page`` when omitted."""
        await self.activate(self._first_page if index is None else index)

    async def activate(self, index: int) -> None:
        """Fetch and render page ``index``."""
        await self._request(index, follow_last_page=False)

    def on_control_activated(self, index: int) -> asyncio.Task[None]:
        """Schedule ``activate(index)`` from a synchronous click handler.

        Must be called while the event loop is running. The task is kept
        until it finishes; an exception it raises is logged rather than
        lost. Use this as the ``on_activate`` callback of rendered controls.
        """
        task = asyncio.ensure_future(self.activate(index))
        self._tasks.add(task)
        task.add_done_callback(self._activation_done)
        return task

    def _activation_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._logger.error("page_activation_failed", error=str(error))

    async def refresh(self) -> None:
        """Re-fetch the current page, moving to the last page if it vanished."""
        index = self._state.current_page if self._state is not None else self._first_page
        await self._request(index, follow_last_page=True)

    async def _request(self, index: int, *, follow_last_page: bool) -> None:
        if index < 1:
            raise PageRangeError(index)

        self._generation += 1
        generation = self._generation
        self._loading = True
        log = self._logger.bind(page=index, generation=generation)
        log.debug("page_requested")

        try:
            data = await self._fetch_page(index)
        except asyncio.CancelledError:
            if not self._is_stale(generation):
                self._loading = False
            raise
        except Exception as e:
            if self._is_stale(generation):
                log.debug("stale_error_discarded", error=str(e))
                return
            self._loading = False
            self._fail(index, e)
            return

        if self._is_stale(generation):
            log.debug("stale_response_discarded", latest=self._generation)
            return
        self._loading = False

        last_page = data.last_page
        if last_page < 1:
            self._state = None
            self._render_items(list(data.items))
            self._render_controls([])
            log.info("page_rendered_empty")
            return

        if index > last_page:
            if follow_last_page:
                log.info("page_vanished", last_page=last_page)
                await self._request(last_page, follow_last_page=False)
                return
            self._fail(index, PageRangeError(index, last_page))
            return

        controls = compute_controls(last_page, index)
        self._state = PaginationState(current_page=index, last_page=last_page)
        self._render_items(list(data.items))
        self._render_controls(controls)
        log.info(
            "page_rendered",
            last_page=last_page,
            items=len(data.items),
            controls=format_controls(controls),
        )

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation

    def _fail(self, index: int, error: Exception) -> None:
        self._logger.warning("page_fetch_failed", page=index, error=str(error))
        if self._on_error is None:
            raise error
        self._on_error(index, error)
