"""In-memory implementation of the LinearPager protocol.

This adapter behaves like a native linear pager without drawing anything.
Swipes produce the same event sequence a touch-driven pager emits (dragging,
position change, settling, idle) and stop dead at either end, since a linear
pager has nothing beyond its first and last page.

It is used by tests and by headless callers that want to drive a circular
carousel programmatically.
"""

from collections import defaultdict
from typing import Any

from src.core.errors import InvalidPageError
from src.core.logging import get_logger
from src.ports.pager import (
    PAGE_SCROLL_STATE_CHANGED,
    PAGE_SELECTED,
    PageEvent,
    PagerListener,
    ScrollState,
)

logger = get_logger(__name__)


class MemoryPager:
    """In-memory linear pager.

    Example:
        pager = MemoryPager()
        pager.load(page_count=5, initial_page=1)
        pager.add_listener("page_selected", print)
        pager.swipe_backward()  # prints 0
    """

    def __init__(self, page_count: int = 0, initial_page: int = 0) -> None:
        self._page_count = 0
        self._current_page = 0
        self._listeners: dict[PageEvent, list[PagerListener]] = defaultdict(list)

        # Every event emitted, in order, as (event, value) pairs
        self.history: list[tuple[PageEvent, Any]] = []

        self.load(page_count, initial_page)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def page_count(self) -> int:
        return self._page_count

    def load(self, page_count: int, initial_page: int = 0) -> None:
        """Replace the pages. Emits nothing, like a fresh render.

        Raises:
            InvalidPageError: If initial_page is out of range for a non-empty
                pager.
        """
        if page_count > 0 and not 0 <= initial_page < page_count:
            raise InvalidPageError(initial_page, page_count)
        self._page_count = page_count
        self._current_page = initial_page if page_count > 0 else 0

    def add_listener(self, event: PageEvent, callback: PagerListener) -> None:
        self._listeners[event].append(callback)

    def remove_listener(self, event: PageEvent, callback: PagerListener) -> None:
        if callback in self._listeners[event]:
            self._listeners[event].remove(callback)

    def _emit(self, event: PageEvent, value: Any) -> None:
        self.history.append((event, value))
        for callback in list(self._listeners[event]):
            callback(value)

    def _check_page(self, page: int) -> None:
        if not 0 <= page < self._page_count:
            raise InvalidPageError(page, self._page_count)

    def _select(self, page: int) -> None:
        self._current_page = page
        self._emit(PAGE_SELECTED, page)

    def set_page(self, page: int) -> None:
        """Animate to a page."""
        self._check_page(page)
        self._emit(PAGE_SCROLL_STATE_CHANGED, ScrollState.SETTLING)
        if page != self._current_page:
            self._select(page)
        self._emit(PAGE_SCROLL_STATE_CHANGED, ScrollState.IDLE)

    def set_page_without_animation(self, page: int) -> None:
        """Jump to a page. Only a position event is emitted."""
        self._check_page(page)
        if page != self._current_page:
            self._select(page)

    def swipe(self, delta: int) -> bool:
        """Simulate a fling of ``delta`` pages.

        The pager stops at its first and last page. A swipe that cannot move
        still produces a drag followed by idle.

        Returns:
            True if the current page changed.
        """
        self._emit(PAGE_SCROLL_STATE_CHANGED, ScrollState.DRAGGING)

        target = max(0, min(self._page_count - 1, self._current_page + delta))
        if self._page_count == 0 or target == self._current_page:
            self._emit(PAGE_SCROLL_STATE_CHANGED, ScrollState.IDLE)
            return False

        step = 1 if target > self._current_page else -1
        # Intermediate pages are reported as the fling passes them
        for page in range(self._current_page + step, target + step, step):
            self._select(page)
        self._emit(PAGE_SCROLL_STATE_CHANGED, ScrollState.SETTLING)
        self._emit(PAGE_SCROLL_STATE_CHANGED, ScrollState.IDLE)
        return True

    def swipe_forward(self) -> bool:
        return self.swipe(1)

    def swipe_backward(self) -> bool:
        return self.swipe(-1)
