"""Pager protocols for linear page-swiping widgets.

This module defines the interface the circular carousel consumes from the
underlying linear pager: a widget that shows one page at a time, animates
between neighbouring pages, and has no notion of wrapping around.
All types are platform-agnostic (no Discord or other client types).
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Literal, Protocol, TypeVar, runtime_checkable

# =============================================================================
# Events and callbacks
# =============================================================================


class ScrollState(str, Enum):
    """Scroll state reported by a pager.

    Values match the strings native pagers emit, so raw strings compare equal.
    """

    IDLE = "idle"
    DRAGGING = "dragging"
    SETTLING = "settling"

    @classmethod
    def coerce(cls, value: "ScrollState | str") -> "ScrollState | str":
        """Convert a raw pager string into a ScrollState.

        Pagers may report states beyond the three known ones. Those are
        returned unchanged.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return value


PageEvent = Literal["page_selected", "page_scroll_state_changed"]

PAGE_SELECTED: PageEvent = "page_selected"
PAGE_SCROLL_STATE_CHANGED: PageEvent = "page_scroll_state_changed"

# Receives a physical page index
PageSelectedCallback = Callable[[int], None]
# Receives every raw scroll state transition
ScrollStateCallback = Callable[[ScrollState | str], None]
# Any listener a pager accepts
PagerListener = Callable[[Any], None]


# =============================================================================
# Protocols
# =============================================================================


@runtime_checkable
class LinearPager(Protocol):
    """Protocol for a linear (non-circular) page-swiping widget.

    The pager renders its children 1:1 in the order supplied; page 0 is the
    first page. It reports position changes, possibly transiently while a
    gesture is in flight, and scroll state changes, which end in
    ScrollState.IDLE once a gesture has fully settled.
    """

    @property
    def current_page(self) -> int:
        """Index of the page currently shown."""
        ...

    @property
    def page_count(self) -> int:
        """Number of pages the pager holds."""
        ...

    def load(self, page_count: int, initial_page: int = 0) -> None:
        """Replace the pages, showing initial_page without animation.

        Raises:
            InvalidPageError: If initial_page is out of range.
        """
        ...

    def set_page(self, page: int) -> None:
        """Move to a page with the pager's usual transition animation.

        Raises:
            InvalidPageError: If the page is out of range.
        """
        ...

    def set_page_without_animation(self, page: int) -> None:
        """Move to a page instantly, without any transition.

        Raises:
            InvalidPageError: If the page is out of range.
        """
        ...

    def add_listener(self, event: PageEvent, callback: PagerListener) -> None:
        """Subscribe a callback to a pager event."""
        ...

    def remove_listener(self, event: PageEvent, callback: PagerListener) -> None:
        """Unsubscribe a previously added callback."""
        ...


# =============================================================================
# Shared reference
# =============================================================================

P = TypeVar("P", bound=LinearPager)


@dataclass
class PagerRef(Generic[P]):
    """Mutable cell holding an optional pager reference.

    The hosting code and the carousel may both hold the same PagerRef. The
    carousel writes it when a pager mounts and clears it on unmount; either
    side reads it to issue commands. No ownership is implied.

    Attributes:
        current: The mounted pager, or None when nothing is mounted.
    """

    current: P | None = None

    @property
    def is_mounted(self) -> bool:
        return self.current is not None
