"""Ports (interfaces) for the application.

This module contains Protocol definitions that define the boundary between
the carousel core and the linear pager widgets it drives.
"""

from src.ports.pager import (
    PAGE_SCROLL_STATE_CHANGED,
    PAGE_SELECTED,
    LinearPager,
    PageEvent,
    PagerListener,
    PagerRef,
    PageSelectedCallback,
    ScrollState,
    ScrollStateCallback,
)

__all__ = [
    # Events
    "PAGE_SCROLL_STATE_CHANGED",
    "PAGE_SELECTED",
    "PageEvent",
    "ScrollState",
    # Callbacks
    "PageSelectedCallback",
    "PagerListener",
    "ScrollStateCallback",
    # Pager protocol and shared reference
    "LinearPager",
    "PagerRef",
]
