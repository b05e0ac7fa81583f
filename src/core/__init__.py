"""Core business logic.

This module contains the platform-agnostic circular carousel: sequence
padding, position tracking and the component that wires both to a pager.
"""

from src.core.carousel_logic import (
    CircularCarouselController,
    PaddedSequence,
    pad_items,
)
from src.core.circular_pager import CircularPager, RenderedPager
from src.core.errors import (
    CarouselError,
    ErrorCategory,
    InvalidIndexError,
    InvalidPageError,
    PagerError,
    PagerNotMountedError,
    classify_error,
    is_recoverable,
)
from src.core.logging import carousel_context, configure_logging, get_logger

__all__ = [
    # Carousel
    "CircularCarouselController",
    "CircularPager",
    "PaddedSequence",
    "RenderedPager",
    "pad_items",
    # Error handling
    "CarouselError",
    "ErrorCategory",
    "InvalidIndexError",
    "InvalidPageError",
    "PagerError",
    "PagerNotMountedError",
    "classify_error",
    "is_recoverable",
    # Logging
    "carousel_context",
    "configure_logging",
    "get_logger",
]
