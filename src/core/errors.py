"""Error classification for the circular carousel.

This module defines the small error hierarchy used across the carousel core,
the pager port and its adapters, plus a classifier that separates recoverable
pager-side failures (the ring briefly stops being circular at one end) from
caller mistakes.

Example:
    from src.core.errors import (
        classify_error,
        ErrorCategory,
        is_recoverable,
        PagerError,
    )

    try:
        pager.set_page_without_animation(index)
    except PagerError as ex:
        category = classify_error(ex)
        if is_recoverable(category):
            # Skip the correction, next revolution retries it
            pass
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of error types for handling decisions."""

    # Recoverable - the ring degrades but keeps working
    NOT_MOUNTED = auto()  # Pager reference not attached yet, or detached
    PAGER_FAILURE = auto()  # Pager rejected an imperative command

    # Caller errors - should surface
    INVALID_INDEX = auto()  # Logical or physical index out of range
    UNKNOWN = auto()  # Unclassified error


# Categories that leave the carousel in a degraded but usable state
RECOVERABLE_CATEGORIES = {
    ErrorCategory.NOT_MOUNTED,
    ErrorCategory.PAGER_FAILURE,
}


class CarouselError(Exception):
    """Base class for all carousel errors."""


class InvalidIndexError(CarouselError, IndexError):
    """A logical index is outside the logical sequence.

    Attributes:
        index: The rejected index.
        length: Length of the sequence it was checked against.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Invalid index {index} for sequence of length {length}")
        self.index = index
        self.length = length


class PagerError(CarouselError):
    """Error raised by a linear pager while executing a command."""


class PagerNotMountedError(PagerError):
    """No pager is attached to the reference the command was issued on."""

    def __init__(self, message: str = "Pager is not mounted") -> None:
        super().__init__(message)


class InvalidPageError(PagerError, IndexError):
    """A physical page index is outside the pager's page range.

    Attributes:
        page: The rejected page index.
        page_count: Number of pages the pager currently holds.
    """

    def __init__(self, page: int, page_count: int) -> None:
        super().__init__(f"Invalid page {page} for pager with {page_count} pages")
        self.page = page
        self.page_count = page_count


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, PagerNotMountedError):
        return ErrorCategory.NOT_MOUNTED

    # InvalidPageError is a pager-side rejection, check before IndexError
    if isinstance(error, PagerError):
        return ErrorCategory.PAGER_FAILURE

    if isinstance(error, (InvalidIndexError, IndexError)):
        return ErrorCategory.INVALID_INDEX

    error_str = str(error).lower()
    if "not mounted" in error_str:
        return ErrorCategory.NOT_MOUNTED

    return ErrorCategory.UNKNOWN


def is_recoverable(category: ErrorCategory) -> bool:
    """Check if an error category only degrades the carousel.

    Args:
        category: The error category to check.

    Returns:
        True if the carousel keeps working, with at most one end temporarily
        non-circular.
    """
    return category in RECOVERABLE_CATEGORIES
