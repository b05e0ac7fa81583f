"""Carousel business logic - platform agnostic.

A circular carousel presents a finite list as a ring on top of a linear pager.
The pager is fed a padded copy of the list with a clone of the last item in
front and a clone of the first item at the back. When a gesture settles on
one of those clones, the pager is moved without animation to the real page
the clone stands for, so the next gesture can continue in either direction.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from src.core.errors import (
    InvalidIndexError,
    PagerNotMountedError,
    classify_error,
    is_recoverable,
)
from src.core.logging import get_logger
from src.ports.pager import (
    PagerRef,
    PageSelectedCallback,
    ScrollState,
    ScrollStateCallback,
)

logger = get_logger(__name__)

T = TypeVar("T")


def pad_items(items: Sequence[T]) -> list[T]:
    """Pad a logical sequence with boundary clones.

    Sequences of zero or one item are returned unchanged (as a list), since
    there is nothing to wrap around to.

    Args:
        items: The logical sequence.

    Returns:
        ``[items[-1], *items, items[0]]`` for two or more items.
    """
    if len(items) <= 1:
        return list(items)
    return [items[-1], *items, items[0]]


@dataclass
class PaddedSequence(Generic[T]):
    """Physical sequence derived from a logical sequence.

    Padding is memoized on the content of the logical sequence: ``update``
    only recomputes when the items actually differ.
    """

    logical: tuple[T, ...] = ()
    physical: list[T] = field(default_factory=list)

    @classmethod
    def from_items(cls, items: Sequence[T]) -> "PaddedSequence[T]":
        logical = tuple(items)
        return cls(logical=logical, physical=pad_items(logical))

    def update(self, items: Sequence[T]) -> bool:
        """Re-derive the physical sequence if the items changed.

        Returns:
            True if the padding was recomputed.
        """
        logical = tuple(items)
        if logical == self.logical:
            return False
        self.logical = logical
        self.physical = pad_items(logical)
        return True

    @property
    def logical_length(self) -> int:
        return len(self.logical)

    @property
    def physical_length(self) -> int:
        return len(self.physical)

    @property
    def is_padded(self) -> bool:
        return len(self.logical) > 1

    def is_sentinel(self, physical_index: int) -> bool:
        """Whether a physical slot holds a boundary clone."""
        if not self.is_padded:
            return False
        return physical_index in (0, self.physical_length - 1)

    def to_logical(self, physical_index: int) -> int:
        """Translate a physical index into the logical index it shows.

        Sentinels translate to the real item they clone.
        """
        if not self.is_padded:
            return physical_index
        if physical_index == 0:
            return self.logical_length - 1
        if physical_index == self.physical_length - 1:
            return 0
        return physical_index - 1

    def to_physical(self, logical_index: int) -> int:
        """Translate a logical index into its real (non-sentinel) physical slot."""
        return logical_index + 1 if self.is_padded else logical_index


class CircularCarouselController(Generic[T]):
    """Tracks the pager position and keeps the ring continuous.

    The controller mirrors the pager's current physical page, reports valid
    logical indices to the caller, and performs the boundary teleport when a
    gesture settles on a sentinel.

    Example:
        ref = PagerRef()
        controller = CircularCarouselController(["A", "B", "C"], pager_ref=ref)
        controller.initial_physical_index  # 1
        ref.current = pager  # once the pager is mounted
    """

    def __init__(
        self,
        items: Sequence[T],
        initial_index: int = 0,
        pager_ref: PagerRef | None = None,
        on_page_selected: PageSelectedCallback | None = None,
        on_page_scroll_state_changed: ScrollStateCallback | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            items: The logical sequence.
            initial_index: Logical index shown first. Ignored for sequences of
                zero or one item.
            pager_ref: Shared reference to the pager issuing events. A new
                empty reference is created when omitted.
            on_page_selected: Called with a logical index whenever the pager
                lands on a real (non-sentinel) page.
            on_page_scroll_state_changed: Called with every scroll state.

        Raises:
            InvalidIndexError: If initial_index is outside a sequence of two or
                more items.
        """
        self.sequence: PaddedSequence[T] = PaddedSequence.from_items(items)
        self.pager_ref: PagerRef = pager_ref if pager_ref is not None else PagerRef()
        self.on_page_selected = on_page_selected
        self.on_page_scroll_state_changed = on_page_scroll_state_changed
        # Last exception raised by a caller callback, re-raised through teleports
        self._callback_error: BaseException | None = None

        if self.sequence.is_padded:
            if not 0 <= initial_index < self.sequence.logical_length:
                raise InvalidIndexError(initial_index, self.sequence.logical_length)
            self.current_physical_index = self.sequence.to_physical(initial_index)
        else:
            self.current_physical_index = 0
        self.initial_physical_index = self.current_physical_index

    @property
    def items(self) -> tuple[T, ...]:
        return self.sequence.logical

    @property
    def physical_items(self) -> list[T]:
        return self.sequence.physical

    @property
    def current_logical_index(self) -> int | None:
        """Logical index of the page on screen, None for an empty carousel."""
        if self.sequence.logical_length == 0:
            return None
        return self.sequence.to_logical(self.current_physical_index)

    @property
    def current_item(self) -> T | None:
        if 0 <= self.current_physical_index < self.sequence.physical_length:
            return self.sequence.physical[self.current_physical_index]
        return None

    def handle_position_changed(self, physical_position: int) -> None:
        """Record a new pager position and report it if it is a real page.

        Called for every position change, including transient ones while a
        gesture is still in flight. Sentinel positions are never reported.
        """
        self.current_physical_index = physical_position

        if self.sequence.is_padded:
            if self.sequence.is_sentinel(physical_position):
                logger.debug("sentinel_reached", physical_index=physical_position)
                return
            logical_index = physical_position - 1
        elif self.sequence.logical_length == 1:
            logical_index = physical_position
        else:
            return

        if self.on_page_selected:
            self._notify(self.on_page_selected, logical_index)

    def handle_scroll_state_changed(self, state: ScrollState | str) -> None:
        """Forward a scroll state and teleport off a sentinel once idle.

        States the pager reports beyond the known ones are forwarded as they
        came and otherwise ignored.
        """
        state = ScrollState.coerce(state)
        if self.on_page_scroll_state_changed:
            self._notify(self.on_page_scroll_state_changed, state)

        if state is not ScrollState.IDLE:
            return

        if not self.sequence.is_padded:
            return
        physical_length = self.sequence.physical_length
        if self.current_physical_index == 0:
            self._teleport(physical_length - 2)
        elif self.current_physical_index == physical_length - 1:
            self._teleport(1)

    def _notify(self, callback: Callable[[Any], None], value: Any) -> None:
        try:
            callback(value)
        except Exception as ex:
            self._callback_error = ex
            raise

    def _teleport(self, target: int) -> None:
        """Move the pager onto the real page a sentinel stands for.

        Skipped when no pager is mounted or the pager fails the command, for
        whatever reason. Pager-side errors are logged as warnings, anything
        else as an error. The ring then stays non-circular at that end until
        the next settle.
        """
        pager = self.pager_ref.current
        if pager is None:
            logger.debug(
                "correction_skipped",
                reason="not_mounted",
                from_page=self.current_physical_index,
                to_page=target,
            )
            return

        logger.debug(
            "boundary_teleport",
            from_page=self.current_physical_index,
            to_page=target,
        )
        self._callback_error = None
        try:
            pager.set_page_without_animation(target)
        except Exception as ex:
            # The pager delivers page_selected synchronously, so a caller
            # callback failure surfaces here and must not be swallowed
            if ex is self._callback_error:
                raise
            category = classify_error(ex)
            log = logger.warning if is_recoverable(category) else logger.error
            log(
                "correction_skipped",
                reason=category.name,
                recoverable=is_recoverable(category),
                from_page=self.current_physical_index,
                to_page=target,
                error=str(ex),
            )

    def set_items(self, items: Sequence[T]) -> int:
        """Replace the logical sequence.

        The current logical index is kept when it still exists, otherwise the
        carousel falls back to the first item.

        Returns:
            The physical index the pager should show for the new sequence.
        """
        previous_logical = self.current_logical_index
        if not self.sequence.update(items):
            return self.current_physical_index

        if (
            previous_logical is not None
            and previous_logical < self.sequence.logical_length
        ):
            logical_index = previous_logical
        else:
            logical_index = 0

        if self.sequence.logical_length == 0:
            self.current_physical_index = 0
        else:
            self.current_physical_index = self.sequence.to_physical(logical_index)

        logger.info(
            "items_replaced",
            logical_length=self.sequence.logical_length,
            physical_index=self.current_physical_index,
        )
        return self.current_physical_index

    def go_to(self, logical_index: int, animated: bool = True) -> None:
        """Programmatically show a logical item.

        The pager's own position event updates the controller afterwards.

        Raises:
            InvalidIndexError: If the index is outside the logical sequence.
            PagerNotMountedError: If no pager is mounted.
        """
        if not 0 <= logical_index < self.sequence.logical_length:
            raise InvalidIndexError(logical_index, self.sequence.logical_length)

        pager = self.pager_ref.current
        if pager is None:
            raise PagerNotMountedError()

        target = self.sequence.to_physical(logical_index)
        if animated:
            pager.set_page(target)
        else:
            pager.set_page_without_animation(target)
