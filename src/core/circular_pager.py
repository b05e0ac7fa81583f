"""Circular pager component.

CircularPager is what callers build: it takes the carousel options, renders
the physical page list for the underlying linear pager, and wires the pager's
events into a CircularCarouselController once the pager is mounted.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from src.core.carousel_logic import CircularCarouselController
from src.core.logging import carousel_context, get_logger
from src.ports.pager import (
    PAGE_SCROLL_STATE_CHANGED,
    PAGE_SELECTED,
    LinearPager,
    PagerRef,
    PageSelectedCallback,
    ScrollState,
    ScrollStateCallback,
)

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Renders one physical slot: (item, physical_index) -> page
RenderItem = Callable[[T, int], R]


@dataclass
class RenderedPager(Generic[R]):
    """Everything the linear pager needs to draw the carousel.

    Attributes:
        initial_page: Physical page to start on.
        children: One rendered page per physical slot, in order.
        container_style: The caller's container style, untouched.
    """

    initial_page: int
    children: list[R] = field(default_factory=list)
    container_style: dict[str, Any] | None = None


class CircularPager(Generic[T, R]):
    """An infinitely looping carousel on top of a linear pager.

    Example:
        carousel = CircularPager(
            items=["A", "B", "C"],
            render_item=lambda item, index: f"<page {index}: {item}>",
            on_page_selected=lambda index: print("showing", index),
        )
        rendered = carousel.render()  # 5 children, initial_page=1
        carousel.mount(pager)
    """

    def __init__(
        self,
        items: Sequence[T],
        render_item: RenderItem,
        initial_index: int = 0,
        on_page_selected: PageSelectedCallback | None = None,
        on_page_scroll_state_changed: ScrollStateCallback | None = None,
        container_style: dict[str, Any] | None = None,
        pager_ref: PagerRef | None = None,
        name: str = "carousel",
    ) -> None:
        """Initialize the carousel.

        Args:
            items: The logical sequence to present as a ring.
            render_item: Renders one physical slot. Receives the item and its
                physical index.
            initial_index: Logical index shown first.
            on_page_selected: Called with each valid logical index selected.
            on_page_scroll_state_changed: Called with every raw scroll state.
            container_style: Passed through to the rendered output.
            pager_ref: A reference the caller also holds, so it can command
                the pager directly. A private one is created when omitted.
            name: Bound as ``carousel`` on every log line emitted while
                handling this carousel's pager events.
        """
        self.name = name
        self.render_item = render_item
        self.container_style = container_style
        self.pager_ref: PagerRef = pager_ref if pager_ref is not None else PagerRef()
        # The pager our handlers are subscribed to, if any
        self._subscribed: LinearPager | None = None
        self.controller: CircularCarouselController[T] = CircularCarouselController(
            items,
            initial_index=initial_index,
            pager_ref=self.pager_ref,
            on_page_selected=on_page_selected,
            on_page_scroll_state_changed=on_page_scroll_state_changed,
        )

    @property
    def initial_page(self) -> int:
        return self.controller.initial_physical_index

    @property
    def physical_items(self) -> list[T]:
        return self.controller.physical_items

    def render(self) -> RenderedPager:
        """Render every physical slot in order."""
        children = [
            self.render_item(item, index)
            for index, item in enumerate(self.controller.physical_items)
        ]
        return RenderedPager(
            initial_page=self.controller.current_physical_index,
            children=children,
            container_style=self.container_style,
        )

    def _handle_page_selected(self, position: int) -> None:
        with carousel_context(carousel=self.name):
            self.controller.handle_position_changed(position)

    def _handle_scroll_state(self, state: ScrollState | str) -> None:
        with carousel_context(carousel=self.name):
            self.controller.handle_scroll_state_changed(state)

    def mount(self, pager: LinearPager) -> None:
        """Attach a pager and start handling its events.

        Mounting the pager that is already attached only refreshes the ref.
        Mounting a different one detaches the previous pager first.
        """
        if self._subscribed is pager:
            self.pager_ref.current = pager
            return
        if self._subscribed is not None:
            self.unmount()
        self.pager_ref.current = pager
        self._subscribed = pager
        pager.add_listener(PAGE_SELECTED, self._handle_page_selected)
        pager.add_listener(PAGE_SCROLL_STATE_CHANGED, self._handle_scroll_state)
        logger.debug(
            "pager_mounted",
            page_count=pager.page_count,
            current_page=pager.current_page,
        )

    def unmount(self) -> None:
        """Detach the pager. Later corrections are skipped until remounted."""
        pager = self._subscribed
        if pager is None:
            self.pager_ref.current = None
            return
        pager.remove_listener(PAGE_SELECTED, self._handle_page_selected)
        pager.remove_listener(PAGE_SCROLL_STATE_CHANGED, self._handle_scroll_state)
        self._subscribed = None
        self.pager_ref.current = None
        logger.debug("pager_unmounted")

    def update_items(self, items: Sequence[T]) -> RenderedPager:
        """Replace the logical sequence and re-render.

        A mounted pager is reloaded with the new page count and moved to the
        page holding the current item.
        """
        physical_index = self.controller.set_items(items)
        rendered = self.render()

        pager = self.pager_ref.current
        if pager is not None:
            pager.load(len(rendered.children), physical_index)
        return rendered
