"""Shared pytest fixtures for ring-carousel tests."""

from collections.abc import Callable

import pytest

from src.adapters.memory_pager import MemoryPager
from src.core.circular_pager import CircularPager
from src.ports.pager import PagerRef, ScrollState

# Configure pytest-asyncio for the Discord view tests
pytest_plugins = ["pytest_asyncio"]


class CallbackRecorder:
    """Collects what the carousel reports to its caller."""

    def __init__(self) -> None:
        self.selected: list[int] = []
        self.states: list[ScrollState] = []

    def on_page_selected(self, index: int) -> None:
        self.selected.append(index)

    def on_page_scroll_state_changed(self, state: ScrollState) -> None:
        self.states.append(state)


@pytest.fixture
def recorder() -> CallbackRecorder:
    """Provide a fresh callback recorder."""
    return CallbackRecorder()


@pytest.fixture
def abc_items() -> list[str]:
    """Provide the three-item sequence used across the ring scenarios.

    Returns:
        list[str]: ["A", "B", "C"], padded to ["C", "A", "B", "C", "A"].
    """
    return ["A", "B", "C"]


@pytest.fixture
def mounted_carousel(
    abc_items: list[str], recorder: CallbackRecorder
) -> Callable[..., tuple[CircularPager[str, str], MemoryPager]]:
    """Provide a factory building a carousel mounted on a MemoryPager.

    The factory accepts the same keyword arguments as CircularPager, with
    items defaulting to ["A", "B", "C"] and the callbacks wired to the
    recorder fixture.
    """

    def factory(**kwargs: object) -> tuple[CircularPager[str, str], MemoryPager]:
        kwargs.setdefault("items", abc_items)
        kwargs.setdefault("render_item", lambda item, index: f"{index}:{item}")
        kwargs.setdefault("on_page_selected", recorder.on_page_selected)
        kwargs.setdefault(
            "on_page_scroll_state_changed", recorder.on_page_scroll_state_changed
        )
        kwargs.setdefault("pager_ref", PagerRef())
        carousel: CircularPager[str, str] = CircularPager(**kwargs)  # type: ignore[arg-type]
        rendered = carousel.render()
        pager = MemoryPager(len(rendered.children), rendered.initial_page)
        carousel.mount(pager)
        return carousel, pager

    return factory
