"""Tests for the pager port types."""

from src.ports.pager import PagerRef, ScrollState


class TestScrollState:
    def test_values_match_native_strings(self) -> None:
        assert ScrollState.IDLE == "idle"
        assert ScrollState.DRAGGING == "dragging"
        assert ScrollState.SETTLING == "settling"

    def test_coerce_string(self) -> None:
        assert ScrollState.coerce("idle") is ScrollState.IDLE

    def test_coerce_is_case_insensitive(self) -> None:
        assert ScrollState.coerce("Dragging") is ScrollState.DRAGGING

    def test_coerce_passes_members_through(self) -> None:
        assert ScrollState.coerce(ScrollState.SETTLING) is ScrollState.SETTLING

    def test_coerce_unknown_returns_raw_value(self) -> None:
        assert ScrollState.coerce("spinning") == "spinning"


class TestPagerRef:
    def test_empty_by_default(self) -> None:
        ref: PagerRef = PagerRef()
        assert ref.current is None
        assert not ref.is_mounted

    def test_shared_between_holders(self) -> None:
        ref: PagerRef = PagerRef()
        holder = {"ref": ref}
        ref.current = object()  # type: ignore[assignment]
        assert holder["ref"].is_mounted
