"""Tests for structured logging configuration."""

import json
import logging
from io import StringIO
from unittest.mock import MagicMock, patch

import structlog
from structlog.testing import capture_logs

from src.core.carousel_logic import CircularCarouselController
from src.core.errors import PagerError
from src.core.logging import carousel_context, configure_logging, get_logger
from src.ports.pager import PagerRef, ScrollState


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        """Reset structlog and logging configuration before each test."""
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def teardown_method(self) -> None:
        structlog.reset_defaults()

    def test_configure_development_mode(self) -> None:
        """Should configure pretty-printed output in development mode."""
        configure_logging(development=True)
        logger = get_logger("test")
        logger.info("test message", key="value")

    def test_configure_production_mode(self) -> None:
        """Should configure JSON output in production mode."""
        configure_logging(development=False)
        logger = get_logger("test")
        logger.info("test message", key="value")

    def test_reads_log_level_environment_variable(self) -> None:
        """Should read LOG_LEVEL env var."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        """Should default to INFO for unrecognised level names."""
        configure_logging(development=True, log_level="CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_silences_discord_logger(self) -> None:
        """Should set the discord logger to WARNING level."""
        configure_logging(development=True)
        assert logging.getLogger("discord").level == logging.WARNING

    def test_custom_quiet_loggers(self) -> None:
        """Should silence the loggers it is given."""
        configure_logging(development=True, quiet_loggers=["noisy.widget"])
        assert logging.getLogger("noisy.widget").level == logging.WARNING


class TestContextVars:
    """Tests for carousel_context."""

    def setup_method(self) -> None:
        structlog.contextvars.clear_contextvars()

    def teardown_method(self) -> None:
        structlog.contextvars.clear_contextvars()

    def test_carousel_context_is_scoped(self) -> None:
        """Should bind only for the duration of the block."""
        with carousel_context(carousel="gallery"):
            assert structlog.contextvars.get_contextvars() == {"carousel": "gallery"}
        assert structlog.contextvars.get_contextvars() == {}

    def test_carousel_context_restores_outer_binding(self) -> None:
        """Should restore a value bound outside the block."""
        structlog.contextvars.bind_contextvars(carousel="outer", request_id="r-1")
        with carousel_context(carousel="gallery"):
            assert structlog.contextvars.get_contextvars()["carousel"] == "gallery"
        assert structlog.contextvars.get_contextvars() == {
            "carousel": "outer",
            "request_id": "r-1",
        }


class TestProductionJsonOutput:
    """Tests for JSON output in production mode."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def teardown_method(self) -> None:
        structlog.reset_defaults()

    def test_json_output_is_valid(self) -> None:
        """Should produce valid JSON in production mode."""
        output = StringIO()
        handler = logging.StreamHandler(output)
        handler.setLevel(logging.INFO)

        configure_logging(development=False, log_level="INFO")
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)

        try:
            logger = get_logger("test")
            logger.info("page_selected", logical_index=2)

            handler.flush()
            lines = [line for line in output.getvalue().strip().split("\n") if line]
            assert lines
            parsed = json.loads(lines[-1])
            assert parsed["event"] == "page_selected"
            assert parsed["logical_index"] == 2
        finally:
            root_logger.removeHandler(handler)


class TestCarouselEvents:
    """Tests for the events the controller logs."""

    def test_teleport_logged(self) -> None:
        controller: CircularCarouselController[str] = CircularCarouselController(
            ["A", "B", "C"], pager_ref=PagerRef(MagicMock())
        )
        controller.handle_position_changed(0)
        with capture_logs() as logs:
            controller.handle_scroll_state_changed(ScrollState.IDLE)
        assert {
            "event": "boundary_teleport",
            "from_page": 0,
            "to_page": 3,
            "log_level": "debug",
        } in logs

    def test_skipped_correction_logged_as_warning(self) -> None:
        pager = MagicMock()
        pager.set_page_without_animation.side_effect = PagerError("gone")
        controller: CircularCarouselController[str] = CircularCarouselController(
            ["A", "B", "C"], pager_ref=PagerRef(pager)
        )
        controller.handle_position_changed(4)
        with capture_logs() as logs:
            controller.handle_scroll_state_changed(ScrollState.IDLE)
        warnings = [log for log in logs if log["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["event"] == "correction_skipped"
        assert warnings[0]["reason"] == "PAGER_FAILURE"
        assert warnings[0]["recoverable"] is True

    def test_unexpected_pager_failure_logged_as_error(self) -> None:
        pager = MagicMock()
        pager.set_page_without_animation.side_effect = RuntimeError(
            "native view detached"
        )
        controller: CircularCarouselController[str] = CircularCarouselController(
            ["A", "B", "C"], pager_ref=PagerRef(pager)
        )
        controller.handle_position_changed(0)
        with capture_logs() as logs:
            controller.handle_scroll_state_changed(ScrollState.IDLE)
        errors = [log for log in logs if log["log_level"] == "error"]
        assert len(errors) == 1
        assert errors[0]["event"] == "correction_skipped"
        assert errors[0]["reason"] == "UNKNOWN"
        assert errors[0]["recoverable"] is False
        assert errors[0]["error"] == "native view detached"
