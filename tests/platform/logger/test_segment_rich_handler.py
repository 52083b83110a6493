"""Tests for the ``SegmentRichHandler`` path formatting and logger setup."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from pathvalue.platform.logging import LOGGER_NAME, SegmentRichHandler, setup_logger


def _make_handler() -> SegmentRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return SegmentRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with probe extras for testing."""

    record = logging.LogRecord(
        name="pathvalue",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_probe_success_renders_kind_and_size() -> None:
    handler = _make_handler()
    record = _build_record(
        probe_event="probe.success", path="/etc/passwd", kind="regular", size=2048
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Probe ok @ /etc/passwd (kind=regular, size=2048)" in rendered.plain


def test_probe_failure_renders_error() -> None:
    handler = _make_handler()
    record = _build_record(
        probe_event="probe.failure", path="/missing", error_message="surrogates not allowed"
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Probe failed @ /missing (surrogates not allowed)" in rendered.plain


def test_long_paths_are_truncated() -> None:
    """Only the last few segments are shown, after an ellipsis."""

    handler = _make_handler()
    record = _build_record(probe_event="probe.failure", path="/a/b/c/d/e/f")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "/…/c/d/e/f" in rendered.plain


def test_drive_paths_keep_backslashes() -> None:
    handler = _make_handler()
    record = _build_record(probe_event="probe.success", path="C:\\Users\\me")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "C:\\Users\\me" in rendered.plain


def test_empty_path_renders_quotes() -> None:
    handler = _make_handler()
    record = _build_record(probe_event="probe.failure", path="")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert '@ ""' in rendered.plain


def test_plain_messages_fall_through() -> None:
    handler = _make_handler()
    rendered = handler.render_message(_build_record(), "hello")
    assert isinstance(rendered, Text)
    assert rendered.plain == "hello"


def test_setup_logger_adds_rotating_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "pathvalue.log"
    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        assert logger.name == LOGGER_NAME
        assert any(isinstance(h, SegmentRichHandler) for h in logger.handlers)
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)

        logger.debug("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
