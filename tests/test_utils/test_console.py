"""Tests for the console log formatter."""

import logging

from hostcheck.utils.console import ColorfulFormatter


def _record(name: str, msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_plain_format_strips_package_prefix() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    line = formatter.format(_record("hostcheck.services.negotiation", "Negotiated"))
    assert "services.negotiation" in line
    assert "hostcheck.services" not in line
    assert line.endswith("| Negotiated")
    assert "\033[" not in line


def test_colored_format_highlights_exit_codes() -> None:
    formatter = ColorfulFormatter(use_colors=True)
    line = formatter.format(_record("hostcheck.services.executor", "failed (exit_code=255)"))
    assert "\033[93mexit_code=255\033[0m" in line
