"""Tests for the structlog wrappers."""

from __future__ import annotations

import typing as typ

import pytest
import structlog

from metatext import logging as metatext_logging
from metatext.logging import (
    LogLevel,
    configure_logging,
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
    normalise_level,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class _RecordingLogger:
    """Collect ``log`` calls for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str, dict[str, object]]] = []

    def log(self, level: int, event: str, /, *args: object, **kw: object) -> None:
        self.records.append((level, event, kw))


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", (LogLevel.DEBUG, False)),
        (" ERROR ", (LogLevel.ERROR, False)),
        (None, (LogLevel.INFO, True)),
        ("", (LogLevel.INFO, True)),
        ("verbose", (LogLevel.INFO, True)),
    ],
)
def test_normalise_level(
    level: str | None,
    expected: tuple[LogLevel, bool],
) -> None:
    """Level names are case-insensitive and invalid input uses INFO."""
    assert normalise_level(level) == expected, (
        f"Expected normalise_level({level!r}) to be {expected!r}."
    )


def test_normalise_level_deprecates_warn() -> None:
    """WARN is accepted with a deprecation warning and mapped to WARNING."""
    with pytest.deprecated_call():
        assert normalise_level("warn") == (LogLevel.WARNING, False), (
            "Expected WARN to map to WARNING."
        )


def test_configure_logging_sets_filtering_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Configuration installs a filtering logger at the requested level."""
    captured: dict[str, typ.Any] = {}
    monkeypatch.setattr(structlog, "is_configured", lambda: False)
    monkeypatch.setattr(structlog, "configure", lambda **kw: captured.update(kw))

    assert configure_logging("debug") == (LogLevel.DEBUG, False), (
        "Expected the requested level to be reported."
    )
    assert captured["cache_logger_on_first_use"] is False, (
        "Expected loggers to be rebuilt from the current configuration."
    )
    assert isinstance(
        captured["processors"][-1], structlog.processors.JSONRenderer
    ), "Expected JSON output."


def test_configure_logging_keeps_existing_configuration(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """An existing configuration is kept unless forced."""
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(structlog, "is_configured", lambda: True)
    monkeypatch.setattr(structlog, "configure", lambda **kw: calls.append(kw))

    configure_logging("INFO")
    assert calls == [], "Expected no reconfiguration without force."

    configure_logging("INFO", force=True)
    assert len(calls) == 1, "Expected force to reconfigure structlog."


def test_log_helpers_format_messages_and_levels() -> None:
    """Each helper formats its template and logs at its own level."""
    logger = _RecordingLogger()

    log_debug(logger, "Dropped %s entry %r", "title", "bogus")
    log_info(logger, "Loaded settings")
    log_warning(logger, "Falling back to %s", "defaults")
    log_error(logger, "100% broken")

    assert logger.records == [
        (10, "Dropped title entry 'bogus'", {}),
        (20, "Loaded settings", {}),
        (30, "Falling back to defaults", {}),
        (40, "100% broken", {}),
    ], "Expected formatted messages at matching numeric levels."


def test_log_helpers_forward_exc_info() -> None:
    """Exception info is passed through only when supplied."""
    logger = _RecordingLogger()
    error = ValueError("bad settings")

    log_error(logger, "Failed: %s", error, exc_info=error)

    assert logger.records == [(40, "Failed: bad settings", {"exc_info": error})], (
        "Expected exc_info to be forwarded."
    )


def test_log_debug_rejects_misaligned_templates() -> None:
    """Template and argument mismatches raise TypeError."""
    with pytest.raises(TypeError):
        log_debug(_RecordingLogger(), "%s and %s", "only one")


def test_get_logger_is_structlog_logger_factory() -> None:
    """The re-exported factory is structlog's."""
    assert metatext_logging.get_logger is structlog.get_logger, (
        "Expected get_logger to be re-exported from structlog."
    )


@pytest.fixture
def _reset_structlog() -> cabc.Iterator[None]:
    """Restore structlog's default configuration after the test."""
    yield
    structlog.reset_defaults()


@pytest.mark.usefixtures("_reset_structlog")
def test_forced_reconfiguration_reaches_used_loggers(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A logger that has already emitted follows a forced level change."""
    configure_logging("DEBUG", force=True)
    logger = get_logger("metatext.tests")
    log_debug(logger, "first %s", "message")

    configure_logging("ERROR", force=True)
    log_debug(logger, "second %s", "message")
    log_error(logger, "third %s", "message")

    output = capsys.readouterr().out
    assert "first message" in output, "Expected the DEBUG record before the change."
    assert "second message" not in output, (
        "Expected DEBUG records to be filtered after forcing ERROR."
    )
    assert "third message" in output, "Expected ERROR records to be emitted."
