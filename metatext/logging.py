"""Logging helpers for structlog integration.

This module wraps structlog so that the settings adapters and any host
application embedding the resolver share one logging configuration and one
message-formatting convention.

Examples
--------
Configure logging and emit a message:

>>> level, used_default = configure_logging("DEBUG")
>>> log_debug(get_logger(__name__), "Dropped %s entry %r", "title", "bogus")
"""

from __future__ import annotations

import enum
import typing as typ
import warnings

import structlog
from structlog import get_logger


class LogLevel(enum.StrEnum):
    """Supported log levels.

    Attributes
    ----------
    DEBUG : str
        Debug-level logging.
    INFO : str
        Informational logging.
    WARN : str
        Warning logging (deprecated alias of WARNING).
    WARNING : str
        Warning logging.
    ERROR : str
        Error logging.
    CRITICAL : str
        Critical error logging.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


#: Numeric levels understood by structlog's filtering loggers.
_LEVEL_NUMBERS: dict[LogLevel, int] = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARN: 30,
    LogLevel.WARNING: 30,
    LogLevel.ERROR: 40,
    LogLevel.CRITICAL: 50,
}


def normalise_level(level: str | None) -> tuple[LogLevel, bool]:
    """Map a user-supplied level name onto a supported ``LogLevel``.

    Parameters
    ----------
    level : str | None
        Requested log level, or None to use the default.

    Returns
    -------
    tuple[LogLevel, bool]
        A tuple of (effective_level, used_default), where used_default is True
        when the input was missing or invalid.
    """
    requested = level.strip().upper() if level else None
    if not requested or requested not in LogLevel.__members__:
        return (LogLevel.INFO, True)
    normalised = LogLevel(requested)
    if normalised is LogLevel.WARN:
        warnings.warn(
            "LogLevel.WARN is deprecated; use LogLevel.WARNING instead.",
            DeprecationWarning,
            stacklevel=3,
        )
        normalised = LogLevel.WARNING
    return (normalised, False)


def configure_logging(level: str | None, *, force: bool = False) -> tuple[str, bool]:
    """Configure structlog and return the normalised level.

    Parameters
    ----------
    level : str | None
        Requested log level, or None to use the default.
    force : bool, optional
        Whether to replace an existing structlog configuration. Loggers are
        not cached, so module-level loggers that have already emitted pick
        up the new level.

    Returns
    -------
    tuple[str, bool]
        A tuple of (effective_level, used_default), where used_default is True
        when the input was missing or invalid.
    """
    normalised, used_default = normalise_level(level)
    if force or not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(
                _LEVEL_NUMBERS[normalised],
            ),
            cache_logger_on_first_use=False,
        )
    return (normalised, used_default)


# _SupportsLog is private because callers can rely on structural typing instead.
class _SupportsLog(typ.Protocol):
    """Protocol for loggers supporting the structlog ``log`` API."""

    def log(self, level: int, event: str, /, *args: object, **kw: object) -> object: ...


def _format_message(template: str, args: tuple[object, ...]) -> str:
    """Format a log message template."""
    return template % args if args else template


def _emit(
    logger: _SupportsLog,
    level: LogLevel,
    message: str,
    exc_info: object | None = None,
) -> None:
    """Emit a log message."""
    if exc_info is None:
        logger.log(_LEVEL_NUMBERS[level], message)
    else:
        logger.log(_LEVEL_NUMBERS[level], message, exc_info=exc_info)


def log_debug(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit a DEBUG log message.

    Parameters
    ----------
    logger : _SupportsLog
        Logger instance that supports the structlog log API.
    template : str
        Percent-style format string for the log message.
    *args : object
        Arguments interpolated into the template.
    exc_info : object | None, optional
        Exception info to attach to the log record.

    Raises
    ------
    TypeError
        If the template and arguments do not align for percent formatting.
    """
    _emit(logger, LogLevel.DEBUG, _format_message(template, args), exc_info=exc_info)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit an INFO log message.

    See ``log_debug`` for the parameter contract.
    """
    _emit(logger, LogLevel.INFO, _format_message(template, args), exc_info=exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit a WARNING log message.

    See ``log_debug`` for the parameter contract.
    """
    _emit(logger, LogLevel.WARNING, _format_message(template, args), exc_info=exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Format and emit an ERROR log message.

    See ``log_debug`` for the parameter contract.
    """
    _emit(logger, LogLevel.ERROR, _format_message(template, args), exc_info=exc_info)


__all__ = (
    "LogLevel",
    "configure_logging",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "normalise_level",
)
