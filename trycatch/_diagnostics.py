"""
Diagnostics sink
================

Всё, что библиотека "печатает", проходит через Reporter.
The deterministic core never writes to the console directly.
"""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass, field

log = logging.getLogger("trycatch")


@typing.runtime_checkable
class Reporter(typing.Protocol):
    """
    Minimal reporting capability.

    Implement it to route trycatch diagnostics anywhere
    (tests, rich console, structured logs).
    """

    def error(self, message: str, /) -> None: ...

    def warning(self, message: str, /) -> None: ...

    def info(self, message: str, /) -> None: ...


def _package_logger() -> logging.Logger:
    return log


@dataclass(frozen=True, slots=True)
class LoggingReporter:
    """Reporter over a stdlib logger. Default sink for all diagnostics."""

    logger: logging.Logger = field(default_factory=_package_logger)

    def error(self, message: str, /) -> None:
        self.logger.error(message)

    def warning(self, message: str, /) -> None:
        self.logger.warning(message)

    def info(self, message: str, /) -> None:
        self.logger.info(message)


def resolve_reporter(reporter: Reporter | None) -> Reporter:
    """Use the given reporter or fall back to LoggingReporter."""
    if reporter is None:
        return LoggingReporter()
    return reporter


__all__ = ("Reporter", "LoggingReporter", "resolve_reporter")
