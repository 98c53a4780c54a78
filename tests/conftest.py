"""Pytest configuration and fixtures.

Provides a recording Reporter so diagnostics can be asserted without
touching logging configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingReporter:
    """Reporter test double that keeps every message by level."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    def error(self, message: str, /) -> None:
        self.errors.append(message)

    def warning(self, message: str, /) -> None:
        self.warnings.append(message)

    def info(self, message: str, /) -> None:
        self.infos.append(message)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
