"""
Detection policy and verdict
============================

Конфигурация классификатора и его результат.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._diagnostics import Reporter
from .._types import Confidence, UncertaintyMode

_MODES: typing.Final = ("safe", "strict")


@dataclass(frozen=True, slots=True)
class DetectionPolicy:
    """
    How is_async should behave.

    - warn: report a diagnostic when no heuristic gives a signal
      (None = unset: off for is_async, on for make_async)
    - uncertainty_mode: verdict without a signal ("safe" = async, "strict" = sync)
    - probe: allow calling the function with no arguments (has side effects!)
    - reporter: diagnostics sink, None = logging
    """

    warn: bool | None = None
    uncertainty_mode: UncertaintyMode = "safe"
    probe: bool = False
    reporter: Reporter | None = None

    def __post_init__(self) -> None:
        if self.uncertainty_mode not in _MODES:
            raise ValueError(
                f"DetectionPolicy.uncertainty_mode must be one of {_MODES}, "
                f"got {self.uncertainty_mode!r}"
            )

    @classmethod
    def safe(
        cls,
        *,
        warn: bool | None = None,
        reporter: Reporter | None = None,
    ) -> DetectionPolicy:
        """Treat undecidable callables as async. Never probes."""
        return cls(warn=warn, uncertainty_mode="safe", reporter=reporter)

    @classmethod
    def strict(
        cls,
        *,
        warn: bool | None = None,
        reporter: Reporter | None = None,
    ) -> DetectionPolicy:
        """Treat undecidable callables as sync. Never probes."""
        return cls(warn=warn, uncertainty_mode="strict", reporter=reporter)

    @classmethod
    def probing(
        cls,
        *,
        warn: bool | None = None,
        uncertainty_mode: UncertaintyMode = "safe",
        reporter: Reporter | None = None,
    ) -> DetectionPolicy:
        """
        Allow the invocation probe.

        NOTE: The probe CALLS the function with no arguments.
              Use only for functions without side effects.
        """
        return cls(warn=warn, uncertainty_mode=uncertainty_mode, probe=True, reporter=reporter)


@dataclass(frozen=True, slots=True)
class AsyncCheckResult:
    """
    Verdict of is_async(..., verbose=True).

    detection_method lists the heuristics that produced the verdict,
    for diagnostics only.
    """

    is_async: bool
    confidence: Confidence
    detection_method: tuple[str, ...]

    @property
    def is_certain(self) -> bool:
        return self.confidence == "certain"

    @property
    def is_uncertain(self) -> bool:
        return self.confidence == "uncertain"


__all__ = ("DetectionPolicy", "AsyncCheckResult")
