"""
Async classification
====================

Best-effort answer to "does calling this return something to await?".

There is no reliable way to know without calling the function, so is_async
runs the heuristic battery:

1. declared-type, runtime-tag  - always both evaluated, certain
2. source-text                 - likely
3. invocation-probe            - only with DetectionPolicy(probe=True)
4. fallback                    - uncertain, verdict from uncertainty_mode
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from typing import Literal, overload

from .._diagnostics import resolve_reporter
from .._helpers import callable_name
from .heuristics import DEFINITIVE, FALLIBLE
from .policy import AsyncCheckResult, DetectionPolicy

log = logging.getLogger(__name__)


def classify(
    fn: Callable[..., typing.Any],
    policy: DetectionPolicy | None = None,
) -> AsyncCheckResult:
    """
    Run the heuristic battery and return the full verdict.

    Definitive checks are all attempted first; if any fires the verdict is
    certain and lists every check that fired. Otherwise the first fallible
    check with a signal wins.
    """
    policy = policy or DetectionPolicy()

    hits = tuple(
        signal.method
        for heuristic in DEFINITIVE
        if (signal := heuristic(fn, policy)) is not None
    )
    if hits:
        return AsyncCheckResult(is_async=True, confidence="certain", detection_method=hits)

    for heuristic in FALLIBLE:
        signal = heuristic(fn, policy)
        if signal is not None:
            return AsyncCheckResult(
                is_async=signal.is_async,
                confidence=signal.confidence,
                detection_method=(signal.method,),
            )

    verdict = policy.uncertainty_mode == "safe"
    if policy.warn:
        resolve_reporter(policy.reporter).warning(
            f"[trycatch] Could not determine whether {callable_name(fn)} is async; "
            f"treating it as {'async' if verdict else 'sync'} "
            f"(uncertainty_mode={policy.uncertainty_mode!r})."
        )
    log.debug("No async signal for %s", callable_name(fn))
    return AsyncCheckResult(is_async=verdict, confidence="uncertain", detection_method=("fallback",))


@overload
def is_async(
    fn: Callable[..., typing.Any],
    policy: DetectionPolicy | None = ...,
    *,
    verbose: Literal[False] = ...,
) -> bool: ...


@overload
def is_async(
    fn: Callable[..., typing.Any],
    policy: DetectionPolicy | None = ...,
    *,
    verbose: Literal[True],
) -> AsyncCheckResult: ...


def is_async(
    fn: Callable[..., typing.Any],
    policy: DetectionPolicy | None = None,
    *,
    verbose: bool = False,
) -> bool | AsyncCheckResult:
    """
    Best-effort check whether fn is asynchronous.

    **When to use:** Guarding code paths that must not receive coroutine
    functions. Prefer static typing where available, this is a runtime fallback.

    Example:
        is_async(fetch_user)                      # True
        is_async(len, DetectionPolicy.strict())   # False (uncertain)

        check = is_async(fn, verbose=True)
        check.confidence        # "certain" | "likely" | "uncertain"
        check.detection_method  # ("runtime-tag",)
    """
    result = classify(fn, policy)
    if verbose:
        return result
    return result.is_async


__all__ = ("classify", "is_async")
