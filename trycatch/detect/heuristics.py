"""
Async heuristics
================

Батарея независимых проверок "асинхронная ли функция".

Each heuristic looks at a callable and either returns a Signal or None
("no opinion"). They are evaluated in order by classify; see classify.py
for the tie-break rules.
"""

from __future__ import annotations

import ast
import inspect
import logging
import re
import textwrap
import typing
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .._helpers import callable_name, is_awaitable
from .._types import Confidence
from .policy import DetectionPolicy

log = logging.getLogger(__name__)

# Heuristic = (callable, policy) -> signal or no opinion
type Heuristic = Callable[[Callable[..., typing.Any], DetectionPolicy], Signal | None]

_AWAITABLE_NAMES: typing.Final = frozenset({"Awaitable", "Coroutine", "Future", "Task"})
_ANNOTATION_HEAD = re.compile(r"^\s*(?:[\w.]+\.)?(\w+)\s*(?:\[|$)")


@dataclass(frozen=True, slots=True)
class Signal:
    """One heuristic's opinion."""

    is_async: bool
    confidence: Confidence
    method: str


# ============================================================================
# declared-type
# ============================================================================


def _return_annotation(fn: Callable[..., typing.Any]) -> object:
    try:
        return inspect.signature(fn, eval_str=True).return_annotation
    except Exception as exc:
        log.debug("Signature of %s not resolved: %r", callable_name(fn), exc)
    # Unresolvable forward refs: fall back to the raw string
    annotations = getattr(inspect.unwrap(fn), "__annotations__", None)
    if isinstance(annotations, dict):
        return annotations.get("return", inspect.Signature.empty)
    return inspect.Signature.empty


def _is_awaitable_annotation(annotation: object) -> bool:
    if annotation is inspect.Signature.empty or annotation is None:
        return False
    if isinstance(annotation, str):
        match = _ANNOTATION_HEAD.match(annotation)
        return match is not None and match.group(1) in _AWAITABLE_NAMES
    origin = typing.get_origin(annotation) or annotation
    return isinstance(origin, type) and issubclass(origin, Awaitable)


def declared_type(fn: Callable[..., typing.Any], policy: DetectionPolicy) -> Signal | None:
    """Return annotation says the result must be awaited."""
    _ = policy
    if _is_awaitable_annotation(_return_annotation(fn)):
        return Signal(is_async=True, confidence="certain", method="declared-type")
    return None


# ============================================================================
# runtime-tag
# ============================================================================


def runtime_tag(fn: Callable[..., typing.Any], policy: DetectionPolicy) -> Signal | None:
    """
    Callable was declared with `async def`.

    Sees through functools.partial and inspect.markcoroutinefunction;
    for callable objects looks at __call__.
    """
    _ = policy
    if inspect.iscoroutinefunction(fn):
        return Signal(is_async=True, confidence="certain", method="runtime-tag")
    if not inspect.isroutine(fn) and not isinstance(fn, type):
        call = getattr(type(fn), "__call__", None)
        if call is not None and inspect.iscoroutinefunction(call):
            return Signal(is_async=True, confidence="certain", method="runtime-tag")
    return None


# ============================================================================
# source-text
# ============================================================================


def _own_definition(source: str) -> ast.stmt | None:
    try:
        module = ast.parse(textwrap.dedent(source))
    except (SyntaxError, ValueError):
        # Lambdas: getsource returns the enclosing line, often not parseable
        return None
    return module.body[0] if module.body else None


def source_text(fn: Callable[..., typing.Any], policy: DetectionPolicy) -> Signal | None:
    """
    The callable's own definition is an `async def`.

    Only the first statement of the source counts (decorators belong to it),
    so methods of a class or functions nested in the body are ignored.
    Classes are never async by source.

    Lower confidence: getsource follows __wrapped__, so a sync decorator
    around an async function reads as async (usually right, not always).
    """
    _ = policy
    if isinstance(fn, type):
        return None
    try:
        source = inspect.getsource(fn)
    except (OSError, TypeError) as exc:
        log.debug("No source for %s: %r", callable_name(fn), exc)
        return None
    if isinstance(_own_definition(source), ast.AsyncFunctionDef):
        return Signal(is_async=True, confidence="likely", method="source-text")
    return None


# ============================================================================
# invocation-probe
# ============================================================================


def invocation_probe(fn: Callable[..., typing.Any], policy: DetectionPolicy) -> Signal | None:
    """
    Call fn() and look at what comes back. Only with policy.probe.

    - awaitable  -> likely async (an awaitable is not necessarily a coroutine)
    - plain value -> certainly sync
    - raised      -> no opinion
    """
    if not policy.probe:
        return None
    try:
        returned = fn()
    except Exception as exc:
        log.debug("Probe of %s raised %r", callable_name(fn), exc)
        return None
    if is_awaitable(returned):
        # Never awaited on purpose; closing avoids the "never awaited" warning
        if inspect.iscoroutine(returned):
            returned.close()
        return Signal(is_async=True, confidence="likely", method="invocation-probe")
    return Signal(is_async=False, confidence="certain", method="direct-invocation")


# ============================================================================
# Battery
# ============================================================================

# Always evaluated in full, every hit is reported
DEFINITIVE: typing.Final[tuple[Heuristic, ...]] = (declared_type, runtime_tag)

# Evaluated in order, first signal wins
FALLIBLE: typing.Final[tuple[Heuristic, ...]] = (source_text, invocation_probe)


__all__ = (
    "Heuristic",
    "Signal",
    "declared_type",
    "runtime_tag",
    "source_text",
    "invocation_probe",
    "DEFINITIVE",
    "FALLIBLE",
)
