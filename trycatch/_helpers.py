"""Internal helpers for trycatch.

Common functions used across multiple modules.
These are not part of the public API."""

from __future__ import annotations

import inspect
import json
import logging
import time
import typing
from collections.abc import Awaitable, Mapping

log = logging.getLogger(__name__)


def now_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def is_awaitable(value: object) -> typing.TypeGuard[Awaitable[typing.Any]]:
    """
    Check if value must be awaited to get its result.

    Covers coroutines, futures, and any object implementing __await__
    (LazyCoroResult included).
    """
    return inspect.isawaitable(value)


def safe_get(obj: object, key: str) -> typing.Any:
    """
    Safely read a property from any value.

    Mappings are looked up by key, everything else by attribute.
    Returns None if obj is None, the property is missing, or lookup raises.
    """
    if obj is None:
        return None
    try:
        if isinstance(obj, Mapping):
            return obj.get(key)
        return getattr(obj, key, None)
    except Exception as exc:
        log.debug("Lookup of %r on %s failed: %r", key, type(obj).__name__, exc)
        return None


def deep_jsonable(value: object) -> typing.Any:
    """
    Deep copy value into plain JSON data.

    Falls back to str(value) when value can't be encoded
    (circular references, unsupported types).
    """
    try:
        return json.loads(json.dumps(value))
    except (TypeError, ValueError, RecursionError):
        return str(value)


def safe_stringify(value: object) -> str:
    """String form of an arbitrary value. Strings are returned as-is."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError, RecursionError):
        return str(value)


def callable_name(fn: object) -> str:
    """Human-readable name of a callable for diagnostics."""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return type(fn).__name__


__all__ = (
    "now_ms",
    "is_awaitable",
    "safe_get",
    "deep_jsonable",
    "safe_stringify",
    "callable_name",
)
