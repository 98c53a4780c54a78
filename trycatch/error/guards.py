"""
Type guards for TryCatchError.

Nominal vs structural: isinstance breaks once the class has been loaded
twice (reloaded module, vendored copy, subinterpreter), structure does not.
"""

from __future__ import annotations

import typing

from .container import TRYCATCH_KIND, TryCatchError


def is_trycatch_error(value: object) -> typing.TypeGuard[TryCatchError]:
    """Nominal check. Same as TryCatchError.is_instance(value)."""
    return isinstance(value, TryCatchError)


def is_error_container(value: object) -> bool:
    """
    Structural check: does value look like a TryCatchError.

    **When to use:** The container may come from a different copy of the
    class, so isinstance is unreliable.

    Example:
        if is_error_container(err):
            log.error("failed at %d: %s", err.timestamp, err.message)
    """
    if getattr(value, "kind", None) != TRYCATCH_KIND:
        return False
    if not hasattr(value, "original_error"):
        return False
    timestamp = getattr(value, "timestamp", None)
    return (
        isinstance(getattr(value, "message", None), str)
        and isinstance(timestamp, int)
        and not isinstance(timestamp, bool)
    )


__all__ = ("is_trycatch_error", "is_error_container")
