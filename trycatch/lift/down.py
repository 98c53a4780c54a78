"""
Опускание результата в значение.

Functions for running a TCR and lowering the outcome into a pair,
a plain value, or a default.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok

from .._types import TCR, Outcome, Pair


def to_pair[T](result: Outcome[T]) -> Pair[T]:
    """
    Lower an already-awaited Result into a (value, error) pair.

    Example:
        value, err = to_pair(await safe_divide(10, 2))  # (5.0, None)
    """
    match result:
        case Ok(value):
            return (value, None)
        case Error(error):
            return (None, error)
        case _ as unreachable:
            assert_never(unreachable)


async def pair[T](interp: TCR[T]) -> Pair[T]:
    """
    Run interp and return (value, None) or (None, TryCatchError).

    **When to use:** Go-style destructuring, no match needed.

    Example:
        value, err = await pair(trycatch(load)(path))
        if err is not None:
            err.print()
    """
    return to_pair(await interp)


async def unsafe[T](interp: TCR[T]) -> T:
    """
    Run and unwrap, raises the TryCatchError on failure.

    NOTE: The original error is available as err.original_error
          and as __cause__.
    """
    match await interp:
        case Ok(value):
            return value
        case Error(error):
            cause = error.original_error
            raise error from (cause if isinstance(cause, BaseException) else None)
        case _ as unreachable:
            assert_never(unreachable)


async def or_else[T](interp: TCR[T], default: T) -> T:
    """
    Run and return value or default.

    Example:
        port = await or_else(call(int, raw_port), default=8080)
    """
    match await interp:
        case Ok(value):
            return value
        case Error(_):
            return default
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "to_pair",
    "pair",
    "unsafe",
    "or_else",
)
