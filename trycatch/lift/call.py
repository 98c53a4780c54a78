"""
Вызов функций с перехватом исключений.

trycatch lifts any callable (sync, async, or sync returning an awaitable)
into one that returns TCR[T] and never raises.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import overload

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import is_awaitable
from .._types import TCR, SyncOrAsync
from ..error import TryCatchError


@overload
def trycatch[T, **P](fn: Callable[P, Awaitable[T]]) -> Callable[P, TCR[T]]: ...


@overload
def trycatch[T, **P](fn: Callable[P, T]) -> Callable[P, TCR[T]]: ...


def trycatch[T, **P](fn: SyncOrAsync[P, T]) -> Callable[P, TCR[T]]:
    """
    Wrap a function so that calling it never raises.

    The wrapped call returns a lazy computation: nothing runs until it is
    awaited. Awaiting it gives Ok(value) or Error(TryCatchError).

    **When to use:** Bridge between exception-based code (your own, stdlib,
    third-party clients) and Result-based handling.

    Example:
        from trycatch import trycatch, pair

        def divide(a: float, b: float) -> float:
            if b == 0:
                raise ValueError("Division by zero")
            return a / b

        safe_divide = trycatch(divide)

        match await safe_divide(10, 0):
            case Ok(value): ...
            case Error(err): err.message  # "Division by zero"

        # or positionally
        value, err = await pair(safe_divide(10, 2))  # (5.0, None)

    Works as a decorator too:
        @trycatch
        async def fetch_user(user_id: int) -> User: ...

    NOTE: Catches Exception subclasses only. KeyboardInterrupt, SystemExit
          and asyncio.CancelledError propagate.
    """

    @wraps(fn)
    def adapter(*args: P.args, **kwargs: P.kwargs) -> TCR[T]:
        async def run() -> Result[T, TryCatchError]:
            try:
                value = fn(*args, **kwargs)
                if is_awaitable(value):
                    value = await value
                return Ok(value)
            except Exception as exc:
                return Error(TryCatchError(exc))

        return LazyCoroResult(run)

    return adapter


# Short alias
wrap = trycatch


def call[T, **P](
    fn: SyncOrAsync[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> TCR[T]:
    """
    Call fn through trycatch in one go.

    Example:
        result = await call(json.loads, raw)
    """
    return trycatch(fn)(*args, **kwargs)


__all__ = (
    "trycatch",
    "wrap",
    "call",
)
