"""
Core type definitions for trycatch.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult, Result

if typing.TYPE_CHECKING:
    from .error import TryCatchError

# ============================================================================
# Type aliases
# ============================================================================

# Anything trycatch can wrap: plain function, coroutine function,
# or sync function that happens to return an awaitable
type SyncOrAsync[**P, T] = Callable[P, T] | Callable[P, Awaitable[T]]

# Pair = positional view of an outcome: (value, None) or (None, error)
# NOTE: On success position 1 is always None. On failure position 0 is None.
type Pair[T] = tuple[T, None] | tuple[None, TryCatchError]

# Confidence of an async classification, ordered by decreasing reliability
type Confidence = typing.Literal["certain", "likely", "uncertain"]

# What to report when no heuristic yields a signal
type UncertaintyMode = typing.Literal["safe", "strict"]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# TCR = what every wrapped call returns
type TCR[T] = LazyCoroResult[T, TryCatchError]

# Raw outcome after awaiting a TCR
type Outcome[T] = Result[T, TryCatchError]

__all__ = (
    # Type aliases
    "SyncOrAsync",
    "Pair",
    "Confidence",
    "UncertaintyMode",
    # Concrete shortcuts
    "TCR",
    "Outcome",
)
