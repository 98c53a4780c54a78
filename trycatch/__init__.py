"""
trycatch - replace try/except blocks with Result-based error handling.

Wrap any callable (sync or async) so that calling it never raises and always
resolves to Ok(value) or Error(TryCatchError).

Architecture:
- trycatch / wrap      - the wrapping combinator (TCR = LazyCoroResult[T, TryCatchError])
- TryCatchError        - original error + message + timestamp, with introspection
- is_async             - best-effort async detection (heuristic, confidence-rated)
- make_async           - sync -> async conversion guarded by is_async
- pair / to_pair       - positional (value, error) view of an outcome
"""

# Core types
from ._types import TCR, Confidence, Outcome, Pair, SyncOrAsync, UncertaintyMode

# Diagnostics
from ._diagnostics import LoggingReporter, Reporter

# Errors
from ._errors import ConversionError
from .error import (
    DEFAULT_MESSAGE,
    TryCatchError,
    is_error_container,
    is_trycatch_error,
)

# Detection
from .detect import AsyncCheckResult, DetectionPolicy, classify, is_async

# Lift helpers
from . import lift
from .lift import (
    call,
    make_async,
    or_else,
    pair,
    to_pair,
    trycatch,
    unsafe,
    wrap,
)

__all__ = (
    # Types
    "TCR",
    "Confidence",
    "Outcome",
    "Pair",
    "SyncOrAsync",
    "UncertaintyMode",
    # Diagnostics
    "LoggingReporter",
    "Reporter",
    # Errors
    "ConversionError",
    "DEFAULT_MESSAGE",
    "TryCatchError",
    "is_error_container",
    "is_trycatch_error",
    # Detection
    "AsyncCheckResult",
    "DetectionPolicy",
    "classify",
    "is_async",
    # Lift module (namespace import)
    "lift",
    # Lift functions (direct import)
    "call",
    "make_async",
    "or_else",
    "pair",
    "to_pair",
    "trycatch",
    "unsafe",
    "wrap",
)
