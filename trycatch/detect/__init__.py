"""
Async detection
===============

Эвристическое определение асинхронности функций.
"""

from .classify import classify, is_async
from .heuristics import Signal
from .policy import AsyncCheckResult, DetectionPolicy

__all__ = (
    "AsyncCheckResult",
    "DetectionPolicy",
    "Signal",
    "classify",
    "is_async",
)
