"""
Error container
===============

TryCatchError and its guards.
"""

from .container import DEFAULT_MESSAGE, TRYCATCH_KIND, TryCatchError
from .guards import is_error_container, is_trycatch_error

__all__ = (
    "DEFAULT_MESSAGE",
    "TRYCATCH_KIND",
    "TryCatchError",
    "is_error_container",
    "is_trycatch_error",
)
