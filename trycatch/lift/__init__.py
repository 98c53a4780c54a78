"""
Lift helpers.

Supports two import styles:
    from trycatch import lift as L      # namespace
    from trycatch import trycatch, pair # direct

Architecture:
- L.trycatch / L.wrap / L.call - поднять функцию в TCR (никогда не падает)
- L.make_async                 - sync функция -> coroutine function
- L.down.*                     - опускание TCR в пару / значение

Examples:
    from trycatch import lift as L

    safe = L.trycatch(divide)
    value, err = await L.down.pair(safe(10, 2))
    value = await L.down.or_else(safe(10, 0), default=0.0)
"""

from __future__ import annotations

from . import down as down_ns
from .call import call, trycatch, wrap
from .convert import make_async
from .down import or_else, pair, to_pair, unsafe

# L.down.* for explicit use
down = down_ns

__all__ = (
    # Namespaces
    "down",
    # Call
    "trycatch",
    "wrap",
    "call",
    # Convert
    "make_async",
    # Down
    "to_pair",
    "pair",
    "unsafe",
    "or_else",
)
