"""
Sync -> async conversion.

make_async turns a synchronous function into a coroutine function,
refusing callables that already look asynchronous.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from dataclasses import replace
from functools import wraps

from .._diagnostics import resolve_reporter
from .._errors import ConversionError
from .._helpers import callable_name, is_awaitable
from ..detect import DetectionPolicy, is_async

log = logging.getLogger(__name__)


def make_async[T, **P](
    fn: Callable[P, T],
    policy: DetectionPolicy | None = None,
    *,
    force_conversion: bool = False,
) -> Callable[P, Coroutine[object, object, T]] | ConversionError:
    """
    Convert a sync function into an async one.

    Returns ConversionError (never raises it) when:
    - fn is certainly/likely async already
    - detection is uncertain and force_conversion is not set

    **When to use:** Feeding sync callables into APIs that require coroutine
    functions. The adapter does NOT catch errors: compose with trycatch
    for full normalization.

    Example:
        from trycatch import make_async, trycatch, ConversionError

        parse = make_async(parse_config)
        if isinstance(parse, ConversionError):
            ...
        config = await parse(raw)

        safe_parse = trycatch(parse)   # never raises

    NOTE: warn defaults to True here. A caller policy keeps everything it
          sets explicitly, an unset warn (None) becomes True.
    """
    policy = policy or DetectionPolicy()
    if policy.warn is None:
        policy = replace(policy, warn=True)
    reporter = resolve_reporter(policy.reporter)
    check = is_async(fn, policy, verbose=True)

    if check.is_async and not check.is_uncertain:
        error = ConversionError(
            "Function appears to be already asynchronous. "
            "Cannot convert an async function to async."
        )
        error.print_error(reporter)
        return error

    if check.is_uncertain:
        if not force_conversion:
            error = ConversionError(
                "Could not conclusively determine if function is async or sync. "
                "Use force_conversion=True to override."
            )
            error.print_error(reporter)
            return error
        reporter.warning(
            f"[trycatch] Forcing conversion of {callable_name(fn)} "
            "with ambiguous async detection."
        )

    log.debug("Converting %s to async (%s)", callable_name(fn), ", ".join(check.detection_method))

    @wraps(fn)
    async def adapter(*args: P.args, **kwargs: P.kwargs) -> T:
        value = fn(*args, **kwargs)
        # Forced conversion of something that returned an awaitable: flatten it
        if is_awaitable(value):
            return await value
        return value

    return adapter


__all__ = ("make_async",)
