from __future__ import annotations

import typing

from ._diagnostics import Reporter, resolve_reporter

CONVERSION_HINT: typing.Final = (
    "Only pass synchronous functions to make_async(). "
    "For async functions, use trycatch() directly."
)


class ConversionError(Exception):
    """make_async refused to convert a callable. Returned, not raised."""

    name: typing.ClassVar[str] = "ConversionError"

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def print_error(self, reporter: Reporter | None = None) -> None:
        """Report the message together with a hint on proper usage."""
        sink = resolve_reporter(reporter)
        sink.error(str(self))
        sink.info(CONVERSION_HINT)

    def __str__(self) -> str:
        return f"[trycatch] {self.name}: {self.message}"


__all__ = ("CONVERSION_HINT", "ConversionError")
