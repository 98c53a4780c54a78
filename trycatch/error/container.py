"""
TryCatchError
=============

Обогащённый контейнер ошибки: исходное значение + сообщение + время.

Whatever a wrapped callable raised ends up here, untouched, together with a
human-readable message and the moment it was caught.
"""

from __future__ import annotations

import logging
import traceback
import typing
from collections.abc import Mapping
from datetime import UTC, datetime

from .._diagnostics import Reporter, resolve_reporter
from .._helpers import deep_jsonable, now_ms, safe_get, safe_stringify

log = logging.getLogger(__name__)

DEFAULT_MESSAGE: typing.Final = "An unexpected error occurred"
TRYCATCH_KIND: typing.Final = "TryCatchError"


def _derive_message(original_error: object) -> str:
    if not isinstance(original_error, BaseException):
        return DEFAULT_MESSAGE
    try:
        message = getattr(original_error, "message", None)
        if isinstance(message, str):
            return message
        return str(original_error)
    except Exception as exc:
        log.debug("Message of %s not readable: %r", type(original_error).__name__, exc)
        return DEFAULT_MESSAGE


def _format_timestamp(timestamp: int) -> str:
    try:
        moment = datetime.fromtimestamp(timestamp / 1000, tz=UTC)
    except (OverflowError, ValueError, OSError):
        return f"{timestamp}ms"
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _restore(
    cls: type[TryCatchError],
    original_error: object,
    message: str,
    timestamp: int,
) -> TryCatchError:
    """Rebuild a container with a given timestamp (copy, pickle, deserialize)."""
    restored = cls.__new__(cls, original_error, message)
    Exception.__init__(restored, message)
    object.__setattr__(restored, "_original_error", original_error)
    object.__setattr__(restored, "_message", message)
    object.__setattr__(restored, "_timestamp", timestamp)
    return restored


class TryCatchError(Exception):
    """
    Failure captured by trycatch.

    Keeps the raw caught value (any type, identity preserved), a message and a
    millisecond timestamp. All three are read-only.

    Example:
        err = TryCatchError(ValueError("boom"))
        err.message          # "boom"
        err.original_error   # the very same ValueError

        TryCatchError("raw").message  # "An unexpected error occurred"
    """

    kind: typing.ClassVar[str] = TRYCATCH_KIND
    name: typing.ClassVar[str] = TRYCATCH_KIND

    _original_error: object
    _message: str
    _timestamp: int

    def __init__(self, original_error: object, message: str | None = None) -> None:
        resolved = message if message is not None else _derive_message(original_error)
        super().__init__(resolved)
        object.__setattr__(self, "_original_error", original_error)
        object.__setattr__(self, "_message", resolved)
        object.__setattr__(self, "_timestamp", now_ms())

    def __setattr__(self, key: str, value: object) -> None:
        if key in ("_original_error", "_message", "_timestamp"):
            raise AttributeError(f"{type(self).__name__}.{key.lstrip('_')} is read-only")
        super().__setattr__(key, value)

    def __reduce__(self) -> tuple[typing.Any, ...]:
        return (_restore, (type(self), self._original_error, self._message, self._timestamp))

    # Fields

    @property
    def original_error(self) -> object:
        """The raw value that was caught."""
        return self._original_error

    @property
    def message(self) -> str:
        return self._message

    @property
    def timestamp(self) -> int:
        """Milliseconds since the Unix epoch, captured at construction."""
        return self._timestamp

    # Introspection

    @staticmethod
    def is_instance(value: object) -> typing.TypeGuard[TryCatchError]:
        """Nominal check: is value a TryCatchError."""
        return isinstance(value, TryCatchError)

    def is_instance_of(self, error_type: type | tuple[type, ...]) -> bool:
        """
        Check the root cause type without unwrapping.

        Example:
            if err.is_instance_of(ZeroDivisionError): ...
        """
        return isinstance(self._original_error, error_type)

    def get_original_property(self, key: str) -> typing.Any:
        """Property of the original error, or None. Never raises."""
        return safe_get(self._original_error, key)

    def get_original_stack(self) -> str | None:
        """Formatted traceback of the original exception, None for non-exceptions."""
        original = self._original_error
        if not isinstance(original, BaseException):
            return None
        try:
            return "".join(traceback.format_exception(original))
        except Exception as exc:
            log.debug("Traceback of %s not formattable: %r", type(original).__name__, exc)
            return None

    def to_detailed_string(self) -> str:
        """
        Multi-line report: when, what, and where it came from.

            [2025-01-01T00:00:00.000Z] TryCatchError: boom
            Original stack:
            Traceback (most recent call last): ...
        """
        lines = [f"[{_format_timestamp(self._timestamp)}] {self.name}: {self._message}"]
        stack = self.get_original_stack()
        if stack:
            lines.append("Original stack:")
            lines.append(stack.rstrip("\n"))
        return "\n".join(lines)

    # Serialization

    def serialize(self) -> dict[str, typing.Any]:
        """
        Plain dict ready for json.dumps.

        Exceptions are flattened to name/message/stack, other originals are
        deep-copied as JSON data or stringified if that fails.
        """
        data: dict[str, typing.Any] = {
            "name": self.name,
            "message": self._message,
            "timestamp": self._timestamp,
        }
        original = self._original_error
        if isinstance(original, BaseException):
            data["original_error"] = {
                "name": type(original).__name__,
                "message": _derive_message(original),
                "stack": self.get_original_stack(),
            }
        elif original is not None:
            data["original_error"] = deep_jsonable(original)
        return data

    @staticmethod
    def deserialize(data: Mapping[str, typing.Any]) -> TryCatchError:
        """
        Rebuild a TryCatchError from serialize() output.

        Message and timestamp survive. The original error does NOT: it comes
        back as a plain Exception built from the serialized original's string
        form.
        """
        message = data["message"]
        timestamp = data["timestamp"]
        if not isinstance(message, str):
            raise TypeError("serialized message must be a string")
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise TypeError("serialized timestamp must be an integer")

        raw_original = data.get("original_error")
        original = None if raw_original is None else Exception(safe_stringify(raw_original))

        return _restore(TryCatchError, original, message, timestamp)

    # Presentation

    def print(self, reporter: Reporter | None = None) -> None:
        """Report to_detailed_string() at error level."""
        resolve_reporter(reporter).error(self.to_detailed_string())

    def __str__(self) -> str:
        return f"[trycatch] {self.name}: {self._message}"

    def __repr__(self) -> str:
        return f"TryCatchError({self._original_error!r}, message={self._message!r})"


__all__ = ("DEFAULT_MESSAGE", "TRYCATCH_KIND", "TryCatchError")
