"""Wrapping combinator tests.

trycatch must never raise: every outcome of the wrapped callable, value or
exception, sync or async, comes back as data.
"""

from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, LazyCoroResult, Ok

from trycatch import (
    DEFAULT_MESSAGE,
    TryCatchError,
    call,
    is_trycatch_error,
    or_else,
    pair,
    to_pair,
    trycatch,
    unsafe,
    wrap,
)

pytestmark = pytest.mark.unit


class ServerError(Exception):
    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


def divide(a: float, b: float) -> float:
    if b == 0:
        raise ValueError("Division by zero")
    return a / b


class UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("no str for you")


# =============================================================================
# Success
# =============================================================================


@pytest.mark.asyncio
async def test_sync_function_success() -> None:
    value, err = await pair(trycatch(lambda x, y: x + y)(2, 3))

    assert value == 5
    assert err is None


@pytest.mark.asyncio
async def test_async_function_success() -> None:
    async def double(x: int) -> int:
        await asyncio.sleep(0.01)
        return x * 2

    value, err = await pair(trycatch(double)(5))

    assert value == 10
    assert err is None


@pytest.mark.asyncio
async def test_sync_function_returning_awaitable_is_awaited() -> None:
    def deferred(x: int):
        return asyncio.sleep(0, result=x + 1)

    value, err = await pair(trycatch(deferred)(1))

    assert value == 2
    assert err is None


@pytest.mark.asyncio
async def test_function_returning_lazy_coro_result_is_awaited() -> None:
    def lazy() -> LazyCoroResult[int, str]:
        return LazyCoroResult.pure(7)

    value, err = await pair(trycatch(lazy)())

    assert err is None
    match value:
        case Ok(inner):
            assert inner == 7
        case _:
            pytest.fail(f"expected Ok(7), got {value!r}")


@pytest.mark.asyncio
async def test_no_return_value() -> None:
    def side_effect() -> None:
        pass

    value, err = await pair(trycatch(side_effect)())

    assert value is None
    assert err is None


@pytest.mark.asyncio
async def test_passes_positional_and_keyword_arguments() -> None:
    def describe(a: str, b: int, *, flag: bool) -> str:
        return f"{a}-{b}-{flag}"

    value, _ = await pair(trycatch(describe)("test", 42, flag=True))

    assert value == "test-42-True"


@pytest.mark.asyncio
async def test_complex_arguments() -> None:
    users = [{"name": "Alice", "age": 25}, {"name": "Bob", "age": 30}]

    def older_than(items: list[dict], age: int) -> list[dict]:
        return [u for u in items if u["age"] > age]

    value, err = await pair(trycatch(older_than)(users, 26))

    assert value == [{"name": "Bob", "age": 30}]
    assert err is None


# =============================================================================
# Failure
# =============================================================================


@pytest.mark.asyncio
async def test_sync_function_that_raises() -> None:
    boom = RuntimeError("Sync error")

    def fail() -> None:
        raise boom

    value, err = await pair(trycatch(fail)())

    assert value is None
    assert isinstance(err, TryCatchError)
    assert err.message == "Sync error"
    assert err.original_error is boom


@pytest.mark.asyncio
async def test_async_function_that_raises() -> None:
    async def fail() -> None:
        await asyncio.sleep(0)
        raise RuntimeError("Async error")

    value, err = await pair(trycatch(fail)())

    assert value is None
    assert is_trycatch_error(err)
    assert err.message == "Async error"
    assert err.is_instance_of(RuntimeError)


@pytest.mark.asyncio
async def test_structured_exception_keeps_its_attributes() -> None:
    def fail() -> None:
        raise ServerError(500, "Server error")

    _, err = await pair(trycatch(fail)())

    assert err is not None
    assert err.message == "Server error"
    assert err.get_original_property("code") == 500


@pytest.mark.asyncio
async def test_exception_with_failing_str_is_still_captured() -> None:
    boom = UnprintableError()

    def fail() -> None:
        raise boom

    value, err = await pair(trycatch(fail)())

    assert value is None
    assert err is not None
    assert err.message == DEFAULT_MESSAGE
    assert err.original_error is boom


@pytest.mark.asyncio
async def test_failure_is_data_in_error_channel() -> None:
    result = await trycatch(divide)(1, 0)

    match result:
        case Error(err):
            assert isinstance(err, TryCatchError)
            assert err.is_instance_of(ValueError)
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")


@pytest.mark.asyncio
async def test_cancellation_is_not_captured() -> None:
    async def cancelled() -> None:
        raise asyncio.CancelledError

    with pytest.raises(asyncio.CancelledError):
        await trycatch(cancelled)()


# =============================================================================
# Laziness & metadata
# =============================================================================


@pytest.mark.asyncio
async def test_nothing_runs_until_awaited() -> None:
    calls: list[int] = []

    def record(x: int) -> int:
        calls.append(x)
        return x

    interp = trycatch(record)(1)
    assert calls == []

    await interp
    assert calls == [1]


@pytest.mark.asyncio
async def test_each_call_produces_fresh_outcome() -> None:
    def fail() -> None:
        raise ValueError("again")

    safe = trycatch(fail)
    _, first = await pair(safe())
    _, second = await pair(safe())

    assert first is not None and second is not None
    assert first is not second
    assert first.original_error is not second.original_error


def test_preserves_function_metadata() -> None:
    safe = trycatch(divide)

    assert safe.__name__ == "divide"
    assert safe.__wrapped__ is divide


@pytest.mark.asyncio
async def test_works_as_decorator() -> None:
    @trycatch
    async def fetch(user_id: int) -> dict:
        return {"id": user_id}

    value, err = await pair(fetch(42))

    assert value == {"id": 42}
    assert err is None


def test_wrap_is_alias() -> None:
    assert wrap is trycatch


# =============================================================================
# Lowering helpers
# =============================================================================


def test_to_pair_on_plain_results() -> None:
    err = TryCatchError(ValueError("x"))

    assert to_pair(Ok(1)) == (1, None)
    assert to_pair(Error(err)) == (None, err)


@pytest.mark.asyncio
async def test_call_lifts_at_call_site() -> None:
    ok_value, ok_err = await pair(call(int, "12"))
    bad_value, bad_err = await pair(call(int, "twelve"))

    assert (ok_value, ok_err) == (12, None)
    assert bad_value is None
    assert bad_err is not None and bad_err.is_instance_of(ValueError)


@pytest.mark.asyncio
async def test_unsafe_returns_value_or_raises_container() -> None:
    assert await unsafe(trycatch(divide)(9, 3)) == 3

    with pytest.raises(TryCatchError) as info:
        await unsafe(trycatch(divide)(9, 0))

    assert info.value.message == "Division by zero"
    assert isinstance(info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_or_else_falls_back_to_default() -> None:
    assert await or_else(trycatch(divide)(8, 2), default=0.0) == 4
    assert await or_else(trycatch(divide)(8, 0), default=0.0) == 0.0


# =============================================================================
# End-to-end
# =============================================================================


@pytest.mark.integration
@pytest.mark.asyncio
async def test_divide_scenario() -> None:
    safe_divide = trycatch(divide)

    assert await pair(safe_divide(10, 2)) == (5, None)

    value, err = await pair(safe_divide(10, 0))
    assert value is None
    assert err is not None
    assert err.message == "Division by zero"
    assert TryCatchError.is_instance(err)
