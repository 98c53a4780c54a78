"""make_async tests.

Conversion is refused (returned, not raised) for callables that look async
or can't be classified; converted adapters propagate errors on await.
"""

from __future__ import annotations

import asyncio
import functools
import inspect

import pytest

from trycatch import ConversionError, DetectionPolicy, make_async, pair, trycatch

pytestmark = pytest.mark.unit


async def already_async() -> int:
    return 1


def answer() -> int:
    return 42


def add(a: int, b: int) -> int:
    return a + b


def fail() -> int:
    raise ValueError("sync failure")


def passthrough(fn):
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        return fn(*args, **kwargs)

    return wrapper


@passthrough
async def decorated_fetch() -> int:
    return 1


def make_coroutine():
    return asyncio.sleep(0)


def deferred():
    return asyncio.sleep(0, result=5)


# =============================================================================
# Refusal
# =============================================================================


def test_refuses_async_function(reporter) -> None:
    result = make_async(already_async, DetectionPolicy(warn=True, reporter=reporter))

    assert isinstance(result, ConversionError)
    assert "already asynchronous" in result.message
    assert reporter.errors == [str(result)]
    assert "make_async" in reporter.infos[0]


def test_refuses_uncertain_without_force(reporter) -> None:
    result = make_async(len, DetectionPolicy(warn=True, reporter=reporter))

    assert isinstance(result, ConversionError)
    assert "force_conversion=True" in result.message
    # fallback warning + refusal
    assert len(reporter.warnings) == 1
    assert len(reporter.errors) == 1


def test_refusal_is_returned_not_raised() -> None:
    result = make_async(already_async)

    assert isinstance(result, ConversionError)
    assert str(result).startswith("[trycatch] ConversionError: ")


def test_refuses_likely_async_by_source(reporter) -> None:
    result = make_async(decorated_fetch, DetectionPolicy(reporter=reporter))

    assert isinstance(result, ConversionError)
    assert "already asynchronous" in result.message
    assert reporter.errors == [str(result)]


def test_refuses_likely_async_by_invocation(reporter) -> None:
    result = make_async(make_coroutine, DetectionPolicy.probing(reporter=reporter))

    assert isinstance(result, ConversionError)
    assert "already asynchronous" in result.message
    assert reporter.warnings == []


def test_caller_policy_without_warn_still_warns(reporter) -> None:
    result = make_async(len, DetectionPolicy.strict(reporter=reporter))

    assert isinstance(result, ConversionError)
    assert len(reporter.warnings) == 1
    assert "treating it as sync" in reporter.warnings[0]


def test_explicit_warn_false_is_respected(reporter) -> None:
    result = make_async(len, DetectionPolicy.strict(warn=False, reporter=reporter))

    assert isinstance(result, ConversionError)
    assert reporter.warnings == []
    assert len(reporter.errors) == 1


# =============================================================================
# Conversion
# =============================================================================


@pytest.mark.asyncio
async def test_converts_probed_sync_function(reporter) -> None:
    converted = make_async(answer, DetectionPolicy(warn=True, probe=True, reporter=reporter))

    assert not isinstance(converted, ConversionError)
    assert inspect.iscoroutinefunction(converted)
    assert await converted() == answer()
    assert reporter.warnings == []
    assert reporter.errors == []


@pytest.mark.asyncio
async def test_forced_conversion_warns(reporter) -> None:
    converted = make_async(add, DetectionPolicy(reporter=reporter), force_conversion=True)

    assert not isinstance(converted, ConversionError)
    assert await converted(2, 3) == 5
    assert converted.__name__ == "add"
    assert any("Forcing conversion of add" in w for w in reporter.warnings)


@pytest.mark.asyncio
async def test_forced_conversion_of_builtin() -> None:
    converted = make_async(len, DetectionPolicy.strict(), force_conversion=True)

    assert not isinstance(converted, ConversionError)
    assert await converted([1, 2, 3]) == 3


@pytest.mark.asyncio
async def test_forced_conversion_awaits_returned_awaitable() -> None:
    converted = make_async(deferred, force_conversion=True)

    assert not isinstance(converted, ConversionError)
    assert await converted() == 5


@pytest.mark.asyncio
async def test_forced_conversion_of_class() -> None:
    class Service:
        async def fetch(self) -> int:
            return 1

    converted = make_async(Service, force_conversion=True)

    assert not isinstance(converted, ConversionError)
    assert isinstance(await converted(), Service)


@pytest.mark.asyncio
async def test_adapter_propagates_errors_on_await() -> None:
    converted = make_async(fail, force_conversion=True)
    assert not isinstance(converted, ConversionError)

    pending = converted()
    with pytest.raises(ValueError, match="sync failure"):
        await pending


@pytest.mark.integration
@pytest.mark.asyncio
async def test_composes_with_trycatch() -> None:
    converted = make_async(fail, force_conversion=True)
    assert not isinstance(converted, ConversionError)

    value, err = await pair(trycatch(converted)())

    assert value is None
    assert err is not None
    assert err.message == "sync failure"
