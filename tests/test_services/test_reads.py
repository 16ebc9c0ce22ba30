"""Tests for read capture and defaulting."""

import pytest

from services.reads import ReadResult, attempt_read, describe_failure
from stores import MalformedResult, QueryFailed


async def _value(v):
    return v


async def _raise(exc):
    raise exc


def test_value_or_returns_value_on_success():
    assert ReadResult.success(7).value_or(0) == 7


def test_value_or_returns_default_on_failure():
    assert ReadResult.failure(QueryFailed("x")).value_or(0) == 0


def test_successful_zero_is_not_a_failure():
    result = ReadResult.success(0)
    assert result.ok
    assert describe_failure(result) == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [0, 3, 12.5])
async def test_attempt_read_success(value):
    result = await attempt_read(_value(value))
    assert result.ok
    assert result.value == value


@pytest.mark.asyncio
async def test_attempt_read_captures_exception():
    error = QueryFailed("no such table: game_results")
    result = await attempt_read(_raise(error))
    assert not result.ok
    assert result.error is error
    assert describe_failure(result) == "QueryFailed: no such table: game_results"


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, -5, "3", False, float("nan"), float("inf"), float("-inf")])
async def test_attempt_read_rejects_unusable_values(value):
    result = await attempt_read(_value(value))
    assert not result.ok
    assert isinstance(result.error, MalformedResult)


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [3.5, 2.0])
async def test_integral_read_rejects_floats(value):
    result = await attempt_read(_value(value), integral=True)
    assert not result.ok
    assert isinstance(result.error, MalformedResult)


@pytest.mark.asyncio
async def test_integral_read_accepts_int():
    result = await attempt_read(_value(4), integral=True)
    assert result.ok
    assert result.value == 4


@pytest.mark.asyncio
async def test_sum_read_rejects_ints_beyond_float_range():
    result = await attempt_read(_value(10 ** 400))
    assert not result.ok
