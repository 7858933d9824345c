"""Tests for the asynchronous Task and TaskEither."""

import asyncio

import pytest

import pyosum as ps


@pytest.mark.asyncio
async def test_task_is_lazy_and_runs_once() -> None:
    """Test that the wrapped computation only starts when awaited, and only once."""
    calls = 0

    async def _compute() -> int:
        nonlocal calls
        calls += 1
        await asyncio.sleep(0)
        return 10

    task = ps.Task(_compute)
    assert calls == 0
    first, second = await asyncio.gather(task.run(), task.run())
    assert (first, second) == (10, 10)
    assert await task == 10
    assert calls == 1


@pytest.mark.asyncio
async def test_task_survives_a_cancelled_caller() -> None:
    """Test that a caller timing out leaves the result available to the others."""

    async def _slow() -> int:
        await asyncio.sleep(0.05)
        return 1

    task = ps.Task(_slow)
    with pytest.raises(TimeoutError):
        await asyncio.wait_for(task.run(), 0.001)
    assert await task == 1


@pytest.mark.asyncio
async def test_task_map_and_flat_map() -> None:
    """Test task composition."""
    task = ps.Task.of(2).map(lambda x: x + 1).flat_map(lambda x: ps.Task.of(x * 10))
    assert await task.run() == 30


@pytest.mark.asyncio
async def test_task_continuation_runs_after_settlement() -> None:
    """Test that continuations start after the wrapped computation has finished."""
    events: list[str] = []

    async def _compute() -> int:
        events.append("start")
        await asyncio.sleep(0)
        events.append("end")
        return 1

    def _continue(x: int) -> int:
        events.append("map")
        return x

    await ps.Task(_compute).map(_continue)
    assert events == ["start", "end", "map"]


@pytest.mark.asyncio
async def test_task_either_try_catch() -> None:
    """Test that a raised exception becomes a Left."""

    async def _ok() -> int:
        return 5

    async def _fail() -> int:
        msg = "x"
        raise ValueError(msg)

    assert await ps.TaskEither.try_catch(_ok, str).run() == ps.Right(5)
    assert await ps.TaskEither.try_catch(_fail, str).run() == ps.Left("x")


@pytest.mark.asyncio
async def test_task_either_thunk_awaited_once() -> None:
    """Test that running the same TaskEither twice doesn't retry the computation."""
    calls = 0

    async def _flaky() -> int:
        nonlocal calls
        calls += 1
        msg = "transient"
        raise ConnectionError(msg)

    task = ps.TaskEither.try_catch(_flaky, str)
    assert await task.run() == ps.Left("transient")
    assert await task == ps.Left("transient")
    assert calls == 1


@pytest.mark.asyncio
async def test_task_either_cancellation_propagates() -> None:
    """Test that cancellation is not turned into a Left."""

    async def _cancelled() -> int:
        raise asyncio.CancelledError

    with pytest.raises(asyncio.CancelledError):
        await ps.TaskEither.try_catch(_cancelled, str).run()


@pytest.mark.asyncio
async def test_task_either_short_circuits() -> None:
    """Test that a Left skips every later step."""
    started: list[int] = []

    def _step(x: int) -> ps.TaskEither[str, int]:
        started.append(x)
        return ps.TaskEither.right(x + 1)

    result = await ps.TaskEither.left("boom").map(lambda x: x + 1).flat_map(_step)
    assert result == ps.Left("boom")
    assert started == []

    result = await ps.TaskEither.right(1).flat_map(_step).flat_map(_step)
    assert result == ps.Right(3)
    assert started == [1, 2]


@pytest.mark.asyncio
async def test_task_either_terminal_operations() -> None:
    """Test fold, get_or_else, map_left and or_else."""
    failed = ps.TaskEither.left("boom")
    assert await failed.fold(len, str) == 4
    assert await failed.get_or_else(0) == 0
    assert await failed.map_left(str.upper) == ps.Left("BOOM")
    assert await failed.or_else(lambda e: ps.TaskEither.right(len(e))) == ps.Right(4)
    assert await ps.TaskEither.from_either(ps.Right(1)).get_or_else(0) == 1
