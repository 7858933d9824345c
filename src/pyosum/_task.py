from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Generator
from typing import Any

from ._core import Pipeable, get_config
from ._results import Either, Left, Right

logger = logging.getLogger(__name__)


class Task[T](Pipeable):
    """A lazy asynchronous computation.

    Wraps a zero-argument function returning an awaitable.
    Nothing happens until the task is awaited (or `run`), and the wrapped function is called at most once:
    every later `await` shares the result of the first run.

    Continuations added with `map` / `flat_map` only start once the wrapped computation has settled.

    Args:
        thunk (Callable[[], Awaitable[T]]): Function starting the computation.

    Example:
    ```python
    >>> import asyncio
    >>> import pyosum as ps
    >>> async def fetch() -> int:
    ...     return 20
    >>> asyncio.run(ps.Task(fetch).map(lambda x: x + 1).run())
    21

    ```
    """

    __slots__ = ("_future", "_thunk")

    def __init__(self, thunk: Callable[[], Awaitable[T]]) -> None:
        self._thunk = thunk
        self._future: asyncio.Future[T] | None = None

    def __repr__(self) -> str:
        state = "pending" if self._future is None else "started"
        return f"Task({state})"

    def __await__(self) -> Generator[Any, None, T]:
        return self.run().__await__()

    @staticmethod
    def of[V](value: V) -> Task[V]:
        """Wrap an already known value.

        Example:
        ```python
        >>> import asyncio
        >>> import pyosum as ps
        >>> asyncio.run(ps.Task.of(3).run())
        3

        ```
        """

        async def _() -> V:
            return value

        return Task(_)

    async def run(self) -> T:
        """Start the computation if needed, and wait for its result.

        Cancelling one caller doesn't cancel the shared computation.
        """
        if self._future is None:
            self._future = asyncio.ensure_future(self._thunk())
        return await asyncio.shield(self._future)

    def map[U](self, f: Callable[[T], U]) -> Task[U]:
        """Transform the result of the task once it is available.

        Example:
        ```python
        >>> import asyncio
        >>> import pyosum as ps
        >>> asyncio.run(ps.Task.of("abc").map(len).run())
        3

        ```
        """

        async def _() -> U:
            return f(await self.run())

        return Task(_)

    def flat_map[U](self, f: Callable[[T], Task[U]]) -> Task[U]:
        """Chain another task depending on the result of this one.

        Example:
        ```python
        >>> import asyncio
        >>> import pyosum as ps
        >>> asyncio.run(ps.Task.of(2).flat_map(lambda x: ps.Task.of(x * 10)).run())
        20

        ```
        """

        async def _() -> U:
            return await f(await self.run()).run()

        return Task(_)


class TaskEither[E, A](Pipeable):
    """A lazy asynchronous computation which may fail, producing an `Either`.

    Behaves like `Either` once awaited: a `Left` short-circuits every later step,
    and exceptions are only converted to `Left` by `TaskEither.try_catch`.
    There is no retry: a failed computation is reported as is.

    Example:
    ```python
    >>> import asyncio
    >>> import pyosum as ps
    >>> async def load(key: str) -> str:
    ...     return {"a": "alpha"}[key]
    >>> def get(key: str) -> ps.TaskEither[str, str]:
    ...     return ps.TaskEither.try_catch(lambda: load(key), lambda e: f"missing {e}")
    >>> asyncio.run(get("a").map(str.upper).run())
    Right('ALPHA')
    >>> asyncio.run(get("b").map(str.upper).run())
    Left("missing 'b'")

    ```
    """

    __slots__ = ("_task",)

    def __init__(self, thunk: Callable[[], Awaitable[Either[E, A]]]) -> None:
        self._task = Task(thunk)

    def __repr__(self) -> str:
        return f"TaskEither({self._task!r})"

    def __await__(self) -> Generator[Any, None, Either[E, A]]:
        return self.run().__await__()

    @staticmethod
    def from_either[F, B](value: Either[F, B]) -> TaskEither[F, B]:
        """Lift an already computed `Either`."""

        async def _() -> Either[F, B]:
            return value

        return TaskEither(_)

    @staticmethod
    def right[F, B](value: B) -> TaskEither[F, B]:
        """Build a successful `TaskEither`.

        Example:
        ```python
        >>> import asyncio
        >>> import pyosum as ps
        >>> asyncio.run(ps.TaskEither.right(1).run())
        Right(1)

        ```
        """
        return TaskEither.from_either(Right(value))

    @staticmethod
    def left[F, B](error: F) -> TaskEither[F, B]:
        """Build a failed `TaskEither`.

        Example:
        ```python
        >>> import asyncio
        >>> import pyosum as ps
        >>> asyncio.run(ps.TaskEither.left("boom").map(len).run())
        Left('boom')

        ```
        """
        return TaskEither.from_either(Left(error))

    @staticmethod
    def try_catch[F, B](
        thunk: Callable[[], Awaitable[B]], on_error: Callable[[Exception], F]
    ) -> TaskEither[F, B]:
        """Asynchronous counterpart of `pyosum.try_catch`.

        Awaits **thunk()**; an `Exception` raised while doing so becomes `Left(on_error(exc))`.
        Cancellation and other `BaseException` subclasses propagate.
        """

        async def _() -> Either[F, B]:
            try:
                result = await thunk()
            except Exception as exc:
                if get_config().log_caught:
                    logger.debug(
                        "TaskEither.try_catch converted %s to Left",
                        type(exc).__name__,
                        exc_info=exc,
                    )
                return Left(on_error(exc))
            return Right(result)

        return TaskEither(_)

    async def run(self) -> Either[E, A]:
        """Start the computation if needed, and wait for its `Either` result."""
        return await self._task.run()

    def map[B](self, f: Callable[[A], B]) -> TaskEither[E, B]:
        """Transform the `Right` value once available."""

        async def _() -> Either[E, B]:
            return (await self.run()).map(f)

        return TaskEither(_)

    def map_left[F](self, f: Callable[[E], F]) -> TaskEither[F, A]:
        """Transform the `Left` value once available."""

        async def _() -> Either[F, A]:
            return (await self.run()).map_left(f)

        return TaskEither(_)

    def flat_map[B](self, f: Callable[[A], TaskEither[E, B]]) -> TaskEither[E, B]:
        """Chain another fallible asynchronous step.

        **f** is not called, and its task not started, when this task produces a `Left`.

        Example:
        ```python
        >>> import asyncio
        >>> import pyosum as ps
        >>> def check(x: int) -> ps.TaskEither[str, int]:
        ...     return ps.TaskEither.right(x) if x > 0 else ps.TaskEither.left("not positive")
        >>> asyncio.run(ps.TaskEither.right(5).flat_map(check).run())
        Right(5)
        >>> asyncio.run(ps.TaskEither.right(-5).flat_map(check).run())
        Left('not positive')

        ```
        """

        async def _() -> Either[E, B]:
            value = await self.run()
            if value.is_left():
                return value  # type: ignore[return-value]
            return await f(value.unwrap()).run()

        return TaskEither(_)

    def or_else[F](self, f: Callable[[E], TaskEither[F, A]]) -> TaskEither[F, A]:
        """Recover from a `Left` with another asynchronous step."""

        async def _() -> Either[F, A]:
            value = await self.run()
            if value.is_right():
                return value  # type: ignore[return-value]
            return await f(value.unwrap_left()).run()

        return TaskEither(_)

    def fold[U](self, on_left: Callable[[E], U], on_right: Callable[[A], U]) -> Task[U]:
        """Extract a plain value from either side, as a `Task`.

        Example:
        ```python
        >>> import asyncio
        >>> import pyosum as ps
        >>> asyncio.run(ps.TaskEither.left("boom").fold(len, str).run())
        4

        ```
        """

        async def _() -> U:
            return (await self.run()).fold(on_left, on_right)

        return Task(_)

    def get_or_else(self, default: A) -> Task[A]:
        """Extract the `Right` value, or **default**, as a `Task`."""

        async def _() -> A:
            return (await self.run()).get_or_else(default)

        return Task(_)
