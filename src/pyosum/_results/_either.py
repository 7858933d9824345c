from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Never, cast

from .._core import Pipeable, deprecated, get_config
from ._option import NONE, Option

if TYPE_CHECKING:
    from typing import TypeIs

logger = logging.getLogger(__name__)


class EitherUnwrapError(RuntimeError): ...


class Either[E, A](ABC, Pipeable):
    """Outcome of a computation: `Right` holds a success value, `Left` holds the error.

    Failures are ordinary return values: once a chain produces a `Left`,
    every later `map` / `flat_map` returns that very same `Left`, so the
    original error is never dropped or replaced.
    """

    __slots__ = ()

    @abstractmethod
    def is_left(self) -> TypeIs[Left[E, A]]:  # type: ignore[misc]
        """
        Returns `True` if this is a `Left`.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Left("boom").is_left()
            True
            >>> Right(1).is_left()
            False

            ```
        """
        ...

    @abstractmethod
    def is_right(self) -> TypeIs[Right[E, A]]:  # type: ignore[misc]
        """
        Returns `True` if this is a `Right`.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(1).is_right()
            True
            >>> Left("boom").is_right()
            False

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> A:
        """
        Returns the `Right` value.

        Raises:
            EitherUnwrapError: If this is a `Left`.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(3).unwrap()
            3
            >>> Left("boom").unwrap()
            Traceback (most recent call last):
                ...
            pyosum._results._either.EitherUnwrapError: called `unwrap` on Left: 'boom'

            ```
        """
        ...

    @abstractmethod
    def unwrap_left(self) -> E:
        """
        Returns the `Left` value.

        Raises:
            EitherUnwrapError: If this is a `Right`.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Left("boom").unwrap_left()
            'boom'
            >>> Right(3).unwrap_left()
            Traceback (most recent call last):
                ...
            pyosum._results._either.EitherUnwrapError: called `unwrap_left` on Right: 3

            ```
        """
        ...

    def expect(self, msg: str) -> A:
        """
        Returns the `Right` value, or raises `EitherUnwrapError` with a custom message.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(3).expect("need a number")
            3
            >>> Left("boom").expect("need a number")
            Traceback (most recent call last):
                ...
            pyosum._results._either.EitherUnwrapError: need a number: 'boom'

            ```
        """
        if self.is_right():
            return self.unwrap()
        raise EitherUnwrapError(f"{msg}: {self.unwrap_left()!r}")

    def get_or_else(self, default: A) -> A:
        """
        Returns the `Right` value or a provided default.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(3).get_or_else(0)
            3
            >>> Left("boom").get_or_else(0)
            0

            ```
        """
        return self.unwrap() if self.is_right() else default

    def unwrap_or_else(self, f: Callable[[E], A]) -> A:
        """
        Returns the `Right` value or computes one from the error.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(3).unwrap_or_else(len)
            3
            >>> Left("boom").unwrap_or_else(len)
            4

            ```
        """
        return self.unwrap() if self.is_right() else f(self.unwrap_left())

    def map[B](self, f: Callable[[A], B]) -> Either[E, B]:
        """
        Transforms the `Right` value, passing a `Left` through unchanged.

        **f** is never called on a `Left`, and exceptions it raises are not caught.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(2).map(lambda x: x + 1)
            Right(3)
            >>> Left("boom").map(lambda x: x + 1)
            Left('boom')

            ```
        """
        if self.is_right():
            return Right(f(self.unwrap()))
        return cast(Either[E, B], self)

    def map_left[F](self, f: Callable[[E], F]) -> Either[F, A]:
        """
        Transforms the `Left` value, passing a `Right` through unchanged.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Left("boom").map_left(str.upper)
            Left('BOOM')
            >>> Right(1).map_left(str.upper)
            Right(1)

            ```
        """
        if self.is_left():
            return Left(f(self.unwrap_left()))
        return cast(Either[F, A], self)

    def bimap[F, B](
        self, on_left: Callable[[E], F], on_right: Callable[[A], B]
    ) -> Either[F, B]:
        """
        Transforms whichever side is populated.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(2).bimap(len, lambda x: x * 2)
            Right(4)
            >>> Left("boom").bimap(len, lambda x: x * 2)
            Left(4)

            ```
        """
        match self:
            case Right(value):
                return Right(on_right(value))
            case Left(error):
                return Left(on_left(error))
            case _:
                raise RuntimeError("unreachable")

    def flat_map[B](self, f: Callable[[A], Either[E, B]]) -> Either[E, B]:
        """
        Chains a fallible step: calls **f** with the `Right` value, or returns the `Left` as is.

        The first `Left` encountered short-circuits every later step.

        Example:
            ```python
            >>> from pyosum import Either, Left, Right
            >>> def half(x: int) -> Either[str, int]:
            ...     return Right(x // 2) if x % 2 == 0 else Left(f"{x} is odd")
            >>> Right(8).flat_map(half).flat_map(half)
            Right(2)
            >>> Right(6).flat_map(half).flat_map(half)
            Left('3 is odd')

            ```
        """
        if self.is_right():
            return f(self.unwrap())
        return cast(Either[E, B], self)

    @deprecated("Either.flat_map")
    def chain[B](self, f: Callable[[A], Either[E, B]]) -> Either[E, B]:
        """Deprecated alias of `flat_map`."""
        return self.flat_map(f)

    def or_else[F](self, f: Callable[[E], Either[F, A]]) -> Either[F, A]:
        """
        Recovers from a `Left` by calling **f** with the error; a `Right` is returned as is.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Left("boom").or_else(lambda e: Right(len(e)))
            Right(4)
            >>> Right(1).or_else(lambda e: Right(0))
            Right(1)

            ```
        """
        if self.is_left():
            return f(self.unwrap_left())
        return cast(Either[F, A], self)

    def fold[U](self, on_left: Callable[[E], U], on_right: Callable[[A], U]) -> U:
        """
        Extracts a plain value by handling both variants explicitly.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(2).fold(lambda e: f"error: {e}", lambda x: f"ok: {x}")
            'ok: 2'
            >>> Left("boom").fold(lambda e: f"error: {e}", lambda x: f"ok: {x}")
            'error: boom'

            ```
        """
        match self:
            case Right(value):
                return on_right(value)
            case Left(error):
                return on_left(error)
            case _:
                raise RuntimeError("unreachable")

    def swap(self) -> Either[A, E]:
        """
        Exchanges the two sides.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(1).swap()
            Left(1)
            >>> Left("boom").swap()
            Right('boom')

            ```
        """
        if self.is_right():
            return Left(self.unwrap())
        return Right(self.unwrap_left())

    def to_option(self) -> Option[A]:
        """
        Keeps the `Right` value as `Some`, dropping the error of a `Left`.

        A `Right(None)` becomes `NONE`.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Right(1).to_option()
            Some(1)
            >>> Left("boom").to_option()
            NONE

            ```
        """
        if self.is_right():
            return Option.from_nullable(self.unwrap())
        return NONE

    def left_option(self) -> Option[E]:
        """
        Keeps the `Left` value as `Some`.

        Example:
            ```python
            >>> from pyosum import Left, Right
            >>> Left("boom").left_option()
            Some('boom')
            >>> Right(1).left_option()
            NONE

            ```
        """
        if self.is_left():
            return Option.from_nullable(self.unwrap_left())
        return NONE


@dataclass(slots=True, frozen=True)
class Left[E, A](Either[E, A]):
    """Either variant holding an error."""

    error: E

    def __repr__(self) -> str:
        return f"Left({get_config().value_repr(self.error)})"

    def is_left(self) -> TypeIs[Left[E, A]]:  # type: ignore[misc]
        return True

    def is_right(self) -> TypeIs[Right[E, A]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> Never:
        raise EitherUnwrapError(f"called `unwrap` on Left: {self.error!r}")

    def unwrap_left(self) -> E:
        return self.error


@dataclass(slots=True, frozen=True)
class Right[E, A](Either[E, A]):
    """Either variant holding a success value."""

    value: A

    def __repr__(self) -> str:
        return f"Right({get_config().value_repr(self.value)})"

    def is_left(self) -> TypeIs[Left[E, A]]:  # type: ignore[misc]
        return False

    def is_right(self) -> TypeIs[Right[E, A]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> A:
        return self.value

    def unwrap_left(self) -> Never:
        raise EitherUnwrapError(f"called `unwrap_left` on Right: {self.value!r}")


def right[E, A](a: A) -> Either[E, A]:
    """
    Builds a successful `Either`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.right(5)
    Right(5)

    ```
    """
    return Right(a)


def left[E, A](e: E) -> Either[E, A]:
    """
    Builds a failed `Either`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.left("boom")
    Left('boom')

    ```
    """
    return Left(e)


def try_catch[E, A](
    thunk: Callable[[], A], on_error: Callable[[Exception], E]
) -> Either[E, A]:
    """Runs **thunk**, turning a raised exception into a `Left`.

    This is the boundary between exception-raising code and `Either`.
    Only `Exception` subclasses are converted: `KeyboardInterrupt`, `SystemExit` and the like propagate.
    An exception raised by **on_error** itself also propagates.

    Args:
        thunk (Callable[[], A]): Zero-argument callable to run.
        on_error (Callable[[Exception], E]): Converts the raised exception into the error value.

    Returns:
        Either[E, A]: `Right(thunk())`, or `Left(on_error(exc))`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.try_catch(lambda: 5, lambda e: e)
    Right(5)
    >>> ps.try_catch(lambda: int("x"), lambda e: type(e).__name__)
    Left('ValueError')

    ```
    """
    try:
        result = thunk()
    except Exception as exc:
        if get_config().log_caught:
            logger.debug(
                "try_catch converted %s to Left", type(exc).__name__, exc_info=exc
            )
        return Left(on_error(exc))
    return Right(result)


def catching[E](
    on_error: Callable[[Exception], E],
) -> Callable[[Callable[..., object]], Callable[..., Either[E, object]]]:
    """Decorator returning an `Either` instead of raising, using `try_catch`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> @ps.catching(str)
    ... def parse(raw: str) -> int:
    ...     return int(raw)
    >>> parse("12")
    Right(12)
    >>> parse("twelve")
    Left("invalid literal for int() with base 10: 'twelve'")

    ```
    """

    def decorator(func: Callable[..., object]) -> Callable[..., Either[E, object]]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> Either[E, object]:
            return try_catch(lambda: func(*args, **kwargs), on_error)

        return wrapper

    return decorator
