from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never

from .._core import Pipeable, deprecated, get_config

if TYPE_CHECKING:
    from typing import TypeIs

    from ._either import Either


class OptionUnwrapError(RuntimeError): ...


class OptionValueError(ValueError): ...


class Option[T](ABC, Pipeable):
    """Presence (`Some`) or absence (`NONE`) of a value, without using `None` as a sentinel.

    An `Option` is built once at a boundary, usually with `Option.from_nullable`,
    then transformed with `map` / `flat_map` and finally consumed with `fold` or `get_or_else`.

    Every transformation returns a new `Option`; once a chain reaches `NONE`, the
    functions passed to later steps are never called.
    """

    __slots__ = ()

    @staticmethod
    def from_nullable[V](value: V | None) -> Option[V]:
        """
        Wraps a possibly-`None` value.

        This is the only constructor which accepts a bare `None`.

        Args:
            value: The value to wrap.

        Returns:
            `NONE` if **value** is `None`, otherwise `Some(value)`.

        Example:
            ```python
            >>> from pyosum import Option
            >>> Option.from_nullable(4)
            Some(4)
            >>> Option.from_nullable(None)
            NONE
            >>> Option.from_nullable(0)
            Some(0)

            ```
        """
        if value is None:
            return NONE
        return Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some(2).is_some()
            True
            >>> NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is `NONE`.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Prefer `fold` or `get_or_else`, which can't fail.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyosum._results._option.OptionUnwrapError: called `unwrap` on a `NONE`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises with a provided message.

        Args:
            msg: The message to include in the exception if the option is `NONE`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some("value").expect("fruits are healthy")
            'value'
            >>> NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            pyosum._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `NONE`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `NONE`)"
        raise OptionUnwrapError(msg)

    def get_or_else(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `NONE`.

        Example:
            ```python
            >>> from pyosum import Option
            >>> Option.from_nullable(None).get_or_else(7)
            7
            >>> Option.from_nullable(4).get_or_else(7)
            4

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from **f**.

        **f** is only called when the option is `NONE`.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value,
        leaving `NONE` untouched.

        Exceptions raised by **f** are not caught.
        If **f** returns `None`, `OptionValueError` is raised: use `flat_map` with `Option.from_nullable` for steps which may yield nothing.
        The composition law `opt.map(f).map(g) == opt.map(lambda x: g(f(x)))` only holds when **f** never returns `None`.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            `Some(f(value))` if `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls **f** with the contained value and returns its result, or returns `NONE`.

        Lets **f** decide to short-circuit the rest of the chain by returning `NONE`.

        Example:
            ```python
            >>> from pyosum import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).flat_map(sq).flat_map(sq)
            Some(16)
            >>> Some(2).flat_map(sq).flat_map(nope)
            NONE
            >>> NONE.flat_map(sq).flat_map(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    @deprecated("Option.flat_map")
    def chain[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Deprecated alias of `flat_map`."""
        return self.flat_map(f)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns the option if it is `Some` and **predicate** holds for its value, otherwise `NONE`.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some(4).filter(lambda x: x % 2 == 0)
            Some(4)
            >>> Some(3).filter(lambda x: x % 2 == 0)
            NONE
            >>> NONE.filter(lambda x: True)
            NONE

            ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE

    def fold[U](self, on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:
        """
        Extracts a plain value by handling both variants explicitly.

        Args:
            on_none: Called with no argument if the option is `NONE`.
            on_some: Called with the contained value if the option is `Some`.

        Returns:
            The result of the called function.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some(3).fold(lambda: "empty", lambda x: f"value {x}")
            'value 3'
            >>> NONE.fold(lambda: "empty", lambda x: f"value {x}")
            'empty'

            ```
        """
        match self:
            case Some(value):
                return on_some(value)
            case NoneOption():
                return on_none()
            case _:
                raise RuntimeError("unreachable")

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls **f** and returns its result.

        Example:
            ```python
            >>> from pyosum import Some, NONE, Option
            >>> def vikings() -> Option[str]:
            ...     return Some("vikings")
            >>> Some("barbarians").or_else(vikings)
            Some('barbarians')
            >>> NONE.or_else(vikings)
            Some('vikings')

            ```
        """
        return self if self.is_some() else f()

    def to_nullable(self) -> T | None:
        """
        Returns the contained value, or `None`.

        Mirror of `from_nullable`, for handing a value back to code that expects `None` for absence.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some(1).to_nullable()
            1
            >>> print(NONE.to_nullable())
            None

            ```
        """
        return self.unwrap() if self.is_some() else None

    def to_either[E](self, on_none: Callable[[], E]) -> Either[E, T]:
        """
        Converts the option into an `Either`, using **on_none** to build the `Left` value.

        Example:
            ```python
            >>> from pyosum import Some, NONE
            >>> Some(1).to_either(lambda: "missing")
            Right(1)
            >>> NONE.to_either(lambda: "missing")
            Left('missing')

            ```
        """
        from ._either import Left, Right

        if self.is_some():
            return Right(self.unwrap())
        return Left(on_none())


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant holding a value.

    `None` is refused: use `Option.from_nullable` to wrap a value which may be `None`.

    Example:
    ```python
    >>> from pyosum import Some
    >>> Some(42)
    Some(42)
    >>> Some(None)
    Traceback (most recent call last):
        ...
    pyosum._results._option.OptionValueError: `Some` can't hold `None`, use `Option.from_nullable` instead

    ```
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            msg = "`Some` can't hold `None`, use `Option.from_nullable` instead"
            raise OptionValueError(msg)

    def __repr__(self) -> str:
        return f"Some({get_config().value_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Use the `NONE` singleton rather than building new instances.
    """

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `NONE`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""

from_nullable = Option.from_nullable
