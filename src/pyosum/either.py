"""Point-free `Either` operators, meant to be used with `pyosum.pipe`.

Example:
```python
>>> from pyosum import either, pipe
>>> def parse(raw: str) -> either.Either[str, int]:
...     return either.try_catch(lambda: int(raw), lambda e: f"not a number: {raw!r}")
>>> pipe("21", parse, either.map(lambda x: x * 2), either.get_or_else(0))
42
>>> pipe("abc", parse, either.map(lambda x: x * 2), either.fold(str, str))
"not a number: 'abc'"

```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ._results import Either, Left, Right, catching, left, right, try_catch

if TYPE_CHECKING:
    from ._results import Option

__all__ = [
    "Either",
    "Left",
    "Right",
    "bimap",
    "catching",
    "flat_map",
    "fold",
    "from_option",
    "get_or_else",
    "is_left",
    "is_right",
    "left",
    "map",
    "map_left",
    "or_else",
    "right",
    "swap",
    "to_option",
    "try_catch",
    "unwrap_or_else",
]


def from_option[T, E](on_none: Callable[[], E]) -> Callable[[Option[T]], Either[E, T]]:
    """Build a converter from `Option` to `Either`, using **on_none** for the missing case.

    Example:
    ```python
    >>> from pyosum import either, Some, NONE
    >>> require = either.from_option(lambda: "missing")
    >>> require(Some(1))
    Right(1)
    >>> require(NONE)
    Left('missing')

    ```
    """

    def _(opt: Option[T]) -> Either[E, T]:
        return opt.to_either(on_none)

    return _


def map[E, A, B](f: Callable[[A], B]) -> Callable[[Either[E, A]], Either[E, B]]:  # noqa: A001
    """Point-free `Either.map`.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.map(len)(Left("boom"))
    Left('boom')

    ```
    """

    def _(value: Either[E, A]) -> Either[E, B]:
        return value.map(f)

    return _


def map_left[E, F, A](f: Callable[[E], F]) -> Callable[[Either[E, A]], Either[F, A]]:
    """Point-free `Either.map_left`.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.map_left(len)(Left("boom"))
    Left(4)

    ```
    """

    def _(value: Either[E, A]) -> Either[F, A]:
        return value.map_left(f)

    return _


def bimap[E, F, A, B](
    on_left: Callable[[E], F], on_right: Callable[[A], B]
) -> Callable[[Either[E, A]], Either[F, B]]:
    """Point-free `Either.bimap`.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.bimap(len, str)(Left("boom"))
    Left(4)

    ```
    """

    def _(value: Either[E, A]) -> Either[F, B]:
        return value.bimap(on_left, on_right)

    return _


def flat_map[E, A, B](
    f: Callable[[A], Either[E, B]],
) -> Callable[[Either[E, A]], Either[E, B]]:
    """Point-free `Either.flat_map`.

    Example:
    ```python
    >>> from pyosum import either, Right
    >>> positive = either.flat_map(lambda x: either.right(x) if x > 0 else either.left("negative"))
    >>> positive(Right(-1))
    Left('negative')

    ```
    """

    def _(value: Either[E, A]) -> Either[E, B]:
        return value.flat_map(f)

    return _


def or_else[E, F, A](
    f: Callable[[E], Either[F, A]],
) -> Callable[[Either[E, A]], Either[F, A]]:
    """Point-free `Either.or_else`.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.or_else(lambda e: either.right(0))(Left("boom"))
    Right(0)

    ```
    """

    def _(value: Either[E, A]) -> Either[F, A]:
        return value.or_else(f)

    return _


def fold[E, A, U](
    on_left: Callable[[E], U], on_right: Callable[[A], U]
) -> Callable[[Either[E, A]], U]:
    """Point-free `Either.fold`.

    Example:
    ```python
    >>> from pyosum import either, Right
    >>> either.fold(lambda e: -1, lambda x: x)(Right(3))
    3

    ```
    """

    def _(value: Either[E, A]) -> U:
        return value.fold(on_left, on_right)

    return _


def get_or_else[E, A](default: A) -> Callable[[Either[E, A]], A]:
    """Point-free `Either.get_or_else`.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.get_or_else(0)(Left("boom"))
    0

    ```
    """

    def _(value: Either[E, A]) -> A:
        return value.get_or_else(default)

    return _


def unwrap_or_else[E, A](f: Callable[[E], A]) -> Callable[[Either[E, A]], A]:
    """Point-free `Either.unwrap_or_else`.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.unwrap_or_else(len)(Left("boom"))
    4

    ```
    """

    def _(value: Either[E, A]) -> A:
        return value.unwrap_or_else(f)

    return _


def swap[E, A](value: Either[E, A]) -> Either[A, E]:
    """Point-free `Either.swap`; takes the either directly.

    Example:
    ```python
    >>> from pyosum import either, Right
    >>> either.swap(Right(1))
    Left(1)

    ```
    """
    return value.swap()


def to_option[E, A](value: Either[E, A]) -> Option[A]:
    """Point-free `Either.to_option`; takes the either directly.

    Example:
    ```python
    >>> from pyosum import either, pipe
    >>> pipe(either.right(1), either.to_option)
    Some(1)

    ```
    """
    return value.to_option()


def is_left(value: Either[Any, Any]) -> bool:
    """Point-free `Either.is_left`; takes the either directly.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.is_left(Left(1))
    True

    ```
    """
    return value.is_left()


def is_right(value: Either[Any, Any]) -> bool:
    """Point-free `Either.is_right`; takes the either directly.

    Example:
    ```python
    >>> from pyosum import either, Left
    >>> either.is_right(Left(1))
    False

    ```
    """
    return value.is_right()
