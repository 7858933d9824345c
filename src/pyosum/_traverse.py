from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import more_itertools as mit

from ._results import NONE, Either, Option, Right, Some


def sequence_option[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Turn an iterable of `Option` into an `Option` of list.

    Returns `NONE` as soon as a `NONE` is met; the rest of **options** is not consumed.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.sequence_option([ps.Some(1), ps.Some(2)])
    Some([1, 2])
    >>> ps.sequence_option([ps.Some(1), ps.NONE])
    NONE
    >>> ps.sequence_option([])
    Some([])

    ```
    """
    values: list[T] = []
    for opt in options:
        if opt.is_none():
            return NONE
        values.append(opt.unwrap())
    return Some(values)


def traverse_option[T, U](
    items: Iterable[T], f: Callable[[T], Option[U]]
) -> Option[list[U]]:
    """Apply **f** to each item, collecting the results if they are all `Some`.

    **f** is not called on the items following the first `NONE`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ages = {"ann": 31, "bob": 42}
    >>> ps.traverse_option(["ann", "bob"], lambda n: ps.from_nullable(ages.get(n)))
    Some([31, 42])
    >>> ps.traverse_option(["ann", "eve"], lambda n: ps.from_nullable(ages.get(n)))
    NONE

    ```
    """
    return sequence_option(map(f, items))


def sequence_either[E, A](eithers: Iterable[Either[E, A]]) -> Either[E, list[A]]:
    """Turn an iterable of `Either` into an `Either` of list.

    The first `Left` met is returned unchanged and the rest of **eithers** is not consumed.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.sequence_either([ps.Right(1), ps.Right(2)])
    Right([1, 2])
    >>> ps.sequence_either([ps.Right(1), ps.Left("a"), ps.Left("b")])
    Left('a')

    ```
    """
    values: list[A] = []
    for value in eithers:
        if value.is_left():
            return value  # type: ignore[return-value]
        values.append(value.unwrap())
    return Right(values)


def traverse_either[T, E, A](
    items: Iterable[T], f: Callable[[T], Either[E, A]]
) -> Either[E, list[A]]:
    """Apply the fallible **f** to each item, stopping at the first `Left`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> to_int = ps.catching(lambda e: str(e))(int)
    >>> ps.traverse_either(["1", "2"], to_int)
    Right([1, 2])
    >>> ps.traverse_either(["1", "x", "y"], to_int)
    Left("invalid literal for int() with base 10: 'x'")

    ```
    """
    return sequence_either(map(f, items))


def compact[T](options: Iterable[Option[T]]) -> list[T]:
    """Keep the values of the `Some` options, dropping every `NONE`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.compact([ps.Some(1), ps.NONE, ps.Some(3)])
    [1, 3]

    ```
    """
    return [opt.unwrap() for opt in options if opt.is_some()]


def separate[E, A](eithers: Iterable[Either[E, A]]) -> tuple[list[E], list[A]]:
    """Split an iterable of `Either` into the `Left` values and the `Right` values.

    Order is preserved within each side.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.separate([ps.Left(1), ps.Right(2), ps.Left(3)])
    ([1, 3], [2])

    ```
    """
    lefts, rights = mit.partition(_is_right, eithers)
    return (
        [value.unwrap_left() for value in lefts],
        [value.unwrap() for value in rights],
    )


def first_some[T](options: Iterable[Option[T]]) -> Option[T]:
    """Return the first `Some` of **options**, or `NONE` if there is none.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.first_some([ps.NONE, ps.Some("b"), ps.Some("c")])
    Some('b')
    >>> ps.first_some([])
    NONE

    ```
    """
    return mit.first((opt for opt in options if opt.is_some()), NONE)


def _is_right(value: Either[Any, Any]) -> bool:
    return value.is_right()
