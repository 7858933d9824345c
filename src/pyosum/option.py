"""Point-free `Option` operators, meant to be used with `pyosum.pipe`.

Each operator takes its arguments up front and returns a one-argument function expecting the `Option` to act on.

Example:
```python
>>> from pyosum import option, pipe
>>> pipe(
...     option.from_nullable(3),
...     option.map(lambda x: x + 1),
...     option.get_or_else(0),
... )
4
>>> pipe(option.from_nullable(None), option.map(lambda x: x + 1), option.get_or_else(0))
0

```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ._results import NONE, NoneOption, Option, Some

if TYPE_CHECKING:
    from ._results import Either

__all__ = [
    "NONE",
    "NoneOption",
    "Option",
    "Some",
    "filter",
    "flat_map",
    "fold",
    "from_nullable",
    "from_predicate",
    "get_or_else",
    "is_none",
    "is_some",
    "map",
    "none",
    "or_else",
    "some",
    "to_either",
    "to_nullable",
    "unwrap_or_else",
]

from_nullable = Option.from_nullable

none: Option[Any] = NONE


def some[T](value: T) -> Option[T]:
    """Wrap a value which is known not to be `None`.

    Example:
    ```python
    >>> from pyosum import option
    >>> option.some(1)
    Some(1)

    ```
    """
    return Some(value)


def from_predicate[T](predicate: Callable[[T], bool]) -> Callable[[T], Option[T]]:
    """Build a constructor keeping only the values for which **predicate** holds.

    Example:
    ```python
    >>> from pyosum import option
    >>> positive = option.from_predicate(lambda x: x > 0)
    >>> positive(3)
    Some(3)
    >>> positive(-3)
    NONE

    ```
    """

    def _(value: T) -> Option[T]:
        return Some(value) if predicate(value) else NONE

    return _


def map[T, U](f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:  # noqa: A001
    """Point-free `Option.map`.

    Example:
    ```python
    >>> from pyosum import option, Some
    >>> option.map(str)(Some(1))
    Some('1')

    ```
    """

    def _(opt: Option[T]) -> Option[U]:
        return opt.map(f)

    return _


def flat_map[T, U](f: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    """Point-free `Option.flat_map`.

    Example:
    ```python
    >>> from pyosum import option, Some
    >>> first_char = option.flat_map(lambda s: option.from_nullable(s[0] if s else None))
    >>> first_char(Some("abc"))
    Some('a')
    >>> first_char(Some(""))
    NONE

    ```
    """

    def _(opt: Option[T]) -> Option[U]:
        return opt.flat_map(f)

    return _


def filter[T](predicate: Callable[[T], bool]) -> Callable[[Option[T]], Option[T]]:  # noqa: A001
    """Point-free `Option.filter`.

    Example:
    ```python
    >>> from pyosum import option, Some
    >>> option.filter(bool)(Some(""))
    NONE

    ```
    """

    def _(opt: Option[T]) -> Option[T]:
        return opt.filter(predicate)

    return _


def fold[T, U](
    on_none: Callable[[], U], on_some: Callable[[T], U]
) -> Callable[[Option[T]], U]:
    """Point-free `Option.fold`.

    Example:
    ```python
    >>> from pyosum import option, NONE
    >>> option.fold(lambda: "n/a", str)(NONE)
    'n/a'

    ```
    """

    def _(opt: Option[T]) -> U:
        return opt.fold(on_none, on_some)

    return _


def get_or_else[T](default: T) -> Callable[[Option[T]], T]:
    """Point-free `Option.get_or_else`.

    Example:
    ```python
    >>> from pyosum import option, NONE
    >>> option.get_or_else(7)(NONE)
    7

    ```
    """

    def _(opt: Option[T]) -> T:
        return opt.get_or_else(default)

    return _


def unwrap_or_else[T](f: Callable[[], T]) -> Callable[[Option[T]], T]:
    """Point-free `Option.unwrap_or_else`.

    Example:
    ```python
    >>> from pyosum import option, NONE
    >>> option.unwrap_or_else(list)(NONE)
    []

    ```
    """

    def _(opt: Option[T]) -> T:
        return opt.unwrap_or_else(f)

    return _


def or_else[T](f: Callable[[], Option[T]]) -> Callable[[Option[T]], Option[T]]:
    """Point-free `Option.or_else`.

    Example:
    ```python
    >>> from pyosum import option, NONE
    >>> option.or_else(lambda: option.some("fallback"))(NONE)
    Some('fallback')

    ```
    """

    def _(opt: Option[T]) -> Option[T]:
        return opt.or_else(f)

    return _


def to_either[T, E](on_none: Callable[[], E]) -> Callable[[Option[T]], Either[E, T]]:
    """Point-free `Option.to_either`.

    Example:
    ```python
    >>> from pyosum import option, NONE
    >>> option.to_either(lambda: "missing")(NONE)
    Left('missing')

    ```
    """

    def _(opt: Option[T]) -> Either[E, T]:
        return opt.to_either(on_none)

    return _


def to_nullable[T](opt: Option[T]) -> T | None:
    """Point-free `Option.to_nullable`; takes the option directly.

    Example:
    ```python
    >>> from pyosum import option, pipe
    >>> pipe(option.from_nullable("x"), option.to_nullable)
    'x'

    ```
    """
    return opt.to_nullable()


def is_some(opt: Option[Any]) -> bool:
    """Point-free `Option.is_some`; takes the option directly.

    Example:
    ```python
    >>> from pyosum import option, NONE
    >>> [o for o in [option.some(1), NONE] if option.is_some(o)]
    [Some(1)]

    ```
    """
    return opt.is_some()


def is_none(opt: Option[Any]) -> bool:
    """Point-free `Option.is_none`; takes the option directly.

    Example:
    ```python
    >>> from pyosum import option, NONE
    >>> option.is_none(NONE)
    True

    ```
    """
    return opt.is_none()
