from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import cytoolz as cz


@overload
def pipe[A](value: A, /) -> A: ...
@overload
def pipe[A, B](value: A, f1: Callable[[A], B], /) -> B: ...
@overload
def pipe[A, B, C](value: A, f1: Callable[[A], B], f2: Callable[[B], C], /) -> C: ...
@overload
def pipe[A, B, C, D](
    value: A, f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D], /
) -> D: ...
@overload
def pipe[A, B, C, D, E](
    value: A,
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    /,
) -> E: ...
@overload
def pipe(value: Any, /, *funcs: Callable[[Any], Any]) -> Any: ...
def pipe(value: Any, /, *funcs: Callable[[Any], Any]) -> Any:
    """Pass **value** through **funcs**, from left to right.

    `pipe(x, f, g, h)` is `h(g(f(x)))`. Nothing is deferred: every function is called once, in order.

    Args:
        value (Any): The initial value.
        *funcs (Callable[[Any], Any]): Functions to apply in sequence.

    Returns:
        Any: The result of the last function, or **value** when no function is given.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.pipe(3, lambda x: x + 1, lambda x: x * 2)
    8
    >>> ps.pipe("unchanged")
    'unchanged'

    ```
    """
    return cz.functoolz.pipe(value, *funcs)


def flow(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose **funcs** from left to right into a single function.

    `flow(f, g)(x)` is `pipe(x, f, g)`. With no argument, returns the identity function.

    Example:
    ```python
    >>> import pyosum as ps
    >>> inc_then_double = ps.flow(lambda x: x + 1, lambda x: x * 2)
    >>> inc_then_double(3)
    8
    >>> ps.flow()(42)
    42

    ```
    """
    return cz.functoolz.compose_left(*funcs)


def identity[T](x: T) -> T:
    """Return **x** unchanged.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.Some(1).map(ps.identity)
    Some(1)

    ```
    """
    return x
