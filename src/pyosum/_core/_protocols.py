from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsMap[T](Protocol):
    """Anything exposing a `map` that transforms a wrapped value."""

    def map[U](self, f: Callable[[T], U]) -> SupportsMap[U]: ...


@runtime_checkable
class SupportsFlatMap[T](SupportsMap[T], Protocol):
    """A `SupportsMap` that can also chain computations returning the same wrapper."""

    def flat_map[U](self, f: Callable[[T], Any]) -> SupportsFlatMap[U]: ...
