from collections.abc import Mapping
from pprint import pformat
from typing import Any

import more_itertools as mit


def dict_repr(
    v: Mapping[Any, Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    """Render a mapping with `pprint`, keeping at most **max_items** entries.

    Example:
    ```python
    >>> from pyosum._core._format import dict_repr
    >>> dict_repr({"a": 1, "b": 2, "c": 3}, max_items=2)
    "{'a': 1, 'b': 2}..."

    ```
    """
    truncated = dict(mit.take(max_items, v.items()))
    suffix = "..." if len(v) > max_items else ""
    return pformat(truncated, depth=depth, width=width, compact=compact) + suffix


def seq_repr(v: list[Any] | tuple[Any, ...], max_items: int = 20) -> str:
    """Render a list or tuple, keeping at most **max_items** elements.

    Example:
    ```python
    >>> from pyosum._core._format import seq_repr
    >>> seq_repr((1, 2, 3, 4), max_items=2)
    '(1, 2, ...)'

    ```
    """
    if len(v) <= max_items:
        return repr(v)
    opening, closing = ("[", "]") if isinstance(v, list) else ("(", ")")
    head = ", ".join(repr(x) for x in mit.take(max_items, v))
    return f"{opening}{head}, ...{closing}"
