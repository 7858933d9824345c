from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from ._format import dict_repr, seq_repr


@dataclass(slots=True)
class Config:
    """Process-wide settings for pyosum.

    Attributes:
        repr_max_items (int): Maximum number of items shown when a payload is a container.
        repr_depth (int): Nesting depth used when rendering mapping payloads.
        repr_width (int): Line width used when rendering mapping payloads.
        log_caught (bool): Whether `try_catch` logs the exceptions it converts to `Left`.

    Example:
    ```python
    >>> import pyosum as ps
    >>> cfg = ps.get_config()
    >>> cfg.repr_max_items = 3
    >>> ps.Some(list(range(10)))
    Some([0, 1, 2, ...])
    >>> cfg.reset()
    >>> cfg.repr_max_items
    20

    ```
    """

    repr_max_items: int = 20
    repr_depth: int = 3
    repr_width: int = 80
    log_caught: bool = True

    def value_repr(self, value: object) -> str:
        """Render a payload for use inside a variant's `__repr__`."""
        match value:
            case Mapping():
                return dict_repr(
                    value,
                    max_items=self.repr_max_items,
                    depth=self.repr_depth,
                    width=self.repr_width,
                )
            case list() | tuple():
                return seq_repr(value, max_items=self.repr_max_items)
            case _:
                return repr(value)

    def reset(self) -> None:
        """Restore every setting to its default value."""
        defaults = Config()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance.

    Example:
    ```python
    >>> import pyosum as ps
    >>> ps.get_config() is ps.get_config()
    True

    ```
    """
    return _CONFIG
