import warnings
from collections.abc import Callable
from functools import wraps


def deprecated[**P, R](alternative: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Mark a function as deprecated in favour of **alternative**.

    Every call emits a `DeprecationWarning` naming the replacement, then runs the function.

    Example:
    ```python
    >>> import warnings
    >>> from pyosum._core import deprecated
    >>> @deprecated("new_add")
    ... def old_add(a: int, b: int) -> int:
    ...     return a + b
    >>> with warnings.catch_warnings(record=True) as caught:
    ...     warnings.simplefilter("always")
    ...     old_add(1, 2)
    3
    >>> str(caught[0].message)
    '`old_add` is deprecated, use `new_add` instead'

    ```
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        msg = f"`{func.__qualname__}` is deprecated, use `{alternative}` instead"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(msg, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        return wrapper

    return decorator
