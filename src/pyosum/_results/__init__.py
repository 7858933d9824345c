from ._either import (
    Either,
    EitherUnwrapError,
    Left,
    Right,
    catching,
    left,
    right,
    try_catch,
)
from ._option import (
    NONE,
    NoneOption,
    Option,
    OptionUnwrapError,
    OptionValueError,
    Some,
    from_nullable,
)

__all__ = [
    "NONE",
    "Either",
    "EitherUnwrapError",
    "Left",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "OptionValueError",
    "Right",
    "Some",
    "catching",
    "from_nullable",
    "left",
    "right",
    "try_catch",
]
