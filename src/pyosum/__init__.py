import logging

from . import either, option
from ._core import Config, Pipeable, SupportsFlatMap, SupportsMap, get_config
from ._pipe import flow, identity, pipe
from ._results import (
    NONE,
    Either,
    EitherUnwrapError,
    Left,
    NoneOption,
    Option,
    OptionUnwrapError,
    OptionValueError,
    Right,
    Some,
    catching,
    from_nullable,
    left,
    right,
    try_catch,
)
from ._task import Task, TaskEither
from ._traverse import (
    compact,
    first_some,
    separate,
    sequence_either,
    sequence_option,
    traverse_either,
    traverse_option,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "Either",
    "EitherUnwrapError",
    "Left",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "OptionValueError",
    "Pipeable",
    "Right",
    "Some",
    "SupportsFlatMap",
    "SupportsMap",
    "Task",
    "TaskEither",
    "catching",
    "compact",
    "either",
    "first_some",
    "flow",
    "from_nullable",
    "get_config",
    "identity",
    "left",
    "option",
    "pipe",
    "right",
    "separate",
    "sequence_either",
    "sequence_option",
    "traverse_either",
    "traverse_option",
    "try_catch",
]
