from ._config import Config, get_config
from ._depreciation import deprecated
from ._main import Pipeable
from ._protocols import SupportsFlatMap, SupportsMap

__all__ = [
    "Config",
    "Pipeable",
    "SupportsFlatMap",
    "SupportsMap",
    "deprecated",
    "get_config",
]
