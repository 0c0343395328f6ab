from . import config
from . import cookies
from . import day
from . import examples
from . import exceptions
from . import models
from . import runner
from . import selection
from . import stats
from . import store
from . import types
from . import utils
from .config import RunConfig
from .day import Day
from .day import Registry
from .exceptions import AocrunError
from .runner import main
from .runner import Runner
from .store import InputStore
from .version import __version__

__all__ = [
    "AocrunError",
    "Day",
    "InputStore",
    "Registry",
    "RunConfig",
    "Runner",
    "__version__",
    "config",
    "cookies",
    "day",
    "examples",
    "exceptions",
    "main",
    "models",
    "runner",
    "selection",
    "stats",
    "store",
    "types",
    "utils",
]
