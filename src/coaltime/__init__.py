"""Top-level for coaltime."""

import importlib.metadata as importlib_metadata
import sys

from . import data, mixins, tools
from . import tools as tl
from .setup_utilities import parse_config, setup

package_name = "coaltime"
__version__ = importlib_metadata.version(package_name)

sys.modules.update({f"{__name__}.{m}": globals()[m] for m in ["tl"]})
del sys

__all__ = ["data", "mixins", "tl", "tools", "parse_config", "setup"]
