"""Extension layer — plugin system via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from mintcompat.plugins.hookspecs import hookimpl
from mintcompat.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
