"""Extension layer — host hook points via pluggy.

Discovery: entry_points (pip-installed) in the ``fluentlink.plugins`` group.
INVARIANT: Plugin loading failures are warnings, never errors.
"""

from fluentlink.plugins.adapter import LocalisationPlugin
from fluentlink.plugins.manager import PluginManager

__all__ = ["LocalisationPlugin", "PluginManager"]
