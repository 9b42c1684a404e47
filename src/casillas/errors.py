"""Exception classes for Casillas.

The token rewrite itself never raises: malformed checkbox markup is plain
list text. Errors are limited to wiring the plugin into a host pipeline.
"""

from __future__ import annotations


class CasillasError(Exception):
    """Base exception for all Casillas errors.

    Catch this to handle any failure raised while installing task list
    support. The rewrite itself never raises.
    """


class PluginError(CasillasError):
    """Error in plugin installation.

    Raised when the host markdown-it pipeline cannot accept the plugin,
    e.g. because the core rule it anchors to has been removed.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
