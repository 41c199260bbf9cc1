"""Services for the plugin deploy tool."""

from plugin_deploy.services.project import PluginProject

__all__ = ["PluginProject"]
