"""Utility functions for the plugin deploy tool."""

from plugin_deploy.utils.logging import configure_logging, get_logger
from plugin_deploy.utils.progress import progress

__all__ = [
    "configure_logging",
    "get_logger",
    "progress",
]
