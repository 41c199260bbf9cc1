"""Flex plugin deploy tool."""

__version__ = "0.1.0"
