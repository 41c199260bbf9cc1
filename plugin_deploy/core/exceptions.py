"""Custom exceptions for the plugin deploy tool."""

from typing import Any


class PluginDeployError(Exception):
    """Base exception for the plugin deploy tool."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(PluginDeployError):
    """Bad bump directive, version or identifier."""

    pass


class PreconditionFailedError(PluginDeployError):
    """The local project or the remote account is not ready to deploy."""

    pass


class ConflictError(PluginDeployError):
    """A plugin with the same version is already deployed."""

    def __init__(self, url: str):
        super().__init__(
            f"You already have a plugin with the same version: {url}",
            {"url": url},
        )
        self.url = url


class ForbiddenError(PluginDeployError):
    """The account is not allowed to use the requested API."""

    pass


class UserRejectedError(PluginDeployError):
    """The user declined an interactive confirmation."""

    pass


class RemoteError(PluginDeployError):
    """A remote API call failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ):
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if url:
            details["url"] = url
        super().__init__(message, details)
        self.status_code = status_code
        self.url = url


class NotFoundError(RemoteError):
    """A remote resource does not exist."""

    pass
