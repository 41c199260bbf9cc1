"""Core deploy functionality."""

from plugin_deploy.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    PluginDeployError,
    PreconditionFailedError,
    RemoteError,
    UserRejectedError,
)

__all__ = [
    "PluginDeployError",
    "InvalidArgumentError",
    "PreconditionFailedError",
    "ConflictError",
    "ForbiddenError",
    "UserRejectedError",
    "RemoteError",
    "NotFoundError",
]
