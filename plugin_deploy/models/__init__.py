"""Data models for the plugin deploy tool."""

from plugin_deploy.models.credentials import (
    AccountCredential,
    ApiKeyCredential,
    Credential,
    credential_from,
)
from plugin_deploy.models.deploy import (
    BuildData,
    BumpDirective,
    DeployOptions,
    DeployResult,
    ResolvedVersion,
)
from plugin_deploy.models.runtime import (
    Account,
    AssetVersion,
    Build,
    Dependency,
    Environment,
    FunctionVersion,
    Runtime,
    Service,
    Version,
)

__all__ = [
    # Credential models
    "AccountCredential",
    "ApiKeyCredential",
    "Credential",
    "credential_from",
    # Deploy models
    "BuildData",
    "BumpDirective",
    "DeployOptions",
    "DeployResult",
    "ResolvedVersion",
    # Runtime models
    "Account",
    "AssetVersion",
    "Build",
    "Dependency",
    "Environment",
    "FunctionVersion",
    "Runtime",
    "Service",
    "Version",
]
