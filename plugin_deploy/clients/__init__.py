"""HTTP clients for the Twilio REST APIs."""

from plugin_deploy.clients.accounts import AccountsClient
from plugin_deploy.clients.assets import AssetClient
from plugin_deploy.clients.base import BaseClient
from plugin_deploy.clients.builds import BuildClient
from plugin_deploy.clients.configuration import ConfigurationClient
from plugin_deploy.clients.deployments import DeploymentClient
from plugin_deploy.clients.environments import EnvironmentClient
from plugin_deploy.clients.plugins_api import PluginsApiClient
from plugin_deploy.clients.runtime import RuntimeClient
from plugin_deploy.clients.services import ServiceClient

__all__ = [
    "AccountsClient",
    "AssetClient",
    "BaseClient",
    "BuildClient",
    "ConfigurationClient",
    "DeploymentClient",
    "EnvironmentClient",
    "PluginsApiClient",
    "RuntimeClient",
    "ServiceClient",
]
