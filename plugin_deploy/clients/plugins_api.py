"""Flex Plugins API client."""

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.core.exceptions import RemoteError
from plugin_deploy.models.credentials import Credential


class PluginsApiClient(BaseClient):
    """Client for the Plugins API preview."""

    def __init__(
        self,
        credentials: Credential,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(credentials, self.get_base_url(), http_client)

    @staticmethod
    def get_base_url() -> str:
        return f"{settings.flex_api_base_url.rstrip('/')}/PluginService"

    async def has_flag(self) -> bool:
        """Check whether the account has access to the Plugins API."""
        try:
            await self.get("Plugins")
        except RemoteError as e:
            self.logger.debug("plugins_api.no_access", error=e.message)
            return False
        return True
