"""Flex configuration client."""

from typing import Any

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.models.credentials import Credential
from plugin_deploy.utils.sids import SidPrefix, require_sid


class ConfigurationClient(BaseClient):
    """Reads and updates the Flex configuration of the account."""

    def __init__(
        self,
        credentials: Credential,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(credentials, settings.flex_api_base_url, http_client)

    async def get_configuration(self) -> dict[str, Any]:
        return await self.get("Configuration") or {}

    async def get_flex_ui_version(self) -> str:
        config = await self.get_configuration()
        return config.get("ui_version") or ""

    async def get_ui_dependencies(self) -> dict[str, str]:
        config = await self.get_configuration()
        return config.get("ui_dependencies") or {}

    async def register_sid(self, service_sid: str) -> None:
        """Add the service to the serverless services Flex loads plugins from."""
        require_sid(service_sid, SidPrefix.SERVICE)
        config = await self.get_configuration()
        sids: list[str] = config.get("serverless_service_sids") or []

        if service_sid in sids:
            self.logger.debug("configuration.already_registered", service_sid=service_sid)
            return

        await self.post(
            "Configuration",
            json={
                "account_sid": config.get("account_sid"),
                "serverless_service_sids": [*sids, service_sid],
            },
        )
        self.logger.info("configuration.registered", service_sid=service_sid)
