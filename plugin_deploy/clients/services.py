"""Serverless services client."""

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.core.exceptions import NotFoundError
from plugin_deploy.models.credentials import Credential
from plugin_deploy.models.runtime import Service


class ServiceClient(BaseClient):
    """Reads the serverless services of the account."""

    DEFAULT_UNIQUE_NAME = "default"

    def __init__(
        self,
        credentials: Credential,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(credentials, settings.serverless_base_url, http_client)

    async def list_services(self) -> list[Service]:
        items = await self.list_all("Services", "services")
        return [Service.model_validate(item) for item in items]

    async def get_default(self) -> Service:
        """Get the service plugins are deployed to."""
        for service in await self.list_services():
            if service.unique_name == self.DEFAULT_UNIQUE_NAME:
                return service

        raise NotFoundError(
            "No default Runtime service was found. Please make sure Flex is provisioned on this account.",
            url=self.url("Services"),
        )
