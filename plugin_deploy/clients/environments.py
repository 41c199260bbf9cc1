"""Serverless environments client."""

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.models.credentials import Credential
from plugin_deploy.models.runtime import Environment
from plugin_deploy.utils.sids import SidPrefix, require_sid


class EnvironmentClient(BaseClient):
    """Reads the environments of a service."""

    def __init__(
        self,
        credentials: Credential,
        service_sid: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        require_sid(service_sid, SidPrefix.SERVICE)
        super().__init__(credentials, f"{settings.serverless_base_url}/Services/{service_sid}", http_client)

    async def list_environments(self) -> list[Environment]:
        items = await self.list_all("Environments", "environments")
        return [Environment.model_validate(item) for item in items]

    async def get_default(self) -> Environment | None:
        """Get the environment plugins are served from, if one exists."""
        environments = await self.list_environments()
        return environments[0] if environments else None
