"""Serverless deployments client."""

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.models.credentials import Credential
from plugin_deploy.utils.sids import SidPrefix, require_sid


class DeploymentClient(BaseClient):
    """Points an environment at a build."""

    def __init__(
        self,
        credentials: Credential,
        service_sid: str,
        environment_sid: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        require_sid(service_sid, SidPrefix.SERVICE)
        require_sid(environment_sid, SidPrefix.ENVIRONMENT)
        super().__init__(
            credentials,
            f"{settings.serverless_base_url}/Services/{service_sid}/Environments/{environment_sid}",
            http_client,
        )

    async def create(self, build_sid: str) -> dict:
        """Create a new deployment of the given build."""
        require_sid(build_sid, SidPrefix.BUILD)
        return await self.post("Deployments", data={"BuildSid": build_sid})
