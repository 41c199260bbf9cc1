"""Fetch a snapshot of the serverless runtime."""

import httpx

from plugin_deploy.clients.builds import BuildClient
from plugin_deploy.clients.environments import EnvironmentClient
from plugin_deploy.clients.services import ServiceClient
from plugin_deploy.config import settings
from plugin_deploy.models.credentials import Credential
from plugin_deploy.models.runtime import Runtime


class RuntimeClient:
    """Reads the service, environment and build plugins are deployed to."""

    def __init__(
        self,
        credentials: Credential,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.credentials = credentials
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=settings.http_timeout)

    async def close(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def get_runtime(self) -> Runtime:
        """Fetch the current runtime; never cached."""
        service = await ServiceClient(self.credentials, self.http_client).get_default()

        environment = await EnvironmentClient(
            self.credentials, service.sid, self.http_client
        ).get_default()
        if not environment or not environment.build_sid:
            return Runtime(service=service, environment=environment)

        build = await BuildClient(self.credentials, service.sid, self.http_client).get(
            environment.build_sid
        )
        return Runtime(service=service, environment=environment, build=build)
