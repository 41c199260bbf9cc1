"""Serverless builds client."""

import asyncio

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.core.exceptions import RemoteError
from plugin_deploy.models.credentials import Credential
from plugin_deploy.models.deploy import BuildData
from plugin_deploy.models.runtime import Build
from plugin_deploy.utils.sids import SidPrefix, require_sid


class BuildClient(BaseClient):
    """Reads and creates builds of a service."""

    def __init__(
        self,
        credentials: Credential,
        service_sid: str,
        http_client: httpx.AsyncClient | None = None,
        poll_interval: float | None = None,
        poll_timeout: float | None = None,
    ):
        require_sid(service_sid, SidPrefix.SERVICE)
        super().__init__(credentials, f"{settings.serverless_base_url}/Services/{service_sid}", http_client)
        self.poll_interval = settings.build_poll_interval if poll_interval is None else poll_interval
        self.poll_timeout = settings.build_poll_timeout if poll_timeout is None else poll_timeout

    async def get(self, build_sid: str) -> Build:  # type: ignore[override]
        require_sid(build_sid, SidPrefix.BUILD)
        data = await super().get(f"Builds/{build_sid}")
        return Build.model_validate(data)

    async def create(self, data: BuildData) -> Build:
        """Create a build and wait until it has completed.

        Raises:
            RemoteError: If the build fails or does not complete in time
        """
        response = await self.post("Builds", data=data.to_form())
        build = Build.model_validate(response)
        self.logger.info("build.created", build_sid=build.sid, status=build.status)

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.poll_timeout
        while build.status == "building":
            if loop.time() >= deadline:
                raise RemoteError(
                    f"Timed out after {self.poll_timeout:.0f}s waiting for build {build.sid} to complete",
                    url=self.url(f"Builds/{build.sid}"),
                )
            await asyncio.sleep(self.poll_interval)
            build = await self.get(build.sid)

        if build.status == "failed":
            raise RemoteError(
                f"Build {build.sid} failed",
                url=self.url(f"Builds/{build.sid}"),
            )

        self.logger.info("build.completed", build_sid=build.sid)
        return build
