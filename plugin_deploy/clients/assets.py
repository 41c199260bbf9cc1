"""Serverless assets client."""

import asyncio
import mimetypes
from pathlib import Path

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.models.credentials import Credential
from plugin_deploy.models.runtime import AssetVersion
from plugin_deploy.utils.sids import SidPrefix, require_sid


class AssetClient(BaseClient):
    """Creates assets and uploads their content."""

    def __init__(
        self,
        credentials: Credential,
        service_sid: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        require_sid(service_sid, SidPrefix.SERVICE)
        super().__init__(credentials, f"{settings.serverless_base_url}/Services/{service_sid}", http_client)
        self.service_sid = service_sid
        self.upload_base_url = f"{settings.serverless_upload_base_url.rstrip('/')}/Services/{service_sid}"

    async def create(self, friendly_name: str) -> str:
        """Create an asset and return its sid."""
        data = await self.post("Assets", data={"FriendlyName": friendly_name})
        return data["sid"]

    async def upload(
        self,
        friendly_name: str,
        uri: str,
        local_path: str | Path,
        is_private: bool = False,
    ) -> AssetVersion:
        """Upload a local file as a new asset version served at ``uri``.

        Args:
            friendly_name: Name of the asset, usually the plugin name
            uri: Path the file is served from
            local_path: File to upload
            is_private: Whether the asset requires a signed request

        Returns:
            The created asset version
        """
        asset_sid = await self.create(friendly_name)
        path = Path(local_path)
        content = await asyncio.to_thread(path.read_bytes)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"

        data = await self.post(
            f"{self.upload_base_url}/Assets/{asset_sid}/Versions",
            data={
                "Path": uri,
                "Visibility": "private" if is_private else "public",
            },
            files={"Content": (path.name, content, content_type)},
        )
        version = AssetVersion.model_validate(data)
        self.logger.info("asset.uploaded", asset_sid=asset_sid, version_sid=version.sid, path=version.path)
        return version
