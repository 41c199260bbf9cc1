"""Base HTTP client for the Twilio REST APIs."""

from typing import Any

import httpx

from plugin_deploy.config import settings
from plugin_deploy.core.exceptions import NotFoundError, RemoteError
from plugin_deploy.models.credentials import Credential
from plugin_deploy.utils.logging import get_logger


class BaseClient:
    """Authenticated JSON client rooted at a base URL.

    Clients may share one ``httpx.AsyncClient``; credentials are sent with
    every request so the shared client carries no auth of its own.
    """

    def __init__(
        self,
        credentials: Credential,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=settings.http_timeout)
        self.logger = get_logger(f"client.{type(self).__name__}")

    @property
    def auth(self) -> tuple[str, str]:
        return (self.credentials.username, self.credentials.password.get_secret_value())

    def url(self, path: str) -> str:
        """Resolve a path against the base URL; absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def close(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(
        self,
        path: str,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        return await self._request("POST", path, data=data, files=files, json=json)

    async def list_all(self, path: str, key: str) -> list[dict[str, Any]]:
        """Fetch every page of a list resource."""
        items: list[dict[str, Any]] = []
        next_url: str | None = path
        while next_url:
            page = await self.get(next_url)
            items.extend(page.get(key, []))
            next_url = (page.get("meta") or {}).get("next_page_url")
        return items

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self.url(path)
        kwargs = {k: v for k, v in kwargs.items() if v is not None}
        self.logger.debug("http.request", method=method, url=url)

        try:
            response = await self._http.request(method, url, auth=self.auth, **kwargs)
        except httpx.HTTPError as e:
            raise RemoteError(f"Request to {url} failed: {e}", url=url) from e

        if response.is_error:
            message = _error_message(response)
            self.logger.debug(
                "http.error",
                method=method,
                url=url,
                status_code=response.status_code,
                error=message,
            )
            if response.status_code == 404:
                raise NotFoundError(message, status_code=404, url=url)
            raise RemoteError(message, status_code=response.status_code, url=url)

        if not response.content:
            return None
        return response.json()


def _error_message(response: httpx.Response) -> str:
    """Extract the remote error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"{response.status_code} {response.reason_phrase}: {response.text[:500]}".strip()
