"""Accounts client."""

import httpx

from plugin_deploy.clients.base import BaseClient
from plugin_deploy.config import settings
from plugin_deploy.models.credentials import Credential
from plugin_deploy.models.runtime import Account
from plugin_deploy.utils.sids import SidPrefix, require_sid


class AccountsClient(BaseClient):
    """Reads account resources."""

    def __init__(
        self,
        credentials: Credential,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(credentials, settings.accounts_base_url, http_client)

    async def get(self, account_sid: str) -> Account:  # type: ignore[override]
        require_sid(account_sid, SidPrefix.ACCOUNT)
        data = await super().get(f"Accounts/{account_sid}.json")
        return Account.model_validate(data)
