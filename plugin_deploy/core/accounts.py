"""Resolve the account owning a deploy."""

from plugin_deploy.clients.accounts import AccountsClient
from plugin_deploy.models.credentials import Credential
from plugin_deploy.models.runtime import Account, Runtime


async def get_account(
    runtime: Runtime,
    credentials: Credential,
    accounts_client: AccountsClient,
) -> Account:
    """Get the account of the runtime's service.

    Only account credentials can read the account resource; for any other
    credential the account is synthesized from the service.
    """
    if credentials.kind == "account_sid":
        return await accounts_client.get(runtime.service.account_sid)

    return Account(sid=runtime.service.account_sid)
