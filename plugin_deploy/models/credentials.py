"""Credential models.

Credentials come in two shapes. Account credentials (``AC...`` username with
an auth token) resolve to a fetchable account resource; every other shape,
such as API keys, does not.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

ACCOUNT_SID_PREFIX = "AC"


class _BaseCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr


class AccountCredential(_BaseCredential):
    """Account sid and auth token."""

    kind: Literal["account_sid"] = "account_sid"


class ApiKeyCredential(_BaseCredential):
    """API key and secret, or any other non-account principal."""

    kind: Literal["api_key"] = "api_key"


Credential = Annotated[
    AccountCredential | ApiKeyCredential,
    Field(discriminator="kind"),
]


def credential_from(username: str, password: str) -> Credential:
    """Build the credential variant matching the principal's shape."""
    if username.startswith(ACCOUNT_SID_PREFIX):
        return AccountCredential(username=username, password=password)
    return ApiKeyCredential(username=username, password=password)
