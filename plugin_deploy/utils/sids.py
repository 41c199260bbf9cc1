"""Helpers for Twilio resource identifiers."""

from enum import Enum

from plugin_deploy.core.exceptions import InvalidArgumentError


class SidPrefix(str, Enum):
    """Two-letter prefixes of resource identifiers."""

    ACCOUNT = "AC"
    SERVICE = "ZS"
    ENVIRONMENT = "ZE"
    BUILD = "ZB"


def is_sid_of_type(sid: str | None, prefix: SidPrefix) -> bool:
    """Check that a sid starts with the given prefix and has a body."""
    return bool(sid) and sid.startswith(prefix.value) and len(sid) > len(prefix.value)


def require_sid(sid: str | None, prefix: SidPrefix) -> str:
    """Return the sid or raise if it is not of the given type."""
    if not is_sid_of_type(sid, prefix):
        raise InvalidArgumentError(
            f"{sid} is not of type {prefix.value}",
            {"sid": sid, "expected_prefix": prefix.value},
        )
    return sid
