"""Flex UI compatibility checks for plugins using unbundled React."""

from typing import Awaitable, Callable

from plugin_deploy.core.exceptions import PreconditionFailedError, UserRejectedError
from plugin_deploy.core.versioning import coerce, satisfies
from plugin_deploy.utils import prints
from plugin_deploy.utils.logging import get_logger

logger = get_logger(__name__)

# First Flex UI release able to load unbundled React
MIN_FLEX_UI_VERSION = "1.19.0"

ConfirmFn = Callable[[str, bool], Awaitable[bool]]
InstalledVersionFn = Callable[[str], str | None]


async def verify_flex_ui_configuration(
    flex_ui_version: str,
    dependencies: dict[str, str],
    allow_override: bool,
    *,
    installed_version: InstalledVersionFn,
    confirm: ConfirmFn,
) -> None:
    """Validate the Flex UI version and React versions of the account.

    Args:
        flex_ui_version: UI version (or range) configured on the account
        dependencies: UI dependencies configured on the account
        allow_override: Whether the plugin is deployed with unbundled React
        installed_version: Returns the locally installed version of a package
        confirm: Asks the user a yes/no question

    Raises:
        PreconditionFailedError: If the account cannot run unbundled React
        UserRejectedError: If the user declines to deploy with mismatched React
    """
    if not allow_override:
        return

    coerced = coerce(flex_ui_version)
    ui_supports = satisfies(MIN_FLEX_UI_VERSION, flex_ui_version) or (
        coerced is not None and satisfies(coerced, f">={MIN_FLEX_UI_VERSION}")
    )
    if not ui_supports:
        raise PreconditionFailedError(
            f"We detected that your account is using Flex UI version {flex_ui_version} which is incompatible "
            "with unbundled React. Please visit https://flex.twilio.com/admin/versioning and update to "
            "version 1.19 or above.",
            {"flex_ui_version": flex_ui_version},
        )

    if not dependencies.get("react") or not dependencies.get("react-dom"):
        raise PreconditionFailedError(
            "To use unbundled React, you need to set the React version from the Developer page",
            {"dependencies": dependencies},
        )

    react_version = installed_version("react")
    react_dom_version = installed_version("react-dom")
    react_supported = satisfies(react_version, dependencies["react"])
    react_dom_supported = satisfies(react_dom_version, dependencies["react-dom"])
    if react_supported and react_dom_supported:
        return

    logger.warning(
        "compatibility.react_mismatch",
        local_react=react_version,
        local_react_dom=react_dom_version,
        remote_react=dependencies["react"],
        remote_react_dom=dependencies["react-dom"],
    )
    prints.newline()
    prints.warning(
        f"The React version {react_version} installed locally is incompatible "
        f"with the React version {dependencies['react']} installed on your Flex project."
    )
    prints.info(
        "Change your local React version or visit https://flex.twilio.com/admin/developers to "
        "change the React version installed on your Flex project."
    )

    answer = await confirm("Do you still want to continue deploying?", False)
    if not answer:
        prints.newline()
        raise UserRejectedError(
            "User rejected confirmation to deploy with mismatched React version.",
            {"local_react": react_version, "remote_react": dependencies["react"]},
        )
