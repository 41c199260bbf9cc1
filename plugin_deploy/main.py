"""Command line entry point."""

import asyncio
from typing import Annotated

import typer

from plugin_deploy import __version__
from plugin_deploy.config import settings
from plugin_deploy.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    PluginDeployError,
    PreconditionFailedError,
    RemoteError,
    UserRejectedError,
)
from plugin_deploy.core.orchestrator import get_orchestrator
from plugin_deploy.models.deploy import DeployOptions, DeployResult
from plugin_deploy.utils import prints
from plugin_deploy.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

# Exit codes per error kind; anything else exits with 1
EXIT_CODES: dict[type[PluginDeployError], int] = {
    InvalidArgumentError: 2,
    PreconditionFailedError: 3,
    ConflictError: 4,
    ForbiddenError: 5,
    UserRejectedError: 6,
    RemoteError: 7,
}

app = typer.Typer(
    name="flex-plugin-deploy",
    help="Deploy Flex plugins to Twilio Assets",
    no_args_is_help=True,
)


def exit_code_for(error: PluginDeployError) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


@app.callback()
def main() -> None:
    """Deploy Flex plugins to Twilio Assets."""
    configure_logging()
    logger.debug("cli.starting", version=__version__)


@app.command()
def deploy(
    bump: Annotated[
        str | None,
        typer.Argument(help="Version bump: major, minor, patch, version or overwrite"),
    ] = None,
    version: Annotated[
        str | None,
        typer.Argument(help="Explicit version, used with the 'version' bump"),
    ] = None,
    public: Annotated[bool, typer.Option("--public", help="Upload the plugin as a public asset")] = False,
    overwrite: Annotated[
        bool, typer.Option("--overwrite", help="Overwrite an existing plugin with the same version")
    ] = False,
    disallow_versioning: Annotated[
        bool,
        typer.Option("--disallow-versioning", help="Always deploy as version 0.0.0, overwriting in place"),
    ] = False,
    pilot_plugins_api: Annotated[
        bool, typer.Option("--pilot-plugins-api", help="Deploy through the Plugins API preview")
    ] = False,
    project_dir: Annotated[str, typer.Option(help="Plugin project directory")] = ".",
) -> None:
    """Build a new version of the plugin runtime and deploy it."""
    options = DeployOptions(
        is_public=public,
        overwrite=overwrite or disallow_versioning,
        disallow_versioning=disallow_versioning,
        is_plugins_pilot=pilot_plugins_api,
    )

    try:
        result = asyncio.run(_deploy(project_dir, bump, version, options))
    except PluginDeployError as e:
        logger.debug("cli.deploy_failed", error=e.message, details=e.details, kind=type(e).__name__)
        prints.error(e.message)
        raise typer.Exit(code=exit_code_for(e)) from e

    prints.info(f"Deployed version {result.next_version}: {result.plugin_url}")


async def _deploy(
    project_dir: str,
    bump: str | None,
    version: str | None,
    options: DeployOptions,
) -> DeployResult:
    orchestrator = get_orchestrator(project_dir, settings)
    try:
        return await orchestrator.deploy(bump, version, options)
    finally:
        await orchestrator.close()


if __name__ == "__main__":
    app()
