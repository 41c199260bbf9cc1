"""Deployment Orchestrator.

Turns a version bump and a local plugin build into a live deployment on the
serverless runtime.
"""

import asyncio

import httpx

from plugin_deploy.clients.accounts import AccountsClient
from plugin_deploy.clients.assets import AssetClient
from plugin_deploy.clients.builds import BuildClient
from plugin_deploy.clients.configuration import ConfigurationClient
from plugin_deploy.clients.deployments import DeploymentClient
from plugin_deploy.clients.plugins_api import PluginsApiClient
from plugin_deploy.clients.runtime import RuntimeClient
from plugin_deploy.config import Settings, get_settings
from plugin_deploy.core.accounts import get_account
from plugin_deploy.core.compatibility import ConfirmFn, verify_flex_ui_configuration
from plugin_deploy.core.exceptions import (
    ConflictError,
    ForbiddenError,
    PreconditionFailedError,
)
from plugin_deploy.core.paths import bundle_uri, source_map_uri, verify_path
from plugin_deploy.core.versioning import resolve_next_version
from plugin_deploy.models.credentials import Credential, credential_from
from plugin_deploy.models.deploy import BuildData, BumpDirective, DeployOptions, DeployResult
from plugin_deploy.models.runtime import AssetVersion, Runtime
from plugin_deploy.services.project import PluginProject
from plugin_deploy.utils import prints
from plugin_deploy.utils.logging import get_logger
from plugin_deploy.utils.progress import progress
from plugin_deploy.utils.prompt import confirm as prompt_confirm


class DeployOrchestrator:
    """Deploys a plugin build to the serverless runtime.

    Pipeline stages:
    1. preflight - the bundle exists locally
    2. pilot gate - the account may use the Plugins API (opt-in)
    3. runtime discovery - service, environment and current build
    4. compatibility - Flex UI and React versions
    5. collision check - the version is not already deployed
    6. upload - bundle and source map as new asset versions
    7. build composition - existing files plus the new ones
    8. registration - service sid in the Flex configuration
    9. build and deployment creation

    Remote clients are built from the credentials unless injected. Nothing is
    rolled back when a stage fails.
    """

    def __init__(
        self,
        project: PluginProject,
        credentials: Credential,
        *,
        allow_unbundled_react: bool = False,
        confirm: ConfirmFn | None = None,
        http_client: httpx.AsyncClient | None = None,
        runtime_client: RuntimeClient | None = None,
        accounts_client: AccountsClient | None = None,
        plugins_api_client: PluginsApiClient | None = None,
        configuration_client: ConfigurationClient | None = None,
        asset_client: AssetClient | None = None,
        build_client: BuildClient | None = None,
        deployment_client: DeploymentClient | None = None,
    ):
        self.project = project
        self.credentials = credentials
        self.allow_unbundled_react = allow_unbundled_react
        self.confirm = confirm or prompt_confirm
        self.logger = get_logger("orchestrator")

        self._owns_http = http_client is None
        self.http = http_client or httpx.AsyncClient(timeout=get_settings().http_timeout)

        self.runtime_client = runtime_client or RuntimeClient(credentials, self.http)
        self.accounts_client = accounts_client or AccountsClient(credentials, self.http)
        self.plugins_api_client = plugins_api_client or PluginsApiClient(credentials, self.http)
        self.configuration_client = configuration_client or ConfigurationClient(credentials, self.http)

        # These depend on the service and environment sids
        self._asset_client = asset_client
        self._build_client = build_client
        self._deployment_client = deployment_client

    async def close(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def deploy(
        self,
        bump: BumpDirective | str | None,
        explicit_version: str | None = None,
        options: DeployOptions | None = None,
    ) -> DeployResult:
        """Resolve the next version, then deploy it.

        Raises:
            PluginDeployError: If any stage fails
        """
        options = options or DeployOptions()
        resolved = resolve_next_version(
            self.project.version,
            bump,
            explicit_version,
            disallow_versioning=options.disallow_versioning,
            overwrite=options.overwrite,
        )
        options = options.model_copy(update={"overwrite": resolved.overwrite})

        self.logger.info(
            "orchestrator.version_resolved",
            current_version=self.project.version,
            next_version=resolved.next_version,
            overwrite=resolved.overwrite,
        )
        return await self.do_deploy(resolved.next_version, options)

    async def do_deploy(self, next_version: str, options: DeployOptions) -> DeployResult:
        """Deploy the local build as ``next_version``."""
        project = self.project
        if not project.check_files_exist(project.bundle_path):
            raise PreconditionFailedError(
                "Could not find build file. Did you run `twilio flex:plugins:build` first?",
                {"bundle_path": str(project.bundle_path)},
            )

        base_url = project.asset_base_url(next_version)
        bundle = bundle_uri(base_url)
        source_map = source_map_uri(base_url)

        self.logger.info(
            "orchestrator.deploy.started",
            plugin=project.name,
            version=next_version,
            is_public=options.is_public,
            overwrite=options.overwrite,
        )

        if options.is_plugins_pilot:
            await self._verify_pilot_access()

        prints.info("Uploading your Flex plugin to Twilio Assets\n")

        runtime = await self.runtime_client.get_runtime()
        if not runtime.environment:
            raise PreconditionFailedError(
                "No Runtime environment was found",
                {"service_sid": runtime.service.sid},
            )
        environment = runtime.environment
        plugin_url = f"https://{environment.domain_name}{bundle}"

        # Validate Flex UI version
        ui_version = await self.configuration_client.get_flex_ui_version()
        ui_dependencies = await self.configuration_client.get_ui_dependencies()
        await verify_flex_ui_configuration(
            ui_version,
            ui_dependencies,
            self.allow_unbundled_react,
            installed_version=project.get_package_version,
            confirm=self.confirm,
        )

        collision = await progress(
            "Validating the new plugin bundle",
            lambda: self._check_collision(runtime, base_url, plugin_url, options),
        )

        uploaded = await progress(
            "Uploading your plugin bundle",
            lambda: self._upload(runtime, bundle, source_map, options),
        )
        build_data = compose_build_data(
            runtime,
            uploaded,
            replaced_paths={bundle, source_map} if collision and options.overwrite else set(),
        )

        await progress(
            "Registering plugin with Flex",
            lambda: self.configuration_client.register_sid(runtime.service.sid),
        )

        await progress(
            "Deploying a new build of your Twilio Runtime",
            lambda: self._create_deployment(runtime, build_data, next_version),
        )

        account = await get_account(runtime, self.credentials, self.accounts_client)
        prints.deploy_successful(plugin_url, options.is_public, account)

        self.logger.info(
            "orchestrator.deploy.completed",
            plugin=project.name,
            version=next_version,
            url=plugin_url,
        )

        return DeployResult(
            service_sid=runtime.service.sid,
            account_sid=runtime.service.account_sid,
            environment_sid=environment.sid,
            domain_name=environment.domain_name,
            is_public=options.is_public,
            next_version=next_version,
            plugin_url=plugin_url,
        )

    async def _verify_pilot_access(self) -> None:
        if not await self.plugins_api_client.has_flag():
            raise ForbiddenError(
                "This command is currently in Preview and is restricted to users while we work on "
                "improving it. If you would like to participate, please contact flex@twilio.com to learn more."
            )
        prints.plugins_api_warning()

    async def _check_collision(
        self,
        runtime: Runtime,
        base_url: str,
        plugin_url: str,
        options: DeployOptions,
    ) -> bool:
        """Check for an existing plugin at the same version.

        Returns:
            Whether the new paths collide with the current build

        Raises:
            ConflictError: On collision without overwrite
        """
        collision = runtime.build is not None and not verify_path(base_url, runtime.build)
        if not collision:
            return False

        if not options.overwrite:
            raise ConflictError(plugin_url)

        if not options.disallow_versioning:
            self.logger.warning("orchestrator.overwrite", url=plugin_url)
            prints.newline()
            prints.warning("Plugin already exists and the flag --overwrite is going to overwrite this plugin.")

        return True

    async def _upload(
        self,
        runtime: Runtime,
        bundle: str,
        source_map: str,
        options: DeployOptions,
    ) -> list[AssetVersion]:
        """Upload the bundle and source map; both must succeed."""
        assets = self._asset_client or AssetClient(self.credentials, runtime.service.sid, self.http)
        is_private = not options.is_public

        # Both uploads settle before the first failure is raised
        results = await asyncio.gather(
            assets.upload(self.project.name, bundle, self.project.bundle_path, is_private),
            assets.upload(self.project.name, source_map, self.project.source_map_path, is_private),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                self.logger.error("orchestrator.upload.failed", error=str(result))
                raise result
        return list(results)

    async def _create_deployment(
        self,
        runtime: Runtime,
        build_data: BuildData,
        next_version: str,
    ) -> dict:
        builds = self._build_client or BuildClient(self.credentials, runtime.service.sid, self.http)
        deployments = self._deployment_client or DeploymentClient(
            self.credentials,
            runtime.service.sid,
            runtime.environment.sid,
            self.http,
        )

        new_build = await builds.create(build_data)
        deployment = await deployments.create(new_build.sid)
        self.logger.info(
            "orchestrator.deployment.created",
            build_sid=new_build.sid,
            deployment_sid=(deployment or {}).get("sid"),
        )

        self.project.update_app_version(next_version)
        return deployment


def compose_build_data(
    runtime: Runtime,
    uploaded: list[AssetVersion],
    replaced_paths: set[str] | None = None,
) -> BuildData:
    """Compose the next build from the current one and the new uploads.

    Function versions and dependencies are carried forward as-is. Existing
    asset versions are kept except those served at ``replaced_paths``; the
    uploaded versions are appended in order.
    """
    replaced_paths = replaced_paths or set()
    existing_assets = [v for v in runtime.asset_versions if v.path not in replaced_paths]

    return BuildData(
        function_version_sids=[v.sid for v in runtime.function_versions],
        asset_version_sids=[v.sid for v in existing_assets] + [v.sid for v in uploaded],
        dependencies=list(runtime.dependencies),
    )


def credentials_from_settings(settings: Settings | None = None) -> Credential:
    """Build credentials from the environment.

    Raises:
        PreconditionFailedError: If no credentials are configured
    """
    settings = settings or get_settings()
    if settings.has_api_key_credentials:
        return credential_from(settings.twilio_api_key, settings.twilio_api_secret)
    if settings.has_account_credentials:
        return credential_from(settings.twilio_account_sid, settings.twilio_auth_token)

    raise PreconditionFailedError(
        "No credentials found. Set TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN "
        "(or TWILIO_API_KEY and TWILIO_API_SECRET)."
    )


def get_orchestrator(
    project_dir: str = ".",
    settings: Settings | None = None,
) -> DeployOrchestrator:
    """Create an orchestrator for the plugin in ``project_dir``."""
    settings = settings or get_settings()
    return DeployOrchestrator(
        PluginProject(project_dir),
        credentials_from_settings(settings),
        allow_unbundled_react=settings.unbundled_react,
    )
