"""In-memory collaborators for orchestrator tests."""

import asyncio
from pathlib import Path

import pytest

from plugin_deploy.core.exceptions import RemoteError
from plugin_deploy.models.deploy import BuildData
from plugin_deploy.models.runtime import (
    Account,
    AssetVersion,
    Build,
    Dependency,
    Environment,
    FunctionVersion,
    Runtime,
    Service,
)
from tests.conftest import ACCOUNT_SID, BUILD_SID, ENVIRONMENT_SID, SERVICE_SID

DOMAIN_NAME = "plugin-sample-1234.twil.io"


class FakeRuntimeClient:
    def __init__(self, runtime: Runtime):
        self.runtime = runtime
        self.calls = 0

    async def get_runtime(self) -> Runtime:
        self.calls += 1
        return self.runtime


class FakeConfigurationClient:
    def __init__(self, ui_version: str = "1.20.0", dependencies: dict[str, str] | None = None):
        self.ui_version = ui_version
        self.dependencies = dependencies or {"react": "^16.13.0", "react-dom": "^16.13.0"}
        self.registered: list[str] = []

    async def get_flex_ui_version(self) -> str:
        return self.ui_version

    async def get_ui_dependencies(self) -> dict[str, str]:
        return self.dependencies

    async def register_sid(self, service_sid: str) -> None:
        self.registered.append(service_sid)


class FakePluginsApiClient:
    def __init__(self, flag: bool = True):
        self.flag = flag
        self.calls = 0

    async def has_flag(self) -> bool:
        self.calls += 1
        return self.flag


class FakeAccountsClient:
    def __init__(self):
        self.requested: list[str] = []

    async def get(self, account_sid: str) -> Account:
        self.requested.append(account_sid)
        return Account(sid=account_sid, friendly_name="Sample Flex Project")


class FakeAssetClient:
    """Returns sequential asset versions; optionally fails for one path."""

    def __init__(self, fail_path: str | None = None, delay: float = 0.0):
        self.fail_path = fail_path
        self.delay = delay
        self.uploads: list[dict] = []

    async def upload(self, friendly_name: str, uri: str, local_path: str | Path, is_private: bool = False) -> AssetVersion:
        if uri == self.fail_path:
            raise RemoteError(f"Upload of {uri} failed", status_code=500)
        await asyncio.sleep(self.delay)
        self.uploads.append(
            {"friendly_name": friendly_name, "uri": uri, "local_path": Path(local_path), "is_private": is_private}
        )
        return AssetVersion(sid=f"ZNnew{len(self.uploads)}", path=uri)


class FakeBuildClient:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.created: list[BuildData] = []

    async def create(self, data: BuildData) -> Build:
        if self.fail:
            raise RemoteError("Build failed")
        self.created.append(data)
        return Build(sid="ZBnew", status="completed")


class FakeDeploymentClient:
    def __init__(self):
        self.created: list[str] = []

    async def create(self, build_sid: str) -> dict:
        self.created.append(build_sid)
        return {"sid": "ZDnew", "build_sid": build_sid}


class FakeConfirm:
    def __init__(self, answer: bool = False):
        self.answer = answer
        self.calls: list[tuple[str, bool]] = []

    async def __call__(self, message: str, default: bool) -> bool:
        self.calls.append((message, default))
        return self.answer


def make_runtime(
    asset_paths: list[str] | None = None,
    with_build: bool = True,
    with_environment: bool = True,
) -> Runtime:
    service = Service(sid=SERVICE_SID, account_sid=ACCOUNT_SID, unique_name="default")
    environment = (
        Environment(sid=ENVIRONMENT_SID, domain_name=DOMAIN_NAME, build_sid=BUILD_SID if with_build else None)
        if with_environment
        else None
    )
    build = None
    if with_build:
        build = Build(
            sid=BUILD_SID,
            asset_versions=[AssetVersion(sid=f"ZNold{i}", path=p) for i, p in enumerate(asset_paths or [])],
            function_versions=[FunctionVersion(sid="ZFold0", path="/hello")],
            dependencies=[Dependency(name="twilio", version="3.0.0")],
        )
    return Runtime(service=service, environment=environment, build=build)


@pytest.fixture
def configuration_client() -> FakeConfigurationClient:
    return FakeConfigurationClient()


@pytest.fixture
def plugins_api_client() -> FakePluginsApiClient:
    return FakePluginsApiClient()


@pytest.fixture
def accounts_client() -> FakeAccountsClient:
    return FakeAccountsClient()


@pytest.fixture
def asset_client() -> FakeAssetClient:
    return FakeAssetClient()


@pytest.fixture
def build_client() -> FakeBuildClient:
    return FakeBuildClient()


@pytest.fixture
def deployment_client() -> FakeDeploymentClient:
    return FakeDeploymentClient()


@pytest.fixture
def confirm() -> FakeConfirm:
    return FakeConfirm()
