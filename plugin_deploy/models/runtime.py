"""Serverless runtime data models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ServerlessResource(BaseModel):
    """Base for resources returned by the serverless API."""

    model_config = ConfigDict(extra="ignore")


class Service(ServerlessResource):
    """A serverless service owning plugin assets."""

    sid: str
    account_sid: str
    unique_name: str = ""
    friendly_name: str = ""


class Environment(ServerlessResource):
    """A deployment target bound to a domain name."""

    sid: str
    domain_name: str
    unique_name: str = ""
    build_sid: str | None = None


class Version(ServerlessResource):
    """An uploaded artifact revision served at a path."""

    sid: str
    path: str
    visibility: Literal["public", "private", "protected"] = "public"


class AssetVersion(Version):
    """A static asset revision."""

    pass


class FunctionVersion(Version):
    """A function revision."""

    pass


class Dependency(ServerlessResource):
    """A package dependency of a build."""

    name: str
    version: str


class Build(ServerlessResource):
    """A set of asset/function versions and dependencies."""

    sid: str
    status: Literal["building", "completed", "failed"] = "completed"
    asset_versions: list[AssetVersion] = Field(default_factory=list)
    function_versions: list[FunctionVersion] = Field(default_factory=list)
    dependencies: list[Dependency] = Field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        """All paths served by this build."""
        return [v.path for v in [*self.asset_versions, *self.function_versions]]


class Runtime(BaseModel):
    """Snapshot of the remote state for one deploy."""

    service: Service
    environment: Environment | None = None
    build: Build | None = None

    @property
    def asset_versions(self) -> list[AssetVersion]:
        return self.build.asset_versions if self.build else []

    @property
    def function_versions(self) -> list[FunctionVersion]:
        return self.build.function_versions if self.build else []

    @property
    def dependencies(self) -> list[Dependency]:
        return self.build.dependencies if self.build else []


class Account(ServerlessResource):
    """The account owning the service."""

    sid: str
    friendly_name: str | None = None
