"""Deploy data models."""

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from plugin_deploy.models.runtime import Dependency


class BumpDirective(str, Enum):
    """Requested kind of version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    VERSION = "version"
    OVERWRITE = "overwrite"


class ResolvedVersion(BaseModel):
    """The version to deploy and whether collisions may be overwritten."""

    model_config = ConfigDict(frozen=True)

    next_version: str
    overwrite: bool = False


class DeployOptions(BaseModel):
    """Options for a single deploy."""

    is_public: bool = False
    overwrite: bool = False
    disallow_versioning: bool = False
    is_plugins_pilot: bool = False


class BuildData(BaseModel):
    """Payload for creating a new build."""

    function_version_sids: list[str] = Field(default_factory=list)
    asset_version_sids: list[str] = Field(default_factory=list)
    dependencies: list[Dependency] = Field(default_factory=list)

    def to_form(self) -> dict[str, str | list[str]]:
        """Convert to the form fields expected by the builds endpoint."""
        return {
            "FunctionVersions": self.function_version_sids,
            "AssetVersions": self.asset_version_sids,
            "Dependencies": json.dumps([d.model_dump() for d in self.dependencies]),
        }


class DeployResult(BaseModel):
    """Outcome of a successful deploy."""

    model_config = ConfigDict(frozen=True)

    service_sid: str
    account_sid: str
    environment_sid: str
    domain_name: str
    is_public: bool
    next_version: str
    plugin_url: str
