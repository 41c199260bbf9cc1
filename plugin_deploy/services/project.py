"""Local plugin project on disk."""

import json
from pathlib import Path
from typing import Any

from plugin_deploy.core.exceptions import PreconditionFailedError
from plugin_deploy.utils.logging import get_logger

logger = get_logger(__name__)


class PluginProject:
    """A plugin project directory containing package.json and build output.

    Layout::

        package.json
        build/<name>.js
        build/<name>.js.map
        node_modules/<package>/package.json
    """

    def __init__(self, root: str | Path = "."):
        self.root = Path(root).resolve()
        self.package_json_path = self.root / "package.json"
        self._package = self._read_package_json()

    def _read_package_json(self) -> dict[str, Any]:
        if not self.package_json_path.exists():
            raise PreconditionFailedError(
                f"No package.json was found in {self.root}. Are you in a plugin directory?",
                {"root": str(self.root)},
            )
        try:
            package = json.loads(self.package_json_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise PreconditionFailedError(f"Invalid package.json: {e}") from e

        if not package.get("name"):
            raise PreconditionFailedError("Missing 'name' in package.json")
        return package

    @property
    def name(self) -> str:
        return self._package["name"]

    @property
    def version(self) -> str:
        return self._package.get("version") or "0.0.0"

    @property
    def build_dir(self) -> Path:
        return self.root / "build"

    @property
    def bundle_path(self) -> Path:
        return self.build_dir / f"{self.name}.js"

    @property
    def source_map_path(self) -> Path:
        return self.build_dir / f"{self.name}.js.map"

    def asset_base_url(self, version: str) -> str:
        """Path prefix the given plugin version is served from."""
        return f"/plugins/{self.name}/{version}"

    @staticmethod
    def check_files_exist(*paths: str | Path) -> bool:
        return all(Path(p).is_file() for p in paths)

    def get_package_version(self, package: str) -> str | None:
        """Version of a package installed in node_modules, if any."""
        pkg_json = self.root / "node_modules" / package / "package.json"
        if not pkg_json.exists():
            return None
        try:
            return json.loads(pkg_json.read_text(encoding="utf-8")).get("version")
        except json.JSONDecodeError:
            logger.warning("project.invalid_package_json", package=package, path=str(pkg_json))
            return None

    def update_app_version(self, version: str) -> None:
        """Persist the deployed version into package.json."""
        self._package["version"] = version
        self.package_json_path.write_text(
            json.dumps(self._package, indent=2) + "\n",
            encoding="utf-8",
        )
        logger.info("project.version_updated", version=version)
