"""Collision checks between a new plugin and an existing build."""

from plugin_deploy.models.runtime import Build

BUNDLE_FILE = "bundle.js"
SOURCE_MAP_FILE = "bundle.js.map"


def bundle_uri(base_url: str) -> str:
    return f"{base_url}/{BUNDLE_FILE}"


def source_map_uri(base_url: str) -> str:
    return f"{base_url}/{SOURCE_MAP_FILE}"


def verify_path(base_url: str, build: Build) -> bool:
    """Verify the new plugin paths are not already served by ``build``.

    Args:
        base_url: The base URL of the plugin version, e.g. /plugins/name/1.0.0
        build: The existing build

    Returns:
        True if neither the bundle nor the source map path is in use
    """
    candidates = {bundle_uri(base_url), source_map_uri(base_url)}

    return candidates.isdisjoint(build.paths)
