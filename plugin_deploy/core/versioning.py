"""Version resolution for plugin deploys."""

import re

import nodesemver

from plugin_deploy.core.exceptions import InvalidArgumentError
from plugin_deploy.models.deploy import BumpDirective, ResolvedVersion

# Version used when versioning is disallowed
UNVERSIONED = "0.0.0"

_COERCE_RE = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")


def resolve_next_version(
    current_version: str,
    bump: BumpDirective | str | None,
    explicit_version: str | None = None,
    *,
    disallow_versioning: bool = False,
    overwrite: bool = False,
) -> ResolvedVersion:
    """Compute the version to deploy from a bump directive.

    Args:
        current_version: Version currently recorded in package.json
        bump: One of major, minor, patch, version, overwrite
        explicit_version: Literal version, required for the ``version`` bump
        disallow_versioning: Deploy everything as 0.0.0, overwriting in place
        overwrite: Whether the caller already allows overwriting

    Returns:
        The next version and the effective overwrite flag

    Raises:
        InvalidArgumentError: If the directive is unknown or incomplete
    """
    if disallow_versioning:
        return ResolvedVersion(next_version=UNVERSIONED, overwrite=True)

    try:
        directive = BumpDirective(bump)
    except ValueError:
        allowed = ", ".join(d.value for d in BumpDirective)
        raise InvalidArgumentError(
            f"Version bump can only be one of {allowed}",
            {"bump": bump},
        ) from None

    if directive == BumpDirective.VERSION:
        if not explicit_version:
            raise InvalidArgumentError("Custom version bump requires the version value.")
        return ResolvedVersion(next_version=explicit_version, overwrite=overwrite)

    if directive == BumpDirective.OVERWRITE:
        return ResolvedVersion(next_version=current_version, overwrite=True)

    return ResolvedVersion(next_version=bump_version(current_version, directive), overwrite=overwrite)


def bump_version(version: str, directive: BumpDirective) -> str:
    """Increment a semantic version by major, minor or patch."""
    try:
        bumped = nodesemver.inc(version, directive.value, loose=False)
    except ValueError:
        bumped = None

    if not bumped:
        raise InvalidArgumentError(
            f"Cannot apply a {directive.value} bump to version {version!r}",
            {"version": version, "bump": directive.value},
        )
    return bumped


def coerce(version: str | None) -> str | None:
    """Extract a plain X.Y.Z version from a loose version string.

    ``"v1.20"`` becomes ``"1.20.0"``; strings without any digits give None.
    """
    if not version:
        return None

    match = _COERCE_RE.search(version)
    if not match:
        return None

    major, minor, patch = match.groups()
    return f"{int(major)}.{int(minor or 0)}.{int(patch or 0)}"


def satisfies(version: str | None, range_: str) -> bool:
    """Check a version against an npm-style range; unparsable input never matches."""
    if not version:
        return False
    try:
        return bool(nodesemver.satisfies(version, range_, loose=False))
    except ValueError:
        return False
