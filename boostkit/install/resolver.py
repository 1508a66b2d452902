"""
Selection of the package to install from the versions manifest.

Matching is exact, case-sensitive string equality. Resolution is
first-match-wins: the first release whose version matches is the only one
searched, even if a later release with the same version would have matched
the file filters.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from boostkit.core.exceptions import VersionNotFound
from boostkit.core.platform import current_platform
from boostkit.install.manifest import Manifest, PackageEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionCriteria:
    """What the caller asked for. Empty filters are not applied."""

    boost_version: str
    toolset: str = ""
    platform_version: str = ""


@dataclass(frozen=True)
class ResolvedPackage:
    """Download location of the selected archive."""

    url: str
    filename: str


def _matches(
    entry: PackageEntry, platform: str, toolset: str, platform_version: str
) -> bool:
    if entry.platform != platform:
        return False
    if toolset and entry.toolset != toolset:
        return False
    if platform_version and entry.platform_version != platform_version:
        return False
    return True


def resolve(
    manifest: Manifest,
    boost_version: str,
    toolset: str = "",
    platform_version: str = "",
    platform: Optional[str] = None,
) -> ResolvedPackage:
    """
    Find the archive matching the requested version and filters.

    Args:
        manifest: Decoded versions manifest
        boost_version: Exact version string (e.g. '1.82.0')
        toolset: Toolset filter, empty to accept any
        platform_version: Platform version filter, empty to accept any
        platform: Platform identifier; defaults to the current host

    Returns:
        ResolvedPackage with the archive URL and file name

    Raises:
        VersionNotFound: If the version is absent, or its first release entry
            has no package matching every active filter

    Example:
        >>> pkg = resolve(manifest, "1.82.0", toolset="gcc", platform_version="22.04")
        >>> pkg.filename
        'boost-1.82.0-linux-22.04-gcc-x64.tar.gz'
    """
    platform = platform if platform is not None else current_platform()
    logger.info("Parsing versions-manifest.json...")

    for release in manifest:
        if release.version != boost_version:
            continue

        for entry in release.files:
            if _matches(entry, platform, toolset, platform_version):
                logger.debug(f"Selected {entry.filename} from {entry.download_url}")
                return ResolvedPackage(url=entry.download_url, filename=entry.filename)

        # Only the first release with a matching version is searched
        break

    raise VersionNotFound(boost_version)


def resolve_criteria(
    manifest: Manifest, criteria: SelectionCriteria, platform: Optional[str] = None
) -> ResolvedPackage:
    """Resolve using a SelectionCriteria record."""
    return resolve(
        manifest,
        criteria.boost_version,
        criteria.toolset,
        criteria.platform_version,
        platform=platform,
    )
