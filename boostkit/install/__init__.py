"""
Boost package lookup and installation.
"""

from .manifest import (
    DEFAULT_MANIFEST_URL,
    Manifest,
    PackageEntry,
    VersionEntry,
    fetch_manifest,
    loads_manifest,
    parse_manifest,
)

from .resolver import (
    ResolvedPackage,
    SelectionCriteria,
    resolve,
    resolve_criteria,
)

from .installer import (
    CURRENT,
    LEGACY,
    INSTALL_METHODS,
    BoostInstaller,
    InstallMethod,
    InstallResult,
    InstallState,
    archive_base_dir,
    install_boost,
    legacy_archive_base_dir,
)

__all__ = [
    "DEFAULT_MANIFEST_URL",
    "Manifest",
    "PackageEntry",
    "VersionEntry",
    "fetch_manifest",
    "loads_manifest",
    "parse_manifest",
    "ResolvedPackage",
    "SelectionCriteria",
    "resolve",
    "resolve_criteria",
    "CURRENT",
    "LEGACY",
    "INSTALL_METHODS",
    "BoostInstaller",
    "InstallMethod",
    "InstallResult",
    "InstallState",
    "archive_base_dir",
    "install_boost",
    "legacy_archive_base_dir",
]
