"""
Boost installation orchestrator.

Sequences one install end to end:

    START -> MANIFEST_FETCHED -> PACKAGE_RESOLVED -> DIRECTORY_READY
          -> DOWNLOADED -> EXTRACTED [-> CLEANED_UP] -> DONE

Any failure moves the installer to FAILED and re-raises the error. Steps that
already completed are not rolled back.

Two install methods exist. They differ only in how the output directory name
is derived from the archive name and whether the archive is deleted after
extraction:

    CURRENT: 'my.pkg.tar.gz' -> 'my'      archive kept
    LEGACY:  'my.pkg.tar.gz' -> 'my.pkg'  archive removed
"""

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from boostkit.ci.actions import ActionsHost
from boostkit.core.directory import ensure_directory, get_default_root_dir
from boostkit.core.download import DownloadProgress, download_file, format_progress
from boostkit.core.exceptions import ValidationError
from boostkit.core.filesystem import extract_archive, remove_file
from boostkit.install.manifest import DEFAULT_MANIFEST_URL, fetch_manifest
from boostkit.install.resolver import ResolvedPackage, resolve

logger = logging.getLogger(__name__)


class InstallState(enum.Enum):
    """Stages of an install."""

    START = "start"
    MANIFEST_FETCHED = "manifest_fetched"
    PACKAGE_RESOLVED = "package_resolved"
    DIRECTORY_READY = "directory_ready"
    DOWNLOADED = "downloaded"
    EXTRACTED = "extracted"
    CLEANED_UP = "cleaned_up"
    DONE = "done"
    FAILED = "failed"


def archive_base_dir(filename: str) -> str:
    """
    Output directory name used by the current install method.

    Everything before the first dot: 'boost_1_82_0.tar.gz' -> 'boost_1_82_0'.
    """
    return filename.split(".")[0]


def _strip_extension(name: str) -> str:
    index = name.rfind(".")
    return name[:index] if index >= 0 else ""


def legacy_archive_base_dir(filename: str) -> str:
    """
    Output directory name used by the legacy install method.

    Strips the last two dot-separated segments:
    'boost_1_82_0.tar.gz' -> 'boost_1_82_0', 'my.pkg.tar.gz' -> 'my.pkg'.
    A segment with no dot left collapses to '' ('boost.zip' -> '').
    """
    return _strip_extension(_strip_extension(filename))


@dataclass(frozen=True)
class InstallMethod:
    """Variation points between the current and legacy install flows."""

    name: str
    base_dir_rule: Callable[[str], str]
    cleanup_archive: bool
    log_outputs: bool = False


CURRENT = InstallMethod("current", archive_base_dir, cleanup_archive=False)
LEGACY = InstallMethod(
    "legacy", legacy_archive_base_dir, cleanup_archive=True, log_outputs=True
)

INSTALL_METHODS = {method.name: method for method in (CURRENT, LEGACY)}


@dataclass
class InstallResult:
    """Result of a successful install."""

    boost_root: Path
    """Directory Boost was extracted to (BOOST_ROOT)"""

    boost_ver: str
    """Output directory name (BOOST_VER)"""

    package: ResolvedPackage
    """Archive that was installed"""

    archive_path: Path
    """Where the archive was downloaded to; removed by the legacy method"""


class BoostInstaller:
    """
    Installs a prebuilt Boost package under a root directory.

    Example:
        >>> installer = BoostInstaller(root_dir=Path("/usr/boost"))
        >>> result = installer.install("1.82.0")
        >>> print(result.boost_root)
        /usr/boost/boost_1_82_0
    """

    def __init__(
        self,
        root_dir: Union[str, Path],
        method: InstallMethod = CURRENT,
        manifest_url: str = DEFAULT_MANIFEST_URL,
        host: Optional[ActionsHost] = None,
        platform: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize installer.

        Args:
            root_dir: Installation root; created if missing (parent must exist)
            method: CURRENT or LEGACY
            manifest_url: Versions manifest location
            host: CI host used for log groups; a default ActionsHost if None
            platform: Manifest platform identifier; the current host if None
            timeout: Network timeout in seconds; None leaves the transport default
        """
        self.root_dir = Path(root_dir).absolute()
        self.method = method
        self.manifest_url = manifest_url
        self.host = host or ActionsHost()
        self.platform = platform
        self.timeout = timeout

        self.state = InstallState.START
        self.history: List[InstallState] = [InstallState.START]
        self.error: Optional[Exception] = None

    def _enter(self, state: InstallState) -> None:
        logger.debug(f"Install state: {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _log_progress(self, progress: DownloadProgress) -> None:
        logger.info(format_progress(progress))

    def install(
        self, boost_version: str, toolset: str = "", platform_version: str = ""
    ) -> InstallResult:
        """
        Run the install.

        Args:
            boost_version: Exact Boost version (required)
            toolset: Toolset filter, empty to accept any
            platform_version: Platform version filter, empty to accept any

        Returns:
            InstallResult with BOOST_ROOT and BOOST_VER values

        Raises:
            BoostKitError: The error of the first step that failed
        """
        try:
            return self._install(boost_version, toolset, platform_version)
        except Exception as e:
            logger.debug(f"Install failed in state {self.state.value}: {e}")
            self.error = e
            self._enter(InstallState.FAILED)
            raise

    def _install(
        self, boost_version: str, toolset: str, platform_version: str
    ) -> InstallResult:
        if not boost_version:
            raise ValidationError("boost_version variable must be set")

        if self.method is LEGACY:
            logger.info("Using legacy install method")

        manifest = fetch_manifest(self.manifest_url, timeout=self.timeout)
        self._enter(InstallState.MANIFEST_FETCHED)

        package = resolve(
            manifest, boost_version, toolset, platform_version, platform=self.platform
        )
        self._enter(InstallState.PACKAGE_RESOLVED)

        with self.host.group(f"Create {self.root_dir}"):
            ensure_directory(self.root_dir)
        self._enter(InstallState.DIRECTORY_READY)

        archive_path = self.root_dir / package.filename
        with self.host.group("Download Boost"):
            download_file(
                package.url,
                archive_path,
                progress_callback=self._log_progress,
                timeout=self.timeout,
            )
        self._enter(InstallState.DOWNLOADED)

        base_dir = self.method.base_dir_rule(package.filename)
        boost_root = self.root_dir / base_dir
        self.host.debug(f"Boost base directory: {base_dir}")

        with self.host.group(f"Extract {package.filename}"):
            extract_archive(package.filename, cwd=self.root_dir)
        self._enter(InstallState.EXTRACTED)

        if self.method.cleanup_archive:
            with self.host.group("Clean up"):
                remove_file(archive_path)
            self._enter(InstallState.CLEANED_UP)

        if self.method.log_outputs:
            with self.host.group("Set output variables"):
                logger.info(f"Setting BOOST_ROOT to '{boost_root}'")
                logger.info(f"Setting BOOST_VER to '{base_dir}'")

        self._enter(InstallState.DONE)
        return InstallResult(
            boost_root=boost_root,
            boost_ver=base_dir,
            package=package,
            archive_path=archive_path,
        )


def install_boost(
    boost_version: str,
    toolset: str = "",
    platform_version: str = "",
    root_dir: Union[str, Path, None] = None,
    method: InstallMethod = CURRENT,
    manifest_url: str = DEFAULT_MANIFEST_URL,
) -> InstallResult:
    """
    Convenience function to install Boost in one call.

    Args:
        boost_version: Exact Boost version
        toolset: Toolset filter
        platform_version: Platform version filter
        root_dir: Installation root (platform default if None)
        method: CURRENT or LEGACY
        manifest_url: Versions manifest location

    Returns:
        InstallResult with installation details
    """
    if root_dir is None:
        root_dir = get_default_root_dir()

    installer = BoostInstaller(root_dir, method=method, manifest_url=manifest_url)
    return installer.install(boost_version, toolset, platform_version)
