"""
Archive extraction and file removal for BoostKit.

Extraction is delegated to the system ``tar`` executable, which is present on
every GitHub-hosted runner image including Windows. Its exit status is the
only success signal.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from boostkit.core.exceptions import CleanupError, ExtractionError

logger = logging.getLogger(__name__)

TAR_EXECUTABLE = "tar"


def tar_command(archive_name: str) -> List[str]:
    """Build the tar command line that decompresses and unpacks ``archive_name``."""
    return [TAR_EXECUTABLE, "xzvf", archive_name]


def extract_archive(
    archive_name: Union[str, Path], cwd: Optional[Union[str, Path]] = None
) -> None:
    """
    Extract a gzip-compressed tarball with the external tar process.

    The archive is unpacked into ``cwd`` (the current working directory when
    omitted). Tar's output is forwarded to the debug log.

    Args:
        archive_name: Archive path, relative to ``cwd`` or absolute
        cwd: Directory to run tar in

    Raises:
        ExtractionError: If tar cannot be started or exits with a non-zero code

    Example:
        >>> extract_archive("boost_1_82_0.tar.gz", cwd=Path("/usr/boost"))
    """
    command = tar_command(str(archive_name))
    logger.debug(f"Running {' '.join(command)} in {cwd or Path.cwd()}")

    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        logger.error(f"Failed to start tar: {e}")
        raise ExtractionError("Tar failed") from e

    for line in (result.stdout or "").splitlines():
        logger.debug(line)
    for line in (result.stderr or "").splitlines():
        logger.debug(line)

    if result.returncode != 0:
        raise ExtractionError(
            f"Tar exited with code {result.returncode}", exit_code=result.returncode
        )

    logger.info("Tar exited with code 0")


def remove_file(path: Union[str, Path]) -> None:
    """
    Delete a single file.

    Args:
        path: File to delete

    Raises:
        CleanupError: If the file is missing or cannot be deleted
    """
    path = Path(path)
    logger.info(f"Removing {path}")
    try:
        path.unlink()
    except OSError as e:
        raise CleanupError(f"Failed to remove {path}: {e}") from e
