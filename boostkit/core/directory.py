"""
Installation root directory management for BoostKit.

Boost is extracted under a single root directory on the build agent:
    - Windows: D:\\boost
    - Linux/macOS: /usr/boost

The root is created on demand, one level only. Its parent must already exist.
"""

import logging
from pathlib import Path
from typing import Union

from boostkit.core.exceptions import DirectoryError
from boostkit.core.platform import is_windows

logger = logging.getLogger(__name__)

WINDOWS_ROOT_DIR = "D:\\boost"
POSIX_ROOT_DIR = "/usr/boost"


def get_default_root_dir() -> Path:
    """
    Get the platform-specific default installation root.

    Returns:
        Path: D:\\boost on Windows, /usr/boost everywhere else.

    Example:
        >>> get_default_root_dir()
        PosixPath('/usr/boost')  # on Linux
    """
    if is_windows():
        return Path(WINDOWS_ROOT_DIR)
    return Path(POSIX_ROOT_DIR)


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Create a directory if it does not exist.

    Creation is not recursive: a missing parent is an error. Calling this on
    an existing directory does nothing.

    Args:
        path: Directory to create.

    Returns:
        Path: The directory path.

    Raises:
        DirectoryError: If the directory cannot be created.

    Example:
        >>> ensure_directory(Path('/usr/boost'))
        PosixPath('/usr/boost')
    """
    path = Path(path)

    if path.is_dir():
        logger.info(f"{path} already exists, doing nothing")
        return path

    if path.exists():
        raise DirectoryError(f"{path} exists and is not a directory")

    logger.info(f"{path} does not exist, creating it")
    try:
        path.mkdir()
    except FileNotFoundError as e:
        raise DirectoryError(
            f"Cannot create {path}: parent directory {path.parent} does not exist"
        ) from e
    except PermissionError as e:
        raise DirectoryError(f"Permission denied creating {path}: {e}") from e
    except OSError as e:
        raise DirectoryError(f"Failed to create {path}: {e}") from e

    logger.info("Done.")
    return path
