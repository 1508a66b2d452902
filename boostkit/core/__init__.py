"""
Core functionality for BoostKit.

This package contains the foundational modules the installer depends on.
"""

from .directory import (
    ensure_directory,
    get_default_root_dir,
)

from .download import (
    DownloadProgress,
    download_file,
    format_progress,
)

from .filesystem import (
    extract_archive,
    remove_file,
)

from .platform import (
    current_platform,
)

from .exceptions import (
    BoostKitError,
    ValidationError,
    FetchError,
    ParseError,
    VersionNotFound,
    DirectoryError,
    DownloadError,
    ExtractionError,
    CleanupError,
)

__all__ = [
    "ensure_directory",
    "get_default_root_dir",
    "DownloadProgress",
    "download_file",
    "format_progress",
    "extract_archive",
    "remove_file",
    "current_platform",
    "BoostKitError",
    "ValidationError",
    "FetchError",
    "ParseError",
    "VersionNotFound",
    "DirectoryError",
    "DownloadError",
    "ExtractionError",
    "CleanupError",
]
