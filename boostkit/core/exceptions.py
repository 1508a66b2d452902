"""
Centralized exception hierarchy for BoostKit.

Every stage of an install raises its own error kind so the failure reported
to the CI host names the stage that failed.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class BoostKitError(Exception):
    """Base exception for all BoostKit errors."""

    pass


# ============================================================================
# Input Exceptions
# ============================================================================


class ValidationError(BoostKitError):
    """Raised when a required input is missing or invalid."""

    pass


# ============================================================================
# Manifest Exceptions
# ============================================================================


class FetchError(BoostKitError):
    """Raised when the versions manifest cannot be retrieved."""

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class ParseError(BoostKitError):
    """Raised when the versions manifest is not valid JSON or misses required fields."""

    pass


class VersionNotFound(BoostKitError):
    """Raised when no manifest entry matches the requested version and filters."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Could not find boost version: {version}")


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class DirectoryError(BoostKitError):
    """Raised when the installation root directory cannot be created."""

    pass


class DownloadError(BoostKitError):
    """Raised when the boost archive transfer fails."""

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class ExtractionError(BoostKitError):
    """Raised when the archive extraction process fails or cannot be started."""

    def __init__(self, message: str, exit_code: Optional[int] = None):
        self.exit_code = exit_code
        super().__init__(message)


class CleanupError(BoostKitError):
    """Raised when the downloaded archive cannot be removed after extraction."""

    pass
