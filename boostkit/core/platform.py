"""
Platform detection for BoostKit.

The versions manifest keys every package by the platform identifiers used by
the GitHub runner images: ``win32``, ``linux`` and ``darwin``. This module maps
the running interpreter's operating system onto those identifiers.

Usage:
    from boostkit.core.platform import current_platform

    print(f"Resolving packages for: {current_platform()}")
"""

import platform


# platform.system() value -> manifest platform identifier
_MANIFEST_PLATFORMS = {
    "windows": "win32",
    "linux": "linux",
    "darwin": "darwin",
}


def current_platform() -> str:
    """
    Get the manifest platform identifier of the current host.

    Returns:
        'win32', 'linux' or 'darwin'; for any other system the lower-cased
        ``platform.system()`` value.

    Example:
        >>> current_platform()
        'linux'
    """
    system = platform.system().lower()
    return _MANIFEST_PLATFORMS.get(system, system)


def is_windows() -> bool:
    """Check if running on Windows."""
    return current_platform() == "win32"
