"""
Boost versions manifest: data model, decoding and retrieval.

The manifest is a JSON array published at ``DEFAULT_MANIFEST_URL``:

    [
      {
        "version": "1.82.0",
        "files": [
          {
            "filename": "boost-1.82.0-linux-22.04-gcc-x64.tar.gz",
            "platform": "linux",
            "platform_version": "22.04",
            "toolset": "gcc",
            "arch": "x64",
            "download_url": "https://github.com/.../boost-1.82.0-linux-22.04-gcc-x64.tar.gz"
          }
        ]
      }
    ]

Entries are decoded into frozen dataclasses. Order is preserved because
resolution is first-match-wins.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.exceptions import RequestException

from boostkit.core.exceptions import FetchError, ParseError

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_URL = (
    "https://raw.githubusercontent.com/actions/boost-versions/main/versions-manifest.json"
)


@dataclass(frozen=True)
class PackageEntry:
    """One downloadable archive of a Boost release."""

    platform: str
    """Platform identifier (e.g. 'win32', 'linux', 'darwin')"""

    download_url: str
    """URL of the archive"""

    filename: str
    """Base name of the archive as served"""

    toolset: Optional[str] = None
    """Compiler family the package was built with (e.g. 'gcc', 'msvc-14.3')"""

    platform_version: Optional[str] = None
    """OS version tag (e.g. '22.04', '2022')"""

    arch: Optional[str] = None
    """Target architecture; informational only"""


@dataclass(frozen=True)
class VersionEntry:
    """One Boost release and its available packages."""

    version: str
    files: Tuple[PackageEntry, ...]


Manifest = List[VersionEntry]


def _require_str(data: Dict[str, Any], key: str, where: str) -> str:
    if key not in data:
        raise ParseError(f"Missing required field '{key}' in {where}")
    value = data[key]
    if not isinstance(value, str):
        raise ParseError(
            f"Field '{key}' in {where} must be a string, got {type(value).__name__}"
        )
    return value


def _optional_str(data: Dict[str, Any], key: str, where: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _require_str(data, key, where)


def _parse_package(data: Any, where: str) -> PackageEntry:
    if not isinstance(data, dict):
        raise ParseError(f"Expected an object for {where}, got {type(data).__name__}")

    return PackageEntry(
        platform=_require_str(data, "platform", where),
        download_url=_require_str(data, "download_url", where),
        filename=_require_str(data, "filename", where),
        toolset=_optional_str(data, "toolset", where),
        platform_version=_optional_str(data, "platform_version", where),
        arch=_optional_str(data, "arch", where),
    )


def _parse_version(data: Any, index: int) -> VersionEntry:
    where = f"manifest entry {index}"
    if not isinstance(data, dict):
        raise ParseError(f"Expected an object for {where}, got {type(data).__name__}")

    version = _require_str(data, "version", where)

    if "files" not in data:
        raise ParseError(f"Missing required field 'files' in {where}")
    files = data["files"]
    if not isinstance(files, list):
        raise ParseError(f"Field 'files' in {where} must be a list")

    return VersionEntry(
        version=version,
        files=tuple(
            _parse_package(item, f"{where} ({version}) file {i}")
            for i, item in enumerate(files)
        ),
    )


def parse_manifest(data: Any) -> Manifest:
    """
    Decode parsed JSON into manifest records.

    Args:
        data: Result of ``json.loads`` on the manifest body

    Returns:
        Version entries in manifest order

    Raises:
        ParseError: If the structure or a required field is invalid
    """
    if not isinstance(data, list):
        raise ParseError(
            f"Manifest must be a JSON array, got {type(data).__name__}"
        )
    return [_parse_version(item, i) for i, item in enumerate(data)]


def loads_manifest(text: str) -> Manifest:
    """
    Parse manifest JSON text.

    Raises:
        ParseError: If the text is not valid JSON or not a valid manifest
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in versions manifest: {e}") from e
    return parse_manifest(data)


def fetch_manifest(
    url: str = DEFAULT_MANIFEST_URL, timeout: Optional[float] = None
) -> Manifest:
    """
    Download and decode the versions manifest.

    A single GET is made; failures are not retried.

    Args:
        url: Manifest URL
        timeout: Request timeout in seconds (None leaves the transport default)

    Returns:
        Version entries in manifest order

    Raises:
        FetchError: On network failure or HTTP error status
        ParseError: If the body is not a valid manifest

    Example:
        >>> versions = fetch_manifest()
        >>> versions[0].version
        '1.86.0'
    """
    logger.info("Downloading versions-manifest.json...")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except RequestException as e:
        raise FetchError(f"Failed to download versions manifest: {e}", url=url) from e

    text = response.text
    logger.debug(f"Downloaded data: {text}")

    return loads_manifest(text)
