"""
Streaming download of Boost archives with progress reporting.

A single attempt is made: there is no retry, no resume and no checksum
verification. Bytes are written to disk as they arrive and progress is
reported through an optional callback.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import requests
from requests.exceptions import RequestException
from urllib3.exceptions import HTTPError as TransportError

from boostkit.core.exceptions import DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


@dataclass
class DownloadProgress:
    """Progress information for a download."""

    bytes_downloaded: int
    total_bytes: int  # 0 when the server sent no content-length
    percentage: float
    speed_bps: float  # bytes per second

    def __str__(self) -> str:
        """Format progress for display."""
        return format_progress(self)


def download_file(
    url: str,
    destination: Union[str, Path],
    progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    timeout: Optional[float] = None,
    progress_interval: float = 0.5,
) -> Path:
    """
    Stream a file from URL to destination.

    The destination is created or truncated. The function returns only after
    the file has been flushed and closed; ``progress_callback`` is never
    invoked after it returns or raises.

    Args:
        url: URL to download from
        destination: Local path to save file
        progress_callback: Optional callback for progress updates
        timeout: Request timeout in seconds (None leaves the transport default)
        progress_interval: Minimum seconds between two progress reports

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: If the transfer fails
        ValueError: If URL or destination is empty

    Example:
        >>> def on_progress(progress):
        ...     print(f"Download progress: {progress.percentage}%")
        >>> download_file(
        ...     "https://example.com/boost_1_82_0.tar.gz",
        ...     Path("/usr/boost/boost_1_82_0.tar.gz"),
        ...     progress_callback=on_progress,
        ... )
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if not destination:
        raise ValueError("Destination path cannot be empty")

    destination = Path(destination)
    logger.info(f"Downloading from {url}")

    try:
        _download_with_progress(
            url, destination, progress_callback, timeout, progress_interval
        )
    except (RequestException, TransportError, OSError) as e:
        logger.error(f"Error during download: {e}")
        _remove_partial(destination)
        raise DownloadError(f"Failed to download {url}: {e}", url=url) from e

    logger.info(f"Download complete: {destination}")
    return destination


def _download_with_progress(
    url: str,
    destination: Path,
    progress_callback: Optional[Callable[[DownloadProgress], None]],
    timeout: Optional[float],
    progress_interval: float,
) -> None:
    """
    Perform the streaming GET and write chunks to disk.

    This is an internal function called by download_file().
    """
    with requests.get(url, stream=True, timeout=timeout) as response:
        response.raise_for_status()

        total_size = _content_length(response)

        downloaded = 0
        start_time = time.time()
        last_progress_time = 0.0

        with open(destination, "wb") as f:
            # Raw bytes as served; Content-Encoding is not undone
            for chunk in response.raw.stream(CHUNK_SIZE, decode_content=False):
                if not chunk:
                    continue
                f.write(chunk)
                downloaded += len(chunk)

                if not progress_callback:
                    continue

                # Throttle reports, but always report the final chunk
                current_time = time.time()
                if (
                    current_time - last_progress_time >= progress_interval
                    or downloaded == total_size
                ):
                    elapsed = current_time - start_time
                    progress_callback(
                        DownloadProgress(
                            bytes_downloaded=downloaded,
                            total_bytes=total_size,
                            percentage=(downloaded / total_size * 100)
                            if total_size > 0
                            else 0.0,
                            speed_bps=downloaded / elapsed if elapsed > 0 else 0.0,
                        )
                    )
                    last_progress_time = current_time


def _content_length(response) -> int:
    """Declared body size in bytes, 0 when missing or unparsable."""
    try:
        return int(response.headers.get("content-length") or 0)
    except ValueError:
        logger.debug(
            f"Ignoring invalid content-length: {response.headers.get('content-length')}"
        )
        return 0


def _remove_partial(destination: Path) -> None:
    """Remove a partially written file after a failed transfer."""
    if not destination.exists():
        return
    try:
        destination.unlink()
        logger.debug(f"Removed partial download: {destination}")
    except OSError as e:
        logger.warning(f"Failed to remove partial download {destination}: {e}")


def format_progress(progress: DownloadProgress) -> str:
    """
    Format progress for display.

    Args:
        progress: Download progress information

    Returns:
        Formatted progress string

    Example:
        >>> progress = DownloadProgress(52428800, 104857600, 50.0, 1048576)
        >>> print(format_progress(progress))
        Download progress: 50.0% (50.0/100.0 MB at 1.0 MB/s)
    """
    mb_downloaded = progress.bytes_downloaded / 1024 / 1024
    mb_total = progress.total_bytes / 1024 / 1024
    speed_mbps = progress.speed_bps / 1024 / 1024

    if progress.total_bytes > 0:
        return (
            f"Download progress: {progress.percentage:.1f}% "
            f"({mb_downloaded:.1f}/{mb_total:.1f} MB at {speed_mbps:.1f} MB/s)"
        )
    else:
        # Unknown total size
        return f"Download progress: {mb_downloaded:.1f} MB at {speed_mbps:.1f} MB/s"
