"""
Pytest configuration and shared fixtures for BoostKit tests.
"""

import io
import logging
import tarfile

import pytest

from boostkit.ci.actions import ActionsHost


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def host() -> ActionsHost:
    """Actions host isolated from the real process environment."""
    return ActionsHost(environ={}, stream=io.StringIO())


@pytest.fixture
def sample_manifest_data() -> list:
    """
    Raw manifest JSON with several releases and packages.

    1.82.0 carries linux and win32 packages, with and without toolset and
    platform_version; 1.81.0 carries a single linux package.
    """
    return [
        {
            "version": "1.82.0",
            "files": [
                {
                    "filename": "boost-1.82.0-win32-2022-msvc-x64.tar.gz",
                    "platform": "win32",
                    "platform_version": "2022",
                    "toolset": "msvc",
                    "arch": "x64",
                    "download_url": "https://example.com/boost-1.82.0-win32-2022-msvc-x64.tar.gz",
                },
                {
                    "filename": "boost-1.82.0-linux-20.04-gcc-x64.tar.gz",
                    "platform": "linux",
                    "platform_version": "20.04",
                    "toolset": "gcc",
                    "arch": "x64",
                    "download_url": "https://example.com/boost-1.82.0-linux-20.04-gcc-x64.tar.gz",
                },
                {
                    "filename": "boost-1.82.0-linux-22.04-gcc-x64.tar.gz",
                    "platform": "linux",
                    "platform_version": "22.04",
                    "toolset": "gcc",
                    "arch": "x64",
                    "download_url": "https://example.com/boost-1.82.0-linux-22.04-gcc-x64.tar.gz",
                },
                {
                    "filename": "boost-1.82.0-linux-22.04-clang-x64.tar.gz",
                    "platform": "linux",
                    "platform_version": "22.04",
                    "toolset": "clang",
                    "download_url": "https://example.com/boost-1.82.0-linux-22.04-clang-x64.tar.gz",
                },
            ],
        },
        {
            "version": "1.81.0",
            "files": [
                {
                    "filename": "boost_1_81_0.tar.gz",
                    "platform": "linux",
                    "download_url": "https://example.com/boost_1_81_0.tar.gz",
                },
            ],
        },
    ]


def make_tarball(top_dir: str) -> bytes:
    """Build a .tar.gz holding ``<top_dir>/boost/version.hpp``."""
    content = b"#define BOOST_VERSION 108200\n"
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        info = tarfile.TarInfo(f"{top_dir}/boost/version.hpp")
        info.size = len(content)
        tar.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


@pytest.fixture
def tarball_factory():
    """Factory building small .tar.gz archives by top-level directory name."""
    return make_tarball


@pytest.fixture
def boost_tarball() -> bytes:
    """A tiny boost_1_82_0.tar.gz archive."""
    return make_tarball("boost_1_82_0")
