"""
Tests for manifest decoding and retrieval.
"""

import json

import pytest
import responses
from requests.exceptions import ConnectionError

from boostkit.core.exceptions import FetchError, ParseError
from boostkit.install.manifest import (
    PackageEntry,
    VersionEntry,
    fetch_manifest,
    loads_manifest,
    parse_manifest,
)

MANIFEST_URL = "https://example.com/versions-manifest.json"


class TestParseManifest:
    """Tests for parse_manifest function."""

    def test_decodes_entries_in_order(self, sample_manifest_data):
        """Test versions and files keep manifest order."""
        manifest = parse_manifest(sample_manifest_data)

        assert [v.version for v in manifest] == ["1.82.0", "1.81.0"]
        assert isinstance(manifest[0], VersionEntry)
        assert [f.platform for f in manifest[0].files] == [
            "win32",
            "linux",
            "linux",
            "linux",
        ]

    def test_optional_fields(self, sample_manifest_data):
        """Test toolset/platform_version are None when absent."""
        manifest = parse_manifest(sample_manifest_data)
        entry = manifest[1].files[0]

        assert entry == PackageEntry(
            platform="linux",
            download_url="https://example.com/boost_1_81_0.tar.gz",
            filename="boost_1_81_0.tar.gz",
        )
        assert entry.toolset is None
        assert entry.platform_version is None

    def test_unknown_keys_ignored(self):
        """Test extra keys in entries do not break decoding."""
        manifest = parse_manifest(
            [
                {
                    "version": "1.82.0",
                    "stable": True,
                    "files": [
                        {
                            "platform": "linux",
                            "download_url": "http://x/boost.tar.gz",
                            "filename": "boost.tar.gz",
                            "checksum": "abc",
                        }
                    ],
                }
            ]
        )
        assert manifest[0].files[0].filename == "boost.tar.gz"

    def test_empty_manifest(self):
        """Test an empty array decodes to an empty manifest."""
        assert parse_manifest([]) == []

    def test_not_a_list(self):
        """Test a top-level object is rejected."""
        with pytest.raises(ParseError, match="JSON array"):
            parse_manifest({"version": "1.82.0"})

    @pytest.mark.parametrize("missing", ["version", "files"])
    def test_missing_version_fields(self, missing):
        """Test required version entry fields."""
        entry = {"version": "1.82.0", "files": []}
        del entry[missing]

        with pytest.raises(ParseError, match=missing):
            parse_manifest([entry])

    @pytest.mark.parametrize("missing", ["platform", "download_url", "filename"])
    def test_missing_package_fields(self, missing):
        """Test required package entry fields."""
        package = {
            "platform": "linux",
            "download_url": "http://x/boost.tar.gz",
            "filename": "boost.tar.gz",
        }
        del package[missing]

        with pytest.raises(ParseError, match=missing):
            parse_manifest([{"version": "1.82.0", "files": [package]}])

    def test_wrong_field_type(self):
        """Test non-string fields are rejected."""
        with pytest.raises(ParseError, match="must be a string"):
            parse_manifest([{"version": 1.82, "files": []}])

    def test_files_not_a_list(self):
        """Test files must be an array."""
        with pytest.raises(ParseError, match="must be a list"):
            parse_manifest([{"version": "1.82.0", "files": {}}])


class TestLoadsManifest:
    """Tests for loads_manifest function."""

    def test_invalid_json(self):
        """Test malformed JSON raises ParseError."""
        with pytest.raises(ParseError, match="Invalid JSON"):
            loads_manifest("[{not json")


class TestFetchManifest:
    """Tests for fetch_manifest function."""

    @responses.activate
    def test_fetch(self, sample_manifest_data):
        """Test manifest is downloaded and decoded."""
        responses.add(
            responses.GET, MANIFEST_URL, body=json.dumps(sample_manifest_data)
        )

        manifest = fetch_manifest(MANIFEST_URL)

        assert len(manifest) == 2
        assert len(responses.calls) == 1

    @responses.activate
    def test_network_error(self):
        """Test transport failures raise FetchError with the message."""
        responses.add(
            responses.GET, MANIFEST_URL, body=ConnectionError("name resolution failed")
        )

        with pytest.raises(FetchError, match="name resolution failed") as exc_info:
            fetch_manifest(MANIFEST_URL)

        assert exc_info.value.url == MANIFEST_URL
        assert len(responses.calls) == 1

    @responses.activate
    def test_http_error(self):
        """Test HTTP error status raises FetchError."""
        responses.add(responses.GET, MANIFEST_URL, status=500, body="oops")

        with pytest.raises(FetchError):
            fetch_manifest(MANIFEST_URL)

    @responses.activate
    def test_malformed_body(self):
        """Test malformed JSON body raises ParseError, not FetchError."""
        responses.add(responses.GET, MANIFEST_URL, body="<html>not json</html>")

        with pytest.raises(ParseError):
            fetch_manifest(MANIFEST_URL)
