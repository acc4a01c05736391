"""Tests for solcver.catalog — release catalog fetch and lookups."""
import os
import sys
import pytest
import requests
from unittest.mock import patch, MagicMock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from solcver import catalog
from solcver.catalog import CompilersList
from solcver.exceptions import CatalogFetchFailure, ParseError, VersionNotFound
from solcver.versioning import (
    ExactRange,
    MetadataAbsentRange,
    MetadataPresentVersionAbsentRange,
    VersionNumber,
    parse,
)


def _response(status=200, json_data=None, text=""):
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.text = text
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data
    return resp


class TestGetVersions:
    @patch("solcver.catalog.requests.get")
    def test_parses_list(self, mock_get, sample_catalog_json):
        mock_get.return_value = _response(json_data=sample_catalog_json)
        result = catalog.get_versions()
        assert result.latest_release == "0.8.4"
        assert result.releases["0.8.4"] == "soljson-v0.8.4+commit.c7e474f2.js"
        url = mock_get.call_args[0][0]
        assert url == catalog.COMPILERS_LIST_URL

    @patch("solcver.catalog.requests.get")
    def test_url_and_timeout_from_env(self, mock_get, monkeypatch, sample_catalog_json):
        monkeypatch.setenv("SOLCVER_COMPILERS_LIST_URL", "https://mirror.example/list.json")
        monkeypatch.setenv("SOLCVER_CATALOG_TIMEOUT", "3")
        mock_get.return_value = _response(json_data=sample_catalog_json)
        catalog.get_versions()
        assert mock_get.call_args[0][0] == "https://mirror.example/list.json"
        assert mock_get.call_args[1]["timeout"] == 3.0

    @patch("solcver.catalog.requests.get")
    def test_http_error_status(self, mock_get):
        mock_get.return_value = _response(status=503, text="down")
        with pytest.raises(CatalogFetchFailure) as exc:
            catalog.get_versions()
        assert "503" in str(exc.value)
        assert "down" in str(exc.value)
        assert exc.value.details["status_code"] == 503
        assert exc.value.details["body"] == "down"
        assert exc.value.status_code == 502

    @patch("solcver.catalog.requests.get")
    def test_transport_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(CatalogFetchFailure) as exc:
            catalog.get_versions()
        assert "connection refused" in exc.value.message
        assert isinstance(exc.value.__cause__, requests.ConnectionError)

    @patch("solcver.catalog.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = _response(json_data=ValueError("Expecting value"))
        with pytest.raises(CatalogFetchFailure):
            catalog.get_versions()

    @patch("solcver.catalog.requests.get")
    def test_non_object_json(self, mock_get):
        mock_get.return_value = _response(json_data=["0.8.4"])
        with pytest.raises(CatalogFetchFailure):
            catalog.get_versions()


class TestResolveFullIdentifier:
    def test_strips_wrapper(self):
        compilers = CompilersList(releases={"0.8.4": "prefix-abcdef123.suffix"}, latest_release="0.8.4")
        assert catalog.resolve_full_identifier("0.8.4", compilers) == "abcdef123"

    def test_soljson_build(self, sample_catalog):
        assert catalog.resolve_full_identifier("0.8.4", sample_catalog) == "v0.8.4+commit.c7e474f2"

    def test_unwrapped_value_returned_as_is(self):
        compilers = CompilersList(releases={"0.8.4": "v0.8.4+commit.c7e474f2"})
        assert catalog.resolve_full_identifier("0.8.4", compilers) == "v0.8.4+commit.c7e474f2"

    def test_dashed_identifier_without_wrapper(self):
        compilers = CompilersList(releases={"0.8.4": "solc-linux-amd64-v0.8.4+commit.c7e474f2"})
        assert catalog.resolve_full_identifier("0.8.4", compilers) == "solc-linux-amd64-v0.8.4+commit.c7e474f2"

    def test_missing_version(self):
        compilers = CompilersList(releases={"0.8.3": "prefix-abc.suffix"})
        with pytest.raises(VersionNotFound) as exc:
            catalog.resolve_full_identifier("0.8.4", compilers)
        assert exc.value.details["version"] == "0.8.4"
        assert exc.value.status_code == 404

    def test_empty_entry_is_missing(self, sample_catalog):
        with pytest.raises(VersionNotFound):
            catalog.resolve_full_identifier("0.1.1", sample_catalog)

    def test_malformed_short_version(self, sample_catalog):
        with pytest.raises(ParseError):
            catalog.resolve_full_identifier("0.8", sample_catalog)

    @patch("solcver.catalog.requests.get")
    def test_fetches_when_no_catalog_given(self, mock_get, sample_catalog_json):
        mock_get.return_value = _response(json_data=sample_catalog_json)
        assert catalog.resolve_full_identifier("0.4.26") == "v0.4.26+commit.4563c3fc"
        assert mock_get.call_count == 1

    @patch("solcver.catalog.requests.get")
    def test_version_number_delegates(self, mock_get):
        mock_get.return_value = _response(json_data={"releases": {"0.8.4": "prefix-abcdef123.suffix"}, "latestRelease": "0.8.4"})
        assert VersionNumber(0, 8, 4).resolve_full_identifier() == "abcdef123"
        with pytest.raises(VersionNotFound):
            VersionNumber(0, 8, 5).resolve_full_identifier()
        # fetched fresh for every lookup
        assert mock_get.call_count == 2


class TestEnumeration:
    def test_latest_release(self, sample_catalog):
        assert catalog.latest_release(sample_catalog) == VersionNumber(0, 8, 4)

    @pytest.mark.parametrize("latest", ["", "nightly"])
    def test_latest_release_unusable(self, latest):
        with pytest.raises(CatalogFetchFailure):
            catalog.latest_release(CompilersList(releases={}, latest_release=latest))

    def test_list_releases_sorted_and_skips_empty(self, sample_catalog):
        versions = [v.format() for v in catalog.list_releases(sample_catalog)]
        assert versions == ["0.3.6", "0.4.6", "0.4.7", "0.4.10", "0.4.26", "0.5.8", "0.5.9", "0.8.4"]

    def test_list_releases_skips_bad_keys(self):
        compilers = CompilersList(releases={"nightly": "soljson-nightly.js", "0.8.4": "soljson-v0.8.4.js"})
        assert catalog.list_releases(compilers) == [VersionNumber(0, 8, 4)]

    def test_matching_metadata_absent(self, sample_catalog):
        found = catalog.matching_releases(MetadataAbsentRange(), sample_catalog)
        assert [v.format() for v in found] == ["0.3.6", "0.4.6"]

    def test_matching_metadata_present(self, sample_catalog):
        found = catalog.matching_releases(MetadataPresentVersionAbsentRange(), sample_catalog)
        assert [v.format() for v in found] == ["0.4.7", "0.4.10", "0.4.26", "0.5.8"]

    def test_matching_exact(self, sample_catalog):
        assert catalog.matching_releases(ExactRange(parse("0.5.9")), sample_catalog) == [parse("0.5.9")]
        assert catalog.matching_releases(ExactRange(parse("0.7.0")), sample_catalog) == []
