"""
Unit tests for the document source adapters.

Tests for parse_document, HTTPSourceAdapter and FileSourceAdapter.
"""

import asyncio
import json

import httpx
import pytest

from senior_events.exceptions import MalformedDocument
from senior_events.ingestion.adapters import (
    FileAdapterConfig,
    FileSourceAdapter,
    HTTPAdapterConfig,
    HTTPSourceAdapter,
    SourceType,
    parse_document,
)

# =============================================================================
# TEST DATA
# =============================================================================


MOCK_DOCUMENT = {
    "eventos_brasil": {"Sarau": {"local": "Recife, Brasil"}},
    "eventos_internacionais": {},
    "tendencias_2025_2026": {"gamificacao": ["Pontos"]},
}

# Nested deeper than the JSON decoder can recurse
DEEPLY_NESTED_BODY = '{"eventos_brasil": ' + "[" * 200000 + "]" * 200000 + "}"


# =============================================================================
# FIXTURES
# =============================================================================


def make_http_adapter(handler):
    """Create an HTTP adapter backed by an httpx.MockTransport."""
    config = HTTPAdapterConfig(
        source_id="remote",
        source_type=SourceType.HTTP,
        url="https://catalog.example.org/benchmark.json",
        request_timeout=1.0,
    )
    return HTTPSourceAdapter(config, transport=httpx.MockTransport(handler))


@pytest.fixture
def file_config(tmp_path):
    """Create a file adapter config pointing into tmp_path."""
    return FileAdapterConfig(
        source_id="local",
        source_type=SourceType.FILE,
        path=tmp_path / "benchmark.json",
    )


# =============================================================================
# TEST CLASSES
# =============================================================================


class TestParseDocument:
    """Tests for parse_document."""

    def test_valid_text(self):
        """Should decode a valid JSON document."""
        assert parse_document("t", json.dumps(MOCK_DOCUMENT)) == MOCK_DOCUMENT

    def test_valid_object(self):
        """Should accept an already decoded document."""
        assert parse_document("t", MOCK_DOCUMENT) is MOCK_DOCUMENT

    def test_one_region_is_enough(self):
        """Should accept a document carrying only one region."""
        assert parse_document("t", {"eventos_internacionais": {}})

    @pytest.mark.parametrize(
        "body",
        [
            "{not json",
            "[1, 2, 3]",
            "{}",
            '{"tendencias_2025_2026": {}}',
            '{"eventos_brasil": ["a", "b"]}',
            '{"eventos_brasil": {}, "tendencias_2025_2026": {"x": 3}}',
        ],
    )
    def test_malformed(self, body):
        """Should raise MalformedDocument for bad bodies."""
        with pytest.raises(MalformedDocument):
            parse_document("t", body)

    def test_deeply_nested(self):
        """Should report a body nested past the decoder limit as malformed."""
        with pytest.raises(MalformedDocument, match="invalid JSON"):
            parse_document("t", DEEPLY_NESTED_BODY)


class TestHTTPAdapterConfig:
    """Tests for HTTPAdapterConfig."""

    def test_source_type_forced(self):
        """Should always be an HTTP source."""
        config = HTTPAdapterConfig(source_id="r", source_type=SourceType.FILE, url="https://x")
        assert config.source_type == SourceType.HTTP

    def test_url_required(self):
        """Should reject a config without url."""
        with pytest.raises(ValueError):
            HTTPSourceAdapter(HTTPAdapterConfig(source_id="r", source_type=SourceType.HTTP))


class TestHTTPSourceAdapter:
    """Tests for HTTPSourceAdapter.fetch."""

    def test_fetch_success(self):
        """Should return the document on 200."""
        adapter = make_http_adapter(lambda request: httpx.Response(200, json=MOCK_DOCUMENT))

        result = asyncio.run(adapter.fetch())

        assert result.success is True
        assert result.source_type == SourceType.HTTP
        assert result.document == MOCK_DOCUMENT
        assert result.errors == []

    def test_fetch_sends_accept_header(self):
        """Should ask for JSON."""
        seen = {}

        def handler(request):
            seen["accept"] = request.headers["accept"]
            return httpx.Response(200, json=MOCK_DOCUMENT)

        asyncio.run(make_http_adapter(handler).fetch())
        assert seen["accept"] == "application/json"

    def test_fetch_non_success_status(self):
        """Should fail on a non-success status."""
        adapter = make_http_adapter(lambda request: httpx.Response(404, text="not found"))

        result = asyncio.run(adapter.fetch())

        assert result.success is False
        assert result.document is None
        assert "HTTP 404" in result.errors[0]

    def test_fetch_network_error(self):
        """Should fail on a connection error."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = asyncio.run(make_http_adapter(handler).fetch())

        assert result.success is False
        assert "connection refused" in result.errors[0]

    def test_fetch_malformed_body(self):
        """Should fail on a malformed body."""
        adapter = make_http_adapter(lambda request: httpx.Response(200, text="<html></html>"))

        result = asyncio.run(adapter.fetch())

        assert result.success is False
        assert "malformed" in result.errors[0]

    def test_fetch_tracks_timestamps(self):
        """Should track fetch timestamps."""
        adapter = make_http_adapter(lambda request: httpx.Response(200, json=MOCK_DOCUMENT))

        result = asyncio.run(adapter.fetch())

        assert result.fetch_started_at <= result.fetch_ended_at
        assert result.duration_seconds >= 0.0


class TestFileSourceAdapter:
    """Tests for FileSourceAdapter.fetch."""

    def test_fetch_success(self, file_config):
        """Should read the document from disk."""
        file_config.path.write_text(json.dumps(MOCK_DOCUMENT), encoding="utf-8")

        result = asyncio.run(FileSourceAdapter(file_config).fetch())

        assert result.success is True
        assert result.source_type == SourceType.FILE
        assert result.document == MOCK_DOCUMENT

    def test_fetch_missing_file(self, file_config):
        """Should fail when the file does not exist."""
        result = asyncio.run(FileSourceAdapter(file_config).fetch())

        assert result.success is False
        assert "file not found" in result.errors[0]

    def test_fetch_malformed_file(self, file_config):
        """Should fail on invalid JSON."""
        file_config.path.write_text("{ broken", encoding="utf-8")

        result = asyncio.run(FileSourceAdapter(file_config).fetch())

        assert result.success is False
        assert "invalid JSON" in result.errors[0]

    def test_fetch_deeply_nested_file(self, file_config):
        """Should fail, not raise, when the body nests past the decoder limit."""
        file_config.path.write_text(DEEPLY_NESTED_BODY, encoding="utf-8")

        result = asyncio.run(FileSourceAdapter(file_config).fetch())

        assert result.success is False
        assert "malformed" in result.errors[0]
