"""
Source Adapters for the catalog document.

Adapters provide a unified interface for retrieving the document:
- HTTP sources (remote JSON document, httpx)
- File sources (JSON document on disk)

Usage:
    from senior_events.ingestion.adapters import HTTPSourceAdapter, HTTPAdapterConfig

    adapter = HTTPSourceAdapter(HTTPAdapterConfig(source_id="remote", source_type=SourceType.HTTP, url=url))
    result = await adapter.fetch()
"""

from .base_adapter import (
    AdapterConfig,
    BaseSourceAdapter,
    FetchResult,
    SourceType,
    parse_document,
)
from .file_adapter import FileAdapterConfig, FileSourceAdapter
from .http_adapter import HTTPAdapterConfig, HTTPSourceAdapter

__all__ = [
    "AdapterConfig",
    "BaseSourceAdapter",
    "SourceType",
    "FetchResult",
    "parse_document",
    "FileAdapterConfig",
    "FileSourceAdapter",
    "HTTPAdapterConfig",
    "HTTPSourceAdapter",
]
