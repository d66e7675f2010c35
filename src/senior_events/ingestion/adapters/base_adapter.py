"""
Base Source Adapter.

Abstract base class defining the interface for catalog document sources.
Implements the Strategy pattern for different retrieval strategies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
import json
import logging

from pydantic import ValidationError

from senior_events.exceptions import CatalogError, MalformedDocument
from senior_events.schemas.event import CatalogDocument

REGION_DOCUMENT_KEYS = ("eventos_brasil", "eventos_internacionais")


class SourceType(str, Enum):
    """Type of data source."""
    HTTP = "http"
    FILE = "file"


@dataclass
class FetchResult:
    """
    Result of a document fetch.

    Provides a unified result format for remote and local sources.
    """
    success: bool
    source_type: SourceType
    source_id: str
    document: Optional[Dict[str, Any]] = None
    errors: List[str] = field(default_factory=list)
    fetch_started_at: Optional[datetime] = None
    fetch_ended_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> float:
        """Calculate fetch duration."""
        if self.fetch_started_at and self.fetch_ended_at:
            return (self.fetch_ended_at - self.fetch_started_at).total_seconds()
        return 0.0


@dataclass
class AdapterConfig:
    """
    Base configuration for source adapters.

    Extended by specific adapter types (HTTP, file).
    """
    source_id: str
    source_type: SourceType
    request_timeout: float = 10.0


def parse_document(source_id: str, body: Any) -> Dict[str, Any]:
    """
    Decode and shape-check a catalog document.

    Args:
        source_id: Adapter id used in error messages
        body: Raw text/bytes or an already decoded object

    Returns:
        The decoded document

    Raises:
        MalformedDocument: If the body is not JSON, not an object, has no
            region keys, or a region/trends value has the wrong shape
    """
    if isinstance(body, (str, bytes, bytearray)):
        try:
            body = json.loads(body)
        # Pathologically nested bodies exhaust the decoder's recursion limit
        except (ValueError, RecursionError) as e:
            raise MalformedDocument(source_id, f"invalid JSON: {e}") from e

    if not isinstance(body, dict):
        raise MalformedDocument(source_id, f"expected an object, got {type(body).__name__}")

    if not any(key in body for key in REGION_DOCUMENT_KEYS):
        raise MalformedDocument(source_id, f"none of {list(REGION_DOCUMENT_KEYS)} present")

    try:
        CatalogDocument.model_validate(body)
    except ValidationError as e:
        raise MalformedDocument(source_id, str(e)) from e

    return body


class BaseSourceAdapter(ABC):
    """
    Abstract base class for document sources.

    Subclasses implement ``_retrieve()`` and raise CatalogError subclasses on
    failure; ``fetch()`` turns the outcome into a FetchResult and never raises.
    """

    def __init__(self, config: AdapterConfig):
        """
        Initialize the adapter.

        Args:
            config: AdapterConfig with source-specific settings
        """
        self.config = config
        self.logger = logging.getLogger(f"senior_events.adapter.{config.source_id}")
        self._validate_config()

    @property
    def source_type(self) -> SourceType:
        """Get the source type."""
        return self.config.source_type

    @property
    def source_id(self) -> str:
        """Get the source identifier."""
        return self.config.source_id

    async def fetch(self) -> FetchResult:
        """
        Retrieve and shape-check the catalog document.

        Returns:
            FetchResult; ``success`` is False with ``errors`` filled on any failure
        """
        started = datetime.now(timezone.utc)
        errors: List[str] = []
        document = None

        try:
            body = await self._retrieve()
            document = parse_document(self.source_id, body)
        except CatalogError as e:
            self.logger.warning(f"Catalog source unavailable: {e}")
            errors.append(str(e))

        return FetchResult(
            success=document is not None,
            source_type=self.source_type,
            source_id=self.source_id,
            document=document,
            errors=errors,
            fetch_started_at=started,
            fetch_ended_at=datetime.now(timezone.utc),
        )

    @abstractmethod
    async def _retrieve(self) -> Any:
        """
        Return the raw document body.

        Raises:
            DataSourceUnavailable: When the source cannot be reached or read
        """
        pass

    @abstractmethod
    def _validate_config(self) -> None:
        """
        Validate adapter-specific configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source_id={self.source_id!r})"
