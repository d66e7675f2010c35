"""
HTTP Source Adapter.

Retrieves the catalog document from a URL. One attempt only: any network
error or non-success status makes the source unavailable.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from senior_events.exceptions import DataSourceUnavailable

from .base_adapter import AdapterConfig, BaseSourceAdapter, SourceType

logger = logging.getLogger(__name__)


@dataclass
class HTTPAdapterConfig(AdapterConfig):
    """Configuration for HTTP document sources."""

    url: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Set source type to HTTP."""
        self.source_type = SourceType.HTTP


class HTTPSourceAdapter(BaseSourceAdapter):
    """Fetch the catalog document over HTTP(S) with httpx."""

    def __init__(
        self,
        config: HTTPAdapterConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP adapter.

        Args:
            config: HTTPAdapterConfig with the document URL
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        self.transport = transport
        super().__init__(config)

    @property
    def http_config(self) -> HTTPAdapterConfig:
        """Get typed config."""
        return self.config  # type: ignore[return-value]

    def _validate_config(self) -> None:
        """Validate HTTP configuration."""
        if not self.http_config.url:
            raise ValueError("HTTP adapter requires a url")

    def _build_client(self) -> httpx.AsyncClient:
        headers = {
            "Accept": "application/json",
            **self.http_config.headers,
        }
        return httpx.AsyncClient(
            headers=headers,
            timeout=self.http_config.request_timeout,
            transport=self.transport,
            follow_redirects=True,
        )

    async def _retrieve(self) -> Any:
        url = self.http_config.url
        try:
            async with self._build_client() as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise DataSourceUnavailable(
                self.source_id, f"HTTP {e.response.status_code} from {url}"
            ) from e
        except httpx.HTTPError as e:
            raise DataSourceUnavailable(self.source_id, f"request to {url} failed: {e}") from e
