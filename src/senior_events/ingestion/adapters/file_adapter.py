"""
File Source Adapter.

Reads the catalog document shipped next to the page (local JSON file).
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from senior_events.exceptions import DataSourceUnavailable

from .base_adapter import AdapterConfig, BaseSourceAdapter, SourceType


@dataclass
class FileAdapterConfig(AdapterConfig):
    """Configuration for local file sources."""

    path: Path = Path("benchmark_eventos_seniores.json")
    encoding: str = "utf-8"

    def __post_init__(self):
        """Set source type to FILE."""
        self.source_type = SourceType.FILE
        self.path = Path(self.path)


class FileSourceAdapter(BaseSourceAdapter):
    """Read the catalog document from disk."""

    @property
    def file_config(self) -> FileAdapterConfig:
        """Get typed config."""
        return self.config  # type: ignore[return-value]

    def _validate_config(self) -> None:
        if not str(self.file_config.path):
            raise ValueError("File adapter requires a path")

    async def _retrieve(self) -> Any:
        path = self.file_config.path
        if not path.is_file():
            raise DataSourceUnavailable(self.source_id, f"file not found: {path}")
        try:
            return await asyncio.to_thread(path.read_text, encoding=self.file_config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceUnavailable(self.source_id, f"cannot read {path}: {e}") from e
