"""
Event Catalog Store.

Resolves which catalog document the session renders. The load chain is
explicit and tagged:

1. Remote document (HTTP)      -> LoadOutcome.REMOTE_OK
2. Local document (JSON file)  -> LoadOutcome.LOCAL_OK
3. Embedded fallback document  -> LoadOutcome.FALLBACK

Failures along the chain are logged as warnings and recorded on the
resulting CatalogState; ``load()`` itself never raises.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from senior_events.catalog.fallback import FALLBACK_DOCUMENT
from senior_events.configs.config import UIConfig
from senior_events.configs.settings import Settings
from senior_events.ingestion.adapters import (
    BaseSourceAdapter,
    FileAdapterConfig,
    FileSourceAdapter,
    HTTPAdapterConfig,
    HTTPSourceAdapter,
    SourceType,
)
from senior_events.ingestion.normalization.field_normalizer import FieldNormalizer
from senior_events.monitoring.logging import with_context
from senior_events.schemas.event import CatalogState, LoadOutcome

logger = logging.getLogger(__name__)

_OUTCOME_BY_SOURCE_TYPE = {
    SourceType.HTTP: LoadOutcome.REMOTE_OK,
    SourceType.FILE: LoadOutcome.LOCAL_OK,
}


def build_adapters(settings: Settings) -> list[BaseSourceAdapter]:
    """Create the ordered adapter chain described by the settings."""
    adapters: list[BaseSourceAdapter] = []
    if settings.remote_enabled:
        adapters.append(
            HTTPSourceAdapter(
                HTTPAdapterConfig(
                    source_id="remote",
                    source_type=SourceType.HTTP,
                    url=settings.DATA_SOURCE_URL.strip(),
                    request_timeout=settings.REQUEST_TIMEOUT,
                )
            )
        )
    adapters.append(
        FileSourceAdapter(
            FileAdapterConfig(
                source_id="local",
                source_type=SourceType.FILE,
                path=settings.DATA_FILE_PATH,
            )
        )
    )
    return adapters


def normalize_trends(raw_trends: Any) -> dict[str, list[str]]:
    """Turn ``{category: [items] | item}`` into ``{category: [items]}``."""
    if not isinstance(raw_trends, dict):
        return {}

    trends: dict[str, list[str]] = {}
    for category, items in raw_trends.items():
        if isinstance(items, (list, tuple)):
            values = [str(item) for item in items if item is not None and str(item).strip()]
        elif items is None or not str(items).strip():
            values = []
        else:
            values = [str(items)]
        if values:
            trends[str(category)] = values
    return trends


class CatalogStore:
    """
    Holds the session's catalog.

    The catalog is loaded once; later ``load()`` calls return the same state.
    """

    def __init__(
        self,
        settings: Settings,
        ui_config: UIConfig,
        adapters: list[BaseSourceAdapter] | None = None,
        normalizer: FieldNormalizer | None = None,
        fallback_document: dict[str, Any] | None = None,
    ) -> None:
        self.settings = settings
        self.ui_config = ui_config
        self.adapters = adapters if adapters is not None else build_adapters(settings)
        self.normalizer = normalizer or FieldNormalizer()
        self.fallback_document = (
            fallback_document if fallback_document is not None else FALLBACK_DOCUMENT
        )
        self._state: CatalogState | None = None

    @property
    def state(self) -> CatalogState | None:
        return self._state

    async def load(self) -> CatalogState:
        """
        Run the load chain once and return the catalog.

        Returns
        -------
        CatalogState
            Catalog built from the first successful source, or from the
            embedded fallback document.
        """
        if self._state is not None:
            return self._state

        errors: list[str] = []
        for adapter in self.adapters:
            result = await adapter.fetch()
            if result.success and result.document is not None:
                outcome = _OUTCOME_BY_SOURCE_TYPE[adapter.source_type]
                logger.info(
                    f"Catalog loaded from '{adapter.source_id}' "
                    f"in {result.duration_seconds:.2f}s"
                )
                self._state = self.build_state(result.document, outcome, errors)
                return self._state
            errors.extend(result.errors)

        with_context(logger, source="fallback").warning(
            f"No catalog source available ({len(errors)} failure(s)); using embedded fallback"
        )
        self._state = self.build_state(
            copy.deepcopy(self.fallback_document), LoadOutcome.FALLBACK, errors
        )
        return self._state

    def build_state(
        self,
        document: dict[str, Any],
        outcome: LoadOutcome,
        errors: list[str] | None = None,
    ) -> CatalogState:
        """Normalize a shape-checked document into a CatalogState."""
        regions = {
            region_id: self.normalizer.normalize_region(document.get(region.document_key))
            for region_id, region in self.ui_config.regions.items()
        }
        trends = normalize_trends(document.get(self.ui_config.trends.document_key))

        state = CatalogState(
            source=outcome.source,
            outcome=outcome,
            regions=regions,
            trends=trends,
            errors=list(errors or []),
        )
        logger.info(
            f"Catalog ready: outcome={outcome.value} events={state.total_events} "
            f"trend_categories={len(trends)}"
        )
        return state
