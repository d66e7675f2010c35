"""
Filter Engine.

Free-text filtering over the search index. Each region grid is evaluated
independently; a region with no visible card under a non-empty query shows
its empty-state indicator.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Set

from senior_events.ingestion.search_index import SearchIndex
from senior_events.rendering.surface import RenderingSurface

logger = logging.getLogger(__name__)


@dataclass
class FilterState:
    """Current filter query, lowercased when captured."""

    query: str = ""

    def capture(self, raw_value: Optional[str]) -> str:
        """Store the input value from the surface and return the query."""
        self.query = (raw_value or "").lower()
        return self.query


@dataclass(frozen=True)
class RegionFilterResult:
    """Visibility decision for one region grid."""

    region: str
    visible: Set[str] = field(default_factory=set)
    hidden: Set[str] = field(default_factory=set)
    show_empty_state: bool = False


class FilterEngine:
    """
    Applies the filter query to the indexed cards.

    Pure evaluation lives in ``apply``/``evaluate_regions``; ``apply_regions``
    additionally pushes the decisions to the surface when one is attached.
    """

    def __init__(
        self,
        index: SearchIndex,
        grid_ids: Mapping[str, str],
        surface: Optional[RenderingSurface] = None,
    ):
        """
        Initialize the engine.

        Args:
            index: Search index built at render time
            grid_ids: Region id -> grid target id on the surface
            surface: Surface receiving visibility updates
        """
        self.index = index
        self.grid_ids = dict(grid_ids)
        self.surface = surface

    @staticmethod
    def apply(query: str, index: Mapping[str, str]) -> Set[str]:
        """
        Return the keys whose index text contains ``query``.

        An empty query matches everything. ``query`` is expected lowercased.
        """
        if not query:
            return set(index)
        return {key for key, text in index.items() if query in text}

    def evaluate_regions(self, query: str) -> Dict[str, RegionFilterResult]:
        """Evaluate every region without touching the surface."""
        results = {}
        for region in self.grid_ids:
            entries = self.index.region(region)
            visible = self.apply(query, entries)
            results[region] = RegionFilterResult(
                region=region,
                visible=visible,
                hidden=set(entries) - visible,
                show_empty_state=bool(query) and not visible,
            )
        return results

    def apply_regions(self, query: str) -> Dict[str, RegionFilterResult]:
        """
        Evaluate every region and update card visibility and empty states.

        Regions whose grid is missing from the surface are skipped.
        """
        results = self.evaluate_regions(query)
        if self.surface is None:
            return results

        for region, result in results.items():
            grid_id = self.grid_ids[region]
            if not self.surface.has_target(grid_id):
                logger.debug(f"Grid '{grid_id}' not on surface; skipping region '{region}'")
                continue
            for key in result.visible:
                self.surface.set_card_visible(grid_id, key, True)
            for key in result.hidden:
                self.surface.set_card_visible(grid_id, key, False)
            self.surface.set_empty_state(grid_id, result.show_empty_state)

        logger.debug(
            f"Filter '{query}': "
            + ", ".join(f"{r}={len(res.visible)}" for r, res in results.items())
        )
        return results
