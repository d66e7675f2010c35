"""
Search index for rendered event cards.

One lowercase text blob per event, computed once when the grids are rendered
and reused for every keystroke of the filter input.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from senior_events.schemas.event import NormalizedEvent, display_items, is_informed

logger = logging.getLogger(__name__)


def build_index(event: NormalizedEvent) -> str:
    """
    Build the searchable text for one event.

    Concatenates name, location, venue type and topics (space-joined) in that
    order and lowercases the result. NOT_INFORMED values contribute nothing.
    """
    parts = [
        event.name,
        event.location if is_informed(event.location) else "",
        event.venue_type if is_informed(event.venue_type) else "",
        " ".join(display_items(event.topics)),
    ]
    return " ".join(parts).lower()


class SearchIndex:
    """Per-region ``event_key -> text`` mapping."""

    def __init__(self, entries: Dict[str, Dict[str, str]] | None = None):
        self.entries: Dict[str, Dict[str, str]] = entries or {}

    @classmethod
    def build(cls, regions: Dict[str, List[NormalizedEvent]]) -> "SearchIndex":
        """Index every event of every region."""
        entries: Dict[str, Dict[str, str]] = {}
        for region, events in regions.items():
            entries[region] = {event.key: build_index(event) for event in events}
            if len(entries[region]) != len(events):
                logger.warning(
                    f"Region '{region}' has duplicate event keys; "
                    f"indexed {len(entries[region])} of {len(events)} events"
                )
        return cls(entries)

    def region(self, region: str) -> Dict[str, str]:
        return self.entries.get(region, {})

    @property
    def regions(self) -> List[str]:
        return list(self.entries)

    def __len__(self) -> int:
        return sum(len(r) for r in self.entries.values())
