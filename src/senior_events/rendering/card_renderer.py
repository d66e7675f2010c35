"""
Card Renderer.

Projects normalized events into the view models the surface draws:
summary cards for the region grids, the detail view for the modal and the
trends panel categories.
"""

import re
from typing import Dict, List, Optional, Tuple

from senior_events.schemas.event import (
    DetailRow,
    DetailView,
    NormalizedEvent,
    SummaryView,
    TrendCategory,
    is_informed,
)

# Fixed order of the detail rows; links are rendered after these.
DETAIL_FIELDS: List[Tuple[str, str]] = [
    ("location", "Location"),
    ("venue_type", "Venue Type"),
    ("capacity", "Capacity"),
    ("format", "Format"),
    ("duration", "Duration"),
    ("topics", "Topics"),
    ("activities", "Activities"),
    ("organizers", "Organizers"),
    ("partners", "Partners"),
    ("networking", "Networking"),
    ("impact", "Impact"),
]

LINKS_LABEL = "Links"


def render_summary(event: NormalizedEvent, region: Optional[str] = None) -> SummaryView:
    """Build the grid card for an event rendered in ``region``."""
    return SummaryView(
        region=region,
        key=event.key,
        name=event.name,
        location=event.location,
        venue_type=event.venue_type,
        capacity=event.capacity,
        duration=event.duration,
        aria_label=f"View details for {event.name}",
    )


def render_detail(event: NormalizedEvent) -> DetailView:
    """
    Build the modal content for an event.

    Rows whose content is NOT_INFORMED are omitted. List contents are kept as
    lists (rendered as ordered item lists), scalars as plain text. The links
    block is only present when the event has links.
    """
    rows = []
    for field_name, label in DETAIL_FIELDS:
        content = getattr(event, field_name)
        if not is_informed(content):
            continue
        rows.append(
            DetailRow(label=label, content=content, is_list=isinstance(content, list))
        )

    return DetailView(
        key=event.key,
        title=event.name,
        rows=rows,
        links=list(event.links),
        links_label=LINKS_LABEL,
    )


def format_category_title(category: str, titles: Optional[Dict[str, str]] = None) -> str:
    """
    Human-readable title for a trends category id.

    Uses the configured title when there is one, otherwise turns
    ``snake_case`` into Title Case.
    """
    if titles and category in titles:
        return titles[category]
    spaced = category.replace("_", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def render_trends(
    trends: Dict[str, List[str]],
    titles: Optional[Dict[str, str]] = None,
) -> List[TrendCategory]:
    """Build the trends panel categories, in document order."""
    return [
        TrendCategory(
            category_id=category,
            title=format_category_title(category, titles),
            items=list(items),
        )
        for category, items in trends.items()
    ]
