# src/senior_events/schemas/event.py
"""
Canonical Event Schema for the events catalog.

Catalog documents carry event records whose shape varies from one entry to the
next (location as string or object, lists as arrays or scalars, alternate key
names). This schema is the normalized form every downstream component
(search index, card renderer, filter engine) consumes, plus the view models
handed to the rendering surface.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

NOT_INFORMED = "not informed"

# A list-valued field: the list form (raw array), the raw prose string (raw
# scalar), or NOT_INFORMED when absent.
FieldValue = Union[List[str], str]


def is_informed(value: Any) -> bool:
    """Return True when a normalized value carries real content."""
    if isinstance(value, list):
        return len(value) > 0
    return bool(value) and value != NOT_INFORMED


def display_items(value: FieldValue) -> List[str]:
    """
    Return the list form of a field value for display.

    A scalar string is treated as a single-element list; NOT_INFORMED yields
    an empty list.
    """
    if isinstance(value, list):
        return list(value)
    if not is_informed(value):
        return []
    return [value]


# ============================================================================
# ENUMS
# ============================================================================


class CatalogSource(str, Enum):
    """Which document the session is rendering."""

    REMOTE = "remote"
    FALLBACK = "fallback"


class LoadOutcome(str, Enum):
    """Which step of the load chain produced the catalog."""

    REMOTE_OK = "remote_ok"
    LOCAL_OK = "local_ok"
    FALLBACK = "fallback"

    @property
    def source(self) -> CatalogSource:
        if self is LoadOutcome.FALLBACK:
            return CatalogSource.FALLBACK
        return CatalogSource.REMOTE


# ============================================================================
# NORMALIZED EVENT
# ============================================================================


class NormalizedEvent(BaseModel):
    """
    Display-ready event.

    Every field holds real content or NOT_INFORMED; ``links`` is an empty list
    when the record had none.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "key": "Festival Longevidade",
                "name": "Festival Longevidade",
                "location": "São Paulo, Brasil",
                "venue_type": "Centro cultural",
                "capacity": "800 pessoas",
                "duration": "2 dias",
                "format": ["Palestras", "Oficinas"],
                "topics": ["Saúde", "Tecnologia"],
                "activities": NOT_INFORMED,
                "organizers": "SESC",
                "partners": NOT_INFORMED,
                "networking": "Rodas de conversa",
                "impact": NOT_INFORMED,
                "links": ["https://example.org/festival"],
            }
        },
    )

    key: str
    name: str
    location: str = NOT_INFORMED
    venue_type: str = NOT_INFORMED
    capacity: str = NOT_INFORMED
    duration: str = NOT_INFORMED
    format: FieldValue = NOT_INFORMED
    topics: FieldValue = NOT_INFORMED
    activities: FieldValue = NOT_INFORMED
    organizers: FieldValue = NOT_INFORMED
    partners: FieldValue = NOT_INFORMED
    networking: FieldValue = NOT_INFORMED
    impact: FieldValue = NOT_INFORMED
    links: List[str] = Field(default_factory=list)


# ============================================================================
# CATALOG
# ============================================================================


class CatalogDocument(BaseModel):
    """
    Shape check for a retrieved catalog document.

    Records themselves stay untyped; they are normalized field by field.
    """

    model_config = ConfigDict(extra="allow")

    eventos_brasil: Optional[Dict[str, Any]] = None
    eventos_internacionais: Optional[Dict[str, Any]] = None
    tendencias_2025_2026: Dict[str, Union[List[Any], str]] = Field(default_factory=dict)


class CatalogState(BaseModel):
    """Loaded catalog; read-only for the rest of the session."""

    model_config = ConfigDict(frozen=True)

    source: CatalogSource
    outcome: LoadOutcome
    regions: Dict[str, List[NormalizedEvent]]
    trends: Dict[str, List[str]] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)

    def find_event(
        self, event_key: str, region: Optional[str] = None
    ) -> Optional[NormalizedEvent]:
        """
        Return the event with ``event_key``.

        Keys are unique within a region only, so a card should pass its
        ``region``. Without one, regions are searched in order and the first
        match wins.
        """
        if region is not None:
            candidates = [self.regions.get(region, [])]
        else:
            candidates = list(self.regions.values())
        for events in candidates:
            for event in events:
                if event.key == event_key:
                    return event
        return None

    @property
    def total_events(self) -> int:
        return sum(len(events) for events in self.regions.values())


# ============================================================================
# VIEW MODELS
# ============================================================================


class SummaryView(BaseModel):
    """Card shown in a region grid."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    location: str
    venue_type: str
    capacity: str
    duration: str
    aria_label: str
    # Region the card is rendered in; echoed back on activation
    region: Optional[str] = None


class DetailRow(BaseModel):
    """One label/content pair of the detail modal."""

    model_config = ConfigDict(frozen=True)

    label: str
    content: FieldValue
    is_list: bool = False


class DetailView(BaseModel):
    """Content of the detail modal."""

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    rows: List[DetailRow] = Field(default_factory=list)
    links: List[str] = Field(default_factory=list)
    links_label: str = "Links"

    @property
    def has_links(self) -> bool:
        return bool(self.links)


class TrendCategory(BaseModel):
    """One category of the trends panel."""

    model_config = ConfigDict(frozen=True)

    category_id: str
    title: str
    items: List[str]
