"""
Field Normalizer for heterogeneous catalog records.

Maps raw event records to ``NormalizedEvent`` using ordered alias lookups.
Supports:
- Location as a plain string or a ``{"cidade", "pais"}`` object
- List fields given as arrays, objects, scalars or not at all
- Alternate key names across schema variants (first non-empty source wins)
- Links as a single URL or an array of URLs

Normalization is total: malformed or missing fields degrade to NOT_INFORMED.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from senior_events.schemas.event import NOT_INFORMED, FieldValue, NormalizedEvent

logger = logging.getLogger(__name__)

# canonical field -> raw keys, in lookup order
DEFAULT_FIELD_ALIASES: Dict[str, List[str]] = {
    "name": ["nome"],
    "location": ["local"],
    "venue_type": ["tipo_espaco"],
    "capacity": ["capacidade"],
    "duration": ["duracao"],
    "format": ["formato"],
    "topics": ["temas"],
    "activities": ["atividades", "atividades_dinamicas"],
    "organizers": ["organizadores"],
    "partners": ["parceiros"],
    "networking": ["networking", "networking_integracao"],
    "impact": ["impacto", "impacto_feedback"],
    "links": ["links"],
}

SCALAR_FIELDS = ("venue_type", "capacity", "duration")
LIST_FIELDS = (
    "format",
    "topics",
    "activities",
    "organizers",
    "partners",
    "networking",
    "impact",
)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def _to_text(value: Any) -> Optional[str]:
    """Stringify a scalar; containers and blanks yield None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def format_location(local: Any) -> str:
    """
    Build the location display string.

    Args:
        local: Raw ``local`` value (string, ``{"cidade", "pais"}`` object, or anything)

    Returns:
        ``"Cidade, Pais"``, one side alone when the other is empty, or NOT_INFORMED
    """
    if isinstance(local, str):
        return local if local.strip() else NOT_INFORMED

    if isinstance(local, dict):
        parts = [
            str(local.get(k) or "").strip()
            for k in ("cidade", "pais")
        ]
        joined = ", ".join(p for p in parts if p)
        return joined or NOT_INFORMED

    return NOT_INFORMED


def format_list(items: Any) -> FieldValue:
    """
    Normalize a list-valued field.

    Arrays keep their order (blank items dropped), objects become
    ``"key: value"`` items, scalar strings stay as prose.
    """
    if isinstance(items, (list, tuple)):
        result = [text for text in (_to_text(i) for i in items) if text is not None]
        return result or NOT_INFORMED

    if isinstance(items, dict):
        result = [
            f"{key}: {value}"
            for key, value in items.items()
            if not _is_empty(value)
        ]
        return result or NOT_INFORMED

    text = _to_text(items)
    return text if text is not None else NOT_INFORMED


def format_links(links: Any) -> List[str]:
    """Normalize links to an ordered list of URL strings (empty when absent)."""
    if isinstance(links, str):
        return [links] if links.strip() else []
    if isinstance(links, (list, tuple)):
        return [link for link in links if isinstance(link, str) and link.strip()]
    return []


class FieldNormalizer:
    """
    Maps raw event records to the canonical NormalizedEvent.

    Each canonical field reads a list of raw keys in order; the first key
    holding a non-empty value wins.
    """

    def __init__(self, field_aliases: Optional[Dict[str, Sequence[str]]] = None):
        """
        Initialize the normalizer.

        Args:
            field_aliases: Overrides merged over DEFAULT_FIELD_ALIASES.
                Example: {"activities": ["atividades", "atividades_dinamicas", "programacao"]}
        """
        self.field_aliases: Dict[str, List[str]] = {
            k: list(v) for k, v in DEFAULT_FIELD_ALIASES.items()
        }
        for field_name, keys in (field_aliases or {}).items():
            self.field_aliases[field_name] = list(keys)

    def lookup(self, raw: Dict[str, Any], field_name: str) -> Any:
        """Return the first non-empty raw value for a canonical field, or None."""
        for key in self.field_aliases.get(field_name, [field_name]):
            value = raw.get(key)
            if not _is_empty(value):
                return value
        return None

    def normalize(self, raw: Any, name: Optional[str] = None) -> NormalizedEvent:
        """
        Normalize one raw record.

        Args:
            raw: Raw record from the catalog document; non-mappings are treated as empty
            name: Event name (the record's key in the document); falls back to ``nome``

        Returns:
            NormalizedEvent with every field resolved
        """
        if not isinstance(raw, dict):
            logger.debug(f"Record {name!r} is not a mapping ({type(raw).__name__}); using empty record")
            raw = {}

        event_name = _to_text(name) or _to_text(self.lookup(raw, "name")) or NOT_INFORMED

        fields: Dict[str, Any] = {
            "key": event_name,
            "name": event_name,
            "location": format_location(self.lookup(raw, "location")),
            "links": format_links(self.lookup(raw, "links")),
        }

        for field_name in SCALAR_FIELDS:
            fields[field_name] = _to_text(self.lookup(raw, field_name)) or NOT_INFORMED

        for field_name in LIST_FIELDS:
            fields[field_name] = format_list(self.lookup(raw, field_name))

        return NormalizedEvent(**fields)

    def normalize_region(self, records: Any) -> List[NormalizedEvent]:
        """Normalize a ``{name: record}`` mapping, keeping document order."""
        if not isinstance(records, dict):
            return []
        return [self.normalize(raw, name=event_name) for event_name, raw in records.items()]


_DEFAULT_NORMALIZER = FieldNormalizer()


def normalize(raw: Any, name: Optional[str] = None) -> NormalizedEvent:
    """Normalize a raw record with the default aliases."""
    return _DEFAULT_NORMALIZER.normalize(raw, name=name)


def create_field_normalizer_from_config(config: Dict[str, Any]) -> FieldNormalizer:
    """
    Create a FieldNormalizer from a YAML config section.

    Example config:
        field_aliases:
          activities: ["atividades", "atividades_dinamicas"]
          impact: ["impacto", "impacto_feedback"]
    """
    return FieldNormalizer(field_aliases=config.get("field_aliases", {}))
