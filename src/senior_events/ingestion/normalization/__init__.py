"""
Normalization module for catalog records.

This package provides:
- FieldNormalizer: ordered alias lookups from raw records to NormalizedEvent
- normalize: module-level normalizer with the default aliases
- format_location / format_list / format_links: per-field helpers
"""

from .field_normalizer import (
    FieldNormalizer,
    format_links,
    format_list,
    format_location,
    normalize,
)

__all__ = [
    "FieldNormalizer",
    "normalize",
    "format_location",
    "format_list",
    "format_links",
]
