"""Catalog store and embedded fallback document."""

from .store import CatalogStore

__all__ = ["CatalogStore"]
