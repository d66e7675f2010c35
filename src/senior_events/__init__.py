"""
Senior Events Catalog.

Loads a catalog of senior-focused (60+) cultural events, normalizes the
heterogeneous records into display-ready view models and drives a
single-page browsing surface:

- Catalog loading with remote -> local file -> embedded fallback chain
- Field normalization and search index construction
- Free-text filtering per region grid
- Hash-based section routing, detail modal and collapsible panels
"""

__version__ = "1.0.0"
