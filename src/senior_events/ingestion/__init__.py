"""
Catalog ingestion: document sources, field normalization and search index.
"""
