"""Catalog sources that feed the search engine."""

from .json_catalog import CatalogLoadError, load_catalog, parse_catalog

__all__ = ["CatalogLoadError", "load_catalog", "parse_catalog"]
