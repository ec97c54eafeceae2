"""Application use cases - orchestrate business operations."""

from .search_catalog import (
    SearchCatalogCommand,
    SearchCatalogResult,
    SearchCatalogUseCase,
)

__all__ = [
    "SearchCatalogCommand",
    "SearchCatalogResult",
    "SearchCatalogUseCase",
]
