"""Matching domain entities."""

from .catalog_entity import CatalogEntity, CatalogKind

__all__ = [
    "CatalogEntity",
    "CatalogKind",
]
