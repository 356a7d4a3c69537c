"""MatchResult value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..entities.catalog_entity import CatalogEntity


class MatchResult(BaseModel):
    """
    Scored candidate.

    Attributes:
        entity: Matched catalog entity
        similarity: 0-1, where 1 is an exact match
        distance: Levenshtein distance to the query
    """

    model_config = ConfigDict(frozen=True)

    entity: CatalogEntity
    similarity: float = Field(..., ge=0.0, le=1.0)
    distance: int = Field(..., ge=0)
