"""
Catalog entity model.

Foods and meals as seen by the matcher: an identifier and a name.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogKind(str, Enum):
    FOOD = "food"
    MEAL = "meal"


class CatalogEntity(BaseModel):
    """
    Food or meal candidate for name matching.

    Extra fields from stored records are ignored.

    Example:
        >>> food = CatalogEntity.model_validate({"id": "f1", "name": "Chicken Breast"})
        >>> food.kind
        <CatalogKind.FOOD: 'food'>
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Catalog identifier")
    name: str = Field(..., description="Display name")
    kind: CatalogKind = Field(default=CatalogKind.FOOD, description="Food or meal")

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, v: object) -> object:
        """Accept integer ids from storage."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def __str__(self) -> str:
        return self.name
