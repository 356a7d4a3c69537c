"""Nutrient scaling and aggregation."""

from .aggregator_service import aggregate, calculate_nutrients, scale

__all__ = ["scale", "aggregate", "calculate_nutrients"]
