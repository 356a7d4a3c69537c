"""Derived metrics and recommendation engine.

Pure computations over logged body stats, exercises and foods: unit-aware
measurements, nutrient aggregation, nutrition targets, exercise work and
power, goal evaluation and fuzzy catalog matching.
"""

__version__ = "0.1.0"
