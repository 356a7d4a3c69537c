"""Value objects for nutritional profile domain."""

from .activity_level import ActivityLevel
from .bmr import BMR
from .fuel_recommendations import FuelRecommendations, WeightGoal
from .macro_split import MacroSplit
from .tdee import TDEE

__all__ = [
    "ActivityLevel",
    "BMR",
    "TDEE",
    "MacroSplit",
    "FuelRecommendations",
    "WeightGoal",
]
