"""MacroService - Macronutrient distribution calculation."""

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_split import MacroSplit

PROTEIN_G_PER_KG = 1.6
PROTEIN_G_PER_KG_COMPOSITION = 2.0
FAT_G_PER_KG = 0.8
# Minimum share of calories for protein and for fat
MIN_CALORIE_SHARE = 0.25


class MacroService(IMacroCalculator):
    """Calculate macronutrient distribution from weight and calorie target.

    Protein:
        max(weight × 1.6 g/kg, 25% of calories)
        2.0 g/kg instead of 1.6 with a body composition goal

    Fat:
        max(weight × 0.8 g/kg, 25% of calories)

    Carbs:
        Remaining calories, never negative

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def calculate(
        self,
        weight_kg: float,
        calorie_target: float,
        has_composition_goal: bool = False,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Returns:
            MacroSplit: Protein/carbs/fat in grams (unrounded)

        Example:
            >>> split = MacroService().calculate(80.0, 2500.0)
            >>> split.protein_g, round(split.fat_g, 1), round(split.carbs_g, 1)
            (156.25, 69.4, 312.5)
        """
        protein_per_kg = PROTEIN_G_PER_KG_COMPOSITION if has_composition_goal else PROTEIN_G_PER_KG

        protein_g = max(weight_kg * protein_per_kg, MIN_CALORIE_SHARE * calorie_target / 4)
        fat_g = max(weight_kg * FAT_G_PER_KG, MIN_CALORIE_SHARE * calorie_target / 9)

        carb_cal = calorie_target - (protein_g * 4 + fat_g * 9)
        carbs_g = max(0.0, carb_cal / 4)

        return MacroSplit(protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g)
