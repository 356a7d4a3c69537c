"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Represents daily target for protein, carbohydrates, and fat.
    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
    """

    protein_g: float
    carbs_g: float
    fat_g: float

    def __post_init__(self) -> None:
        """Validate macronutrients are non-negative.

        Raises:
            ValueError: If any macronutrient is negative
        """
        if self.protein_g < 0:
            raise ValueError(f"Protein must be non-negative, got {self.protein_g}")
        if self.carbs_g < 0:
            raise ValueError(f"Carbs must be non-negative, got {self.carbs_g}")
        if self.fat_g < 0:
            raise ValueError(f"Fat must be non-negative, got {self.fat_g}")

    def total_calories(self) -> float:
        """Calculate total calories from macronutrients.

        Example:
            >>> MacroSplit(protein_g=176, carbs_g=248, fat_g=63).total_calories()
            2263
        """
        return (self.protein_g * 4) + (self.carbs_g * 4) + (self.fat_g * 9)

    def rounded(self) -> "MacroSplit":
        """Whole-gram copy for display and storage."""
        return MacroSplit(
            protein_g=round(self.protein_g),
            carbs_g=round(self.carbs_g),
            fat_g=round(self.fat_g),
        )

    def __str__(self) -> str:
        return f"{self.protein_g:.0f}P / {self.carbs_g:.0f}C / {self.fat_g:.0f}F"
