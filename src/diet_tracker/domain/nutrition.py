"""Canonical nutrient table and per-serving nutrition values."""

import math
from dataclasses import dataclass
from enum import Enum


class NutrientKind(Enum):
    """Canonical nutrients every food source is aligned to."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"
    FIBER = "fiber"
    CALCIUM = "calcium"
    IRON = "iron"


@dataclass(frozen=True)
class NutrientSpec:
    """Lookup keys for one canonical nutrient (USDA FDC vocabulary)."""

    kind: NutrientKind
    nutrient_id: int
    name: str
    number: str
    unit: str


NUTRIENT_TABLE: tuple[NutrientSpec, ...] = (
    NutrientSpec(NutrientKind.CALORIES, 1008, "Energy", "208", "kcal"),
    NutrientSpec(NutrientKind.PROTEIN, 1003, "Protein", "203", "g"),
    NutrientSpec(NutrientKind.CARBS, 1005, "Carbohydrates", "205", "g"),
    NutrientSpec(NutrientKind.FAT, 1004, "Total lipid (fat)", "204", "g"),
    NutrientSpec(NutrientKind.FIBER, 1079, "Fiber", "291", "g"),
    NutrientSpec(NutrientKind.CALCIUM, 1087, "Calcium", "301", "mg"),
    NutrientSpec(NutrientKind.IRON, 1089, "Iron", "303", "mg"),
)

NUTRIENTS_BY_KIND: dict[NutrientKind, NutrientSpec] = {
    spec.kind: spec for spec in NUTRIENT_TABLE
}
NUTRIENTS_BY_ID: dict[int, NutrientSpec] = {
    spec.nutrient_id: spec for spec in NUTRIENT_TABLE
}


@dataclass(frozen=True)
class NutrientValue:
    """Amount of one nutrient per 100 g (or ml) of a food."""

    nutrient_id: int
    nutrient_name: str
    nutrient_number: str
    unit_name: str
    value: float

    @classmethod
    def of(cls, kind: NutrientKind, value: float) -> "NutrientValue":
        """Build a value labelled from the canonical table."""
        spec = NUTRIENTS_BY_KIND[kind]
        return cls(
            nutrient_id=spec.nutrient_id,
            nutrient_name=spec.name,
            nutrient_number=spec.number,
            unit_name=spec.unit,
            value=value,
        )


@dataclass(frozen=True)
class ServingNutrition:
    """Nutrition for a concrete quantity of a food.

    Micro-nutrients are ``None`` when they do not apply (computed value of
    zero), which callers must not read as "zero".
    """

    quantity: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    calcium: float | None = None
    iron: float | None = None

    def rounded(self) -> "ServingNutrition":
        """Return the display form with calories and macros as integers.

        Halves round up (2.5 -> 3), matching how the web client displays them.
        """
        return ServingNutrition(
            quantity=self.quantity,
            unit=self.unit,
            calories=_round_half_up(self.calories),
            protein=_round_half_up(self.protein),
            carbs=_round_half_up(self.carbs),
            fat=_round_half_up(self.fat),
            fiber=self.fiber,
            calcium=self.calcium,
            iron=self.iron,
        )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
