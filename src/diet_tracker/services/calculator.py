"""Scale a food's per-100 nutrition to a serving."""

from collections.abc import Iterable

from diet_tracker.domain.foods import FoodSearchResult
from diet_tracker.domain.nutrition import (
    NUTRIENTS_BY_KIND,
    NutrientKind,
    NutrientValue,
    ServingNutrition,
)
from diet_tracker.errors import ValidationError

_BASIS = 100.0


def lookup_nutrient_value(
    nutrients: Iterable[NutrientValue] | None, nutrient_id: int
) -> float:
    """Return the value for ``nutrient_id``, or 0 when it is absent."""
    for nutrient in nutrients or ():
        if nutrient.nutrient_id == nutrient_id:
            return nutrient.value
    return 0.0


def compute_serving(
    result: FoodSearchResult, quantity: float, unit: str = "g"
) -> ServingNutrition:
    """Compute nutrition for ``quantity`` of a food.

    Quantity is read in the same basis as the per-100 values; ``unit`` is
    recorded but never converted.
    """
    if quantity < 0:
        raise ValidationError("quantity must not be negative")
    multiplier = quantity / _BASIS

    def scaled(kind: NutrientKind) -> float:
        spec = NUTRIENTS_BY_KIND[kind]
        return lookup_nutrient_value(result.nutrients, spec.nutrient_id) * multiplier

    return ServingNutrition(
        quantity=quantity,
        unit=unit,
        calories=scaled(NutrientKind.CALORIES),
        protein=scaled(NutrientKind.PROTEIN),
        carbs=scaled(NutrientKind.CARBS),
        fat=scaled(NutrientKind.FAT),
        fiber=_present(scaled(NutrientKind.FIBER)),
        calcium=_present(scaled(NutrientKind.CALCIUM)),
        iron=_present(scaled(NutrientKind.IRON)),
    )


def _present(value: float) -> float | None:
    return value if value > 0 else None
