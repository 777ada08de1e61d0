"""Tests for the serving calculator."""

import pytest

from diet_tracker.domain.foods import FoodSearchResult, SourceTag
from diet_tracker.domain.nutrition import NutrientKind, NutrientValue
from diet_tracker.errors import ValidationError
from diet_tracker.services.calculator import compute_serving, lookup_nutrient_value


def _food(**values: float) -> FoodSearchResult:
    nutrients = tuple(
        NutrientValue.of(NutrientKind(kind), value) for kind, value in values.items()
    )
    return FoodSearchResult(
        id="indian-1",
        description="Idli",
        nutrients=nutrients,
        source_tag=SourceTag.CURATED,
    )


def test_serving_scales_by_quantity_over_hundred() -> None:
    food = _food(calories=50, protein=4, carbs=10, fat=1)

    serving = compute_serving(food, quantity=200, unit="g")

    assert serving.calories == 100
    assert serving.protein == 8
    assert serving.carbs == 20
    assert serving.fat == 2
    assert serving.unit == "g"


def test_zero_quantity_yields_zeros() -> None:
    food = _food(calories=50, protein=4, carbs=10, fat=1, iron=2)

    serving = compute_serving(food, quantity=0, unit="g")

    assert (serving.calories, serving.protein, serving.carbs, serving.fat) == (
        0,
        0,
        0,
        0,
    )
    assert serving.iron is None


def test_micronutrients_omitted_unless_positive() -> None:
    without = compute_serving(_food(calories=50, calcium=0), quantity=100)
    with_calcium = compute_serving(_food(calories=50, calcium=5), quantity=200)

    assert without.calcium is None
    assert with_calcium.calcium == 10
    assert with_calcium.fiber is None


def test_unit_is_not_converted() -> None:
    food = _food(calories=50)

    assert compute_serving(food, 100, "oz").calories == 50


def test_rounding_is_display_only() -> None:
    serving = compute_serving(_food(calories=33.3, protein=2.26), quantity=150)

    assert serving.calories == pytest.approx(49.95)
    assert serving.rounded().calories == 50
    assert serving.rounded().protein == 3


def test_missing_nutrient_lookup_returns_zero() -> None:
    assert lookup_nutrient_value(_food(calories=5).nutrients, 1003) == 0
    assert lookup_nutrient_value(None, 1008) == 0


def test_negative_quantity_is_rejected() -> None:
    with pytest.raises(ValidationError):
        compute_serving(_food(calories=5), quantity=-1)


@pytest.mark.parametrize(
    ("quantity", "expected"),
    [(250, 3), (50, 1), (150, 2), (349, 3)],
)
def test_display_rounds_halves_up(quantity: float, expected: int) -> None:
    serving = compute_serving(_food(calories=1, protein=1), quantity=quantity)

    assert serving.rounded().calories == expected
    assert serving.rounded().protein == expected
