"""Domain models for the food catalog."""

from dataclasses import dataclass
from enum import StrEnum


class FoodCategory(StrEnum):
    """Closed set of catalog categories."""

    GRAIN = "Grain"
    VEGETABLE = "Vegetable"
    FRUIT = "Fruit"
    PROTEIN = "Protein"
    PROCESSED = "Processed"


@dataclass(frozen=True)
class FoodItem:
    """Nutrient facts for one catalog food, per 100g serving."""

    id: int
    food_name: str
    category: FoodCategory
    energy_kcal: float
    carbohydrate_g: float
    sugar_g: float
    protein_g: float
    fat_g: float
    sodium_mg: float
    potassium_mg: float
    phosphorus_mg: float
    gi_index: int
    note: str | None = None
