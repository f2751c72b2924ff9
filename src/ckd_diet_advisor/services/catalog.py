"""Read-only food catalog."""

import logging
from collections.abc import Iterable, Iterator

from ckd_diet_advisor.domain.errors import NotFoundError
from ckd_diet_advisor.domain.foods import FoodItem
from ckd_diet_advisor.seed_foods import SEED_FOODS, SeedFood

_logger = logging.getLogger(__name__)


class FoodCatalog:
    """Immutable, insertion-ordered collection of foods keyed by id."""

    def __init__(self, foods: Iterable[FoodItem]) -> None:
        self._foods: dict[int, FoodItem] = {}
        for food in foods:
            if food.id in self._foods:
                raise ValueError(f"Duplicate food id {food.id}")
            self._foods[food.id] = food

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self._foods.values())

    def __len__(self) -> int:
        return len(self._foods)

    def get_by_id(self, food_id: int) -> FoodItem | None:
        """Return the food with this id, if present."""
        return self._foods.get(food_id)

    def require(self, food_id: int) -> FoodItem:
        """Return the food with this id or raise NotFoundError."""
        food = self._foods.get(food_id)
        if food is None:
            _logger.warning("Food lookup missed: food_id=%s", food_id)
            raise NotFoundError("Food not found")
        return food

    def search(self, query: str | None = None) -> list[FoodItem]:
        """Case-insensitive substring match on name or category."""
        needle = (query or "").strip().lower()
        if not needle:
            return list(self._foods.values())
        return [
            food
            for food in self._foods.values()
            if needle in food.food_name.lower() or needle in food.category.lower()
        ]


def build_default_catalog() -> FoodCatalog:
    """Create the catalog from the bundled reference data."""
    return FoodCatalog(
        _seed_to_food(food_id, seed)
        for food_id, seed in enumerate(SEED_FOODS, start=1)
    )


def _seed_to_food(food_id: int, seed: SeedFood) -> FoodItem:
    return FoodItem(
        id=food_id,
        food_name=seed.name,
        category=seed.category,
        energy_kcal=float(seed.energy_kcal),
        carbohydrate_g=float(seed.carbohydrate_g),
        sugar_g=float(seed.sugar_g),
        protein_g=float(seed.protein_g),
        fat_g=float(seed.fat_g),
        sodium_mg=float(seed.sodium_mg),
        potassium_mg=float(seed.potassium_mg),
        phosphorus_mg=float(seed.phosphorus_mg),
        gi_index=int(seed.gi_index),
        note=seed.note,
    )
