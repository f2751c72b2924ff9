"""Reference nutrient data loaded into the default catalog (per 100g)."""

from typing import NamedTuple

from ckd_diet_advisor.domain.foods import FoodCategory

_G = FoodCategory.GRAIN
_V = FoodCategory.VEGETABLE
_F = FoodCategory.FRUIT
_P = FoodCategory.PROTEIN
_X = FoodCategory.PROCESSED


class SeedFood(NamedTuple):
    name: str
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
    note: str = ""


# name, category, kcal, carbs, sugar, protein, fat, Na, K, P, GI, note
SEED_FOODS: tuple[SeedFood, ...] = (
    SeedFood("White Rice (Cooked)", _G, 130, 28, 0.1, 2.7, 0.3, 1, 35, 43, 73),
    SeedFood(
        "Brown Rice (Cooked)", _G, 110, 23, 0.4, 2.6, 0.9, 2, 84, 102, 68,
        "High phosphorus content",
    ),
    SeedFood(
        "Multigrain Bread", _G, 265, 43, 6, 13, 4, 400, 230, 180, 55,
        "Watch for sodium and phosphorus",
    ),
    SeedFood(
        "Sweet Potato (Steamed)", _G, 128, 30, 6, 1.5, 0.2, 10, 380, 50, 61,
        "High Potassium!",
    ),
    SeedFood(
        "Potato (Boiled)", _G, 77, 17, 0.8, 2, 0.1, 6, 421, 57, 78,
        "Very High Potassium",
    ),
    SeedFood("Oatmeal (Cooked)", _G, 71, 12, 0.3, 2.5, 1.5, 4, 70, 77, 55),
    SeedFood(
        "Pasta (Cooked)", _G, 158, 31, 0.6, 5.8, 0.9, 1, 44, 58, 49,
        "Low potassium grain",
    ),
    SeedFood(
        "White Bread", _G, 265, 49, 5, 9, 3.2, 490, 115, 100, 75,
        "Sodium adds up per slice",
    ),
    SeedFood(
        "Spinach (Raw)", _V, 23, 3.6, 0.4, 2.9, 0.4, 79, 558, 49, 15,
        "Extreme Potassium Caution",
    ),
    SeedFood(
        "Cucumber", _V, 15, 3.6, 1.7, 0.7, 0.1, 2, 147, 24, 15,
        "Good low-potassium choice",
    ),
    SeedFood(
        "Carrot (Raw)", _V, 41, 10, 4.7, 0.9, 0.2, 69, 320, 35, 35,
        "Moderate Potassium",
    ),
    SeedFood(
        "Cabbage (Boiled)", _V, 23, 5.5, 2.8, 1.3, 0.1, 10, 150, 25, 15,
        "Leaching reduces potassium",
    ),
    SeedFood(
        "Tomato", _V, 18, 3.9, 2.6, 0.9, 0.2, 5, 237, 24, 15,
        "Moderate-High Potassium",
    ),
    SeedFood("Broccoli (Boiled)", _V, 35, 7.2, 1.4, 2.4, 0.4, 41, 293, 66, 15),
    SeedFood("Lettuce", _V, 15, 2.9, 0.8, 1.4, 0.2, 28, 194, 29, 15),
    SeedFood(
        "Mushroom (Shiitake)", _V, 34, 6.8, 2.4, 2.2, 0.5, 9, 304, 112, 15,
        "High Phosphorus/Potassium",
    ),
    SeedFood("Cauliflower (Boiled)", _V, 23, 4.1, 2.1, 1.8, 0.5, 15, 142, 32, 15),
    SeedFood(
        "Onion", _V, 40, 9.3, 4.2, 1.1, 0.1, 4, 146, 29, 10,
        "Low potassium flavoring",
    ),
    SeedFood(
        "Banana", _F, 89, 23, 12, 1.1, 0.3, 1, 358, 22, 51, "High Potassium"
    ),
    SeedFood(
        "Apple (w/ skin)", _F, 52, 14, 10, 0.3, 0.2, 1, 107, 11, 36,
        "Low Potassium choice",
    ),
    SeedFood("Grapes", _F, 69, 18, 15, 0.7, 0.2, 2, 191, 20, 59),
    SeedFood(
        "Watermelon", _F, 30, 8, 6, 0.6, 0.2, 1, 112, 11, 72,
        "High GI but low K load per volume",
    ),
    SeedFood(
        "Orange", _F, 47, 12, 9, 0.9, 0.1, 0, 181, 14, 43, "Moderate Potassium"
    ),
    SeedFood(
        "Strawberry", _F, 32, 7.7, 4.9, 0.7, 0.3, 1, 153, 24, 40, "Low GI, Low K"
    ),
    SeedFood("Kiwi", _F, 61, 15, 9, 1.1, 0.5, 3, 312, 34, 50, "High Potassium"),
    SeedFood(
        "Blueberries", _F, 57, 14.5, 10, 0.7, 0.3, 1, 77, 12, 53,
        "Low potassium berry",
    ),
    SeedFood("Pineapple", _F, 50, 13, 10, 0.5, 0.1, 1, 109, 8, 59),
    SeedFood(
        "Chicken Breast (Boiled)", _P, 165, 0, 0, 31, 3.6, 74, 256, 228, 0,
        "High Phosphorus source",
    ),
    SeedFood(
        "Pork Belly (Grilled)", _P, 518, 0, 0, 9, 53, 32, 185, 130, 0, "High Fat"
    ),
    SeedFood(
        "Tofu", _P, 76, 1.9, 0.6, 8, 4.8, 7, 121, 97, 15,
        "Plant protein - generally safe",
    ),
    SeedFood(
        "Egg (Whole, Boiled)", _P, 155, 1.1, 1.1, 13, 11, 124, 126, 198, 0,
        "Yolk has phosphorus",
    ),
    SeedFood(
        "Mackerel (Grilled)", _P, 205, 0, 0, 19, 14, 90, 314, 217, 0,
        "Omega-3, but watch P/K",
    ),
    SeedFood(
        "Beef (Lean)", _P, 250, 0, 0, 26, 15, 72, 318, 215, 0, "High Phosphorus"
    ),
    SeedFood(
        "Milk (Low Fat)", _P, 42, 5, 5, 3.4, 1, 44, 150, 93, 27,
        "Liquid phosphorus source",
    ),
    SeedFood(
        "Salmon (Baked)", _P, 206, 0, 0, 22, 12, 61, 384, 252, 0, "High Potassium"
    ),
    SeedFood(
        "Cheddar Cheese", _P, 403, 1.3, 0.5, 25, 33, 621, 98, 512, 0,
        "Very High Phosphorus",
    ),
    SeedFood(
        "Ramyeon (Instant Noodles)", _X, 450, 65, 4, 10, 17, 1700, 150, 120, 73,
        "EXTREME Sodium Warning",
    ),
    SeedFood(
        "Coke (Cola)", _X, 38, 10.6, 10.6, 0, 0, 4, 0, 15, 60,
        "High Sugar, Phosphorus additive",
    ),
    SeedFood(
        "Potato Chips", _X, 536, 53, 0.2, 7, 35, 525, 1275, 164, 70,
        "Very High Potassium & Sodium",
    ),
    SeedFood(
        "Ham (Sliced)", _X, 145, 1.5, 1.3, 21, 5.5, 1200, 290, 230, 0,
        "Cured meat, very salty",
    ),
)
