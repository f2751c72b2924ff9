"""Safe-food recommendations and safer alternatives drawn from the catalog."""

from collections.abc import Iterable

from ckd_diet_advisor.domain.analysis import RecommendedFood, Verdict
from ckd_diet_advisor.domain.foods import FoodItem
from ckd_diet_advisor.services.scoring import ClinicalProfile, fmt, quick_verdict

MAX_SUGGESTIONS = 5
MAX_SAME_CATEGORY_ALTERNATIVES = 3
LOW_POTASSIUM_MG = 150
LOW_GI_RECOMMENDATION = 50
LOW_GI_ALTERNATIVE = 40
CAUTION_SUFFIX = " (needs caution)"


def recommend_safe_foods(
    profile: ClinicalProfile, current: FoodItem, catalog: Iterable[FoodItem]
) -> list[RecommendedFood]:
    """Suggest other foods that are also safe for this profile."""
    recommendations: list[RecommendedFood] = []
    for food in catalog:
        if food.id == current.id:
            continue
        if quick_verdict(profile, food) is not Verdict.SAFE:
            continue
        if food.category == current.category:
            reason = f"Same {food.category} category"
        elif food.potassium_mg < LOW_POTASSIUM_MG:
            reason = f"Low potassium ({fmt(food.potassium_mg)}mg)"
        elif profile.has_dm and food.gi_index < LOW_GI_RECOMMENDATION:
            reason = f"Low GI food ({food.gi_index})"
        else:
            reason = "Balanced nutrition"
        recommendations.append(_suggest(food, reason))
        if len(recommendations) >= MAX_SUGGESTIONS:
            break
    return recommendations


def suggest_alternatives(
    profile: ClinicalProfile, current: FoodItem, catalog: Iterable[FoodItem]
) -> list[RecommendedFood]:
    """Suggest substitutes for a food the patient should limit.

    Same-category foods come first (Caution allowed, flagged as such), then
    Safe foods from other categories fill the remaining slots.
    """
    foods = [food for food in catalog if food.id != current.id]
    alternatives: list[RecommendedFood] = []

    for food in foods:
        if food.category != current.category:
            continue
        verdict = quick_verdict(profile, food)
        if verdict is Verdict.LIMIT:
            continue
        reason = _comparative_reason(profile, food, current)
        if verdict is Verdict.CAUTION:
            reason += CAUTION_SUFFIX
        alternatives.append(_suggest(food, reason))
        if len(alternatives) >= MAX_SAME_CATEGORY_ALTERNATIVES:
            break

    for food in foods:
        if len(alternatives) >= MAX_SUGGESTIONS:
            break
        if food.category == current.category:
            continue
        if quick_verdict(profile, food) is not Verdict.SAFE:
            continue
        if food.potassium_mg < LOW_POTASSIUM_MG:
            reason = f"Low-potassium alternative ({fmt(food.potassium_mg)}mg)"
        elif profile.has_dm and food.gi_index < LOW_GI_ALTERNATIVE:
            reason = f"Low-GI alternative ({food.gi_index})"
        else:
            reason = f"Substitutable {food.category} option"
        alternatives.append(_suggest(food, reason))
    return alternatives


def _comparative_reason(
    profile: ClinicalProfile, food: FoodItem, current: FoodItem
) -> str:
    if food.potassium_mg < current.potassium_mg:
        return (
            f"Lower potassium ({fmt(food.potassium_mg)}mg vs "
            f"{fmt(current.potassium_mg)}mg)"
        )
    if food.sodium_mg < current.sodium_mg:
        return f"Lower sodium ({fmt(food.sodium_mg)}mg vs {fmt(current.sodium_mg)}mg)"
    if profile.has_dm and food.gi_index < current.gi_index:
        return f"Lower GI ({food.gi_index} vs {current.gi_index})"
    return f"Safer {food.category} choice"


def _suggest(food: FoodItem, reason: str) -> RecommendedFood:
    return RecommendedFood(
        id=food.id, food_name=food.food_name, category=food.category, reason=reason
    )
