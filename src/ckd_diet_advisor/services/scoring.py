"""Rule-based clinical scoring of a food against a patient profile."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from ckd_diet_advisor.domain.analysis import (
    AXIS_PRIORITY,
    AxisEvaluation,
    NutrientAxis,
    NutrientsOfInterest,
    Verdict,
)
from ckd_diet_advisor.domain.foods import FoodItem

HIGH_POTASSIUM_MG = 350
MODERATE_POTASSIUM_MG = 200
HYPERKALEMIA_MEQ_L = 5.0
HIGH_PHOSPHORUS_MG = 300
UNCONTROLLED_HBA1C = 8.0
HIGH_GI = 70
HIGH_SUGAR_G = 15
VERY_HIGH_SODIUM_MG = 800
HIGH_SODIUM_MG = 400
POTASSIUM_RESTRICTED_STAGE = 3
PHOSPHORUS_RESTRICTED_STAGE = 4
SODIUM_RESTRICTED_STAGE = 3

NOTE_PREFIX = "[Nutritionist Note]"

_SUMMARIES = {
    Verdict.SAFE: "Safe to Eat",
    Verdict.CAUTION: "Eat with Caution",
    Verdict.LIMIT: "Avoid / Limit",
}


class ClinicalProfile(Protocol):
    """Fields of a patient profile the rules read."""

    ckd_stage: int
    has_dm: bool
    serum_potassium: float | None
    hba1c: float | None


@dataclass(frozen=True)
class ScoreOutcome:
    """Reduced verdict together with the axis breakdown it came from."""

    status: Verdict
    primary_reason: NutrientAxis | None
    evaluation: AxisEvaluation


def fmt(value: float) -> str:
    """Render a number exactly, dropping a zero fraction (421.0 -> '421')."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def evaluate_axes(profile: ClinicalProfile, food: FoodItem) -> AxisEvaluation:
    """Apply every axis rule independently, collecting triggered issues."""
    issues: list[str] = []
    verdicts = {
        NutrientAxis.POTASSIUM: _potassium(profile, food, issues),
        NutrientAxis.PHOSPHORUS: _phosphorus(profile, food, issues),
        NutrientAxis.GLYCEMIC: _glycemic(profile, food, issues),
        NutrientAxis.SODIUM: _sodium(profile, food, issues),
    }
    return AxisEvaluation(verdicts=verdicts, issues=issues)


def _potassium(profile: ClinicalProfile, food: FoodItem, issues: list[str]) -> Verdict:
    if profile.ckd_stage < POTASSIUM_RESTRICTED_STAGE:
        return Verdict.SAFE
    if food.potassium_mg > HIGH_POTASSIUM_MG:
        issues.append(
            f"High Potassium ({fmt(food.potassium_mg)}mg): "
            "Dangerous for your kidneys."
        )
        return Verdict.LIMIT
    if food.potassium_mg > MODERATE_POTASSIUM_MG and _hyperkalemic(profile):
        issues.append(
            "Moderate Potassium, but your blood potassium is high "
            f"({fmt(profile.serum_potassium)})."
        )
        return Verdict.LIMIT
    return Verdict.SAFE


def _phosphorus(profile: ClinicalProfile, food: FoodItem, issues: list[str]) -> Verdict:
    if profile.ckd_stage < PHOSPHORUS_RESTRICTED_STAGE:
        return Verdict.SAFE
    if food.phosphorus_mg > HIGH_PHOSPHORUS_MG:
        issues.append(
            f"High Phosphorus ({fmt(food.phosphorus_mg)}mg): "
            f"Hard to filter at Stage {profile.ckd_stage}."
        )
        return Verdict.LIMIT
    return Verdict.SAFE


def _glycemic(profile: ClinicalProfile, food: FoodItem, issues: list[str]) -> Verdict:
    if not profile.has_dm:
        return Verdict.SAFE
    verdict = Verdict.SAFE
    if _uncontrolled_dm(profile) and food.gi_index >= HIGH_GI:
        issues.append(
            f"High GI ({food.gi_index}): May spike blood sugar (HbA1c is high)."
        )
        verdict = verdict.at_least(Verdict.CAUTION)
    if food.sugar_g >= HIGH_SUGAR_G:
        issues.append(f"High Sugar ({fmt(food.sugar_g)}g): Watch your intake.")
        verdict = verdict.at_least(Verdict.CAUTION)
    return verdict


def _sodium(profile: ClinicalProfile, food: FoodItem, issues: list[str]) -> Verdict:
    if food.sodium_mg > VERY_HIGH_SODIUM_MG:
        issues.append(
            f"Very High Sodium ({fmt(food.sodium_mg)}mg): "
            "Increases blood pressure and fluid retention."
        )
        return Verdict.LIMIT
    if food.sodium_mg > HIGH_SODIUM_MG and profile.ckd_stage >= SODIUM_RESTRICTED_STAGE:
        issues.append(f"Significant Sodium ({fmt(food.sodium_mg)}mg): Use sparingly.")
        return Verdict.CAUTION
    return Verdict.SAFE


def _hyperkalemic(profile: ClinicalProfile) -> bool:
    return (
        profile.serum_potassium is not None
        and profile.serum_potassium >= HYPERKALEMIA_MEQ_L
    )


def _uncontrolled_dm(profile: ClinicalProfile) -> bool:
    return profile.hba1c is not None and profile.hba1c >= UNCONTROLLED_HBA1C


def reduce_verdicts(
    verdicts: dict[NutrientAxis, Verdict],
    priority: Iterable[NutrientAxis] = AXIS_PRIORITY,
) -> tuple[Verdict, NutrientAxis | None]:
    """Fold axis verdicts into one status and the axis that decided it.

    Axes are visited in priority order and the walk stops at the first
    Limit, so a lower-priority Limit never displaces a higher one. A Limit
    does replace a reason previously recorded for a Caution.
    """
    status = Verdict.SAFE
    primary: NutrientAxis | None = None
    for axis in priority:
        verdict = verdicts.get(axis, Verdict.SAFE)
        if verdict is Verdict.LIMIT:
            return Verdict.LIMIT, axis
        if verdict is Verdict.CAUTION:
            status = Verdict.CAUTION
            if primary is None:
                primary = axis
    return status, primary


def score(profile: ClinicalProfile, food: FoodItem) -> ScoreOutcome:
    """Evaluate all axes and reduce them to a single verdict."""
    evaluation = evaluate_axes(profile, food)
    status, primary = reduce_verdicts(evaluation.verdicts)
    return ScoreOutcome(status=status, primary_reason=primary, evaluation=evaluation)


def quick_verdict(profile: ClinicalProfile, food: FoodItem) -> Verdict:
    """Classify a food without building messages; used to filter suggestions."""
    restricts_potassium = profile.ckd_stage >= POTASSIUM_RESTRICTED_STAGE
    if restricts_potassium and food.potassium_mg > HIGH_POTASSIUM_MG:
        return Verdict.LIMIT
    if (
        restricts_potassium
        and food.potassium_mg > MODERATE_POTASSIUM_MG
        and _hyperkalemic(profile)
    ):
        return Verdict.LIMIT
    if (
        profile.ckd_stage >= PHOSPHORUS_RESTRICTED_STAGE
        and food.phosphorus_mg > HIGH_PHOSPHORUS_MG
    ):
        return Verdict.LIMIT
    if food.sodium_mg > VERY_HIGH_SODIUM_MG:
        return Verdict.LIMIT
    if profile.has_dm:
        if _uncontrolled_dm(profile) and food.gi_index >= HIGH_GI:
            return Verdict.CAUTION
        if food.sugar_g >= HIGH_SUGAR_G:
            return Verdict.CAUTION
    if food.sodium_mg > HIGH_SODIUM_MG and profile.ckd_stage >= SODIUM_RESTRICTED_STAGE:
        return Verdict.CAUTION
    return Verdict.SAFE


def summary_for(status: Verdict) -> str:
    """Short label shown next to the verdict."""
    return _SUMMARIES[status]


def build_message(food: FoodItem, status: Verdict, issues: list[str]) -> str:
    """Compose the advisory note for the reduced verdict."""
    if status is Verdict.SAFE:
        body = (
            f"{food.food_name} appears to be a safe choice for your current "
            "condition. It fits within your nutritional guidelines."
        )
    elif status is Verdict.CAUTION:
        lead = issues[0] if issues else "Monitor your intake."
        body = f"{food.food_name} can be eaten, but portion control is key. {lead}"
    else:
        lead = issues[0] if issues else "It conflicts with your health goals."
        body = f"{food.food_name} is not recommended. {lead}"
    return f"{NOTE_PREFIX} {body}"


def nutrients_of_interest(food: FoodItem) -> NutrientsOfInterest:
    """Snapshot the nutrients the rules consider."""
    return NutrientsOfInterest(
        potassium=food.potassium_mg,
        phosphorus=food.phosphorus_mg,
        sugar=food.sugar_g,
        sodium=food.sodium_mg,
        gi=food.gi_index,
    )
