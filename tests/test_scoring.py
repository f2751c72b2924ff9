"""Tests for the clinical scoring rules."""

import itertools

import pytest

from ckd_diet_advisor.domain.analysis import NutrientAxis, Verdict
from ckd_diet_advisor.services.catalog import FoodCatalog
from ckd_diet_advisor.services.scoring import (
    build_message,
    evaluate_axes,
    fmt,
    quick_verdict,
    reduce_verdicts,
    score,
)
from tests.conftest import make_food, make_profile


def _all_safe() -> dict[NutrientAxis, Verdict]:
    return dict.fromkeys(NutrientAxis, Verdict.SAFE)


def test_scenario_serum_potassium_branch_limits() -> None:
    profile = make_profile(ckd_stage=3, has_dm=False, serum_potassium=5.2)
    food = make_food(
        potassium_mg=250, sodium_mg=100, phosphorus_mg=50, gi_index=40, sugar_g=2
    )

    outcome = score(profile, food)

    assert outcome.status is Verdict.LIMIT
    assert outcome.primary_reason is NutrientAxis.POTASSIUM
    assert outcome.evaluation.issues == [
        "Moderate Potassium, but your blood potassium is high (5.2)."
    ]


def test_scenario_uncontrolled_diabetes_high_gi_is_caution() -> None:
    profile = make_profile(ckd_stage=1, has_dm=True, hba1c=9.0)
    food = make_food(
        gi_index=80, sugar_g=5, sodium_mg=50, potassium_mg=50, phosphorus_mg=20
    )

    outcome = score(profile, food)

    assert outcome.evaluation.verdicts == {
        NutrientAxis.POTASSIUM: Verdict.SAFE,
        NutrientAxis.PHOSPHORUS: Verdict.SAFE,
        NutrientAxis.GLYCEMIC: Verdict.CAUTION,
        NutrientAxis.SODIUM: Verdict.SAFE,
    }
    assert outcome.status is Verdict.CAUTION
    assert outcome.primary_reason is NutrientAxis.GLYCEMIC


def test_scenario_stage_five_high_phosphorus_limits() -> None:
    profile = make_profile(ckd_stage=5, has_dm=False)
    food = make_food(phosphorus_mg=400, potassium_mg=50, sodium_mg=20)

    outcome = score(profile, food)

    assert outcome.status is Verdict.LIMIT
    assert outcome.primary_reason is NutrientAxis.PHOSPHORUS
    assert outcome.evaluation.issues == [
        "High Phosphorus (400mg): Hard to filter at Stage 5."
    ]


@pytest.mark.parametrize("ckd_stage", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("has_dm", [False, True])
def test_very_high_sodium_limits_for_any_profile(ckd_stage: int, has_dm: bool) -> None:
    profile = make_profile(ckd_stage=ckd_stage, has_dm=has_dm, hba1c=9.5)
    food = make_food(sodium_mg=1700, potassium_mg=150, phosphorus_mg=120)

    outcome = score(profile, food)

    assert outcome.status is Verdict.LIMIT
    assert outcome.primary_reason is NutrientAxis.SODIUM


def test_potassium_limit_outranks_sodium_limit() -> None:
    profile = make_profile(ckd_stage=3)
    food = make_food(sodium_mg=1700, potassium_mg=400)

    outcome = score(profile, food)

    assert outcome.status is Verdict.LIMIT
    assert outcome.primary_reason is NutrientAxis.POTASSIUM
    assert len(outcome.evaluation.issues) == 2
    assert outcome.evaluation.issues[0].startswith("High Potassium (400mg)")
    assert outcome.evaluation.issues[1].startswith("Very High Sodium (1700mg)")


def test_phosphorus_limit_outranks_sodium_limit() -> None:
    profile = make_profile(ckd_stage=4)
    food = make_food(sodium_mg=900, phosphorus_mg=350)

    assert score(profile, food).primary_reason is NutrientAxis.PHOSPHORUS


@pytest.mark.parametrize("ckd_stage", [1, 2])
def test_early_stage_never_limits_potassium(
    catalog: FoodCatalog, ckd_stage: int
) -> None:
    profile = make_profile(ckd_stage=ckd_stage, serum_potassium=6.5)
    for food in catalog:
        verdicts = evaluate_axes(profile, food).verdicts
        assert verdicts[NutrientAxis.POTASSIUM] is Verdict.SAFE


def test_potassium_thresholds_are_exclusive() -> None:
    profile = make_profile(ckd_stage=3)

    at_limit = evaluate_axes(profile, make_food(potassium_mg=350))
    above_limit = evaluate_axes(profile, make_food(potassium_mg=350.5))

    assert at_limit.verdicts[NutrientAxis.POTASSIUM] is Verdict.SAFE
    assert above_limit.verdicts[NutrientAxis.POTASSIUM] is Verdict.LIMIT


def test_serum_potassium_threshold_is_inclusive() -> None:
    food = make_food(potassium_mg=250)

    at_limit = evaluate_axes(make_profile(ckd_stage=3, serum_potassium=5.0), food)
    below_limit = evaluate_axes(make_profile(ckd_stage=3, serum_potassium=4.9), food)

    assert at_limit.verdicts[NutrientAxis.POTASSIUM] is Verdict.LIMIT
    assert below_limit.verdicts[NutrientAxis.POTASSIUM] is Verdict.SAFE


def test_phosphorus_threshold_is_exclusive() -> None:
    profile = make_profile(ckd_stage=4)

    at_limit = evaluate_axes(profile, make_food(phosphorus_mg=300))
    above_limit = evaluate_axes(profile, make_food(phosphorus_mg=300.5))

    assert at_limit.verdicts[NutrientAxis.PHOSPHORUS] is Verdict.SAFE
    assert above_limit.verdicts[NutrientAxis.PHOSPHORUS] is Verdict.LIMIT


@pytest.mark.parametrize(
    ("sodium_mg", "expected"),
    [
        (400, Verdict.SAFE),
        (400.5, Verdict.CAUTION),
        (800, Verdict.CAUTION),
        (800.5, Verdict.LIMIT),
    ],
)
def test_sodium_thresholds_are_exclusive(sodium_mg: float, expected: Verdict) -> None:
    profile = make_profile(ckd_stage=3)

    result = evaluate_axes(profile, make_food(sodium_mg=sodium_mg))

    assert result.verdicts[NutrientAxis.SODIUM] is expected


def test_serum_potassium_needs_moderate_food_potassium() -> None:
    profile = make_profile(ckd_stage=4, serum_potassium=5.5)

    result = evaluate_axes(profile, make_food(potassium_mg=200))

    assert result.verdicts[NutrientAxis.POTASSIUM] is Verdict.SAFE
    assert result.issues == []


def test_missing_serum_potassium_skips_branch() -> None:
    profile = make_profile(ckd_stage=3)

    result = evaluate_axes(profile, make_food(potassium_mg=300))

    assert result.verdicts[NutrientAxis.POTASSIUM] is Verdict.SAFE


def test_phosphorus_only_checked_from_stage_four() -> None:
    food = make_food(phosphorus_mg=512)

    stage_three = evaluate_axes(make_profile(ckd_stage=3), food)
    stage_four = evaluate_axes(make_profile(ckd_stage=4), food)

    assert stage_three.verdicts[NutrientAxis.PHOSPHORUS] is Verdict.SAFE
    assert stage_four.verdicts[NutrientAxis.PHOSPHORUS] is Verdict.LIMIT


def test_glycemic_rules_ignored_without_diabetes() -> None:
    profile = make_profile(has_dm=False, hba1c=10.0)

    result = evaluate_axes(profile, make_food(gi_index=90, sugar_g=40))

    assert result.verdicts[NutrientAxis.GLYCEMIC] is Verdict.SAFE
    assert result.issues == []


def test_glycemic_collects_both_issues() -> None:
    profile = make_profile(has_dm=True, hba1c=8.0)

    result = evaluate_axes(profile, make_food(gi_index=70, sugar_g=15))

    assert result.verdicts[NutrientAxis.GLYCEMIC] is Verdict.CAUTION
    assert result.issues == [
        "High GI (70): May spike blood sugar (HbA1c is high).",
        "High Sugar (15g): Watch your intake.",
    ]


def test_high_gi_without_hba1c_is_safe() -> None:
    profile = make_profile(has_dm=True)

    result = evaluate_axes(profile, make_food(gi_index=85, sugar_g=3))

    assert result.verdicts[NutrientAxis.GLYCEMIC] is Verdict.SAFE


def test_sugar_alone_triggers_caution_for_diabetes() -> None:
    profile = make_profile(has_dm=True, hba1c=6.5)

    outcome = score(profile, make_food(sugar_g=15, gi_index=59))

    assert outcome.status is Verdict.CAUTION
    assert outcome.evaluation.issues == ["High Sugar (15g): Watch your intake."]


def test_moderate_sodium_depends_on_stage() -> None:
    food = make_food(sodium_mg=525)

    stage_two = evaluate_axes(make_profile(ckd_stage=2), food)
    stage_three = evaluate_axes(make_profile(ckd_stage=3), food)

    assert stage_two.verdicts[NutrientAxis.SODIUM] is Verdict.SAFE
    assert stage_three.verdicts[NutrientAxis.SODIUM] is Verdict.CAUTION
    assert stage_three.issues == ["Significant Sodium (525mg): Use sparingly."]


def test_issues_follow_axis_order() -> None:
    profile = make_profile(ckd_stage=5, has_dm=True, hba1c=9.0)
    food = make_food(
        potassium_mg=1275, phosphorus_mg=320, gi_index=70, sugar_g=1, sodium_mg=525
    )

    issues = evaluate_axes(profile, food).issues

    assert [issue.split(" (")[0] for issue in issues] == [
        "High Potassium",
        "High Phosphorus",
        "High GI",
        "Significant Sodium",
    ]


def test_reduce_all_safe() -> None:
    assert reduce_verdicts(_all_safe()) == (Verdict.SAFE, None)


def test_reduce_keeps_first_caution_reason() -> None:
    verdicts = _all_safe()
    verdicts[NutrientAxis.GLYCEMIC] = Verdict.CAUTION
    verdicts[NutrientAxis.SODIUM] = Verdict.CAUTION

    assert reduce_verdicts(verdicts) == (Verdict.CAUTION, NutrientAxis.GLYCEMIC)


def test_reduce_later_limit_replaces_caution_reason() -> None:
    verdicts = _all_safe()
    verdicts[NutrientAxis.POTASSIUM] = Verdict.CAUTION
    verdicts[NutrientAxis.SODIUM] = Verdict.LIMIT

    assert reduce_verdicts(verdicts) == (Verdict.LIMIT, NutrientAxis.SODIUM)


def test_reduce_first_limit_is_kept() -> None:
    verdicts = _all_safe()
    verdicts[NutrientAxis.PHOSPHORUS] = Verdict.LIMIT
    verdicts[NutrientAxis.SODIUM] = Verdict.LIMIT

    assert reduce_verdicts(verdicts) == (Verdict.LIMIT, NutrientAxis.PHOSPHORUS)


def test_quick_verdict_matches_full_scoring(catalog: FoodCatalog) -> None:
    grid = itertools.product(
        [1, 2, 3, 4, 5], [False, True], [None, 7.0, 9.0], [None, 4.5, 5.4]
    )
    for ckd_stage, has_dm, hba1c, serum_potassium in grid:
        profile = make_profile(
            ckd_stage=ckd_stage,
            has_dm=has_dm,
            hba1c=hba1c,
            serum_potassium=serum_potassium,
        )
        for food in catalog:
            assert quick_verdict(profile, food) is score(profile, food).status, (
                profile,
                food.food_name,
            )


def test_message_templates() -> None:
    food = make_food(name="Banana")

    safe = build_message(food, Verdict.SAFE, [])
    caution = build_message(food, Verdict.CAUTION, ["High Sugar (15g): Watch."])
    limit = build_message(food, Verdict.LIMIT, [])

    assert safe.startswith("[Nutritionist Note] Banana appears to be a safe choice")
    assert caution == (
        "[Nutritionist Note] Banana can be eaten, but portion control is key. "
        "High Sugar (15g): Watch."
    )
    assert limit == (
        "[Nutritionist Note] Banana is not recommended. "
        "It conflicts with your health goals."
    )


def test_caution_message_without_issues_uses_monitoring_note() -> None:
    message = build_message(make_food(name="Tofu"), Verdict.CAUTION, [])

    assert message.endswith("portion control is key. Monitor your intake.")


def test_fmt_drops_trailing_zero() -> None:
    assert fmt(421.0) == "421"
    assert fmt(0.1) == "0.1"
    assert fmt(10.6) == "10.6"
    assert fmt(73) == "73"


def test_serum_potassium_is_cited_exactly() -> None:
    food = make_food(potassium_mg=250)

    precise = evaluate_axes(make_profile(ckd_stage=3, serum_potassium=5.1234567), food)
    large = evaluate_axes(make_profile(ckd_stage=3, serum_potassium=1234567.0), food)

    assert precise.issues == [
        "Moderate Potassium, but your blood potassium is high (5.1234567)."
    ]
    assert large.issues == [
        "Moderate Potassium, but your blood potassium is high (1234567)."
    ]
