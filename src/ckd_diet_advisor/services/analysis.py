"""Application service wrapping the scoring engine."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ckd_diet_advisor.domain.analysis import AnalysisResult, Verdict
from ckd_diet_advisor.domain.foods import FoodItem
from ckd_diet_advisor.domain.profiles import PatientProfile, parse_profile
from ckd_diet_advisor.services.catalog import FoodCatalog
from ckd_diet_advisor.services.scoring import (
    build_message,
    nutrients_of_interest,
    score,
    summary_for,
)
from ckd_diet_advisor.services.suggestions import (
    recommend_safe_foods,
    suggest_alternatives,
)

_logger = logging.getLogger(__name__)


@dataclass
class AnalysisService:
    """Analyze catalog foods for a patient profile."""

    catalog: FoodCatalog

    def search_foods(self, query: str | None = None) -> list[FoodItem]:
        """Search the catalog by name or category."""
        return self.catalog.search(query)

    def get_food(self, food_id: int) -> FoodItem:
        """Return a catalog food or raise NotFoundError."""
        return self.catalog.require(food_id)

    def analyze(
        self, food_id: int, profile: PatientProfile | Mapping[str, object]
    ) -> AnalysisResult:
        """Score one food for the profile; the profile is validated first."""
        if not isinstance(profile, PatientProfile):
            profile = parse_profile(profile)
        food = self.catalog.require(food_id)
        return self.analyze_food(profile, food)

    def analyze_food(self, profile: PatientProfile, food: FoodItem) -> AnalysisResult:
        """Score a resolved food and attach suggestions for its verdict."""
        outcome = score(profile, food)
        issues = outcome.evaluation.issues
        recommendations = None
        alternatives = None
        if outcome.status is Verdict.SAFE:
            recommendations = recommend_safe_foods(profile, food, self.catalog)
        elif outcome.status is Verdict.LIMIT:
            alternatives = suggest_alternatives(profile, food, self.catalog)

        _logger.info(
            "Analysis food_id=%s status=%s primary=%s issues=%s",
            food.id,
            outcome.status,
            outcome.primary_reason,
            len(issues),
        )
        return AnalysisResult(
            food_id=food.id,
            food_name=food.food_name,
            status=outcome.status,
            summary=summary_for(outcome.status),
            primary_reason=outcome.primary_reason,
            axis_verdicts=dict(outcome.evaluation.verdicts),
            details=list(issues),
            nutrients_of_interest=nutrients_of_interest(food),
            educational_message=build_message(food, outcome.status, issues),
            recommendations=recommendations,
            alternatives=alternatives,
        )
