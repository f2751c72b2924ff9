"""Domain models for food suitability analysis."""

from dataclasses import dataclass
from enum import StrEnum

from ckd_diet_advisor.domain.foods import FoodCategory


class Verdict(StrEnum):
    """Graded suitability, ordered Safe < Caution < Limit."""

    SAFE = "Safe"
    CAUTION = "Caution"
    LIMIT = "Limit"

    @property
    def severity(self) -> int:
        """Rank used when combining verdicts."""
        return _SEVERITY[self]

    def at_least(self, other: "Verdict") -> "Verdict":
        """Return the more severe of the two verdicts."""
        return self if self.severity >= other.severity else other


_SEVERITY = {Verdict.SAFE: 0, Verdict.CAUTION: 1, Verdict.LIMIT: 2}


class NutrientAxis(StrEnum):
    """Independent nutrient-risk dimensions, in priority order."""

    POTASSIUM = "potassium"
    PHOSPHORUS = "phosphorus"
    GLYCEMIC = "glycemic"
    SODIUM = "sodium"


AXIS_PRIORITY: tuple[NutrientAxis, ...] = (
    NutrientAxis.POTASSIUM,
    NutrientAxis.PHOSPHORUS,
    NutrientAxis.GLYCEMIC,
    NutrientAxis.SODIUM,
)


@dataclass(frozen=True)
class AxisEvaluation:
    """Per-axis verdicts plus every triggered issue in evaluation order."""

    verdicts: dict[NutrientAxis, Verdict]
    issues: list[str]


@dataclass(frozen=True)
class NutrientsOfInterest:
    """Snapshot of the nutrients the rules look at."""

    potassium: float
    phosphorus: float
    sugar: float
    sodium: float
    gi: int


@dataclass(frozen=True)
class RecommendedFood:
    """A catalog food suggested alongside an analysis."""

    id: int
    food_name: str
    category: FoodCategory
    reason: str


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one food for one patient."""

    food_id: int
    food_name: str
    status: Verdict
    summary: str
    primary_reason: NutrientAxis | None
    axis_verdicts: dict[NutrientAxis, Verdict]
    details: list[str]
    nutrients_of_interest: NutrientsOfInterest
    educational_message: str
    recommendations: list[RecommendedFood] | None = None
    alternatives: list[RecommendedFood] | None = None
