"""Request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ckd_diet_advisor.domain.analysis import NutrientAxis, Verdict
from ckd_diet_advisor.domain.foods import FoodCategory
from ckd_diet_advisor.domain.profiles import PatientProfile


class CamelModel(BaseModel):
    """Base model exposing camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class AnalyzeRequest(CamelModel):
    """Body of an analysis request."""

    food_id: int
    profile: PatientProfile


class FoodItemResponse(CamelModel):
    """Catalog food as returned to clients."""

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


class NutrientsResponse(CamelModel):
    """Nutrients the verdict was based on."""

    potassium: float
    phosphorus: float
    sugar: float
    sodium: float
    gi: int


class RecommendedFoodResponse(CamelModel):
    """Suggested food with its reason."""

    id: int
    food_name: str
    category: FoodCategory
    reason: str


class AnalysisResponse(CamelModel):
    """Analysis verdict with rationale and suggestions."""

    food_id: int
    food_name: str
    status: Verdict
    summary: str
    primary_reason: NutrientAxis | None = None
    axis_verdicts: dict[NutrientAxis, Verdict]
    details: list[str]
    nutrients_of_interest: NutrientsResponse
    educational_message: str
    recommendations: list[RecommendedFoodResponse] | None = None
    alternatives: list[RecommendedFoodResponse] | None = None


class SavedProfileResponse(CamelModel):
    """Stored clinical snapshot."""

    id: int
    name: str
    ckd_stage: int
    has_dm: bool
    hba1c: float | None
    egfr: float | None = Field(alias="eGFR")
    serum_potassium: float | None
    created_at: datetime


class TrendPointResponse(CamelModel):
    """Lab values at one point in time."""

    created_at: datetime
    name: str
    ckd_stage: int
    hba1c: float | None
    egfr: float | None = Field(alias="eGFR")
    serum_potassium: float | None


class TrendsResponse(CamelModel):
    """Lab-value timeline built from saved profiles."""

    points: list[TrendPointResponse]
