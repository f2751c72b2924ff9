"""Shared test fixtures."""

import itertools
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta

import pytest

from ckd_diet_advisor.adapters.memory_profile_repository import (
    InMemoryProfileRepository,
)
from ckd_diet_advisor.config import Settings
from ckd_diet_advisor.containers import AppContainer
from ckd_diet_advisor.domain.foods import FoodCategory, FoodItem
from ckd_diet_advisor.domain.profiles import PatientProfile
from ckd_diet_advisor.services.analysis import AnalysisService
from ckd_diet_advisor.services.catalog import FoodCatalog, build_default_catalog
from ckd_diet_advisor.services.profiles import ProfileService

BASE_TIME = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


def make_food(  # noqa: PLR0913
    food_id: int = 1,
    *,
    name: str = "Test Food",
    category: FoodCategory = FoodCategory.GRAIN,
    sugar_g: float = 0,
    sodium_mg: float = 0,
    potassium_mg: float = 0,
    phosphorus_mg: float = 0,
    gi_index: int = 0,
) -> FoodItem:
    """Build a food with low defaults so each test sets only what it checks."""
    return FoodItem(
        id=food_id,
        food_name=name,
        category=category,
        energy_kcal=100,
        carbohydrate_g=10,
        sugar_g=sugar_g,
        protein_g=5,
        fat_g=1,
        sodium_mg=sodium_mg,
        potassium_mg=potassium_mg,
        phosphorus_mg=phosphorus_mg,
        gi_index=gi_index,
        note="",
    )


def make_profile(**overrides: object) -> PatientProfile:
    """Build a valid patient profile, overriding clinical fields by name."""
    values: dict[str, object] = {
        "gender": "Female",
        "age": 62,
        "height_cm": 160,
        "weight_kg": 58,
        "has_dm": False,
        "ckd_stage": 1,
    }
    values.update(overrides)
    return PatientProfile(**values)


def profile_payload(**overrides: object) -> dict[str, object]:
    """Raw camelCase profile payload as a client would send it."""
    payload: dict[str, object] = {
        "gender": "Male",
        "age": 55,
        "heightCm": 172,
        "weightKg": 70,
        "hasDm": False,
        "ckdStage": 1,
    }
    payload.update(overrides)
    return payload


def ticking_clock(step: timedelta = timedelta(minutes=1)) -> Callable[[], datetime]:
    """Clock returning BASE_TIME, then one step later on every call."""
    ticks: Iterator[int] = itertools.count()
    return lambda: BASE_TIME + step * next(ticks)


@pytest.fixture
def settings() -> Settings:
    return Settings(supabase_url=None, supabase_service_key=None)


@pytest.fixture
def catalog() -> FoodCatalog:
    return build_default_catalog()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository(clock=ticking_clock())


@pytest.fixture
def container(
    settings: Settings,
    catalog: FoodCatalog,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog=catalog,
        analysis_service=AnalysisService(catalog),
        profile_service=ProfileService(profile_repository),
    )
