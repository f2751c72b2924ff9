"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from ckd_diet_advisor.adapters.memory_profile_repository import (
    InMemoryProfileRepository,
)
from ckd_diet_advisor.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from ckd_diet_advisor.config import Settings
from ckd_diet_advisor.services.analysis import AnalysisService
from ckd_diet_advisor.services.catalog import FoodCatalog, build_default_catalog
from ckd_diet_advisor.services.profiles import ProfileRepository, ProfileService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    analysis_service: AnalysisService
    profile_service: ProfileService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = build_default_catalog()
    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        analysis_service=AnalysisService(catalog),
        profile_service=ProfileService(_build_profile_repository(resolved_settings)),
    )


def _build_profile_repository(settings: Settings) -> ProfileRepository:
    if settings.uses_supabase:
        _logger.info("Profile storage: supabase table=%s", settings.profiles_table)
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseProfileRepository(client, table=settings.profiles_table)
    _logger.info("Profile storage: in-memory")
    return InMemoryProfileRepository()
