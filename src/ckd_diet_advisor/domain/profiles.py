"""Patient profile models."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ckd_diet_advisor.domain.errors import ValidationError

_ModelT = TypeVar("_ModelT", bound=BaseModel)
_REQUEST_LOCATIONS = {"body", "path", "query"}


class PatientProfile(BaseModel):
    """Clinical intake for one analysis request."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    gender: Literal["Male", "Female"]
    age: float = Field(ge=1, le=120)
    height_cm: float = Field(ge=50, le=300)
    weight_kg: float = Field(ge=20, le=300)
    has_dm: StrictBool
    ckd_stage: int = Field(ge=1, le=5)
    egfr: float | None = Field(default=None, alias="eGFR")
    serum_potassium: float | None = None
    hba1c: float | None = None


class ProfileSnapshot(BaseModel):
    """Named clinical snapshot submitted for saving."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1)
    has_dm: StrictBool
    ckd_stage: int = Field(ge=1, le=5)
    egfr: float | None = Field(default=None, alias="eGFR")
    serum_potassium: float | None = None
    hba1c: float | None = None


@dataclass(frozen=True)
class SavedProfile:
    """A persisted clinical snapshot."""

    id: int
    name: str
    ckd_stage: int
    has_dm: bool
    hba1c: float | None
    egfr: float | None
    serum_potassium: float | None
    created_at: datetime


@dataclass(frozen=True)
class TrendPoint:
    """One saved profile plotted on the lab-value timeline."""

    created_at: datetime
    name: str
    ckd_stage: int
    hba1c: float | None
    egfr: float | None
    serum_potassium: float | None


def parse_profile(payload: Mapping[str, object]) -> PatientProfile:
    """Validate a raw profile mapping, raising ValidationError on failure."""
    return _validate(PatientProfile, payload)


def parse_snapshot(payload: Mapping[str, object]) -> ProfileSnapshot:
    """Validate a raw saved-profile mapping."""
    return _validate(ProfileSnapshot, payload)


def _validate(model: type[_ModelT], payload: Mapping[str, object]) -> _ModelT:
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise validation_error_from(exc.errors()) from exc


def validation_error_from(errors: list[dict]) -> ValidationError:
    """Build a ValidationError from the first pydantic error entry."""
    first = errors[0]
    location = [str(part) for part in first.get("loc", ())]
    if location and location[0] in _REQUEST_LOCATIONS:
        location = location[1:]
    return ValidationError(
        message=str(first.get("msg", "Invalid input")),
        field=".".join(location) or None,
    )
