"""
breedline/core/schemas.py - Pydantic snapshot models

Parses the persistence collaborator's camelCase plan payloads into
immutable Plan snapshots.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from breedline.bootstrap.config import get_config
from breedline.core.phase_registry import coerce_phase
from breedline.core.plan import ExpectedDates, Plan, PlanEvidence, parse_date


_DATE_FIELDS = (
    "actual_cycle_start_date",
    "actual_hormone_testing_start_date",
    "actual_breed_date",
    "actual_birth_date",
    "actual_weaned_date",
    "actual_placement_start_date",
    "actual_placement_completed_date",
    "actual_plan_completed_date",
    "expected_cycle_start_date",
    "expected_hormone_testing_start_date",
    "expected_breed_date",
    "expected_birth_date",
    "expected_weaned_date",
    "expected_placement_start_date",
    "expected_placement_completed_date",
    "expected_plan_completed_date",
    "locked_cycle_start",
)


class PlanPayload(BaseModel):
    """A breeding plan as returned by the collaborator's API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = Field(None, description="Plan id")
    status: Optional[str] = Field(None, description="Raw phase key; unknown values fall back to PLANNING")
    version: int = Field(default=0, ge=0)

    name: Optional[str] = None
    species: Optional[str] = None
    breed: Optional[str] = Field(None, alias="breedText")
    dam_id: Optional[int] = Field(None, alias="damId")
    sire_id: Optional[int] = Field(None, alias="sireId")

    locked_cycle: Optional[bool] = Field(None, alias="lockedCycle")
    locked_cycle_start: Optional[date] = Field(None, alias="lockedCycleStart")

    actual_cycle_start_date: Optional[date] = Field(None, alias="actualCycleStartDate")
    actual_hormone_testing_start_date: Optional[date] = Field(None, alias="actualHormoneTestingStartDate")
    actual_breed_date: Optional[date] = Field(None, alias="actualBreedDate")
    actual_birth_date: Optional[date] = Field(None, alias="actualBirthDate")
    actual_weaned_date: Optional[date] = Field(None, alias="actualWeanedDate")
    actual_placement_start_date: Optional[date] = Field(None, alias="actualPlacementStartDate")
    actual_placement_completed_date: Optional[date] = Field(None, alias="actualPlacementCompletedDate")
    actual_plan_completed_date: Optional[date] = Field(None, alias="actualPlanCompletedDate")

    expected_cycle_start_date: Optional[date] = Field(None, alias="expectedCycleStartDate")
    expected_hormone_testing_start_date: Optional[date] = Field(None, alias="expectedHormoneTestingStartDate")
    expected_breed_date: Optional[date] = Field(None, alias="expectedBreedDate")
    expected_birth_date: Optional[date] = Field(None, alias="expectedBirthDate")
    expected_weaned_date: Optional[date] = Field(None, alias="expectedWeanedDate")
    expected_placement_start_date: Optional[date] = Field(None, alias="expectedPlacementStartDate")
    expected_placement_completed_date: Optional[date] = Field(None, alias="expectedPlacementCompletedDate")
    expected_plan_completed_date: Optional[date] = Field(None, alias="expectedPlanCompletedDate")

    @field_validator(*_DATE_FIELDS, mode="before")
    @classmethod
    def truncate_timestamps(cls, v: Any) -> Any:
        # API returns either "YYYY-MM-DD" or full ISO timestamps
        if isinstance(v, str):
            return parse_date(v)
        return v

    def to_plan(self, warn_on_unknown_status: bool = True) -> Plan:
        """Convert to an immutable Plan snapshot."""
        data = self.model_dump()
        locked = self.locked_cycle if self.locked_cycle is not None else self.locked_cycle_start is not None
        return Plan(
            plan_id=self.id,
            current_phase=coerce_phase(self.status, warn=warn_on_unknown_status),
            version=self.version,
            name=self.name,
            species=self.species,
            breed=self.breed,
            dam_id=self.dam_id,
            sire_id=self.sire_id,
            locked_cycle=locked,
            evidence=PlanEvidence(**{k: data[k] for k in PlanEvidence.__dataclass_fields__}),
            expected=ExpectedDates(**{k: data[k] for k in ExpectedDates.__dataclass_fields__}),
        )


def plan_from_payload(payload: Dict[str, Any], warn_on_unknown_status: Optional[bool] = None) -> Plan:
    """
    Validate a raw payload and convert it to a Plan.

    Status fallback warnings follow the lifecycle config unless
    warn_on_unknown_status is given.
    """
    if warn_on_unknown_status is None:
        warn_on_unknown_status = get_config().lifecycle.warn_on_unknown_status
    return PlanPayload.model_validate(payload).to_plan(warn_on_unknown_status=warn_on_unknown_status)
