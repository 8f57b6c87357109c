"""
breedline Plan Aggregate

Immutable snapshots of a breeding plan and its evidence.
Each dataclass includes to_dict() and from_dict() for serialization.
"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, Dict, Optional

from breedline.bootstrap.config import get_config
from breedline.core.enums import Phase
from breedline.core.phase_registry import coerce_phase


def parse_date(value: Any) -> Optional[date]:
    """
    Normalize a date-like value.

    Accepts date, datetime, ISO date strings and ISO timestamps (the date
    part is kept). Empty strings and None become None.

    Raises:
        ValueError: If the value cannot be read as a date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        return date.fromisoformat(text[:10])
    raise ValueError(f"Not a date: {value!r}")


def _date_to_str(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# ==================== 1. PlanEvidence ====================

@dataclass(frozen=True)
class PlanEvidence:
    """
    Actual dates recording that real-world milestones occurred.

    Each has_* flag is derived: true exactly when the date is present.
    """
    actual_cycle_start_date: Optional[date] = None
    actual_hormone_testing_start_date: Optional[date] = None
    actual_breed_date: Optional[date] = None
    actual_birth_date: Optional[date] = None
    actual_weaned_date: Optional[date] = None
    actual_placement_start_date: Optional[date] = None
    actual_placement_completed_date: Optional[date] = None
    actual_plan_completed_date: Optional[date] = None

    @property
    def has_actual_cycle_start(self) -> bool:
        return self.actual_cycle_start_date is not None

    @property
    def has_actual_hormone_testing_start(self) -> bool:
        return self.actual_hormone_testing_start_date is not None

    @property
    def has_actual_breed_date(self) -> bool:
        return self.actual_breed_date is not None

    @property
    def has_actual_birth_date(self) -> bool:
        return self.actual_birth_date is not None

    @property
    def has_actual_weaned_date(self) -> bool:
        return self.actual_weaned_date is not None

    @property
    def has_placement_started(self) -> bool:
        return self.actual_placement_start_date is not None

    @property
    def has_placement_completed(self) -> bool:
        return self.actual_placement_completed_date is not None

    @property
    def has_plan_completed(self) -> bool:
        return self.actual_plan_completed_date is not None

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: _date_to_str(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlanEvidence":
        return cls(**{
            k: parse_date(v) for k, v in data.items() if k in cls.__dataclass_fields__
        })


# ==================== 2. ExpectedDates ====================

@dataclass(frozen=True)
class ExpectedDates:
    """
    Estimated milestone dates.

    Used only to pre-fill date inputs; never consulted by requirement rules.
    """
    expected_cycle_start_date: Optional[date] = None
    expected_hormone_testing_start_date: Optional[date] = None
    expected_breed_date: Optional[date] = None
    expected_birth_date: Optional[date] = None
    expected_weaned_date: Optional[date] = None
    expected_placement_start_date: Optional[date] = None
    expected_placement_completed_date: Optional[date] = None
    expected_plan_completed_date: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: _date_to_str(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExpectedDates":
        return cls(**{
            k: parse_date(v) for k, v in data.items() if k in cls.__dataclass_fields__
        })


# ==================== 3. Plan ====================

@dataclass(frozen=True)
class Plan:
    """
    A breeding plan snapshot.

    Owned by the persistence collaborator between commits; the engine
    only ever derives new snapshots from it.
    """
    plan_id: Optional[int] = None
    current_phase: Phase = Phase.PLANNING
    version: int = 0  # Optimistic concurrency token

    # Descriptive fields (prerequisites for COMMITTED)
    name: Optional[str] = None
    species: Optional[str] = None
    breed: Optional[str] = None
    dam_id: Optional[int] = None
    sire_id: Optional[int] = None

    # One-time commitment flag
    locked_cycle: bool = False

    evidence: PlanEvidence = field(default_factory=PlanEvidence)
    expected: ExpectedDates = field(default_factory=ExpectedDates)

    def __post_init__(self):
        # Raw statuses (strings, None) are normalized to a Phase
        if not isinstance(self.current_phase, Phase):
            object.__setattr__(self, "current_phase", coerce_phase(self.current_phase))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plan_id": self.plan_id,
            "current_phase": self.current_phase.value,
            "version": self.version,
            "name": self.name,
            "species": self.species,
            "breed": self.breed,
            "dam_id": self.dam_id,
            "sire_id": self.sire_id,
            "locked_cycle": self.locked_cycle,
            "evidence": self.evidence.to_dict(),
            "expected": self.expected.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], warn_on_unknown_status: Optional[bool] = None) -> "Plan":
        if warn_on_unknown_status is None:
            warn_on_unknown_status = get_config().lifecycle.warn_on_unknown_status
        return cls(
            plan_id=data.get("plan_id"),
            current_phase=coerce_phase(data.get("current_phase"), warn=warn_on_unknown_status),
            version=int(data.get("version") or 0),
            name=data.get("name"),
            species=data.get("species"),
            breed=data.get("breed"),
            dam_id=data.get("dam_id"),
            sire_id=data.get("sire_id"),
            locked_cycle=bool(data.get("locked_cycle", False)),
            evidence=PlanEvidence.from_dict(data.get("evidence") or {}),
            expected=ExpectedDates.from_dict(data.get("expected") or {}),
        )
