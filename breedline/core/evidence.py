"""
breedline Evidence Editor

Pure transformations that set or clear individual evidence fields on a
plan snapshot. The current phase is never touched: clearing evidence
that satisfied the next transition simply makes the guard report
can_advance = False again.
"""

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Union

from breedline.core.enums import EvidenceField
from breedline.core.plan import Plan, parse_date
from breedline.errors.taxonomy import EvidenceFieldError


# ==================== Field Aliases ====================
# Format: "alias" -> canonical field

FIELD_ALIASES: Dict[str, EvidenceField] = {
    "lockedCycle": EvidenceField.LOCKED_CYCLE,
    "actualCycleStartDate": EvidenceField.ACTUAL_CYCLE_START_DATE,
    "actualHormoneTestingStartDate": EvidenceField.ACTUAL_HORMONE_TESTING_START_DATE,
    "actualBreedDate": EvidenceField.ACTUAL_BREED_DATE,
    "actualBirthDate": EvidenceField.ACTUAL_BIRTH_DATE,
    "actualWeanedDate": EvidenceField.ACTUAL_WEANED_DATE,
    "actualPlacementStartDate": EvidenceField.ACTUAL_PLACEMENT_START_DATE,
    "actualPlacementCompletedDate": EvidenceField.ACTUAL_PLACEMENT_COMPLETED_DATE,
    "actualPlanCompletedDate": EvidenceField.ACTUAL_PLAN_COMPLETED_DATE,
}

FLAG_FIELDS = frozenset({EvidenceField.LOCKED_CYCLE})

DATE_FIELDS: List[EvidenceField] = [f for f in EvidenceField if f not in FLAG_FIELDS]


def normalize_field(name: Union[str, EvidenceField]) -> EvidenceField:
    """
    Resolve a field name, enum member or camelCase alias.

    Raises:
        EvidenceFieldError: If the name is not an evidence field
    """
    if isinstance(name, EvidenceField):
        return name
    if name in FIELD_ALIASES:
        return FIELD_ALIASES[name]
    try:
        return EvidenceField(name)
    except ValueError:
        raise EvidenceFieldError(f"Unknown evidence field: {name!r}") from None


def is_date_field(name: Union[str, EvidenceField]) -> bool:
    return normalize_field(name) not in FLAG_FIELDS


def _expected_name(evidence_field: EvidenceField) -> str:
    return "expected_" + evidence_field.value[len("actual_"):]


# ==================== Editor ====================

def set_evidence(plan: Plan, name: Union[str, EvidenceField], value: Any) -> Plan:
    """
    Set an evidence field, returning a new snapshot.

    Date fields accept date/datetime objects or ISO strings; None or an
    empty string clears the field. The locked_cycle flag requires a bool.

    Raises:
        EvidenceFieldError: Unknown field or unreadable value
    """
    evidence_field = normalize_field(name)

    if evidence_field is EvidenceField.LOCKED_CYCLE:
        if not isinstance(value, bool):
            raise EvidenceFieldError(f"locked_cycle expects a bool, got {value!r}")
        return replace(plan, locked_cycle=value)

    try:
        parsed = parse_date(value)
    except ValueError as e:
        raise EvidenceFieldError(f"Invalid date for {evidence_field.value}: {value!r}") from e

    return replace(plan, evidence=replace(plan.evidence, **{evidence_field.value: parsed}))


def clear_evidence(plan: Plan, name: Union[str, EvidenceField]) -> Plan:
    """Clear an evidence field, returning a new snapshot."""
    evidence_field = normalize_field(name)
    if evidence_field is EvidenceField.LOCKED_CYCLE:
        return replace(plan, locked_cycle=False)
    return set_evidence(plan, evidence_field, None)


def get_evidence(plan: Plan, name: Union[str, EvidenceField]) -> Any:
    """Read an evidence field from a snapshot."""
    evidence_field = normalize_field(name)
    if evidence_field is EvidenceField.LOCKED_CYCLE:
        return plan.locked_cycle
    return getattr(plan.evidence, evidence_field.value)


def prefill_for(plan: Plan, name: Union[str, EvidenceField]) -> Optional[date]:
    """
    Get the value to pre-fill a date input with.

    Returns the actual date when recorded, otherwise the expected date.
    """
    evidence_field = normalize_field(name)
    if evidence_field in FLAG_FIELDS:
        raise EvidenceFieldError(f"{evidence_field.value} is not a date field")

    actual = getattr(plan.evidence, evidence_field.value)
    if actual is not None:
        return actual
    return getattr(plan.expected, _expected_name(evidence_field))


def evidence_patch(plan: Plan) -> Dict[str, Any]:
    """Serialize a snapshot's evidence for a commit request."""
    patch = plan.evidence.to_dict()
    patch[EvidenceField.LOCKED_CYCLE.value] = plan.locked_cycle
    return patch
