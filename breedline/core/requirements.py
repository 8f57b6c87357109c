"""
breedline Requirement Resolver

Declarative rule table mapping each target phase to the requirements a
plan must meet before it may advance into that phase.
"""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional, Tuple

from breedline.core.enums import EvidenceField, Phase
from breedline.core.plan import Plan


# ==================== Requirement ====================

@dataclass(frozen=True)
class Requirement:
    """
    A derived condition on a plan snapshot. Never persisted.
    """
    key: str
    label: str
    satisfied: bool
    action_hint: str
    evidence_field: Optional[EvidenceField] = None  # Field that satisfies it, if editable

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["evidence_field"] = self.evidence_field.value if self.evidence_field else None
        return data


@dataclass(frozen=True)
class RequirementRule:
    """
    How to compute one requirement from a plan snapshot.
    """
    key: str
    label: str
    action_hint: str
    check_fn: Callable[[Plan], bool]
    evidence_field: Optional[EvidenceField] = None

    def evaluate(self, plan: Plan) -> Requirement:
        return Requirement(
            key=self.key,
            label=self.label,
            satisfied=bool(self.check_fn(plan)),
            action_hint=self.action_hint,
            evidence_field=self.evidence_field,
        )


# ==================== Checks ====================

def _has_text(value: Optional[str]) -> bool:
    """Text fields count as set when non-blank."""
    return value is not None and value.strip() != ""


def _has_date(field_name: str) -> Callable[[Plan], bool]:
    def check(plan: Plan) -> bool:
        return getattr(plan.evidence, field_name) is not None
    return check


def _date_rule(key: str, label: str, hint: str, evidence_field: EvidenceField) -> RequirementRule:
    return RequirementRule(
        key=key,
        label=label,
        action_hint=hint,
        check_fn=_has_date(evidence_field.value),
        evidence_field=evidence_field,
    )


# ==================== Rule Table ====================

REQUIREMENT_RULES: Dict[Phase, Tuple[RequirementRule, ...]] = {
    Phase.PLANNING: (),

    Phase.COMMITTED: (
        RequirementRule(
            key="planName",
            label="Plan Name",
            action_hint="Enter a plan name",
            check_fn=lambda p: _has_text(p.name),
        ),
        RequirementRule(
            key="species",
            label="Species",
            action_hint="Select a species",
            check_fn=lambda p: _has_text(p.species),
        ),
        RequirementRule(
            key="dam",
            label="Dam (Female)",
            action_hint="Your plan must have a dam selected",
            check_fn=lambda p: p.dam_id is not None,
        ),
        RequirementRule(
            key="sire",
            label="Sire (Male)",
            action_hint="Your plan must have a sire selected",
            check_fn=lambda p: p.sire_id is not None,
        ),
        RequirementRule(
            key="breed",
            label="Breed (Offspring)",
            action_hint="Choose the offspring breed for this plan",
            check_fn=lambda p: _has_text(p.breed),
        ),
        RequirementRule(
            key="cycle",
            label="Locked Cycle",
            action_hint="Select the upcoming estimated cycle start date",
            check_fn=lambda p: p.locked_cycle is True,
            evidence_field=EvidenceField.LOCKED_CYCLE,
        ),
    ),

    Phase.BRED: (
        _date_rule("cycleStart", "Actual Cycle Start",
                   "Enter when the cycle actually started",
                   EvidenceField.ACTUAL_CYCLE_START_DATE),
    ),

    Phase.BIRTHED: (
        _date_rule("breedDate", "Actual Breed Date",
                   "Enter the date when breeding occurred",
                   EvidenceField.ACTUAL_BREED_DATE),
    ),

    Phase.WEANED: (
        _date_rule("birthDate", "Actual Birth Date",
                   "Enter the actual birth date",
                   EvidenceField.ACTUAL_BIRTH_DATE),
    ),

    Phase.PLACEMENT_STARTED: (
        _date_rule("weanedDate", "Actual Weaned Date",
                   "Enter the weaning date",
                   EvidenceField.ACTUAL_WEANED_DATE),
    ),

    Phase.PLACEMENT_COMPLETED: (
        _date_rule("placementStarted", "Actual Placement Start Date",
                   "Enter the placement start date",
                   EvidenceField.ACTUAL_PLACEMENT_START_DATE),
    ),

    Phase.COMPLETE: (
        _date_rule("placementCompleted", "Actual Placement Completed Date",
                   "Enter the placement completed date",
                   EvidenceField.ACTUAL_PLACEMENT_COMPLETED_DATE),
    ),
}


# ==================== Resolver ====================

def get_rules(target_phase: Optional[Phase]) -> Tuple[RequirementRule, ...]:
    """Get the rules for a target phase (empty for None)."""
    if target_phase is None:
        return ()
    return REQUIREMENT_RULES.get(Phase(target_phase), ())


def requirements_for(target_phase: Optional[Phase], plan: Plan) -> List[Requirement]:
    """
    Resolve the requirements for advancing a plan into a target phase.

    Pure: the same (target_phase, plan) always yields an equal list, in
    table order.

    Args:
        target_phase: Phase being advanced into, or None when terminal
        plan: Snapshot supplying the evidence

    Returns:
        Requirements with their satisfied flags
    """
    return [rule.evaluate(plan) for rule in get_rules(target_phase)]


def evidence_field_for(requirement_key: str) -> Optional[EvidenceField]:
    """Map a requirement key to the evidence field that satisfies it."""
    for rules in REQUIREMENT_RULES.values():
        for rule in rules:
            if rule.key == requirement_key:
                return rule.evidence_field
    return None
