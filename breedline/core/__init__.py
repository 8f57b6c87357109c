"""
breedline Core Module

Contains the pure foundation layer:
- Phase registry and enums
- Plan aggregate and evidence model
- Requirement resolver and guard evaluator
- Evidence editor
"""

from breedline.core.enums import Phase, EvidenceField, OutcomeKind, StepStatus
from breedline.core.phase_registry import (
    PHASE_ORDER,
    PHASE_REGISTRY,
    PhaseInfo,
    phase_index,
    next_phase,
    coerce_phase,
    is_terminal,
    get_phase_info,
)
from breedline.core.plan import Plan, PlanEvidence, ExpectedDates
from breedline.core.requirements import Requirement, REQUIREMENT_RULES, requirements_for
from breedline.core.guards import GuardVerdict, evaluate_guard, can_advance
from breedline.core.evidence import set_evidence, clear_evidence, prefill_for

__all__ = [
    "Phase",
    "EvidenceField",
    "OutcomeKind",
    "StepStatus",
    "PHASE_ORDER",
    "PHASE_REGISTRY",
    "PhaseInfo",
    "phase_index",
    "next_phase",
    "coerce_phase",
    "is_terminal",
    "get_phase_info",
    "Plan",
    "PlanEvidence",
    "ExpectedDates",
    "Requirement",
    "REQUIREMENT_RULES",
    "requirements_for",
    "GuardVerdict",
    "evaluate_guard",
    "can_advance",
    "set_evidence",
    "clear_evidence",
    "prefill_for",
]
