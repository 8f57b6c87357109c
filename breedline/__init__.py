"""
breedline - Breeding-plan lifecycle engine

Tracks a breeding plan through eight sequential phases, decides whether
it may advance, and reports the evidence a user must still supply.
"""

from breedline.core import (
    Phase,
    EvidenceField,
    Plan,
    PlanEvidence,
    ExpectedDates,
    Requirement,
    phase_index,
    next_phase,
    requirements_for,
    can_advance,
    evaluate_guard,
    set_evidence,
    clear_evidence,
)
from breedline.lifecycle import (
    AdvancementCommand,
    advance,
    Advanced,
    Blocked,
    Declined,
    Conflict,
    PersistenceFailure,
    TransitionOutcome,
    ConfirmContext,
    ConfirmGate,
    auto_confirm,
    build_journey,
)
from breedline.core.schemas import PlanPayload, plan_from_payload
from breedline.store import InMemoryPlanStore
from breedline.bootstrap import LifecycleConfig, BreedlineConfig, get_config, setup_logging

__version__ = "1.0.0"

__all__ = [
    "Phase",
    "EvidenceField",
    "Plan",
    "PlanEvidence",
    "ExpectedDates",
    "Requirement",
    "phase_index",
    "next_phase",
    "requirements_for",
    "can_advance",
    "evaluate_guard",
    "set_evidence",
    "clear_evidence",
    "AdvancementCommand",
    "advance",
    "Advanced",
    "Blocked",
    "Declined",
    "Conflict",
    "PersistenceFailure",
    "TransitionOutcome",
    "ConfirmContext",
    "ConfirmGate",
    "auto_confirm",
    "build_journey",
    "PlanPayload",
    "plan_from_payload",
    "InMemoryPlanStore",
    "LifecycleConfig",
    "BreedlineConfig",
    "get_config",
    "setup_logging",
]
