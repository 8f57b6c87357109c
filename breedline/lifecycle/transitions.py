"""
breedline Phase Transitions

Defines the legal phase adjacency and transition records.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid

from breedline.core.enums import Phase
from breedline.core.phase_registry import PHASE_ORDER, get_phase_info


# ==================== Legal Transitions ====================
# Each phase may only move to its immediate successor

LEGAL_TRANSITIONS: Dict[Phase, List[Phase]] = {
    phase: ([PHASE_ORDER[idx + 1]] if idx < len(PHASE_ORDER) - 1 else [])
    for idx, phase in enumerate(PHASE_ORDER)
}


def is_legal_transition(from_phase: Phase, to_phase: Phase) -> bool:
    """Check whether to_phase is the immediate successor of from_phase."""
    return to_phase in LEGAL_TRANSITIONS.get(from_phase, [])


def get_transition_description(from_phase: Phase, to_phase: Phase) -> str:
    """Get a human-readable description of a transition."""
    return f"Advancing from {get_phase_info(from_phase).label} to {get_phase_info(to_phase).label}"


# ==================== Transition Record ====================

@dataclass
class TransitionRecord:
    """
    Record of a committed phase transition.
    """
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    plan_id: Optional[int] = None
    from_phase: str = ""
    to_phase: str = ""
    triggered_by: str = ""
    confirmed: bool = False  # True when a confirmation gate approved it
    requirements_checked: List[str] = field(default_factory=list)
    from_version: Optional[int] = None
    to_version: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def idempotency_key(self) -> str:
        return f"{self.plan_id}:{self.from_phase}:{self.to_phase}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransitionRecord":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
