"""
breedline Guard Evaluator

Aggregates a requirement list into a single "may advance" verdict.

An empty requirement list is automatically satisfied (free advance).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from breedline.core.enums import Phase
from breedline.core.plan import Plan
from breedline.core.requirements import Requirement, requirements_for


@dataclass(frozen=True)
class GuardVerdict:
    """
    Guard result for one target phase, with progress counts for display.
    """
    target_phase: Optional[Phase]
    requirements: List[Requirement] = field(default_factory=list)

    @property
    def unsatisfied(self) -> List[Requirement]:
        return [r for r in self.requirements if not r.satisfied]

    @property
    def met_count(self) -> int:
        return len(self.requirements) - len(self.unsatisfied)

    @property
    def total_count(self) -> int:
        return len(self.requirements)

    @property
    def can_advance(self) -> bool:
        return all(r.satisfied for r in self.requirements)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target_phase": self.target_phase.value if self.target_phase else None,
            "requirements": [r.to_dict() for r in self.requirements],
            "met_count": self.met_count,
            "total_count": self.total_count,
            "can_advance": self.can_advance,
        }


def evaluate_guard(target_phase: Optional[Phase], plan: Plan) -> GuardVerdict:
    """Evaluate the guard for advancing a plan into a target phase."""
    return GuardVerdict(
        target_phase=Phase(target_phase) if target_phase is not None else None,
        requirements=requirements_for(target_phase, plan),
    )


def can_advance(target_phase: Optional[Phase], plan: Plan) -> bool:
    """
    Check whether every requirement for the target phase is satisfied.

    Vacuously true when the target has no requirements.
    """
    return all(r.satisfied for r in requirements_for(target_phase, plan))
