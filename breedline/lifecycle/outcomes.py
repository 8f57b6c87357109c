"""
breedline Transition Outcomes

Tagged results of an advancement attempt. Every branch is returned as a
value, never raised, so callers handle each one explicitly.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union

from breedline.core.enums import OutcomeKind, Phase
from breedline.core.plan import Plan
from breedline.core.requirements import Requirement
from breedline.errors.taxonomy import LifecycleError
from breedline.lifecycle.transitions import TransitionRecord


@dataclass
class Advanced:
    """The transition committed; plan is the fresh snapshot."""
    kind: ClassVar[OutcomeKind] = OutcomeKind.ADVANCED

    plan: Plan
    record: Optional[TransitionRecord] = None

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "plan": self.plan.to_dict(),
            "record": self.record.to_dict() if self.record else None,
        }


@dataclass
class Blocked:
    """
    One or more requirements are unmet, or there is no further phase.

    An empty unsatisfied list means the plan is already terminal.
    """
    kind: ClassVar[OutcomeKind] = OutcomeKind.BLOCKED

    unsatisfied: List[Requirement] = field(default_factory=list)
    target_phase: Optional[Phase] = None
    error: Optional[LifecycleError] = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_terminal(self) -> bool:
        return self.target_phase is None and not self.unsatisfied

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "target_phase": self.target_phase.value if self.target_phase else None,
            "unsatisfied": [r.to_dict() for r in self.unsatisfied],
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class Declined:
    """The confirmation gate refused; nothing was committed."""
    kind: ClassVar[OutcomeKind] = OutcomeKind.DECLINED

    target_phase: Optional[Phase] = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "target_phase": self.target_phase.value if self.target_phase else None,
        }


@dataclass
class Conflict:
    """The collaborator detected a stale snapshot. Reload and retry."""
    kind: ClassVar[OutcomeKind] = OutcomeKind.CONFLICT

    error: LifecycleError

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "error": self.error.to_dict()}


@dataclass
class PersistenceFailure:
    """The commit failed in transport or on the server. Not retried."""
    kind: ClassVar[OutcomeKind] = OutcomeKind.PERSISTENCE_FAILURE

    cause: BaseException
    error: Optional[LifecycleError] = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "cause": repr(self.cause),
            "error": self.error.to_dict() if self.error else None,
        }


TransitionOutcome = Union[Advanced, Blocked, Declined, Conflict, PersistenceFailure]
