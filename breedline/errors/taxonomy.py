"""
errors/taxonomy.py - Error classification for the lifecycle engine

Structured error records carried by transition outcomes, plus the
exceptions raised across the persistence seam.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from enum import Enum
import uuid


class ErrorSeverity(Enum):
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    # Requirement checks (1xxx)
    VALIDATION = "validation"

    # Stale or concurrent state (5xxx)
    CONCURRENCY = "concurrency"

    # Collaborator transport/server (6xxx)
    PERSISTENCE = "persistence"


class ErrorCode(Enum):
    """Specific error codes."""

    # Validation (1xxx)
    VAL_REQUIREMENTS_UNMET = 1001
    VAL_TERMINAL_PHASE = 1002
    VAL_PHASE_SKIPPED = 1003

    # Concurrency (5xxx)
    STA_CONFLICT = 5001

    # Persistence (6xxx)
    SYS_PERSISTENCE = 6001
    SYS_NOT_FOUND = 6002


@dataclass
class LifecycleError:
    """Structured error representation."""

    error_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    code: ErrorCode = ErrorCode.VAL_REQUIREMENTS_UNMET
    category: ErrorCategory = ErrorCategory.VALIDATION
    severity: ErrorSeverity = ErrorSeverity.ERROR

    message: str = ""
    detail: str = ""

    # Context
    source: str = ""
    plan_id: Optional[int] = None
    from_phase: Optional[str] = None
    to_phase: Optional[str] = None

    # Recovery
    recoverable: bool = True
    recovery_options: List[str] = field(default_factory=list)

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "detail": self.detail,
            "source": self.source,
            "plan_id": self.plan_id,
            "from_phase": self.from_phase,
            "to_phase": self.to_phase,
            "recoverable": self.recoverable,
            "recovery_options": list(self.recovery_options),
        }


# ==================== Exceptions ====================

class BreedlineError(Exception):
    """Base class for lifecycle engine exceptions."""


class EvidenceFieldError(BreedlineError, ValueError):
    """An evidence field name or value is not recognized."""


class PersistenceError(BreedlineError):
    """The collaborator failed to commit or load a plan."""


class PlanNotFoundError(PersistenceError):
    """The collaborator has no plan with the requested id."""

    def __init__(self, plan_id: Any):
        super().__init__(f"Plan {plan_id!r} not found")
        self.plan_id = plan_id


class ConflictError(PersistenceError):
    """The plan changed underneath the caller."""

    def __init__(
        self,
        message: str,
        plan_id: Any = None,
        expected_version: Optional[int] = None,
        actual_version: Optional[int] = None,
    ):
        super().__init__(message)
        self.plan_id = plan_id
        self.expected_version = expected_version
        self.actual_version = actual_version


# ==================== Factories ====================

def create_validation_error(
    message: str,
    source: str,
    plan_id: Optional[int] = None,
    to_phase: Optional[str] = None,
    code: ErrorCode = ErrorCode.VAL_REQUIREMENTS_UNMET,
) -> LifecycleError:
    """Factory for unmet-requirement errors."""
    return LifecycleError(
        code=code,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.WARNING,
        message=message,
        source=source,
        plan_id=plan_id,
        to_phase=to_phase,
        recovery_options=["supply_evidence"],
    )


def create_conflict_error(
    message: str,
    source: str,
    plan_id: Optional[int] = None,
    from_phase: Optional[str] = None,
    to_phase: Optional[str] = None,
    detail: str = "",
) -> LifecycleError:
    """Factory for concurrent-modification errors."""
    return LifecycleError(
        code=ErrorCode.STA_CONFLICT,
        category=ErrorCategory.CONCURRENCY,
        severity=ErrorSeverity.WARNING,
        message=message,
        detail=detail,
        source=source,
        plan_id=plan_id,
        from_phase=from_phase,
        to_phase=to_phase,
        recovery_options=["reload_and_retry"],
    )


def create_persistence_error(
    cause: BaseException,
    source: str,
    plan_id: Optional[int] = None,
    from_phase: Optional[str] = None,
    to_phase: Optional[str] = None,
) -> LifecycleError:
    """Factory for commit failures. Retrying is manual; commits are idempotent."""
    code = ErrorCode.SYS_NOT_FOUND if isinstance(cause, PlanNotFoundError) else ErrorCode.SYS_PERSISTENCE
    return LifecycleError(
        code=code,
        category=ErrorCategory.PERSISTENCE,
        severity=ErrorSeverity.ERROR,
        message=str(cause) or type(cause).__name__,
        detail=type(cause).__name__,
        source=source,
        plan_id=plan_id,
        from_phase=from_phase,
        to_phase=to_phase,
        recoverable=code != ErrorCode.SYS_NOT_FOUND,
        recovery_options=[] if code == ErrorCode.SYS_NOT_FOUND else ["retry_commit"],
    )
