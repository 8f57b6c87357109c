"""
errors/ - Error Taxonomy

Structured error classification for transition outcomes and the
exceptions raised across the persistence seam.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCategory,
    ErrorCode,
    LifecycleError,
    BreedlineError,
    EvidenceFieldError,
    PersistenceError,
    PlanNotFoundError,
    ConflictError,
    create_validation_error,
    create_conflict_error,
    create_persistence_error,
)

__all__ = [
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCode",
    "LifecycleError",
    # Exceptions
    "BreedlineError",
    "EvidenceFieldError",
    "PersistenceError",
    "PlanNotFoundError",
    "ConflictError",
    # Factories
    "create_validation_error",
    "create_conflict_error",
    "create_persistence_error",
]
