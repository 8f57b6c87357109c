"""
Unit tests for the error taxonomy.
"""

from breedline.errors.taxonomy import (
    ConflictError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    EvidenceFieldError,
    PersistenceError,
    PlanNotFoundError,
    create_conflict_error,
    create_persistence_error,
    create_validation_error,
)


class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(ConflictError, PersistenceError)
        assert issubclass(PlanNotFoundError, PersistenceError)
        assert issubclass(EvidenceFieldError, ValueError)

    def test_conflict_attributes(self):
        e = ConflictError("stale", plan_id=3, expected_version=1, actual_version=2)
        assert str(e) == "stale"
        assert (e.plan_id, e.expected_version, e.actual_version) == (3, 1, 2)


class TestFactories:

    def test_validation(self):
        error = create_validation_error("0/1 requirements met", source="test", plan_id=1, to_phase="BRED")
        assert error.code == ErrorCode.VAL_REQUIREMENTS_UNMET
        assert error.category == ErrorCategory.VALIDATION
        assert error.severity == ErrorSeverity.WARNING
        assert error.recovery_options == ["supply_evidence"]

    def test_conflict(self):
        error = create_conflict_error("stale", source="test", from_phase="PLANNING", to_phase="COMMITTED")
        assert error.category == ErrorCategory.CONCURRENCY
        assert error.to_dict()["recovery_options"] == ["reload_and_retry"]

    def test_persistence(self):
        error = create_persistence_error(TimeoutError(), source="test")
        assert error.code == ErrorCode.SYS_PERSISTENCE
        assert error.message == "TimeoutError"
        assert error.recoverable is True

    def test_not_found(self):
        error = create_persistence_error(PlanNotFoundError(5), source="test", plan_id=5)
        assert error.code == ErrorCode.SYS_NOT_FOUND
        assert error.recoverable is False
        assert error.to_dict()["code"] == 6002
