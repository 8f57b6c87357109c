"""
Unit tests for the evidence editor.
"""

from datetime import date, datetime

import pytest

from breedline.core.enums import EvidenceField, Phase
from breedline.core.evidence import (
    clear_evidence,
    evidence_patch,
    get_evidence,
    is_date_field,
    normalize_field,
    prefill_for,
    set_evidence,
)
from breedline.core.guards import can_advance
from breedline.errors.taxonomy import EvidenceFieldError


class TestNormalizeField:
    """Test field name resolution."""

    def test_enum(self):
        assert normalize_field(EvidenceField.ACTUAL_BIRTH_DATE) is EvidenceField.ACTUAL_BIRTH_DATE

    def test_snake_case(self):
        assert normalize_field("actual_breed_date") is EvidenceField.ACTUAL_BREED_DATE

    def test_camel_case_alias(self):
        assert normalize_field("actualCycleStartDate") is EvidenceField.ACTUAL_CYCLE_START_DATE
        assert normalize_field("lockedCycle") is EvidenceField.LOCKED_CYCLE

    def test_unknown(self):
        with pytest.raises(EvidenceFieldError):
            normalize_field("currentPhase")

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_field("name")

    def test_is_date_field(self):
        assert is_date_field("actualWeanedDate")
        assert not is_date_field("locked_cycle")


class TestSetEvidence:
    """Test set_evidence."""

    def test_set_from_iso_string(self, committed_plan):
        updated = set_evidence(committed_plan, "actualCycleStartDate", "2025-03-01")
        assert updated.evidence.actual_cycle_start_date == date(2025, 3, 1)
        assert updated.evidence.has_actual_cycle_start

    def test_set_from_timestamp(self, committed_plan):
        updated = set_evidence(committed_plan, "actualCycleStartDate", "2025-03-01T00:00:00.000Z")
        assert updated.evidence.actual_cycle_start_date == date(2025, 3, 1)

    def test_set_from_datetime(self, committed_plan):
        updated = set_evidence(committed_plan, EvidenceField.ACTUAL_BREED_DATE, datetime(2025, 3, 12, 9, 30))
        assert updated.evidence.actual_breed_date == date(2025, 3, 12)

    def test_input_snapshot_untouched(self, committed_plan):
        set_evidence(committed_plan, "actualCycleStartDate", date(2025, 3, 1))
        assert committed_plan.evidence.actual_cycle_start_date is None

    def test_phase_untouched(self, committed_plan):
        updated = set_evidence(committed_plan, "actualCycleStartDate", date(2025, 3, 1))
        assert updated.current_phase == Phase.COMMITTED

    def test_empty_string_clears(self, committed_plan):
        plan = set_evidence(committed_plan, "actualCycleStartDate", "2025-03-01")
        assert set_evidence(plan, "actualCycleStartDate", "").evidence.actual_cycle_start_date is None

    def test_bad_date(self, committed_plan):
        with pytest.raises(EvidenceFieldError):
            set_evidence(committed_plan, "actualCycleStartDate", "not-a-date")

    def test_bad_type(self, committed_plan):
        with pytest.raises(EvidenceFieldError):
            set_evidence(committed_plan, "actualCycleStartDate", 20250301)

    def test_locked_cycle_flag(self, plan_factory):
        plan = plan_factory(locked_cycle=False)
        assert set_evidence(plan, "lockedCycle", True).locked_cycle is True

    def test_locked_cycle_requires_bool(self, plan_factory):
        with pytest.raises(EvidenceFieldError):
            set_evidence(plan_factory(), EvidenceField.LOCKED_CYCLE, "yes")


class TestClearEvidence:
    """Test clear_evidence."""

    def test_clear_date(self, committed_plan):
        plan = set_evidence(committed_plan, "actualCycleStartDate", "2025-03-01")
        cleared = clear_evidence(plan, "actualCycleStartDate")
        assert cleared.evidence.actual_cycle_start_date is None

    def test_clear_flag(self, ready_plan):
        assert clear_evidence(ready_plan, "locked_cycle").locked_cycle is False

    def test_clearing_never_regresses_phase(self, plan_factory):
        """Clearing the date that justified BRED leaves the plan in BRED."""
        plan = plan_factory(current_phase=Phase.BRED)
        plan = set_evidence(plan, "actualCycleStartDate", "2025-03-01")
        cleared = clear_evidence(plan, "actualCycleStartDate")
        assert cleared.current_phase == Phase.BRED

    def test_clearing_reblocks_next_transition(self, committed_plan):
        plan = set_evidence(committed_plan, "actualCycleStartDate", "2025-03-01")
        assert can_advance(Phase.BRED, plan)
        assert not can_advance(Phase.BRED, clear_evidence(plan, "actualCycleStartDate"))


class TestPrefill:
    """Test prefill_for and get_evidence."""

    def test_prefill_uses_expected(self, placement_completed_plan):
        assert prefill_for(placement_completed_plan, "actualPlacementCompletedDate") == date(2025, 8, 1)

    def test_prefill_prefers_actual(self, placement_completed_plan):
        plan = set_evidence(placement_completed_plan, "actualPlacementCompletedDate", "2025-08-03")
        assert prefill_for(plan, "actualPlacementCompletedDate") == date(2025, 8, 3)

    def test_prefill_none(self, committed_plan):
        assert prefill_for(committed_plan, "actualBirthDate") is None

    def test_prefill_rejects_flag(self, committed_plan):
        with pytest.raises(EvidenceFieldError):
            prefill_for(committed_plan, "lockedCycle")

    def test_get_evidence(self, placement_completed_plan):
        assert get_evidence(placement_completed_plan, "actualBirthDate") == date(2025, 5, 14)
        assert get_evidence(placement_completed_plan, "lockedCycle") is True


class TestEvidencePatch:
    """Test evidence serialization for commits."""

    def test_patch_contents(self, placement_completed_plan):
        patch = evidence_patch(placement_completed_plan)
        assert patch["actual_birth_date"] == "2025-05-14"
        assert patch["actual_plan_completed_date"] is None
        assert patch["locked_cycle"] is True
