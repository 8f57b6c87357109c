"""
Unit tests for the Plan aggregate and payload parsing.
"""

import logging
from dataclasses import FrozenInstanceError, replace
from datetime import date

import pytest
from pydantic import ValidationError

from breedline.core.enums import Phase
from breedline.core.plan import Plan, PlanEvidence, parse_date
from breedline.core.schemas import PlanPayload, plan_from_payload


class TestParseDate:
    """Test parse_date."""

    def test_none_and_blank(self):
        assert parse_date(None) is None
        assert parse_date("  ") is None

    def test_timestamp(self):
        assert parse_date("2026-01-05T23:59:00.000Z") == date(2026, 1, 5)

    def test_rejects_numbers(self):
        with pytest.raises(ValueError):
            parse_date(5)


class TestPlan:
    """Test Plan dataclass."""

    def test_defaults(self):
        plan = Plan()
        assert plan.current_phase == Phase.PLANNING
        assert plan.version == 0
        assert plan.locked_cycle is False
        assert not plan.evidence.has_actual_cycle_start

    def test_frozen(self, ready_plan):
        with pytest.raises(FrozenInstanceError):
            ready_plan.current_phase = Phase.COMPLETE

    def test_dict_roundtrip(self, placement_completed_plan):
        data = placement_completed_plan.to_dict()
        assert data["current_phase"] == "PLACEMENT_COMPLETED"
        assert data["evidence"]["actual_weaned_date"] == "2025-07-02"
        assert Plan.from_dict(data) == placement_completed_plan

    def test_from_dict_unknown_status(self):
        plan = Plan.from_dict({"plan_id": 9, "current_phase": "ARCHIVED"})
        assert plan.current_phase == Phase.PLANNING

    def test_from_dict_warning_follows_config(self, tmp_path, monkeypatch, caplog):
        monkeypatch.setenv("BREEDLINE_WARN_UNKNOWN_STATUS", "false")
        monkeypatch.chdir(tmp_path)

        with caplog.at_level(logging.WARNING, logger="breedline.core.phase_registry"):
            Plan.from_dict({"plan_id": 9, "current_phase": "ARCHIVED"})

        assert "ARCHIVED" not in caplog.text

    def test_from_dict_explicit_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="breedline.core.phase_registry"):
            Plan.from_dict({"current_phase": "ARCHIVED"}, warn_on_unknown_status=True)
        assert "ARCHIVED" in caplog.text

    def test_string_status_is_coerced(self):
        plan = Plan(current_phase="WEANED")
        assert plan.current_phase is Phase.WEANED
        assert plan.to_dict()["current_phase"] == "WEANED"

    def test_none_status_is_planning(self):
        assert Plan(current_phase=None).current_phase is Phase.PLANNING

    def test_unknown_status_is_planning(self):
        assert Plan(current_phase="ARCHIVED").current_phase is Phase.PLANNING

    def test_replace_with_string_status(self, ready_plan):
        assert replace(ready_plan, current_phase="BRED").current_phase is Phase.BRED

    def test_has_flags(self):
        evidence = PlanEvidence(
            actual_placement_start_date=date(2025, 7, 9),
            actual_plan_completed_date=date(2025, 9, 1),
        )
        assert evidence.has_placement_started
        assert evidence.has_plan_completed
        assert not evidence.has_placement_completed


class TestPlanPayload:
    """Test parsing collaborator payloads."""

    def test_camel_case_payload(self):
        plan = plan_from_payload({
            "id": 42,
            "status": "COMMITTED",
            "version": 3,
            "name": "Autumn",
            "species": "CAT",
            "breedText": "Maine Coon",
            "damId": 7,
            "sireId": 8,
            "lockedCycleStart": "2025-02-20",
            "actualCycleStartDate": "2025-03-01T00:00:00.000Z",
            "expectedBreedDate": "2025-03-12",
            "offspringGroupId": 99,
        })
        assert plan.plan_id == 42
        assert plan.current_phase == Phase.COMMITTED
        assert plan.version == 3
        assert plan.breed == "Maine Coon"
        assert plan.locked_cycle is True
        assert plan.evidence.actual_cycle_start_date == date(2025, 3, 1)
        assert plan.expected.expected_breed_date == date(2025, 3, 12)

    def test_null_status(self):
        assert plan_from_payload({"id": 1, "status": None}).current_phase == Phase.PLANNING

    def test_unrecognized_status(self):
        assert plan_from_payload({"id": 1, "status": "ARCHIVED"}).current_phase == Phase.PLANNING

    def test_explicit_locked_cycle_wins(self):
        plan = plan_from_payload({"id": 1, "lockedCycle": False, "lockedCycleStart": "2025-02-20"})
        assert plan.locked_cycle is False

    def test_snake_case_names_accepted(self):
        payload = PlanPayload(id=1, dam_id=5, actual_birth_date="2025-05-14")
        assert payload.dam_id == 5
        assert payload.to_plan().evidence.actual_birth_date == date(2025, 5, 14)

    def test_invalid_date(self):
        with pytest.raises(ValidationError):
            plan_from_payload({"id": 1, "actualBirthDate": "14/05/2025"})
