"""
breedline Test Configuration and Fixtures

Plan snapshots at each lifecycle phase and a seeded in-memory store.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from breedline.bootstrap.config import reset_config
from breedline.core.enums import Phase
from breedline.core.plan import ExpectedDates, Plan, PlanEvidence
from breedline.store.memory import InMemoryPlanStore


@pytest.fixture(autouse=True)
def clean_config():
    """Drop the cached configuration around every test."""
    reset_config()
    yield
    reset_config()


def make_plan(**overrides) -> Plan:
    """Plan with every PLANNING -> COMMITTED prerequisite met."""
    values = dict(
        plan_id=1,
        current_phase=Phase.PLANNING,
        version=0,
        name="Spring 2025 Litter",
        species="DOG",
        breed="Labrador Retriever",
        dam_id=101,
        sire_id=202,
        locked_cycle=True,
    )
    values.update(overrides)
    return Plan(**values)


@pytest.fixture
def empty_plan():
    """A freshly created plan with nothing filled in."""
    return Plan(plan_id=1)


@pytest.fixture
def ready_plan():
    """PLANNING plan ready to commit."""
    return make_plan()


@pytest.fixture
def committed_plan():
    """COMMITTED plan without a cycle start date."""
    return make_plan(current_phase=Phase.COMMITTED)


@pytest.fixture
def placement_completed_plan():
    """PLACEMENT_COMPLETED plan with every earlier date recorded."""
    return make_plan(
        current_phase=Phase.PLACEMENT_COMPLETED,
        evidence=PlanEvidence(
            actual_cycle_start_date=date(2025, 3, 1),
            actual_breed_date=date(2025, 3, 12),
            actual_birth_date=date(2025, 5, 14),
            actual_weaned_date=date(2025, 7, 2),
            actual_placement_start_date=date(2025, 7, 9),
        ),
        expected=ExpectedDates(expected_placement_completed_date=date(2025, 8, 1)),
    )


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryPlanStore()


@pytest.fixture
def confirm_yes():
    return AsyncMock(return_value=True)


@pytest.fixture
def confirm_no():
    return AsyncMock(return_value=False)


@pytest.fixture
def plan_factory():
    """Build plans from make_plan() defaults plus overrides."""
    return make_plan
