"""
breedline Core Enumerations

Enumeration types shared by the lifecycle engine.
"""

from enum import Enum


class Phase(str, Enum):
    """
    The 8 ordered lifecycle phases of a breeding plan.

    Flow: PLANNING -> COMMITTED -> BRED -> BIRTHED -> WEANED ->
          PLACEMENT_STARTED -> PLACEMENT_COMPLETED -> COMPLETE
    """
    PLANNING = "PLANNING"
    COMMITTED = "COMMITTED"
    BRED = "BRED"
    BIRTHED = "BIRTHED"
    WEANED = "WEANED"
    PLACEMENT_STARTED = "PLACEMENT_STARTED"
    PLACEMENT_COMPLETED = "PLACEMENT_COMPLETED"
    COMPLETE = "COMPLETE"


class EvidenceField(str, Enum):
    """
    Plan fields the evidence editor may set or clear.
    """
    LOCKED_CYCLE = "locked_cycle"  # Flag, not a date
    ACTUAL_CYCLE_START_DATE = "actual_cycle_start_date"
    ACTUAL_HORMONE_TESTING_START_DATE = "actual_hormone_testing_start_date"
    ACTUAL_BREED_DATE = "actual_breed_date"
    ACTUAL_BIRTH_DATE = "actual_birth_date"
    ACTUAL_WEANED_DATE = "actual_weaned_date"
    ACTUAL_PLACEMENT_START_DATE = "actual_placement_start_date"
    ACTUAL_PLACEMENT_COMPLETED_DATE = "actual_placement_completed_date"
    ACTUAL_PLAN_COMPLETED_DATE = "actual_plan_completed_date"


class OutcomeKind(str, Enum):
    """
    Tags for the result of an advancement attempt.
    """
    ADVANCED = "advanced"
    BLOCKED = "blocked"
    DECLINED = "declined"                        # Confirmation refused
    CONFLICT = "conflict"                        # Stale snapshot
    PERSISTENCE_FAILURE = "persistence_failure"  # Transport/server error


class StepStatus(str, Enum):
    """
    Display status of a phase relative to the plan's current phase.
    """
    COMPLETED = "completed"
    CURRENT = "current"
    NEXT = "next"
    UPCOMING = "upcoming"
