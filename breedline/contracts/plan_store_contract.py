"""
PlanStore Contract - Abstract Base Class

Defines the interface the persistence collaborator must provide:
- Loading plan snapshots
- Committing phase transitions with optimistic concurrency
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from breedline.core.enums import Phase
from breedline.core.plan import Plan


class PlanStoreContract(ABC):
    """
    Abstract contract for the plan persistence collaborator.

    The store exclusively owns the Plan aggregate between commits. It is
    responsible for detecting concurrent modification and raising
    ConflictError rather than silently overwriting.
    """

    @abstractmethod
    async def load_plan(self, plan_id: int) -> Plan:
        """
        Load the latest snapshot of a plan.

        Args:
            plan_id: Plan identifier.

        Returns:
            Current Plan snapshot.

        Raises:
            PlanNotFoundError: If no plan has this id.
        """
        pass

    @abstractmethod
    async def commit_transition(
        self,
        plan_id: int,
        from_phase: Phase,
        to_phase: Phase,
        expected_version: Optional[int] = None,
        evidence_patch: Optional[Dict[str, Any]] = None,
    ) -> Plan:
        """
        Commit a phase transition.

        Must be idempotent keyed by (plan_id, from_phase, to_phase): replaying
        a transition that already committed returns the current snapshot.

        Args:
            plan_id: Plan identifier.
            from_phase: Phase the caller saw the plan in.
            to_phase: Successor phase to move into.
            expected_version: Version the caller's snapshot was taken at.
            evidence_patch: Evidence fields to store alongside the transition.

        Returns:
            The fresh Plan snapshot.

        Raises:
            ConflictError: If the plan changed since the caller's snapshot.
            PersistenceError: On transport or server failure.
        """
        pass
