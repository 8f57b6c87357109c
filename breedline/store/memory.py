"""
store/memory.py - In-memory plan store

Reference persistence collaborator: optimistic concurrency via a
per-plan version, idempotent transition replay, and an audit history.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple
import asyncio
import logging

from breedline.contracts.plan_store_contract import PlanStoreContract
from breedline.core.enums import EvidenceField, Phase
from breedline.core.evidence import set_evidence
from breedline.core.plan import Plan
from breedline.errors.taxonomy import ConflictError, PlanNotFoundError
from breedline.lifecycle.transitions import TransitionRecord, is_legal_transition

logger = logging.getLogger(__name__)


class InMemoryPlanStore(PlanStoreContract):
    """
    Holds plan snapshots in a dict keyed by plan id.
    """

    def __init__(self, plans: Optional[List[Plan]] = None):
        self._plans: Dict[int, Plan] = {}
        self._lock = asyncio.Lock()

        # Committed transitions keyed by (plan_id, from_phase, to_phase)
        self._committed: Dict[Tuple[int, str, str], TransitionRecord] = {}

        # Completed transitions (for audit)
        self._history: List[TransitionRecord] = []
        self._max_history = 100

        self._next_id = 1
        for plan in plans or []:
            self.put(plan)

    # ==================== Seeding ====================

    def put(self, plan: Plan) -> Plan:
        """Store a snapshot as-is, assigning an id when it has none."""
        if plan.plan_id is None:
            plan = replace(plan, plan_id=self._next_id)
        self._next_id = max(self._next_id, plan.plan_id + 1)
        self._plans[plan.plan_id] = plan
        return plan

    def save_evidence(self, plan: Plan) -> Plan:
        """
        Persist a snapshot's evidence without changing its phase.

        Bumps the version, so older snapshots of the plan become stale.
        """
        stored = self._get(plan.plan_id)
        updated = replace(
            stored,
            locked_cycle=plan.locked_cycle,
            evidence=plan.evidence,
            version=stored.version + 1,
        )
        self._plans[plan.plan_id] = updated
        return updated

    # ==================== Contract ====================

    async def load_plan(self, plan_id: int) -> Plan:
        return self._get(plan_id)

    async def commit_transition(
        self,
        plan_id: int,
        from_phase: Phase,
        to_phase: Phase,
        expected_version: Optional[int] = None,
        evidence_patch: Optional[Dict[str, Any]] = None,
    ) -> Plan:
        async with self._lock:
            stored = self._get(plan_id)
            key = (plan_id, Phase(from_phase).value, Phase(to_phase).value)

            # Replay of a transition that already committed
            if key in self._committed and stored.current_phase == Phase(to_phase):
                logger.info(f"Replayed transition {key}; returning current snapshot")
                return stored

            if stored.current_phase != Phase(from_phase):
                raise ConflictError(
                    f"Plan {plan_id} is in {stored.current_phase.value}, not {Phase(from_phase).value}",
                    plan_id=plan_id,
                    expected_version=expected_version,
                    actual_version=stored.version,
                )

            if expected_version is not None and stored.version != expected_version:
                raise ConflictError(
                    f"Plan {plan_id} changed since version {expected_version}",
                    plan_id=plan_id,
                    expected_version=expected_version,
                    actual_version=stored.version,
                )

            if not is_legal_transition(Phase(from_phase), Phase(to_phase)):
                raise ConflictError(
                    f"Illegal transition {Phase(from_phase).value} -> {Phase(to_phase).value}",
                    plan_id=plan_id,
                    expected_version=expected_version,
                    actual_version=stored.version,
                )

            updated = stored
            for name, value in (evidence_patch or {}).items():
                updated = set_evidence(updated, EvidenceField(name), value)

            updated = replace(updated, current_phase=Phase(to_phase), version=stored.version + 1)
            self._plans[plan_id] = updated

            record = TransitionRecord(
                plan_id=plan_id,
                from_phase=key[1],
                to_phase=key[2],
                from_version=stored.version,
                to_version=updated.version,
            )
            self._prune_committed(plan_id, key[2])
            self._committed[key] = record
            self._add_to_history(record)

            logger.info(f"Committed {record.idempotency_key} at version {updated.version}")
            return updated

    # ==================== History ====================

    def get_history(self, plan_id: Optional[int] = None) -> List[TransitionRecord]:
        """Get committed transitions, optionally for one plan."""
        if plan_id is None:
            return list(self._history)
        return [r for r in self._history if r.plan_id == plan_id]

    def _add_to_history(self, record: TransitionRecord) -> None:
        self._history.append(record)
        if len(self._history) > self._max_history:
            self._history = self._history[-self._max_history:]

    def _prune_committed(self, plan_id: int, current_phase: str) -> None:
        # Only a commit into the current phase can still be replayed
        stale = [k for k in self._committed if k[0] == plan_id and k[2] != current_phase]
        for k in stale:
            del self._committed[k]

    def _get(self, plan_id: int) -> Plan:
        if plan_id not in self._plans:
            raise PlanNotFoundError(plan_id)
        return self._plans[plan_id]
