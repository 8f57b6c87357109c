"""
breedline Advancement Command

Orchestrates re-validation, confirmation and commit of a phase
transition. A tiny finite-state machine: states are the 8 phases,
edges are i -> i+1, guards are the requirement rules, and one edge
(by default PLANNING -> COMMITTED) passes a confirmation gate.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING
import logging

from breedline.bootstrap.config import LifecycleConfig, get_config
from breedline.core.enums import Phase
from breedline.core.evidence import evidence_patch
from breedline.core.guards import evaluate_guard
from breedline.core.phase_registry import coerce_phase, get_phase_info, next_phase
from breedline.core.plan import Plan
from breedline.core.requirements import Requirement
from breedline.errors.taxonomy import (
    ConflictError,
    ErrorCode,
    create_conflict_error,
    create_persistence_error,
    create_validation_error,
)
from breedline.lifecycle.confirmation import (
    ConfirmGate,
    ask_gate,
    confirmation_context_for,
    requires_confirmation,
)
from breedline.lifecycle.outcomes import (
    Advanced,
    Blocked,
    Conflict,
    Declined,
    PersistenceFailure,
    TransitionOutcome,
)
from breedline.lifecycle.transitions import TransitionRecord

if TYPE_CHECKING:
    from breedline.contracts.plan_store_contract import PlanStoreContract

logger = logging.getLogger(__name__)

SOURCE = "lifecycle/advancement"


def _as_phase(value: object) -> Optional[Phase]:
    try:
        return Phase(value)
    except ValueError:
        return None


def _sequence_requirement(expected: Optional[Phase]) -> Requirement:
    if expected is None:
        hint = "This plan is complete; there is no further phase"
    else:
        hint = f"Plans advance one phase at a time; the next phase is {get_phase_info(expected).label}"
    return Requirement(
        key="sequence",
        label="Next Phase In Sequence",
        satisfied=False,
        action_hint=hint,
    )


class AdvancementCommand:
    """
    Advances plans one phase at a time through a persistence collaborator.
    """

    def __init__(self, store: "PlanStoreContract", config: Optional[LifecycleConfig] = None):
        """
        Args:
            store: Persistence collaborator that commits transitions
            config: Transition policy; defaults to the loaded lifecycle config
        """
        self.store = store
        self.config = config or get_config().lifecycle

    async def advance(
        self,
        plan: Plan,
        confirm_gate: Optional[ConfirmGate] = None,
        target: Optional[Phase] = None,
        triggered_by: Optional[str] = None,
    ) -> TransitionOutcome:
        """
        Try to move a plan into its successor phase.

        Args:
            plan: Snapshot to advance; requirements are re-checked against it
            confirm_gate: Human approval for gated targets
            target: Phase the caller means to enter; must be the successor
            triggered_by: Actor recorded on the transition

        Returns:
            Advanced, Blocked, Declined, Conflict or PersistenceFailure
        """
        from_phase = coerce_phase(plan.current_phase, warn=False)
        successor = next_phase(from_phase)

        # 1. Terminal or out-of-sequence request
        if successor is None:
            if target is not None:
                return Blocked(
                    unsatisfied=[_sequence_requirement(None)],
                    error=create_validation_error(
                        f"Plan is already {from_phase.value}",
                        source=SOURCE,
                        plan_id=plan.plan_id,
                        code=ErrorCode.VAL_TERMINAL_PHASE,
                    ),
                )
            logger.debug(f"Plan {plan.plan_id} already {from_phase.value}; nothing to advance")
            return Blocked(unsatisfied=[])

        if target is not None and _as_phase(target) != successor:
            requested = _as_phase(target)
            requested_key = requested.value if requested else repr(target)
            logger.info(f"Plan {plan.plan_id}: refused jump {from_phase.value} -> {requested_key}")
            return Blocked(
                unsatisfied=[_sequence_requirement(successor)],
                target_phase=requested,
                error=create_validation_error(
                    f"Cannot move from {from_phase.value} to {requested_key}",
                    source=SOURCE,
                    plan_id=plan.plan_id,
                    to_phase=requested.value if requested else None,
                    code=ErrorCode.VAL_PHASE_SKIPPED,
                ),
            )

        # 2-3. Re-validate against this snapshot, never a cached flag
        verdict = evaluate_guard(successor, plan)
        if not verdict.can_advance:
            missing = [r.key for r in verdict.unsatisfied]
            logger.info(f"Plan {plan.plan_id} blocked from {successor.value}: missing {missing}")
            return Blocked(
                unsatisfied=verdict.unsatisfied,
                target_phase=successor,
                error=create_validation_error(
                    f"{verdict.met_count}/{verdict.total_count} requirements met for {successor.value}",
                    source=SOURCE,
                    plan_id=plan.plan_id,
                    to_phase=successor.value,
                ),
            )

        # 4. Confirmation
        confirmed = False
        if confirm_gate is not None and requires_confirmation(successor, self.config.confirm_phases):
            confirmed = await ask_gate(confirm_gate, confirmation_context_for(successor))
            if not confirmed:
                logger.info(f"Plan {plan.plan_id}: advance to {successor.value} declined")
                return Declined(target_phase=successor)

        # 5. Commit
        patch = evidence_patch(plan) if self.config.send_evidence_with_commit else None
        try:
            fresh = await self.store.commit_transition(
                plan.plan_id,
                from_phase,
                successor,
                expected_version=plan.version,
                evidence_patch=patch,
            )
        except ConflictError as e:
            logger.warning(f"Plan {plan.plan_id}: conflict committing {from_phase.value} -> {successor.value}: {e}")
            return Conflict(error=create_conflict_error(
                str(e),
                source=SOURCE,
                plan_id=plan.plan_id,
                from_phase=from_phase.value,
                to_phase=successor.value,
                detail=f"expected_version={e.expected_version} actual_version={e.actual_version}",
            ))
        except Exception as e:
            logger.error(f"Plan {plan.plan_id}: commit {from_phase.value} -> {successor.value} failed: {e}")
            return PersistenceFailure(
                cause=e,
                error=create_persistence_error(
                    e,
                    source=SOURCE,
                    plan_id=plan.plan_id,
                    from_phase=from_phase.value,
                    to_phase=successor.value,
                ),
            )

        # 6. Success
        record = TransitionRecord(
            plan_id=plan.plan_id,
            from_phase=from_phase.value,
            to_phase=successor.value,
            triggered_by=triggered_by or self.config.default_actor,
            confirmed=confirmed,
            requirements_checked=[r.key for r in verdict.requirements],
            from_version=plan.version,
            to_version=fresh.version,
        )
        logger.info(f"Plan {plan.plan_id} advanced {from_phase.value} -> {fresh.current_phase.value}")
        return Advanced(plan=fresh, record=record)


async def advance(
    plan: Plan,
    store: "PlanStoreContract",
    confirm_gate: Optional[ConfirmGate] = None,
    target: Optional[Phase] = None,
    triggered_by: Optional[str] = None,
    config: Optional[LifecycleConfig] = None,
) -> TransitionOutcome:
    """Advance a plan with a one-off AdvancementCommand."""
    command = AdvancementCommand(store, config=config)
    return await command.advance(
        plan,
        confirm_gate=confirm_gate,
        target=target,
        triggered_by=triggered_by,
    )
