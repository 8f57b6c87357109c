"""
breedline Confirmation Gate

Injectable human-in-the-loop check invoked before sensitive transitions
commit. The gate is purely advisory: answering False aborts the
transition and nothing is mutated.
"""

from dataclasses import dataclass, asdict
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional
import logging

from breedline.core.enums import Phase
from breedline.core.phase_registry import get_phase_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmContext:
    """Prompt shown to the human deciding a gated transition."""
    title: str
    message: str
    confirm_text: str = "Confirm"
    cancel_text: str = "Cancel"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


ConfirmGate = Callable[[ConfirmContext], Awaitable[bool]]


# ==================== Prompts ====================

CONFIRMATION_PROMPTS: Dict[Phase, ConfirmContext] = {
    Phase.COMMITTED: ConfirmContext(
        title="Commit to This Breeding Plan?",
        message=(
            "You are about to commit to this breeding plan. This confirms that you have:\n"
            "- Finalized your dam and sire selection\n"
            "- Locked in your estimated cycle start date\n"
            "- Every intention to proceed with breeding this pairing\n"
            "\n"
            "You can still make changes after committing, but this marks the plan "
            "as actively in progress."
        ),
        confirm_text="I'm Committed",
        cancel_text="Not Yet",
    ),
}


def requires_confirmation(target_phase: Optional[Phase], confirm_phases: Iterable[str]) -> bool:
    """Check whether advancing into target_phase needs a human decision."""
    if target_phase is None:
        return False
    return Phase(target_phase).value in set(confirm_phases)


def confirmation_context_for(target_phase: Phase) -> ConfirmContext:
    """Get the prompt for a gated target, with a generic fallback."""
    target_phase = Phase(target_phase)
    if target_phase in CONFIRMATION_PROMPTS:
        return CONFIRMATION_PROMPTS[target_phase]

    label = get_phase_info(target_phase).label
    return ConfirmContext(
        title=f"Advance to {label}?",
        message=f"This moves the plan into the {label} phase.",
        confirm_text="Advance",
        cancel_text="Not Yet",
    )


async def ask_gate(gate: ConfirmGate, context: ConfirmContext) -> bool:
    """
    Invoke a confirmation gate.

    A gate that raises is treated as a decline so a failing prompt can
    never commit a transition.
    """
    try:
        answer = await gate(context)
    except Exception as e:
        logger.warning(f"Confirmation gate failed for '{context.title}': {e}")
        return False
    return answer is True


# ==================== Automation Gates ====================

async def auto_confirm(context: ConfirmContext) -> bool:
    """Gate for automated callers that always approves."""
    return True


async def auto_decline(context: ConfirmContext) -> bool:
    """Gate that always refuses."""
    return False
