"""
breedline Lifecycle Module

Transition orchestration on top of the core layer:
- Confirmation gate
- Advancement command and its outcomes
- Journey view
"""

from breedline.lifecycle.confirmation import (
    ConfirmContext,
    ConfirmGate,
    CONFIRMATION_PROMPTS,
    requires_confirmation,
    confirmation_context_for,
    auto_confirm,
    auto_decline,
)
from breedline.lifecycle.outcomes import (
    Advanced,
    Blocked,
    Declined,
    Conflict,
    PersistenceFailure,
    TransitionOutcome,
)
from breedline.lifecycle.transitions import LEGAL_TRANSITIONS, TransitionRecord, is_legal_transition
from breedline.lifecycle.advancement import AdvancementCommand, advance
from breedline.lifecycle.journey import JourneyView, build_journey, format_date_display

__all__ = [
    "ConfirmContext",
    "ConfirmGate",
    "CONFIRMATION_PROMPTS",
    "requires_confirmation",
    "confirmation_context_for",
    "auto_confirm",
    "auto_decline",
    "Advanced",
    "Blocked",
    "Declined",
    "Conflict",
    "PersistenceFailure",
    "TransitionOutcome",
    "LEGAL_TRANSITIONS",
    "TransitionRecord",
    "is_legal_transition",
    "AdvancementCommand",
    "advance",
    "JourneyView",
    "build_journey",
    "format_date_display",
]
