"""
breedline Journey View

Presentation-agnostic derivation of what a plan's journey panel shows:
per-phase step status, the checklist for the next phase, titles, and
the date inputs backing it. Returns plain data for the UI to render.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from breedline.core.enums import EvidenceField, Phase, StepStatus
from breedline.core.evidence import get_evidence, prefill_for
from breedline.core.guards import GuardVerdict, evaluate_guard
from breedline.core.phase_registry import PHASE_REGISTRY, next_phase, phase_index
from breedline.core.plan import Plan, parse_date


GUIDANCE_TITLES: Dict[Phase, str] = {
    Phase.PLANNING: "Planning Phase Guidance",
    Phase.COMMITTED: "Committed Phase Guidance",
    Phase.BRED: "Bred Phase Guidance",
    Phase.BIRTHED: "Birthed Phase Guidance",
    Phase.WEANED: "Weaned Phase Guidance",
    Phase.PLACEMENT_STARTED: "Placement Phase Guidance",
    Phase.PLACEMENT_COMPLETED: "Completing Plan Guidance",
    Phase.COMPLETE: "Plan Complete",
}


@dataclass(frozen=True)
class JourneyStep:
    key: Phase
    label: str
    short_label: str
    number: int  # 1-based, as displayed
    status: StepStatus


@dataclass(frozen=True)
class DateInput:
    """A date input backing a requirement, with its pre-fill."""
    requirement_key: str
    field: EvidenceField
    value: Optional[date]
    prefill: Optional[date]


@dataclass(frozen=True)
class JourneyView:
    current_phase: Phase
    next_phase: Optional[Phase]
    steps: List[JourneyStep]
    verdict: GuardVerdict
    collapsed_title: str
    guidance_title: str
    date_inputs: List[DateInput] = field(default_factory=list)

    @property
    def can_advance(self) -> bool:
        return self.next_phase is not None and self.verdict.can_advance

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_phase": self.current_phase.value,
            "next_phase": self.next_phase.value if self.next_phase else None,
            "steps": [
                {
                    "key": s.key.value,
                    "label": s.label,
                    "short_label": s.short_label,
                    "number": s.number,
                    "status": s.status.value,
                }
                for s in self.steps
            ],
            "verdict": self.verdict.to_dict(),
            "collapsed_title": self.collapsed_title,
            "guidance_title": self.guidance_title,
            "date_inputs": [
                {
                    "requirement_key": d.requirement_key,
                    "field": d.field.value,
                    "value": d.value.isoformat() if d.value else None,
                    "prefill": d.prefill.isoformat() if d.prefill else None,
                }
                for d in self.date_inputs
            ],
        }


def _step_status(idx: int, current_idx: int) -> StepStatus:
    if idx < current_idx:
        return StepStatus.COMPLETED
    if idx == current_idx:
        return StepStatus.CURRENT
    if idx == current_idx + 1:
        return StepStatus.NEXT
    return StepStatus.UPCOMING


def _collapsed_title(plan: Plan, target: Optional[Phase], verdict: GuardVerdict, is_edit: bool) -> str:
    if target is None:
        if plan.evidence.has_plan_completed:
            return "Plan Complete"
        return "Enter Plan Completion Date" if is_edit else "Final Completion Phase - Click Edit"

    if verdict.can_advance:
        number = phase_index(target) + 1
        if is_edit:
            return f"Breeding Plan Ready for Phase {number}"
        return f"Breeding Plan Ready for Phase {number} - Click Edit to Advance"

    return "Remaining Tasks"


def build_journey(plan: Plan, is_edit: bool = False) -> JourneyView:
    """
    Derive the journey panel contents for a plan snapshot.

    Args:
        plan: Current snapshot
        is_edit: Whether the caller is in edit mode (changes titles only)
    """
    current_idx = phase_index(plan.current_phase)
    current = PHASE_REGISTRY[current_idx].key
    target = next_phase(current)
    verdict = evaluate_guard(target, plan)

    steps = [
        JourneyStep(
            key=info.key,
            label=info.label,
            short_label=info.short_label,
            number=idx + 1,
            status=_step_status(idx, current_idx),
        )
        for idx, info in enumerate(PHASE_REGISTRY)
    ]

    date_inputs = [
        DateInput(
            requirement_key=r.key,
            field=r.evidence_field,
            value=get_evidence(plan, r.evidence_field),
            prefill=prefill_for(plan, r.evidence_field),
        )
        for r in verdict.requirements
        if r.evidence_field is not None and r.evidence_field is not EvidenceField.LOCKED_CYCLE
    ]

    # The final phase collects the plan completion date instead of a requirement
    if target is None:
        date_inputs.append(DateInput(
            requirement_key="planCompleted",
            field=EvidenceField.ACTUAL_PLAN_COMPLETED_DATE,
            value=plan.evidence.actual_plan_completed_date,
            prefill=prefill_for(plan, EvidenceField.ACTUAL_PLAN_COMPLETED_DATE),
        ))

    return JourneyView(
        current_phase=current,
        next_phase=target,
        steps=steps,
        verdict=verdict,
        collapsed_title=_collapsed_title(plan, target, verdict, is_edit),
        guidance_title=GUIDANCE_TITLES[current],
        date_inputs=date_inputs,
    )


def format_date_display(value: Any) -> str:
    """
    Format a date for display, e.g. "Jan 5, 2026".

    Accepts date objects, "YYYY-MM-DD" strings and ISO timestamps.
    Returns "" for empty or unreadable input.
    """
    try:
        parsed = parse_date(value)
    except ValueError:
        return ""
    if parsed is None:
        return ""
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"
