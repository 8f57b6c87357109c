"""
breedline Phase Registry

The ordered, immutable list of lifecycle phases and the fallback
mapping from an arbitrary status value to a phase index.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import logging

from breedline.core.enums import Phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhaseInfo:
    """
    Display metadata for a lifecycle phase.
    """
    key: Phase
    label: str
    short_label: str


# ==================== Registry ====================

PHASE_REGISTRY: Tuple[PhaseInfo, ...] = (
    PhaseInfo(Phase.PLANNING, "Planning", "Planning"),
    PhaseInfo(Phase.COMMITTED, "Committed", "Committed"),
    PhaseInfo(Phase.BRED, "Breeding", "Breeding"),
    PhaseInfo(Phase.BIRTHED, "Birth", "Birth"),
    PhaseInfo(Phase.WEANED, "Weaned", "Weaned"),
    PhaseInfo(Phase.PLACEMENT_STARTED, "Placement Started", "Placement"),
    PhaseInfo(Phase.PLACEMENT_COMPLETED, "Placement Completed", "Placed"),
    PhaseInfo(Phase.COMPLETE, "Plan Complete", "Complete"),
)

PHASE_ORDER: Tuple[Phase, ...] = tuple(info.key for info in PHASE_REGISTRY)

_INDEX_BY_KEY: Dict[str, int] = {phase.value: idx for idx, phase in enumerate(PHASE_ORDER)}

FIRST_PHASE: Phase = PHASE_ORDER[0]
TERMINAL_PHASE: Phase = PHASE_ORDER[-1]


# ==================== Lookups ====================

def _lookup(status: Any) -> Optional[int]:
    if isinstance(status, Phase):
        return _INDEX_BY_KEY[status.value]
    if isinstance(status, str):
        return _INDEX_BY_KEY.get(status)
    return None


def phase_index(status: Any) -> int:
    """
    Map a status value to its phase index.

    Total: None, unknown strings and non-string values all map to 0
    (PLANNING). Never raises.
    """
    idx = _lookup(status)
    return 0 if idx is None else idx


def coerce_phase(status: Any, warn: bool = True) -> Phase:
    """
    Map a status value to a Phase, falling back to PLANNING.

    Args:
        status: Raw status from a snapshot (Phase, str or None)
        warn: Log a warning when a non-empty value is unrecognized

    Returns:
        The matching Phase, or PLANNING
    """
    idx = _lookup(status)
    if idx is None:
        if warn and status not in (None, ""):
            logger.warning(f"Unrecognized plan status {status!r}, treating as {FIRST_PHASE.value}")
        return FIRST_PHASE
    return PHASE_ORDER[idx]


def next_phase(status: Any) -> Optional[Phase]:
    """
    Get the successor of the phase a status maps to.

    Returns:
        The next Phase, or None when the plan is already COMPLETE
    """
    idx = phase_index(status)
    if idx >= len(PHASE_ORDER) - 1:
        return None
    return PHASE_ORDER[idx + 1]


def is_terminal(status: Any) -> bool:
    """Check whether a status maps to the terminal phase."""
    return next_phase(status) is None


def get_phase_info(status: Any) -> PhaseInfo:
    """Get display metadata for the phase a status maps to."""
    return PHASE_REGISTRY[phase_index(status)]


def list_phases() -> List[Phase]:
    """Get phases in order."""
    return list(PHASE_ORDER)
