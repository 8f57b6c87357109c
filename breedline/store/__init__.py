"""
store/ - Plan persistence collaborators
"""

from .memory import InMemoryPlanStore

__all__ = [
    "InMemoryPlanStore",
]
