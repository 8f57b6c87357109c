"""
breedline Contracts Module

Abstract base classes defining interfaces for:
- PlanStore (persistence collaborator)
"""

from breedline.contracts.plan_store_contract import PlanStoreContract

__all__ = [
    "PlanStoreContract",
]
