"""Custom exception hierarchy for the archbudget calculators."""

from __future__ import annotations


class ArchBudgetError(Exception):
    """Base exception for all archbudget errors."""


class InvalidInputError(ArchBudgetError, ValueError):
    """Raised when project input fails validation (negative or non-finite areas)."""


class CostDataNotFoundError(ArchBudgetError, LookupError):
    """Raised when no cost range exists for a building type and tier."""

    def __init__(self, building_type: str, tier: int) -> None:
        self.building_type = building_type
        self.tier = tier
        super().__init__(
            f"No cost data for building type '{building_type}' tier {tier}"
        )


class CostDataLoadError(ArchBudgetError):
    """Raised when a cost data file cannot be read or parsed."""
