"""Cost data repository for resolving lookup rows."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archbudget.exceptions import CostDataLoadError, CostDataNotFoundError

if TYPE_CHECKING:
    from archbudget.models.budget import BuildingCostRange, EngineeringCost

logger = logging.getLogger(__name__)


class CostDataRepository:
    """Repository for looking up cost ranges and engineering percentages.

    Wraps in-memory lookup rows keyed by ``(building_type, tier)``. Each key
    has at most one cost range; engineering rows may be missing or partial
    for a key.

    Raises:
        CostDataLoadError: If two cost ranges share a key.
    """

    def __init__(
        self,
        cost_ranges: list[BuildingCostRange],
        engineering_costs: list[EngineeringCost] | None = None,
    ) -> None:
        self._cost_ranges: dict[tuple[str, int], BuildingCostRange] = {}
        for row in cost_ranges:
            key = (str(row.building_type), row.tier)
            if key in self._cost_ranges:
                msg = (
                    f"Duplicate cost range for building type "
                    f"'{row.building_type}' tier {row.tier}"
                )
                raise CostDataLoadError(msg)
            self._cost_ranges[key] = row
        self._engineering_costs = list(engineering_costs or [])

    def get_cost_range(self, building_type: str, tier: int) -> BuildingCostRange | None:
        """Look up the cost range for a building type and tier.

        Returns None if no row matches.
        """
        return self._cost_ranges.get((str(building_type), tier))

    def require_cost_range(self, building_type: str, tier: int) -> BuildingCostRange:
        """Like ``get_cost_range`` but raises ``CostDataNotFoundError`` on a miss."""
        row = self.get_cost_range(building_type, tier)
        if row is None:
            logger.warning(
                "No cost range for building type %r tier %d", building_type, tier
            )
            raise CostDataNotFoundError(building_type, tier)
        return row

    def get_engineering_costs(self, building_type: str, tier: int) -> list[EngineeringCost]:
        """Engineering rows for a building type and tier (possibly empty)."""
        return [
            row
            for row in self._engineering_costs
            if row.building_type == building_type and row.tier == tier
        ]

    def list_building_types(self) -> list[str]:
        """Distinct building types with cost data, in insertion order."""
        seen: dict[str, None] = {}
        for building_type, _tier in self._cost_ranges:
            seen.setdefault(building_type, None)
        return list(seen)

    def list_tiers(self, building_type: str) -> list[int]:
        return sorted(
            tier for bt, tier in self._cost_ranges if bt == building_type
        )
