"""Factory functions for creating pre-configured engines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archbudget.data.loaders import (
    COST_RANGES_FILENAME,
    ENGINEERING_COSTS_FILENAME,
    load_cost_ranges_csv,
    load_engineering_costs_csv,
)
from archbudget.data.repository import CostDataRepository
from archbudget.data.seed import SEED_COST_RANGES, SEED_ENGINEERING_COSTS
from archbudget.engine import BudgetEngine

if TYPE_CHECKING:
    from archbudget.config import Settings

logger = logging.getLogger(__name__)


def create_default_repository(settings: Settings | None = None) -> CostDataRepository:
    """Build a repository from seed data or from CSV exports.

    When ``settings.cost_data_dir`` is set, cost ranges are read from
    ``building_cost_ranges.csv`` in that directory. Engineering rows are read
    from ``engineering_costs.csv`` if present, otherwise none are loaded.

    Raises:
        CostDataLoadError: If a CSV file is missing or malformed.
    """
    data_dir = settings.cost_data_dir if settings is not None else None
    if data_dir is None:
        return CostDataRepository(SEED_COST_RANGES, SEED_ENGINEERING_COSTS)

    cost_ranges = load_cost_ranges_csv(data_dir / COST_RANGES_FILENAME)
    engineering_path = data_dir / ENGINEERING_COSTS_FILENAME
    if engineering_path.exists():
        engineering_costs = load_engineering_costs_csv(engineering_path)
    else:
        logger.warning(
            "No %s in %s; engineering budgets will be empty",
            ENGINEERING_COSTS_FILENAME,
            data_dir,
        )
        engineering_costs = []
    return CostDataRepository(cost_ranges, engineering_costs)


def create_default_engine(settings: Settings | None = None) -> BudgetEngine:
    """Create a BudgetEngine wired up with the default cost data.

    Without settings (or without ``cost_data_dir``) the engine uses the
    built-in 2025 seed tables.

    Example::

        from archbudget import create_default_engine

        engine = create_default_engine()
        result = engine.calculate(engine.validate_input(payload))
    """
    return BudgetEngine(create_default_repository(settings))
