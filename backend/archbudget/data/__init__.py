"""Cost data layer for the archbudget calculators."""

from archbudget.data.loaders import load_cost_ranges_csv, load_engineering_costs_csv
from archbudget.data.repository import CostDataRepository
from archbudget.data.seed import SEED_COST_RANGES, SEED_ENGINEERING_COSTS

__all__ = [
    "CostDataRepository",
    "SEED_COST_RANGES",
    "SEED_ENGINEERING_COSTS",
    "load_cost_ranges_csv",
    "load_engineering_costs_csv",
]
