"""Architecture/engineering budget calculators.

Usage::

    from archbudget import create_default_engine

    engine = create_default_engine()
    budget_input = engine.validate_input(
        {"building_type": "Mid-Range Standard Residential", "tier": 1,
         "new_area_ft2": 1000, "existing_area_ft2": 4407}
    )
    result = engine.calculate(budget_input)
"""

from archbudget.budget import calculate_minimum_budget
from archbudget.engine import BudgetEngine
from archbudget.exceptions import (
    ArchBudgetError,
    CostDataLoadError,
    CostDataNotFoundError,
    InvalidInputError,
)
from archbudget.factory import create_default_engine
from archbudget.fees import calculate_fee_matrix
from archbudget.models.budget import BudgetInput, BuildingCostRange, EngineeringCost
from archbudget.models.enums import BuildingType, DesignTier, EngineeringDiscipline
from archbudget.models.fees import FeeMatrixInput, FeeMatrixResult
from archbudget.models.project import ProjectCalculationResult, ProjectInput
from archbudget.models.result import BudgetCalculationResult
from archbudget.models.staffing import StaffingInput, StaffingPlan
from archbudget.project_calculator import ProjectCalculator
from archbudget.staffing import StaffingPlanner

__all__ = [
    "ArchBudgetError",
    "BudgetCalculationResult",
    "BudgetEngine",
    "BudgetInput",
    "BuildingCostRange",
    "BuildingType",
    "CostDataLoadError",
    "CostDataNotFoundError",
    "DesignTier",
    "EngineeringCost",
    "EngineeringDiscipline",
    "FeeMatrixInput",
    "FeeMatrixResult",
    "InvalidInputError",
    "ProjectCalculationResult",
    "ProjectCalculator",
    "ProjectInput",
    "StaffingInput",
    "StaffingPlan",
    "StaffingPlanner",
    "calculate_fee_matrix",
    "calculate_minimum_budget",
    "create_default_engine",
]
