"""Domain models for the archbudget calculators."""

from archbudget.models.budget import BudgetInput, BuildingCostRange, EngineeringCost
from archbudget.models.enums import (
    BuildingType,
    DesignTier,
    EngineeringDiscipline,
    ProjectScope,
    StaffRole,
)
from archbudget.models.fees import (
    CostBase,
    DisciplineFee,
    FeeMatrixInput,
    FeeMatrixResult,
    FeeTotals,
    HourlyFactor,
    ScanningFee,
)
from archbudget.models.project import (
    ProjectCalculation,
    ProjectCalculationResult,
    ProjectFee,
    ProjectHours,
    ProjectInput,
)
from archbudget.models.result import (
    AllInRate,
    AreaSummary,
    BudgetCalculationResult,
    ConstructionRatios,
    DisciplineSplit,
    MinimumBudgets,
    Shares,
    TotalCost,
)
from archbudget.models.staffing import StaffingInput, StaffingPlan

__all__ = [
    "AllInRate",
    "AreaSummary",
    "BudgetCalculationResult",
    "BudgetInput",
    "BuildingCostRange",
    "BuildingType",
    "ConstructionRatios",
    "CostBase",
    "DesignTier",
    "DisciplineFee",
    "DisciplineSplit",
    "EngineeringCost",
    "EngineeringDiscipline",
    "FeeMatrixInput",
    "FeeMatrixResult",
    "FeeTotals",
    "HourlyFactor",
    "MinimumBudgets",
    "ProjectCalculation",
    "ProjectCalculationResult",
    "ProjectFee",
    "ProjectHours",
    "ProjectInput",
    "ProjectScope",
    "ScanningFee",
    "Shares",
    "StaffRole",
    "StaffingInput",
    "StaffingPlan",
    "TotalCost",
]
