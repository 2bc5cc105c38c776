"""Comprehensive project calculator.

Prices a full proposal for one project in three passes:

1. **Budgets**: new-construction and remodel $/SF from the cost range
   (scaled by the historic multiplier, remodel rates by the remodel
   multiplier), target rates at the midpoint unless overridden, then
   shell/interior/landscape and six engineering budgets. Engineering is a
   percentage of the shell budget; remodel area carries half of it.
   Architecture is what remains of the shell budget.
2. **Fees**: scan-to-BIM for existing buildings and sites, then one fee per
   design scope. Architecture, interior and landscape use fixed percentages;
   engineering scopes use the fee curve. Consultant scopes add a 15 %
   coordination fee.
3. **Hours**: in-house hours spread over design phases and split by role.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from archbudget.data.rates import PHASE_DISTRIBUTION, get_category_multiplier
from archbudget.data.seed import ENGINEERING_SHELL_PORTIONS
from archbudget.fees import calculate_fee_percentage
from archbudget.models.enums import BuildingType, EngineeringDiscipline, ProjectScope
from archbudget.models.project import (
    ProjectCalculation,
    ProjectCalculationResult,
    ProjectFee,
    ProjectHours,
    ProjectInput,
)
from archbudget.numbers import round_to

if TYPE_CHECKING:
    from archbudget.data.repository import CostDataRepository
    from archbudget.models.budget import BuildingCostRange

logger = logging.getLogger(__name__)

AVERAGE_LABOR_COST_PER_HOUR = 35.73
AVERAGE_OVERHEAD_COST_PER_HOUR = 46.10
MARKUP_FACTOR = 2.0
COORDINATION_FEE_PERCENT = 0.15
REMODEL_ENGINEERING_FACTOR = 0.5
SQ_FT_PER_SQ_M = 3.28**2

FALLBACK_BUILDING_TYPE = BuildingType.MID_RANGE_STANDARD_RESIDENTIAL
FALLBACK_TIER = 2

# Fixed fee percentages for the design scopes
ARCHITECTURE_FEE_PERCENT = 0.282
INTERIOR_FEE_PERCENT = 0.06
LANDSCAPE_FEE_PERCENT = 0.05

# Fraction of phase hours by role: designer1, designer2, architect, engineer, principal
PHASE_ROLE_LEVERAGE: dict[str, tuple[float, float, float, float, float]] = {
    "Discovery": (0.37, 0.37, 0.10, 0.02, 0.14),
    "Creative - Conceptual": (0.0, 0.0, 0.95, 0.0, 0.05),
    "Creative - Schematic": (0.32, 0.32, 0.32, 0.02, 0.02),
    "Creative - Preliminary": (0.32, 0.32, 0.32, 0.02, 0.02),
    "Technical - Schematic": (0.26, 0.26, 0.10, 0.32, 0.06),
    "Technical - Preliminary": (0.26, 0.26, 0.10, 0.32, 0.06),
}


@dataclass(frozen=True)
class _ScopeBudget:
    scope: ProjectScope
    budget: float
    is_inhouse: bool


class ProjectCalculator:
    """Turns a ProjectInput into budgets, fees and phase hours.

    Args:
        repository: Cost data used to resolve the project's cost range.
        shell_portions: Engineering percentage of the shell budget by
            (building type, tier). Defaults to the seeded table.
    """

    def __init__(
        self,
        repository: CostDataRepository,
        shell_portions: dict[tuple[str, int], dict[EngineeringDiscipline, float]] | None = None,
    ) -> None:
        self._repository = repository
        self._shell_portions = (
            shell_portions if shell_portions is not None else ENGINEERING_SHELL_PORTIONS
        )

    def calculate(self, project: ProjectInput) -> ProjectCalculationResult:
        assumptions: list[str] = []

        category_multiplier = get_category_multiplier(project.category)
        cost_range = self._resolve_cost_range(project, assumptions)
        calculations = self._calculate_budgets(project, cost_range, assumptions)

        labor_rate = (
            project.labor_rate_override
            if project.labor_rate_override is not None
            else AVERAGE_LABOR_COST_PER_HOUR
        )
        overhead_rate = (
            project.overhead_rate_override
            if project.overhead_rate_override is not None
            else AVERAGE_OVERHEAD_COST_PER_HOUR
        )
        markup = (
            project.markup_factor_override
            if project.markup_factor_override is not None
            else MARKUP_FACTOR
        )
        average_pricing_per_hour = round_to((labor_rate + overhead_rate) * markup, 0)

        fees = self._calculate_fees(
            project, calculations, category_multiplier, average_pricing_per_hour
        )
        hours = self._calculate_hours(fees)

        logger.info(
            "Calculated project %r: total budget %.2f, %d fee lines",
            project.project_name,
            calculations.total_budget,
            len(fees),
        )

        return ProjectCalculationResult(
            project_name=project.project_name,
            category_multiplier=category_multiplier,
            average_pricing_per_hour=average_pricing_per_hour,
            calculations=calculations,
            fees=fees,
            hours=hours,
            assumptions=assumptions,
        )

    def _resolve_cost_range(
        self, project: ProjectInput, assumptions: list[str]
    ) -> BuildingCostRange:
        cost_range = self._repository.get_cost_range(
            project.building_type, project.design_level
        )
        if cost_range is not None:
            return cost_range

        assumptions.append(
            f"No cost data for '{project.building_type}' tier "
            f"{project.design_level}; used {FALLBACK_BUILDING_TYPE} tier "
            f"{FALLBACK_TIER} instead"
        )
        logger.warning(
            "Falling back to default cost range for %r tier %d",
            project.building_type,
            project.design_level,
        )
        return self._repository.require_cost_range(FALLBACK_BUILDING_TYPE, FALLBACK_TIER)

    def _engineering_percentages(
        self, project: ProjectInput, assumptions: list[str]
    ) -> dict[EngineeringDiscipline, float]:
        portions = self._shell_portions.get((project.building_type, project.design_level))
        if portions is None:
            assumptions.append(
                f"No engineering percentages for '{project.building_type}' tier "
                f"{project.design_level}; used {FALLBACK_BUILDING_TYPE} tier "
                f"{FALLBACK_TIER} instead"
            )
            portions = self._shell_portions[(FALLBACK_BUILDING_TYPE, FALLBACK_TIER)]

        percentages = {d: portions.get(d, 0.0) for d in EngineeringDiscipline}
        percentages.update(project.engineering_percentage_overrides)
        return percentages

    def _calculate_budgets(
        self,
        project: ProjectInput,
        cost_range: BuildingCostRange,
        assumptions: list[str],
    ) -> ProjectCalculation:
        new_cost_min = cost_range.all_in_min * project.historic_multiplier
        new_cost_max = cost_range.all_in_max * project.historic_multiplier
        new_cost_target = project.new_construction_target_cost or (
            (new_cost_min + new_cost_max) / 2
        )

        remodel_cost_min = new_cost_min * project.remodel_multiplier
        remodel_cost_max = new_cost_max * project.remodel_multiplier
        remodel_cost_target = project.remodel_target_cost or (
            (remodel_cost_min + remodel_cost_max) / 2
        )

        new_budget = project.new_building_area * new_cost_target
        remodel_budget = project.existing_building_area * remodel_cost_target
        total_budget = new_budget + remodel_budget

        shell_share = _override_or(project.shell_share_override, cost_range.arch_share)
        interior_share = _override_or(project.interior_share_override, cost_range.int_share)
        landscape_share = _override_or(
            project.landscape_share_override, cost_range.land_share
        )

        engineering_budgets: dict[EngineeringDiscipline, float] = {}
        for discipline, percent in self._engineering_percentages(
            project, assumptions
        ).items():
            new_portion = new_budget * percent * shell_share
            remodel_portion = (
                remodel_budget * percent * shell_share * REMODEL_ENGINEERING_FACTOR
            )
            engineering_budgets[discipline] = new_portion + remodel_portion

        shell_budget_total = total_budget * shell_share
        architecture_budget = shell_budget_total - sum(engineering_budgets.values())
        if architecture_budget < 0:
            assumptions.append(
                "Engineering budgets exceed the shell budget; architecture budget is negative"
            )

        return ProjectCalculation(
            new_cost_min=new_cost_min,
            new_cost_max=new_cost_max,
            new_cost_target=new_cost_target,
            remodel_cost_min=remodel_cost_min,
            remodel_cost_max=remodel_cost_max,
            remodel_cost_target=remodel_cost_target,
            new_budget=new_budget,
            remodel_budget=remodel_budget,
            total_budget=total_budget,
            shell_budget_total=shell_budget_total,
            interior_budget_total=total_budget * interior_share,
            landscape_budget_total=total_budget * landscape_share,
            architecture_budget=architecture_budget,
            engineering_budgets=engineering_budgets,
        )

    def _calculate_fees(
        self,
        project: ProjectInput,
        calculations: ProjectCalculation,
        category_multiplier: float,
        average_pricing_per_hour: float,
    ) -> list[ProjectFee]:
        fees: list[ProjectFee] = []
        total_area = project.total_area

        if project.existing_building_area > 0:
            existing = project.existing_building_area
            rate = (
                0.6 + 0.006 * ((1000 + existing) / 1_000_000) ** -0.7495
            ) * category_multiplier
            fees.append(
                _scan_fee(
                    ProjectScope.SCAN_BUILDING, rate, rate * existing, average_pricing_per_hour
                )
            )

        if project.site_area > 0:
            site = project.site_area
            rate = (
                (1 + 0.00091 * (site / 1_000_000) ** -0.005)
                * category_multiplier
                / SQ_FT_PER_SQ_M
                + 0.08
            )
            fees.append(
                _scan_fee(
                    ProjectScope.SCAN_SITE,
                    rate,
                    rate * site * SQ_FT_PER_SQ_M,
                    average_pricing_per_hour,
                )
            )

        engineering = calculations.engineering_budgets
        scopes = (
            _ScopeBudget(ProjectScope.ARCHITECTURE, calculations.architecture_budget, True),
            _ScopeBudget(ProjectScope.INTERIOR, calculations.interior_budget_total, True),
            _ScopeBudget(ProjectScope.LANDSCAPE, calculations.landscape_budget_total, True),
            _ScopeBudget(
                ProjectScope.STRUCTURAL, engineering[EngineeringDiscipline.STRUCTURAL], True
            ),
            _ScopeBudget(
                ProjectScope.CIVIL, engineering[EngineeringDiscipline.CIVIL_SITE], True
            ),
            _ScopeBudget(
                ProjectScope.MECHANICAL, engineering[EngineeringDiscipline.MECHANICAL], False
            ),
            _ScopeBudget(
                ProjectScope.ELECTRICAL, engineering[EngineeringDiscipline.ELECTRICAL], False
            ),
            _ScopeBudget(
                ProjectScope.PLUMBING, engineering[EngineeringDiscipline.PLUMBING], True
            ),
            _ScopeBudget(
                ProjectScope.TELECOM, engineering[EngineeringDiscipline.LOW_VOLTAGE], False
            ),
        )

        for item in scopes:
            percent = _scope_fee_percent(item.scope, item.budget)
            adjustment = project.fee_adjustments.get(item.scope, 1.0)
            market_fee = percent * item.budget * adjustment
            in_house_fee = market_fee if item.is_inhouse else 0.0

            fees.append(
                ProjectFee(
                    scope=item.scope,
                    percent_of_cost=percent,
                    rate_per_sq_ft=market_fee / total_area if total_area > 0 else 0.0,
                    market_fee=market_fee,
                    in_house_fee=in_house_fee,
                    hours=in_house_fee / average_pricing_per_hour if item.is_inhouse else 0.0,
                    coordination_fee=(
                        0.0 if item.is_inhouse else market_fee * COORDINATION_FEE_PERCENT
                    ),
                    consultant_fee=0.0 if item.is_inhouse else market_fee,
                    is_inhouse=item.is_inhouse,
                )
            )

        return fees

    @staticmethod
    def _calculate_hours(fees: list[ProjectFee]) -> list[ProjectHours]:
        total_in_house_hours = sum(f.hours for f in fees if f.is_inhouse)

        hours: list[ProjectHours] = []
        for phase, percent in PHASE_DISTRIBUTION:
            phase_hours = total_in_house_hours * percent
            designer1, designer2, architect, engineer, principal = PHASE_ROLE_LEVERAGE[phase]
            hours.append(
                ProjectHours(
                    phase=phase,
                    phase_percent=percent,
                    total_hours=phase_hours,
                    designer1_hours=phase_hours * designer1,
                    designer2_hours=phase_hours * designer2,
                    architect_hours=phase_hours * architect,
                    engineer_hours=phase_hours * engineer,
                    principal_hours=phase_hours * principal,
                )
            )
        return hours


def _override_or(override: float | None, default: float) -> float:
    return override if override is not None else default


def _scope_fee_percent(scope: ProjectScope, budget: float) -> float:
    if scope == ProjectScope.ARCHITECTURE:
        return ARCHITECTURE_FEE_PERCENT
    if scope == ProjectScope.INTERIOR:
        return INTERIOR_FEE_PERCENT
    if scope == ProjectScope.LANDSCAPE:
        return LANDSCAPE_FEE_PERCENT
    if budget <= 0:
        return 0.0
    return calculate_fee_percentage(budget)


def _scan_fee(
    scope: ProjectScope, rate: float, fee: float, average_pricing_per_hour: float
) -> ProjectFee:
    return ProjectFee(
        scope=scope,
        rate_per_sq_ft=rate,
        market_fee=fee,
        in_house_fee=fee,
        hours=fee / average_pricing_per_hour,
        is_inhouse=True,
    )
