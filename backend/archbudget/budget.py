"""Minimum budget calculator.

``calculate_minimum_budget`` turns one project's areas and the matching
lookup rows into a full budget breakdown:

1. **Total cost**: total area times the all-in $/SF bounds, with the
   proposed figure at the midpoint of low and high.
2. **Minimum budgets**: proposed cost split into shell, interior and
   landscape by the cost range shares.
3. **Engineering budgets**: each discipline's percentage of proposed cost,
   with existing-to-remodel area carrying half the effort of new area.
4. **Architecture budget**: shell budget minus engineering, floored at zero.
5. **Working budget**: the sum of all discipline budgets; the basis for
   fee percentages downstream.

The function is pure: no I/O, no mutation of its arguments. Input is assumed
valid; validation and lookup misses are handled by the caller
(see ``archbudget.engine``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archbudget.models.enums import EngineeringDiscipline
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
from archbudget.numbers import clamp, round_to, shares_sum_to_one

if TYPE_CHECKING:
    from archbudget.models.budget import BudgetInput, BuildingCostRange, EngineeringCost

# Weight of the high bound in the proposed total cost
PROPOSED_HIGH_WEIGHT = 0.5

# Engineering effort on existing-to-remodel area relative to new construction
REMODEL_ENGINEERING_FACTOR = 0.5

SHARE_SUM_TOLERANCE = 0.005

ENGINEERING_DISCIPLINES: tuple[EngineeringDiscipline, ...] = tuple(EngineeringDiscipline)


def calculate_minimum_budget(
    budget_input: BudgetInput,
    cost_range: BuildingCostRange,
    engineering_costs: list[EngineeringCost],
    working_budget_override: float | None = None,
) -> BudgetCalculationResult:
    """Compute the cost and budget breakdown for one project.

    Args:
        budget_input: Areas, tier and building type of the project.
        cost_range: The cost range row matching the building type and tier.
        engineering_costs: Engineering rows for the same building type and
            tier. Categories outside the known disciplines are ignored and
            missing disciplines contribute zero.
        working_budget_override: Replaces the computed working budget when
            given.

    Returns:
        A BudgetCalculationResult with money rounded to cents.
    """
    notes: list[str] = []

    total_sf = budget_input.new_area_ft2 + budget_input.existing_area_ft2
    total_low = total_sf * cost_range.all_in_min
    total_high = total_sf * cost_range.all_in_max
    proposed = total_low + (total_high - total_low) * PROPOSED_HIGH_WEIGHT

    if total_sf > 0:
        new_ratio = budget_input.new_area_ft2 / total_sf
        existing_ratio = budget_input.existing_area_ft2 / total_sf
    else:
        new_ratio = 0.0
        existing_ratio = 0.0

    shell_share = cost_range.arch_share
    interior_share = cost_range.int_share
    landscape_share = cost_range.land_share

    shares = [shell_share, interior_share, landscape_share]
    if not shares_sum_to_one(shares, SHARE_SUM_TOLERANCE):
        notes.append(f"Warning: Project shares sum to {sum(shares):.3f} instead of 1.000")

    shell_min = proposed * shell_share
    interior_min = proposed * interior_share
    landscape_min = proposed * landscape_share

    # Engineering: new area at full percentage, remodel area at half
    percent_by_discipline: dict[EngineeringDiscipline, float] = {}
    for eng_cost in engineering_costs:
        if eng_cost.category in ENGINEERING_DISCIPLINES:
            percent_by_discipline[EngineeringDiscipline(eng_cost.category)] = (
                eng_cost.percent_avg
            )

    engineering_splits: dict[EngineeringDiscipline, tuple[float, float]] = {}
    for discipline, percent in percent_by_discipline.items():
        new_portion = proposed * percent * new_ratio
        existing_portion = (
            proposed * percent * existing_ratio * REMODEL_ENGINEERING_FACTOR
        )
        engineering_splits[discipline] = (new_portion, existing_portion)

    engineering_budgets: dict[str, float] = {}
    for discipline in ENGINEERING_DISCIPLINES:
        new_portion, existing_portion = engineering_splits.get(discipline, (0.0, 0.0))
        engineering_budgets[discipline.value] = new_portion + existing_portion

    missing = [d.value for d in ENGINEERING_DISCIPLINES if d not in percent_by_discipline]
    if missing:
        notes.append(f"Missing engineering data for: {', '.join(missing)}")

    engineering_sum = sum(engineering_budgets.values())
    engineering_budgets["sum"] = engineering_sum

    architecture_budget = clamp(shell_min - engineering_sum, 0.0)
    if engineering_sum > shell_min:
        notes.append(
            "Architecture budget clamped to $0 "
            "(engineering costs exceed shell budget)"
        )

    total_eng_percent = sum(percent_by_discipline.values())
    design_shares: dict[str, float] = {
        "Architecture": shell_share * (1 - total_eng_percent),
        "Interior": interior_share,
        "Landscape": landscape_share,
    }
    for discipline in ENGINEERING_DISCIPLINES:
        design_shares[discipline.value] = shell_share * percent_by_discipline.get(
            discipline, 0.0
        )

    breakdown: dict[str, DisciplineSplit] = {
        "architecture": _split_by_ratio(architecture_budget, new_ratio, existing_ratio),
        "interior": _split_by_ratio(interior_min, new_ratio, existing_ratio),
        "landscape": _split_by_ratio(landscape_min, new_ratio, existing_ratio),
    }
    for discipline, (new_portion, existing_portion) in engineering_splits.items():
        breakdown[discipline.key] = DisciplineSplit(
            total=round_to(new_portion + existing_portion),
            new_construction=round_to(new_portion),
            existing_remodel=round_to(existing_portion),
        )

    working_budget = architecture_budget + interior_min + landscape_min + engineering_sum
    if working_budget_override is not None:
        working_budget = working_budget_override

    return BudgetCalculationResult(
        inputs=budget_input,
        all_in=AllInRate(min_psf=cost_range.all_in_min, max_psf=cost_range.all_in_max),
        area=AreaSummary(total_sf=total_sf),
        total_cost=TotalCost(
            low=round_to(total_low),
            high=round_to(total_high),
            proposed=round_to(proposed),
        ),
        shares=Shares(
            shell=shell_share,
            interior=interior_share,
            landscape=landscape_share,
        ),
        minimum_budgets=MinimumBudgets(
            shell=round_to(shell_min),
            interior=round_to(interior_min),
            landscape=round_to(landscape_min),
        ),
        design_shares=design_shares,
        engineering_budgets={k: round_to(v) for k, v in engineering_budgets.items()},
        architecture_budget=round_to(architecture_budget),
        working_budget=round_to(working_budget),
        construction_ratios=ConstructionRatios(
            new_construction=round_to(new_ratio, 3),
            existing_remodel=round_to(existing_ratio, 3),
        ),
        discipline_breakdown=breakdown,
        notes=notes,
    )


def _split_by_ratio(total: float, new_ratio: float, existing_ratio: float) -> DisciplineSplit:
    return DisciplineSplit(
        total=round_to(total),
        new_construction=round_to(total * new_ratio),
        existing_remodel=round_to(total * existing_ratio),
    )
