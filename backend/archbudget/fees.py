"""Fee matrix calculator.

Prices design services from a completed budget result. Each discipline's
fee is a percentage of its budget taken from a power-law fee curve (smaller
budgets pay a higher percentage), uplifted by the project's complexity.
In-house disciplines are discounted and converted to hours at the average
billable rate; consultant disciplines are passed through at full fee.
Scan-to-BIM of existing buildings and sites is priced per unit area.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from archbudget.models.enums import EngineeringDiscipline
from archbudget.models.fees import (
    CostBase,
    DisciplineFee,
    FeeMatrixInput,
    FeeMatrixResult,
    FeeTotals,
    HourlyFactor,
    ScanningFee,
)
from archbudget.numbers import round_to

if TYPE_CHECKING:
    from archbudget.models.result import BudgetCalculationResult

logger = logging.getLogger(__name__)

# Fee curve: pct = (a + b * (budget / 1M) ** c) * (1 + complexity)
FEE_CURVE_A = 0.07498
FEE_CURVE_B = 0.007824
FEE_CURVE_C = -0.7495

# Hourly factor: hf = a + b * area ** c + adjustment
HOURLY_FACTOR_A = 0.21767
HOURLY_FACTOR_B = 11.21274
HOURLY_FACTOR_C = -0.53816
HOURLY_FACTOR_ADJUSTMENT = -0.08

EXISTING_BUILDING_SCAN_RATE = 1.2
SITE_SCAN_RATE = 1.2


@dataclass(frozen=True)
class _DisciplineConfig:
    name: str
    is_internal: bool
    budget_key: str


DISCIPLINE_CONFIG: tuple[_DisciplineConfig, ...] = (
    _DisciplineConfig("Architecture", True, "shell"),
    _DisciplineConfig("Interior", True, "interior"),
    _DisciplineConfig("Landscape", True, "landscape"),
    _DisciplineConfig(EngineeringDiscipline.STRUCTURAL, False, EngineeringDiscipline.STRUCTURAL),
    _DisciplineConfig(EngineeringDiscipline.CIVIL_SITE, True, EngineeringDiscipline.CIVIL_SITE),
    _DisciplineConfig(EngineeringDiscipline.MECHANICAL, False, EngineeringDiscipline.MECHANICAL),
    _DisciplineConfig(EngineeringDiscipline.ELECTRICAL, False, EngineeringDiscipline.ELECTRICAL),
    _DisciplineConfig(EngineeringDiscipline.PLUMBING, True, EngineeringDiscipline.PLUMBING),
    _DisciplineConfig(EngineeringDiscipline.LOW_VOLTAGE, False, EngineeringDiscipline.LOW_VOLTAGE),
)


def calculate_fee_percentage(budget: float, complexity_multiplier: float = 0.0) -> float:
    """Fee as a fraction of ``budget`` from the complexity-adjusted curve.

    ``budget`` must be positive.
    """
    return (
        FEE_CURVE_A + FEE_CURVE_B * (budget / 1_000_000) ** FEE_CURVE_C
    ) * (1 + complexity_multiplier)


def calculate_hourly_factor(total_building_area: float) -> float:
    """Design hours per square foot for a building of the given size."""
    if total_building_area <= 0:
        return 0.0
    return (
        HOURLY_FACTOR_A
        + HOURLY_FACTOR_B * total_building_area**HOURLY_FACTOR_C
        + HOURLY_FACTOR_ADJUSTMENT
    )


def calculate_fee_matrix(fee_input: FeeMatrixInput) -> FeeMatrixResult:
    """Compute scanning fees, discipline fees and totals for a budget."""
    budget_result = fee_input.budget_result
    total_sf = budget_result.area.total_sf

    scanning_fees = _scanning_fees(
        budget_result, fee_input.discount_rate, fee_input.average_billable_rate
    )
    discipline_fees = _discipline_fees(
        budget_result,
        fee_input.complexity_multiplier,
        fee_input.discount_rate,
        fee_input.average_billable_rate,
    )

    market_fee = sum(f.fee for f in scanning_fees) + sum(f.fee for f in discipline_fees)
    consultant_total = sum(f.consultant_fee or 0.0 for f in discipline_fees)
    discounted_total = sum(f.discounted_fee for f in scanning_fees) + sum(
        f.discounted_fee or 0.0 for f in discipline_fees
    )
    total_hours = sum(f.hours for f in scanning_fees) + sum(
        f.hours or 0.0 for f in discipline_fees
    )

    proposed = budget_result.total_cost.proposed
    overall_percentage = market_fee / proposed if proposed > 0 else 0.0
    rate_per_ft2 = market_fee / total_sf if total_sf > 0 else 0.0

    hf_value = calculate_hourly_factor(total_sf)

    interior_fee = _discounted_fee_for(discipline_fees, "Interior")
    landscape_fee = _discounted_fee_for(discipline_fees, "Landscape")
    shell_cost_base = discounted_total - interior_fee - landscape_fee

    logger.debug(
        "Fee matrix: market fee %.2f over %d disciplines", market_fee, len(discipline_fees)
    )

    return FeeMatrixResult(
        inputs=fee_input,
        scanning_fees=scanning_fees,
        discipline_fees=discipline_fees,
        totals=FeeTotals(
            market_fee=round_to(market_fee),
            consultant_total=round_to(consultant_total),
            discounted_total=round_to(discounted_total),
            overall_percentage=round_to(overall_percentage * 100),
            rate_per_ft2=round_to(rate_per_ft2),
            total_hours=round_to(total_hours),
        ),
        hourly_factor=HourlyFactor(
            hf_value=round_to(hf_value, 5),
            raw_design_hours=round_to(hf_value * total_sf),
            total_building_area=total_sf,
        ),
        cost_base=CostBase(
            shell_cost_base=round_to(shell_cost_base),
            interior_cost_base=round_to(interior_fee),
            landscape_cost_base=round_to(landscape_fee),
        ),
    )


def _scanning_fees(
    budget_result: BudgetCalculationResult,
    discount_rate: float,
    average_billable_rate: float,
) -> list[ScanningFee]:
    fees: list[ScanningFee] = []
    services = (
        (
            "Existing Building Scan to BIM",
            budget_result.inputs.existing_area_ft2,
            EXISTING_BUILDING_SCAN_RATE,
        ),
        ("Site Scan to BIM", budget_result.inputs.site_area_m2, SITE_SCAN_RATE),
    )
    for service, area, rate in services:
        if area <= 0:
            continue
        fee = rate * area
        discounted = fee * (1 - discount_rate)
        fees.append(
            ScanningFee(
                service=service,
                area=area,
                rate=rate,
                fee=fee,
                discounted_fee=discounted,
                hours=discounted / average_billable_rate,
            )
        )
    return fees


def _discipline_budget(budget_result: BudgetCalculationResult, budget_key: str) -> float:
    minimums = budget_result.minimum_budgets
    if budget_key == "shell":
        return minimums.shell
    if budget_key == "interior":
        return minimums.interior
    if budget_key == "landscape":
        return minimums.landscape
    return budget_result.engineering_budgets.get(budget_key, 0.0)


def _discipline_fees(
    budget_result: BudgetCalculationResult,
    complexity_multiplier: float,
    discount_rate: float,
    average_billable_rate: float,
) -> list[DisciplineFee]:
    total_sf = budget_result.area.total_sf
    fees: list[DisciplineFee] = []

    for config in DISCIPLINE_CONFIG:
        budget = _discipline_budget(budget_result, config.budget_key)
        if budget <= 0:
            continue

        percentage = calculate_fee_percentage(budget, complexity_multiplier)
        fee = percentage * budget

        discounted_fee: float | None = None
        consultant_fee: float | None = None
        hours: float | None = None
        if config.is_internal:
            discounted_fee = fee * (1 - discount_rate)
            hours = discounted_fee / average_billable_rate
        else:
            consultant_fee = fee

        fees.append(
            DisciplineFee(
                discipline=config.name,
                budget=budget,
                percentage=percentage,
                fee=fee,
                discounted_fee=discounted_fee,
                consultant_fee=consultant_fee,
                rate_psf=fee / total_sf if total_sf > 0 else 0.0,
                hours=hours,
                is_internal=config.is_internal,
            )
        )
    return fees


def _discounted_fee_for(fees: list[DisciplineFee], discipline: str) -> float:
    for fee in fees:
        if fee.discipline == discipline:
            return fee.discounted_fee or 0.0
    return 0.0
