"""Bottom-up staffing plan.

Starts from annual labor and overhead per role to build a rate card, plans
total design hours from building area, spreads them over phases and roles,
then prices the hours at cost, at the firm's rates and at market rates.
"""

from __future__ import annotations

import logging
import math

from archbudget.data.rates import (
    HOURLY_RATES,
    LABOR_OVERHEAD,
    PHASE_DISTRIBUTION,
    PHASE_MONTHS,
    ROLE_LEVERAGE,
    WORK_HOURS_PER_YEAR,
)
from archbudget.models.enums import StaffRole
from archbudget.models.staffing import (
    HoursMatrix,
    HoursPlan,
    PhaseHours,
    PricingTotals,
    ProjectPricing,
    RateCard,
    RateScenario,
    RolePricing,
    RoleRate,
    StaffingInput,
    StaffingPlan,
)
from archbudget.numbers import round_to

logger = logging.getLogger(__name__)

FIRM_DISCOUNTED = "Firm Discounted"
FIRM_FULL_RATE = "Firm Full Rate"
MARKET_FULL_RATE = "Market Full Rate"
MARKET_DISCOUNTED = "Market Rate Discounted"


class StaffingPlanner:
    """Builds staffing plans from role cost and rate tables.

    All tables default to the seeded reference data; pass replacements to
    price a different firm.
    """

    def __init__(
        self,
        labor_overhead: dict[StaffRole, tuple[float, float]] | None = None,
        hourly_rates: dict[StaffRole, tuple[float, float]] | None = None,
        phase_distribution: list[tuple[str, float]] | None = None,
        role_leverage: dict[str, dict[StaffRole, float]] | None = None,
    ) -> None:
        self._labor_overhead = labor_overhead if labor_overhead is not None else LABOR_OVERHEAD
        self._hourly_rates = hourly_rates if hourly_rates is not None else HOURLY_RATES
        self._phase_distribution = (
            phase_distribution if phase_distribution is not None else PHASE_DISTRIBUTION
        )
        self._role_leverage = role_leverage if role_leverage is not None else ROLE_LEVERAGE

    def plan(self, staffing_input: StaffingInput) -> StaffingPlan:
        rate_card = self._rate_card(staffing_input.markup)
        hours_plan = self._hours_plan(staffing_input)
        hours_matrix = self._hours_matrix(hours_plan)
        pricing = self._pricing(rate_card, hours_matrix)
        rate_card.weighted_average_rate = _weighted_average_rate(rate_card, hours_matrix)
        scenarios = self._scenarios(staffing_input, rate_card, hours_matrix, pricing)

        logger.info(
            "Staffing plan: %d planned hours, %d rounded, pricing %.2f",
            hours_plan.total_hours_planned,
            hours_matrix.rounded_grand_total,
            pricing.totals.pricing,
        )

        return StaffingPlan(
            inputs=staffing_input,
            rate_card=rate_card,
            hours_plan=hours_plan,
            hours_matrix=hours_matrix,
            pricing=pricing,
            scenarios=scenarios,
        )

    def _rate_card(self, markup: float) -> RateCard:
        roles: dict[StaffRole, RoleRate] = {}
        for role, (labor_annual, overhead_annual) in self._labor_overhead.items():
            labor = labor_annual / WORK_HOURS_PER_YEAR
            overhead = overhead_annual / WORK_HOURS_PER_YEAR
            cost = labor + overhead
            roles[role] = RoleRate(
                labor_per_hour=labor,
                overhead_per_hour=overhead,
                cost_per_hour=cost,
                price_per_hour=cost * (1 + markup),
            )

        simple_average = (
            sum(r.price_per_hour for r in roles.values()) / len(roles) if roles else 0.0
        )
        return RateCard(roles=roles, simple_average_rate=simple_average)

    def _hours_plan(self, staffing_input: StaffingInput) -> HoursPlan:
        if staffing_input.total_hours is not None:
            planned = staffing_input.total_hours
        else:
            planned = int(
                round_to(staffing_input.total_area_ft2 * staffing_input.hours_factor, 0)
            )

        phases: list[PhaseHours] = []
        allocated = 0
        last = len(self._phase_distribution) - 1
        for index, (name, percent) in enumerate(self._phase_distribution):
            if index == last:
                hours = planned - allocated
            else:
                hours = int(round_to(planned * percent, 0))
                allocated += hours
            phases.append(
                PhaseHours(name=name, months=PHASE_MONTHS.get(name), percent=percent, hours=hours)
            )

        return HoursPlan(
            total_area_ft2=staffing_input.total_area_ft2,
            hours_factor=staffing_input.hours_factor,
            total_hours_planned=planned,
            phases=phases,
            total_months=sum(p.months for p in phases if p.months is not None),
        )

    def _hours_matrix(self, hours_plan: HoursPlan) -> HoursMatrix:
        matrix: dict[str, dict[StaffRole, int]] = {}
        role_totals = {role: 0 for role in StaffRole}

        for phase in hours_plan.phases:
            weights = self._role_leverage.get(phase.name, {})
            row: dict[StaffRole, int] = {}
            for role in StaffRole:
                raw = phase.hours * weights.get(role, 0.0)
                # Admin hours round to nearest; staff hours round up
                if role == StaffRole.ADMIN:
                    hours = int(round_to(raw, 0))
                else:
                    hours = math.ceil(raw)
                row[role] = hours
                role_totals[role] += hours
            matrix[phase.name] = row

        return HoursMatrix(
            matrix=matrix,
            role_totals=role_totals,
            rounded_grand_total=sum(role_totals.values()),
            planned_grand_total=hours_plan.total_hours_planned,
        )

    @staticmethod
    def _pricing(rate_card: RateCard, hours_matrix: HoursMatrix) -> ProjectPricing:
        by_role: dict[StaffRole, RolePricing] = {}
        for role, hours in hours_matrix.role_totals.items():
            rate = rate_card.roles.get(role)
            if rate is None:
                continue
            pricing = hours * rate.price_per_hour
            labor = hours * rate.labor_per_hour
            overhead = hours * rate.overhead_per_hour
            cost = labor + overhead
            profit = pricing - cost
            by_role[role] = RolePricing(
                hours=hours,
                price_per_hour=rate.price_per_hour,
                pricing=pricing,
                labor=labor,
                overhead=overhead,
                total_cost=cost,
                profit=profit,
                margin=profit / pricing if pricing > 0 else 0.0,
            )

        total_pricing = sum(r.pricing for r in by_role.values())
        total_profit = sum(r.profit for r in by_role.values())
        totals = PricingTotals(
            hours=sum(r.hours for r in by_role.values()),
            pricing=total_pricing,
            labor=sum(r.labor for r in by_role.values()),
            overhead=sum(r.overhead for r in by_role.values()),
            total_cost=sum(r.total_cost for r in by_role.values()),
            profit=total_profit,
            margin=total_profit / total_pricing if total_pricing > 0 else 0.0,
        )
        return ProjectPricing(by_role=by_role, totals=totals)

    def _scenarios(
        self,
        staffing_input: StaffingInput,
        rate_card: RateCard,
        hours_matrix: HoursMatrix,
        pricing: ProjectPricing,
    ) -> list[RateScenario]:
        roles = list(hours_matrix.role_totals)

        firm_rates: dict[StaffRole, float] = {}
        market_rates: dict[StaffRole, float] = {}
        for role in roles:
            card_price = rate_card.roles[role].price_per_hour if role in rate_card.roles else 0.0
            firm, market = self._hourly_rates.get(role, (0.0, 0.0))
            firm_rates[role] = firm or card_price
            market_rates[role] = market or firm_rates[role]

        rate_sets = (
            (
                FIRM_DISCOUNTED,
                {r: v * (1 - staffing_input.firm_discount) for r, v in firm_rates.items()},
            ),
            (FIRM_FULL_RATE, firm_rates),
            (MARKET_FULL_RATE, market_rates),
            (
                MARKET_DISCOUNTED,
                {r: v * (1 - staffing_input.market_discount) for r, v in market_rates.items()},
            ),
        )

        project_budget = pricing.totals.pricing
        scenarios: list[RateScenario] = []
        for name, rates in rate_sets:
            by_role = {role: hours_matrix.role_totals[role] * rates[role] for role in roles}
            total = sum(by_role.values())
            scenarios.append(
                RateScenario(
                    name=name,
                    by_role=by_role,
                    total=total,
                    pct_of_project_budget=total / project_budget if project_budget > 0 else 0.0,
                )
            )
        return scenarios


def _weighted_average_rate(rate_card: RateCard, hours_matrix: HoursMatrix) -> float:
    weighted = 0.0
    total_hours = 0
    for role, hours in hours_matrix.role_totals.items():
        rate = rate_card.roles.get(role)
        if rate is not None and hours > 0:
            weighted += hours * rate.price_per_hour
            total_hours += hours
    return weighted / total_hours if total_hours > 0 else 0.0
