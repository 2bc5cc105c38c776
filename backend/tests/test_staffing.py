"""Tests for the bottom-up staffing planner."""

from __future__ import annotations

import pytest

from archbudget.models.enums import StaffRole
from archbudget.models.staffing import StaffingInput, StaffingPlan
from archbudget.staffing import (
    FIRM_DISCOUNTED,
    FIRM_FULL_RATE,
    MARKET_DISCOUNTED,
    MARKET_FULL_RATE,
    StaffingPlanner,
)


@pytest.fixture()
def planner() -> StaffingPlanner:
    return StaffingPlanner()


@pytest.fixture()
def plan(planner: StaffingPlanner) -> StaffingPlan:
    return planner.plan(StaffingInput(total_area_ft2=5000, hours_factor=0.22))


# ---------------------------------------------------------------------------
# Rate card
# ---------------------------------------------------------------------------


class TestRateCard:
    def test_admin_rates(self, plan: StaffingPlan) -> None:
        admin = plan.rate_card.roles[StaffRole.ADMIN]
        assert admin.labor_per_hour == pytest.approx(20.0)
        assert admin.overhead_per_hour == pytest.approx(16.0)
        assert admin.cost_per_hour == pytest.approx(36.0)
        assert admin.price_per_hour == pytest.approx(72.0)

    def test_markup(self, planner: StaffingPlanner) -> None:
        plan = planner.plan(StaffingInput(total_area_ft2=5000, hours_factor=0.22, markup=0.5))
        assert plan.rate_card.roles[StaffRole.ADMIN].price_per_hour == pytest.approx(54.0)

    def test_simple_average(self, plan: StaffingPlan) -> None:
        prices = [r.price_per_hour for r in plan.rate_card.roles.values()]
        assert plan.rate_card.simple_average_rate == pytest.approx(sum(prices) / len(prices))

    def test_weighted_average(self, plan: StaffingPlan) -> None:
        totals = plan.pricing.totals
        assert plan.rate_card.weighted_average_rate == pytest.approx(
            totals.pricing / totals.hours
        )


# ---------------------------------------------------------------------------
# Hours
# ---------------------------------------------------------------------------


class TestHoursPlan:
    def test_planned_hours_from_area(self, plan: StaffingPlan) -> None:
        assert plan.hours_plan.total_hours_planned == 1100

    def test_phase_hours(self, plan: StaffingPlan) -> None:
        assert [p.hours for p in plan.hours_plan.phases] == [88, 88, 374, 88, 374, 88]
        assert plan.hours_plan.total_months == 10

    def test_last_phase_takes_remainder(self, planner: StaffingPlanner) -> None:
        plan = planner.plan(StaffingInput(total_area_ft2=0, hours_factor=0, total_hours=101))
        hours = [p.hours for p in plan.hours_plan.phases]
        assert hours == [8, 8, 34, 8, 34, 9]
        assert sum(hours) == 101

    def test_explicit_total_hours(self, planner: StaffingPlanner) -> None:
        plan = planner.plan(StaffingInput(total_area_ft2=5000, hours_factor=0.22, total_hours=500))
        assert plan.hours_plan.total_hours_planned == 500


class TestHoursMatrix:
    def test_discovery_row(self, plan: StaffingPlan) -> None:
        row = plan.hours_matrix.matrix["Discovery"]
        assert row[StaffRole.ADMIN] == 33
        assert row[StaffRole.DESIGNER] == 33
        assert row[StaffRole.DESIGNER2] == 0
        assert row[StaffRole.ARCHITECT] == 9
        assert row[StaffRole.ENGINEER] == 2
        assert row[StaffRole.PRINCIPAL] == 13

    def test_staff_hours_round_up(self, plan: StaffingPlan) -> None:
        # 374 * 0.02 = 7.48 hours
        row = plan.hours_matrix.matrix["Creative - Schematic"]
        assert row[StaffRole.ADMIN] == 7
        assert row[StaffRole.ENGINEER] == 8

    def test_role_totals(self, plan: StaffingPlan) -> None:
        matrix = plan.hours_matrix
        for role in StaffRole:
            assert matrix.role_totals[role] == sum(row[role] for row in matrix.matrix.values())
        assert matrix.rounded_grand_total == sum(matrix.role_totals.values())
        assert matrix.planned_grand_total == 1100
        assert matrix.rounded_grand_total >= matrix.planned_grand_total


# ---------------------------------------------------------------------------
# Pricing and scenarios
# ---------------------------------------------------------------------------


class TestPricing:
    def test_role_pricing(self, plan: StaffingPlan) -> None:
        admin = plan.pricing.by_role[StaffRole.ADMIN]
        hours = plan.hours_matrix.role_totals[StaffRole.ADMIN]
        assert admin.pricing == pytest.approx(hours * 72.0)
        assert admin.total_cost == pytest.approx(hours * 36.0)
        assert admin.profit == pytest.approx(hours * 36.0)
        assert admin.margin == pytest.approx(0.5)

    def test_totals(self, plan: StaffingPlan) -> None:
        totals = plan.pricing.totals
        assert totals.hours == plan.hours_matrix.rounded_grand_total
        assert totals.pricing == pytest.approx(totals.total_cost + totals.profit)
        assert totals.margin == pytest.approx(0.5)


class TestScenarios:
    def test_scenario_order(self, plan: StaffingPlan) -> None:
        assert [s.name for s in plan.scenarios] == [
            FIRM_DISCOUNTED,
            FIRM_FULL_RATE,
            MARKET_FULL_RATE,
            MARKET_DISCOUNTED,
        ]

    def test_firm_full_rate(self, plan: StaffingPlan) -> None:
        scenario = plan.scenario(FIRM_FULL_RATE)
        assert scenario is not None
        admin_hours = plan.hours_matrix.role_totals[StaffRole.ADMIN]
        assert scenario.by_role[StaffRole.ADMIN] == pytest.approx(admin_hours * 60.0)
        assert scenario.total == pytest.approx(sum(scenario.by_role.values()))
        assert scenario.pct_of_project_budget == pytest.approx(
            scenario.total / plan.pricing.totals.pricing
        )

    def test_discounts(self, plan: StaffingPlan) -> None:
        full = plan.scenario(MARKET_FULL_RATE)
        discounted = plan.scenario(MARKET_DISCOUNTED)
        assert full is not None
        assert discounted is not None
        assert discounted.total == pytest.approx(full.total * 0.65)

    def test_unknown_scenario(self, plan: StaffingPlan) -> None:
        assert plan.scenario("Nope") is None

    def test_zero_hours(self, planner: StaffingPlanner) -> None:
        plan = planner.plan(StaffingInput(total_area_ft2=0, hours_factor=0.22))
        assert plan.pricing.totals.pricing == 0
        assert plan.rate_card.weighted_average_rate == 0.0
        assert all(s.pct_of_project_budget == 0.0 for s in plan.scenarios)
