"""Tests for the cost data layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from archbudget.data.loaders import load_cost_ranges_csv, load_engineering_costs_csv
from archbudget.data.rates import (
    PHASE_DISTRIBUTION,
    ROLE_LEVERAGE,
    get_category_multiplier,
)
from archbudget.data.repository import CostDataRepository
from archbudget.data.seed import (
    ENGINEERING_SHELL_PORTIONS,
    SEED_COST_RANGES,
    SEED_ENGINEERING_COSTS,
)
from archbudget.exceptions import CostDataLoadError, CostDataNotFoundError
from archbudget.models.budget import BuildingCostRange
from archbudget.models.enums import BuildingType, EngineeringDiscipline

if TYPE_CHECKING:
    from pathlib import Path

# ---------------------------------------------------------------------------
# Seed data integrity
# ---------------------------------------------------------------------------


class TestSeedData:
    def test_every_type_has_three_tiers(self) -> None:
        keys = {(r.building_type, r.tier) for r in SEED_COST_RANGES}
        assert keys == {(bt, tier) for bt in BuildingType for tier in (1, 2, 3)}

    def test_no_duplicate_entries(self) -> None:
        keys = [(r.building_type, r.tier) for r in SEED_COST_RANGES]
        assert len(keys) == len(set(keys)), "Duplicate seed entries found"

    def test_shares_sum_to_one(self) -> None:
        for row in SEED_COST_RANGES:
            assert row.share_sum == pytest.approx(1.0), (row.building_type, row.tier)

    def test_costs_increase_with_tier(self) -> None:
        for bt in BuildingType:
            rows = sorted(
                (r for r in SEED_COST_RANGES if r.building_type == bt), key=lambda r: r.tier
            )
            mins = [r.all_in_min for r in rows]
            assert mins == sorted(mins)

    def test_engineering_percentages_are_fractions(self) -> None:
        for row in SEED_ENGINEERING_COSTS:
            assert 0 < row.percent_avg < 0.5

    def test_measured_rows_take_precedence(self) -> None:
        rows = [
            r for r in SEED_ENGINEERING_COSTS
            if r.building_type == BuildingType.MID_RANGE_STANDARD_RESIDENTIAL and r.tier == 1
        ]
        assert {r.category for r in rows} == {
            EngineeringDiscipline.CIVIL_SITE,
            EngineeringDiscipline.STRUCTURAL,
            EngineeringDiscipline.MECHANICAL,
            EngineeringDiscipline.ELECTRICAL,
        }

    def test_derived_rows_cover_other_keys(self) -> None:
        rows = [
            r for r in SEED_ENGINEERING_COSTS
            if r.building_type == BuildingType.HOSPITALITY and r.tier == 2
        ]
        assert len(rows) == len(EngineeringDiscipline)
        structural = next(r for r in rows if r.category == EngineeringDiscipline.STRUCTURAL)
        # 23 % of a 60 % shell share
        assert structural.percent_avg == pytest.approx(0.138)

    def test_shell_portions_cover_all_keys(self) -> None:
        assert set(ENGINEERING_SHELL_PORTIONS) == {
            (bt, tier) for bt in BuildingType for tier in (1, 2, 3)
        }


class TestRates:
    def test_phase_distribution_sums_to_one(self) -> None:
        assert sum(p for _, p in PHASE_DISTRIBUTION) == pytest.approx(1.0)

    def test_every_phase_has_role_leverage(self) -> None:
        for phase, _ in PHASE_DISTRIBUTION:
            weights = ROLE_LEVERAGE[phase]
            assert all(0 <= w <= 1 for w in weights.values()), phase

    @pytest.mark.parametrize(
        ("category", "expected"), [(1, 0.9), (3, 1.1), (5, 1.3), (7, 1.5)]
    )
    def test_category_multiplier(self, category: int, expected: float) -> None:
        assert get_category_multiplier(category) == pytest.approx(expected)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


@pytest.fixture()
def repo() -> CostDataRepository:
    return CostDataRepository(SEED_COST_RANGES, SEED_ENGINEERING_COSTS)


class TestRepository:
    def test_get_cost_range(self, repo: CostDataRepository) -> None:
        row = repo.get_cost_range("Mid-Range Standard Residential", 1)
        assert row is not None
        assert row.all_in_min == 300
        assert row.all_in_max == 320

    def test_get_cost_range_accepts_enum(self, repo: CostDataRepository) -> None:
        row = repo.get_cost_range(BuildingType.COMMERCIAL_MIXED_USE, 3)
        assert row is not None
        assert row.arch_share == 0.70

    def test_miss_returns_none(self, repo: CostDataRepository) -> None:
        assert repo.get_cost_range("Warehouse", 1) is None
        assert repo.get_cost_range("Mid-Range Standard Residential", 4) is None

    def test_require_raises_on_miss(self, repo: CostDataRepository) -> None:
        with pytest.raises(CostDataNotFoundError) as exc_info:
            repo.require_cost_range("Warehouse", 2)
        assert exc_info.value.building_type == "Warehouse"
        assert exc_info.value.tier == 2
        assert str(exc_info.value) == "No cost data for building type 'Warehouse' tier 2"

    def test_engineering_rows_may_be_empty(self) -> None:
        repo = CostDataRepository(SEED_COST_RANGES)
        assert repo.get_engineering_costs("Mid-Range Standard Residential", 1) == []

    def test_list_building_types(self, repo: CostDataRepository) -> None:
        assert repo.list_building_types() == [
            "High-End Custom Residential",
            "Mid-Range Standard Residential",
            "Hospitality (Hotel/Resort)",
            "Commercial / Mixed-Use",
        ]

    def test_list_tiers(self, repo: CostDataRepository) -> None:
        assert repo.list_tiers("Hospitality (Hotel/Resort)") == [1, 2, 3]
        assert repo.list_tiers("Warehouse") == []

    def test_duplicate_key_rejected(self) -> None:
        row = SEED_COST_RANGES[0]
        with pytest.raises(CostDataLoadError, match="Duplicate cost range"):
            CostDataRepository([row, row])


# ---------------------------------------------------------------------------
# CSV loaders
# ---------------------------------------------------------------------------


class TestLoaders:
    def test_load_cost_ranges(self, tmp_path: Path) -> None:
        path = tmp_path / "building_cost_ranges.csv"
        path.write_text(
            "Building Type,Tier,All-in Min,All-in Max,Shell Share,Interior Share,Landscape Share\n"
            'Warehouse,1,"$120.00","$180.00",0.8,0.1,0.1\n',
            encoding="utf-8",
        )
        rows = load_cost_ranges_csv(path)
        assert rows == [
            BuildingCostRange(
                building_type="Warehouse", tier=1, all_in_min=120, all_in_max=180,
                arch_share=0.8, int_share=0.1, land_share=0.1,
            )
        ]

    def test_load_cost_ranges_with_bom_and_snake_case(self, tmp_path: Path) -> None:
        path = tmp_path / "ranges.csv"
        path.write_text(
            "building_type,tier,all_in_min,all_in_max,arch_share,int_share,land_share\n"
            "Clinic,2,400,450,0.7,0.2,0.1\n",
            encoding="utf-8-sig",
        )
        rows = load_cost_ranges_csv(path)
        assert rows[0].building_type == "Clinic"
        assert rows[0].tier == 2

    def test_invalid_row_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "ranges.csv"
        path.write_text(
            "building_type,tier,all_in_min,all_in_max,arch_share,int_share,land_share\n"
            "Clinic,2,500,450,0.7,0.2,0.1\n",
            encoding="utf-8",
        )
        with pytest.raises(CostDataLoadError, match=":2: invalid cost range row"):
            load_cost_ranges_csv(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CostDataLoadError, match="Cannot read"):
            load_cost_ranges_csv(tmp_path / "missing.csv")

    def test_load_engineering_costs(self, tmp_path: Path) -> None:
        path = tmp_path / "engineering_costs.csv"
        path.write_text(
            "building_type,tier,category,percent_avg\n"
            "Warehouse,1,Structural,9.57%\n"
            "Warehouse,1,Civil & Site,3.3\n",
            encoding="utf-8",
        )
        rows = load_engineering_costs_csv(path)
        assert [r.category for r in rows] == ["Structural", "Civil & Site"]
        assert rows[0].percent_avg == pytest.approx(0.0957)
        assert rows[1].percent_avg == pytest.approx(0.033)
