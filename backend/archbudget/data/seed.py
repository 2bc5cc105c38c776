"""Seed cost data for the archbudget calculators.

Cost ranges are 2025 all-in $/SF bounds by building type and design tier.
Engineering rows give each discipline's average percentage of construction
cost; where the cost index has no measured figure the percentage is derived
from the discipline's typical portion of the shell budget.
"""

from __future__ import annotations

from archbudget.models.budget import BuildingCostRange, EngineeringCost
from archbudget.models.enums import BuildingType, EngineeringDiscipline

COST_DATA_VERSION = "2025.1"

SEED_COST_RANGES: list[BuildingCostRange] = [
    # --- High-end custom residential ---
    BuildingCostRange(
        building_type=BuildingType.HIGH_END_CUSTOM_RESIDENTIAL, tier=1,
        all_in_min=400, all_in_max=500,
        arch_share=0.60, int_share=0.25, land_share=0.15,
    ),
    BuildingCostRange(
        building_type=BuildingType.HIGH_END_CUSTOM_RESIDENTIAL, tier=2,
        all_in_min=600, all_in_max=700,
        arch_share=0.60, int_share=0.25, land_share=0.15,
    ),
    BuildingCostRange(
        building_type=BuildingType.HIGH_END_CUSTOM_RESIDENTIAL, tier=3,
        all_in_min=800, all_in_max=900,
        arch_share=0.60, int_share=0.25, land_share=0.15,
    ),
    # --- Mid-range standard residential ---
    BuildingCostRange(
        building_type=BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, tier=1,
        all_in_min=300, all_in_max=320,
        arch_share=0.66, int_share=0.22, land_share=0.12,
    ),
    BuildingCostRange(
        building_type=BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, tier=2,
        all_in_min=340, all_in_max=360,
        arch_share=0.66, int_share=0.22, land_share=0.12,
    ),
    BuildingCostRange(
        building_type=BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, tier=3,
        all_in_min=380, all_in_max=400,
        arch_share=0.66, int_share=0.22, land_share=0.12,
    ),
    # --- Hospitality ---
    BuildingCostRange(
        building_type=BuildingType.HOSPITALITY, tier=1,
        all_in_min=400, all_in_max=500,
        arch_share=0.60, int_share=0.30, land_share=0.10,
    ),
    BuildingCostRange(
        building_type=BuildingType.HOSPITALITY, tier=2,
        all_in_min=500, all_in_max=600,
        arch_share=0.60, int_share=0.30, land_share=0.10,
    ),
    BuildingCostRange(
        building_type=BuildingType.HOSPITALITY, tier=3,
        all_in_min=600, all_in_max=700,
        arch_share=0.60, int_share=0.30, land_share=0.10,
    ),
    # --- Commercial / mixed-use ---
    BuildingCostRange(
        building_type=BuildingType.COMMERCIAL_MIXED_USE, tier=1,
        all_in_min=150, all_in_max=250,
        arch_share=0.70, int_share=0.20, land_share=0.10,
    ),
    BuildingCostRange(
        building_type=BuildingType.COMMERCIAL_MIXED_USE, tier=2,
        all_in_min=250, all_in_max=330,
        arch_share=0.70, int_share=0.20, land_share=0.10,
    ),
    BuildingCostRange(
        building_type=BuildingType.COMMERCIAL_MIXED_USE, tier=3,
        all_in_min=330, all_in_max=400,
        arch_share=0.70, int_share=0.20, land_share=0.10,
    ),
]

# Typical discipline portion of the shell budget, by (building type, tier)
ENGINEERING_SHELL_PORTIONS: dict[tuple[str, int], dict[EngineeringDiscipline, float]] = {
    (BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, 1): {
        EngineeringDiscipline.STRUCTURAL: 0.28,
        EngineeringDiscipline.CIVIL_SITE: 0.05,
        EngineeringDiscipline.MECHANICAL: 0.06,
        EngineeringDiscipline.ELECTRICAL: 0.045,
        EngineeringDiscipline.PLUMBING: 0.035,
        EngineeringDiscipline.LOW_VOLTAGE: 0.015,
    },
    (BuildingType.HIGH_END_CUSTOM_RESIDENTIAL, 1): {
        EngineeringDiscipline.STRUCTURAL: 0.31,
        EngineeringDiscipline.CIVIL_SITE: 0.06,
        EngineeringDiscipline.MECHANICAL: 0.08,
        EngineeringDiscipline.ELECTRICAL: 0.05,
        EngineeringDiscipline.PLUMBING: 0.04,
        EngineeringDiscipline.LOW_VOLTAGE: 0.025,
    },
    (BuildingType.HIGH_END_CUSTOM_RESIDENTIAL, 2): {
        EngineeringDiscipline.STRUCTURAL: 0.30,
        EngineeringDiscipline.CIVIL_SITE: 0.07,
        EngineeringDiscipline.MECHANICAL: 0.09,
        EngineeringDiscipline.ELECTRICAL: 0.06,
        EngineeringDiscipline.PLUMBING: 0.05,
        EngineeringDiscipline.LOW_VOLTAGE: 0.035,
    },
    (BuildingType.HIGH_END_CUSTOM_RESIDENTIAL, 3): {
        EngineeringDiscipline.STRUCTURAL: 0.29,
        EngineeringDiscipline.CIVIL_SITE: 0.075,
        EngineeringDiscipline.MECHANICAL: 0.10,
        EngineeringDiscipline.ELECTRICAL: 0.07,
        EngineeringDiscipline.PLUMBING: 0.05,
        EngineeringDiscipline.LOW_VOLTAGE: 0.04,
    },
    (BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, 2): {
        EngineeringDiscipline.STRUCTURAL: 0.27,
        EngineeringDiscipline.CIVIL_SITE: 0.05,
        EngineeringDiscipline.MECHANICAL: 0.06,
        EngineeringDiscipline.ELECTRICAL: 0.045,
        EngineeringDiscipline.PLUMBING: 0.035,
        EngineeringDiscipline.LOW_VOLTAGE: 0.015,
    },
    (BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, 3): {
        EngineeringDiscipline.STRUCTURAL: 0.26,
        EngineeringDiscipline.CIVIL_SITE: 0.05,
        EngineeringDiscipline.MECHANICAL: 0.06,
        EngineeringDiscipline.ELECTRICAL: 0.045,
        EngineeringDiscipline.PLUMBING: 0.035,
        EngineeringDiscipline.LOW_VOLTAGE: 0.015,
    },
}

# 4-star hospitality and class A commercial figures apply to every tier
for _tier in (1, 2, 3):
    ENGINEERING_SHELL_PORTIONS[(BuildingType.HOSPITALITY, _tier)] = {
        EngineeringDiscipline.STRUCTURAL: 0.23,
        EngineeringDiscipline.CIVIL_SITE: 0.065,
        EngineeringDiscipline.MECHANICAL: 0.125,
        EngineeringDiscipline.ELECTRICAL: 0.075,
        EngineeringDiscipline.PLUMBING: 0.04,
        EngineeringDiscipline.LOW_VOLTAGE: 0.035,
    }
    ENGINEERING_SHELL_PORTIONS[(BuildingType.COMMERCIAL_MIXED_USE, _tier)] = {
        EngineeringDiscipline.STRUCTURAL: 0.24,
        EngineeringDiscipline.CIVIL_SITE: 0.05,
        EngineeringDiscipline.MECHANICAL: 0.115,
        EngineeringDiscipline.ELECTRICAL: 0.10,
        EngineeringDiscipline.PLUMBING: 0.03,
        EngineeringDiscipline.LOW_VOLTAGE: 0.035,
    }


def _derived_engineering_rows(
    measured: list[EngineeringCost],
) -> list[EngineeringCost]:
    shell_shares = {(r.building_type, r.tier): r.arch_share for r in SEED_COST_RANGES}
    measured_keys = {(r.building_type, r.tier) for r in measured}
    rows: list[EngineeringCost] = []
    for (building_type, tier), portions in ENGINEERING_SHELL_PORTIONS.items():
        if (building_type, tier) in measured_keys:
            continue
        shell_share = shell_shares[(building_type, tier)]
        for discipline, portion in portions.items():
            rows.append(
                EngineeringCost(
                    building_type=building_type,
                    tier=tier,
                    category=discipline,
                    percent_avg=f"{portion * shell_share * 100:.2f}%",
                )
            )
    return rows


# Measured figures from the 2025 cost index (no plumbing or low-voltage data)
_MEASURED_ENGINEERING_ROWS: list[EngineeringCost] = [
    EngineeringCost(
        building_type=BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, tier=1,
        category=EngineeringDiscipline.CIVIL_SITE, percent_avg="3.3%",
    ),
    EngineeringCost(
        building_type=BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, tier=1,
        category=EngineeringDiscipline.STRUCTURAL, percent_avg="9.57%",
    ),
    EngineeringCost(
        building_type=BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, tier=1,
        category=EngineeringDiscipline.MECHANICAL, percent_avg="3.96%",
    ),
    EngineeringCost(
        building_type=BuildingType.MID_RANGE_STANDARD_RESIDENTIAL, tier=1,
        category=EngineeringDiscipline.ELECTRICAL, percent_avg="2.97%",
    ),
]

SEED_ENGINEERING_COSTS: list[EngineeringCost] = (
    _MEASURED_ENGINEERING_ROWS + _derived_engineering_rows(_MEASURED_ENGINEERING_ROWS)
)
