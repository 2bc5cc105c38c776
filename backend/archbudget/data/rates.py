"""Reference tables for fee and staffing calculations.

Category multipliers scale fees by project complexity (1 = simple,
5 = extremely complex). Phase distributions and role leverage describe how
design hours are spread over the project; labor/overhead and hourly rates
price those hours.
"""

from __future__ import annotations

from archbudget.models.enums import StaffRole

CATEGORY_MULTIPLIERS: dict[int, float] = {
    1: 0.90,
    2: 1.00,
    3: 1.10,
    4: 1.20,
    5: 1.30,
}


def get_category_multiplier(category: int) -> float:
    """Fee multiplier for a complexity category.

    Categories outside the table fall back to ``0.8 + 0.1 * category``.
    """
    multiplier = CATEGORY_MULTIPLIERS.get(category)
    if multiplier is not None:
        return multiplier
    return 0.8 + 0.1 * category


# Share of in-house hours spent in each design phase (sums to 1.0)
PHASE_DISTRIBUTION: list[tuple[str, float]] = [
    ("Discovery", 0.08),
    ("Creative - Conceptual", 0.08),
    ("Creative - Schematic", 0.34),
    ("Creative - Preliminary", 0.08),
    ("Technical - Schematic", 0.34),
    ("Technical - Preliminary", 0.08),
]

# Calendar months per phase; None for hourly-rate phases
PHASE_MONTHS: dict[str, int | None] = {
    "Kick-Off": 0,
    "Discovery": 1,
    "Creative - Conceptual": 1,
    "Creative - Schematic": 3,
    "Creative - Preliminary": 1,
    "Technical - Schematic": 3,
    "Technical - Preliminary": 1,
    "Pre-Construction (Hourly Rate)": None,
    "Construction Observation (Hourly Rate)": None,
}

# Fraction of each phase's hours worked by each role
ROLE_LEVERAGE: dict[str, dict[StaffRole, float]] = {
    "Discovery": {
        StaffRole.ADMIN: 0.37, StaffRole.DESIGNER: 0.37, StaffRole.DESIGNER2: 0.0,
        StaffRole.ARCHITECT: 0.10, StaffRole.ENGINEER: 0.02, StaffRole.PRINCIPAL: 0.14,
    },
    "Creative - Conceptual": {
        StaffRole.ADMIN: 0.0, StaffRole.DESIGNER: 0.0, StaffRole.DESIGNER2: 0.0,
        StaffRole.ARCHITECT: 0.95, StaffRole.ENGINEER: 0.0, StaffRole.PRINCIPAL: 0.05,
    },
    "Creative - Schematic": {
        StaffRole.ADMIN: 0.02, StaffRole.DESIGNER: 0.32, StaffRole.DESIGNER2: 0.32,
        StaffRole.ARCHITECT: 0.32, StaffRole.ENGINEER: 0.02, StaffRole.PRINCIPAL: 0.02,
    },
    "Creative - Preliminary": {
        StaffRole.ADMIN: 0.02, StaffRole.DESIGNER: 0.32, StaffRole.DESIGNER2: 0.32,
        StaffRole.ARCHITECT: 0.32, StaffRole.ENGINEER: 0.02, StaffRole.PRINCIPAL: 0.02,
    },
    "Technical - Schematic": {
        StaffRole.ADMIN: 0.06, StaffRole.DESIGNER: 0.26, StaffRole.DESIGNER2: 0.26,
        StaffRole.ARCHITECT: 0.10, StaffRole.ENGINEER: 0.32, StaffRole.PRINCIPAL: 0.06,
    },
    "Technical - Preliminary": {
        StaffRole.ADMIN: 0.06, StaffRole.DESIGNER: 0.26, StaffRole.DESIGNER2: 0.26,
        StaffRole.ARCHITECT: 0.10, StaffRole.ENGINEER: 0.32, StaffRole.PRINCIPAL: 0.06,
    },
}

# Annual (labor, overhead) cost per role in dollars
LABOR_OVERHEAD: dict[StaffRole, tuple[float, float]] = {
    StaffRole.ADMIN: (41_600.0, 33_280.0),
    StaffRole.DESIGNER: (52_000.0, 41_600.0),
    StaffRole.DESIGNER2: (62_400.0, 49_920.0),
    StaffRole.ARCHITECT: (83_200.0, 66_560.0),
    StaffRole.ENGINEER: (93_600.0, 74_880.0),
    StaffRole.PRINCIPAL: (156_000.0, 124_800.0),
}

# (firm rate, market rate) in $/hour
HOURLY_RATES: dict[StaffRole, tuple[float, float]] = {
    StaffRole.ADMIN: (60.0, 75.0),
    StaffRole.DESIGNER: (80.0, 100.0),
    StaffRole.DESIGNER2: (95.0, 120.0),
    StaffRole.ARCHITECT: (125.0, 160.0),
    StaffRole.ENGINEER: (140.0, 180.0),
    StaffRole.PRINCIPAL: (225.0, 300.0),
}

WORK_HOURS_PER_YEAR = 2080
