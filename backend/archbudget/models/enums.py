"""Enums for the archbudget domain models.

Building types and engineering categories mirror the labels used in the
construction cost index workbooks, so their values are the display strings
found in the lookup tables rather than snake_case identifiers.
"""

from enum import IntEnum, StrEnum


class BuildingType(StrEnum):
    """Building types with seeded cost ranges."""

    HIGH_END_CUSTOM_RESIDENTIAL = "High-End Custom Residential"
    MID_RANGE_STANDARD_RESIDENTIAL = "Mid-Range Standard Residential"
    HOSPITALITY = "Hospitality (Hotel/Resort)"
    COMMERCIAL_MIXED_USE = "Commercial / Mixed-Use"


class DesignTier(IntEnum):
    """Quality/cost level used to select a cost range row."""

    LOW_END = 1
    MID = 2
    HIGH_END = 3

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]


_TIER_LABELS: dict[int, str] = {
    DesignTier.LOW_END: "Low-end",
    DesignTier.MID: "Mid",
    DesignTier.HIGH_END: "High-end",
}


class EngineeringDiscipline(StrEnum):
    """Engineering categories allocated against the shell budget."""

    CIVIL_SITE = "Civil & Site"
    STRUCTURAL = "Structural"
    MECHANICAL = "Mechanical"
    ELECTRICAL = "Electrical"
    PLUMBING = "Plumbing"
    LOW_VOLTAGE = "Low-Voltage"

    @property
    def key(self) -> str:
        """Snake-case key used in discipline breakdowns (``civil___site``)."""
        return "".join(c if c.isalnum() else "_" for c in self.value.lower())


class StaffRole(StrEnum):
    """Staff roles used for hours leverage and rate scenarios."""

    ADMIN = "Admin"
    DESIGNER = "Designer"
    DESIGNER2 = "Designer2"
    ARCHITECT = "Architect"
    ENGINEER = "Engineer"
    PRINCIPAL = "Principal"


class ProjectScope(StrEnum):
    """Fee line items on a comprehensive project proposal."""

    SCAN_BUILDING = "Scan to Bim - Building"
    SCAN_SITE = "Scan to Bim - Site"
    ARCHITECTURE = "Architecture (Design + Consultant Admin.)"
    INTERIOR = "Interior design"
    LANDSCAPE = "Landscape architecture"
    STRUCTURAL = "Structural engineer"
    CIVIL = "Civil / site engineer"
    MECHANICAL = "Mechanical (HVAC, energy, pools)"
    ELECTRICAL = "Electrical (power / lighting)"
    PLUMBING = "Plumbing engineer"
    TELECOM = "Telecommunication"
