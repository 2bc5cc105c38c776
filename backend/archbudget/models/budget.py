"""Budget input and lookup-row models.

Lookup rows are the data-access boundary: shares and percentages stored as
strings in the cost tables are coerced to floats here, once, so the
calculators only ever see numbers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from archbudget.numbers import percent_to_decimal


class BudgetInput(BaseModel):
    """Project description supplied by the caller.

    Areas are in square feet except ``site_area_m2``, which follows the
    survey convention of square metres.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    building_type: str = Field(min_length=1)
    tier: int = Field(ge=1, le=3)
    new_area_ft2: float = Field(ge=0)
    existing_area_ft2: float = Field(ge=0)
    site_area_m2: float = Field(default=0.0, ge=0)

    @property
    def total_area_ft2(self) -> float:
        return self.new_area_ft2 + self.existing_area_ft2


class BuildingCostRange(BaseModel):
    """All-in $/ft² bounds and discipline shares for one (building type, tier)."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, allow_inf_nan=False
    )

    building_type: str = Field(alias="buildingType", min_length=1)
    tier: int = Field(ge=1)
    all_in_min: float = Field(alias="allInMin", ge=0)
    all_in_max: float = Field(alias="allInMax", ge=0)
    arch_share: float = Field(alias="archShare", ge=0, le=1)
    int_share: float = Field(alias="intShare", ge=0, le=1)
    land_share: float = Field(alias="landShare", ge=0, le=1)

    @model_validator(mode="after")
    def min_le_max(self) -> BuildingCostRange:
        if self.all_in_min > self.all_in_max:
            msg = (
                f"all_in_min ({self.all_in_min}) must not exceed "
                f"all_in_max ({self.all_in_max})"
            )
            raise ValueError(msg)
        return self

    @property
    def share_sum(self) -> float:
        return self.arch_share + self.int_share + self.land_share


class EngineeringCost(BaseModel):
    """Engineering percentage-of-cost row for one discipline category.

    The cost tables store ``percent_avg`` as text in percent points
    (``"9.57%"``); string values are converted to a fraction on
    construction. Numeric values are taken to be fractions already, so a
    number above 1 (percent points passed as a number) is rejected.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, allow_inf_nan=False
    )

    building_type: str = Field(alias="buildingType", min_length=1)
    tier: int = Field(ge=1)
    category: str
    percent_avg: float = Field(alias="percentAvg", ge=0, le=1)
    percent_min: float | None = Field(default=None, alias="percentMin")
    percent_max: float | None = Field(default=None, alias="percentMax")
    cost_min_psf: float | None = Field(default=None, alias="costMinPsf")
    cost_max_psf: float | None = Field(default=None, alias="costMaxPsf")

    @field_validator("percent_avg", mode="before")
    @classmethod
    def parse_percent_text(cls, v: object) -> object:
        if isinstance(v, str):
            return percent_to_decimal(v)
        return v
