"""CSV loaders for cost range and engineering cost tables.

Exports of the cost index workbooks label columns inconsistently
("All-in Min", "all_in_min", "allInMin"), so headers are matched
case-insensitively against a list of accepted names. Numeric cells may
carry currency symbols or thousands separators.
"""

from __future__ import annotations

import csv
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from archbudget.exceptions import CostDataLoadError
from archbudget.models.budget import BuildingCostRange, EngineeringCost
from archbudget.numbers import safe_parse_float

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

COST_RANGES_FILENAME = "building_cost_ranges.csv"
ENGINEERING_COSTS_FILENAME = "engineering_costs.csv"

_COST_RANGE_COLUMNS: dict[str, list[str]] = {
    "building_type": ["building_type", "building type", "buildingtype"],
    "tier": ["tier", "numeric_tier"],
    "all_in_min": ["all_in_min", "all-in min", "allinmin"],
    "all_in_max": ["all_in_max", "all-in max", "allinmax"],
    "arch_share": ["arch_share", "shell share", "archshare"],
    "int_share": ["int_share", "interior share", "intshare"],
    "land_share": ["land_share", "landscape share", "landshare"],
}

_ENGINEERING_COLUMNS: dict[str, list[str]] = {
    "building_type": ["building_type", "building type", "buildingtype"],
    "tier": ["tier", "numeric_tier"],
    "category": ["category", "category_simple"],
    "percent_avg": ["percent_avg", "percent avg", "percentavg"],
}


def _pick(row: dict[str, str], names: list[str]) -> str | None:
    normalized = {k.strip().lower(): v for k, v in row.items() if k is not None}
    for name in names:
        value = normalized.get(name)
        if value is not None:
            return value.strip()
    return None


def _read_rows(path: Path) -> list[dict[str, str]]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as fh:
            return list(csv.DictReader(fh))
    except OSError as exc:
        msg = f"Cannot read cost data file {path}: {exc}"
        raise CostDataLoadError(msg) from exc


def load_cost_ranges_csv(path: Path) -> list[BuildingCostRange]:
    """Load building cost ranges from a CSV export.

    Raises:
        CostDataLoadError: If the file is unreadable or a row is invalid.
    """
    rows: list[BuildingCostRange] = []
    for line_no, raw in enumerate(_read_rows(path), start=2):
        try:
            rows.append(
                BuildingCostRange(
                    building_type=_pick(raw, _COST_RANGE_COLUMNS["building_type"]) or "",
                    tier=int(safe_parse_float(_pick(raw, _COST_RANGE_COLUMNS["tier"]))),
                    all_in_min=safe_parse_float(_pick(raw, _COST_RANGE_COLUMNS["all_in_min"])),
                    all_in_max=safe_parse_float(_pick(raw, _COST_RANGE_COLUMNS["all_in_max"])),
                    arch_share=safe_parse_float(_pick(raw, _COST_RANGE_COLUMNS["arch_share"])),
                    int_share=safe_parse_float(_pick(raw, _COST_RANGE_COLUMNS["int_share"])),
                    land_share=safe_parse_float(_pick(raw, _COST_RANGE_COLUMNS["land_share"])),
                )
            )
        except ValidationError as exc:
            msg = f"{path}:{line_no}: invalid cost range row: {exc}"
            raise CostDataLoadError(msg) from exc
    logger.info("Loaded %d cost ranges from %s", len(rows), path)
    return rows


def load_engineering_costs_csv(path: Path) -> list[EngineeringCost]:
    """Load engineering cost rows from a CSV export.

    ``percent_avg`` cells are percent points ("9.57%" or "9.57").

    Raises:
        CostDataLoadError: If the file is unreadable or a row is invalid.
    """
    rows: list[EngineeringCost] = []
    for line_no, raw in enumerate(_read_rows(path), start=2):
        try:
            rows.append(
                EngineeringCost(
                    building_type=_pick(raw, _ENGINEERING_COLUMNS["building_type"]) or "",
                    tier=int(safe_parse_float(_pick(raw, _ENGINEERING_COLUMNS["tier"]))),
                    category=_pick(raw, _ENGINEERING_COLUMNS["category"]) or "",
                    percent_avg=_pick(raw, _ENGINEERING_COLUMNS["percent_avg"]) or "0",
                )
            )
        except ValidationError as exc:
            msg = f"{path}:{line_no}: invalid engineering cost row: {exc}"
            raise CostDataLoadError(msg) from exc
    logger.info("Loaded %d engineering cost rows from %s", len(rows), path)
    return rows
