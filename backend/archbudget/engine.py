"""Budget engine: input validation, cost data lookup and calculation.

The engine is the entry point most callers want. It validates raw input,
resolves the cost range and engineering rows for the building type and
tier, then hands everything to the pure calculator in ``archbudget.budget``.
Fee matrices are built on top of a full budget result, never a partial one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from archbudget.budget import calculate_minimum_budget
from archbudget.exceptions import InvalidInputError
from archbudget.fees import calculate_fee_matrix
from archbudget.models.budget import BudgetInput
from archbudget.models.fees import FeeMatrixInput

if TYPE_CHECKING:
    from collections.abc import Mapping

    from archbudget.data.repository import CostDataRepository
    from archbudget.models.fees import FeeMatrixResult
    from archbudget.models.result import BudgetCalculationResult

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class BudgetEngine:
    """Produces budget breakdowns and fee matrices from project inputs.

    Args:
        repository: Cost data providing cost ranges and engineering rows.

    Example::

        from archbudget.data import CostDataRepository, SEED_COST_RANGES

        engine = BudgetEngine(CostDataRepository(SEED_COST_RANGES))
        result = engine.calculate(engine.validate_input(payload))
    """

    def __init__(self, repository: CostDataRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> CostDataRepository:
        return self._repository

    def validate_input(self, data: Mapping[str, Any]) -> BudgetInput:
        """Parse raw project data into a ``BudgetInput``.

        Raises:
            InvalidInputError: If an area is negative or non-finite, the tier
                is out of range, or a required field is missing.
        """
        try:
            return BudgetInput.model_validate(data)
        except ValidationError as exc:
            msg = f"Invalid project input: {exc.error_count()} error(s)"
            raise InvalidInputError(msg) from exc

    def calculate(
        self,
        budget_input: BudgetInput,
        working_budget_override: float | None = None,
    ) -> BudgetCalculationResult:
        """Compute the budget breakdown for a validated input.

        Raises:
            CostDataNotFoundError: If no cost range exists for the input's
                building type and tier.
        """
        cost_range = self._repository.require_cost_range(
            budget_input.building_type, budget_input.tier
        )
        engineering_costs = self._repository.get_engineering_costs(
            budget_input.building_type, budget_input.tier
        )
        logger.debug(
            "Resolved %r tier %d: %.2f-%.2f $/SF, %d engineering rows",
            budget_input.building_type,
            budget_input.tier,
            cost_range.all_in_min,
            cost_range.all_in_max,
            len(engineering_costs),
        )

        result = calculate_minimum_budget(
            budget_input,
            cost_range,
            engineering_costs,
            working_budget_override=working_budget_override,
        )
        for note in result.notes:
            logger.warning("Budget note for %r: %s", budget_input.building_type, note)
        return result

    def fee_matrix(
        self,
        budget_input: BudgetInput,
        complexity_multiplier: float,
        discount_rate: float,
        average_billable_rate: float,
    ) -> FeeMatrixResult:
        """Budget the project, then price design fees on the result."""
        budget_result = self.calculate(budget_input)
        return calculate_fee_matrix(
            FeeMatrixInput(
                budget_result=budget_result,
                complexity_multiplier=complexity_multiplier,
                discount_rate=discount_rate,
                average_billable_rate=average_billable_rate,
            )
        )
