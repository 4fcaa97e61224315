"""Trip budget service: the calculation plus booking helpers for the UI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

import pandas as pd

from budget.calculations import calculate_points_value, calculate_trip_budget, resolve_today
from budget.data_loader import load_category_costs
from budget.formatting import can_book_now, get_booking_tooltip
from budget.models import (
    BudgetCategory,
    CategoryBudgetData,
    CategoryCosts,
    TripBudgetCalculation,
    category_label,
)

__all__ = ["TripBudget", "load_trip_budget", "plan_trip_budget"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TripBudget:
    calculation: TripBudgetCalculation
    effective_points: float
    today: pd.Timestamp

    def category(self, category: BudgetCategory | str) -> CategoryBudgetData:
        return self.calculation.categories[BudgetCategory(category)]

    def can_book_category(self, category: BudgetCategory | str) -> bool:
        data = self.category(category)
        return data.is_funded or can_book_now(data.earliest_booking_date, today=self.today)

    def tooltip(self, category: BudgetCategory | str) -> str:
        data = self.category(category)
        return get_booking_tooltip(
            category_label(category),
            data.is_funded,
            data.months_to_fund,
            data.earliest_booking_date,
        )

    def label(self, category: BudgetCategory | str) -> str:
        return category_label(category)

    @property
    def points_value(self) -> int:
        return calculate_points_value(self.effective_points)

    @property
    def is_fully_funded(self) -> bool:
        return self.calculation.remaining_to_save == 0

    @property
    def has_savings(self) -> bool:
        return self.calculation.current_savings > 0

    @property
    def display_progress(self) -> float:
        return min(100.0, self.calculation.savings_progress)


def plan_trip_budget(
    category_costs: CategoryCosts,
    current_savings: float,
    monthly_savings: float,
    points_to_use: float = 0,
    use_points: bool = False,
    *,
    today: Optional[date | pd.Timestamp] = None,
) -> TripBudget:
    """Calculate a trip budget, applying points only when ``use_points`` is set."""

    current_day = resolve_today(today)
    effective_points = points_to_use if use_points else 0

    calculation = calculate_trip_budget(
        category_costs,
        current_savings,
        monthly_savings,
        effective_points,
        today=current_day,
    )

    funded = [category.value for category, data in calculation.categories.items() if data.is_funded]
    logger.debug(
        "Planned trip costing %.2f with %.2f saved; funded categories: %s",
        calculation.total_trip_cost,
        calculation.current_savings,
        ", ".join(funded) or "none",
    )
    return TripBudget(calculation=calculation, effective_points=effective_points, today=current_day)


def load_trip_budget(
    csv_path: str | Path,
    current_savings: float,
    monthly_savings: float,
    points_to_use: float = 0,
    use_points: bool = False,
    *,
    today: Optional[date | pd.Timestamp] = None,
) -> TripBudget:
    """Load category costs from a trip CSV and plan its budget."""

    csv_path = Path(csv_path)
    costs = load_category_costs(csv_path)
    if costs.total <= 0:
        logger.info("Trip at %s has no estimated costs yet", csv_path)

    return plan_trip_budget(
        costs,
        current_savings,
        monthly_savings,
        points_to_use,
        use_points,
        today=today,
    )
