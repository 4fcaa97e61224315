"""Shared data model definitions for trip budget planning."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Mapping

import pandas as pd


class BudgetCategory(str, Enum):
    FLIGHTS = "flights"
    ACCOMMODATIONS = "accommodations"
    TRANSPORTATION = "transportation"
    ACTIVITIES = "activities"
    FOOD = "food"
    PREPARATION = "preparation"


# Savings reach a category only once every category before it is fully funded.
ALLOCATION_ORDER: tuple[BudgetCategory, ...] = (
    BudgetCategory.FLIGHTS,
    BudgetCategory.ACCOMMODATIONS,
    BudgetCategory.TRANSPORTATION,
    BudgetCategory.ACTIVITIES,
    BudgetCategory.FOOD,
    BudgetCategory.PREPARATION,
)

CATEGORY_LABELS: dict[BudgetCategory, str] = {
    BudgetCategory.FLIGHTS: "Flights",
    BudgetCategory.ACCOMMODATIONS: "Accommodations",
    BudgetCategory.TRANSPORTATION: "Transportation",
    BudgetCategory.ACTIVITIES: "Activities",
    BudgetCategory.FOOD: "Food & Dining",
    BudgetCategory.PREPARATION: "Trip Preparation",
}


def is_budget_category(value: object) -> bool:
    """Return ``True`` when ``value`` names one of the six budget categories."""

    try:
        BudgetCategory(value)
    except ValueError:
        return False
    return True


def category_label(category: BudgetCategory | str) -> str:
    """Return the display label for a category, or the raw value if unknown."""

    if not is_budget_category(category):
        return str(category)
    return CATEGORY_LABELS[BudgetCategory(category)]


@dataclass(frozen=True)
class CategoryCosts:
    """Estimated cost per budget category, in dollars."""

    flights: float
    accommodations: float
    transportation: float
    activities: float
    food: float
    preparation: float

    def __getitem__(self, category: BudgetCategory | str) -> float:
        return float(getattr(self, BudgetCategory(category).value))

    @property
    def total(self) -> float:
        return float(sum(self[category] for category in ALLOCATION_ORDER))

    def with_cost(self, category: BudgetCategory | str, cost: float) -> "CategoryCosts":
        return replace(self, **{BudgetCategory(category).value: float(cost)})

    def to_dict(self) -> dict[BudgetCategory, float]:
        return {category: self[category] for category in ALLOCATION_ORDER}

    @classmethod
    def from_mapping(cls, costs: Mapping[BudgetCategory | str, float]) -> "CategoryCosts":
        """Build costs from a mapping keyed by category tags.

        Every category must be present; unknown keys are rejected.
        """

        normalised: dict[str, float] = {}
        for key, value in costs.items():
            if not is_budget_category(key):
                raise ValueError(f"Unknown budget category: {key!r}")
            normalised[BudgetCategory(key).value] = float(value)

        expected = {field.name for field in fields(cls)}
        missing = sorted(expected - normalised.keys())
        if missing:
            raise ValueError(f"Missing cost estimates for: {', '.join(missing)}")
        return cls(**normalised)


DEFAULT_CATEGORY_COSTS = CategoryCosts(
    flights=0.0,
    accommodations=0.0,
    transportation=0.0,
    activities=0.0,
    food=0.0,
    preparation=0.0,
)


@dataclass(frozen=True)
class CategoryBudgetData:
    estimated_cost: float
    allocated_savings: float
    savings_gap: float
    is_funded: bool
    earliest_booking_date: pd.Timestamp
    months_to_fund: int


@dataclass(frozen=True)
class TripBudgetCalculation:
    total_trip_cost: float
    total_cost_before_points: float
    points_value: int
    current_savings: float
    monthly_savings: float
    remaining_to_save: float
    savings_progress: float
    months_to_fully_funded: int
    earliest_travel_date: pd.Timestamp
    categories: dict[BudgetCategory, CategoryBudgetData]
    recommended_monthly_savings: int


__all__ = [
    "ALLOCATION_ORDER",
    "BudgetCategory",
    "CATEGORY_LABELS",
    "CategoryBudgetData",
    "CategoryCosts",
    "DEFAULT_CATEGORY_COSTS",
    "TripBudgetCalculation",
    "category_label",
    "is_budget_category",
]
