"""Core trip budgeting package: savings allocation and booking readiness."""

from .calculations import (
    POINTS_CONVERSION_RATE,
    allocate_savings_sequentially,
    calculate_earliest_date,
    calculate_flight_cost_after_points,
    calculate_months_until,
    calculate_points_value,
    calculate_recommended_monthly_savings,
    calculate_trip_budget,
)
from .formatting import can_book_now, format_currency, format_date_month_year, get_booking_tooltip
from .models import (
    ALLOCATION_ORDER,
    BudgetCategory,
    CategoryBudgetData,
    CategoryCosts,
    DEFAULT_CATEGORY_COSTS,
    TripBudgetCalculation,
    category_label,
    is_budget_category,
)
from .service import TripBudget, load_trip_budget, plan_trip_budget

__all__ = [
    "ALLOCATION_ORDER",
    "BudgetCategory",
    "CategoryBudgetData",
    "CategoryCosts",
    "DEFAULT_CATEGORY_COSTS",
    "POINTS_CONVERSION_RATE",
    "TripBudget",
    "TripBudgetCalculation",
    "allocate_savings_sequentially",
    "calculate_earliest_date",
    "calculate_flight_cost_after_points",
    "calculate_months_until",
    "calculate_points_value",
    "calculate_recommended_monthly_savings",
    "calculate_trip_budget",
    "can_book_now",
    "category_label",
    "format_currency",
    "format_date_month_year",
    "get_booking_tooltip",
    "is_budget_category",
    "load_trip_budget",
    "plan_trip_budget",
]
