"""Sequential savings allocation and booking-readiness calculations.

Savings are allocated to trip categories in a fixed priority order
(flights, accommodations, transportation, activities, food, preparation).
A category only receives money after every category ahead of it is fully
funded, and each category gets an earliest booking date at which projected
savings will cover it without borrowing. Credit card points can offset the
flight cost at a fixed conversion rate.

All functions are pure. Anything date-dependent accepts a keyword-only
``today`` so results can be reproduced; when omitted the system clock is read.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Final

import pandas as pd

from budget.models import (
    ALLOCATION_ORDER,
    BudgetCategory,
    CategoryBudgetData,
    CategoryCosts,
    TripBudgetCalculation,
)

__all__ = [
    "POINTS_CONVERSION_RATE",
    "NO_SAVINGS_HORIZON_YEARS",
    "resolve_today",
    "add_months",
    "calculate_points_value",
    "calculate_flight_cost_after_points",
    "calculate_recommended_monthly_savings",
    "calculate_earliest_date",
    "calculate_months_until",
    "allocate_savings_sequentially",
    "calculate_trip_budget",
]


# 1.5 cents per point.
POINTS_CONVERSION_RATE: Final[float] = 0.015

NO_SAVINGS_HORIZON_YEARS: Final[int] = 10

# (exclusive upper cost bound, target months); anything above saves over 15 months.
_SAVINGS_TIERS: Final[tuple[tuple[float, int], ...]] = (
    (2000.0, 6),
    (5000.0, 9),
    (10000.0, 12),
)
_LARGE_TRIP_MONTHS: Final[int] = 15

# Keeps projected dates inside the range pandas timestamps can represent.
_MAX_PROJECTION_MONTHS: Final[int] = 200 * 12


def _system_today() -> pd.Timestamp:
    return pd.Timestamp.today()


def resolve_today(today: date | pd.Timestamp | None = None) -> pd.Timestamp:
    """Return ``today`` (or the current system date) normalised to midnight."""

    if today is None:
        return _system_today().normalize()
    return pd.Timestamp(today).normalize()


def add_months(start: date | pd.Timestamp, months: int) -> pd.Timestamp:
    """Advance ``start`` by calendar months, clamping to the end of short months."""

    return pd.Timestamp(start) + pd.DateOffset(months=int(months))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_points_value(points: float) -> int:
    """Return the dollar value of credit card points."""

    return _round_half_up(points * POINTS_CONVERSION_RATE)


def calculate_flight_cost_after_points(base_cost: float, points_to_use: float) -> float:
    return max(0.0, float(base_cost) - calculate_points_value(points_to_use))


def calculate_recommended_monthly_savings(total_cost: float, current_savings: float) -> int:
    """Recommend a monthly savings amount that reaches the trip total on time.

    Smaller trips aim for a shorter horizon: under $2,000 in 6 months, under
    $5,000 in 9, under $10,000 in 12 and anything larger in 15. The result is
    rounded up so following it never falls short of the goal.
    """

    if total_cost <= 0:
        return 0

    target_months = _LARGE_TRIP_MONTHS
    for upper_bound, months in _SAVINGS_TIERS:
        if total_cost < upper_bound:
            target_months = months
            break

    amount_to_save = max(0.0, total_cost - current_savings)
    return int(math.ceil(amount_to_save / target_months))


def calculate_earliest_date(
    target_amount: float,
    current_savings: float,
    previous_allocations: float,
    monthly_savings: float,
    *,
    today: date | pd.Timestamp | None = None,
) -> pd.Timestamp:
    """Return the date at which ``target_amount`` can be paid from savings.

    ``previous_allocations`` is the full cost of every higher-priority
    category; that money is reserved before this category sees any savings.
    Without a positive savings rate an unfunded category is pushed ten years
    out.
    """

    current_day = resolve_today(today)
    available_for_category = max(0.0, current_savings - previous_allocations)

    if available_for_category >= target_amount:
        return current_day

    if monthly_savings <= 0:
        return current_day + pd.DateOffset(years=NO_SAVINGS_HORIZON_YEARS)

    remaining_needed = target_amount - available_for_category
    months_needed = min(math.ceil(remaining_needed / monthly_savings), _MAX_PROJECTION_MONTHS)
    return add_months(current_day, months_needed)


def calculate_months_until(
    target_date: date | pd.Timestamp,
    *,
    today: date | pd.Timestamp | None = None,
) -> int:
    """Return whole months until ``target_date`` using 30-day months."""

    current_day = resolve_today(today)
    diff_days = (pd.Timestamp(target_date).normalize() - current_day).days
    return max(0, math.ceil(diff_days / 30))


def allocate_savings_sequentially(
    category_costs: CategoryCosts,
    current_savings: float,
    monthly_savings: float,
    *,
    today: date | pd.Timestamp | None = None,
) -> dict[BudgetCategory, CategoryBudgetData]:
    """Allocate savings across categories in ``ALLOCATION_ORDER``.

    The running remainder is reduced by each category's full cost rather than
    by what it actually received, so once one category is only partly funded
    every later category receives nothing.
    """

    current_day = resolve_today(today)
    result: dict[BudgetCategory, CategoryBudgetData] = {}

    remaining_savings = float(current_savings)
    previous_allocations = 0.0

    for category in ALLOCATION_ORDER:
        cost = category_costs[category]

        allocated_savings = min(remaining_savings, cost)
        savings_gap = max(0.0, cost - allocated_savings)

        earliest_date = calculate_earliest_date(
            cost,
            current_savings,
            previous_allocations,
            monthly_savings,
            today=current_day,
        )

        result[category] = CategoryBudgetData(
            estimated_cost=cost,
            allocated_savings=allocated_savings,
            savings_gap=savings_gap,
            is_funded=savings_gap == 0,
            earliest_booking_date=earliest_date,
            months_to_fund=calculate_months_until(earliest_date, today=current_day),
        )

        remaining_savings = max(0.0, remaining_savings - cost)
        previous_allocations += cost

    return result


def calculate_trip_budget(
    category_costs: CategoryCosts,
    current_savings: float,
    monthly_savings: float,
    points_to_use: float = 0,
    *,
    today: date | pd.Timestamp | None = None,
) -> TripBudgetCalculation:
    """Produce the complete budget picture for a trip.

    A ``monthly_savings`` of zero or less means "use the recommended rate";
    the recommendation is always reported, even when the caller's rate wins.
    """

    current_day = resolve_today(today)

    points_value = calculate_points_value(points_to_use)
    flight_cost_after_points = calculate_flight_cost_after_points(
        category_costs.flights,
        points_to_use,
    )
    adjusted_costs = category_costs.with_cost(BudgetCategory.FLIGHTS, flight_cost_after_points)

    total_cost_before_points = category_costs.total
    total_trip_cost = adjusted_costs.total

    recommended_monthly_savings = calculate_recommended_monthly_savings(
        total_trip_cost,
        current_savings,
    )
    effective_monthly_savings = (
        float(monthly_savings) if monthly_savings > 0 else float(recommended_monthly_savings)
    )

    categories = allocate_savings_sequentially(
        adjusted_costs,
        current_savings,
        effective_monthly_savings,
        today=current_day,
    )

    remaining_to_save = max(0.0, total_trip_cost - current_savings)
    if total_trip_cost > 0:
        savings_progress = min(100.0, current_savings / total_trip_cost * 100)
    else:
        savings_progress = 0.0

    if effective_monthly_savings > 0:
        months_to_fully_funded = math.ceil(remaining_to_save / effective_monthly_savings)
    else:
        months_to_fully_funded = 0

    return TripBudgetCalculation(
        total_trip_cost=total_trip_cost,
        total_cost_before_points=total_cost_before_points,
        points_value=points_value,
        current_savings=float(current_savings),
        monthly_savings=effective_monthly_savings,
        remaining_to_save=remaining_to_save,
        savings_progress=savings_progress,
        months_to_fully_funded=months_to_fully_funded,
        earliest_travel_date=add_months(
            current_day,
            min(months_to_fully_funded, _MAX_PROJECTION_MONTHS),
        ),
        categories=categories,
        recommended_monthly_savings=recommended_monthly_savings,
    )
