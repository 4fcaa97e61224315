"""Booking gates and booking-step progress derived from a trip budget."""

from __future__ import annotations

from typing import Literal, Optional, TypedDict

from budget.formatting import booking_button_label, format_date_month_year
from budget.models import ALLOCATION_ORDER, BudgetCategory, TripBudgetCalculation, category_label
from budget.service import TripBudget

__all__ = [
    "BookingGate",
    "BookingStep",
    "build_booking_gates",
    "build_booking_steps",
    "next_category_to_fund",
]

StepStatus = Literal["completed", "current", "upcoming"]


class BookingGate(TypedDict):
    """Booking button state for one category."""

    category: str
    label: str
    button_label: str
    is_locked: bool
    tooltip: str
    earliest_booking_label: str
    months_to_fund: int


class BookingStep(TypedDict):
    category: str
    label: str
    status: StepStatus


def build_booking_gates(trip_budget: TripBudget) -> list[BookingGate]:
    """Return one booking gate per category in allocation order."""

    gates: list[BookingGate] = []
    for category in ALLOCATION_ORDER:
        data = trip_budget.category(category)
        gates.append(
            {
                "category": category.value,
                "label": category_label(category),
                "button_label": booking_button_label(category),
                "is_locked": not trip_budget.can_book_category(category),
                "tooltip": trip_budget.tooltip(category),
                "earliest_booking_label": format_date_month_year(data.earliest_booking_date),
                "months_to_fund": data.months_to_fund,
            }
        )
    return gates


def next_category_to_fund(calculation: TripBudgetCalculation) -> Optional[BudgetCategory]:
    """Return the first category in allocation order that is not yet funded."""

    for category in ALLOCATION_ORDER:
        if not calculation.categories[category].is_funded:
            return category
    return None


def build_booking_steps(calculation: TripBudgetCalculation) -> list[BookingStep]:
    """Mark funded categories completed, the next one current, the rest upcoming."""

    current = next_category_to_fund(calculation)
    reached_current = False

    steps: list[BookingStep] = []
    for category in ALLOCATION_ORDER:
        if category == current:
            status: StepStatus = "current"
            reached_current = True
        elif reached_current:
            status = "upcoming"
        else:
            status = "completed"
        steps.append({"category": category.value, "label": category_label(category), "status": status})
    return steps
