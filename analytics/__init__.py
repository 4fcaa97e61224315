"""Analytics helpers layered over the trip budget calculation."""

from analytics.alerts import BudgetAlert, build_budget_alert
from analytics.booking import (
    BookingGate,
    BookingStep,
    build_booking_gates,
    build_booking_steps,
    next_category_to_fund,
)
from analytics.timeline import build_funding_milestones, build_savings_timeline

__all__ = [
    "BudgetAlert",
    "build_budget_alert",
    "BookingGate",
    "BookingStep",
    "build_booking_gates",
    "build_booking_steps",
    "next_category_to_fund",
    "build_funding_milestones",
    "build_savings_timeline",
]
