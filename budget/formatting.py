"""Formatting helpers for trip budget displays."""

from __future__ import annotations

import math
from datetime import date

import pandas as pd

from budget.calculations import resolve_today
from budget.models import BudgetCategory, category_label

__all__ = [
    "booking_button_label",
    "can_book_now",
    "format_currency",
    "format_date_month_year",
    "get_booking_tooltip",
]


def format_currency(amount: float) -> str:
    """Format ``amount`` as whole dollars, e.g. ``$1,234``."""

    rounded = int(math.floor(amount + 0.5))
    return f"${rounded:,}"


def format_date_month_year(value: date | pd.Timestamp) -> str:
    """Format a date as ``March 2025``."""

    return pd.Timestamp(value).strftime("%B %Y")


def can_book_now(
    earliest_date: date | pd.Timestamp,
    *,
    today: date | pd.Timestamp | None = None,
) -> bool:
    return pd.Timestamp(earliest_date).normalize() <= resolve_today(today)


def get_booking_tooltip(
    category: str,
    is_funded: bool,
    months_to_fund: int,
    earliest_date: date | pd.Timestamp,
) -> str:
    """Explain why a booking button is unlocked or how long until it will be."""

    name = category.lower()
    if is_funded:
        return f"You've saved enough for {name}! Book now to lock in prices."

    if months_to_fund == 1:
        return f"Just 1 more month of saving and you can book {name} debt-free!"

    if months_to_fund <= 3:
        return f"{months_to_fund} months until you can book {name} without going into debt."

    return (
        f"Save for {months_to_fund} more months to book {name} debt-free. "
        f"Target date: {format_date_month_year(earliest_date)}."
    )


def booking_button_label(category: BudgetCategory | str) -> str:
    return f"Book {category_label(category)}"
