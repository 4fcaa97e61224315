from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from budget.formatting import (
    booking_button_label,
    can_book_now,
    format_currency,
    format_date_month_year,
    get_booking_tooltip,
)
from budget.models import (
    BudgetCategory,
    CategoryCosts,
    DEFAULT_CATEGORY_COSTS,
    category_label,
    is_budget_category,
)

TODAY = pd.Timestamp("2025-01-15")


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(1234.4, "$1,234"), (1234.5, "$1,235"), (0, "$0"), (999999.6, "$1,000,000"), (12, "$12")],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_date_month_year():
    assert format_date_month_year(pd.Timestamp("2025-03-09")) == "March 2025"


def test_can_book_now_ignores_time_of_day():
    assert can_book_now(pd.Timestamp("2025-01-15 23:59"), today=TODAY)
    assert can_book_now(pd.Timestamp("2024-06-01"), today=TODAY)
    assert not can_book_now(pd.Timestamp("2025-01-16"), today=TODAY)


def test_booking_tooltip_copy():
    target = pd.Timestamp("2025-09-15")

    assert (
        get_booking_tooltip("Flights", True, 0, TODAY)
        == "You've saved enough for flights! Book now to lock in prices."
    )
    assert (
        get_booking_tooltip("Accommodations", False, 1, target)
        == "Just 1 more month of saving and you can book accommodations debt-free!"
    )
    assert (
        get_booking_tooltip("Food & Dining", False, 3, target)
        == "3 months until you can book food & dining without going into debt."
    )
    assert (
        get_booking_tooltip("Trip Preparation", False, 8, target)
        == "Save for 8 more months to book trip preparation debt-free. Target date: September 2025."
    )


def test_category_labels_and_membership():
    assert category_label(BudgetCategory.FOOD) == "Food & Dining"
    assert category_label("preparation") == "Trip Preparation"
    assert category_label("souvenirs") == "souvenirs"
    assert is_budget_category("flights")
    assert not is_budget_category("housing")
    assert booking_button_label("accommodations") == "Book Accommodations"


def test_category_costs_from_mapping_requires_every_category():
    with pytest.raises(ValueError, match="Missing cost estimates for: food, preparation"):
        CategoryCosts.from_mapping(
            {"flights": 1, "accommodations": 1, "transportation": 1, "activities": 1}
        )

    with pytest.raises(ValueError, match="Unknown budget category"):
        CategoryCosts.from_mapping({"housing": 1})


def test_category_costs_lookup_and_defaults():
    costs = DEFAULT_CATEGORY_COSTS.with_cost(BudgetCategory.FLIGHTS, 900)

    assert costs["flights"] == pytest.approx(900.0)
    assert costs[BudgetCategory.FOOD] == 0.0
    assert costs.total == pytest.approx(900.0)
    assert DEFAULT_CATEGORY_COSTS.total == 0.0
