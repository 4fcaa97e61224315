"""Tests for the trip budget service and CSV trip loading."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from budget.data_loader import load_category_costs, load_cost_items
from budget.models import BudgetCategory
from budget.service import load_trip_budget, plan_trip_budget

TODAY = pd.Timestamp("2025-01-15")


@pytest.fixture()
def trip_csv(tmp_path) -> Path:
    frame = pd.DataFrame(
        [
            {"category": "flights", "estimated_cost": 1000, "notes": "Roundtrip"},
            {"category": "Accommodations", "estimated_cost": 650, "notes": None},
            {"category": "accommodations", "estimated_cost": 150, "notes": "Airport hotel"},
            {"category": "transportation", "estimated_cost": 200, "notes": ""},
            {"category": "activities", "estimated_cost": 300, "notes": ""},
            {"category": "food", "estimated_cost": 400, "notes": ""},
            {"category": "preparation", "estimated_cost": 100, "notes": ""},
        ]
    )
    path = tmp_path / "trip.csv"
    frame.to_csv(path, index=False)
    return path


def test_plan_trip_budget_helpers(family_trip_costs):
    trip_budget = plan_trip_budget(family_trip_costs, 1200, 300, today=TODAY)

    assert trip_budget.can_book_category(BudgetCategory.FLIGHTS)
    assert not trip_budget.can_book_category("accommodations")
    assert trip_budget.tooltip("flights") == "You've saved enough for flights! Book now to lock in prices."
    assert trip_budget.tooltip("accommodations") == (
        "2 months until you can book accommodations without going into debt."
    )
    assert trip_budget.label("food") == "Food & Dining"
    assert trip_budget.has_savings
    assert not trip_budget.is_fully_funded
    assert trip_budget.display_progress == pytest.approx(1200 / 2800 * 100)


def test_points_only_apply_when_enabled(family_trip_costs):
    without = plan_trip_budget(family_trip_costs, 0, 300, points_to_use=50000, today=TODAY)
    with_points = plan_trip_budget(
        family_trip_costs, 0, 300, points_to_use=50000, use_points=True, today=TODAY
    )

    assert without.points_value == 0
    assert without.calculation.total_trip_cost == pytest.approx(2800.0)
    assert with_points.points_value == 750
    assert with_points.calculation.total_trip_cost == pytest.approx(2050.0)


def test_fully_funded_trip_unlocks_everything(family_trip_costs):
    trip_budget = plan_trip_budget(family_trip_costs, 5000, 0, today=TODAY)

    assert trip_budget.is_fully_funded
    assert trip_budget.display_progress == pytest.approx(100.0)
    assert all(trip_budget.can_book_category(category) for category in BudgetCategory)


def test_no_savings_reports_has_savings_false(family_trip_costs):
    trip_budget = plan_trip_budget(family_trip_costs, 0, 0, today=TODAY)

    assert not trip_budget.has_savings
    assert trip_budget.calculation.monthly_savings == pytest.approx(312.0)


def test_load_category_costs_sums_line_items(trip_csv):
    costs = load_category_costs(trip_csv)

    assert costs.accommodations == pytest.approx(800.0)
    assert costs.total == pytest.approx(2800.0)

    items = load_cost_items(trip_csv)
    assert len(items) == 7
    assert (items["notes"] == "").sum() == 5


def test_load_trip_budget_from_csv(trip_csv):
    trip_budget = load_trip_budget(trip_csv, 1200, 300, today=TODAY)

    assert trip_budget.calculation.months_to_fully_funded == 6
    assert trip_budget.category("flights").is_funded


def test_load_category_costs_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_category_costs(tmp_path / "nope.csv")


@pytest.mark.parametrize(
    ("rows", "message"),
    [
        ([{"category": "housing", "estimated_cost": 10}], "Unknown budget categories"),
        ([{"category": "flights", "estimated_cost": -5}], "cannot be negative"),
        ([{"category": "flights", "estimated_cost": "lots"}], "must be numeric"),
        ([{"category": "flights", "estimated_cost": 10}], "Missing cost estimates for: accommodations"),
    ],
)
def test_load_category_costs_rejects_bad_rows(tmp_path, rows, message):
    path = tmp_path / "bad.csv"
    pd.DataFrame(rows).to_csv(path, index=False)

    with pytest.raises(ValueError, match=message):
        load_category_costs(path)


def test_load_category_costs_requires_columns(tmp_path):
    path = tmp_path / "columns.csv"
    pd.DataFrame([{"category": "flights"}]).to_csv(path, index=False)

    with pytest.raises(ValueError, match="missing columns: estimated_cost"):
        load_category_costs(path)


def test_bundled_sample_trip_is_complete():
    costs = load_category_costs(ROOT / "data" / "sample_trip.csv")

    assert costs.total == pytest.approx(2800.0)
