"""Savings projections and funding milestones for trip budget charts."""

from __future__ import annotations

from typing import Final

import numpy as np
import pandas as pd

from budget.calculations import NO_SAVINGS_HORIZON_YEARS, add_months
from budget.models import ALLOCATION_ORDER, TripBudgetCalculation, category_label
from budget.service import TripBudget

__all__ = ["MAX_TIMELINE_MONTHS", "build_funding_milestones", "build_savings_timeline"]


MAX_TIMELINE_MONTHS: Final[int] = NO_SAVINGS_HORIZON_YEARS * 12


def build_savings_timeline(trip_budget: TripBudget) -> pd.DataFrame:
    """Project the savings balance month by month until the trip is funded.

    The frame always covers today plus at least one future month and never
    runs past the ten-year horizon.
    """

    calculation = trip_budget.calculation
    horizon = min(max(calculation.months_to_fully_funded, 1), MAX_TIMELINE_MONTHS)

    offsets = np.arange(horizon + 1)
    projected = calculation.current_savings + offsets * calculation.monthly_savings
    total_cost = calculation.total_trip_cost
    if total_cost > 0:
        funded_share = np.clip(projected / total_cost, 0.0, 1.0)
    else:
        funded_share = np.ones_like(projected, dtype=float)

    return pd.DataFrame(
        {
            "Month": [add_months(trip_budget.today, int(offset)) for offset in offsets],
            "MonthsFromToday": offsets,
            "ProjectedSavings": projected.astype(float),
            "TripCost": float(total_cost),
            "FundedShare": funded_share,
        }
    )


def build_funding_milestones(calculation: TripBudgetCalculation) -> pd.DataFrame:
    """Return per-category funding details in allocation order."""

    records: list[dict[str, object]] = []
    for category in ALLOCATION_ORDER:
        data = calculation.categories[category]
        records.append(
            {
                "Category": category.value,
                "Label": category_label(category),
                "EstimatedCost": data.estimated_cost,
                "AllocatedSavings": data.allocated_savings,
                "SavingsGap": data.savings_gap,
                "IsFunded": data.is_funded,
                "EarliestBookingDate": data.earliest_booking_date,
                "MonthsToFund": data.months_to_fund,
            }
        )

    milestones = pd.DataFrame(records)
    milestones["CumulativeCost"] = np.cumsum(milestones["EstimatedCost"].to_numpy(dtype=float))
    return milestones
