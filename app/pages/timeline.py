"""Timeline page: projected savings and when each category can be booked."""

from __future__ import annotations

import streamlit as st

from analytics import build_funding_milestones, build_savings_timeline
from app.layout import card
from budget import TripBudget, format_currency
from visualization import build_category_funding_chart, build_savings_timeline_chart


def render_page(trip_budget: TripBudget) -> None:
    """Render the savings timeline page."""

    st.title("Savings timeline")
    st.caption("Savings are reserved for each category in booking order.")

    timeline_df = build_savings_timeline(trip_budget)
    milestones_df = build_funding_milestones(trip_budget.calculation)

    with card("Projected savings", suffix=f"{format_currency(trip_budget.calculation.monthly_savings)}/month"):
        chart = build_savings_timeline_chart(timeline_df, milestones_df)
        st.plotly_chart(chart, use_container_width=True)

    with card("Funding by category"):
        st.plotly_chart(build_category_funding_chart(milestones_df), use_container_width=True)

        table = milestones_df[["Label", "EstimatedCost", "AllocatedSavings", "SavingsGap", "MonthsToFund"]].copy()
        table["Book from"] = milestones_df["EarliestBookingDate"].dt.strftime("%B %Y")
        st.dataframe(table, hide_index=True, use_container_width=True)


__all__ = ["render_page"]
