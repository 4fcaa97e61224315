"""Save & Book page: savings progress, alerts and per-category booking gates."""

from __future__ import annotations

import streamlit as st

from analytics import build_booking_gates, build_booking_steps, build_budget_alert
from app.layout import card
from budget import TripBudget, format_currency, format_date_month_year


def _render_summary_card(trip_budget: TripBudget) -> None:
    calculation = trip_budget.calculation
    metric_cols = st.columns((1, 1, 1, 1))
    metric_cols[0].metric("Total estimated cost", format_currency(calculation.total_trip_cost))
    metric_cols[1].metric("Amount saved", format_currency(calculation.current_savings))
    metric_cols[2].metric("Still to save", format_currency(calculation.remaining_to_save))
    metric_cols[3].metric("Monthly savings", format_currency(calculation.monthly_savings))

    st.progress(trip_budget.display_progress / 100)
    st.caption(f"{trip_budget.display_progress:.0f}% saved")

    if trip_budget.points_value:
        st.caption(
            f"Points cover {format_currency(trip_budget.points_value)} of flights "
            f"(before points: {format_currency(calculation.total_cost_before_points)})."
        )

    if trip_budget.is_fully_funded:
        st.success("Your whole trip is funded. You can travel debt-free today!")
    else:
        st.caption(
            f"Earliest debt-free travel: {format_date_month_year(calculation.earliest_travel_date)} "
            f"({calculation.months_to_fully_funded} months). "
            f"Recommended monthly savings: {format_currency(calculation.recommended_monthly_savings)}."
        )


def _render_alert(trip_budget: TripBudget) -> None:
    calculation = trip_budget.calculation
    alert = build_budget_alert(calculation.total_trip_cost, calculation.current_savings)
    if alert is None:
        return

    if alert["status"] == "over_budget":
        st.error(f"**{alert['title']}** {alert['message']}")
    elif alert["status"] == "near_limit":
        st.warning(f"**{alert['title']}** {alert['message']}")
    else:
        st.success(f"**{alert['title']}** {alert['message']}")


def _render_steps(trip_budget: TripBudget) -> None:
    markers = {"completed": "✔", "current": "➜", "upcoming": "○"}
    items = "".join(
        f"<li class='tp-step is-{step['status']}'>{markers[step['status']]} {step['label']}</li>"
        for step in build_booking_steps(trip_budget.calculation)
    )
    st.markdown(f"<ul>{items}</ul>", unsafe_allow_html=True)


def _render_booking_gates(trip_budget: TripBudget) -> None:
    for gate in build_booking_gates(trip_budget):
        data = trip_budget.category(gate["category"])
        cols = st.columns((2, 1, 1, 1.4))
        cols[0].markdown(f"**{gate['label']}**")
        cols[1].caption(f"Cost {format_currency(data.estimated_cost)}")
        cols[2].caption(f"Saved {format_currency(data.allocated_savings)}")
        cols[3].button(
            gate["button_label"] if not gate["is_locked"] else f"🔒 {gate['button_label']}",
            key=f"book_{gate['category']}",
            disabled=gate["is_locked"],
            help=gate["tooltip"],
            use_container_width=True,
        )


def render_page(trip_budget: TripBudget) -> None:
    """Render the Save & Book page."""

    st.title("Save & Book")
    st.caption("Track your savings and book as you reach each milestone.")

    with card("Your trip budget", suffix="Debt-free"):
        _render_summary_card(trip_budget)
        _render_alert(trip_budget)

    left, right = st.columns([1, 2], gap="medium")
    with left:
        with card("Booking order"):
            _render_steps(trip_budget)
    with right:
        with card("Book each category", suffix="Unlocks when funded"):
            _render_booking_gates(trip_budget)


__all__ = ["render_page"]
