"""TripPenguin Save & Book dashboard."""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

from app.layout import (
    NAV_LINKS,
    determine_active_page,
    inject_css,
    render_navbar,
    render_sidebar_inputs,
)
from app.pages import render_save_book_page, render_timeline_page
from budget import DEFAULT_CATEGORY_COSTS, CategoryCosts, plan_trip_budget
from budget.data_loader import load_category_costs
from config import get_settings

logger = logging.getLogger(__name__)


def _load_default_costs(trip_path: Path) -> CategoryCosts:
    """Return starting estimates from the configured trip CSV, or all zeros."""

    try:
        return load_category_costs(trip_path)
    except FileNotFoundError:
        st.info("No saved trip estimates found. Enter your costs in the sidebar.")
    except ValueError as exc:
        logger.warning("Ignoring invalid trip file %s: %s", trip_path, exc)
        st.error(f"Could not read trip estimates: {exc}")
    return DEFAULT_CATEGORY_COSTS


def main() -> None:
    """Application entrypoint for the Save & Book dashboard."""

    st.set_page_config(
        page_title="TripPenguin | Save & Book",
        page_icon="🐧",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    inject_css()
    settings = get_settings()
    valid_pages = [link.slug for link in NAV_LINKS if link.enabled]
    active_page = determine_active_page(valid_pages)
    render_navbar(active_page)

    default_costs = _load_default_costs(settings.sample_trip_path)
    inputs = render_sidebar_inputs(default_costs, settings)

    trip_budget = plan_trip_budget(
        inputs.category_costs,
        inputs.current_savings,
        inputs.monthly_savings,
        inputs.points_to_use,
        inputs.use_points,
        **settings.plan_kwargs,
    )

    if active_page == "timeline":
        render_timeline_page(trip_budget)
    else:
        render_save_book_page(trip_budget)


if __name__ == "__main__":
    main()
