"""Shared layout primitives for the trip savings Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable

import streamlit as st

from budget.models import ALLOCATION_ORDER, CategoryCosts, category_label
from config import Settings


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    enabled: bool = True


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("save-book", "Save & Book", True),
    NavigationLink("timeline", "Timeline", True),
    NavigationLink("itinerary", "Itinerary", False),
)


@dataclass(frozen=True)
class PlannerInputs:
    category_costs: CategoryCosts
    current_savings: float
    monthly_savings: float
    points_to_use: int
    use_points: bool


def inject_css() -> None:
    """Inject global CSS tokens and card styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F4F6FB;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .tp-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .tp-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #0B3FD6;
          }

          .tp-nav__links {
            display: flex;
            align-items: center;
            gap: 1.8rem;
          }

          .tp-nav__link,
          .tp-nav__link:visited {
            font-weight: 600;
            color: #5C6478;
            text-decoration: none;
          }

          .tp-nav__link.is-active {
            color: #1D4ED8;
            border-bottom: 3px solid #1D4ED8;
          }

          .tp-nav__link.is-disabled {
            color: #B7C1D9;
            pointer-events: none;
          }

          .tp-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .tp-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
          }

          .tp-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #111827;
          }

          .tp-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
          }

          .tp-step.is-completed { color: #15803D; }
          .tp-step.is-current { color: #1D4ED8; font-weight: 700; }
          .tp-step.is-upcoming { color: #94A3B8; }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable card."""

    chip_html = f'<span class="tp-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="tp-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="tp-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_navbar(active_page: str) -> None:
    """Render the navigation bar with active state."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        css_class = "tp-nav__link"
        if link.slug == active_page:
            css_class += " is-active"

        if link.enabled:
            link_markup.append(
                f'<a class="{css_class}" href="?page={link.slug}" target="_self">{link.label}</a>'
            )
        else:
            link_markup.append(f'<span class="{css_class} is-disabled">{link.label}</span>')

    st.markdown(
        f"""
        <nav class="tp-nav">
            <div class="tp-nav__brand">TripPenguin</div>
            <div class="tp-nav__links">{''.join(link_markup)}</div>
        </nav>
        """,
        unsafe_allow_html=True,
    )


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    default_page = st.session_state.get("active_page", "save-book")
    raw_page = st.query_params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else "save-book"
    st.session_state["active_page"] = page
    return page


def render_sidebar_inputs(default_costs: CategoryCosts, settings: Settings) -> PlannerInputs:
    """Render the cost and savings inputs and return the current values."""

    with st.sidebar:
        st.markdown("### Cost estimates")
        costs: dict[str, float] = {}
        for category in ALLOCATION_ORDER:
            costs[category.value] = st.number_input(
                category_label(category),
                min_value=0.0,
                value=float(default_costs[category]),
                step=50.0,
                key=f"cost_{category.value}",
            )

        st.markdown("---")
        st.markdown("### Savings")
        current_savings = st.number_input(
            "Current savings",
            min_value=0.0,
            value=float(settings.current_savings),
            step=100.0,
        )
        monthly_savings = st.number_input(
            "Monthly savings (0 uses the recommendation)",
            min_value=0.0,
            value=float(settings.monthly_savings),
            step=25.0,
        )

        st.markdown("---")
        use_points = st.toggle("Use credit card points on flights", value=settings.points_balance > 0)
        points_to_use = st.number_input(
            "Points to use",
            min_value=0,
            value=int(settings.points_balance),
            step=1000,
            disabled=not use_points,
        )

    return PlannerInputs(
        category_costs=CategoryCosts.from_mapping(costs),
        current_savings=float(current_savings),
        monthly_savings=float(monthly_savings),
        points_to_use=int(points_to_use),
        use_points=bool(use_points),
    )


__all__ = [
    "NavigationLink",
    "NAV_LINKS",
    "PlannerInputs",
    "card",
    "determine_active_page",
    "inject_css",
    "render_navbar",
    "render_sidebar_inputs",
]
