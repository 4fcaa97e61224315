"""Plotly chart builders for the trip savings dashboard."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_savings_timeline_chart",
    "build_category_funding_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_savings_timeline_chart(
    timeline_df: pd.DataFrame,
    milestones_df: pd.DataFrame | None = None,
) -> go.Figure:
    """Render projected savings against the trip cost and category booking dates."""

    if timeline_df.empty:
        return _empty_plotly_figure("Add cost estimates to see your savings timeline.")

    hover_template = f"%{{x|{TOKENS.month_format}}}<br>$%{{y:,.0f}}<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=timeline_df["Month"],
            y=timeline_df["ProjectedSavings"],
            mode="lines+markers",
            name="Projected savings",
            line=dict(color=TOKENS.brand_blue, width=3, shape="spline", smoothing=0.3),
            marker=dict(size=7, color=TOKENS.brand_blue, line=dict(color=TOKENS.neutral_white, width=1.5)),
            fill="tozeroy",
            fillcolor=TOKENS.brand_blue_soft,
            hovertemplate=hover_template,
        )
    )

    fig.add_trace(
        go.Scatter(
            x=timeline_df["Month"],
            y=timeline_df["TripCost"],
            mode="lines",
            name="Trip cost",
            line=dict(color=TOKENS.accent_orange, width=2, dash="dash"),
            hovertemplate=hover_template,
        )
    )

    if milestones_df is not None and not milestones_df.empty:
        fig.add_trace(
            go.Scatter(
                x=milestones_df["EarliestBookingDate"],
                y=milestones_df["CumulativeCost"],
                mode="markers+text",
                name="Book by",
                text=milestones_df["Label"],
                textposition="top center",
                marker=dict(
                    size=10,
                    color=[
                        TOKENS.funded_green if funded else TOKENS.brand_blue_focus
                        for funded in milestones_df["IsFunded"]
                    ],
                    line=dict(color=TOKENS.neutral_white, width=2),
                ),
                hovertemplate="%{text}<br>%{x|%B %Y}<br>$%{y:,.0f} reserved<extra></extra>",
            )
        )

    fig.update_layout(
        title="",
        xaxis_title="Month",
        yaxis_title="Savings",
        margin=dict(l=0, r=0, t=20, b=0),
        hovermode="closest",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(showgrid=False, tickformat=TOKENS.month_format),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.neutral_background, zeroline=False, tickprefix="$"),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )

    return fig


def build_category_funding_chart(milestones_df: pd.DataFrame) -> go.Figure:
    """Render a stacked horizontal bar of saved versus still-needed per category."""

    if milestones_df.empty:
        return _empty_plotly_figure("No categories to show yet.")

    # Allocation order top to bottom.
    data = milestones_df.iloc[::-1]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=data["AllocatedSavings"],
            y=data["Label"],
            orientation="h",
            name="Saved",
            marker=dict(color=TOKENS.funded_green),
            hovertemplate="%{y}<br>Saved: $%{x:,.0f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Bar(
            x=data["SavingsGap"],
            y=data["Label"],
            orientation="h",
            name="Still needed",
            marker=dict(color=TOKENS.gap_grey),
            hovertemplate="%{y}<br>Still needed: $%{x:,.0f}<extra></extra>",
        )
    )

    fig.update_layout(
        barmode="stack",
        margin=dict(l=0, r=10, t=20, b=0),
        xaxis=dict(title="Amount ($)", showgrid=False, zeroline=False),
        yaxis=dict(title="", automargin=True),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        bargap=0.35,
        height=280,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )

    return fig
