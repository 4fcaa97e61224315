"""Shared Plotly theme tokens for trip savings visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    month_format: str = "%b %Y"
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    grid_color: str = "#EEF2FF"
    brand_blue: str = "#2563EB"
    brand_blue_soft: str = "rgba(37, 99, 235, 0.12)"
    brand_blue_focus: str = "#1D4ED8"
    accent_orange: str = "#F97316"
    funded_green: str = "#22C55E"
    gap_grey: str = "#CBD5E1"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    neutral_background: str = "rgba(148, 163, 184, 0.25)"


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens.

    The tokens are frozen to keep styling consistent between charts and other
    Plotly artefacts.
    """

    return _TOKENS
