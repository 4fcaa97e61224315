"""Visualization utilities for trip savings dashboards."""

from .charts import build_category_funding_chart, build_savings_timeline_chart
from .theme import theme_tokens

__all__ = [
    "build_category_funding_chart",
    "build_savings_timeline_chart",
    "theme_tokens",
]
