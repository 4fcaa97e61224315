"""Data loading utilities for trip cost estimates."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Final

import numpy as np
import pandas as pd

from budget.models import ALLOCATION_ORDER, CategoryCosts, is_budget_category

__all__ = ["load_category_costs", "load_cost_items"]

logger = logging.getLogger(__name__)

_CACHE_SIZE: Final[int] = 8
_REQUIRED_COLUMNS: Final[tuple[str, ...]] = ("category", "estimated_cost")


def load_cost_items(csv_path: str | Path) -> pd.DataFrame:
    """Return validated cost line items from a trip CSV.

    The file needs ``category`` and ``estimated_cost`` columns; a ``notes``
    column is kept when present. Category names are matched
    case-insensitively.
    """

    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    df = pd.read_csv(path)
    missing_columns = [column for column in _REQUIRED_COLUMNS if column not in df.columns]
    if missing_columns:
        raise ValueError(f"Trip CSV is missing columns: {', '.join(missing_columns)}")

    df["category"] = df["category"].astype(str).str.strip().str.lower()
    unknown = sorted({value for value in df["category"] if not is_budget_category(value)})
    if unknown:
        raise ValueError(f"Unknown budget categories in {path.name}: {', '.join(unknown)}")

    df["estimated_cost"] = pd.to_numeric(df["estimated_cost"], errors="coerce")
    costs = df["estimated_cost"].to_numpy(dtype=float)
    if not np.isfinite(costs).all():
        raise ValueError(f"Estimated costs in {path.name} must be numeric.")
    if (costs < 0).any():
        raise ValueError(f"Estimated costs in {path.name} cannot be negative.")

    if "notes" in df.columns:
        df["notes"] = df["notes"].fillna("")
    return df


@lru_cache(maxsize=_CACHE_SIZE)
def load_category_costs(csv_path: str | Path) -> CategoryCosts:
    """Return per-category totals for the trip described by ``csv_path``.

    Several rows for the same category are summed. Every category needs at
    least one row, even if its cost is zero.
    """

    items = load_cost_items(csv_path)
    totals = items.groupby("category")["estimated_cost"].sum()

    missing = [category.value for category in ALLOCATION_ORDER if category.value not in totals.index]
    if missing:
        raise ValueError(f"Missing cost estimates for: {', '.join(missing)}")

    costs = CategoryCosts.from_mapping({key: float(value) for key, value in totals.items()})
    logger.info("Loaded %d cost items totalling %.2f from %s", len(items), costs.total, csv_path)
    return costs
