from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from budget.models import CategoryCosts


@pytest.fixture()
def family_trip_costs() -> CategoryCosts:
    """Seven-day family trip used across the allocation scenarios ($2,800 total)."""

    return CategoryCosts(
        flights=1000.0,
        accommodations=800.0,
        transportation=200.0,
        activities=300.0,
        food=400.0,
        preparation=100.0,
    )
