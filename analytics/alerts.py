"""Budget alert classification for estimated trip costs against savings."""

from __future__ import annotations

from typing import Final, Literal, Optional, TypedDict

__all__ = ["BudgetAlert", "NEAR_LIMIT_PERCENT", "build_budget_alert"]


NEAR_LIMIT_PERCENT: Final[float] = 90.0

AlertStatus = Literal["over_budget", "near_limit", "on_track"]


class BudgetAlert(TypedDict):
    status: AlertStatus
    title: str
    message: str
    percentage_used: float


def build_budget_alert(total_estimated: float, total_savings: float) -> Optional[BudgetAlert]:
    """Compare estimated costs with savings; ``None`` when nothing is saved yet."""

    if total_savings == 0:
        return None

    percentage_used = (total_estimated / total_savings) * 100 if total_savings > 0 else 0.0

    if total_estimated > total_savings:
        overage = total_estimated - total_savings
        return {
            "status": "over_budget",
            "title": "Over Budget!",
            "message": (
                f"You're ${overage:.2f} over budget. Consider reducing costs in flights, "
                "housing, or fun activities to get back on track."
            ),
            "percentage_used": percentage_used,
        }

    if percentage_used >= NEAR_LIMIT_PERCENT:
        return {
            "status": "near_limit",
            "title": "Approaching Budget Limit",
            "message": (
                f"You've used {percentage_used:.0f}% of your budget. "
                "Keep an eye on remaining costs to stay within limits."
            ),
            "percentage_used": percentage_used,
        }

    return {
        "status": "on_track",
        "title": "On Track!",
        "message": (
            f"Great job! You're using {percentage_used:.0f}% of your budget "
            f"and have ${total_savings - total_estimated:.2f} remaining."
        ),
        "percentage_used": percentage_used,
    }
