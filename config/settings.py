"""Centralised configuration handling for the trip savings planner."""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TRIP_PATH = Path(__file__).resolve().parent.parent / "data" / "sample_trip.csv"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Planner settings sourced from env vars and Streamlit secrets."""

    sample_trip_path: Path = DEFAULT_TRIP_PATH
    current_savings: float = 0.0
    monthly_savings: float = 0.0
    points_balance: int = 0
    as_of: date | None = None

    model_config = SettingsConfigDict(env_prefix="TRIPSAVER_", extra="ignore")

    @property
    def plan_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.as_of is not None:
            kwargs["today"] = self.as_of
        return kwargs


@lru_cache
def get_settings() -> Settings:
    """Load and cache planner settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("planner")
    if secrets_section:
        overrides = {
            "sample_trip_path": secrets_section.get("sample_trip_path"),
            "current_savings": secrets_section.get("current_savings"),
            "monthly_savings": secrets_section.get("monthly_savings"),
            "points_balance": secrets_section.get("points_balance"),
            "as_of": secrets_section.get("as_of"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
