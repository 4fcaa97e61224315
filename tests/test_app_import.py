import importlib
import sys
from datetime import date
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import DEFAULT_TRIP_PATH, Settings, get_settings


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_settings_defaults(monkeypatch):
    for name in ("SAMPLE_TRIP_PATH", "CURRENT_SAVINGS", "MONTHLY_SAVINGS", "POINTS_BALANCE", "AS_OF"):
        monkeypatch.delenv(f"TRIPSAVER_{name}", raising=False)

    settings = get_settings()

    assert settings.sample_trip_path == DEFAULT_TRIP_PATH
    assert settings.monthly_savings == 0.0
    assert settings.plan_kwargs == {}


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TRIPSAVER_CURRENT_SAVINGS", "1200")
    monkeypatch.setenv("TRIPSAVER_AS_OF", "2025-01-15")

    settings = get_settings()

    assert settings.current_savings == pytest.approx(1200.0)
    assert settings.plan_kwargs == {"today": date(2025, 1, 15)}


def test_streamlit_secrets_override_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TRIPSAVER_MONTHLY_SAVINGS", "100")
    trip_path = tmp_path / "trip.csv"
    monkeypatch.setattr(
        st,
        "secrets",
        {"planner": {"monthly_savings": 350, "sample_trip_path": str(trip_path)}},
        raising=False,
    )

    settings = get_settings()

    assert isinstance(settings, Settings)
    assert settings.monthly_savings == pytest.approx(350.0)
    assert settings.sample_trip_path == Path(trip_path)
