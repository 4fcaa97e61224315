"""Streamlit dashboard for debt-free trip savings."""

from .main import main

__all__ = ["main"]
