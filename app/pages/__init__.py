"""Page modules for the trip savings Streamlit application."""

from .save_book import render_page as render_save_book_page
from .timeline import render_page as render_timeline_page

__all__ = [
    "render_save_book_page",
    "render_timeline_page",
]
