"""Browser-side widgets for the Streamlit page."""

from .components import copy_button_html, open_tabs_button_html

__all__ = ["copy_button_html", "open_tabs_button_html"]
