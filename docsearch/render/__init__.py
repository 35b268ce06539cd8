"""Terminal rendering for the search prompt and result panel."""

from .screen import (
    CLEAR_SCREEN,
    PLACEHOLDER_TEXT,
    display_width,
    fit_width,
    panel_lines,
    render_screen,
    result_rows_for_height,
    status_text,
)

__all__ = [
    "CLEAR_SCREEN",
    "PLACEHOLDER_TEXT",
    "display_width",
    "fit_width",
    "panel_lines",
    "render_screen",
    "result_rows_for_height",
    "status_text",
]
