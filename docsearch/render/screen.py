"""Compose the search screen from session state and panel rows.

Rows are sized on plain text first and styled afterwards, so ANSI codes
never count toward the terminal width.
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from ..panel import LinkCell, ResultPanel, ResultRow
from ..ui_theme import UITheme

if TYPE_CHECKING:
    from ..runtime.session import SearchSession

CLEAR_SCREEN = "\033[H\033[2J"
PLACEHOLDER_TEXT = "type a symbol pattern"
PROMPT = "> "
HEADER_ROWS = 2


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def display_width(text: str) -> int:
    return sum(_char_width(ch) for ch in text)


def fit_width(text: str, width: int) -> str:
    """Truncate ``text`` to at most ``width`` display columns."""
    out: list[str] = []
    used = 0
    for ch in text:
        ch_width = _char_width(ch)
        if used + ch_width > width:
            break
        out.append(ch)
        used += ch_width
    return "".join(out)


def result_rows_for_height(height: int) -> int:
    """Return how many panel rows fit below the prompt and status lines."""
    return max(1, height - HEADER_ROWS)


def status_text(session: SearchSession) -> str:
    widget = session.widget
    if not widget.panel.visible:
        return f"{len(widget.index)} symbols"
    if widget.last_error is not None:
        return f"invalid pattern: {widget.last_error.reason}"
    count = len(widget.last_result)
    return f"{count} match" if count == 1 else f"{count} matches"


def _row_line(row: ResultRow, theme: UITheme, width: int, selected: bool) -> str:
    link = row.first_link()
    if link is None:
        return f"{theme.no_results}{fit_width(row.plain_text(), width)}{theme.reset}"

    name = fit_width(link.text, width)
    target = fit_width(f"  {link.href}", max(0, width - display_width(name)))
    if selected:
        return f"{theme.reverse}{name}{target}{theme.reset}"
    line = f"{theme.result_name}{name}{theme.reset}"
    if target:
        line += f"{theme.result_link}{target}{theme.reset}"
    return line


def panel_lines(
    panel: ResultPanel,
    theme: UITheme,
    width: int,
    *,
    start: int = 0,
    count: int | None = None,
    selected: int | None = None,
) -> list[str]:
    """Render visible panel rows ``start`` through ``start + count``.

    A hidden panel renders nothing. ``selected`` counts link rows only.
    """
    if not panel.visible:
        return []
    rows = panel.rows
    stop = len(rows) if count is None else min(len(rows), start + max(0, count))
    out: list[str] = []
    for idx in range(max(0, start), stop):
        row = rows[idx]
        is_selected = selected is not None and idx == selected and isinstance(row.first_link(), LinkCell)
        out.append(_row_line(row, theme, width, is_selected))
    return out


def render_screen(session: SearchSession, theme: UITheme, width: int, height: int) -> str:
    """Return the full-screen frame for ``session`` as one string."""
    width = max(1, width)
    prompt = fit_width(PROMPT, width)
    room = max(0, width - len(prompt))
    if session.query:
        body = f"{theme.query}{fit_width(session.query, room)}{theme.reset}"
    else:
        body = f"{theme.placeholder}{fit_width(PLACEHOLDER_TEXT, room)}{theme.reset}"
    lines = [
        f"{theme.prompt_marker}{prompt}{theme.reset}{body}",
        f"{theme.status}{fit_width(status_text(session), width)}{theme.reset}",
    ]
    lines.extend(
        panel_lines(
            session.widget.panel,
            theme,
            width,
            start=session.list_start,
            count=result_rows_for_height(height),
            selected=session.selected,
        )
    )
    return CLEAR_SCREEN + "\r\n".join(lines)
