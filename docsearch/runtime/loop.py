"""Main interactive event loop for the search prompt.

Reads one key at a time, dispatches it to the session, and redraws the
screen when state changed or the terminal was resized.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from ..index import SymbolEntry
from ..input import read_key
from ..render import render_screen, result_rows_for_height
from ..ui_theme import UITheme
from .session import SearchSession
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 250


def _default_terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


def run_search_loop(
    session: SearchSession,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    *,
    terminal_size: Callable[[], tuple[int, int]] | None = None,
) -> SymbolEntry | None:
    """Run the prompt until the user accepts an entry or quits.

    Returns the accepted entry, or ``None`` when the session was abandoned.
    """
    size_of_terminal = terminal_size or _default_terminal_size
    last_size: tuple[int, int] | None = None
    while not session.quit:
        size = size_of_terminal()
        if size != last_size:
            last_size = size
            session.dirty = True
        columns, lines = size
        if session.dirty:
            terminal.write(render_screen(session, theme, columns, lines))
            session.dirty = False

        key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
        session.handle_key(key, result_rows_for_height(lines))
    return session.chosen
