"""Runtime package for the interactive search session.

``run_search`` wires the widget, session state, terminal control, and the
key loop together for one interactive run.
"""

from __future__ import annotations

import sys

from ..index import SymbolEntry, SymbolIndex
from ..panel import MemoryResultPanel
from ..ui_theme import UITheme
from ..widget import SymbolSearchWidget
from .loop import run_search_loop
from .session import SearchSession
from .terminal import TerminalController


def run_search(index: SymbolIndex, theme: UITheme, initial_query: str = "") -> SymbolEntry | None:
    """Run the interactive prompt on the controlling terminal."""
    widget = SymbolSearchWidget(index, MemoryResultPanel())
    session = SearchSession(widget)
    if initial_query:
        session.apply_query(initial_query, 0)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        return run_search_loop(session, terminal, stdin_fd, theme)


__all__ = [
    "SearchSession",
    "TerminalController",
    "run_search",
    "run_search_loop",
]
