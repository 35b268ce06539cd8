"""Tests for the interactive key loop wiring.

Feeds scripted key tokens through ``run_search_loop`` with a fake terminal.
Checks the returned entry and that frames are redrawn only when needed.
"""

from __future__ import annotations

import unittest
from unittest import mock

from docsearch.index import SymbolEntry, SymbolIndex
from docsearch.panel import MemoryResultPanel
from docsearch.render import CLEAR_SCREEN
from docsearch.runtime.loop import run_search_loop
from docsearch.runtime.session import SearchSession
from docsearch.ui_theme import PLAIN_THEME
from docsearch.widget import SymbolSearchWidget


def _session() -> SearchSession:
    index = SymbolIndex(
        [
            SymbolEntry("numir.core.ones", "a"),
            SymbolEntry("numir.core.ones_like", "b"),
            SymbolEntry("numir.random.rand", "c"),
        ]
    )
    return SearchSession(SymbolSearchWidget(index, MemoryResultPanel()))


class RunSearchLoopTests(unittest.TestCase):
    def test_loop_returns_entry_accepted_with_enter(self) -> None:
        terminal = mock.Mock()
        keys = ["o", "n", "e", "s", "DOWN", "ENTER"]

        with mock.patch("docsearch.runtime.loop.read_key", side_effect=keys):
            chosen = run_search_loop(_session(), terminal, 0, PLAIN_THEME, terminal_size=lambda: (40, 10))

        self.assertEqual(chosen, SymbolEntry("numir.core.ones_like", "b"))
        frames = [call.args[0] for call in terminal.write.call_args_list]
        self.assertTrue(all(frame.startswith(CLEAR_SCREEN) for frame in frames))
        self.assertIn("> ones\r\n2 matches", frames[-1])

    def test_idle_timeouts_do_not_redraw(self) -> None:
        terminal = mock.Mock()
        keys = ["", "", "", "CTRL_C"]

        with mock.patch("docsearch.runtime.loop.read_key", side_effect=keys):
            chosen = run_search_loop(_session(), terminal, 0, PLAIN_THEME, terminal_size=lambda: (40, 10))

        self.assertIsNone(chosen)
        self.assertEqual(terminal.write.call_count, 1)

    def test_resize_forces_redraw(self) -> None:
        terminal = mock.Mock()
        sizes = iter([(40, 10), (40, 10), (60, 12)])
        keys = ["", "", "ESC"]

        with mock.patch("docsearch.runtime.loop.read_key", side_effect=keys):
            run_search_loop(_session(), terminal, 0, PLAIN_THEME, terminal_size=lambda: next(sizes))

        self.assertEqual(terminal.write.call_count, 2)


if __name__ == "__main__":
    unittest.main()
