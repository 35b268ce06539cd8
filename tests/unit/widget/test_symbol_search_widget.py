"""Behavior tests for the search-as-you-type widget.

Drives ``on_query_change`` and ``on_cancel`` against an in-memory panel.
Covers hide/show transitions, "No results", duplicates, and bad patterns.
"""

from __future__ import annotations

import unittest
from unittest import mock

from docsearch.index import SymbolEntry, SymbolIndex
from docsearch.panel import LinkCell, MemoryResultPanel, ResultPanel
from docsearch.widget import ESCAPE_KEY_CODE, NO_RESULTS_TEXT, SymbolSearchWidget


def _example_widget() -> tuple[SymbolSearchWidget, MemoryResultPanel]:
    index = SymbolIndex(
        [
            SymbolEntry("numir.core.ones", "a"),
            SymbolEntry("numir.core.ones_like", "b"),
            SymbolEntry("numir.random.rand", "c"),
        ]
    )
    panel = MemoryResultPanel()
    return SymbolSearchWidget(index, panel), panel


class _RecordingPanel(ResultPanel):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, object]] = []

    def insert_row(self):
        self.calls.append(("insert_row", None))
        return super().insert_row()

    def clear(self) -> None:
        self.calls.append(("clear", None))
        super().clear()

    def set_visible(self, visible: bool) -> None:
        self.calls.append(("set_visible", visible))
        super().set_visible(visible)


class OnQueryChangeTests(unittest.TestCase):
    def test_matches_render_one_link_row_each_in_order(self) -> None:
        widget, panel = _example_widget()

        widget.on_query_change("ones", ord("S"))

        self.assertTrue(panel.visible)
        self.assertEqual(
            panel.links(),
            [
                LinkCell("a", "numir.core.ones", "link0"),
                LinkCell("b", "numir.core.ones_like", "link1"),
            ],
        )
        self.assertEqual(widget.last_result.names(), ["numir.core.ones", "numir.core.ones_like"])

    def test_zero_matches_render_single_no_results_row(self) -> None:
        widget, panel = _example_widget()

        widget.on_query_change("zzz", ord("Z"))

        self.assertTrue(panel.visible)
        self.assertEqual(panel.row_texts(), [NO_RESULTS_TEXT])
        self.assertEqual(panel.links(), [])

    def test_empty_query_hides_and_clears_after_results(self) -> None:
        widget, panel = _example_widget()
        widget.on_query_change("rand", ord("D"))
        self.assertTrue(panel.visible)

        widget.on_query_change("", 8)

        self.assertFalse(panel.visible)
        self.assertEqual(panel.rows, ())
        self.assertFalse(widget.last_result)

    def test_escape_key_hides_even_with_query(self) -> None:
        widget, panel = _example_widget()
        widget.on_query_change("ones", ord("S"))

        widget.on_query_change("ones", ESCAPE_KEY_CODE)

        self.assertFalse(panel.visible)
        self.assertEqual(panel.rows, ())

    def test_empty_query_does_not_search(self) -> None:
        widget, _panel = _example_widget()
        with mock.patch.object(widget, "search") as search_mock:
            widget.on_query_change("", 0)
            widget.on_query_change("ones", ESCAPE_KEY_CODE)
        search_mock.assert_not_called()

    def test_malformed_pattern_degrades_to_no_results(self) -> None:
        widget, panel = _example_widget()
        widget.on_query_change("ones", ord("S"))

        widget.on_query_change("(", ord("9"))

        self.assertTrue(panel.visible)
        self.assertEqual(panel.row_texts(), [NO_RESULTS_TEXT])
        self.assertIsNotNone(widget.last_error)
        self.assertEqual(widget.last_error.query, "(")
        self.assertFalse(widget.last_result)

        widget.on_query_change("(o)nes", ord("S"))
        self.assertIsNone(widget.last_error)
        self.assertEqual(len(panel.rows), 2)

    def test_duplicate_names_render_both_rows(self) -> None:
        index = SymbolIndex(
            [
                SymbolEntry("numir.core.arange", "numir/core.html#arange"),
                SymbolEntry("numir.core.arange", "numir/core.html#arange-2"),
            ]
        )
        panel = MemoryResultPanel()
        widget = SymbolSearchWidget(index, panel)

        widget.on_query_change("arange", ord("E"))

        self.assertEqual(
            [link.href for link in panel.links()],
            ["numir/core.html#arange", "numir/core.html#arange-2"],
        )

    def test_each_change_replaces_previous_rows(self) -> None:
        widget, panel = _example_widget()
        widget.on_query_change("ones", ord("S"))
        self.assertEqual(len(panel.rows), 2)

        widget.on_query_change("ra", ord("A"))

        self.assertEqual(panel.row_texts(), ["numir.random.rand"])

    def test_panel_operations_order_for_a_query(self) -> None:
        panel = _RecordingPanel()
        widget = SymbolSearchWidget(SymbolIndex([SymbolEntry("a.b", "x")]), panel)

        widget.on_query_change("b", ord("B"))

        self.assertEqual(panel.calls, [("set_visible", True), ("clear", None), ("insert_row", None)])


class OnCancelTests(unittest.TestCase):
    def test_escape_clears_and_hides(self) -> None:
        widget, panel = _example_widget()
        widget.on_query_change("ones", ord("S"))

        widget.on_cancel(ESCAPE_KEY_CODE)

        self.assertFalse(panel.visible)
        self.assertEqual(panel.rows, ())

    def test_other_keys_are_ignored(self) -> None:
        widget, panel = _example_widget()
        widget.on_query_change("ones", ord("S"))

        widget.on_cancel(13)

        self.assertTrue(panel.visible)
        self.assertEqual(len(panel.rows), 2)

    def test_cancel_on_hidden_panel_keeps_it_hidden(self) -> None:
        widget, panel = _example_widget()
        widget.on_cancel(ESCAPE_KEY_CODE)
        self.assertFalse(panel.visible)
        self.assertEqual(panel.rows, ())


if __name__ == "__main__":
    unittest.main()
