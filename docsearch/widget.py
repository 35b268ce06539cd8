"""Search-as-you-type widget binding an index to a result panel."""

from __future__ import annotations

import logging

from .errors import InvalidPatternError
from .index import SymbolIndex
from .panel import ResultPanel
from .search import SearchResult, search_index

logger = logging.getLogger(__name__)

ESCAPE_KEY_CODE = 27
NO_RESULTS_TEXT = "No results"


class SymbolSearchWidget:
    """Filter a fixed symbol index into a panel on every query change.

    The panel is either hidden and empty, or visible and holding the rows of
    the latest query. Malformed patterns render as "No results".
    """

    def __init__(self, index: SymbolIndex, panel: ResultPanel) -> None:
        self.index = index
        self.panel = panel
        self.last_result = SearchResult(query="")
        self.last_error: InvalidPatternError | None = None

    def search(self, query: str) -> SearchResult:
        """Return entries whose names match ``query``; may raise ``InvalidPatternError``."""
        return search_index(self.index, query)

    def _hide(self) -> None:
        self.panel.clear()
        self.panel.set_visible(False)
        self.last_result = SearchResult(query="")
        self.last_error = None

    def on_query_change(self, query: str, key_code: int) -> None:
        """Re-render the panel for ``query``; empty query or Escape hides it."""
        if query == "" or key_code == ESCAPE_KEY_CODE:
            self._hide()
            return

        self.panel.set_visible(True)
        try:
            result = self.search(query)
        except InvalidPatternError as exc:
            logger.debug("%s", exc)
            result = SearchResult(query=query)
            self.last_error = exc
        else:
            self.last_error = None
        self.last_result = result

        self.panel.clear()
        if not result:
            self.panel.insert_row().append_text(NO_RESULTS_TEXT)
            return
        for idx, entry in enumerate(result):
            self.panel.insert_row().append_link(entry.link, entry.name, element_id=f"link{idx}")

    def on_cancel(self, key_code: int) -> None:
        if key_code != ESCAPE_KEY_CODE:
            return
        self._hide()
