"""Interactive search session state and key dispatch.

The session owns the query text and the selection cursor. Every query edit
is forwarded to the widget, which re-renders its panel.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..index import SymbolEntry
from ..input import BACKSPACE_KEY_CODE, ESCAPE_KEY_CODE, key_code_for_token
from ..widget import SymbolSearchWidget

_MOVE_UP_KEYS = {"UP", "CTRL_K", "CTRL_P"}
_MOVE_DOWN_KEYS = {"DOWN", "CTRL_N"}


@dataclass
class SearchSession:
    widget: SymbolSearchWidget
    query: str = ""
    selected: int = 0
    list_start: int = 0
    chosen: SymbolEntry | None = None
    quit: bool = False
    dirty: bool = True

    def match_count(self) -> int:
        return len(self.widget.last_result)

    def selected_entry(self) -> SymbolEntry | None:
        entries = self.widget.last_result.entries
        if not entries:
            return None
        return entries[max(0, min(self.selected, len(entries) - 1))]

    def apply_query(self, query: str, key_code: int) -> None:
        """Replace the query text and re-run the widget for it."""
        self.query = query
        self.widget.on_query_change(query, key_code)
        self.selected = 0
        self.list_start = 0
        self.dirty = True

    def cancel(self) -> None:
        """Clear the query and hide the panel."""
        self.widget.on_cancel(ESCAPE_KEY_CODE)
        self.query = ""
        self.selected = 0
        self.list_start = 0
        self.dirty = True

    def move_selection(self, delta: int, visible_rows: int) -> bool:
        """Move selection by ``delta`` rows and keep it inside the viewport."""
        count = self.match_count()
        if count == 0:
            return False
        target = max(0, min(count - 1, self.selected + delta))
        if target == self.selected:
            return False
        self.selected = target
        rows = max(1, visible_rows)
        if self.selected < self.list_start:
            self.list_start = self.selected
        elif self.selected >= self.list_start + rows:
            self.list_start = self.selected - rows + 1
        self.dirty = True
        return True

    def handle_key(self, key: str, visible_rows: int) -> bool:
        """Handle one key token; return whether it was consumed."""
        if not key:
            return False
        if key == "CTRL_C":
            self.quit = True
            return True
        if key == "ESC":
            if not self.query:
                self.quit = True
            else:
                self.cancel()
            return True
        if key == "ENTER":
            entry = self.selected_entry()
            if entry is not None:
                self.chosen = entry
                self.quit = True
            return True
        if key in _MOVE_UP_KEYS:
            self.move_selection(-1, visible_rows)
            return True
        if key in _MOVE_DOWN_KEYS:
            self.move_selection(1, visible_rows)
            return True
        if key == "BACKSPACE":
            if self.query:
                self.apply_query(self.query[:-1], BACKSPACE_KEY_CODE)
            return True
        if key == "CTRL_U":
            if self.query:
                self.apply_query("", 0)
            return True
        if len(key) == 1 and key.isprintable():
            self.apply_query(self.query + key, key_code_for_token(key))
            return True
        return False
