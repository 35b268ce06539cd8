"""Result panel surfaces owned by the search widget.

A panel is an ordered list of rows plus a visibility flag. Rows hold text
cells and link cells. ``MemoryResultPanel`` backs headless use and the
terminal front end; ``HtmlResultPanel`` can also serialize itself as the
results table of a documentation page.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextCell:
    text: str


@dataclass(frozen=True)
class LinkCell:
    href: str
    text: str
    element_id: str | None = None


Cell = TextCell | LinkCell


@dataclass
class ResultRow:
    """One rendered row of the panel."""

    cells: list[Cell] = field(default_factory=list)

    def append_text(self, text: str) -> TextCell:
        cell = TextCell(text)
        self.cells.append(cell)
        return cell

    def append_link(self, href: str, text: str, element_id: str | None = None) -> LinkCell:
        cell = LinkCell(href=href, text=text, element_id=element_id)
        self.cells.append(cell)
        return cell

    def plain_text(self) -> str:
        """Return visible text of all cells joined by spaces."""
        return " ".join(cell.text for cell in self.cells)

    def first_link(self) -> LinkCell | None:
        for cell in self.cells:
            if isinstance(cell, LinkCell):
                return cell
        return None


class ResultPanel:
    """Base panel: rows, visibility, and the four mutation operations."""

    def __init__(self) -> None:
        self._rows: list[ResultRow] = []
        self._visible = False

    @property
    def rows(self) -> tuple[ResultRow, ...]:
        return tuple(self._rows)

    @property
    def visible(self) -> bool:
        return self._visible

    def insert_row(self) -> ResultRow:
        """Append an empty row and return it for cell insertion."""
        row = ResultRow()
        self._rows.append(row)
        return row

    def clear(self) -> None:
        self._rows.clear()

    def set_visible(self, visible: bool) -> None:
        self._visible = bool(visible)


class MemoryResultPanel(ResultPanel):
    """In-memory panel with plain-text inspection helpers."""

    def row_texts(self) -> list[str]:
        return [row.plain_text() for row in self._rows]

    def links(self) -> list[LinkCell]:
        return [link for row in self._rows if (link := row.first_link()) is not None]


class HtmlResultPanel(MemoryResultPanel):
    """Panel that can render itself as an HTML results table."""

    def __init__(self, table_id: str = "results") -> None:
        super().__init__()
        self.table_id = table_id

    @staticmethod
    def _cell_html(cell: Cell) -> str:
        if isinstance(cell, LinkCell):
            id_attr = f' id="{html.escape(cell.element_id)}"' if cell.element_id else ""
            return f'<a href="{html.escape(cell.href)}"{id_attr}>{html.escape(cell.text)}</a>'
        return f"<td>{html.escape(cell.text)}</td>"

    def to_html(self) -> str:
        """Serialize rows as ``<table>``; hidden panels carry ``display: none``."""
        display = "block" if self._visible else "none"
        out = [f'<table id="{html.escape(self.table_id)}" style="display: {display}">']
        for row in self._rows:
            cells = "".join(self._cell_html(cell) for cell in row.cells)
            out.append(f"<tr>{cells}</tr>")
        out.append("</table>")
        return "\n".join(out) + "\n"
