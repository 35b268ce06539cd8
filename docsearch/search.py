"""Regular-expression matching over a symbol index.

The query is taken as a raw regular expression, not as literal text, and is
matched case-insensitively anywhere inside each symbol name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import InvalidPatternError
from .index import SymbolEntry, SymbolIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Matches for one query in index order.

    Entries sharing a name are all kept; ``as_dict`` gives the plain mapping
    view where the last such entry wins.
    """

    query: str
    entries: tuple[SymbolEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def links(self) -> list[str]:
        return [entry.link for entry in self.entries]

    def items(self) -> list[tuple[str, str]]:
        """Return ``(name, link)`` pairs in result order."""
        return [(entry.name, entry.link) for entry in self.entries]

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the link of the first match named ``name``."""
        for entry in self.entries:
            if entry.name == name:
                return entry.link
        return default

    def as_dict(self) -> dict[str, str]:
        return dict(self.items())


def compile_query(query: str) -> re.Pattern[str]:
    """Compile ``query`` as a case-insensitive regular expression.

    Raises ``InvalidPatternError`` when the query is not a valid pattern.
    """
    try:
        return re.compile(query, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPatternError(query, str(exc)) from exc


def match_entries(pattern: re.Pattern[str], entries: Iterable[SymbolEntry]) -> tuple[SymbolEntry, ...]:
    """Return entries whose lowercased name contains a match for ``pattern``."""
    return tuple(entry for entry in entries if pattern.search(entry.name.lower()) is not None)


def search_index(index: SymbolIndex, query: str) -> SearchResult:
    """Return every entry of ``index`` whose name matches ``query``."""
    pattern = compile_query(query)
    result = SearchResult(query=query, entries=match_entries(pattern, index))
    logger.debug("Query %r matched %d of %d entries", query, len(result), len(index))
    return result
