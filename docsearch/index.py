"""Symbol index model and loaders.

An index is the ordered list of ``(name, link)`` pairs a documentation
generator emits for its search box. Two on-disk forms are understood: a JSON
array of single-key objects, and the generator's own ``search.js`` script.
Duplicate names are kept in both.
"""

from __future__ import annotations

import ast
import json
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from pygments.lexers import JavascriptLexer
from pygments.token import Comment, Name, String, Text

from .errors import IndexFormatError

logger = logging.getLogger(__name__)

ITEMS_VARIABLE = "items"


@dataclass(frozen=True)
class SymbolEntry:
    """One searchable symbol and the relative link documenting it."""

    name: str
    link: str


class SymbolIndex(Sequence[SymbolEntry]):
    """Immutable ordered sequence of symbol entries."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[SymbolEntry] = ()) -> None:
        self._entries: tuple[SymbolEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return SymbolIndex(self._entries[idx])
        return self._entries[idx]

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolIndex):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"SymbolIndex({len(self._entries)} entries)"

    def names(self) -> list[str]:
        """Return entry names in index order, duplicates included."""
        return [entry.name for entry in self._entries]

    def to_records(self) -> list[dict[str, str]]:
        """Return the single-key record form used by the JSON index file."""
        return [{entry.name: entry.link} for entry in self._entries]


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def index_from_records(records: object) -> SymbolIndex:
    """Build an index from decoded single-key ``{name: link}`` records.

    Raises ``IndexFormatError`` naming the first record that is not a
    one-key string-to-string object.
    """
    if not isinstance(records, list):
        raise IndexFormatError(f"index must be a list of records, got {type(records).__name__}")

    entries: list[SymbolEntry] = []
    for position, record in enumerate(records):
        if not isinstance(record, dict) or len(record) != 1:
            raise IndexFormatError(f"record {position} must be an object with exactly one key")
        ((name, link),) = record.items()
        if not isinstance(name, str) or not isinstance(link, str):
            raise IndexFormatError(f"record {position} must map a string name to a string link")
        entries.append(SymbolEntry(name=name, link=link))
    return SymbolIndex(entries)


class _JsonObjectPairs(list):
    """Key/value pairs of one decoded JSON object, repeated keys included."""


def parse_json_index(source: str) -> SymbolIndex:
    """Parse the JSON array form of an index."""
    # The stock decoder would silently collapse a record with a repeated key.
    try:
        decoded = json.loads(source, object_pairs_hook=_JsonObjectPairs)
    except json.JSONDecodeError as exc:
        raise IndexFormatError(f"invalid JSON index: {exc}") from exc
    if not isinstance(decoded, list) or isinstance(decoded, _JsonObjectPairs):
        raise IndexFormatError("index must be a list of records")

    records: list[object] = []
    for pairs in decoded:
        if isinstance(pairs, _JsonObjectPairs) and len(pairs) == 1:
            records.append(dict(pairs))
        else:
            records.append(pairs)
    return index_from_records(records)


def _js_string_value(raw: str, position: int) -> str:
    try:
        value = ast.literal_eval(raw)
    except (SyntaxError, ValueError) as exc:
        raise IndexFormatError(f"record {position} has an unreadable string literal {raw!r}") from exc
    if not isinstance(value, str):
        raise IndexFormatError(f"record {position} has a non-string literal {raw!r}")
    return value


def _significant_tokens(source: str) -> Iterator[tuple[object, str]]:
    for ttype, value in JavascriptLexer().get_tokens(source):
        if ttype in Text or ttype in Comment or not value.strip():
            continue
        yield ttype, value.strip()


def parse_search_js(source: str) -> SymbolIndex:
    """Extract the ``var items = [...]`` array from a generated ``search.js``.

    Each ``{"name" : "link"}`` record inside the array becomes one entry.
    Everything outside the array literal is ignored.
    """
    tokens = _significant_tokens(source)
    window: list[str] = []
    for ttype, value in tokens:
        if ttype in Name and value == ITEMS_VARIABLE:
            window = [value]
            continue
        if window:
            window.append(value)
            if window == [ITEMS_VARIABLE, "=", "["]:
                break
            if len(window) >= 3:
                window = []
    else:
        raise IndexFormatError(f"no '{ITEMS_VARIABLE} = [' array found in script")

    records: list[object] = []
    strings: list[str] | None = None
    for ttype, value in tokens:
        position = len(records)
        if strings is None:
            if value == "]":
                return index_from_records(records)
            if value == ",":
                continue
            if value != "{":
                raise IndexFormatError(f"record {position} must start with '{{', got {value!r}")
            strings = []
            continue
        if value == "}":
            if len(strings) != 2:
                raise IndexFormatError(f"record {position} must hold one name and one link")
            records.append({strings[0]: strings[1]})
            strings = None
            continue
        if value in {":", ","}:
            continue
        if ttype in String:
            strings.append(_js_string_value(value, position))
            continue
        raise IndexFormatError(f"record {position} has unexpected token {value!r}")
    raise IndexFormatError(f"unterminated '{ITEMS_VARIABLE}' array")


def load_index(path: Path) -> SymbolIndex:
    """Load an index from a ``.json`` or ``.js`` file.

    Raises ``IndexFormatError`` for unreadable or malformed files.
    """
    try:
        source = read_text(path)
    except OSError as exc:
        raise IndexFormatError(f"cannot read index {path}: {exc.strerror or exc}") from exc

    if path.suffix.lower() == ".js":
        index = parse_search_js(source)
    else:
        index = parse_json_index(source)
    logger.info("Loaded %d symbol entries from %s", len(index), path)
    return index


def dump_index(index: SymbolIndex, path: Path) -> None:
    """Write ``index`` in the JSON record form, one record per line."""
    lines = [json.dumps(record, ensure_ascii=False) for record in index.to_records()]
    body = "[\n" + ",\n".join(lines) + "\n]\n" if lines else "[]\n"
    path.write_text(body, encoding="utf-8")
    logger.info("Wrote %d symbol entries to %s", len(index), path)
