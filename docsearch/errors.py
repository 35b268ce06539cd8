"""Exception types raised by docsearch."""

from __future__ import annotations


class DocsearchError(Exception):
    """Base class for docsearch failures."""


class InvalidPatternError(DocsearchError, ValueError):
    """A query could not be compiled as a regular expression."""

    def __init__(self, query: str, reason: str) -> None:
        super().__init__(f"invalid search pattern {query!r}: {reason}")
        self.query = query
        self.reason = reason


class IndexFormatError(DocsearchError, ValueError):
    """A symbol index file or record list is malformed."""
