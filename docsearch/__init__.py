"""Public package surface for docsearch.

Exports ``main`` for programmatic CLI invocation.
Search, panel, and widget types live in their own submodules.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
