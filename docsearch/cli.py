"""Command-line front door for docsearch.

Parses CLI options, resolves and loads the symbol index, then either prints
results for one query, converts the index, or runs the interactive prompt.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from urllib.parse import urljoin

from .errors import IndexFormatError
from .index import SymbolIndex, dump_index, load_index
from .panel import HtmlResultPanel, MemoryResultPanel
from .runtime import run_search
from .runtime.config import load_index_path, load_theme_name, save_index_path, save_theme_name
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme
from .widget import SymbolSearchWidget

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_link(link: str, base: str | None) -> str:
    """Join ``link`` onto ``base`` when a base URL was given."""
    return urljoin(base, link) if base else link


def render_query_output(index: SymbolIndex, query: str, *, html: bool = False, base: str | None = None) -> str:
    """Run one query through the widget and return printable output.

    Plain output is one ``name<TAB>link`` line per match, or the single
    "No results" row. An empty query prints nothing.
    """
    panel = HtmlResultPanel() if html else MemoryResultPanel()
    widget = SymbolSearchWidget(index, panel)
    widget.on_query_change(query, 0)
    if html:
        return panel.to_html()
    if not panel.visible:
        return ""

    out: list[str] = []
    for row in panel.rows:
        link = row.first_link()
        if link is None:
            out.append(row.plain_text())
        else:
            out.append(f"{link.text}\t{resolve_link(link.href, base)}")
    return "\n".join(out) + "\n"


def _resolve_index_path(raw: str | None) -> Path:
    if raw is not None:
        path = Path(raw)
    else:
        configured = load_index_path()
        if configured is None:
            raise SystemExit("No index file given and no default index configured.")
        path = configured
    if not path.exists():
        raise SystemExit(f"Index not found: {path}")
    return path


def main() -> None:
    """Parse CLI arguments and run docsearch against a symbol index."""
    parser = argparse.ArgumentParser(
        description="Search a documentation symbol index with a regular expression as you type."
    )
    parser.add_argument(
        "index",
        nargs="?",
        default=None,
        help="Index file (.json records or generated search.js). Defaults to the configured index.",
    )
    parser.add_argument("-q", "--query", default=None, help="Print matches for QUERY and exit.")
    parser.add_argument("--html", action="store_true", help="With --query, print the results as an HTML table.")
    parser.add_argument("--convert", metavar="OUT", help="Write the index as JSON records to OUT and exit.")
    parser.add_argument("--base", default=None, help="Base URL joined onto printed links.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-default", action="store_true", help="Remember INDEX and --theme as defaults.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if args.html and args.query is None:
        raise SystemExit("--html requires --query.")

    index_path = _resolve_index_path(args.index)
    try:
        index = load_index(index_path)
    except IndexFormatError as exc:
        raise SystemExit(f"Invalid index {index_path}: {exc}") from exc

    if args.save_default:
        save_index_path(index_path)
        theme_name = normalize_theme_name(args.theme) if args.theme else None
        if theme_name:
            save_theme_name(theme_name)
        logger.info("Saved defaults: index=%s theme=%s", index_path, theme_name)

    if args.convert is not None:
        dump_index(index, Path(args.convert))
        return

    if args.query is not None:
        sys.stdout.write(render_query_output(index, args.query, html=args.html, base=args.base))
        return

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("Interactive search needs a terminal; use --query instead.")

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    chosen = run_search(index, theme)
    if chosen is not None:
        sys.stdout.write(resolve_link(chosen.link, args.base) + "\n")


if __name__ == "__main__":
    main()
