"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the prompt and result rows of the terminal
search panel.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    prompt_marker: str
    query: str
    placeholder: str
    result_name: str
    result_link: str
    no_results: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    prompt_marker="\033[38;5;44m",
    query="\033[1;38;5;81m",
    placeholder="\033[2;38;5;250m",
    result_name="\033[38;5;252m",
    result_link="\033[38;5;109m",
    no_results="\033[2;38;5;250m",
    status="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    prompt_marker="\033[38;5;39m",
    query="\033[1;38;5;45m",
    placeholder="\033[2;38;5;110m",
    result_name="\033[38;5;153m",
    result_link="\033[38;5;73m",
    no_results="\033[2;38;5;110m",
    status="\033[2;38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    prompt_marker="",
    query="",
    placeholder="",
    result_name="",
    result_link="",
    no_results="",
    status="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
