"""UI theme definitions and selection helpers.

Themes are semantic ANSI palettes for panel chrome and list rows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by widgets and the surface."""

    name: str
    reset: str
    border: str
    title: str
    item: str
    item_selected: str
    item_activated: str
    selected_marker: str
    table_header: str
    table_cell: str
    status: str
    placeholder: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;245m",
    title="\033[1;38;5;81m",
    item="\033[38;5;252m",
    item_selected="\033[38;5;203m",
    item_activated="\033[30;48;5;71m",
    selected_marker="",
    table_header="\033[1;38;5;229m",
    table_cell="\033[38;5;252m",
    status="\033[1;38;5;214m",
    placeholder="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    item="\033[38;5;153m",
    item_selected="\033[1;38;5;39m",
    item_activated="\033[30;48;5;45m",
    selected_marker="",
    table_header="\033[1;38;5;117m",
    table_cell="\033[38;5;153m",
    status="\033[1;38;5;215m",
    placeholder="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    item="",
    item_selected="",
    item_activated="",
    selected_marker="> ",
    table_header="",
    table_cell="",
    status="",
    placeholder="",
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
