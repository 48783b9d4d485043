"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (listing, status bar, help). Syntax
highlighting style for previews remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    listing_dir: str
    listing_file: str
    listing_symlink: str
    listing_size: str
    listing_inactive_cursor: str
    preview_title: str
    status_selected: str
    status_text: str
    status_error: str
    status_placeholder: str
    status_position: str
    status_logo: str
    help_heading: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    listing_dir="\033[1;34m",
    listing_file="\033[38;5;252m",
    listing_symlink="\033[38;5;44m",
    listing_size="\033[38;5;109m",
    listing_inactive_cursor="\033[4m",
    preview_title="\033[1;38;5;81m",
    status_selected="\033[38;5;231;48;5;204m",
    status_text="\033[38;5;250;48;5;236m",
    status_error="\033[1;38;5;231;48;5;160m",
    status_placeholder="\033[2;38;5;250;48;5;236m",
    status_position="\033[38;5;231;48;5;98m",
    status_logo="\033[1;38;5;231;48;5;56m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    listing_dir="\033[1;38;5;45m",
    listing_file="\033[38;5;252m",
    listing_symlink="\033[38;5;117m",
    listing_size="\033[38;5;73m",
    listing_inactive_cursor="\033[4m",
    preview_title="\033[1;38;5;45m",
    status_selected="\033[38;5;231;48;5;31m",
    status_text="\033[38;5;153;48;5;235m",
    status_error="\033[1;38;5;231;48;5;124m",
    status_placeholder="\033[2;38;5;110;48;5;235m",
    status_position="\033[38;5;231;48;5;24m",
    status_logo="\033[1;38;5;231;48;5;39m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="\033[7m",
    reset="\033[0m",
    listing_dir="",
    listing_file="",
    listing_symlink="",
    listing_size="",
    listing_inactive_cursor="",
    preview_title="",
    status_selected="",
    status_text="",
    status_error="",
    status_placeholder="",
    status_position="",
    status_logo="",
    help_heading="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None) -> UITheme:
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
