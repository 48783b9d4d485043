"""Help panel content shown in the preview pane."""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "NAVIGATION",
        (
            ("j/k Up/Down", "move selection (wraps)"),
            ("h/Left/Backspace", "parent directory"),
            ("l/Right/Enter", "open directory or preview file"),
            ("gg / G, Home / End", "top / bottom"),
            ("~, /, -", "home, root, previous directory"),
            ("Tab", "switch listing/preview pane"),
            ("p", "preview directory"),
        ),
    ),
    (
        "OPERATIONS",
        (
            ("R", "rename"),
            ("M then Enter", "move into current directory"),
            ("Ctrl+D", "delete (asks y/n)"),
            ("C", "copy in place"),
            ("n / N", "new file / new directory"),
            ("Z / U", "zip / unzip"),
            ("y", "copy path to clipboard"),
            ("E", "edit in $EDITOR"),
            ("Ctrl+F", "find by name"),
        ),
    ),
    (
        "VIEW",
        (
            (".", "toggle hidden files"),
            ("S / s", "directories only / files only"),
            ("O", "recent log records"),
            ("Esc", "cancel prompt, clear status"),
            ("?", "this help"),
            ("q / Ctrl+C", "quit"),
        ),
    ),
    (
        "COMMAND BAR (:)",
        (
            ("mkdir NAME", "create directory"),
            ("touch NAME", "create file"),
            ("mv NAME", "rename selection"),
            ("cp DIR", "copy selection into DIR"),
            ("rm", "delete selection"),
            ("cd DIR", "change directory"),
            ("find QUERY", "find by name"),
            ("zip / unzip", "archive selection"),
        ),
    ),
)


def help_lines(theme: UITheme) -> list[str]:
    """Return styled help lines, one blank line between sections."""
    lines: list[str] = []
    for heading, rows in HELP_SECTIONS:
        if lines:
            lines.append("")
        lines.append(f"{theme.help_heading}{heading}{theme.reset}")
        key_width = max(len(key) for key, _ in rows)
        for key, description in rows:
            lines.append(
                f"{theme.help_key}{key.ljust(key_width)}{theme.reset}  {theme.help_dim}{description}{theme.reset}"
            )
    return lines


__all__ = ["HELP_SECTIONS", "help_lines"]
