"""Rendering engine for the split listing/preview terminal view.

Builds one fully composed ANSI frame from browser state. Nothing here mutates
state; the loop decides when a frame is needed and writes it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import display_width, fit_ansi_line, truncate_with_tail
from ..browser.machine import PANE_LISTING, BrowserState, content_rows, pane_widths
from ..browser.status import StatusLine, derive_status
from ..filesystem.types import DirectoryEntry
from ..ui_theme import UITheme

PENDING_SIZE = "…"
DIRECTORY_ICON = "\uf115"
FILE_ICON = "\uf15b"


@dataclass(frozen=True)
class RenderContext:
    state: BrowserState
    theme: UITheme
    show_icons: bool = False


def selected_with_ansi(text: str) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return "\033[7m" + text.replace("\033[0m", "\033[0;7m") + "\033[0m"


def _entry_style(entry: DirectoryEntry, theme: UITheme) -> str:
    if entry.is_symlink:
        return theme.listing_symlink
    if entry.is_dir:
        return theme.listing_dir
    return theme.listing_file


def format_listing_row(
    entry: DirectoryEntry,
    size_label: str | None,
    width: int,
    theme: UITheme,
    show_icons: bool = False,
) -> str:
    """One listing row: name on the left, size label right-aligned."""
    label = size_label if size_label is not None else PENDING_SIZE
    name = f"{entry.name}/" if entry.is_dir else entry.name
    if show_icons:
        name = f"{DIRECTORY_ICON if entry.is_dir else FILE_ICON} {name}"
    label_width = display_width(label)
    name_width = max(0, width - label_width - 2)
    name = truncate_with_tail(name, name_width)
    gap = " " * max(1, width - display_width(name) - label_width - 1)
    row = f" {_entry_style(entry, theme)}{name}{theme.reset}{gap}{theme.listing_size}{label}{theme.reset}"
    return fit_ansi_line(row, width)


def listing_pane_rows(context: RenderContext, width: int, rows: int) -> list[str]:
    state = context.state
    theme = context.theme
    listing = state.listing
    out: list[str] = []
    for idx in listing.viewport.visible_range(len(listing)):
        row = format_listing_row(listing.entries[idx], listing.sizes[idx], width, theme, context.show_icons)
        if idx == listing.cursor:
            if state.active_pane == PANE_LISTING:
                row = selected_with_ansi(row)
            else:
                row = f"{theme.listing_inactive_cursor}{row}{theme.reset}"
        out.append(row)
    if not out and rows > 0:
        out.append(fit_ansi_line(f" {theme.help_dim}(empty){theme.reset}", width))
    while len(out) < rows:
        out.append(" " * width)
    return out[:rows]


def preview_pane_rows(context: RenderContext, width: int, rows: int) -> list[str]:
    """Title row followed by the visible slice of the preview text."""
    state = context.state
    theme = context.theme
    title = truncate_with_tail(state.preview_title, max(0, width - 1))
    out = [fit_ansi_line(f" {theme.preview_title}{title}{theme.reset}", width)]
    for idx in state.preview_viewport.visible_range(len(state.preview_lines)):
        out.append(fit_ansi_line(state.preview_lines[idx] + "\033[0m", width))
    while len(out) < rows:
        out.append(" " * width)
    return out[:rows]


def build_status_bar(status: StatusLine, width: int, theme: UITheme) -> str:
    selected = f" {status.selected} "
    position = f" {status.position} "
    logo = f" {status.logo} "
    fixed = display_width(selected) + display_width(position) + display_width(logo)
    status_width = max(0, width - fixed)
    if status.is_error:
        status_style = theme.status_error
    elif status.is_placeholder:
        status_style = theme.status_placeholder
    else:
        status_style = theme.status_text
    status_text = fit_ansi_line(" " + truncate_with_tail(status.status, max(0, status_width - 2)), status_width)
    line = (
        f"{theme.status_selected}{selected}{theme.reset}"
        f"{status_style}{status_text}{theme.reset}"
        f"{theme.status_position}{position}{theme.reset}"
        f"{theme.status_logo}{logo}{theme.reset}"
    )
    return fit_ansi_line(line, width)


def build_frame(context: RenderContext) -> str:
    """Compose a full screen: two panes side by side plus the status bar."""
    state = context.state
    theme = context.theme
    width = max(1, state.term_columns)
    rows = content_rows(state.term_rows)
    left_width, right_width = pane_widths(width)
    left = listing_pane_rows(context, left_width, rows)
    right = preview_pane_rows(context, right_width, rows)
    divider = f"{theme.divider}│{theme.reset}"

    out: list[str] = ["\033[H\033[J"]
    for row in range(rows):
        out.append(left[row])
        if width >= left_width + 2:
            out.append(divider)
            out.append(right[row])
        out.append("\033[0m\r\n")
    out.append(build_status_bar(derive_status(state, context.show_icons), width, theme))
    out.append("\033[0m")
    return "".join(out)


__all__ = [
    "RenderContext",
    "build_frame",
    "build_status_bar",
    "format_listing_row",
    "listing_pane_rows",
    "preview_pane_rows",
    "selected_with_ansi",
]
