"""Derive the status bar columns from browser state.

The status bar has four columns: the selected entry's name, a free-form
status column, the ``position/count`` indicator and the logo. Everything here
is a pure function of state, so it is recomputed on every frame.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..ansi import truncate_with_tail
from .modes import Moving, captures_text, prompt_placeholder

if TYPE_CHECKING:
    from .machine import BrowserState

SELECTED_NAME_MAX_COLS = 30
PROMPT_MARKER = "❯ "
LOGO_TEXT = "FM"
LOGO_ICON = "\uf115"
NO_SELECTION = "N/A"
MTIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class StatusLine:
    selected: str
    status: str
    position: str
    logo: str
    is_error: bool = False
    is_placeholder: bool = False


def format_mtime(mtime: float) -> str:
    return time.strftime(MTIME_FORMAT, time.localtime(mtime))


def derive_status(state: BrowserState, show_icons: bool = False) -> StatusLine:
    """Build the status columns for ``state``.

    Precedence for the status column: an open text prompt, then the move
    indicator, then a pending status message, then details of the selection.
    """
    entry = state.selected()
    count = len(state.listing)
    logo = f"{LOGO_ICON} {LOGO_TEXT}" if show_icons else LOGO_TEXT

    if entry is None:
        selected = NO_SELECTION
        position = "0/0"
        details = ""
    else:
        selected = truncate_with_tail(entry.name, SELECTED_NAME_MAX_COLS)
        position = f"{state.listing.cursor + 1}/{count}"
        details = f"{format_mtime(entry.mtime)} {entry.permissions} {entry.path}"

    mode = state.mode
    if captures_text(mode):
        if state.pending_text:
            return StatusLine(selected, f"{PROMPT_MARKER}{state.pending_text}", position, logo)
        return StatusLine(
            selected,
            f"{PROMPT_MARKER}{prompt_placeholder(mode)}",
            position,
            logo,
            is_placeholder=True,
        )
    if isinstance(mode, Moving):
        return StatusLine(selected, f"Currently moving: {mode.target.name}", position, logo)
    if state.status_message:
        return StatusLine(selected, state.status_message, position, logo, is_error=state.status_is_error)
    return StatusLine(selected, details, position, logo)


__all__ = ["StatusLine", "derive_status", "format_mtime"]
