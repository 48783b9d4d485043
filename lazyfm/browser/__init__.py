"""Browser core: listing windowing, interaction modes and task protocol."""

from __future__ import annotations

from .command_bar import parse_command
from .listing import ListingState
from .machine import BrowserMachine, BrowserState, content_rows, pane_widths
from .modes import IDLE, Mode
from .status import StatusLine, derive_status
from .viewport import ViewportWindow

__all__ = [
    "BrowserMachine",
    "BrowserState",
    "IDLE",
    "ListingState",
    "Mode",
    "StatusLine",
    "ViewportWindow",
    "content_rows",
    "derive_status",
    "pane_widths",
    "parse_command",
]
