"""Key tokens bound to browser commands, plus a small dispatch registry.

Tokens are the strings produced by ``lazyfm.input.read_key``: printable
characters as themselves, named keys such as ``ENTER`` or ``CTRL_D``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KEYS_DOWN = ("j", "DOWN")
KEYS_UP = ("k", "UP")
KEYS_BACK = ("h", "LEFT", "BACKSPACE")
KEYS_OPEN = ("l", "RIGHT", "ENTER")
KEY_TOP_PREFIX = "g"
KEY_BOTTOM = "G"
KEY_JUMP_TOP = "HOME"
KEY_JUMP_BOTTOM = "END"
KEY_HOME = "~"
KEY_ROOT = "/"
KEY_PREVIOUS_DIR = "-"

KEY_RENAME = "R"
KEY_MOVE = "M"
KEY_DELETE = "CTRL_D"
KEY_NEW_FILE = "n"
KEY_NEW_DIRECTORY = "N"
KEY_FIND = "CTRL_F"
KEY_COMMAND_BAR = ":"

KEY_TOGGLE_HIDDEN = "."
KEY_DIRECTORIES_ONLY = "S"
KEY_FILES_ONLY = "s"
KEY_COPY_PATH = "y"
KEY_ZIP = "Z"
KEY_UNZIP = "U"
KEY_DUPLICATE = "C"
KEY_EDIT = "E"
KEY_PREVIEW_DIRECTORY = "p"
KEY_LOGS = "O"
KEY_HELP = "?"
KEY_SWITCH_PANE = "TAB"
KEYS_QUIT = ("q",)
KEY_FORCE_QUIT = "CTRL_C"

KEY_ESCAPE = "ESC"
KEY_SUBMIT = "ENTER"
KEY_DELETE_CHAR = "BACKSPACE"
KEY_CLEAR_TEXT = "CTRL_U"

MOUSE_WHEEL_UP = "MOUSE_WHEEL_UP"
MOUSE_WHEEL_DOWN = "MOUSE_WHEEL_DOWN"
WHEEL_SCROLL_ROWS = 3


def parse_mouse_key(key: str) -> tuple[str, int, int] | None:
    """Split ``MOUSE_<EVENT>:<col>:<row>`` into its parts."""
    if not key.startswith("MOUSE_"):
        return None
    parts = key.split(":")
    if len(parts) != 3:
        return None
    try:
        return parts[0], int(parts[1]), int(parts[2])
    except ValueError:
        return None


def is_text_input(key: str) -> bool:
    """True for single printable characters that belong in a text buffer."""
    return len(key) == 1 and key.isprintable()


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], list | None]


class KeyComboRegistry:
    """Small key-dispatch table; unbound keys dispatch to ``None``."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], list | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> list | None:
        """Invoke the handler bound to ``key``; ``None`` means not bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


__all__ = [
    "KEYS_BACK",
    "KEYS_DOWN",
    "KEYS_OPEN",
    "KEYS_QUIT",
    "KEYS_UP",
    "KEY_BOTTOM",
    "KEY_CLEAR_TEXT",
    "KEY_COMMAND_BAR",
    "KEY_COPY_PATH",
    "KEY_DELETE",
    "KEY_DELETE_CHAR",
    "KEY_DIRECTORIES_ONLY",
    "KEY_DUPLICATE",
    "KEY_EDIT",
    "KEY_ESCAPE",
    "KEY_FILES_ONLY",
    "KEY_FIND",
    "KEY_FORCE_QUIT",
    "KEY_HELP",
    "KEY_HOME",
    "KEY_JUMP_BOTTOM",
    "KEY_JUMP_TOP",
    "KEY_LOGS",
    "KEY_MOVE",
    "KEY_NEW_DIRECTORY",
    "KEY_NEW_FILE",
    "KEY_PREVIEW_DIRECTORY",
    "KEY_PREVIOUS_DIR",
    "KEY_RENAME",
    "KEY_ROOT",
    "KEY_SUBMIT",
    "KEY_SWITCH_PANE",
    "KEY_TOGGLE_HIDDEN",
    "KEY_TOP_PREFIX",
    "KEY_UNZIP",
    "KEY_ZIP",
    "KeyComboBinding",
    "KeyComboRegistry",
    "MOUSE_WHEEL_DOWN",
    "MOUSE_WHEEL_UP",
    "WHEEL_SCROLL_ROWS",
    "is_text_input",
    "parse_mouse_key",
]
