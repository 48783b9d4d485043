"""Main interactive event loop for the terminal UI.

One thread owns the browser state. Each iteration folds finished task
messages into the machine, follows terminal resizes, redraws when something
changed and then waits briefly for a key.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..browser.machine import BrowserMachine
from ..browser.messages import OperationFailed
from ..input import read_key
from ..render import RenderContext, build_frame
from .tasks import TaskDispatcher
from .terminal import TerminalController, terminal_size


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int = 50


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF and CRLF into one ``ENTER``.

    Returns the key to handle (``None`` to drop it) and the new skip flag.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    machine: BrowserMachine,
    dispatcher: TaskDispatcher,
    terminal: TerminalController,
    stdin_fd: int,
    render_context: RenderContext,
    launch_editor: Callable[[Path], str | None],
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the TUI until the machine asks to quit."""
    state = machine.state
    dispatcher.submit(machine.start())
    skip_next_lf = False
    dirty = True

    with terminal.raw_mode():
        while not state.quit_requested:
            columns, rows = terminal_size()
            if (columns, rows) != (state.term_columns, state.term_rows):
                dispatcher.submit(machine.resize(columns, rows))
                dirty = True

            for message in dispatcher.drain_messages():
                dispatcher.submit(machine.apply(message))
                dirty = True
            if state.quit_requested:
                break

            edit_target = machine.take_edit_request()
            if edit_target is not None:
                error = launch_editor(edit_target)
                if error:
                    dispatcher.submit(machine.apply(OperationFailed(description=error)))
                else:
                    dispatcher.submit(machine.editor_closed())
                dirty = True

            if dirty:
                terminal.write_frame(build_frame(render_context))
                dirty = False

            key = read_key(stdin_fd, timeout_ms=timing.key_timeout_ms)
            if not key:
                continue
            normalized, skip_next_lf = normalize_enter(key, skip_next_lf)
            if normalized is None:
                continue
            dispatcher.submit(machine.handle_key(normalized))
            dirty = True


__all__ = ["RuntimeLoopTiming", "normalize_enter", "run_main_loop"]
