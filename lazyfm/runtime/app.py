"""Wire the browser machine, task workers and terminal into one session."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from ..browser.machine import BrowserMachine
from ..filesystem import DirectoryService
from ..preview import DEFAULT_SYNTAX_STYLE, ContentRenderer
from ..preview.syntax import normalize_style
from ..render import RenderContext
from ..render.help import help_lines
from ..ui_theme import resolve_theme
from .config import save_show_hidden
from .editor import launch_editor
from .logs import configure_logging
from .loop import run_main_loop
from .tasks import TaskDispatcher, TaskServices
from .terminal import TerminalController, terminal_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserOptions:
    """Fully resolved session options (config merged with CLI flags)."""

    start_dir: Path
    style: str = DEFAULT_SYNTAX_STYLE
    theme: str | None = None
    show_hidden: bool = False
    show_icons: bool = False
    pretty_markdown: bool = True
    enable_logging: bool = False
    selection_path: Path | None = None


def run_browser(options: BrowserOptions) -> None:
    """Run one interactive session until the user quits."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("lazyfm needs an interactive terminal.")

    recent_logs = configure_logging(options.enable_logging)
    theme = resolve_theme(options.theme)
    columns, rows = terminal_size()
    machine = BrowserMachine(
        options.start_dir,
        show_hidden=options.show_hidden,
        term_columns=columns,
        term_rows=rows,
        selection_path=options.selection_path,
        recent_logs=recent_logs.lines,
        help_lines=help_lines(theme),
    )
    services = TaskServices(
        directory=DirectoryService(),
        renderer=ContentRenderer(style=normalize_style(options.style), pretty_markdown=options.pretty_markdown),
    )
    dispatcher = TaskDispatcher(services)
    terminal = TerminalController(stdin_fd, stdout_fd)
    logger.info("browsing %s", options.start_dir)

    def edit(target: Path) -> str | None:
        return launch_editor(target, terminal.disable_tui_mode, terminal.enable_tui_mode)

    try:
        run_main_loop(
            machine,
            dispatcher,
            terminal,
            stdin_fd,
            RenderContext(state=machine.state, theme=theme, show_icons=options.show_icons),
            launch_editor=edit,
        )
    finally:
        dispatcher.shutdown()
        if machine.state.show_hidden != options.show_hidden:
            save_show_hidden(machine.state.show_hidden)


__all__ = ["BrowserOptions", "run_browser"]
