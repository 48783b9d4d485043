"""Open a file in ``$EDITOR`` while the TUI steps aside.

Raw mode and the alternate screen are released for the editor's lifetime and
restored afterwards, whatever the editor's exit status.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def editor_command(environ: dict[str, str] | None = None) -> list[str]:
    """Split ``$EDITOR`` into argv; empty when unset or blank."""
    env = os.environ if environ is None else environ
    return shlex.split(env.get("EDITOR", "").strip())


def launch_editor(
    target: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
    environ: dict[str, str] | None = None,
) -> str | None:
    """Run the editor on ``target``; returns an error message or ``None``."""
    cmd = editor_command(environ)
    if not cmd:
        return "$EDITOR not set"

    disable_tui_mode()
    try:
        completed = subprocess.run([*cmd, str(target)], check=False, cwd=target.parent)
    except OSError as exc:
        logger.warning("editor %s failed to start: %s", cmd[0], exc)
        return f"Failed to launch editor: {exc.strerror or exc}"
    finally:
        enable_tui_mode()
    if completed.returncode != 0:
        logger.info("editor exited with status %d", completed.returncode)
    return None


__all__ = ["editor_command", "launch_editor"]
