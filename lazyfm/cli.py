"""Command-line front door for lazyfm.

Parses CLI options, layers them over the persisted config, resolves the
start directory and launches the interactive browser.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .preview import DEFAULT_SYNTAX_STYLE
from .runtime import run_browser
from .runtime.app import BrowserOptions
from .runtime.config import BrowserSettings, load_settings
from .ui_theme import available_theme_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyfm",
        description="Browse, preview and manage files in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument("--style", default=None, help="Pygments style name for code previews.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--show-hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show dot files (default: from config).",
    )
    parser.add_argument(
        "--selection-path",
        default=None,
        help="On edit, write the selected path to this file and exit instead of opening $EDITOR.",
    )
    parser.add_argument("--enable-logging", action="store_true", help="Write a debug log file.")
    parser.add_argument("--icons", action="store_true", help="Show nerd-font icons.")
    return parser


def resolve_options(
    args: argparse.Namespace,
    settings: BrowserSettings,
    default_path: Path | None = None,
) -> BrowserOptions:
    """Merge parsed flags over ``settings``; flags win when given."""
    if args.path is not None:
        start = Path(args.path).expanduser()
    elif default_path is not None:
        start = default_path
    elif settings.start_dir is not None:
        start = settings.start_dir
    else:
        start = Path.cwd()
    if not start.exists():
        raise SystemExit(f"Path not found: {start}")
    start = start.resolve()
    if not start.is_dir():
        start = start.parent

    return BrowserOptions(
        start_dir=start,
        style=args.style or settings.syntax_style or DEFAULT_SYNTAX_STYLE,
        theme=args.theme or settings.theme,
        show_hidden=settings.show_hidden if args.show_hidden is None else args.show_hidden,
        show_icons=args.icons or settings.show_icons,
        pretty_markdown=settings.pretty_markdown,
        enable_logging=args.enable_logging or settings.enable_logging,
        selection_path=Path(args.selection_path).expanduser() if args.selection_path else None,
    )


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazyfm.

    ``default_path`` is primarily for tests; when omitted the configured start
    directory or the current working directory is used.
    """
    args = build_parser().parse_args(argv)
    run_browser(resolve_options(args, load_settings(), default_path))


if __name__ == "__main__":
    main()
