"""The browser state machine.

``BrowserMachine`` owns every piece of mutable browser state and is driven
from a single thread. Keys and resize events go in through ``handle_key`` and
``resize``; completed tasks come back through ``apply``. Each of these returns
the task requests it wants run, and the machine never performs I/O itself.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..ansi import preview_lines
from ..filesystem.types import DirectoryEntry
from . import keys
from .command_bar import (
    KNOWN_VERBS,
    VERB_CD,
    VERB_COPY,
    VERB_DELETE,
    VERB_FIND,
    VERB_MKDIR,
    VERB_RENAME,
    VERB_TOUCH,
    VERB_UNZIP,
    VERB_ZIP,
    parse_command,
)
from .keys import KeyComboBinding, KeyComboRegistry
from .listing import ListingState
from .messages import (
    ComputeSize,
    ContentLoaded,
    CopyPath,
    CreateEntry,
    DeleteEntry,
    DirectoryPreviewLoaded,
    DuplicateEntry,
    FindByName,
    ListingFailed,
    ListingLoaded,
    MoveEntry,
    Notice,
    OperationFailed,
    PreviewDirectory,
    PreviewFailed,
    ReadContent,
    RefreshListing,
    RenameEntry,
    SelectionWritten,
    SizeComputed,
    TaskMessage,
    TaskRequest,
    UnzipEntry,
    WriteSelection,
    ZipEntry,
)
from .modes import (
    IDLE,
    CommandBar,
    CreatingDirectory,
    CreatingFile,
    DeleteConfirm,
    Finding,
    Idle,
    Mode,
    Moving,
    Renaming,
    captures_text,
    navigation_enabled,
)
from .viewport import ViewportWindow

logger = logging.getLogger(__name__)

STATUS_ROWS = 1
PREVIEW_HEADER_ROWS = 1
PANE_LISTING = "listing"
PANE_PREVIEW = "preview"
AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def content_rows(term_rows: int) -> int:
    """Rows available to both panes once the status bar is drawn."""
    return max(1, term_rows - STATUS_ROWS)


def preview_rows(term_rows: int) -> int:
    """Preview text rows; the first pane row holds the preview title."""
    return max(1, content_rows(term_rows) - PREVIEW_HEADER_ROWS)


def pane_widths(term_columns: int) -> tuple[int, int]:
    """Return ``(listing, preview)`` widths; one column goes to the divider."""
    listing = max(1, term_columns // 2)
    return listing, max(1, term_columns - listing - 1)


@dataclass
class BrowserState:
    """Everything the renderer and the status line read."""

    cwd: Path
    listing: ListingState
    mode: Mode = IDLE
    pending_text: str = ""
    show_hidden: bool = False
    listing_filter: str = "all"
    previous_dir: Path | None = None
    showing_found: bool = False
    status_message: str = ""
    status_is_error: bool = False
    preview_kind: str = "empty"
    preview_title: str = ""
    preview_lines: list[str] = field(default_factory=list)
    preview_viewport: ViewportWindow = field(default_factory=lambda: ViewportWindow(height=1))
    preview_image_path: Path | None = None
    active_pane: str = PANE_LISTING
    requested_generation: int = 0
    applied_generation: int = 0
    preview_generation: int = 0
    pending_g: bool = False
    term_columns: int = 80
    term_rows: int = 24
    quit_requested: bool = False
    edit_requested: Path | None = None

    def selected(self) -> DirectoryEntry | None:
        return self.listing.selected()


class BrowserMachine:
    """Mode-aware key handling and task-result application for one browser."""

    def __init__(
        self,
        start_dir: Path,
        *,
        show_hidden: bool = False,
        term_columns: int = 80,
        term_rows: int = 24,
        selection_path: Path | None = None,
        recent_logs: Callable[[], list[str]] | None = None,
        help_lines: list[str] | None = None,
    ) -> None:
        rows = content_rows(term_rows)
        self.state = BrowserState(
            cwd=start_dir,
            listing=ListingState(height=rows),
            show_hidden=show_hidden,
            preview_viewport=ViewportWindow(height=preview_rows(term_rows)),
            term_columns=term_columns,
            term_rows=term_rows,
        )
        self.selection_path = selection_path
        self._recent_logs = recent_logs
        self._help_lines = list(help_lines or [])
        self._navigation = self._build_navigation_bindings()
        self._idle_commands = self._build_idle_bindings()

    # ------------------------------------------------------------------
    # Entry points

    def start(self) -> list[TaskRequest]:
        return [self._refresh(self.state.cwd)]

    def handle_key(self, key: str) -> list[TaskRequest]:
        """Apply one key token and return the tasks it triggers."""
        if not key:
            return []
        return self._handle_key(key) + self._visible_size_requests()

    def _handle_key(self, key: str) -> list[TaskRequest]:
        state = self.state
        if key == keys.KEY_FORCE_QUIT:
            state.quit_requested = True
            return []

        pending_g = state.pending_g
        state.pending_g = False

        if captures_text(state.mode):
            return self._handle_text_key(key)

        if key == keys.KEY_ESCAPE:
            return self._handle_escape()

        if key.startswith("MOUSE_"):
            return self._handle_mouse(key) if navigation_enabled(state.mode) else []

        if isinstance(state.mode, Moving) and key == keys.KEY_SUBMIT:
            return self._submit_move(state.mode)

        if key == keys.KEY_TOP_PREFIX:
            if pending_g:
                return self._goto_top()
            state.pending_g = True
            return []

        if navigation_enabled(state.mode) and key in self._navigation:
            return self._navigation.dispatch(key) or []

        if isinstance(state.mode, Idle):
            return self._idle_commands.dispatch(key) or []
        return []

    def apply(self, message: TaskMessage) -> list[TaskRequest]:
        """Fold one task result into state; returns follow-up tasks."""
        if isinstance(message, ListingLoaded):
            return self._apply_listing(message)
        if isinstance(message, ListingFailed):
            return self._apply_listing_failure(message)
        if isinstance(message, SizeComputed):
            self._apply_size(message)
            return []
        if isinstance(message, ContentLoaded):
            self._apply_content(message)
            return []
        if isinstance(message, DirectoryPreviewLoaded):
            self._apply_directory_preview(message)
            return []
        if isinstance(message, PreviewFailed):
            if message.generation != self.state.preview_generation:
                logger.debug("dropping stale preview failure %d", message.generation)
                return []
            self._set_status(message.description, is_error=True)
            return []
        if isinstance(message, OperationFailed):
            self._exit_mode()
            self._set_status(message.description, is_error=True)
            if message.refresh:
                return [self._refresh(self.state.cwd)]
            return []
        if isinstance(message, Notice):
            self._set_status(message.text)
            return []
        if isinstance(message, SelectionWritten):
            self.state.quit_requested = True
            return []
        raise TypeError(f"unknown task message: {message!r}")

    def resize(self, term_columns: int, term_rows: int) -> list[TaskRequest]:
        """Recompute pane geometry; the selected entry does not change."""
        state = self.state
        state.term_columns = max(1, term_columns)
        state.term_rows = max(1, term_rows)
        rows = content_rows(state.term_rows)
        state.listing.resize(rows)
        state.preview_viewport.height = preview_rows(state.term_rows)
        state.preview_viewport.clamp(len(state.preview_lines))
        requests: list[TaskRequest] = self._visible_size_requests()
        if state.preview_kind == "image" and state.preview_image_path is not None:
            # Image art is laid out for a fixed width, so draw it again.
            requests.append(self._read_content(state.preview_image_path))
        return requests

    def take_edit_request(self) -> Path | None:
        path = self.state.edit_requested
        self.state.edit_requested = None
        return path

    def editor_closed(self) -> list[TaskRequest]:
        return [self._refresh(self.state.cwd)]

    # ------------------------------------------------------------------
    # Request builders

    def _refresh(self, directory: Path, notice: str = "") -> RefreshListing:
        """New listing request; every call supersedes the previous ones."""
        state = self.state
        state.requested_generation += 1
        return RefreshListing(
            generation=state.requested_generation,
            directory=directory,
            show_hidden=state.show_hidden,
            listing_filter=state.listing_filter,
            notice=notice,
        )

    def _read_content(self, path: Path) -> ReadContent:
        self.state.preview_generation += 1
        _listing_width, preview_width = pane_widths(self.state.term_columns)
        return ReadContent(generation=self.state.preview_generation, path=path, width=preview_width)

    # ------------------------------------------------------------------
    # Navigation (Idle and Moving)

    def _build_navigation_bindings(self) -> KeyComboRegistry:
        return KeyComboRegistry().register_bindings(
            KeyComboBinding(keys.KEYS_DOWN, self._move_down),
            KeyComboBinding(keys.KEYS_UP, self._move_up),
            KeyComboBinding((keys.KEY_BOTTOM, keys.KEY_JUMP_BOTTOM), self._goto_bottom),
            KeyComboBinding((keys.KEY_JUMP_TOP,), self._goto_top),
            KeyComboBinding(keys.KEYS_BACK, self._go_back),
            KeyComboBinding(keys.KEYS_OPEN, self._open_selected),
            KeyComboBinding((keys.KEY_HOME,), lambda: self._change_directory(Path.home())),
            KeyComboBinding((keys.KEY_ROOT,), lambda: self._change_directory(Path(self.state.cwd.anchor or os.sep))),
            KeyComboBinding((keys.KEY_PREVIOUS_DIR,), self._go_previous),
        )

    def _preview_active(self) -> bool:
        return self.state.active_pane == PANE_PREVIEW

    def _move_down(self) -> list[TaskRequest]:
        if self._preview_active():
            self.state.preview_viewport.line_down(1, len(self.state.preview_lines))
        else:
            self.state.listing.move_down()
        return []

    def _move_up(self) -> list[TaskRequest]:
        if self._preview_active():
            self.state.preview_viewport.line_up(1, len(self.state.preview_lines))
        else:
            self.state.listing.move_up()
        return []

    def _goto_top(self) -> list[TaskRequest]:
        if self._preview_active():
            self.state.preview_viewport.goto_top()
        else:
            self.state.listing.goto_top()
        return []

    def _goto_bottom(self) -> list[TaskRequest]:
        if self._preview_active():
            self.state.preview_viewport.goto_bottom(len(self.state.preview_lines))
        else:
            self.state.listing.goto_bottom()
        return []

    def _change_directory(self, directory: Path) -> list[TaskRequest]:
        # cwd moves only when the listing for ``directory`` is applied.
        return [self._refresh(directory)]

    def _go_back(self) -> list[TaskRequest]:
        state = self.state
        if state.showing_found:
            return [self._refresh(state.cwd)]
        parent = state.cwd.parent
        if parent == state.cwd:
            return []
        return self._change_directory(parent)

    def _go_previous(self) -> list[TaskRequest]:
        if self.state.previous_dir is None:
            return []
        return self._change_directory(self.state.previous_dir)

    def _open_selected(self) -> list[TaskRequest]:
        entry = self.state.selected()
        if entry is None:
            return []
        if entry.is_dir:
            return self._change_directory(entry.path)
        return [self._read_content(entry.path)]

    def _handle_mouse(self, key: str) -> list[TaskRequest]:
        parsed = keys.parse_mouse_key(key)
        if parsed is None:
            return []
        event, col, _row = parsed
        if event not in (keys.MOUSE_WHEEL_UP, keys.MOUSE_WHEEL_DOWN):
            return []
        state = self.state
        listing_width, _preview_width = pane_widths(state.term_columns)
        if col > listing_width + 1:
            total = len(state.preview_lines)
            if event == keys.MOUSE_WHEEL_UP:
                state.preview_viewport.line_up(keys.WHEEL_SCROLL_ROWS, total)
            else:
                state.preview_viewport.line_down(keys.WHEEL_SCROLL_ROWS, total)
            return []
        if event == keys.MOUSE_WHEEL_UP:
            state.listing.move_up()
        else:
            state.listing.move_down()
        return []

    # ------------------------------------------------------------------
    # Idle-only commands

    def _build_idle_bindings(self) -> KeyComboRegistry:
        return KeyComboRegistry().register_bindings(
            KeyComboBinding((keys.KEY_RENAME,), lambda: self._enter_target_mode(Renaming)),
            KeyComboBinding((keys.KEY_MOVE,), self._begin_move),
            KeyComboBinding((keys.KEY_DELETE,), lambda: self._enter_target_mode(DeleteConfirm)),
            KeyComboBinding((keys.KEY_NEW_FILE,), lambda: self._enter_text_mode(CreatingFile())),
            KeyComboBinding((keys.KEY_NEW_DIRECTORY,), lambda: self._enter_text_mode(CreatingDirectory())),
            KeyComboBinding((keys.KEY_FIND,), lambda: self._enter_text_mode(Finding())),
            KeyComboBinding((keys.KEY_COMMAND_BAR,), lambda: self._enter_text_mode(CommandBar())),
            KeyComboBinding((keys.KEY_TOGGLE_HIDDEN,), self._toggle_hidden),
            KeyComboBinding((keys.KEY_DIRECTORIES_ONLY,), lambda: self._toggle_filter("directories")),
            KeyComboBinding((keys.KEY_FILES_ONLY,), lambda: self._toggle_filter("files")),
            KeyComboBinding((keys.KEY_COPY_PATH,), self._copy_path),
            KeyComboBinding((keys.KEY_ZIP,), lambda: self._selection_request(ZipEntry, "Zipped")),
            KeyComboBinding((keys.KEY_UNZIP,), lambda: self._selection_request(UnzipEntry, "Unzipped")),
            KeyComboBinding((keys.KEY_DUPLICATE,), lambda: self._selection_request(DuplicateEntry, "Copied")),
            KeyComboBinding((keys.KEY_EDIT,), self._edit_selected),
            KeyComboBinding((keys.KEY_PREVIEW_DIRECTORY,), self._preview_directory),
            KeyComboBinding((keys.KEY_LOGS,), self._show_logs),
            KeyComboBinding((keys.KEY_HELP,), self._show_help),
            KeyComboBinding((keys.KEY_SWITCH_PANE,), self._switch_pane),
            KeyComboBinding(keys.KEYS_QUIT, self._quit),
        )

    def _enter_text_mode(self, mode: Mode) -> list[TaskRequest]:
        self.state.mode = mode
        self.state.pending_text = ""
        return []

    def _enter_target_mode(self, mode_type: type) -> list[TaskRequest]:
        entry = self.state.selected()
        if entry is None:
            return []
        return self._enter_text_mode(mode_type(target=entry))

    def _begin_move(self) -> list[TaskRequest]:
        entry = self.state.selected()
        if entry is None:
            return []
        self.state.mode = Moving(target=entry, origin_dir=self.state.cwd)
        self.state.pending_text = ""
        return []

    def _toggle_hidden(self) -> list[TaskRequest]:
        self.state.show_hidden = not self.state.show_hidden
        return [self._refresh(self.state.cwd)]

    def _toggle_filter(self, listing_filter: str) -> list[TaskRequest]:
        state = self.state
        state.listing_filter = "all" if state.listing_filter == listing_filter else listing_filter
        return [self._refresh(state.cwd)]

    def _copy_path(self) -> list[TaskRequest]:
        entry = self.state.selected()
        if entry is None:
            return []
        return [CopyPath(path=entry.path)]

    def _selection_request(self, request_type: type, verb: str) -> list[TaskRequest]:
        entry = self.state.selected()
        if entry is None:
            return []
        return [request_type(path=entry.path, relist=self._refresh(self.state.cwd, f"{verb} {entry.name}"))]

    def _edit_selected(self) -> list[TaskRequest]:
        entry = self.state.selected()
        if entry is None:
            return []
        if self.selection_path is not None:
            return [WriteSelection(selection_file=self.selection_path, path=entry.path)]
        if entry.is_dir:
            return []
        self.state.edit_requested = entry.path
        return []

    def _preview_directory(self) -> list[TaskRequest]:
        entry = self.state.selected()
        if entry is None or not entry.is_dir:
            return []
        self.state.preview_generation += 1
        return [
            PreviewDirectory(
                generation=self.state.preview_generation,
                path=entry.path,
                show_hidden=self.state.show_hidden,
            )
        ]

    def _show_text_preview(self, kind: str, title: str, lines: list[str]) -> None:
        state = self.state
        # Outstanding file reads must not replace this panel.
        state.preview_generation += 1
        state.preview_kind = kind
        state.preview_title = title
        state.preview_lines = lines
        state.preview_image_path = None
        state.preview_viewport.goto_top()

    def _show_logs(self) -> list[TaskRequest]:
        lines = self._recent_logs() if self._recent_logs is not None else []
        self._show_text_preview("logs", "Logs", lines or ["No log records yet."])
        return []

    def _show_help(self) -> list[TaskRequest]:
        self._show_text_preview("help", "Help", list(self._help_lines))
        return []

    def _switch_pane(self) -> list[TaskRequest]:
        state = self.state
        state.active_pane = PANE_LISTING if state.active_pane == PANE_PREVIEW else PANE_PREVIEW
        return []

    def _quit(self) -> list[TaskRequest]:
        self.state.quit_requested = True
        return []

    def _handle_escape(self) -> list[TaskRequest]:
        state = self.state
        if not isinstance(state.mode, Idle):
            self._exit_mode()
            return []
        state.status_message = ""
        state.status_is_error = False
        state.active_pane = PANE_LISTING
        if state.showing_found:
            return [self._refresh(state.cwd)]
        return []

    # ------------------------------------------------------------------
    # Text modes

    def _exit_mode(self) -> None:
        self.state.mode = IDLE
        self.state.pending_text = ""

    def _handle_text_key(self, key: str) -> list[TaskRequest]:
        state = self.state
        if key == keys.KEY_ESCAPE:
            self._exit_mode()
            return []
        if key == keys.KEY_SUBMIT:
            return self._submit()
        if key == keys.KEY_DELETE_CHAR:
            state.pending_text = state.pending_text[:-1]
        elif key == keys.KEY_CLEAR_TEXT:
            state.pending_text = ""
        elif keys.is_text_input(key):
            state.pending_text += key
        return []

    def _submit(self) -> list[TaskRequest]:
        state = self.state
        mode = state.mode
        text = state.pending_text.strip()
        self._exit_mode()

        if isinstance(mode, Renaming):
            return self._rename(mode.target, text)
        if isinstance(mode, DeleteConfirm):
            if text.lower() not in AFFIRMATIVE_ANSWERS:
                return []
            return self._delete(mode.target)
        if isinstance(mode, CreatingFile):
            return self._create(text, is_dir=False)
        if isinstance(mode, CreatingDirectory):
            return self._create(text, is_dir=True)
        if isinstance(mode, Finding):
            return self._find(text)
        if isinstance(mode, CommandBar):
            return self._run_command(text)
        return []

    def _submit_move(self, mode: Moving) -> list[TaskRequest]:
        self._exit_mode()
        target = mode.target
        destination = self.state.cwd / target.name
        return [
            MoveEntry(
                src=target.path,
                dst=destination,
                remove_source=True,
                relist=self._refresh(self.state.cwd, f"Moved {target.name}"),
            )
        ]

    def _rename(self, target: DirectoryEntry, name: str) -> list[TaskRequest]:
        if not name:
            return []
        if os.sep in name or (os.altsep and os.altsep in name) or name in {".", ".."}:
            # A rename stays in the target's directory; moves go through ``M``.
            self._set_status(f"Invalid name: {name}", is_error=True)
            return []
        return [
            RenameEntry(
                src=target.path,
                dst=target.path.parent / name,
                relist=self._refresh(self.state.cwd, f"Renamed {target.name} to {name}"),
            )
        ]

    def _delete(self, target: DirectoryEntry) -> list[TaskRequest]:
        return [DeleteEntry(path=target.path, relist=self._refresh(self.state.cwd, f"Deleted {target.name}"))]

    def _create(self, name: str, *, is_dir: bool) -> list[TaskRequest]:
        if not name:
            return []
        return [
            CreateEntry(
                path=self.state.cwd / name,
                is_dir=is_dir,
                relist=self._refresh(self.state.cwd, f"Created {name}"),
            )
        ]

    def _find(self, query: str) -> list[TaskRequest]:
        if not query:
            return []
        state = self.state
        state.requested_generation += 1
        self._set_status(f"Searching for {query}...")
        return [FindByName(generation=state.requested_generation, query=query, root=state.cwd)]

    def _resolve_argument(self, arg: str) -> Path:
        return Path(os.path.normpath(self.state.cwd / Path(arg).expanduser()))

    def _run_command(self, line: str) -> list[TaskRequest]:
        verb, arg = parse_command(line)
        if verb not in KNOWN_VERBS:
            logger.debug("ignoring unknown command %r", verb)
            return []
        state = self.state
        entry = state.selected()

        if verb == VERB_MKDIR:
            return self._create(arg, is_dir=True)
        if verb == VERB_TOUCH:
            return self._create(arg, is_dir=False)
        if verb == VERB_CD:
            return self._change_directory(self._resolve_argument(arg)) if arg else []
        if verb == VERB_FIND:
            return self._find(arg)
        if entry is None:
            return []
        if verb == VERB_RENAME:
            return self._rename(entry, arg)
        if verb == VERB_DELETE:
            return self._delete(entry)
        if verb == VERB_COPY:
            if not arg:
                return []
            return [
                MoveEntry(
                    src=entry.path,
                    dst=self._resolve_argument(arg) / entry.name,
                    remove_source=False,
                    relist=self._refresh(state.cwd, f"Copied {entry.name} to {arg}"),
                )
            ]
        if verb == VERB_ZIP:
            return self._selection_request(ZipEntry, "Zipped")
        if verb == VERB_UNZIP:
            return self._selection_request(UnzipEntry, "Unzipped")
        return []

    # ------------------------------------------------------------------
    # Task results

    def _set_status(self, text: str, is_error: bool = False) -> None:
        self.state.status_message = text
        self.state.status_is_error = is_error

    def _is_current_listing(self, generation: int) -> bool:
        state = self.state
        return generation == state.requested_generation and generation > state.applied_generation

    def _apply_listing(self, message: ListingLoaded) -> list[TaskRequest]:
        state = self.state
        if not self._is_current_listing(message.generation):
            logger.debug(
                "dropping stale listing %d (requested %d, applied %d)",
                message.generation,
                state.requested_generation,
                state.applied_generation,
            )
            return []
        state.applied_generation = message.generation
        if not message.found and message.directory != state.cwd:
            state.previous_dir = state.cwd
            state.cwd = message.directory
        state.showing_found = message.found
        state.listing.set_listing(message.entries)
        self._drop_vanished_target()
        if message.found:
            self._set_status(f"{len(message.entries)} matches")
        elif message.notice:
            self._set_status(message.notice)
        return self._visible_size_requests()

    def _visible_size_requests(self) -> list[TaskRequest]:
        """Size tasks for rows that just became visible in the applied listing."""
        state = self.state
        if state.applied_generation == 0:
            return []
        listing = state.listing
        return [
            ComputeSize(generation=state.applied_generation, index=index, path=listing.entries[index].path)
            for index in listing.claim_visible_sizes()
        ]

    def _drop_vanished_target(self) -> None:
        mode = self.state.mode
        if not isinstance(mode, (Renaming, DeleteConfirm)):
            return
        if self.state.listing.index_of(mode.target.path) is not None:
            return
        self._exit_mode()
        self._set_status(f"{mode.target.name} no longer exists")

    def _apply_listing_failure(self, message: ListingFailed) -> list[TaskRequest]:
        if not self._is_current_listing(message.generation):
            logger.debug("dropping stale listing failure %d", message.generation)
            return []
        self.state.applied_generation = message.generation
        self._exit_mode()
        self._set_status(message.description, is_error=True)
        # Sizes still in flight carry the old generation and will be dropped.
        self.state.listing.forget_pending_sizes()
        return self._visible_size_requests()

    def _apply_size(self, message: SizeComputed) -> None:
        if message.generation != self.state.applied_generation:
            logger.debug("dropping size for stale listing %d", message.generation)
            return
        if not self.state.listing.apply_size(message.index, message.path, message.label):
            logger.debug("dropping size for moved entry %s", message.path)

    def _apply_content(self, message: ContentLoaded) -> None:
        state = self.state
        if message.generation != state.preview_generation:
            logger.debug("dropping stale preview of %s", message.path)
            return
        content = message.content
        state.preview_kind = content.kind
        state.preview_title = str(message.path)
        state.preview_lines = preview_lines(content.text)
        state.preview_image_path = content.image_path
        state.preview_viewport.goto_top()

    def _apply_directory_preview(self, message: DirectoryPreviewLoaded) -> None:
        if message.generation != self.state.preview_generation:
            logger.debug("dropping stale directory preview of %s", message.path)
            return
        lines = [f"{entry.name}/" if entry.is_dir else entry.name for entry in message.entries]
        self._show_text_preview("directory", str(message.path), lines or ["(empty directory)"])


__all__ = [
    "AFFIRMATIVE_ANSWERS",
    "BrowserMachine",
    "BrowserState",
    "PANE_LISTING",
    "PANE_PREVIEW",
    "content_rows",
    "pane_widths",
]
