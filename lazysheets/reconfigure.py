"""Activation commands that rebuild the visible widget tree.

Each command captures the path it will read and the dispatcher it will
modify. ``execute`` does the external read first; only when that succeeds
does it build the replacement widgets, register them and swap the widget
set in one step. A failed read leaves the dispatcher untouched and the
error propagates to whoever activated the command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .arena import Handle
from .dispatcher import Dispatcher
from .sources.fs import DEFAULT_EXTENSION, list_matching_files
from .sources.workbook import open_workbook, read_sheet
from .widgets.picker import Picker
from .widgets.picker_item import PickerItem
from .widgets.table import TableView

logger = logging.getLogger(__name__)

DEFAULT_MAX_PREVIEW_ROWS = 200


@dataclass(frozen=True)
class BrowseOptions:
    """Settings shared by every command of one browsing session."""

    extension: str = DEFAULT_EXTENSION
    show_hidden: bool = False
    max_preview_rows: int = DEFAULT_MAX_PREVIEW_ROWS


def install_picker(
    dispatcher: Dispatcher,
    title: str,
    entries: list[tuple[str, object | None]],
    *,
    back: object | None = None,
    empty_message: str = "",
) -> Handle:
    """Build a focused picker from ``(label, command)`` pairs and show it alone.

    Items and the picker are registered as receivers, items first. The
    previous widget set is released by ``replace_widgets``.
    """
    arena = dispatcher.arena
    picker_handle = arena.reserve()
    item_handles = [
        arena.insert(PickerItem(arena, label, selected=(position == 0), parent=picker_handle, callback=command))
        for position, (label, command) in enumerate(entries)
    ]
    picker = Picker(arena, item_handles, title, index=0, focused=True, back=back, empty_message=empty_message)
    arena.fill(picker_handle, picker)

    for handle in item_handles:
        dispatcher.register(handle)
    dispatcher.register(picker_handle)
    dispatcher.replace_widgets([picker_handle])
    return picker_handle


@dataclass
class OpenDirectoryCommand:
    """List the spreadsheet files of ``directory`` as a picker."""

    dispatcher: Dispatcher
    directory: Path
    options: BrowseOptions = field(default_factory=BrowseOptions)

    def execute(self) -> Handle:
        paths = list_matching_files(self.directory, self.options.extension, self.options.show_hidden)
        entries: list[tuple[str, object | None]] = [
            (path.name, OpenWorkbookCommand(self.dispatcher, path, self.options, back=self)) for path in paths
        ]
        handle = install_picker(
            self.dispatcher,
            str(self.directory),
            entries,
            empty_message=f"no {self.options.extension} files",
        )
        logger.info("listing %s: %d file(s)", self.directory, len(entries))
        return handle


@dataclass
class OpenWorkbookCommand:
    """Replace the file list with the sheet names of one workbook."""

    dispatcher: Dispatcher
    path: Path
    options: BrowseOptions = field(default_factory=BrowseOptions)
    back: object | None = None

    def execute(self) -> Handle:
        info = open_workbook(self.path)
        commands = [PreviewSheetCommand(self.dispatcher, self.path, name, self.options) for name in info.sheet_names]
        handle = install_picker(
            self.dispatcher,
            self.path.name,
            [(command.sheet_name, command) for command in commands],
            back=self.back,
            empty_message="no sheets",
        )
        for command in commands:
            command.sheet_list = handle
        return handle


@dataclass
class PreviewSheetCommand:
    """Show one sheet's cells below the sheet list that launched it."""

    dispatcher: Dispatcher
    path: Path
    sheet_name: str
    options: BrowseOptions = field(default_factory=BrowseOptions)
    sheet_list: Handle | None = None

    def execute(self) -> Handle:
        rows = read_sheet(self.path, self.sheet_name, self.options.max_preview_rows)
        table_handle = self.dispatcher.arena.insert(TableView(self.sheet_name, rows))
        kept = [self.sheet_list] if self.sheet_list is not None and self.dispatcher.arena.is_live(self.sheet_list) else []
        self.dispatcher.replace_widgets([*kept, table_handle])
        logger.info("previewing %s[%s]: %d row(s)", self.path.name, self.sheet_name, len(rows))
        return table_handle
