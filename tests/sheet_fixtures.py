"""Shared builders for workbook files and pickers used across tests."""

from __future__ import annotations

import zipfile
from pathlib import Path

from openpyxl import Workbook

from lazysheets.arena import HandleArena
from lazysheets.widgets.picker import Picker
from lazysheets.widgets.picker_item import PickerItem


def write_workbook(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    """Save an ``.xlsx`` file with one worksheet per ``sheets`` entry, in order."""
    workbook = Workbook()
    for position, (name, rows) in enumerate(sheets.items()):
        worksheet = workbook.active if position == 0 else workbook.create_sheet()
        worksheet.title = name
        for row in rows:
            worksheet.append(row)
    workbook.save(str(path))
    return path


def replace_member(path: Path, member: str, data: bytes) -> Path:
    """Rewrite one archive member of an existing workbook, keeping the rest."""
    with zipfile.ZipFile(path) as archive:
        members = [(info, archive.read(info.filename)) for info in archive.infolist()]
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as archive:
        for info, payload in members:
            archive.writestr(info.filename, data if info.filename == member else payload)
    return path


def make_picker(
    labels: list[str],
    index: int | None = 0,
    *,
    focused: bool = True,
    callbacks: list[object | None] | None = None,
    arena: HandleArena | None = None,
):
    """Return ``(arena, picker_handle, picker)`` with one item per label."""
    arena = arena if arena is not None else HandleArena()
    picker_handle = arena.reserve()
    callbacks = callbacks if callbacks is not None else [None] * len(labels)
    item_handles = [
        arena.insert(PickerItem(arena, label, False, picker_handle, callback))
        for label, callback in zip(labels, callbacks)
    ]
    picker = Picker(arena, item_handles, "test", index, focused=focused)
    arena.fill(picker_handle, picker)
    return arena, picker_handle, picker
