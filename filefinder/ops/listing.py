from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
import logging
import os
from pathlib import Path
import stat

from filefinder.ops.errors import ListError

_logger = logging.getLogger(__name__)

FOLDER_GLYPH = "\U0001F4C1"
FILE_GLYPH = "\U0001F4C4"
DATE_FORMAT = "%m/%d/%Y %H:%M"

_UNITS = (("KB", 1024), ("MB", 1024**2), ("GB", 1024**3))


@dataclass(frozen=True)
class DirectoryEntry:
    """One visible child of a listed directory.

    ``raw_name`` is the name on disk and is what every filesystem call uses;
    ``display_label`` carries the folder/file glyph and is only for rendering.
    """

    directory: Path
    raw_name: str
    display_label: str
    is_directory: bool
    size_bytes: int | None
    kind: str
    modified_at: datetime

    @property
    def path(self) -> Path:
        return self.directory / self.raw_name

    @property
    def size_text(self) -> str:
        if self.size_bytes is None:
            return "--"
        return format_size(self.size_bytes)

    @property
    def modified_text(self) -> str:
        return format_modified(self.modified_at)


def list_directory(directory: Path | str) -> list[DirectoryEntry]:
    """List the visible immediate children of ``directory``.

    Folders come first, then files, each group ordered case-insensitively
    by name with the raw name as tie-break. Raises ``ListError`` when the
    directory is missing, not a directory, or unreadable.
    """
    directory = Path(directory)
    try:
        if not directory.is_dir():
            raise ListError(directory, f"Cannot access directory: {directory}")
        with os.scandir(directory) as it:
            children = list(it)
    except OSError as exc:
        raise ListError(directory, f"Cannot access directory: {directory}") from exc

    entries: list[DirectoryEntry] = []
    for child in children:
        entry = _build_entry(directory, child)
        if entry is not None:
            entries.append(entry)
    entries.sort(key=_sort_key)
    _logger.debug("Listed %s: %d visible entries", directory, len(entries))
    return entries


def file_kind(name: str) -> str:
    last_dot = name.rfind(".")
    if 0 < last_dot < len(name) - 1:
        return f"{name[last_dot + 1:].upper()} File"
    return "File"


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    for unit, divisor in _UNITS:
        if size < divisor * 1024:
            break
    scaled = (Decimal(size) / divisor).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{scaled} {unit}"


def format_modified(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


def is_hidden(name: str, st: os.stat_result | None = None) -> bool:
    if name.startswith("."):
        return True
    attributes = getattr(st, "st_file_attributes", 0) if st is not None else 0
    return bool(attributes & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0))


def _build_entry(directory: Path, child: os.DirEntry) -> DirectoryEntry | None:
    name = child.name
    try:
        st = child.stat()
    except OSError:
        # Dangling link or removed while listing.
        return None
    if is_hidden(name, st) or not os.access(child.path, os.R_OK):
        return None
    is_dir = stat.S_ISDIR(st.st_mode)
    glyph = FOLDER_GLYPH if is_dir else FILE_GLYPH
    return DirectoryEntry(
        directory=directory,
        raw_name=name,
        display_label=f"{glyph} {name}",
        is_directory=is_dir,
        size_bytes=None if is_dir else st.st_size,
        kind="Folder" if is_dir else file_kind(name),
        modified_at=datetime.fromtimestamp(st.st_mtime),
    )


def _sort_key(entry: DirectoryEntry) -> tuple[bool, str, str]:
    return (not entry.is_directory, entry.raw_name.lower(), entry.raw_name)
