from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from filefinder.ops.listing import DirectoryEntry

COLUMNS = ("Name", "Size", "Type", "Date Modified")
NAME_COLUMN, SIZE_COLUMN, TYPE_COLUMN, MODIFIED_COLUMN = range(len(COLUMNS))

RawNameRole = Qt.UserRole
EntryRole = Qt.UserRole + 1


class DirectoryTableModel(QAbstractTableModel):
    """Read-only table over the entries of the current listing."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._entries: tuple[DirectoryEntry, ...] = ()

    def set_entries(self, entries: Sequence[DirectoryEntry]) -> None:
        self.beginResetModel()
        self._entries = tuple(entries)
        self.endResetModel()

    def entry(self, row: int) -> DirectoryEntry | None:
        if 0 <= row < len(self._entries):
            return self._entries[row]
        return None

    def rowCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._entries)

    def columnCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(COLUMNS)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole and 0 <= section < len(COLUMNS):
            return COLUMNS[section]
        return None

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        entry = self.entry(index.row())
        if entry is None:
            return None
        if role == Qt.DisplayRole:
            column = index.column()
            if column == NAME_COLUMN:
                return entry.display_label
            if column == SIZE_COLUMN:
                return entry.size_text
            if column == TYPE_COLUMN:
                return entry.kind
            if column == MODIFIED_COLUMN:
                return entry.modified_text
            return None
        if role == Qt.TextAlignmentRole and index.column() == SIZE_COLUMN:
            return Qt.AlignRight | Qt.AlignVCenter
        if role == Qt.ToolTipRole and index.column() == NAME_COLUMN:
            return str(entry.path)
        if role == EntryRole:
            return entry
        if role == RawNameRole:
            return entry.raw_name
        return None

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable
