from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QAbstractItemView, QHeaderView, QTreeView, QVBoxLayout, QWidget

from filefinder.ui.models import (
    EntryRole,
    MODIFIED_COLUMN,
    NAME_COLUMN,
    SIZE_COLUMN,
    TYPE_COLUMN,
    DirectoryTableModel,
)


class FileTableView(QWidget):
    itemActivated = Signal(object)

    def __init__(self, model: DirectoryTableModel, parent=None) -> None:
        super().__init__(parent)
        self._model = model

        self.table = QTreeView()
        self.table.setModel(self._model)
        self.table.setRootIsDecorated(False)
        self.table.setItemsExpandable(False)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSortingEnabled(False)
        self.table.setAlternatingRowColors(True)
        self.table.setUniformRowHeights(True)

        header = self.table.header()
        header.setSectionsMovable(False)
        header.setStretchLastSection(False)
        header.setSectionResizeMode(NAME_COLUMN, QHeaderView.Stretch)
        header.setSectionResizeMode(SIZE_COLUMN, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(TYPE_COLUMN, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(MODIFIED_COLUMN, QHeaderView.ResizeToContents)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.table)

        # activated covers double-click and Enter.
        self.table.activated.connect(self._on_item_activated)

    def reset_scroll(self) -> None:
        self.table.clearSelection()
        self.table.scrollToTop()

    def focus_table(self) -> None:
        self.table.setFocus(Qt.OtherFocusReason)

    def _on_item_activated(self, index) -> None:
        if not index.isValid():
            return
        entry = self._model.data(index.siblingAtColumn(NAME_COLUMN), EntryRole)
        if entry is not None:
            self.itemActivated.emit(entry)
