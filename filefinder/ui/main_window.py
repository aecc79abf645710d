from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from PySide6.QtCore import QSize
from PySide6.QtGui import QAction, QIcon
from PySide6.QtWidgets import QLabel, QMainWindow, QStatusBar, QToolBar, QVBoxLayout, QWidget

from filefinder.ops.errors import ListError, OpenError
from filefinder.ops.listing import DirectoryEntry
from filefinder.ops.navigation import Listing, NavigationController
from filefinder.ops.opener import open_with_default_handler
from filefinder.ui.error_dialog import show_error
from filefinder.ui.file_views import FileTableView
from filefinder.ui.models import DirectoryTableModel
from filefinder.utils.config import ConfigStore

_logger = logging.getLogger(__name__)

Opener = Callable[[Path], None]


class MainWindow(QMainWindow):
    def __init__(
        self,
        config: ConfigStore | None = None,
        controller: NavigationController | None = None,
        opener: Opener | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("File Finder")
        self.resize(900, 600)

        self._config = config or ConfigStore()
        self._controller = controller or NavigationController(
            Path.home(),
            history_limit=self._config.get_int("history_limit", 0),
        )
        backend = self._config.get_str("open_backend", "auto")
        self._opener = opener or (lambda path: open_with_default_handler(path, backend))

        self._model = DirectoryTableModel(self)
        self._file_view = FileTableView(self._model, self)
        self._file_view.itemActivated.connect(self._open_entry)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self._file_view)
        self.setCentralWidget(content)

        self._build_toolbar()
        self._build_status_bar()
        self._run(self._controller.refresh)

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Navigation")
        toolbar.setObjectName("NavigationToolbar")
        toolbar.setMovable(False)
        toolbar.setIconSize(QSize(20, 20))

        self._back_action = self._make_action("go-previous", "←", "Back", "Alt+Left")
        self._back_action.triggered.connect(lambda: self._run(self._controller.back))

        self._forward_action = self._make_action("go-next", "→", "Forward", "Alt+Right")
        self._forward_action.triggered.connect(lambda: self._run(self._controller.forward))

        self._up_action = self._make_action("go-up", "↑", "Up", "Alt+Up")
        self._up_action.triggered.connect(lambda: self._run(self._controller.up))

        home_action = self._make_action("go-home", "⌂", "Home", "Alt+Home")
        home_action.triggered.connect(lambda: self._run(self._controller.home))

        refresh_action = self._make_action("view-refresh", "⟳", "Refresh", "F5")
        refresh_action.triggered.connect(lambda: self._run(self._controller.refresh))

        toolbar.addAction(self._back_action)
        toolbar.addAction(self._forward_action)
        toolbar.addAction(self._up_action)
        toolbar.addAction(home_action)
        toolbar.addSeparator()
        toolbar.addAction(refresh_action)
        self.addToolBar(toolbar)

    def _make_action(self, icon_name: str, fallback: str, tooltip: str, shortcut: str) -> QAction:
        icon = QIcon.fromTheme(icon_name)
        action = QAction(icon, "" if not icon.isNull() else fallback, self)
        action.setToolTip(tooltip)
        action.setShortcut(shortcut)
        return action

    def _build_status_bar(self) -> None:
        status = QStatusBar()
        self._path_label = QLabel(str(self._controller.state.current))
        status.addWidget(self._path_label, 1)
        self.setStatusBar(status)

    def _run(self, operation: Callable[[], Listing]) -> None:
        try:
            listing = operation()
        except ListError as exc:
            _logger.warning("Listing failed for %s: %s", exc.path, exc)
            show_error(self, "Error", f"Cannot access directory: {exc.path}")
            self._sync_actions()
            return
        self._apply_listing(listing)

    def _apply_listing(self, listing: Listing) -> None:
        changed = self._path_label.text() != str(listing.state.current)
        self._model.set_entries(listing.entries)
        if changed:
            self._file_view.reset_scroll()
        self._path_label.setText(str(listing.state.current))
        self._sync_actions()
        self._file_view.focus_table()

    def _sync_actions(self) -> None:
        state = self._controller.state
        self._back_action.setEnabled(state.can_go_back)
        self._forward_action.setEnabled(state.can_go_forward)
        self._up_action.setEnabled(state.can_go_up)

    def _open_entry(self, entry: DirectoryEntry) -> None:
        if entry.is_directory:
            self._run(lambda: self._controller.navigate_to(entry.path))
            return
        try:
            self._opener(entry.path)
        except OpenError as exc:
            _logger.warning("Open failed for %s: %s", exc.path, exc)
            show_error(self, "Error", f"Cannot open file: {exc.message}")
