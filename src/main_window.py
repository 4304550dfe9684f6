# Dotgrid
# Copyright 2025 - Ricardo Quesada

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QCloseEvent, QGuiApplication, QIcon, QKeySequence
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QMenu,
    QStatusBar,
    QStyle,
)

from about_dialog import AboutDialog
from canvas import Canvas
from preference_dialog import PreferenceDialog
from preferences import get_global_preferences
from state import State
from state_properties import StateChangeFlags

logger = logging.getLogger(__name__)  # __name__ gets the current module's name


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()

        self._state = State(get_global_preferences().get_state_properties())
        self._setup_ui()

        self._save_default_settings()
        self._load_settings()

        self._state.state_changed.connect(self._on_state_changed_from_state)
        get_global_preferences().grid_properties_changed.connect(
            self._on_grid_properties_changed_from_preferences
        )

        self.setWindowTitle("Dotgrid")
        self._update_qactions()
        self._update_statusbar()

    def _setup_ui(self):
        self._setup_menu()
        self._setup_central_widget()
        self._setup_statusbar()

    def _setup_menu(self):
        menu_bar = self.menuBar()
        file_menu = QMenu(self.tr("&File"), self)
        menu_bar.addMenu(file_menu)

        self._preferences_action = QAction(
            QIcon.fromTheme("preferences-system"), self.tr("Preferences"), self
        )
        self._preferences_action.setShortcut(QKeySequence.StandardKey.Preferences)
        self._preferences_action.triggered.connect(self._on_preferences)
        file_menu.addAction(self._preferences_action)

        file_menu.addSeparator()

        self._exit_action = QAction(QIcon.fromTheme("application-exit"), self.tr("Exit"), self)
        self._exit_action.setShortcut(QKeySequence("Ctrl+Q"))
        self._exit_action.triggered.connect(self._on_exit_application)
        file_menu.addAction(self._exit_action)

        edit_menu = QMenu(self.tr("&Edit"), self)
        menu_bar.addMenu(edit_menu)

        # Ctrl+Z, or Cmd+Z on macOS
        self._undo_action = QAction(QIcon.fromTheme("edit-undo"), self.tr("&Undo"), self)
        self._undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        self._undo_action.triggered.connect(self._on_undo)
        edit_menu.addAction(self._undo_action)

        view_menu = QMenu(self.tr("&View"), self)
        menu_bar.addMenu(view_menu)

        self._reset_layout_action = QAction(self.tr("Reset Layout"), self)
        self._reset_layout_action.triggered.connect(self._on_reset_layout)
        view_menu.addAction(self._reset_layout_action)

        help_menu = QMenu(self.tr("&Help"), self)
        menu_bar.addMenu(help_menu)

        about_action = QAction(QIcon.fromTheme("help-about"), self.tr("About"), self)
        about_action.triggered.connect(self._on_show_about_dialog)
        help_menu.addAction(about_action)

    def _setup_central_widget(self):
        self._canvas = Canvas(self._state)
        self.setCentralWidget(self._canvas)

    def _setup_statusbar(self):
        # Status Bar
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._grid_size_label = QLabel()
        self._total_shapes_label = QLabel()
        self._statusbar.addPermanentWidget(self._grid_size_label)
        self._statusbar.addPermanentWidget(self._total_shapes_label)

    def _update_statusbar(self):
        grid = self._state.grid
        self._grid_size_label.setText(self.tr(f"Grid: {grid.cols}x{grid.rows}"))
        self._total_shapes_label.setText(self.tr(f"Total Shapes: {len(self._state.shapes)}"))

    def _update_qactions(self):
        self._undo_action.setEnabled(len(self._state.shapes) > 0)

    def _load_settings(self):
        prefs = get_global_preferences()
        geometry = prefs.get_window_geometry()
        if geometry is not None:
            self.restoreGeometry(geometry)

    def _save_default_settings(self):
        # Save defaults before restoring saved settings. needed for "reset layout"
        prefs = get_global_preferences()
        prefs.set_default_window_geometry(self.saveGeometry())

    def _save_settings(self):
        prefs = get_global_preferences()
        prefs.set_window_geometry(self.saveGeometry())

    def closeEvent(self, event: QCloseEvent):
        logger.info("Closing Dotgrid")
        self._save_settings()
        super().closeEvent(event)

    #
    # Slots (callbacks, events):
    #
    @Slot()
    def _on_exit_application(self) -> None:
        QApplication.quit()

    @Slot()
    def _on_undo(self) -> None:
        self._state.undo()

    @Slot()
    def _on_reset_layout(self) -> None:
        prefs = get_global_preferences()
        default_geometry = prefs.get_default_window_geometry()
        if default_geometry is not None:
            self.restoreGeometry(default_geometry)

        self.setGeometry(
            QStyle.alignedRect(
                Qt.LayoutDirection.LeftToRight,
                Qt.AlignmentFlag.AlignCenter,
                self.size(),
                QGuiApplication.primaryScreen().geometry(),
            )
        )

    @Slot()
    def _on_preferences(self) -> None:
        dialog = PreferenceDialog()
        dialog.exec()

    @Slot()
    def _on_show_about_dialog(self) -> None:
        dialog = AboutDialog()
        dialog.exec()

    @Slot()
    def _on_grid_properties_changed_from_preferences(self) -> None:
        self._state.properties = get_global_preferences().get_state_properties()

    @Slot(StateChangeFlags)
    def _on_state_changed_from_state(self, flags: StateChangeFlags) -> None:
        if flags & (StateChangeFlags.GRID | StateChangeFlags.SHAPES):
            self._update_qactions()
            self._update_statusbar()
