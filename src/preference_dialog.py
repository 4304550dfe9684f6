# Dotgrid
# Copyright 2025 - Ricardo Quesada

import functools
import logging
import sys
from enum import IntEnum, auto
from typing import override

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QApplication,
    QColorDialog,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from preferences import get_global_preferences

logger = logging.getLogger(__name__)  # __name__ gets the current module's name


class ColorType(IntEnum):
    CANVAS_BACKGROUND = auto()
    NODE = auto()
    SHAPE = auto()
    PREVIEW = auto()


class PreferenceDialog(QDialog):
    def __init__(self):
        super().__init__()

        prefs = get_global_preferences()
        self._colors = {
            ColorType.CANVAS_BACKGROUND: {
                "color": QColor(prefs.get_canvas_background_color_name())
            },
            ColorType.NODE: {"color": QColor(prefs.get_node_color_name())},
            ColorType.SHAPE: {"color": QColor(prefs.get_shape_color_name())},
            ColorType.PREVIEW: {"color": QColor(prefs.get_preview_color_name())},
        }

        self.setWindowTitle(self.tr("Preference Dialog"))

        # Grid Properties
        grid_group_box = QGroupBox(self.tr("Grid (pixels)"))
        grid_layout = QFormLayout()
        self._diameter_spinbox = self._create_spinbox(1, 500)
        self._gap_spinbox = self._create_spinbox(0, 500)
        self._padding_spinbox = self._create_spinbox(0, 500)
        self._slack_spinbox = self._create_spinbox(0, 500)
        grid_layout.addRow(self.tr("Node diameter"), self._diameter_spinbox)
        grid_layout.addRow(self.tr("Gap"), self._gap_spinbox)
        grid_layout.addRow(self.tr("Padding"), self._padding_spinbox)
        grid_layout.addRow(self.tr("Capture slack"), self._slack_spinbox)
        grid_group_box.setLayout(grid_layout)

        # Decorations
        decorations_group_box = QGroupBox(self.tr("Decorations"))
        decorations_layout = QFormLayout()
        self._decoration_width_spinbox = QSpinBox()
        self._decoration_width_spinbox.setRange(1, 1000)
        self._decoration_height_spinbox = QSpinBox()
        self._decoration_height_spinbox.setRange(1, 1000)
        self._catalog_lineedit = QLineEdit()
        self._catalog_lineedit.setPlaceholderText(self.tr("Default (LÝCEUM)"))
        browse_button = QPushButton(self.tr("Browse..."))
        browse_button.clicked.connect(self._on_browse_catalog)
        catalog_hlayout = QHBoxLayout()
        catalog_hlayout.addWidget(self._catalog_lineedit)
        catalog_hlayout.addWidget(browse_button)
        decorations_layout.addRow(self.tr("Width (columns)"), self._decoration_width_spinbox)
        decorations_layout.addRow(self.tr("Height (rows)"), self._decoration_height_spinbox)
        decorations_layout.addRow(self.tr("Glyph catalog"), catalog_hlayout)
        decorations_group_box.setLayout(decorations_layout)

        # Colors
        colors_group_box = QGroupBox(self.tr("Colors"))
        colors_vlayout = QVBoxLayout()
        for color_type, text in (
            (ColorType.CANVAS_BACKGROUND, self.tr("Background color")),
            (ColorType.NODE, self.tr("Node color")),
            (ColorType.SHAPE, self.tr("Shape color")),
            (ColorType.PREVIEW, self.tr("Preview color")),
        ):
            label = QLabel(text)
            button = QPushButton()
            button.clicked.connect(functools.partial(self._on_choose_color, color_type))
            hlayout = QHBoxLayout()
            hlayout.addWidget(label)
            hlayout.addWidget(button)
            self._colors[color_type]["label"] = label
            self._colors[color_type]["button"] = button
            self._update_color_label(color_type)
            colors_vlayout.addLayout(hlayout)
        colors_group_box.setLayout(colors_vlayout)

        # Buttons
        self._button_box = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Cancel | QDialogButtonBox.Apply
        )
        self._button_box.accepted.connect(self.accept)
        self._button_box.rejected.connect(self.reject)
        self._button_box.clicked.connect(self._on_buttonbox_button_clicked)

        # Main layout
        main_layout = QVBoxLayout()
        main_layout.addWidget(grid_group_box)
        main_layout.addWidget(decorations_group_box)
        main_layout.addWidget(colors_group_box)
        main_layout.addWidget(self._button_box)

        self.setLayout(main_layout)

        # Populate from global preferences
        self._diameter_spinbox.setValue(prefs.get_node_diameter())
        self._gap_spinbox.setValue(prefs.get_gap_size())
        self._padding_spinbox.setValue(prefs.get_grid_padding())
        self._slack_spinbox.setValue(prefs.get_capture_slack())
        width, height = prefs.get_decoration_size()
        self._decoration_width_spinbox.setValue(width)
        self._decoration_height_spinbox.setValue(height)
        self._catalog_lineedit.setText(prefs.get_decoration_catalog_filename() or "")

    @staticmethod
    def _create_spinbox(minimum: float, maximum: float) -> QDoubleSpinBox:
        spinbox = QDoubleSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setDecimals(1)
        return spinbox

    def _apply(self) -> None:
        prefs = get_global_preferences()
        prefs.set_node_diameter(self._diameter_spinbox.value())
        prefs.set_gap_size(self._gap_spinbox.value())
        prefs.set_grid_padding(self._padding_spinbox.value())
        prefs.set_capture_slack(self._slack_spinbox.value())
        prefs.set_decoration_size(
            (self._decoration_width_spinbox.value(), self._decoration_height_spinbox.value())
        )
        prefs.set_decoration_catalog_filename(self._catalog_lineedit.text().strip() or None)
        prefs.set_canvas_background_color_name(
            self._colors[ColorType.CANVAS_BACKGROUND]["color"].name(QColor.HexArgb)
        )
        prefs.set_node_color_name(self._colors[ColorType.NODE]["color"].name(QColor.HexArgb))
        prefs.set_shape_color_name(self._colors[ColorType.SHAPE]["color"].name(QColor.HexArgb))
        prefs.set_preview_color_name(
            self._colors[ColorType.PREVIEW]["color"].name(QColor.HexArgb)
        )

    def _update_color_label(self, color_type: ColorType):
        self._colors[color_type]["button"].setStyleSheet(
            f"background-color: {self._colors[color_type]['color'].name()};"
        )
        self._colors[color_type]["button"].setText(
            self._colors[color_type]["color"].name(QColor.HexArgb)
        )

    @override
    def accept(self) -> None:
        self._apply()
        super().accept()

    @Slot()
    def _on_buttonbox_button_clicked(self, button: QPushButton):
        # Ignore "Cancel" and "Ok" which have their own slots
        if button == self._button_box.button(QDialogButtonBox.Apply):
            self._apply()

    @Slot()
    def _on_choose_color(self, color_type: ColorType):
        color = QColorDialog.getColor(options=QColorDialog.ShowAlphaChannel)
        if color.isValid():
            self._colors[color_type]["color"] = color
            self._update_color_label(color_type)

    @Slot()
    def _on_browse_catalog(self):
        filename, _ = QFileDialog.getOpenFileName(
            self, self.tr("Open Glyph Catalog"), "", self.tr("TOML files (*.toml)")
        )
        if filename:
            self._catalog_lineedit.setText(filename)


if __name__ == "__main__":
    app = QApplication(sys.argv)
    dialog = PreferenceDialog()
    if dialog.exec() == QDialog.Accepted:
        print("Dialog was accepted")
    sys.exit(0)
