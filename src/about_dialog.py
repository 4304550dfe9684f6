# Dotgrid
# Copyright 2025 - Ricardo Quesada

import sys

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QDialog, QDialogButtonBox, QLabel, QVBoxLayout

VERSION = "0.1.0"


class AboutDialog(QDialog):
    def __init__(self):
        super().__init__()

        self.setWindowTitle("About Dotgrid")

        # Create a label for the description
        description_label = QLabel(
            f"""
            <p><b>Dotgrid</b></p>
            <p>Draw on a grid of dots. Drag across the dots to draw,
            draw the same stroke again to erase it.</p>
            <p>Version {VERSION}</p>
            """
        )
        description_label.setWordWrap(True)  # Enable word wrap
        description_label.setTextFormat(Qt.RichText)

        # Create an "OK" button
        button_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok)
        button_box.accepted.connect(self.accept)

        # Create layout and add widgets
        layout = QVBoxLayout()
        layout.addWidget(description_label)
        layout.addWidget(button_box)

        self.setLayout(layout)


if __name__ == "__main__":
    app = QApplication(sys.argv)
    dialog = AboutDialog()
    dialog.exec()
    sys.exit(app.exec())
