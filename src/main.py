#!/usr/bin/env python3
# Dotgrid
# Copyright 2025 - Ricardo Quesada

import logging
import sys

from PySide6.QtWidgets import QApplication

from main_window import MainWindow

logger = logging.getLogger(__name__)


def main():
    # Configure logging (do this once, ideally at the start of your application)
    logging.basicConfig(
        # filename="dotgrid.log",
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",  # Customize the date format
    )

    app = QApplication(sys.argv)

    # Must be set before creating QSettings, used by the preferences
    app.setApplicationName("Dotgrid")
    app.setApplicationDisplayName("Dotgrid")
    app.setDesktopFileName("Dotgrid")
    app.setOrganizationName("RetroMoe")
    app.setOrganizationDomain("retro.moe")
    logger.info("Starting Dotgrid")

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
