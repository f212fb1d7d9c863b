#!/usr/bin/env python3
"""
VectorSketch - Main Entry Point

This is the main entry point for the VectorSketch application.
Run with: python -m vectorsketch.main
"""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Log to stderr at the level named by VECTORSKETCH_LOG_LEVEL."""
    level_name = os.environ.get("VECTORSKETCH_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main():
    """Main entry point for VectorSketch application."""
    configure_logging()
    try:
        # Enable high DPI scaling
        QApplication.setHighDpiScaleFactorRoundingPolicy(
            Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
        )

        # Create application
        app = QApplication(sys.argv)
        app.setApplicationName("VectorSketch")
        app.setApplicationVersion("0.1.0")
        app.setOrganizationName("VectorSketch")

        # Import here to avoid circular imports and speed up startup check
        from .ui.mainwindow import MainWindow

        # Create and show main window
        window = MainWindow()
        window.show()

        # Run event loop
        return app.exec()
    except Exception:
        logger.exception("Fatal error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
