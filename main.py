#!/usr/bin/env python
"""
ADAPT Visualizer - inspection GUI for agricultural field-operation data.

Main entry point for the application.

Usage
-----
    python main.py
"""

import sys


def main() -> int:
    """
    Main entry point for the ADAPT Visualizer.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for error).
    """
    from loguru import logger
    from PySide6.QtWidgets import QApplication
    import pyqtgraph as pg

    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        level="DEBUG"
    )

    logger.info("Starting ADAPT Visualizer...")

    # Configure PyQtGraph
    pg.setConfigOptions(antialias=True)

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName("ADAPT Visualizer")
    app.setApplicationVersion("0.1.0")

    # Set application style
    app.setStyle("Fusion")

    # Import and create main window
    from adapt_visualizer.gui.main_window import MainWindow
    from adapt_visualizer.utils.sample_data import build_sample_catalog

    window = MainWindow(build_sample_catalog())
    window.show()

    logger.info("Application started successfully")

    # Run event loop
    exit_code = app.exec()

    logger.info(f"Application exited with code: {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
