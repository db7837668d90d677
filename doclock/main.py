"""
Main entry point for TCG Document Lock.
"""

import os
import sys
import signal
import logging
from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from doclock.ui import run_app
from doclock.vault import Vault
from doclock import config


def configure_logging() -> None:
    level_name = os.environ.get(config.LOG_LEVEL_ENV, config.LOG_LEVEL_DEFAULT).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def main():
    """Main entry point."""
    configure_logging()
    # Enable high DPI scaling
    if hasattr(Qt, 'AA_EnableHighDpiScaling'):
        QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    if hasattr(Qt, 'AA_UseHighDpiPixmaps'):
        QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)
    app.setStyle(config.APP_STYLE)

    # Handle Ctrl+C gracefully
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    vault = Vault()
    logging.getLogger(__name__).info(f"Using vault directory {vault.vault_dir}")
    return run_app(vault)


if __name__ == "__main__":
    sys.exit(main())
