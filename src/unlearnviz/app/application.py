from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import os
import sys

import pyqtgraph as pg

from unlearnviz.config import ORG_ID, APP_ID, VISIBLE_APP_NAME


def configure_pyqtgraph() -> None:
    """Global pyqtgraph look: white canvas, black axes, antialiased markers."""
    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOptions(antialias=True)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(argv if argv is not None else sys.argv)

    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    configure_pyqtgraph()

    return app
