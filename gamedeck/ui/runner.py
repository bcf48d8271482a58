from __future__ import annotations

import sys

from PySide6.QtCore import QEventLoop
from PySide6.QtWidgets import QApplication, QWidget


def ensure_application() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
        app.setApplicationName("GameDeck")
        app.setApplicationDisplayName("GameDeck")
    return app


def run_until_closed(window: QWidget) -> None:
    """Show ``window`` and block until it emits ``closed`` once."""
    ensure_application()
    loop = QEventLoop()
    window.closed.connect(loop.quit)
    window.show()
    loop.exec()
    window.closed.disconnect(loop.quit)
