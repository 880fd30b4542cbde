"""Application entry point and setup for the Mataha maze game."""

import logging
import random
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from mataha.core.config import load_settings
from mataha.core.levels import TierTable
from mataha.core.session import LevelSession
from mataha.ui.audio import ToneFeedback
from mataha.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings and level tiers, build the session and start the window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Mataha")
    app.setApplicationDisplayName("Mataha")

    settings = load_settings()
    tiers = TierTable()
    if settings.seed is not None:
        logging.info(f"Using fixed maze seed {settings.seed}")

    session = LevelSession(
        settings=settings,
        tiers=tiers,
        rng=random.Random(settings.seed),
        audio=ToneFeedback(app),
    )

    window = MainWindow(session)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(int(geometry.width() * 0.6), int(geometry.height() * 0.85))
    window.show()
    window.start(level=1)

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
