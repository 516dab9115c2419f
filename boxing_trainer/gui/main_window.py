"""
MainWindow — top-level application window for the boxing trainer GUI.

Hosts a single TrainerPage bound to the TrainingSession created at
bootstrap.  run_gui() owns the QApplication and the event loop.
"""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget

from boxing_trainer.config import TrainerConfig
from boxing_trainer.gui.pages.trainer import TrainerPage
from boxing_trainer.session import TrainingSession

__all__ = ["MainWindow", "run_gui", "WINDOW_TITLE"]

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Boxing Trainer"


class MainWindow(QMainWindow):
    """Root window: hosts the trainer page."""

    def __init__(
        self,
        session: TrainingSession,
        config: Optional[TrainerConfig] = None,
        parent: QWidget = None,
    ) -> None:
        super().__init__(parent)
        config = config or TrainerConfig()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(config.window_width, config.window_height)

        self._page = TrainerPage(session)
        self.setCentralWidget(self._page)


def run_gui(session: TrainingSession, config: Optional[TrainerConfig] = None) -> int:
    """Show the main window and block until it is closed. Returns the exit code."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(session, config)
    window.show()
    logger.info("GUI started with %d combinations", len(session.all_records))
    return app.exec()
