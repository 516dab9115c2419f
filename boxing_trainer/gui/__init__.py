"""
gui — PyQt6 front-end for the boxing trainer.

Public API
──────────
MainWindow   — top-level application window
run_gui      — create the QApplication and run the event loop
pages        — the trainer page
"""

from boxing_trainer.gui.main_window import MainWindow, run_gui

__all__ = ["MainWindow", "run_gui"]
