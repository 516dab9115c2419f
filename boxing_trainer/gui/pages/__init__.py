"""pages — widgets hosted by MainWindow (see pages/trainer.py)."""
