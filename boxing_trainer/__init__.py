"""
boxing_trainer — flashcard trainer for boxing combinations.

Sub-packages
────────────
combination — records and the `;`-delimited file loader
session     — facet filtering, ordering and navigation state
gui         — PyQt6 window
cli         — command-line interface
"""

__version__ = "0.1.0"
