"""
TrainerPage — the single page of the boxing trainer GUI.

Shows the current combination in large type, navigation buttons, one
exclusive radio group per facet and the list of combinations in the working
set.  Every user action is forwarded to the TrainingSession and the page is
then redrawn from the session's accessors.

Layout
──────
  ┌─────────────────────────────────────────────────────┐
  │ 3.                                                  │
  │ 1-1-2-step_back-2                                   │
  │ https://example.com                                 │
  │ [Next] [Previous] [Reset] [In order] [Reload]       │
  │ Distance:  (•) All  ( ) Long  ( ) Short             │
  │ Defence:   (•) All  ( ) Yes   ( ) No                │
  │ Faint:     (•) All  ( ) Yes   ( ) No                │
  │ Body:      (•) All  ( ) Yes   ( ) No                │
  │ ┌─────────────────────────────────────────────────┐ │
  │ │ 1-2                                             │ │
  │ │ 1-1-2-step_back-2                               │ │
  │ └─────────────────────────────────────────────────┘ │
  │ status                                              │
  └─────────────────────────────────────────────────────┘
"""

import logging
from typing import Callable

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from boxing_trainer.exceptions import CombinationError
from boxing_trainer.session import DistanceSelection, Selection, TrainingSession

__all__ = ["TrainerPage"]

logger = logging.getLogger(__name__)

_NUMBER_POINT_SIZE      = 48
_DESCRIPTION_POINT_SIZE = 64
_BUTTON_ROW_SPACING     = 5
_RADIO_ROW_SPACING      = 20
_RADIO_LABEL_WIDTH      = 80

# Radio options per facet, in display order
_DISTANCE_OPTIONS = [DistanceSelection.ALL, DistanceSelection.LONG, DistanceSelection.SHORT]
_YES_NO_OPTIONS   = [Selection.ALL, Selection.YES, Selection.NO]


class TrainerPage(QWidget):
    """Displays and drives a TrainingSession."""

    def __init__(self, session: TrainingSession, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = session
        self._syncing = False
        self._radios: dict[str, dict[str, QRadioButton]] = {}
        self._groups: list[QButtonGroup] = []
        self._build_ui()
        self.refresh()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._number_label = QLabel()
        font = QFont()
        font.setPointSize(_NUMBER_POINT_SIZE)
        self._number_label.setFont(font)
        layout.addWidget(self._number_label)

        self._description_label = QLabel()
        font = QFont()
        font.setPointSize(_DESCRIPTION_POINT_SIZE)
        self._description_label.setFont(font)
        self._description_label.setWordWrap(True)
        layout.addWidget(self._description_label)

        self._link_label = QLabel()
        self._link_label.setOpenExternalLinks(True)
        layout.addWidget(self._link_label)

        # Navigation buttons
        btn_row = QHBoxLayout()
        btn_row.setSpacing(_BUTTON_ROW_SPACING)
        self._next_btn     = QPushButton("Next")
        self._previous_btn = QPushButton("Previous")
        self._reset_btn    = QPushButton("Reset")
        self._ordered_btn  = QPushButton("In order")
        self._reload_btn   = QPushButton("Reload")
        self._next_btn.clicked.connect(lambda: self._dispatch(self._vm.advance))
        self._previous_btn.clicked.connect(lambda: self._dispatch(self._vm.retreat))
        self._reset_btn.clicked.connect(lambda: self._dispatch(self._vm.reset_randomized))
        self._ordered_btn.clicked.connect(lambda: self._dispatch(self._vm.reset_sequential))
        self._reload_btn.clicked.connect(self._on_reload)
        for btn in (self._next_btn, self._previous_btn, self._reset_btn,
                    self._ordered_btn, self._reload_btn):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        # Facet radio groups
        layout.addLayout(self._radio_row("Distance", _DISTANCE_OPTIONS,
                                         self._vm.set_distance_selection))
        layout.addLayout(self._radio_row("Defence", _YES_NO_OPTIONS,
                                         self._vm.set_defence_selection))
        layout.addLayout(self._radio_row("Faint", _YES_NO_OPTIONS,
                                         self._vm.set_faint_selection))
        layout.addLayout(self._radio_row("Body", _YES_NO_OPTIONS,
                                         self._vm.set_body_selection))

        # Working-set list
        self._list_widget = QListWidget()
        self._list_widget.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self._list_widget.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self._list_widget, stretch=1)

        self._status_label = QLabel()
        layout.addWidget(self._status_label)

    def _radio_row(self, facet: str, options: list, setter: Callable) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(_RADIO_ROW_SPACING)
        label = QLabel(f"{facet}:")
        label.setFixedWidth(_RADIO_LABEL_WIDTH)
        row.addWidget(label)

        group = QButtonGroup(self)
        group.setExclusive(True)
        self._groups.append(group)
        self._radios[facet] = {}
        for option in options:
            rb = QRadioButton(option.value)
            rb.toggled.connect(
                lambda checked, value=option: self._on_selection(setter, value, checked)
            )
            group.addButton(rb)
            self._radios[facet][option.value] = rb
            row.addWidget(rb)
        row.addStretch()
        return row

    # ── Slots ──────────────────────────────────────────────────────────────

    def _dispatch(self, action: Callable[[], None]) -> None:
        action()
        self.refresh()

    def _on_selection(self, setter: Callable, value, checked: bool) -> None:
        if self._syncing or not checked:
            return
        setter(value)
        self.refresh()

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        if self._syncing:
            return
        self._vm.jump_to(self._list_widget.row(item))
        self.refresh()

    def _on_reload(self) -> None:
        """Reload the data file; on failure keep the current session."""
        try:
            self._vm.reload()
        except CombinationError as exc:
            logger.error("Reload failed: %s", exc)
            self.refresh()
            self._status_label.setText(f"ERROR {exc}")
            return
        self.refresh()
        self._status_label.setText(f"Reloaded {len(self._vm.all_records)} combinations")

    # ── Public API ─────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Redraw every widget from the session state."""
        self._syncing = True
        try:
            self._number_label.setText(self._vm.display_number)
            self._description_label.setText(self._vm.description)

            current = self._vm.current
            if current is not None and current.url:
                self._link_label.setText(f'<a href="{current.url}">{current.url}</a>')
            else:
                self._link_label.setText("")

            selections = {
                "Distance": self._vm.distance_selection,
                "Defence":  self._vm.defence_selection,
                "Faint":    self._vm.faint_selection,
                "Body":     self._vm.body_selection,
            }
            for facet, value in selections.items():
                self._radios[facet][value.value].setChecked(True)

            self._list_widget.clear()
            for _index, description in self._vm.items():
                self._list_widget.addItem(description)
            if not self._vm.is_empty:
                self._list_widget.setCurrentRow(self._vm.cursor)
                item = self._list_widget.item(self._vm.cursor)
                if item is not None:
                    self._list_widget.scrollToItem(
                        item, QAbstractItemView.ScrollHint.PositionAtCenter
                    )

            self._status_label.setText(
                f"{len(self._vm.working_set)} of {len(self._vm.all_records)} combinations"
            )
        finally:
            self._syncing = False
