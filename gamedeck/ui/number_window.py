"""Number game window: a grid of slots, one click per drawn number."""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gamedeck.core.number_game import NumberGame, Outcome
from gamedeck.ui.colors import DeckColors
from gamedeck.ui.models import CellView, build_cell_views

logger = logging.getLogger(__name__)

COLUMNS = 5


class NumberGameWindow(QWidget):
    """Shows the board and the drawn number; emits ``closed`` when the player is done."""

    closed = Signal()

    def __init__(self, game: NumberGame, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._game = game
        self._cells: List[QPushButton] = []
        self._closing = False

        self.setWindowTitle("Number Game")
        self.setStyleSheet(f"background: {DeckColors.BG}; color: {DeckColors.TEXT_PRIMARY};")

        self._prompt = QLabel("")
        self._prompt.setAlignment(Qt.AlignCenter)
        self._prompt.setStyleSheet(f"font-size: 22px; font-weight: 800; color: {DeckColors.PRIMARY_DARK};")

        self._status = QLabel("")
        self._status.setAlignment(Qt.AlignCenter)
        self._status.setStyleSheet(f"font-size: 13px; color: {DeckColors.TEXT_MUTED};")

        grid = QGridLayout()
        grid.setSpacing(8)
        for position in range(game.board.size):
            button = QPushButton("[ ]")
            button.setMinimumSize(72, 48)
            button.clicked.connect(lambda _checked=False, p=position: self._on_cell_clicked(p))
            grid.addWidget(button, position // COLUMNS, position % COLUMNS)
            self._cells.append(button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)
        layout.addWidget(self._prompt)
        layout.addLayout(grid)
        layout.addWidget(self._status)

        self._start_game()

    def _start_game(self) -> None:
        self._game.start()
        self._status.setText(self._game.statistics.summary_message())
        self._refresh()

    def _on_cell_clicked(self, position: int) -> None:
        if not self._game.can_place(position):
            self._status.setText(f"{self._game.current_value} cannot go in slot {position + 1}.")
            return
        outcome = self._game.place(position)
        self._refresh()
        if outcome is not Outcome.PLACED:
            # let the final board paint before the dialog blocks
            QTimer.singleShot(0, lambda: self._game_over(outcome))

    def _game_over(self, outcome: Outcome) -> None:
        if outcome is Outcome.WON:
            headline = f"You filled the board with {self._game.placements} placements!"
        else:
            headline = (
                f"No slot left for {self._game.current_value}. "
                f"You made {self._game.placements} placements."
            )
        reply = QMessageBox.question(
            self,
            "Game over",
            f"{headline}\n\n{self._game.statistics.summary_message()}\n\nPlay again?",
            QMessageBox.Yes | QMessageBox.No,
        )
        if reply == QMessageBox.Yes:
            self._start_game()
        else:
            self.close()

    def _refresh(self) -> None:
        if self._game.is_over():
            self._prompt.setText("Game over")
        else:
            self._prompt.setText(f"Next number: {self._game.current_value}")
        for view, button in zip(build_cell_views(self._game), self._cells):
            self._paint_cell(view, button)

    def _paint_cell(self, view: CellView, button: QPushButton) -> None:
        if view.value is not None:
            text, fill = str(view.value), DeckColors.CELL_FILLED
        elif view.selectable:
            text, fill = "[ ]", DeckColors.CELL_OPEN
        else:
            text, fill = "[ ]", DeckColors.CELL_BLOCKED
        button.setText(text)
        button.setEnabled(view.value is None and not self._game.is_over())
        button.setStyleSheet(
            f"""
            QPushButton {{
                background: {fill};
                border: 1px solid {DeckColors.PRIMARY_LIGHT};
                border-radius: 10px;
                font-size: 15px;
                font-weight: 700;
                color: {DeckColors.TEXT_PRIMARY};
            }}
            QPushButton:hover {{ border-color: {DeckColors.PRIMARY}; }}
            """
        )

    def closeEvent(self, event: QCloseEvent) -> None:
        """Report session statistics and release the caller waiting on ``closed``."""
        if not self._closing:
            self._closing = True
            logger.info("Number game session closed: %s", self._game.statistics.summary_message())
            if self._game.statistics.games_played:
                QMessageBox.information(self, "Session summary", self._game.statistics.summary_message())
            self.closed.emit()
        super().closeEvent(event)
