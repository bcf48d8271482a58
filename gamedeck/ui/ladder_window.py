"""ASL Learning Ladder window: tier overview plus the timed speed drill."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from gamedeck.core.config import GameConfig
from gamedeck.core.drill import SpeedDrill
from gamedeck.core.errors import StateConflictError
from gamedeck.core.player import Player
from gamedeck.core.player_store import PlayerStore
from gamedeck.ui.colors import DeckColors, mastery_color
from gamedeck.ui.models import TierState, build_tier_states

logger = logging.getLogger(__name__)


def _button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {DeckColors.PRIMARY_LIGHT}, stop:1 {DeckColors.PRIMARY});
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {DeckColors.PRIMARY}; }}
        QPushButton:disabled {{ background: {DeckColors.LOCKED}; }}
    """


class LadderWindow(QWidget):
    """Home screen with the player's tiers, and a drill screen with a per-question timer."""

    closed = Signal()

    def __init__(
        self,
        player: Player,
        store: PlayerStore,
        signs: Dict[str, str],
        config: GameConfig,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._player = player
        self._store = store
        self._signs = signs
        self._config = config
        self._drill: Optional[SpeedDrill] = None
        self._seconds_left = 0
        self._closing = False

        self._timer = QTimer(self)
        self._timer.setInterval(1000)
        self._timer.timeout.connect(self._on_tick)

        self.setWindowTitle(f"ASL Learning Ladder - {player.name}")
        self.setMinimumSize(640, 480)
        self.setStyleSheet(f"background: {DeckColors.BG}; color: {DeckColors.TEXT_PRIMARY};")

        self._stack = QStackedWidget()
        self._stack.addWidget(self._build_home())
        self._stack.addWidget(self._build_drill())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.addWidget(self._stack)

        self._refresh_home()

    def _build_home(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setSpacing(12)

        self._welcome = QLabel("")
        self._welcome.setStyleSheet(f"font-size: 20px; font-weight: 800; color: {DeckColors.PRIMARY_DARK};")
        self._stats_label = QLabel("")
        self._stats_label.setStyleSheet(f"font-size: 13px; color: {DeckColors.TEXT_MUTED};")

        self._tier_rows = QVBoxLayout()
        self._tier_rows.setSpacing(6)

        self._start_button = QPushButton("Start drill")
        self._start_button.setStyleSheet(_button_style())
        self._start_button.clicked.connect(self._start_drill)
        self._unlock_button = QPushButton("Unlock next tier")
        self._unlock_button.setStyleSheet(_button_style())
        self._unlock_button.clicked.connect(self._unlock_tier)

        buttons = QHBoxLayout()
        buttons.addWidget(self._start_button)
        buttons.addWidget(self._unlock_button)

        layout.addWidget(self._welcome)
        layout.addWidget(self._stats_label)
        layout.addLayout(self._tier_rows)
        layout.addStretch(1)
        layout.addLayout(buttons)
        return page

    def _build_drill(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setSpacing(14)

        self._progress_label = QLabel("")
        self._progress_label.setStyleSheet(f"font-size: 13px; color: {DeckColors.TEXT_MUTED};")
        self._countdown = QLabel("")
        self._countdown.setAlignment(Qt.AlignRight)
        self._countdown.setStyleSheet(f"font-size: 16px; font-weight: 800; color: {DeckColors.WEAK};")

        header = QHBoxLayout()
        header.addWidget(self._progress_label)
        header.addWidget(self._countdown)

        self._sign_label = QLabel("")
        self._sign_label.setWordWrap(True)
        self._sign_label.setAlignment(Qt.AlignCenter)
        self._sign_label.setMinimumHeight(140)
        self._sign_label.setStyleSheet(
            f"background: {DeckColors.PANEL}; border-radius: 16px; padding: 18px; font-size: 18px;"
        )

        self._answer_box = QLineEdit()
        self._answer_box.setMaxLength(1)
        self._answer_box.setAlignment(Qt.AlignCenter)
        self._answer_box.setPlaceholderText("Type the letter and press Enter")
        self._answer_box.setStyleSheet("font-size: 24px; padding: 8px;")
        self._answer_box.returnPressed.connect(self._submit_answer)

        self._feedback = QLabel("")
        self._feedback.setAlignment(Qt.AlignCenter)

        layout.addLayout(header)
        layout.addWidget(self._sign_label)
        layout.addWidget(self._answer_box)
        layout.addWidget(self._feedback)
        layout.addStretch(1)
        return page

    def _refresh_home(self) -> None:
        self._welcome.setText(f"Welcome, {self._player.name}! You are on tier {self._player.current_tier()}.")
        self._stats_label.setText(str(self._player.statistics()))
        while self._tier_rows.count():
            item = self._tier_rows.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        for state in build_tier_states(self._player):
            self._tier_rows.addWidget(self._tier_row(state))
        self._unlock_button.setEnabled(self._player.has_more_tiers() and self._player.can_unlock_next_tier())

    def _tier_row(self, state: TierState) -> QWidget:
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        title = QLabel(f"Tier {state.tier}" + (" (current)" if state.is_current else ""))
        title.setMinimumWidth(120)
        layout.addWidget(title)
        for letter in state.letters:
            chip = QLabel(letter)
            chip.setAlignment(Qt.AlignCenter)
            chip.setFixedSize(40, 32)
            if state.unlocked:
                fill = mastery_color(self._player.letter_mastery(letter))
                chip.setToolTip(f"{self._player.letter_mastery(letter):.0f}% mastered")
            else:
                fill = DeckColors.LOCKED
                chip.setToolTip("Locked")
            chip.setStyleSheet(f"background: {fill}; border-radius: 8px; font-weight: 800;")
            layout.addWidget(chip)
        layout.addStretch(1)
        if state.unlocked:
            layout.addWidget(QLabel(f"{state.mastered}/{len(state.letters)} mastered"))
        return row

    def _start_drill(self) -> None:
        self._drill = SpeedDrill(
            self._player.unlocked_letters(),
            self._player.tracker,
            question_count=self._config.questions_per_drill,
            pass_percent=self._config.pass_percent,
        )
        logger.info("Drill started for %s on letters %s", self._player.name, self._player.unlocked_letters())
        self._feedback.setText("")
        self._stack.setCurrentIndex(1)
        self._show_question()

    def _show_question(self) -> None:
        drill = self._drill
        self._progress_label.setText(f"Question {drill.question_number} of {drill.total_questions}")
        self._sign_label.setText(self._signs.get(drill.current_letter(), "?"))
        self._answer_box.clear()
        self._answer_box.setFocus()
        self._seconds_left = self._config.time_limit_seconds
        self._countdown.setText(f"{self._seconds_left}s")
        self._timer.start()

    def _on_tick(self) -> None:
        self._seconds_left -= 1
        self._countdown.setText(f"{max(self._seconds_left, 0)}s")
        if self._seconds_left <= 0:
            self._answer("")

    def _submit_answer(self) -> None:
        self._answer(self._answer_box.text())

    def _answer(self, typed: str) -> None:
        drill = self._drill
        if drill is None or drill.is_complete():
            return
        self._timer.stop()
        letter = drill.current_letter()
        if drill.answer(typed):
            self._feedback.setText("Correct!")
        elif typed:
            self._feedback.setText(f"Not quite, that was {letter}.")
        else:
            self._feedback.setText(f"Time's up, that was {letter}.")
        if drill.is_complete():
            self._finish_drill()
        else:
            self._show_question()

    def _finish_drill(self) -> None:
        result = self._drill.result()
        self._player.record_test_completion(result.correct_answers)
        self._store.save(self._player)
        logger.info("Drill finished for %s: %s", self._player.name, result)
        self._drill = None
        self._stack.setCurrentIndex(0)
        self._refresh_home()
        weak = self._player.tracker.weak_keys(self._config.pass_percent)
        message = str(result)
        if weak:
            message += f"\n\nKeep practising: {', '.join(weak)}"
        if self._player.has_more_tiers() and self._player.can_unlock_next_tier():
            message += "\n\nYou can unlock the next tier!"
        QMessageBox.information(self, "Drill complete", message)

    def _unlock_tier(self) -> None:
        try:
            added = self._player.unlock_next_tier()
        except StateConflictError as e:
            QMessageBox.warning(self, "Tier locked", str(e))
            return
        self._store.save(self._player)
        self._refresh_home()
        QMessageBox.information(self, "New tier", f"Unlocked letters: {', '.join(added)}")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Save the player and release the caller waiting on ``closed``."""
        if not self._closing:
            self._closing = True
            self._timer.stop()
            self._store.save(self._player)
            self.closed.emit()
        super().closeEvent(event)
