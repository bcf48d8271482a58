"""Terminal surface: the main menu and the word game, which is played in the console."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable, Dict, Optional

from gamedeck.core.player import is_valid_name
from gamedeck.core.scores import Score, append_score, best_score, read_scores
from gamedeck.core.trivia import Verdict, WordGame
from gamedeck.core.world import World

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU_LINES = (
    "",
    "=== Menu ===",
    "Press W to play the Word game.",
    "Press N to play the Number game.",
    "Press M to play the ASL Learning Ladder game.",
    "Press Q to quit.",
)
QUIT_CHOICE = "q"
QUIT_MESSAGE = "bye!"


def run_menu(
    launchers: Dict[str, Callable[[], None]],
    read: Reader = input,
    write: Writer = print,
) -> None:
    """Show the menu until the user quits. ``launchers`` maps a lowercase choice to a game."""
    while True:
        for line in MENU_LINES:
            write(line)
        try:
            choice = read("Your choice: ").strip().lower()
        except EOFError:
            write(QUIT_MESSAGE)
            return
        if choice == QUIT_CHOICE:
            write(QUIT_MESSAGE)
            return
        launcher = launchers.get(choice)
        if launcher is None:
            write(f"Invalid choice {choice!r}. Please enter W, N, M or Q.")
            continue
        logger.info("Launching game %r", choice)
        launcher()


def ask_yes_no(question: str, read: Reader = input, write: Writer = print) -> bool:
    while True:
        reply = read(f"{question} (yes/no): ").strip().lower()
        if reply in ("yes", "y"):
            return True
        if reply in ("no", "n"):
            return False
        write("Please answer yes or no.")


def ask_player_name(read: Reader = input, write: Writer = print) -> str:
    while True:
        name = read("Enter your player name: ").strip()
        if is_valid_name(name):
            return name
        write("Names may only contain letters, digits, spaces, '-' and '_'.")


def play_word_game(
    world: World,
    scores_file: Path,
    questions_per_game: int = 10,
    read: Reader = input,
    write: Writer = print,
    rng: Optional[random.Random] = None,
) -> Score:
    """Play rounds of trivia until the user stops, then record and report the score."""
    score = Score()
    game = WordGame(world, score, questions_per_game, rng)
    playing = True
    while playing:
        question = game.start()
        while not game.is_over():
            write(f"\nQuestion {game.question_number}/{game.total_questions}: {question.prompt}")
            verdict = game.submit(read("> "))
            if verdict is Verdict.TRY_AGAIN:
                write("INCORRECT! Try again.")
                continue
            if verdict is Verdict.MISSED:
                write(f"INCORRECT! The correct answer was {question.answer}.")
            else:
                write("CORRECT!")
            if not game.is_over():
                question = game.current_question()
        playing = ask_yes_no("Play again?", read, write)

    previous = best_score(read_scores(scores_file))
    write("")
    write(score.to_record().rstrip("\n"))
    if previous is None or score.points > previous.points:
        write(f"CONGRATULATIONS! You are the new high score with {score.points} points!")
        if previous is not None:
            write(
                f"The previous record was {previous.points} points on "
                f"{previous.played_at:%Y-%m-%d at %H:%M:%S}."
            )
    else:
        write(
            f"You did not beat the high score of {previous.points} points from "
            f"{previous.played_at:%Y-%m-%d at %H:%M:%S}."
        )
    if not append_score(score, scores_file):
        write("Warning: your score could not be saved.")
    return score
