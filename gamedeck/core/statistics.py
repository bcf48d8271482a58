from __future__ import annotations


class SessionStatistics:
    """Win/loss tally for repeated number games within one run of the app."""

    def __init__(self) -> None:
        self._wins = 0
        self._losses = 0
        self._total_placements = 0

    @property
    def wins(self) -> int:
        return self._wins

    @property
    def losses(self) -> int:
        return self._losses

    @property
    def games_played(self) -> int:
        return self._wins + self._losses

    @property
    def total_placements(self) -> int:
        return self._total_placements

    def record_win(self, placements: int) -> None:
        self._add_placements(placements)
        self._wins += 1

    def record_loss(self, placements: int) -> None:
        self._add_placements(placements)
        self._losses += 1

    def average_placements(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self._total_placements / self.games_played

    def summary_message(self) -> str:
        games = self.games_played
        if games == 0:
            return "No games played yet."
        noun = "game" if games == 1 else "games"
        parts = []
        if self._wins > 0:
            parts.append(f"won {self._wins} out of {games} {noun}")
        if self._losses > 0:
            parts.append(f"lost {self._losses} out of {games} {noun}")
        outcome = "You " + " and you ".join(parts)
        return (
            f"{outcome}, with {self._total_placements} successful placements, "
            f"an average of {self.average_placements():.2f} per game"
        )

    def _add_placements(self, placements: int) -> None:
        if placements < 0:
            raise ValueError("Placements cannot be negative")
        self._total_placements += placements
