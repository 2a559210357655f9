"""
In-memory result tallies across games.
"""
from typing import Dict
from ..models.enums import CellMark, GameState
from ..models.outcome import GameOutcome


class GameStatistics:
    """Counts finished games, wins per mark and draws."""

    def __init__(self):
        self.reset()

    def record(self, outcome: GameOutcome) -> bool:
        """
        Record a finished game.

        Returns:
            True if the outcome was counted, False for a game still in progress
        """
        if not outcome.is_game_over:
            return False

        self.games_played += 1
        if outcome.state == GameState.DRAW:
            self.draws += 1
        elif outcome.winner == CellMark.X:
            self.x_wins += 1
        else:
            self.o_wins += 1
        return True

    def win_rate(self, mark: CellMark) -> float:
        """Percentage of games won by a mark."""
        if self.games_played == 0:
            return 0.0

        if mark == CellMark.X:
            wins = self.x_wins
        elif mark == CellMark.O:
            wins = self.o_wins
        else:
            raise ValueError(f"No player plays {mark!r}")
        return wins / self.games_played * 100.0

    def reset(self):
        self.games_played = 0
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            'games_played': self.games_played,
            'x_wins': self.x_wins,
            'o_wins': self.o_wins,
            'draws': self.draws,
        }
