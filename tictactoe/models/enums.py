"""
Core enums for the tic-tac-toe game.
"""
from enum import Enum


class CellMark(Enum):
    """Represents the contents of a single board cell."""
    EMPTY = '_'
    X = 'X'
    O = 'O'

    @property
    def symbol(self) -> str:
        """Single-character board notation for this mark."""
        return self.value

    @classmethod
    def from_char(cls, char: str) -> 'CellMark':
        """Parse a board notation character ('X', 'O' or '_')."""
        for mark in cls:
            if mark.value == char.upper():
                return mark
        raise ValueError(f"Invalid cell character '{char}'. Use 'X', 'O' or '_'")

    def opponent(self) -> 'CellMark':
        """Get the opposing mark."""
        if self == CellMark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return CellMark.O if self == CellMark.X else CellMark.X


class GameState(Enum):
    """Represents the current state of the game."""
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    DRAW = 'draw'


class GameMode(Enum):
    """Who is sitting at the board."""
    HUMAN_VS_HUMAN = 'human_vs_human'
    HUMAN_VS_AI = 'human_vs_ai'


class AIDifficulty(Enum):
    """AI difficulty levels. Only affects the presentation delay."""
    EASY = 'easy'
    MEDIUM = 'medium'
    HARD = 'hard'

    @property
    def delay(self) -> float:
        """Seconds the front end should wait before showing the AI move."""
        return _AI_DELAYS[self]


_AI_DELAYS = {
    AIDifficulty.EASY: 0.3,
    AIDifficulty.MEDIUM: 0.7,
    AIDifficulty.HARD: 1.2,
}
