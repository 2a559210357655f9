"""
Game outcome record.
"""
from dataclasses import dataclass
from typing import Optional, Tuple
from .enums import CellMark, GameState
from .win_pattern import WIN_PATTERNS


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of a game as seen by the orchestrator.

    Attributes:
        state: IN_PROGRESS, WON or DRAW
        winner: Winning mark when state is WON, otherwise None
        pattern_index: Winning line when state is WON, otherwise -1
    """
    state: GameState = GameState.IN_PROGRESS
    winner: Optional[CellMark] = None
    pattern_index: int = -1

    def __post_init__(self):
        if self.state == GameState.WON:
            if self.winner not in (CellMark.X, CellMark.O):
                raise ValueError(f"A won outcome needs X or O as winner, got {self.winner!r}")
            if not (0 <= self.pattern_index <= 7):
                raise ValueError(f"Pattern index must be between 0 and 7, got {self.pattern_index}")
        elif self.winner is not None or self.pattern_index != -1:
            raise ValueError(f"{self.state.value} outcome cannot carry a winner")

    @classmethod
    def in_progress(cls) -> 'GameOutcome':
        return cls(GameState.IN_PROGRESS)

    @classmethod
    def won(cls, winner: CellMark, pattern_index: int) -> 'GameOutcome':
        return cls(GameState.WON, winner, pattern_index)

    @classmethod
    def draw(cls) -> 'GameOutcome':
        return cls(GameState.DRAW)

    @property
    def is_game_over(self) -> bool:
        return self.state != GameState.IN_PROGRESS

    @property
    def winning_line(self) -> Tuple[int, ...]:
        if self.state != GameState.WON:
            return ()
        return WIN_PATTERNS[self.pattern_index].positions

    def __str__(self) -> str:
        if self.state == GameState.WON:
            return f"{self.winner.value} wins (pattern {self.pattern_index})"
        if self.state == GameState.DRAW:
            return "Draw"
        return "In progress"
