"""
Win pattern models for tic-tac-toe.
"""
from dataclasses import dataclass
from typing import Optional, Tuple
from .enums import CellMark


@dataclass(frozen=True)
class WinPattern:
    """
    Represents one of the eight winning lines on the 3x3 board.

    Attributes:
        index: Fixed identifier of the line (0-7); front ends use it to
            pick the strikethrough to draw
        positions: The three cell indices forming the line, in order
        description: Human-readable description of the line
    """
    index: int
    positions: Tuple[int, int, int]
    description: str = ""

    def __post_init__(self):
        """Validate pattern parameters."""
        if not (0 <= self.index <= 7):
            raise ValueError(f"Pattern index must be between 0 and 7, got {self.index}")

        if len(self.positions) != 3:
            raise ValueError(f"Win pattern must have exactly 3 positions, got {len(self.positions)}")

        for pos_id in self.positions:
            if not (0 <= pos_id <= 8):
                raise ValueError(f"Position ID must be between 0 and 8, got {pos_id}")

    def __str__(self) -> str:
        return f"Pattern {self.index} ({self.description}): {list(self.positions)}"


WIN_PATTERNS: Tuple[WinPattern, ...] = (
    # Rows
    WinPattern(0, (0, 1, 2), "top row"),
    WinPattern(1, (3, 4, 5), "middle row"),
    WinPattern(2, (6, 7, 8), "bottom row"),
    # Columns
    WinPattern(3, (0, 3, 6), "left column"),
    WinPattern(4, (1, 4, 7), "middle column"),
    WinPattern(5, (2, 5, 8), "right column"),
    # Diagonals
    WinPattern(6, (0, 4, 8), "top-left to bottom-right diagonal"),
    WinPattern(7, (2, 4, 6), "top-right to bottom-left diagonal"),
)


def get_winning_line(pattern_index: int) -> Tuple[int, int, int]:
    """
    Look up the cells of a winning line.

    Args:
        pattern_index: Pattern index (0-7)

    Returns:
        The three cell indices of the line

    Raises:
        ValueError: If the pattern index is out of range
    """
    if not (0 <= pattern_index < len(WIN_PATTERNS)):
        raise ValueError(f"Pattern index must be between 0 and 7, got {pattern_index}")
    return WIN_PATTERNS[pattern_index].positions


@dataclass(frozen=True)
class WinResult:
    """
    Represents the result of a winning condition check.

    Attributes:
        winner: Mark that completed a line, or None
        pattern_index: Index of the completed line, or -1
    """
    winner: Optional[CellMark] = None
    pattern_index: int = -1

    def __post_init__(self):
        """Validate win result parameters."""
        if self.winner is None:
            if self.pattern_index != -1:
                raise ValueError("A result without a winner cannot carry a pattern index")
            return

        if self.winner == CellMark.EMPTY:
            raise ValueError("EMPTY cannot win")

        if not (0 <= self.pattern_index <= 7):
            raise ValueError(f"Pattern index must be between 0 and 7, got {self.pattern_index}")

    @property
    def has_winner(self) -> bool:
        return self.winner is not None

    @property
    def winning_positions(self) -> Tuple[int, ...]:
        """Cells of the winning line, or an empty tuple."""
        if self.winner is None:
            return ()
        return WIN_PATTERNS[self.pattern_index].positions

    def __str__(self) -> str:
        if self.winner is None:
            return "No winner"
        return f"{self.winner.value} wins with {WIN_PATTERNS[self.pattern_index]}"


NO_WINNER = WinResult()
