"""
Move model for tic-tac-toe.
"""
from dataclasses import dataclass
import time
from .enums import CellMark


@dataclass
class Move:
    """
    Represents a committed move.

    Attributes:
        index: Cell index (0-8) where the move is made
        mark: Mark placed in the cell
        timestamp: Time when the move was made
    """
    index: int
    mark: CellMark
    timestamp: float = None

    def __post_init__(self):
        """Set timestamp if not provided and validate parameters."""
        if self.timestamp is None:
            self.timestamp = time.time()

        if not (0 <= self.index <= 8):
            raise ValueError(f"Cell index must be between 0 and 8, got {self.index}")

        if not isinstance(self.mark, CellMark) or self.mark == CellMark.EMPTY:
            raise ValueError(f"Mark must be X or O, got {self.mark!r}")

    def __str__(self) -> str:
        return f"{self.mark.value} -> cell {self.index}"
