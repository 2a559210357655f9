"""
Board representation for tic-tac-toe.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple
import logging
import operator
from ..models.enums import CellMark
from .errors import InvalidIndexError, MalformedBoardError

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class Board:
    """
    Represents the 3x3 tic-tac-toe board as 9 cells in row-major order.

    Layout:
    - 0, 1, 2: top row
    - 3, 4, 5: middle row
    - 6, 7, 8: bottom row

    The board only knows whether a cell is empty. Turn order and win
    rules live in TurnSequencer and WinEvaluator.
    """

    SIZE = 3
    TOTAL_CELLS = 9

    def __init__(self, cells: Optional[Iterable[CellMark]] = None):
        """
        Initialize the board.

        Args:
            cells: Optional initial contents (9 CellMarks). Defaults to empty.

        Raises:
            MalformedBoardError: If cells does not hold exactly 9 values
            ValueError: If a value is not a CellMark
        """
        if cells is None:
            self._cells: List[CellMark] = [CellMark.EMPTY] * self.TOTAL_CELLS
            return

        cells = list(cells)
        if len(cells) != self.TOTAL_CELLS:
            raise MalformedBoardError(len(cells))
        for cell in cells:
            if not isinstance(cell, CellMark):
                raise ValueError(f"Board cells must be CellMark values, got {cell!r}")
        self._cells = cells

    @classmethod
    def from_string(cls, board_string: str) -> 'Board':
        """
        Parse a 9-character board string ('X', 'O' or '_' per cell).

        Raises:
            MalformedBoardError: If the string is not 9 characters long
            ValueError: If the string holds an unknown character
        """
        if len(board_string) != cls.TOTAL_CELLS:
            raise MalformedBoardError(len(board_string))
        return cls(CellMark.from_char(char) for char in board_string)

    def to_string(self) -> str:
        """Get the 9-character string form of the board."""
        return ''.join(cell.symbol for cell in self._cells)

    def _normalize_index(self, index) -> Optional[int]:
        """Plain int for any integer type (numpy included) in 0-8, else None."""
        try:
            index = operator.index(index)
        except TypeError:
            return None
        return index if 0 <= index < self.TOTAL_CELLS else None

    def _check_index(self, index, operation: str) -> int:
        normalized = self._normalize_index(index)
        if normalized is None:
            raise InvalidIndexError(index, operation)
        return normalized

    def is_empty(self, index: int) -> bool:
        """Check if a cell is empty."""
        index = self._check_index(index, "check")
        return self._cells[index] == CellMark.EMPTY

    def get(self, index: int) -> CellMark:
        """Get the mark in a cell."""
        index = self._check_index(index, "read")
        return self._cells[index]

    def set(self, index: int, mark: CellMark) -> bool:
        """
        Place a mark in a cell.

        Args:
            index: Cell index (0-8)
            mark: X or O

        Returns:
            True if the mark was placed, False if the cell is already taken

        Raises:
            InvalidIndexError: If index is outside 0-8
            ValueError: If mark is not X or O
        """
        index = self._check_index(index, "set")
        if mark not in (CellMark.X, CellMark.O):
            raise ValueError(f"Only X or O can be placed, got {mark!r}")

        if self._cells[index] != CellMark.EMPTY:
            logger.debug("Cell %d is not empty (current: %s)", index, self._cells[index].value)
            return False

        self._cells[index] = mark
        logger.debug("Cell %d set to %s", index, mark.value)
        return True

    def validate_move(self, index: int) -> ValidationResult:
        """
        Validate if placing a mark at index is legal.

        Returns:
            ValidationResult indicating if the move is valid
        """
        normalized = self._normalize_index(index)
        if normalized is None:
            return ValidationResult(False, f"Invalid cell index: {index}")
        index = normalized

        if self._cells[index] != CellMark.EMPTY:
            return ValidationResult(False, f"Cell {index} is already occupied by {self._cells[index].value}")

        return ValidationResult(True)

    def is_full(self) -> bool:
        """Check if the board is full."""
        return CellMark.EMPTY not in self._cells

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices in ascending order."""
        return [i for i, cell in enumerate(self._cells) if cell == CellMark.EMPTY]

    def count(self, mark: CellMark) -> int:
        """Count the cells holding a mark."""
        return self._cells.count(mark)

    @property
    def cells(self) -> Tuple[CellMark, ...]:
        """Read-only view of all 9 cells."""
        return tuple(self._cells)

    def snapshot(self) -> 'Board':
        """Create an independent copy of the board."""
        return Board(self._cells)

    def reset(self):
        """Reset all cells to empty."""
        self._cells = [CellMark.EMPTY] * self.TOTAL_CELLS
        logger.debug("All cells reset to empty")

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[CellMark]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> CellMark:
        return self.get(index)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board('{self.to_string()}')"

    def __str__(self) -> str:
        """String representation of the board."""
        rows = []
        for row in range(self.SIZE):
            start = row * self.SIZE
            rows.append(" ".join(cell.symbol for cell in self._cells[start:start + self.SIZE]))
        return "\n".join(rows)
