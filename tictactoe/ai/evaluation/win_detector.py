"""
Win detection for tic-tac-toe.
"""
from typing import List, Sequence, Union
from ...models.enums import CellMark
from ...models.win_pattern import WinPattern, WinResult, WIN_PATTERNS, NO_WINNER
from ...game.board import Board
from ...game.errors import MalformedBoardError

BoardLike = Union[Board, Sequence[CellMark]]


class WinEvaluator:
    """
    Detects completed lines on a 3x3 board.

    Stateless: works on the live board, on snapshots, and on plain
    sequences of 9 CellMarks alike. Patterns are checked in index order
    and the first completed one is reported, so a lower pattern index
    wins when several lines are complete at once.
    """

    def __init__(self):
        """Initialize the evaluator with the fixed winning patterns."""
        self._winning_patterns: Sequence[WinPattern] = WIN_PATTERNS

    @staticmethod
    def _cells_of(board: BoardLike) -> Sequence[CellMark]:
        cells = board.cells if isinstance(board, Board) else board
        if len(cells) != Board.TOTAL_CELLS:
            raise MalformedBoardError(len(cells))
        for cell in cells:
            if not isinstance(cell, CellMark):
                raise MalformedBoardError(len(cells), f"Board cells must be CellMark values, got {cell!r}")
        return cells

    def evaluate(self, board: BoardLike) -> WinResult:
        """
        Check if there's a completed line on the board.

        Args:
            board: Board or sequence of 9 CellMarks

        Returns:
            WinResult with the winner and pattern index, or NO_WINNER

        Raises:
            MalformedBoardError: If the board does not hold 9 cells
        """
        cells = self._cells_of(board)

        for pattern in self._winning_patterns:
            first, second, third = (cells[pos_id] for pos_id in pattern.positions)
            if first != CellMark.EMPTY and first == second == third:
                return WinResult(winner=first, pattern_index=pattern.index)

        return NO_WINNER

    def is_draw(self, board: BoardLike) -> bool:
        """A draw is a full board with no completed line."""
        cells = self._cells_of(board)
        if self.evaluate(cells).has_winner:
            return False
        return CellMark.EMPTY not in cells

    def find_winning_moves(self, board: BoardLike, mark: CellMark) -> List[int]:
        """
        Find empty cells that would immediately complete a line for a mark.

        Each candidate is tried on a private copy; the given board is
        never modified.

        Args:
            board: Board or sequence of 9 CellMarks
            mark: Mark to find winning moves for

        Returns:
            Winning cell indices in ascending order
        """
        working = list(self._cells_of(board))
        winning_moves = []

        for index, cell in enumerate(working):
            if cell != CellMark.EMPTY:
                continue
            working[index] = mark
            if self.evaluate(working).winner == mark:
                winning_moves.append(index)
            working[index] = CellMark.EMPTY

        return winning_moves
