"""
Move selection strategies for the tic-tac-toe AI.

A strategy looks at a board and the mark it plays and returns one cell
index, or None when no legal move exists. Strategies never raise for a
full or malformed board and never modify the board they are given.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Optional, Sequence
import random

from ..models.enums import CellMark
from ..game.board import Board
from .evaluation.win_detector import BoardLike, WinEvaluator


class StrategyRule(Enum):
    """Which rule of the rule-based strategy produced a move."""
    WIN = "win"
    BLOCK = "block"
    CENTER = "center"
    CORNER = "corner"
    EDGE = "edge"
    FALLBACK = "fallback"
    RANDOM = "random"
    NO_MOVE = "no_move"


class MoveStrategy(ABC):
    """Interface for pluggable AI move selection."""

    def __init__(self):
        self.last_rule: Optional[StrategyRule] = None

    @abstractmethod
    def get_move(self, board: BoardLike, self_mark: CellMark) -> Optional[int]:
        """
        Choose the next move.

        Args:
            board: Board or sequence of 9 CellMarks
            self_mark: Mark the AI plays (X or O)

        Returns:
            Cell index (0-8), or None if no legal move exists
        """

    def reseed(self, seed: Optional[int]):
        """Restart the strategy's random generator, if it has one."""

    @staticmethod
    def _read_cells(board: BoardLike) -> Optional[List[CellMark]]:
        """Private copy of the cells, or None for a malformed board."""
        if board is None or not isinstance(board, (Board, Iterable)):
            return None
        cells = list(board.cells) if isinstance(board, Board) else list(board)
        if len(cells) != Board.TOTAL_CELLS:
            return None
        if not all(isinstance(cell, CellMark) for cell in cells):
            return None
        return cells

    @staticmethod
    def _empty_among(cells: Sequence[CellMark], candidates: Sequence[int]) -> List[int]:
        return [i for i in candidates if cells[i] == CellMark.EMPTY]


class RuleBasedStrategy(MoveStrategy):
    """
    Rule-based AI using a priority system.

    Rules, in order; the first one that finds a cell decides:
    1. WIN: complete one of our own lines
    2. BLOCK: take the cell the opponent would win with
    3. CENTER: take cell 4
    4. CORNER: random empty corner (0, 2, 6, 8)
    5. EDGE: random empty edge (1, 3, 5, 7)
    6. FALLBACK: random empty cell

    The strategy does not look further ahead than one move, so an
    opponent fork (two threats at once) is not prevented.
    """

    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    EDGES = (1, 3, 5, 7)

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the strategy.

        Args:
            seed: Seed for the strategy's own random generator
            rng: Generator to use instead of creating one from seed
        """
        super().__init__()
        self.win_evaluator = WinEvaluator()
        self.rng = rng if rng is not None else random.Random(seed)

    def reseed(self, seed: Optional[int]):
        self.rng.seed(seed)

    def get_move(self, board: BoardLike, self_mark: CellMark) -> Optional[int]:
        cells = self._read_cells(board)
        if cells is None or self_mark not in (CellMark.X, CellMark.O):
            self.last_rule = StrategyRule.NO_MOVE
            return None

        if CellMark.EMPTY not in cells:
            self.last_rule = StrategyRule.NO_MOVE
            return None

        opponent = self_mark.opponent()

        win_move = self._find_winning_move(cells, self_mark)
        if win_move is not None:
            self.last_rule = StrategyRule.WIN
            return win_move

        block_move = self._find_winning_move(cells, opponent)
        if block_move is not None:
            self.last_rule = StrategyRule.BLOCK
            return block_move

        if cells[self.CENTER] == CellMark.EMPTY:
            self.last_rule = StrategyRule.CENTER
            return self.CENTER

        corner_move = self._random_from(cells, self.CORNERS)
        if corner_move is not None:
            self.last_rule = StrategyRule.CORNER
            return corner_move

        edge_move = self._random_from(cells, self.EDGES)
        if edge_move is not None:
            self.last_rule = StrategyRule.EDGE
            return edge_move

        # Unreachable on a 9-cell board, the corner and edge rules cover every cell
        self.last_rule = StrategyRule.FALLBACK
        return self._random_from(cells, range(Board.TOTAL_CELLS))

    def _find_winning_move(self, cells: List[CellMark], mark: CellMark) -> Optional[int]:
        """First empty cell (ascending) that completes a line for mark."""
        winning_moves = self.win_evaluator.find_winning_moves(cells, mark)
        return winning_moves[0] if winning_moves else None

    def _random_from(self, cells: Sequence[CellMark], candidates: Sequence[int]) -> Optional[int]:
        available = self._empty_among(cells, candidates)
        if not available:
            return None
        return self.rng.choice(available)


class RandomStrategy(MoveStrategy):
    """Plays a uniformly random empty cell."""

    def __init__(self, seed: Optional[int] = None):
        super().__init__()
        self.rng = random.Random(seed)

    def reseed(self, seed: Optional[int]):
        self.rng.seed(seed)

    def get_move(self, board: BoardLike, self_mark: CellMark) -> Optional[int]:
        cells = self._read_cells(board)
        available = [] if cells is None else self._empty_among(cells, range(Board.TOTAL_CELLS))
        if not available:
            self.last_rule = StrategyRule.NO_MOVE
            return None
        self.last_rule = StrategyRule.RANDOM
        return self.rng.choice(available)
