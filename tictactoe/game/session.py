"""
Game session: the orchestrator front ends talk to.

A session owns one board, one turn sequencer, the cached outcome and, in
AI mode, one AI agent. Sessions share nothing, so several can run side by
side; a single session is not thread safe.
"""
from typing import List, Optional, Tuple
import logging

from ..models.enums import CellMark
from ..models.move import Move
from ..models.outcome import GameOutcome
from ..models.win_pattern import get_winning_line
from ..ai.agent import AIAgent
from ..ai.evaluation.win_detector import WinEvaluator
from ..ai.strategy import MoveStrategy
from .board import Board
from .config import SessionConfig
from .errors import InvalidIndexError
from .statistics import GameStatistics
from .turns import TurnSequencer

logger = logging.getLogger(__name__)


class GameSession:
    """
    One game of tic-tac-toe from first move to reset.

    States: in progress -> won | draw. A finished game accepts no moves
    until reset() returns board, turns and outcome to the start together.
    """

    def __init__(self, config: Optional[SessionConfig] = None,
                 strategy: Optional[MoveStrategy] = None,
                 statistics: Optional[GameStatistics] = None):
        """
        Initialize the session.

        Args:
            config: Session settings, defaults to human vs human
            strategy: Strategy for the AI agent in AI mode
            statistics: Optional tally that receives each finished game
        """
        self.config = config if config is not None else SessionConfig()
        self.board = Board()
        self.turns = TurnSequencer()
        self.win_evaluator = WinEvaluator()
        self.statistics = statistics
        self.move_history: List[Move] = []
        self._outcome = GameOutcome.in_progress()

        self.ai_agent: Optional[AIAgent] = None
        if self.config.is_ai_mode:
            self.ai_agent = AIAgent(self.config.ai_mark, strategy)

    @property
    def outcome(self) -> GameOutcome:
        """Outcome cached after the last applied move."""
        return self._outcome

    @property
    def current_player(self) -> CellMark:
        return self.turns.current

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_game_over

    def board_snapshot(self) -> Board:
        return self.board.snapshot()

    def apply_move(self, index: int, mark: Optional[CellMark] = None) -> bool:
        """
        Apply a move for the current player.

        Args:
            index: Cell index (0-8)
            mark: Mark to place; defaults to the current player

        Returns:
            True if the move was applied. False if the game is over, the
            index is out of range, the mark is not the current player's, or
            the cell is taken; nothing changes in that case.
        """
        if self.is_game_over:
            logger.warning("Move %s rejected: game is already over", index)
            return False

        if mark is None:
            mark = self.turns.current
        if mark != self.turns.current:
            logger.warning("Move %s rejected: it is %s's turn, not %s's",
                           index, self.turns.current.value, getattr(mark, 'value', mark))
            return False

        try:
            placed = self.board.set(index, mark)
        except InvalidIndexError as e:
            logger.warning("Move rejected: %s", e)
            return False

        if not placed:
            logger.warning("Move %s rejected: cell is occupied", index)
            return False

        self.move_history.append(Move(index=int(index), mark=mark))
        self._outcome = self.evaluate()

        if self._outcome.is_game_over:
            logger.info("Game over after %d moves: %s", len(self.move_history), self._outcome)
            if self.statistics is not None:
                self.statistics.record(self._outcome)
        else:
            self.turns.switch_turn()

        return True

    def evaluate(self) -> GameOutcome:
        """
        Work out the outcome of the live board.

        A completed line is checked before fullness, so a full board with
        a line is a win and never a draw.
        """
        result = self.win_evaluator.evaluate(self.board)
        if result.has_winner:
            return GameOutcome.won(result.winner, result.pattern_index)
        if self.board.is_full():
            return GameOutcome.draw()
        return GameOutcome.in_progress()

    @staticmethod
    def get_winning_line(pattern_index: int) -> Tuple[int, int, int]:
        """Cells of a winning line, for highlighting."""
        return get_winning_line(pattern_index)

    def is_ai_turn(self) -> bool:
        return (self.ai_agent is not None
                and not self.is_game_over
                and self.ai_agent.is_my_turn(self.turns.current))

    def play_ai_move(self) -> Optional[int]:
        """
        Let the AI move if it is its turn.

        The agent works on a snapshot; its answer goes through apply_move
        like a human move.

        Returns:
            The cell played, or None if the AI did not move
        """
        if not self.is_ai_turn():
            return None

        index = self.ai_agent.get_move(self.board.snapshot())
        if index is None:
            return None

        if not self.apply_move(index, self.ai_agent.mark):
            logger.error("AI chose illegal cell %s", index)
            return None
        return index

    def reset(self):
        """Start a new game."""
        self.board.reset()
        self.turns.reset()
        self.move_history.clear()
        self._outcome = GameOutcome.in_progress()
        if self.ai_agent is not None:
            self.ai_agent.reset_performance_tracking()
        logger.debug("Session reset")
