"""
AI agent for tic-tac-toe.

This module binds a move strategy to the mark the AI plays, records each
decision with a short explanation, and logs decisions for monitoring.
"""
import time
import logging
from collections import deque
from typing import Any, Deque, Dict, Optional
from dataclasses import dataclass

from ..models.enums import CellMark
from .evaluation.win_detector import BoardLike
from .strategy import MoveStrategy, RuleBasedStrategy, StrategyRule


@dataclass
class AIDecision:
    """
    A single AI decision.

    Attributes:
        index: Chosen cell index, or None if no legal move exists
        mark: Mark the AI plays
        rule: Strategy rule that produced the move, if the strategy reports one
        reasoning: Human-readable explanation of the decision
        move_time: Time taken to select the move (seconds)
    """
    index: Optional[int]
    mark: CellMark
    rule: Optional[StrategyRule]
    reasoning: str
    move_time: float


_REASONS = {
    StrategyRule.WIN: "Winning move",
    StrategyRule.BLOCK: "Blocking opponent's winning move",
    StrategyRule.CENTER: "Taking the center",
    StrategyRule.CORNER: "Taking a corner",
    StrategyRule.EDGE: "Taking an edge",
    StrategyRule.FALLBACK: "Taking any free cell",
    StrategyRule.RANDOM: "Random move",
    StrategyRule.NO_MOVE: "No legal move available",
}


class AIAgent:
    """
    Computer player bound to one mark.

    Features:
    - Delegates move choice to a swappable MoveStrategy
    - Keeps the most recent decisions with reasoning
    - Optional console logging of every decision
    """

    LOGGER_NAME = 'tictactoe.ai'
    HISTORY_LIMIT = 100

    def __init__(self, mark: CellMark = CellMark.O,
                 strategy: Optional[MoveStrategy] = None,
                 enable_logging: bool = False):
        """
        Initialize the AI agent.

        Args:
            mark: Which mark the AI plays (X or O)
            strategy: Move strategy, defaults to RuleBasedStrategy
            enable_logging: Whether to attach a console handler to the AI logger
        """
        if mark not in (CellMark.X, CellMark.O):
            raise ValueError(f"AI must play X or O, got {mark!r}")

        self.mark = mark
        self.strategy: MoveStrategy = strategy if strategy is not None else RuleBasedStrategy()
        self.enable_logging = enable_logging

        # Oldest decisions drop off once the limit is reached
        self.decision_history: Deque[AIDecision] = deque(maxlen=self.HISTORY_LIMIT)

        self.logger = logging.getLogger(self.LOGGER_NAME)
        if self.enable_logging:
            self._setup_logging()

    def _setup_logging(self):
        """Set up console logging for AI decisions."""
        self.logger.setLevel(logging.INFO)

        # Create console handler if none exists
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def get_move(self, board: BoardLike) -> Optional[int]:
        """
        Get the AI's next move.

        Args:
            board: Snapshot of the board (Board or sequence of 9 CellMarks)

        Returns:
            Cell index, or None if no legal move exists
        """
        return self.decide(board).index

    def decide(self, board: BoardLike) -> AIDecision:
        """
        Select a move and explain it.

        Args:
            board: Snapshot of the board

        Returns:
            AIDecision with the move and reasoning
        """
        start_time = time.perf_counter()
        self.strategy.last_rule = None
        index = self.strategy.get_move(board, self.mark)
        move_time = time.perf_counter() - start_time

        rule = self.strategy.last_rule
        if index is None:
            rule = StrategyRule.NO_MOVE
        reasoning = _REASONS.get(rule, f"Chosen by {type(self.strategy).__name__}")

        decision = AIDecision(
            index=index,
            mark=self.mark,
            rule=rule,
            reasoning=reasoning,
            move_time=move_time,
        )

        self.decision_history.append(decision)
        self._log_decision(decision)
        return decision

    def set_strategy(self, new_strategy: MoveStrategy):
        """Change the strategy at runtime, keeping the bound mark."""
        if new_strategy is None:
            raise ValueError("Strategy cannot be None")
        self.logger.debug("Switching strategy from %s to %s",
                          type(self.strategy).__name__, type(new_strategy).__name__)
        self.strategy = new_strategy

    def is_my_turn(self, current_mark: CellMark) -> bool:
        """Check if the given current player is the AI."""
        return current_mark == self.mark

    def _log_decision(self, decision: AIDecision):
        """Log AI decision for monitoring."""
        if decision.index is None:
            self.logger.warning(f"{self.mark.value} - no legal move available")
            return

        self.logger.info(
            f"{self.mark.value} - Move: {decision.index}, "
            f"Rule: {decision.rule.value if decision.rule else 'n/a'}, "
            f"Time: {decision.move_time:.6f}s"
        )

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of AI decision statistics over the stored history.

        Returns:
            Dictionary with decision counts, timing and rule usage
        """
        total_decisions = len(self.decision_history)
        total_time = 0.0
        rule_counts: Dict[str, int] = {}
        for decision in self.decision_history:
            total_time += decision.move_time
            if decision.rule is not None:
                rule_counts[decision.rule.value] = rule_counts.get(decision.rule.value, 0) + 1

        return {
            'total_decisions': total_decisions,
            'average_time': total_time / total_decisions if total_decisions else 0.0,
            'rule_counts': rule_counts,
        }

    def reset_performance_tracking(self):
        """Reset all performance tracking data."""
        self.decision_history.clear()
