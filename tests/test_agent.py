import logging

import pytest

from tictactoe.models.enums import CellMark
from tictactoe.game.board import Board
from tictactoe.ai.agent import AIAgent
from tictactoe.ai.strategy import MoveStrategy, RuleBasedStrategy, StrategyRule

X, O = CellMark.X, CellMark.O


class RecordingStrategy(MoveStrategy):
    """Always answers with a fixed cell and remembers what it was asked."""

    def __init__(self, answer):
        super().__init__()
        self.answer = answer
        self.calls = []

    def get_move(self, board, self_mark):
        self.calls.append((board, self_mark))
        return self.answer


def test_default_strategy_is_rule_based():
    agent = AIAgent(O)
    assert isinstance(agent.strategy, RuleBasedStrategy)
    assert agent.get_move(Board.from_string("XX__O____")) == 2


def test_get_move_delegates_with_bound_mark():
    strategy = RecordingStrategy(7)
    agent = AIAgent(X, strategy)
    board = Board()
    assert agent.get_move(board) == 7
    assert strategy.calls == [(board, X)]


def test_set_strategy_keeps_mark():
    agent = AIAgent(X, RecordingStrategy(1))
    replacement = RecordingStrategy(3)
    agent.set_strategy(replacement)
    assert agent.strategy is replacement
    assert agent.mark == X
    assert agent.get_move(Board()) == 3
    assert replacement.calls[0][1] == X


def test_set_strategy_rejects_none():
    with pytest.raises(ValueError):
        AIAgent(X).set_strategy(None)


def test_is_my_turn():
    agent = AIAgent(O)
    assert agent.is_my_turn(O)
    assert not agent.is_my_turn(X)
    assert not agent.is_my_turn(CellMark.EMPTY)


def test_agent_cannot_play_empty():
    with pytest.raises(ValueError):
        AIAgent(CellMark.EMPTY)


def test_decide_explains_the_move():
    agent = AIAgent(X, RuleBasedStrategy(seed=0))
    decision = agent.decide(Board.from_string("OO_X_____"))
    assert decision.index == 2
    assert decision.mark == X
    assert decision.rule == StrategyRule.BLOCK
    assert "Blocking" in decision.reasoning
    assert decision.move_time >= 0.0


def test_no_move_on_full_board():
    agent = AIAgent(X)
    decision = agent.decide(Board.from_string("XOXXOOOXX"))
    assert decision.index is None
    assert decision.rule == StrategyRule.NO_MOVE


def test_custom_strategy_reasoning_falls_back_to_class_name():
    decision = AIAgent(X, RecordingStrategy(0)).decide(Board())
    assert decision.rule is None
    assert "RecordingStrategy" in decision.reasoning


def test_performance_summary():
    agent = AIAgent(X, RuleBasedStrategy(seed=0))
    assert agent.get_performance_summary()['total_decisions'] == 0
    agent.get_move(Board())
    agent.get_move(Board.from_string("XX_OO____"))
    summary = agent.get_performance_summary()
    assert summary['total_decisions'] == 2
    assert summary['rule_counts'] == {'center': 1, 'win': 1}
    agent.reset_performance_tracking()
    assert len(agent.decision_history) == 0
    assert agent.get_performance_summary()["average_time"] == 0.0


def test_decision_history_is_bounded():
    agent = AIAgent(X, RuleBasedStrategy(seed=0))
    for _ in range(AIAgent.HISTORY_LIMIT + 25):
        agent.get_move(Board())
    assert len(agent.decision_history) == AIAgent.HISTORY_LIMIT
    assert agent.get_performance_summary()["total_decisions"] == AIAgent.HISTORY_LIMIT


def test_decisions_are_logged(caplog):
    agent = AIAgent(X, RuleBasedStrategy(seed=0))
    with caplog.at_level(logging.INFO, logger=AIAgent.LOGGER_NAME):
        agent.get_move(Board())
    assert "Move: 4" in caplog.text
