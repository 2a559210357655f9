from .evaluation.win_detector import WinEvaluator
from .strategy import MoveStrategy, RuleBasedStrategy, RandomStrategy, StrategyRule
from .agent import AIAgent, AIDecision

__all__ = [
    'WinEvaluator', 'MoveStrategy', 'RuleBasedStrategy', 'RandomStrategy',
    'StrategyRule', 'AIAgent', 'AIDecision',
]
