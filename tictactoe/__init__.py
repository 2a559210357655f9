"""
Tic-tac-toe game-logic core: board, turns, win detection and a rule-based AI.
"""
from .models import CellMark, GameState, GameMode, AIDifficulty, GameOutcome, WinResult
from .game import Board, TurnSequencer, SessionConfig, GameStatistics
from .ai import WinEvaluator, MoveStrategy, RuleBasedStrategy, RandomStrategy, AIAgent
from .game.session import GameSession

__version__ = "0.1.0"

__all__ = [
    'CellMark', 'GameState', 'GameMode', 'AIDifficulty', 'GameOutcome', 'WinResult',
    'Board', 'TurnSequencer', 'SessionConfig', 'GameStatistics',
    'WinEvaluator', 'MoveStrategy', 'RuleBasedStrategy', 'RandomStrategy', 'AIAgent',
    'GameSession',
]
