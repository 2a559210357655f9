# Board, turns and session state. GameSession lives in .session to keep
# this package importable before the ai package.
from .errors import TicTacToeError, InvalidIndexError, MalformedBoardError
from .board import Board, ValidationResult
from .turns import TurnSequencer
from .config import SessionConfig
from .statistics import GameStatistics

__all__ = [
    'TicTacToeError', 'InvalidIndexError', 'MalformedBoardError',
    'Board', 'ValidationResult', 'TurnSequencer', 'SessionConfig', 'GameStatistics',
]
