# Data models and enums
from .enums import CellMark, GameState, GameMode, AIDifficulty
from .win_pattern import WinPattern, WinResult, WIN_PATTERNS, NO_WINNER, get_winning_line
from .move import Move
from .outcome import GameOutcome

__all__ = [
    'CellMark', 'GameState', 'GameMode', 'AIDifficulty',
    'WinPattern', 'WinResult', 'WIN_PATTERNS', 'NO_WINNER', 'get_winning_line',
    'Move', 'GameOutcome',
]
