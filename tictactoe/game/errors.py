"""
Exceptions raised by the game core.
"""


class TicTacToeError(Exception):
    """Base class for game core errors."""


class InvalidIndexError(TicTacToeError, IndexError):
    """Raised when a cell index outside 0-8 reaches a board operation."""

    def __init__(self, index: int, operation: str = "access"):
        super().__init__(f"Cannot {operation} cell {index}: index must be between 0 and 8")
        self.index = index
        self.operation = operation


class MalformedBoardError(TicTacToeError, ValueError):
    """Raised when a board does not hold exactly 9 CellMark cells."""

    def __init__(self, length: int, message: str = None):
        super().__init__(message or f"Board must have exactly 9 cells, got {length}")
        self.length = length
