"""
Turn sequencing for tic-tac-toe.
"""
from ..models.enums import CellMark


class TurnSequencer:
    """Tracks whose turn it is. X always starts."""

    FIRST_PLAYER = CellMark.X

    def __init__(self):
        self._current: CellMark = self.FIRST_PLAYER

    @property
    def current(self) -> CellMark:
        """The player to move."""
        return self._current

    def switch_turn(self):
        """Hand the turn to the other player."""
        self._current = self._current.opponent()

    @staticmethod
    def opponent_of(mark: CellMark) -> CellMark:
        """Get the opposing mark without touching turn state."""
        return mark.opponent()

    def is_turn_of(self, mark: CellMark) -> bool:
        return self._current == mark

    def reset(self):
        """Give the turn back to the first player."""
        self._current = self.FIRST_PLAYER
