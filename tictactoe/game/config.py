"""
Session configuration.

Settings are owned by the front end and handed to each GameSession when it
is created; the core never loads or saves them.
"""
from dataclasses import dataclass
from ..models.enums import AIDifficulty, CellMark, GameMode


@dataclass(frozen=True)
class SessionConfig:
    """
    Settings a game session needs from its host.

    Attributes:
        game_mode: Human vs human or human vs AI
        ai_mark: Mark the AI plays when AI mode is active
        ai_difficulty: Controls the thinking delay shown by the front end
        player_x_name: Display name for X
        player_o_name: Display name for O
    """
    game_mode: GameMode = GameMode.HUMAN_VS_HUMAN
    ai_mark: CellMark = CellMark.O
    ai_difficulty: AIDifficulty = AIDifficulty.MEDIUM
    player_x_name: str = "Player X"
    player_o_name: str = "Player O"

    def __post_init__(self):
        """Validate configuration values."""
        if not isinstance(self.game_mode, GameMode):
            raise ValueError(f"game_mode must be a GameMode, got {self.game_mode!r}")

        if self.ai_mark not in (CellMark.X, CellMark.O):
            raise ValueError(f"AI must play X or O, got {self.ai_mark!r}")

        if not isinstance(self.ai_difficulty, AIDifficulty):
            raise ValueError(f"ai_difficulty must be an AIDifficulty, got {self.ai_difficulty!r}")

    @property
    def is_ai_mode(self) -> bool:
        return self.game_mode == GameMode.HUMAN_VS_AI

    @property
    def ai_delay(self) -> float:
        """Seconds the front end waits before revealing the AI move."""
        return self.ai_difficulty.delay

    def player_name(self, mark: CellMark) -> str:
        """Display name for a mark."""
        if mark == CellMark.X:
            return self.player_x_name
        if mark == CellMark.O:
            return self.player_o_name
        raise ValueError(f"No player plays {mark!r}")
