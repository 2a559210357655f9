from typing import Optional
import numpy as np
import gymnasium as gym

from .models.enums import CellMark, GameMode, GameState
from .game.config import SessionConfig
from .game.session import GameSession
from .game.statistics import GameStatistics
from .ai.strategy import MoveStrategy, RuleBasedStrategy


CELLS = 9


class TicTacToeEnv(gym.Env):
    """
    Tic-tac-toe against the built-in AI.

    The learner plays `agent_mark`; the other mark is played by an AIAgent
    inside a GameSession. Observations are from the learner's point of
    view: +1 own mark, -1 opponent mark, 0 empty.
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, agent_mark: CellMark = CellMark.X,
                 opponent_strategy: Optional[MoveStrategy] = None,
                 render_mode: Optional[str] = None):
        super().__init__()
        if agent_mark not in (CellMark.X, CellMark.O):
            raise ValueError(f"Agent must play X or O, got {agent_mark!r}")

        self.agent_mark = agent_mark
        self.render_mode = render_mode
        self.action_space = gym.spaces.Discrete(CELLS)
        self.observation_space = gym.spaces.Box(low=-1, high=1, shape=(CELLS,), dtype=np.int8)
        self.reward_win = 1.0
        self.reward_draw = 0.0
        self.reward_lose = -1.0
        self.reward_step = 0.0

        self.statistics = GameStatistics()
        config = SessionConfig(game_mode=GameMode.HUMAN_VS_AI, ai_mark=agent_mark.opponent())
        self.session = GameSession(
            config,
            opponent_strategy if opponent_strategy is not None else RuleBasedStrategy(),
            self.statistics,
        )

    def action_mask(self) -> np.ndarray:
        return np.array([cell == CellMark.EMPTY for cell in self.session.board], dtype=np.int8)

    def _get_obs(self) -> np.ndarray:
        obs = np.zeros(CELLS, dtype=np.int8)
        for i, cell in enumerate(self.session.board):
            if cell == self.agent_mark:
                obs[i] = 1
            elif cell != CellMark.EMPTY:
                obs[i] = -1
        return obs

    def _get_info(self) -> dict:
        return {"action_mask": self.action_mask(), "outcome": self.session.outcome}

    def reset(self, seed=None, options=None):
        super().reset(seed=seed, options=options)
        if seed is not None:
            self.session.ai_agent.strategy.reseed(seed)
        self.session.reset()

        # X always starts; let the AI open when the learner plays O
        self.session.play_ai_move()
        return self._get_obs(), self._get_info()

    def _terminal_reward(self) -> float:
        outcome = self.session.outcome
        if outcome.state == GameState.DRAW:
            return self.reward_draw
        return self.reward_win if outcome.winner == self.agent_mark else self.reward_lose

    def step(self, action):
        if self.session.is_game_over:
            raise ValueError("Episode is over, call reset()")

        action = int(action)
        if not (0 <= action < CELLS) or not self.session.board.is_empty(action):
            raise ValueError(f"Invalid action: {action}")

        self.session.apply_move(action, self.agent_mark)
        if not self.session.is_game_over:
            self.session.play_ai_move()

        if self.session.is_game_over:
            res = self._get_obs(), self._terminal_reward(), True, False, self._get_info()
        else:
            res = self._get_obs(), self.reward_step, False, False, self._get_info()

        if self.render_mode == "human":
            self.render()
        return res

    def render(self):
        text = f"{self.session.board}\n{self.session.outcome}"
        if self.render_mode == "ansi":
            return text
        print(text)
