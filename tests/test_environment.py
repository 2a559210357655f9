import numpy as np
import pytest

from tictactoe.models.enums import CellMark, GameState
from tictactoe.ai.strategy import RuleBasedStrategy
from tictactoe.environment import TicTacToeEnv


def test_reset_gives_empty_board():
    env = TicTacToeEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (9,)
    assert obs.dtype == np.int8
    assert not obs.any()
    assert info["action_mask"].tolist() == [1] * 9
    assert env.observation_space.contains(obs)


def test_opponent_replies_in_same_step():
    env = TicTacToeEnv(opponent_strategy=RuleBasedStrategy(seed=0))
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(4)
    assert obs[4] == 1
    assert (obs == -1).sum() == 1
    assert np.flatnonzero(obs == -1)[0] in (0, 2, 6, 8)
    assert reward == 0.0
    assert not terminated and not truncated
    assert info["action_mask"].sum() == 7


def test_invalid_action_raises():
    env = TicTacToeEnv()
    env.reset(seed=0)
    env.step(4)
    with pytest.raises(ValueError):
        env.step(4)
    with pytest.raises(ValueError):
        env.step(9)


def test_learner_as_o_sees_opening_move():
    env = TicTacToeEnv(agent_mark=CellMark.O)
    obs, _ = env.reset(seed=0)
    assert obs[4] == -1
    assert (obs != 0).sum() == 1


def test_episode_ends_with_terminal_reward():
    env = TicTacToeEnv()
    rng = np.random.default_rng(0)
    for episode in range(10):
        obs, info = env.reset(seed=episode)
        terminated = False
        while not terminated:
            action = rng.choice(np.flatnonzero(info["action_mask"]))
            obs, reward, terminated, _, info = env.step(action)
        outcome = env.session.outcome
        if outcome.state == GameState.DRAW:
            assert reward == 0.0
        elif outcome.winner == CellMark.X:
            assert reward == 1.0
        else:
            assert reward == -1.0
        with pytest.raises(ValueError):
            env.step(0)
    assert env.statistics.games_played == 10


def test_opponent_history_does_not_grow_across_episodes():
    env = TicTacToeEnv(agent_mark=CellMark.O)
    for episode in range(200):
        _, info = env.reset(seed=episode)
        env.step(int(np.flatnonzero(info["action_mask"])[0]))
    # only the current episode's decisions are kept
    assert len(env.session.ai_agent.decision_history) <= 5


def test_same_seed_same_episode():
    def run(seed):
        env = TicTacToeEnv(agent_mark=CellMark.O)
        obs, _ = env.reset(seed=seed)
        env.step(0)
        return env.session.board.to_string()

    assert run(3) == run(3)


def test_render_ansi():
    env = TicTacToeEnv(render_mode="ansi")
    env.reset(seed=0)
    env.step(0)
    text = env.render()
    assert text.startswith("X")
    assert "In progress" in text
