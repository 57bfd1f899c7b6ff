"""
Unit tests for the Gymnasium environment wrapper.
"""
import numpy as np
import pytest
from minesweeper import BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Create a 3x3 environment with one mine."""
    return MinesweeperEnv(BoardConfig(3, 1), render_mode="ansi")


class TestSpaces:
    """Test observation and action spaces."""

    def test_default_config(self) -> None:
        """Default environment is a 9x9 board with 10 mines."""
        default_env = MinesweeperEnv()
        assert default_env.observation_space.shape == (9, 9)
        assert default_env.action_space.n == 81

    def test_reset_observation(self, env: MinesweeperEnv) -> None:
        """Reset gives an all-hidden observation inside the space."""
        obs, info = env.reset(seed=0)
        assert obs.shape == (3, 3)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "PLAYING"
        assert info["total_safe"] == 8
        assert info["valid_actions"] == 9


class TestStep:
    """Test rewards and termination."""

    def test_safe_then_invalid_then_mine(self, env: MinesweeperEnv) -> None:
        """Rewards follow the table and a mine terminates the episode."""
        env.reset(seed=0)
        env.game.board.set_mine_layout([(1, 1)])

        obs, reward, terminated, truncated, info = env.step(0)
        assert reward == 1.0
        assert obs[0, 0] == 1
        assert terminated is False
        assert truncated is False

        _, reward, terminated, _, _ = env.step(0)
        assert reward == -0.1
        assert terminated is False

        _, reward, terminated, _, info = env.step(4)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_winning_move(self, env: MinesweeperEnv) -> None:
        """Cascading onto every safe cell wins."""
        env.reset(seed=0)
        env.game.board.set_mine_layout([(2, 2)])
        _, reward, terminated, _, info = env.step(0)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"
        assert info["revealed"] == 8

    def test_same_seed_same_episode(self) -> None:
        """Seeded resets reproduce the mine layout."""
        first = MinesweeperEnv(BoardConfig(9, 10))
        second = MinesweeperEnv(BoardConfig(9, 10))
        first.reset(seed=5)
        second.reset(seed=5)
        obs_a = first.step(40)[0]
        obs_b = second.step(40)[0]
        assert np.array_equal(obs_a, obs_b)

    def test_action_mask(self, env: MinesweeperEnv) -> None:
        """Mask marks hidden cells only."""
        env.reset(seed=0)
        env.game.board.set_mine_layout([(1, 1)])
        env.step(0)
        mask = env.get_action_mask()
        assert mask.dtype == bool
        assert not mask[0]
        assert mask.sum() == 8


class TestRender:
    """Test text rendering."""

    def test_ansi_render(self, env: MinesweeperEnv) -> None:
        env.reset(seed=0)
        text = env.render()
        assert "Here is your minefield:" in text
        assert "A _ _ _ " in text

    def test_lost_render_shows_mine(self, env: MinesweeperEnv) -> None:
        env.reset(seed=0)
        env.game.board.set_mine_layout([(1, 1)])
        env.step(4)
        assert "*" in env.render()

    def test_human_render_prints(self, capsys) -> None:
        human_env = MinesweeperEnv(BoardConfig(3, 1), render_mode="human")
        human_env.reset(seed=0)
        assert human_env.render() is None
        assert "Here is your minefield:" in capsys.readouterr().out
