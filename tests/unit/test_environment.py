"""
Unit tests for the Gymnasium environment wrapper.
"""
import numpy as np
import pytest
from minefield import Board, BoardConfig, MinesweeperEnv, render_board


@pytest.fixture
def env() -> MinesweeperEnv:
    """Beginner environment, reset with a fixed seed."""
    environment = MinesweeperEnv(render_mode="ansi")
    environment.reset(seed=5)
    return environment


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_uncover_and_mark(self) -> None:
        env = MinesweeperEnv(BoardConfig(4, 3, 2))
        assert env.action_space.n == 24

    def test_observation_matches_space(self, env: MinesweeperEnv) -> None:
        obs, _ = env.reset(seed=1)
        assert obs.shape == (8, 8)
        assert env.observation_space.contains(obs)


class TestReset:
    """Test episode reset."""

    def test_reset_gives_fresh_board(self, env: MinesweeperEnv) -> None:
        env.step(0)
        obs, info = env.reset()
        assert np.all(obs == -1)
        assert info["game_state"] == "UNPLACED"
        assert info["steps"] == 0

    def test_same_seed_gives_same_layout(self) -> None:
        first, second = MinesweeperEnv(), MinesweeperEnv()
        first.reset(seed=11)
        second.reset(seed=11)
        obs_first = first.step(27)[0]
        obs_second = second.step(27)[0]
        assert np.array_equal(obs_first, obs_second)


class TestStep:
    """Test action handling and rewards."""

    def test_first_uncover_is_rewarded(self, env: MinesweeperEnv) -> None:
        obs, reward, terminated, truncated, info = env.step(0)
        assert reward in (1.0, 10.0)
        assert obs[0, 0] >= 0
        assert truncated is False
        assert info["steps"] == 1

    def test_mark_action_flags_tile(self, env: MinesweeperEnv) -> None:
        obs, reward, terminated, _, _ = env.step(64 + 9)
        assert reward == 0.0
        assert obs[1, 1] == -2
        assert terminated is False

    def test_uncover_flagged_tile_is_penalised(self, env: MinesweeperEnv) -> None:
        env.step(64)
        _, reward, _, _, _ = env.step(0)
        assert reward == -0.1

    def test_mark_uncovered_tile_is_penalised(self, env: MinesweeperEnv) -> None:
        env.step(0)
        _, reward, _, _, _ = env.step(64)
        assert reward == -0.1

    def test_hitting_mine_terminates(self) -> None:
        env = MinesweeperEnv(BoardConfig(3, 3, 1))
        env.reset()
        env.board = Board.from_mines(BoardConfig(3, 3, 1), [(2, 2)])
        _, reward, terminated, _, info = env.step(8)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_winning_terminates(self) -> None:
        env = MinesweeperEnv(BoardConfig(3, 3, 1))
        env.reset()
        env.board = Board.from_mines(BoardConfig(3, 3, 1), [(2, 2)])
        _, reward, terminated, _, info = env.step(0)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"


class TestActionMask:
    """Test valid action mask."""

    def test_new_board_allows_everything(self, env: MinesweeperEnv) -> None:
        assert env.get_action_mask().all()

    def test_flagged_tile_masks_uncover_only(self, env: MinesweeperEnv) -> None:
        env.step(64 + 3)
        mask = env.get_action_mask()
        assert not mask[3]
        assert mask[64 + 3]

    def test_finished_game_masks_everything(self) -> None:
        env = MinesweeperEnv(BoardConfig(2, 2, 0))
        env.reset()
        env.step(0)
        assert not env.get_action_mask().any()


class TestRender:
    """Test text rendering."""

    def test_render_symbols(self) -> None:
        board = Board.from_mines(BoardConfig(3, 3, 1), [(2, 2)])
        board.handle_mark(2, 2)
        board.handle_uncover(1, 1)
        assert render_board(board) == ". . .\n. 1 .\n. . F"

    def test_ansi_render_returns_text(self, env: MinesweeperEnv) -> None:
        text = env.render()
        assert text.splitlines()[0] == " ".join("." * 8)

    def test_human_render_prints(self, capsys: pytest.CaptureFixture) -> None:
        env = MinesweeperEnv(BoardConfig(2, 1, 0), render_mode="human")
        env.reset()
        assert env.render() is None
        assert capsys.readouterr().out == ". .\n"
