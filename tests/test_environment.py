"""
Tests for the game session.

Tests cover the session API and state management, reproducible seeding, the end of a game and
text rendering.
"""

from unittest import TestCase, main

import numpy as np

from tilemerge.addons.config import EngineConfig
from tilemerge.addons.exceptions import InvalidConfiguration
from tilemerge.addons.types import Direction, GameState
from tilemerge.envs.tilemerge import TileMerge
from tilemerge.utils.render import render_board

# ##: Full board without any adjacent equal pair.
DEADLOCK = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])


class TestEnvironmentInterface(TestCase):
    """Test TileMerge class API and state management."""

    def setUp(self):
        """Initialize fresh session before each test."""
        self.env = TileMerge(size=4, seed=0)

    def test_reset_state_initialization(self):
        """Reset initializes board with exactly 2 tiles and zero score."""
        obs = self.env.reset()

        # ##>: Exactly 2 non-zero tiles after reset.
        self.assertEqual(np.count_nonzero(obs), 2)

        # ##>: Tiles are only 2 or 4.
        tiles = obs[obs != 0]
        self.assertTrue(np.all((tiles == 2) | (tiles == 4)))

        # ##>: Score resets to zero and game is running.
        self.assertEqual(self.env.score, 0)
        self.assertFalse(self.env.is_finished)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        board1 = self.env.reset(seed=42)
        board2 = self.env.reset(seed=42)

        np.testing.assert_array_equal(board1, board2)

    def test_seeded_sessions_play_the_same_game(self):
        """Two sessions with the same seed stay identical move after move."""
        first, second = TileMerge(seed=3), TileMerge(seed=3)
        for direction in [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN] * 5:
            first.step(direction)
            second.step(direction)
        np.testing.assert_array_equal(first.board, second.board)
        self.assertEqual(first.score, second.score)

    def test_step_return_signature(self):
        """Step returns tuple of (board, gained score, done)."""
        self.env._state = GameState(grid=np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]))
        board, gained, done = self.env.step(Direction.LEFT)

        self.assertIsInstance(board, np.ndarray)
        self.assertEqual(board[0, 0], 4)
        self.assertEqual(gained, 4)
        self.assertEqual(self.env.score, 4)
        self.assertFalse(done)

    def test_step_accepts_action_names(self):
        """Every name in ACTIONS is a valid move."""
        for name in TileMerge.ACTIONS:
            self.env.step(name)
        self.assertEqual(set(TileMerge.ACTIONS), {'left', 'up', 'right', 'down'})

    def test_step_unknown_direction(self):
        """An unknown direction is rejected and the game is unchanged."""
        before = self.env.state
        with self.assertRaises(ValueError):
            self.env.step('diagonal')
        self.assertIs(self.env.state, before)

    def test_invalid_move_no_state_change(self):
        """Invalid move leaves board unchanged and gains nothing."""
        self.env._state = GameState(grid=np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]]))
        original = self.env.board

        board, gained, done = self.env.step(Direction.LEFT)

        np.testing.assert_array_equal(board, original)
        self.assertEqual(gained, 0)
        self.assertFalse(done)

    def test_board_is_a_copy(self):
        """Modifying the returned board does not change the game."""
        board = self.env.board
        board[:] = 0
        self.assertEqual(np.count_nonzero(self.env.board), 2)

    def test_legal_actions(self):
        """Legal actions follow the board and are empty once the game is over."""
        self.env._state = GameState(grid=np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]))
        self.assertEqual(self.env.legal_actions, [Direction.UP, Direction.RIGHT, Direction.DOWN])

        self.env._state = GameState(grid=DEADLOCK, game_over=True)
        self.assertEqual(self.env.legal_actions, [])

    def test_custom_config(self):
        """A configuration sets the board size and the spawned values."""
        env = TileMerge(config=EngineConfig(size=3, start_tiles=3, spawn_probs={4: 1.0}), seed=0)
        self.assertEqual(env.size, 3)
        self.assertEqual(env.board.shape, (3, 3))
        self.assertEqual(sorted(env.board[env.board != 0].tolist()), [4, 4, 4])

    def test_invalid_size(self):
        """A board smaller than 2 is rejected."""
        with self.assertRaises(InvalidConfiguration):
            TileMerge(size=1)

    def test_size_conflicts_with_config(self):
        """A size that disagrees with the configuration is rejected."""
        with self.assertRaises(InvalidConfiguration):
            TileMerge(size=5, config=EngineConfig(size=3))

        # ##>: A matching size is accepted.
        self.assertEqual(TileMerge(size=3, config=EngineConfig(size=3), seed=0).size, 3)

    def test_seed_and_rng_exclusive(self):
        """A seed cannot be combined with an injected source of randomness."""
        with self.assertRaises(InvalidConfiguration):
            TileMerge(seed=1, rng=np.random.default_rng(2))

    def test_injected_rng(self):
        """An injected generator drives the session."""
        first = TileMerge(rng=np.random.default_rng(9))
        second = TileMerge(rng=np.random.default_rng(9))
        np.testing.assert_array_equal(first.board, second.board)


class TestIntegration(TestCase):
    """End-to-end integration tests."""

    def test_game_reaches_termination(self):
        """Game eventually terminates when playing legal moves."""
        env = TileMerge(seed=42)

        for _ in range(10000):
            legal = env.legal_actions
            if not legal:
                break
            env.step(legal[0])

        self.assertTrue(env.is_finished)
        self.assertTrue(env.board.all())
        self.assertEqual(env.max_tile, int(env.board.max()))

    def test_no_move_after_game_over(self):
        """A finished game ignores every move."""
        env = TileMerge(seed=0)
        env._state = GameState(grid=DEADLOCK, score=1000, game_over=True)

        for direction in Direction:
            board, gained, done = env.step(direction)
            np.testing.assert_array_equal(board, DEADLOCK)
            self.assertEqual(gained, 0)
            self.assertTrue(done)
        self.assertEqual(env.score, 1000)

    def test_reset_after_game_over(self):
        """Session resets correctly after game ends."""
        env = TileMerge(seed=0)
        env._state = GameState(grid=DEADLOCK, score=1000, game_over=True)
        self.assertTrue(env.is_finished)

        obs = env.reset()

        self.assertEqual(np.count_nonzero(obs), 2)
        self.assertFalse(env.is_finished)
        self.assertEqual(env.score, 0)


class TestRender(TestCase):
    """Test text rendering."""

    def test_render_board(self):
        """Cells are right-aligned on the widest tile and empty cells are dots."""
        text = render_board(np.array([[2, 0], [1024, 4]]))
        self.assertEqual(text, '   2    .\n1024    4')

    def test_render_session(self):
        """The session renders its board, score and end of game."""
        env = TileMerge(seed=0)
        env._state = GameState(grid=DEADLOCK, score=12, game_over=True)
        lines = env.render().splitlines()

        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[4], 'Score: 12')
        self.assertEqual(lines[5], 'Game over!')


if __name__ == '__main__':
    main()
