"""
Tests for the game session.

Tests cover reset and step behaviour, action parsing, reproducibility and game termination.
"""

from unittest import TestCase, main

from tilemerge.config import SpawnRule
from tilemerge.core import Direction, board_from_grid
from tilemerge.envs import GameOverError, TileGame

_ = None


class TestTileGame(TestCase):
    """Test TileGame API and state management."""

    def setUp(self):
        """Initialize fresh game before each test."""
        self.game = TileGame(seed=42)

    def test_reset_state_initialization(self):
        """Reset deals exactly 2 tiles of exponent 1."""
        obs = self.game.reset()
        tiles = [value for row in obs for value in row if value is not None]

        self.assertEqual(tiles, [1, 1])
        self.assertFalse(self.game.is_finished)
        self.assertEqual(self.game.moves, 0)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical games."""
        first = [self.game.reset(seed=9)] + [self.game.step(action)[0] for action in (0, 1, 2, 3)]
        second = [self.game.reset(seed=9)] + [self.game.step(action)[0] for action in (0, 1, 2, 3)]
        self.assertEqual(first, second)

    def test_step_return_signature(self):
        """Step returns the new grid and the finished flag."""
        obs, finished = self.game.step('left')

        self.assertEqual(len(obs), 4)
        self.assertTrue(all(len(row) == 4 for row in obs))
        self.assertIsInstance(finished, bool)
        self.assertEqual(self.game.moves, 1)

    def test_actions_table(self):
        self.assertEqual(TileGame.ACTIONS, {'left': 0, 'up': 1, 'right': 2, 'down': 3})

    def test_step_spawns_one_tile(self):
        """A merge of two tiles followed by a spawn leaves two tiles."""
        self.game._board = board_from_grid([[1, 1, _, _], [_] * 4, [_] * 4, [_] * 4])
        obs, finished = self.game.step(Direction.LEFT)

        self.assertEqual(obs[0][0], 2)
        self.assertEqual(sum(value is not None for row in obs for value in row), 2)
        self.assertFalse(finished)

    def test_game_over(self):
        """The move that fills the last cell without merges ends the game."""
        game = TileGame(seed=1, rule=SpawnRule(large_numerator=0))
        game._board = board_from_grid([[_, 2, 1, 2], [2, 1, 2, 1], [1, 2, 1, 2], [2, 1, 2, 1]])

        with self.assertLogs('tilemerge.envs.tilegame', level='INFO'):
            _obs, finished = game.step('right')

        self.assertTrue(finished)
        self.assertTrue(game.is_finished)
        self.assertEqual(game.legal_directions(), [])
        with self.assertRaises(GameOverError):
            game.step('left')

    def test_reset_after_game_over(self):
        self.game._finished = True
        self.game.reset()
        self.assertFalse(self.game.is_finished)


if __name__ == "__main__":
    main()
