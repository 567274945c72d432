"""Game session owning a board and its random source, for agents and other callers."""

import logging

from tilemerge.config import DEFAULT_SPAWN_RULE, SpawnRule
from tilemerge.core.gameboard import Board, create_board
from tilemerge.core.gamemove import Direction
from tilemerge.core.randomness import TileRandom

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a move is requested on a lost game."""


class TileGame:
    """
    Sliding-tile game session.

    This class owns the board and the random source, so callers only pick directions.
    """

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(self, seed: int | None = None, rule: SpawnRule = DEFAULT_SPAWN_RULE):
        """
        Initialize the session and deal a fresh board.

        Parameters
        ----------
        seed : int, optional
            Seed of the random source, for reproducible games.
        rule : SpawnRule, optional
            Spawn configuration used for every tile placement.
        """
        self._rule = rule
        self._rng: TileRandom | None = None
        self._board: Board | None = None
        self._finished = False
        self._moves = 0

        self.reset(seed=seed)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the board is full and no adjacent tiles can merge.
        """
        return self._finished

    @property
    def observation(self) -> list[list[int | None]]:
        """The current grid of exponents, ``None`` for empty cells."""
        return self._board.grid

    def reset(self, seed: int | None = None) -> list[list[int | None]]:
        """
        Start a new game with two tiles of exponent 1.

        Parameters
        ----------
        seed : int, optional
            Reseed the random source. The current source keeps running when omitted.

        Returns
        -------
        list[list[int | None]]
            The new grid.
        """
        if seed is not None or self._rng is None:
            self._rng = TileRandom(seed=seed)
        self._board = create_board(self._rng, self._rule)
        self._finished = self._board.is_lost()
        self._moves = 0
        return self.observation

    def step(self, action: Direction | int | str) -> tuple[list[list[int | None]], bool]:
        """
        Apply one move.

        Parameters
        ----------
        action : Direction | int | str
            The direction, its action number (0: left, 1: up, 2: right, 3: down) or its name.

        Returns
        -------
        tuple[list[list[int | None]], bool]
            The new grid and whether the game is now finished.

        Raises
        ------
        GameOverError
            If the game is already finished.
        """
        if self._finished:
            raise GameOverError(f'game is over after {self._moves} moves')

        direction = Direction.parse(action)
        self._finished = self._board.play(direction, self._rng, self._rule)
        self._moves += 1

        if self._finished:
            logger.info('Game over after %d moves, highest exponent %d', self._moves, self._board.max_exponent())
        return self.observation, self._finished

    def legal_directions(self) -> list[Direction]:
        return self._board.legal_directions()
