"""
Board engine: the 4x4 exponent grid and its state transitions (compact, merge, spawn, terminal check).
"""

import logging
from collections.abc import Sequence

from numpy import all as np_all
from numpy import argwhere, count_nonzero, integer, ndarray, uint8, zeros

from tilemerge.config import BOARD_SIZE, DEFAULT_SPAWN_RULE, MAX_EXPONENT, SQUASH_PASSES, SpawnRule
from tilemerge.core.gamemove import Direction, can_move, is_mergeable, lanes, legal_directions
from tilemerge.core.randomness import RandomSource

logger = logging.getLogger(__name__)

Grid = Sequence[Sequence[int | None]]


def _validate_cell(row: int, col: int, value) -> int:
    """Return the stored exponent of a raw grid cell, zero for an empty cell."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, integer)):
        raise ValueError(f'cell ({row}, {col}) must be an int or None, got {type(value).__name__}')
    if not 0 < value <= MAX_EXPONENT:
        raise ValueError(f'cell ({row}, {col}) must hold an exponent in 1..{MAX_EXPONENT}, got {value}')
    return int(value)


class Board:
    """
    A 4x4 grid of tiles stored as exponents of two.

    Cells hold ``0`` when empty and ``e >= 1`` for a tile of value ``2**e``. A board is created with
    ``Board.new`` (two random tiles) or ``Board.from_grid`` (arbitrary state), then mutated in place by
    ``play``.
    """

    def __init__(self):
        self._cells = zeros((BOARD_SIZE, BOARD_SIZE), dtype=uint8)

    @classmethod
    def new(cls, rng: RandomSource, rule: SpawnRule = DEFAULT_SPAWN_RULE) -> 'Board':
        """
        Create a board with two tiles of exponent 1 on distinct random cells.

        Parameters
        ----------
        rng : RandomSource
            Source used to pick the cells.
        rule : SpawnRule, optional
            Number and exponent of the initial tiles.

        Returns
        -------
        Board
            The initialized board.
        """
        board = cls()
        indices = rng.sample(BOARD_SIZE * BOARD_SIZE, rule.initial_tiles)
        for index in indices:
            row, col = divmod(index, BOARD_SIZE)
            board._cells[row, col] = rule.initial_exponent
        logger.debug('New board with tiles at cell indices %s', indices)
        return board

    @classmethod
    def from_grid(cls, grid: Grid) -> 'Board':
        """
        Build a board from a 4x4 grid of exponents, ``None`` marking an empty cell.

        Raises
        ------
        ValueError
            If the grid is not 4x4 or a cell is not ``None`` or an exponent in ``1..MAX_EXPONENT``.
        """
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError(f'grid must be {BOARD_SIZE}x{BOARD_SIZE}')

        board = cls()
        for row, values in enumerate(grid):
            for col, value in enumerate(values):
                board._cells[row, col] = _validate_cell(row, col, value)
        return board

    @property
    def grid(self) -> list[list[int | None]]:
        """A fresh copy of the grid, ``None`` for empty cells."""
        return [[int(value) if value else None for value in row] for row in self._cells]

    @property
    def cells(self) -> ndarray:
        """A read-only copy of the raw exponent array, zero for empty cells."""
        cells = self._cells.copy()
        cells.setflags(write=False)
        return cells

    def copy(self) -> 'Board':
        board = Board()
        board._cells[:] = self._cells
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np_all(self._cells == other._cells))

    # ##>: Mutated in place by moves, so not hashable; key() gives a hashable snapshot.
    __hash__ = None

    def key(self) -> bytes:
        """A hashable snapshot of the current cells."""
        return self._cells.tobytes()

    def __repr__(self) -> str:
        return f'Board({self.grid!r})'

    def play(self, direction: Direction, rng: RandomSource, rule: SpawnRule = DEFAULT_SPAWN_RULE) -> bool:
        """
        Slide, spawn one tile and report whether the game is lost.

        Parameters
        ----------
        direction : Direction
            The slide direction.
        rng : RandomSource
            Source used to place the new tile.
        rule : SpawnRule, optional
            Spawn probabilities.

        Returns
        -------
        bool
            True if the board is lost after the spawn.

        Notes
        -----
        A tile is spawned even when the slide moved nothing, as long as a cell is empty.
        """
        self.merge(direction)
        self.spawn(rng, rule)
        return self.is_lost()

    def merge(self, direction: Direction) -> None:
        """
        Compact toward the edge, merge equal neighbours once, then compact again.

        Each lane is scanned from the edge inward: an equal pair merges into the edge-ward cell with the
        exponent incremented, and the far cell is emptied. The emptied cell is the edge-ward cell of the
        next pair, so a freshly merged tile is never merged again in the same move.
        """
        self.squash(direction)

        for lane in lanes(self._cells, direction):
            for near in range(BOARD_SIZE - 1):
                far = near + 1
                value = int(lane[near])
                if value != 0 and value == lane[far]:
                    lane[near] = self._increment(value)
                    lane[far] = 0

        self.squash(direction)

    def squash(self, direction: Direction) -> None:
        """Slide every tile toward the edge of ``direction``, preserving order, without merging."""
        for _ in range(SQUASH_PASSES):
            self._squash_once(direction)

    def _squash_once(self, direction: Direction) -> None:
        for lane in lanes(self._cells, direction):
            # ##: Pairs are visited from the far end toward the edge.
            for near in reversed(range(BOARD_SIZE - 1)):
                far = near + 1
                if lane[near] == 0 and lane[far] != 0:
                    lane[near], lane[far] = lane[far], 0

    @staticmethod
    def _increment(value: int) -> int:
        # ##>: Saturate instead of overflowing the uint8 storage.
        if value >= MAX_EXPONENT:
            logger.warning('Merge at maximum exponent %d, tile saturates', MAX_EXPONENT)
            return MAX_EXPONENT
        return value + 1

    def spawn(self, rng: RandomSource, rule: SpawnRule = DEFAULT_SPAWN_RULE) -> bool:
        """
        Place one new tile on a random empty cell.

        Parameters
        ----------
        rng : RandomSource
            Source used to pick the cell, then the exponent.
        rule : SpawnRule, optional
            Spawn probabilities (exponent 2 with probability 1/10, exponent 1 otherwise by default).

        Returns
        -------
        bool
            True if a tile was placed, False if the board was full and left unchanged.
        """
        empty_cells = argwhere(self._cells == 0)
        if len(empty_cells) == 0:
            return False

        row, col = empty_cells[rng.choice(len(empty_cells))]
        if rng.ratio(rule.large_numerator, rule.large_denominator):
            exponent = rule.large_exponent
        else:
            exponent = rule.small_exponent
        self._cells[row, col] = exponent

        logger.debug('Spawned exponent %d at (%d, %d)', exponent, row, col)
        return True

    def count_empty(self) -> int:
        return BOARD_SIZE * BOARD_SIZE - int(count_nonzero(self._cells))

    def is_empty_cell(self, row: int, col: int) -> bool:
        return bool(self._cells[row, col] == 0)

    def is_full(self) -> bool:
        return bool(np_all(self._cells != 0))

    def is_mergeable(self) -> bool:
        return is_mergeable(self._cells)

    def is_lost(self) -> bool:
        """True if every cell is occupied and no adjacent pair can merge."""
        return self.is_full() and not self.is_mergeable()

    def max_exponent(self) -> int:
        return int(self._cells.max())

    def can_move(self, direction: Direction) -> bool:
        return can_move(self._cells, direction)

    def legal_directions(self) -> list[Direction]:
        return legal_directions(self._cells)


def create_board(rng: RandomSource, rule: SpawnRule = DEFAULT_SPAWN_RULE) -> Board:
    """Create a board with two random tiles of exponent 1."""
    return Board.new(rng, rule)


def board_from_grid(grid: Grid) -> Board:
    """Build a board from a 4x4 grid of exponents, ``None`` marking an empty cell."""
    return Board.from_grid(grid)


def apply_move(board: Board, direction: Direction, rng: RandomSource, rule: SpawnRule = DEFAULT_SPAWN_RULE) -> bool:
    """
    Apply a move in place and report whether the board is now lost.

    Parameters
    ----------
    board : Board
        The board to mutate.
    direction : Direction
        The slide direction.
    rng : RandomSource
        Source used to spawn the new tile.
    rule : SpawnRule, optional
        Spawn probabilities.

    Returns
    -------
    bool
        True if the board is lost after the move.
    """
    return board.play(direction, rng, rule)


def spawn_tile(board: Board, rng: RandomSource, rule: SpawnRule = DEFAULT_SPAWN_RULE) -> bool:
    """Place one random tile if a cell is empty; return whether a tile was placed."""
    return board.spawn(rng, rule)


def is_lost(board: Board) -> bool:
    """True if the board is full and no adjacent pair can merge."""
    return board.is_lost()
