# -*- coding: utf-8 -*-
"""
Board constants and tile spawning configuration.
"""
from dataclasses import dataclass

# ##>: The grid is always square and never resized.
BOARD_SIZE = 4

# ##>: Exponents are stored as uint8, zero meaning an empty cell.
MAX_EXPONENT = 255

# ##>: A tile crosses at most BOARD_SIZE - 1 cells in one slide.
SQUASH_PASSES = BOARD_SIZE - 1


@dataclass(frozen=True)
class SpawnRule:
    """
    How new tiles are placed on the board.

    Attributes
    ----------
    initial_tiles : int
        Number of tiles placed on a fresh board.
    initial_exponent : int
        Exponent of the tiles placed on a fresh board.
    small_exponent : int
        Exponent of a regular spawned tile (display value 2).
    large_exponent : int
        Exponent of a rare spawned tile (display value 4).
    large_numerator : int
        Numerator of the probability of spawning a large tile.
    large_denominator : int
        Denominator of the probability of spawning a large tile.
    """

    initial_tiles: int = 2
    initial_exponent: int = 1
    small_exponent: int = 1
    large_exponent: int = 2
    large_numerator: int = 1
    large_denominator: int = 10

    def __post_init__(self):
        if not 0 < self.initial_tiles <= BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f'initial_tiles must be in 1..{BOARD_SIZE * BOARD_SIZE}, got {self.initial_tiles}')
        for name in ('initial_exponent', 'small_exponent', 'large_exponent'):
            value = getattr(self, name)
            if not 0 < value <= MAX_EXPONENT:
                raise ValueError(f'{name} must be in 1..{MAX_EXPONENT}, got {value}')
        if not 0 <= self.large_numerator <= self.large_denominator or self.large_denominator <= 0:
            raise ValueError(f'invalid large tile ratio {self.large_numerator}/{self.large_denominator}')


DEFAULT_SPAWN_RULE = SpawnRule()
