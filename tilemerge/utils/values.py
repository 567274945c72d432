"""
Convert grids between stored exponents and the tile values shown to players (2, 4, 8, ...).
"""

from collections.abc import Sequence

from numpy import integer

from tilemerge.config import MAX_EXPONENT


def to_tile_values(grid: Sequence[Sequence[int | None]]) -> list[list[int]]:
    """
    Convert an exponent grid to displayed tile values.

    Parameters
    ----------
    grid : Sequence[Sequence[int | None]]
        Exponents, ``None`` for empty cells.

    Returns
    -------
    list[list[int]]
        Tile values, ``0`` for empty cells.

    Example
    -------
    >>> to_tile_values([[None, 1], [2, 11]])
    [[0, 2], [4, 2048]]
    """
    return [[0 if exponent is None else 2**exponent for exponent in row] for row in grid]


def from_tile_values(values: Sequence[Sequence[int]]) -> list[list[int | None]]:
    """
    Convert displayed tile values to an exponent grid.

    Parameters
    ----------
    values : Sequence[Sequence[int]]
        Tile values, ``0`` for empty cells.

    Returns
    -------
    list[list[int | None]]
        Exponents, ``None`` for empty cells.

    Raises
    ------
    ValueError
        If a value is neither ``0`` nor a power of two between 2 and ``2**MAX_EXPONENT``.
    """
    grid = []
    for row in values:
        exponents = []
        for value in row:
            if isinstance(value, bool) or not isinstance(value, (int, integer)):
                raise ValueError(f'tile value must be an int, got {type(value).__name__}')
            value = int(value)
            if value == 0:
                exponents.append(None)
                continue
            # ##>: Power of two with a single bit set, excluding 1.
            if value < 2 or value & (value - 1) or value.bit_length() - 1 > MAX_EXPONENT:
                raise ValueError(f'{value} is not a valid tile value')
            exponents.append(value.bit_length() - 1)
        grid.append(exponents)
    return grid
