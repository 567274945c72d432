"""
Slide directions and the move predicates of the board, expressed on lanes read edge first.
"""

from enum import IntEnum

from numpy import any as np_any
from numpy import integer, ndarray, rot90


class Direction(IntEnum):
    """
    Slide direction.

    The value is the number of counter-clockwise quarter turns that bring the direction's target edge to
    column 0, so every direction can be handled as a slide to the left.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'unknown direction {name!r}') from None

    @classmethod
    def parse(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Convert a direction, an action number or a direction name into a ``Direction``.

        Parameters
        ----------
        value : Direction | int | str
            The value to convert (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        Direction
            The matching direction.
        """
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, bool) or not isinstance(value, (int, integer)):
            raise ValueError(f'direction must be a Direction, an int or a name, got {type(value).__name__}')
        return cls(int(value))


def lanes(cells: ndarray, direction: Direction) -> ndarray:
    """
    View the grid as lanes whose first cell lies on the target edge of ``direction``.

    Parameters
    ----------
    cells : ndarray
        The 2D exponent grid, zero meaning empty.
    direction : Direction
        The slide direction.

    Returns
    -------
    ndarray
        A rotated view of ``cells``. Row ``i`` is one lane and index 0 is the edge; writes go through to
        ``cells``.

    Notes
    -----
    - Left: lanes are rows, edge is column 0.
    - Up: lanes are columns, edge is row 0.
    - Right: lanes are rows, edge is the last column.
    - Down: lanes are columns, edge is the last row.
    """
    return rot90(cells, k=int(direction))


def is_mergeable(cells: ndarray) -> bool:
    """
    Check whether two horizontally or vertically adjacent occupied cells hold the same exponent.

    Parameters
    ----------
    cells : ndarray
        The 2D exponent grid, zero meaning empty.

    Returns
    -------
    bool
        True if at least one adjacent pair could merge.
    """
    # ##>: Horizontal neighbours, then vertical neighbours.
    horizontal = (cells[:, :-1] != 0) & (cells[:, :-1] == cells[:, 1:])
    vertical = (cells[:-1, :] != 0) & (cells[:-1, :] == cells[1:, :])
    return bool(np_any(horizontal) or np_any(vertical))


def can_move(cells: ndarray, direction: Direction) -> bool:
    """
    Check whether sliding in ``direction`` would change the grid.

    Parameters
    ----------
    cells : ndarray
        The 2D exponent grid, zero meaning empty.
    direction : Direction
        The slide direction to test.

    Returns
    -------
    bool
        True if a tile can slide into an empty edge-ward cell or two equal tiles are adjacent along a lane.
    """
    view = lanes(cells, direction)
    near, far = view[:, :-1], view[:, 1:]

    # ##>: Condition 1: empty cell on the edge side of an occupied cell.
    can_slide = (near == 0) & (far != 0)
    if can_slide.any():
        return True

    # ##>: Condition 2: two adjacent equal occupied cells.
    can_merge = (near != 0) & (near == far)
    return bool(can_merge.any())


def legal_directions(cells: ndarray) -> list[Direction]:
    """
    Directions whose slide would change the grid, in action order.

    Parameters
    ----------
    cells : ndarray
        The 2D exponent grid, zero meaning empty.

    Returns
    -------
    list[Direction]
        The legal directions, possibly empty.
    """
    return [direction for direction in Direction if can_move(cells, direction)]
