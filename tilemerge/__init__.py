# -*- coding: utf-8 -*-
"""
Rule engine for the 4x4 sliding-tile merging puzzle, with tiles stored as exponents of two.
"""

from .core import Board, Direction, TileRandom, apply_move, board_from_grid, create_board, is_lost, spawn_tile

__all__ = [
    "Board",
    "Direction",
    "TileRandom",
    "create_board",
    "board_from_grid",
    "apply_move",
    "spawn_tile",
    "is_lost",
]
