# -*- coding: utf-8 -*-
"""
Board engine for the sliding-tile merging puzzle.

It includes the board state and its transitions (compacting, merging, spawning), the slide directions with
their move predicates, and the randomness port used for tile placement.
"""

from .gameboard import Board, apply_move, board_from_grid, create_board, is_lost, spawn_tile
from .gamemove import Direction, can_move, is_mergeable, legal_directions
from .randomness import RandomSource, TileRandom

__all__ = [
    "Board",
    "Direction",
    "RandomSource",
    "TileRandom",
    "create_board",
    "board_from_grid",
    "apply_move",
    "spawn_tile",
    "is_lost",
    "is_mergeable",
    "can_move",
    "legal_directions",
]
