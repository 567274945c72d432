# -*- coding: utf-8 -*-
"""
Game session over the board engine.

This module provides the `TileGame` class, which owns one board and one random source and drives them with a
reset/step loop.
"""

from .tilegame import GameOverError, TileGame

__all__ = ["TileGame", "GameOverError"]
