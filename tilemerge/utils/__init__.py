# -*- coding: utf-8 -*-
"""
Conversions between stored exponents and displayed tile values.
"""

from .values import from_tile_values, to_tile_values

__all__ = ["to_tile_values", "from_tile_values"]
