"""
Randomness port consumed by the board engine, with a numpy-backed implementation.
"""

from typing import Protocol

from numpy.random import PCG64DXSM, Generator, default_rng


class RandomSource(Protocol):
    """
    Uniform choices and biased coin flips required by the board engine.

    Every call advances the source, so a fixed seed and a fixed sequence of calls reproduce the same
    outcomes.
    """

    def choice(self, count: int) -> int:
        """Pick one index uniformly at random from ``range(count)``."""

    def sample(self, count: int, k: int) -> list[int]:
        """Pick ``k`` distinct indices uniformly at random from ``range(count)``, without replacement."""

    def ratio(self, numerator: int, denominator: int) -> bool:
        """Return True with probability ``numerator / denominator``."""


class TileRandom:
    """
    Random source backed by a numpy ``Generator``.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducibility. A fresh entropy-seeded generator is used when omitted.
    generator : Generator, optional
        An existing generator to draw from. Takes precedence over ``seed``.
    """

    def __init__(self, seed: int | None = None, generator: Generator | None = None):
        self._generator = generator if generator is not None else default_rng(PCG64DXSM(seed))

    @property
    def generator(self) -> Generator:
        return self._generator

    def choice(self, count: int) -> int:
        if count <= 0:
            raise ValueError(f'count must be > 0, got {count}')
        return int(self._generator.integers(count))

    def sample(self, count: int, k: int) -> list[int]:
        if not 0 <= k <= count:
            raise ValueError(f'cannot pick {k} distinct items from {count}')
        return [int(index) for index in self._generator.choice(count, size=k, replace=False)]

    def ratio(self, numerator: int, denominator: int) -> bool:
        """
        Biased coin flip with an exact rational probability.

        Parameters
        ----------
        numerator : int
            Number of favourable outcomes, between 0 and ``denominator``.
        denominator : int
            Total number of outcomes, strictly positive.

        Returns
        -------
        bool
            True with probability ``numerator / denominator``.
        """
        if denominator <= 0 or not 0 <= numerator <= denominator:
            raise ValueError(f'invalid ratio {numerator}/{denominator}')
        return bool(self._generator.integers(denominator) < numerator)
