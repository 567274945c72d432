"""
Tests for the numpy-backed random source.
"""

from unittest import TestCase, main

from numpy.random import default_rng

from tilemerge.core.randomness import TileRandom


class TestTileRandom(TestCase):
    def test_choice_in_range(self):
        rng = TileRandom(seed=0)
        picks = {rng.choice(5) for _ in range(200)}
        self.assertEqual(picks, {0, 1, 2, 3, 4})

    def test_sample_distinct(self):
        rng = TileRandom(seed=0)
        for _ in range(100):
            picks = rng.sample(16, 2)
            self.assertEqual(len(set(picks)), 2)
            self.assertTrue(all(0 <= pick < 16 for pick in picks))

    def test_ratio_bounds(self):
        rng = TileRandom(seed=0)
        self.assertFalse(any(rng.ratio(0, 10) for _ in range(100)))
        self.assertTrue(all(rng.ratio(10, 10) for _ in range(100)))

    def test_invalid_requests(self):
        rng = TileRandom(seed=0)
        with self.assertRaises(ValueError):
            rng.choice(0)
        with self.assertRaises(ValueError):
            rng.sample(1, 2)
        with self.assertRaises(ValueError):
            rng.ratio(1, 0)
        with self.assertRaises(ValueError):
            rng.ratio(11, 10)

    def test_seed_reproducibility(self):
        first, second = TileRandom(seed=5), TileRandom(seed=5)
        self.assertEqual([first.choice(16) for _ in range(20)], [second.choice(16) for _ in range(20)])

    def test_wraps_existing_generator(self):
        generator = default_rng(3)
        rng = TileRandom(generator=generator)
        self.assertIs(rng.generator, generator)


if __name__ == '__main__':
    main()
