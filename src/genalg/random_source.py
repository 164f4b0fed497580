"""
Random Source Module

This module implements the RandomSource class, the single deterministic stream
of randomness threaded explicitly through every stochastic operation of the
genetic algorithm. No operator ever touches a process-wide generator, so a
whole run is reproducible from one seed.

Classes:
    RandomSource: Reseedable wrapper around a numpy PCG64 generator
"""

import math
import numpy as np
from typing import Any, Sequence

from genalg.exceptions import EmptyPopulationError, InvalidFitnessError

class RandomSource:
    """
    A reseedable, deterministic source of random draws.

    Every method documents how many logical draws it consumes from the
    underlying stream; the genetic operators rely on these counts to keep
    their draw order (and thus every generation) reproducible.

    Public Attributes:
        seed: The seed the current stream was started from (None for OS entropy)

    Public properties:
        generator: The underlying numpy Generator

    Public Methods:
        reseed(seed):                   Restart the stream from a new seed
        uniform(low, high):             Draw a real from [low, high] (1 draw)
        gen_bool(probability):          Draw True with given probability (1 draw)
        choose_weighted(items, weights): Draw an item proportionally to its weight (1 draw)
        spawn(n):                       Derive n independent child sources
    """

    def __init__(self, seed: Any = None):
        """
        Parameters:
            seed: Anything accepted by 'numpy.random.default_rng' (int, SeedSequence,
                  None for OS entropy), or an existing numpy Generator to wrap
        """
        self.seed = None
        self._generator: np.random.Generator = None
        self.reseed(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def reseed(self, seed: Any = None) -> None:
        """
        Restart the stream. Two sources reseeded with the same seed
        produce identical sequences of draws from then on.
        """
        if isinstance(seed, np.random.Generator):
            self.seed       = None
            self._generator = seed
        else:
            self.seed       = seed
            self._generator = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        """
        Draw a real number uniformly from the closed range [low, high].

        Consumes exactly one draw. A degenerate range (low == high) returns 'low'.

        Parameters:
            low:  Lower bound of the range
            high: Upper bound of the range, must not be smaller than 'low'

        Returns:
            The drawn number
        """
        if not low <= high:
            raise ValueError(f"invalid range [{low}, {high}]")
        return low + (high - low) * self._generator.random()

    def gen_bool(self, probability: float) -> bool:
        """
        Draw True with the given probability, False otherwise.

        Consumes exactly one draw, even for probabilities of 0 and 1.

        Parameters:
            probability: Success probability, in [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability {probability} is outside [0, 1]")
        return bool(self._generator.random() < probability)

    def choose_weighted(self, items: Sequence, weights: Sequence[float]):
        """
        Choose one item with probability weight_i / sum(weights).

        Consumes exactly one draw. Items with zero weight are never chosen.

        Parameters:
            items:   The candidates
            weights: One non-negative, finite weight per candidate

        Returns:
            The chosen item (the object from 'items', not a copy)

        Raises:
            EmptyPopulationError: if there are no items
            InvalidFitnessError:  if a weight is negative or not finite,
                                  or the weights do not sum to a positive number
        """
        if len(items) == 0:
            raise EmptyPopulationError("cannot choose from an empty sequence")
        if len(items) != len(weights):
            raise ValueError(f"got {len(items)} items but {len(weights)} weights")

        weights = np.asarray(weights, dtype=np.float64)
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise InvalidFitnessError(f"weights must be finite and non-negative, got {weights.tolist()}")

        cumulative = np.cumsum(weights)
        total      = cumulative[-1]
        if not (total > 0 and math.isfinite(total)):
            raise InvalidFitnessError(f"total weight must be positive and finite, got {total}")

        # Index of the first bucket whose upper edge lies above the drawn point;
        # zero-width buckets can never satisfy that.
        point = self._generator.random() * total
        index = int(np.searchsorted(cumulative, point, side='right'))

        # Rounding may push the point onto the upper edge of the wheel
        if index >= len(items):
            index = int(np.flatnonzero(weights > 0)[-1])

        return items[index]

    def spawn(self, n: int) -> list['RandomSource']:
        """
        Derive 'n' statistically independent child sources.

        Children are derived from the seed sequence of this source, so they are
        reproducible given the seed and the number of earlier spawns. No draw is
        consumed from this source's stream.
        """
        return [RandomSource(child) for child in self._generator.spawn(n)]

    def __repr__(self):
        return f"RandomSource(seed={self.seed!r})"
