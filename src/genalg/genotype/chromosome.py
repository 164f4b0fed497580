"""
Chromosome Module

This module implements the Chromosome class, the unit of genetic material
handled by the genetic algorithm.

Classes:
    Chromosome: Fixed-length ordered sequence of real-valued (float32) genes
"""

import numpy as np
import operator
from typing import Iterable, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from genalg.random_source import RandomSource

class Chromosome:
    """
    A fixed-length, ordered sequence of real-valued genes.

    The genes are stored in a one-dimensional numpy float32 array whose length is
    fixed at construction; gene values may be changed in place (this is how mutation
    works) but genes can never be added or removed.

    The chromosome does not know what its genes encode. In the host application
    they are the flattened biases and weights of a neural network, which is rebuilt
    from an evolved chromosome via 'to_list()'.

    Public properties:
        genes: Writable numpy view of the genes (for in-place, vectorised updates)

    Public Methods:
        random(rng, length, low, high): Create a chromosome with uniformly random genes
        copy():                         Return an independent copy
        to_list():                      Return the genes as a list of Python floats
        allclose(other, rtol, atol):    Approximate gene-wise comparison
    """

    __slots__ = ('_genes',)

    def __init__(self, genes: Iterable[float] = ()):
        """
        Parameters:
            genes: Any iterable of real numbers; values are converted to float32
        """
        if not isinstance(genes, np.ndarray):
            genes = list(genes)
        genes = np.array(genes, dtype=np.float32)
        if genes.ndim != 1:
            raise ValueError(f"genes must be one-dimensional, got shape {genes.shape}")
        self._genes: np.ndarray = genes

    @classmethod
    def random(cls,
               rng   : 'RandomSource',
               length: int,
               low   : float = -1.0,
               high  : float = 1.0) -> 'Chromosome':
        """
        Create a chromosome whose genes are drawn uniformly from [low, high].
        Consumes one draw per gene, in gene order.

        Parameters:
            rng:    Source of randomness
            length: Number of genes
            low:    Smallest possible gene value
            high:   Largest possible gene value
        """
        return cls(rng.uniform(low, high) for _ in range(length))

    @property
    def genes(self) -> np.ndarray:
        return self._genes

    def copy(self) -> 'Chromosome':
        return Chromosome(self._genes.copy())

    def to_list(self) -> list[float]:
        return self._genes.tolist()

    def allclose(self, other: 'Chromosome', rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        """
        Check whether two chromosomes have the same length and approximately equal genes.
        """
        return len(self) == len(other) and bool(np.allclose(self._genes, other._genes, rtol=rtol, atol=atol))

    def __len__(self) -> int:
        return len(self._genes)

    def __getitem__(self, index: int) -> float:
        # Only single genes; a slice would be a chromosome of a different length
        return float(self._genes[operator.index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._genes[operator.index(index)] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._genes.tolist())

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            # No copy requested: only possible when no conversion is needed
            if dtype is not None and np.dtype(dtype) != self._genes.dtype:
                raise ValueError(f"cannot convert a float32 chromosome to {np.dtype(dtype)} without a copy")
            return self._genes
        if dtype is None:
            return self._genes.copy()
        return self._genes.astype(dtype)

    def __eq__(self, other):
        """
        Exact comparison: equal lengths and bit-identical float32 genes.
        """
        if not isinstance(other, Chromosome):
            return NotImplemented
        return self._genes.shape == other._genes.shape and bool(
            np.array_equal(self._genes.view(np.uint32), other._genes.view(np.uint32)))

    __hash__ = None

    def __repr__(self):
        return f"Chromosome({self.to_list()!r})"

    def __str__(self):
        return '[' + ', '.join(f"{gene:+.4f}" for gene in self._genes) + ']'
