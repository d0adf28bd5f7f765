"""
Seeded permutation tables for PyFastNoise.

A permutation table is the only source of pseudo-randomness in the package:
every kernel hashes integer lattice coordinates through one of these tables
and everything downstream is plain deterministic arithmetic. Tables are built
once per configuration (one independent shuffle per octave) and never change.

Author: B.G.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np

from .. import constants as cte
from ..errors import InvalidParameter

# Signature of a permutation source: (seed, size) -> permutation of [0, size)
PermutationSource = Callable[[int, int], np.ndarray]


def fisher_yates_permutation(seed: int, size: int = cte.DEFAULT_TABLE_SIZE) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    Uses a private numpy RandomState so the global numpy random state is
    neither read nor modified.

    Args:
        seed: Random seed for reproducible permutation (masked to 32 bits)
        size: Number of entries in the table

    Returns:
        int64 array holding a permutation of [0, size)
    """
    rng = np.random.RandomState(seed & cte.SEED_MASK)

    # Create initial sequence [0, 1, 2, ..., size - 1]
    perm = np.arange(size, dtype=np.int64)

    # Fisher-Yates shuffle
    for i in range(size - 1, 0, -1):
        j = rng.randint(0, i + 1)
        perm[i], perm[j] = perm[j], perm[i]

    return perm


@dataclass(frozen=True)
class PermutationTable:
    """
    Immutable lookup table hashing integer lattice coordinates.

    ``perm`` is a bijection of [0, size). ``values`` maps every hash to a
    lattice value in (-1, 1), spread evenly so that the table hashes to
    uniformly distributed values.
    """

    perm: Tuple[int, ...]
    values: Tuple[float, ...]

    @classmethod
    def from_permutation(cls, perm) -> "PermutationTable":
        perm = tuple(int(p) for p in perm)
        n = len(perm)
        if n == 0 or sorted(perm) != list(range(n)):
            raise InvalidParameter(f"permutation source returned an invalid table of size {n}")
        values = tuple((2.0 * h + 1.0) / n - 1.0 for h in range(n))
        return cls(perm=perm, values=values)

    @property
    def size(self) -> int:
        return len(self.perm)

    def hash1(self, i: int) -> int:
        """Hash one lattice coordinate; negative and huge values wrap."""
        return self.perm[i % len(self.perm)]

    def hash2(self, i: int, j: int) -> int:
        n = len(self.perm)
        return self.perm[(self.perm[i % n] + j) % n]

    def hash3(self, i: int, j: int, k: int) -> int:
        n = len(self.perm)
        return self.perm[(self.perm[(self.perm[i % n] + j) % n] + k) % n]

    def as_array(self) -> np.ndarray:
        """Return the permutation as a read-only numpy array."""
        arr = np.array(self.perm, dtype=np.int64)
        arr.setflags(write=False)
        return arr


def build_tables(seed: int, octaves: int, table_size: int = cte.DEFAULT_TABLE_SIZE,
                 source: PermutationSource = None) -> Tuple[PermutationTable, ...]:
    """
    Build one permutation table per octave.

    Octave ``i`` is shuffled with ``seed + i`` so that successive octaves
    sample decorrelated noise fields while remaining reproducible.

    Args:
        seed: Base seed of the configuration
        octaves: Number of tables to build (>= 1)
        table_size: Entries per table (> 0)
        source: Permutation source, defaults to fisher_yates_permutation

    Returns:
        tuple of PermutationTable, one per octave

    Raises:
        InvalidParameter: If octaves < 1, table_size <= 0, or the source
            does not return a permutation of [0, table_size)
    """
    if octaves < 1:
        raise InvalidParameter(f"octaves must be >= 1, got {octaves}")
    if table_size <= 0:
        raise InvalidParameter(f"table_size must be > 0, got {table_size}")
    if source is None:
        source = fisher_yates_permutation

    tables = []
    for octave in range(octaves):
        perm = source(seed + octave, table_size)
        if len(perm) != table_size:
            raise InvalidParameter(
                f"permutation source returned {len(perm)} entries, expected {table_size}"
            )
        tables.append(PermutationTable.from_permutation(perm))
    return tuple(tables)
