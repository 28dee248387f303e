"""
Seeded random source shared by every generator step.

All draws go through one RandomStream instance so that the same seed and the
same sequence of calls always reproduce the same dataset.
"""
from typing import Optional, Sequence, TypeVar

import numpy as np

from .config import DEFAULT_SEED

T = TypeVar("T")


class RandomStream:
    def __init__(self, seed: Optional[int] = DEFAULT_SEED):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_int(self, n: int) -> int:
        """Uniform int in [0, n)."""
        return int(self._rng.integers(0, n))

    def next_double(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._rng.random())

    def next_gaussian(self) -> float:
        return float(self._rng.standard_normal())

    def next_bool(self) -> bool:
        return self.next_int(2) == 1

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.next_int(len(seq))]
