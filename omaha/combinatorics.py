from __future__ import annotations

import itertools
import math
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def combinations(items: Sequence[T], k: int) -> List[Tuple[T, ...]]:
    """Every k-element subset of ``items``, in the order of ``items``.

    ``combinations(items, 0)`` is ``[()]`` and asking for more elements than
    available yields ``[]``.
    """
    if k < 0:
        raise ValueError(f"Subset size must be non-negative, got {k}")
    return list(itertools.combinations(items, k))


def count_combinations(n: int, k: int) -> int:
    if n < 0 or k < 0:
        return 0
    return math.comb(n, k)
