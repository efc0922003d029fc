# FILE: grouping_core/combinations.py
"""
Fixed-size, order-preserving subsets of a sequence.

Subsets come out in lexicographic order over index positions, which the
search loop relies on for its "first minimum wins" tie-break.
"""
from __future__ import annotations
import itertools
from typing import Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def index_combinations(n: int, size: int) -> Iterator[Tuple[int, ...]]:
    """Yield every size-`size` tuple of indices into range(n).

    For size > n/2 the complements of the (n - size) combinations are yielded.
    """
    if size < 0 or size > n:
        return
    if size == 0:
        yield ()
        return
    if size == n:
        yield tuple(range(n))
        return
    if size > n / 2:
        for comp in itertools.combinations(range(n), n - size):
            skip = set(comp)
            yield tuple(i for i in range(n) if i not in skip)
        return
    yield from itertools.combinations(range(n), size)


def combinations(source: Sequence[T], size: int) -> List[List[T]]:
    return [[source[i] for i in idx] for idx in index_combinations(len(source), size)]
