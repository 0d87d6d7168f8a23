import random
from typing import Sequence, Tuple

import numpy as np

from zoo.fenwick import FenwickTree
from zoo.lazy_segment_tree import LazySegmentTree


STRUCTURES = {
    'fenwick': FenwickTree,
    'lazy-segment-tree': LazySegmentTree
}


def set_seed(seed: int) -> None:
    """Set seed"""
    np.random.seed(seed)
    random.seed(seed)


def make_structure(name: str, length: int):
    """Create an empty range-query structure

    :param name: structure ID, one of `STRUCTURES`
    :param length: number of elements
    """
    assert name in STRUCTURES, f'Available structures are {list(STRUCTURES)}'
    return STRUCTURES[name](length)


def get_statistics(values: Sequence[float], need_optima: bool=False) -> Tuple:
    """Get mean, standard deviation (and max, min) of :param values:"""
    x = np.asarray(values, dtype=np.float64)
    mean, std = x.mean(), x.std()
    if need_optima:
        return mean, std, x.max(), x.min()
    return mean, std


def random_range(rng: np.random.Generator, length: int) -> Tuple[int, int]:
    """Sample an inclusive range [left, right] within [0, length)"""
    left, right = sorted(int(i) for i in rng.integers(0, length, size=2))
    return left, right


class NaiveArray:
    """Reference O(n) model of an integer array, used for cross-checking

    :param values: initial values
    """

    def __init__(self, values: Sequence[int]) -> None:
        self.values = np.array(values, dtype=np.int64)


    def __len__(self) -> int:
        return len(self.values)


    def add(self, index: int, delta: int) -> None:
        self.values[index] += delta


    def assign(self, left: int, right: int, value: int) -> None:
        self.values[left:right + 1] = value


    def sum(self, left: int, right: int) -> int:
        return int(self.values[left:right + 1].sum())
