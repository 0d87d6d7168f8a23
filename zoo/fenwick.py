from typing import Sequence

import numpy as np

from common.errors import check_size, check_index, check_range, to_int64, to_int64_array


class FenwickTree:
    """Fenwick tree (binary indexed tree) for point update and range sum query

    :param size: (int) Number of elements
    """

    def __init__(self, size: int) -> None:
        self.size = check_size(size)
        # 1-indexed, tree[0] is unused
        self._tree = np.zeros(size + 1, dtype=np.int64)


    def __len__(self) -> int:
        return self.size


    def build(self, values: Sequence[int]) -> None:
        a = to_int64_array(values, self.size)
        self._tree[:] = 0
        for i in range(self.size):
            self._add(i + 1, a[i])


    def update(self, index: int, delta: int) -> None:
        """Add :param delta: to the element at :param index:"""
        check_index(index, self.size)
        self._add(index + 1, to_int64(delta))


    def query(self, left: int, right: int=None) -> int:
        """Sum of the elements in [left, right]

        With a single argument, return the prefix sum [0, left]
        """
        if right is None:
            check_index(left, self.size)
            return int(self._prefix_sum(left + 1))
        check_range(left, right, self.size)
        if left == 0:
            return int(self._prefix_sum(right + 1))
        return int(self._prefix_sum(right + 1) - self._prefix_sum(left))


    def values(self) -> np.ndarray:
        return np.array([self.query(i, i) for i in range(self.size)], dtype=np.int64)


    def _add(self, i: int, delta: int) -> None:
        while i <= self.size:
            self._tree[i] += delta
            i += i & -i


    def _prefix_sum(self, i: int):
        s = 0
        while i > 0:
            s += self._tree[i]
            i -= i & -i
        return s
