from typing import Sequence

import numpy as np

from common.errors import check_size, check_range, to_int64, to_int64_array


class LazySegmentTree:
    '''
    Segment tree with lazy propagation, supporting range assignment and
    range sum query, according to
    https://cp-algorithms.com/data_structures/segment_tree.html
    '''


    def __init__(self, length: int):
        '''
        The (binary) tree is an array, with the root at index 1
        Each node, with index v, has two child nodes of index 2v, 2v + 1

        :param length: (int) Number of leaves
        '''
        self.length = check_size(length)
        self._tree = np.zeros(4 * length, dtype=np.int64)
        self._lazy_value = np.zeros(4 * length, dtype=np.int64)
        self._has_lazy = np.zeros(4 * length, dtype=bool)


    def __len__(self) -> int:
        return self.length


    def build(self, values: Sequence[int]) -> None:
        '''
        Build the tree from :param values:, whose length must equal `length`
        '''
        a = to_int64_array(values, self.length)
        self._has_lazy[:] = False
        self._build(a, 1, 0, self.length - 1)


    def update(self, left: int, right: int, value: int) -> None:
        '''
        Assign :param value: to every element in [left, right]
        '''
        check_range(left, right, self.length)
        value = to_int64(value)
        self._update(1, 0, self.length - 1, left, right, value)


    def query(self, left: int, right: int) -> int:
        '''
        Sum of the elements in [left, right]
        '''
        check_range(left, right, self.length)
        return int(self._query(1, 0, self.length - 1, left, right))


    def values(self) -> np.ndarray:
        '''
        Current value of every element, pending assignments are pushed to the leaves
        '''
        out = np.zeros(self.length, dtype=np.int64)
        self._collect(out, 1, 0, self.length - 1)
        return out


    def _build(self, a, v: int, tl: int, tr: int) -> None:
        '''
        :param a: input array
        :param v: current vertex's index
        :param tl: left boundary of the current segment
        :param tr: right boundary of the current segment
        '''
        if tl == tr:
            self._tree[v] = a[tl]
        else:
            tm = tl + (tr - tl) // 2
            self._build(a, v * 2, tl, tm)
            self._build(a, v * 2 + 1, tm + 1, tr)
            self._tree[v] = self._tree[v * 2] + self._tree[v * 2 + 1]


    def _query(self, v: int, tl: int, tr: int, l: int, r: int):
        '''
        :param v: current vertex's index
        :param tl: left boundary of the current segment
        :param tr: right boundary of the current segment
        :param l: left boundary of the query
        :param r: right boundary of the query
        '''
        # no overlap
        if tl > r or tr < l:
            return 0
        # total overlap
        if l <= tl and tr <= r:
            return self._tree[v]
        # partial overlap
        self._push_down(v, tl, tr)
        tm = tl + (tr - tl) // 2
        return self._query(v * 2, tl, tm, l, r) + self._query(v * 2 + 1, tm + 1, tr, l, r)


    def _update(self, v: int, tl: int, tr: int, l: int, r: int, value: int) -> None:
        '''
        :param v: current vertex's index
        :param tl: left boundary of the current segment
        :param tr: right boundary of the current segment
        :param l: left boundary of the update
        :param r: right boundary of the update
        :param value: value to assign
        '''
        if tl > r or tr < l:
            return
        if l <= tl and tr <= r:
            self._apply(v, tl, tr, value)
            return
        self._push_down(v, tl, tr)
        tm = tl + (tr - tl) // 2
        self._update(v * 2, tl, tm, l, r, value)
        self._update(v * 2 + 1, tm + 1, tr, l, r, value)
        self._tree[v] = self._tree[v * 2] + self._tree[v * 2 + 1]


    def _apply(self, v: int, tl: int, tr: int, value: int) -> None:
        """Fill the segment [tl, tr] of vertex v with value, children are left stale"""
        self._tree[v] = (tr - tl + 1) * value
        self._lazy_value[v] = value
        self._has_lazy[v] = True


    def _push_down(self, v: int, tl: int, tr: int) -> None:
        """Pass the pending assignment of vertex v to its children"""
        if self._has_lazy[v]:
            tm = tl + (tr - tl) // 2
            self._apply(v * 2, tl, tm, self._lazy_value[v])
            self._apply(v * 2 + 1, tm + 1, tr, self._lazy_value[v])
            self._has_lazy[v] = False


    def _collect(self, out: np.ndarray, v: int, tl: int, tr: int) -> None:
        if tl == tr:
            out[tl] = self._tree[v]
            return
        self._push_down(v, tl, tr)
        tm = tl + (tr - tl) // 2
        self._collect(out, v * 2, tl, tm)
        self._collect(out, v * 2 + 1, tm + 1, tr)
