import numpy as np
import pytest

from common.errors import InvalidSize, LengthMismatch, IndexOutOfRange
from common.utils import NaiveArray, random_range
from zoo.fenwick import FenwickTree


@pytest.fixture
def tree():
    ft = FenwickTree(9)
    ft.build([1, 2, 3, 4, 5, 6, 7, 8, 9])
    return ft


def test_one_to_nine(tree):
    assert tree.query(0, 4) == 15
    assert tree.query(0, 0) == 1
    assert tree.query(0, 8) == 45
    tree.update(3, 6)
    assert tree.query(0, 4) == 21
    assert tree.query(3, 3) == 10


def test_build_correctness(tree):
    for i in range(9):
        assert tree.query(i, i) == i + 1
    assert tree.values().tolist() == list(range(1, 10))


def test_prefix_consistency(tree):
    for i in range(9):
        assert tree.query(i) == tree.query(0, i)


def test_range_sum(tree):
    assert tree.query(2, 5) == 3 + 4 + 5 + 6
    assert tree.query(8, 8) == 9


def test_update_commutativity():
    updates = [(0, 5), (3, -2), (7, 10), (4, 1)]
    a, b = FenwickTree(8), FenwickTree(8)
    a.build([0] * 8)
    b.build([0] * 8)
    for index, delta in updates:
        a.update(index, delta)
    for index, delta in reversed(updates):
        b.update(index, delta)
    for i in range(8):
        assert a.query(i) == b.query(i)


def test_rebuild_resets(tree):
    tree.build([1] * 9)
    assert tree.query(0, 8) == 9


def test_random_operations_match_naive_model():
    n = 37
    rng = np.random.default_rng(7)
    initial = rng.integers(-20, 21, size=n)
    ft = FenwickTree(n)
    ft.build(initial)
    model = NaiveArray(initial)

    for _ in range(300):
        if rng.random() < 0.5:
            index, delta = int(rng.integers(0, n)), int(rng.integers(-20, 21))
            ft.update(index, delta)
            model.add(index, delta)
        else:
            left, right = random_range(rng, n)
            assert ft.query(left, right) == model.sum(left, right)
    assert np.array_equal(ft.values(), model.values)


def test_invalid_size():
    with pytest.raises(InvalidSize):
        FenwickTree(0)


def test_length_mismatch():
    ft = FenwickTree(3)
    with pytest.raises(LengthMismatch):
        ft.build([1, 2])


def test_out_of_range(tree):
    with pytest.raises(IndexOutOfRange):
        tree.update(9, 1)
    with pytest.raises(IndexOutOfRange):
        tree.update(-1, 1)
    with pytest.raises(IndexOutOfRange):
        tree.query(9)
    with pytest.raises(IndexOutOfRange):
        tree.query(5, 2)
    assert tree.query(0, 8) == 45


def test_non_integer_index(tree):
    with pytest.raises(IndexOutOfRange):
        tree.update(1.5, 1)
    with pytest.raises(IndexOutOfRange):
        tree.query(0.5)
    with pytest.raises(IndexOutOfRange):
        tree.query(0.5, 2)
    assert tree.query(0, 8) == 45


def test_non_integer_delta(tree):
    with pytest.raises(TypeError):
        tree.update(1, 0.5)
    assert tree.values().tolist() == list(range(1, 10))


def test_failed_rebuild_keeps_previous_state():
    ft = FenwickTree(3)
    ft.build([1, 2, 3])
    with pytest.raises(OverflowError):
        ft.build([1, 2 ** 70, 3])
    with pytest.raises(TypeError):
        ft.build([1, 2.5, 3])
    assert ft.query(0, 2) == 6
    assert ft.values().tolist() == [1, 2, 3]


@pytest.mark.parametrize('size', [2.5, 0.0, '3'])
def test_non_integer_size(size):
    with pytest.raises(InvalidSize):
        FenwickTree(size)
