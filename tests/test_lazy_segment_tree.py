import numpy as np
import pytest

from common.errors import InvalidSize, LengthMismatch, IndexOutOfRange, RangeQueryError
from common.utils import NaiveArray, random_range
from zoo.lazy_segment_tree import LazySegmentTree


@pytest.fixture
def values():
    return [4, -2, 7, 0, 3, 8, -5, 1, 6, 2, 9]


@pytest.fixture
def tree(values):
    st = LazySegmentTree(len(values))
    st.build(values)
    return st


def test_five_ones_assignment():
    st = LazySegmentTree(5)
    st.build([1, 1, 1, 1, 1])
    assert st.query(0, 2) == 3
    st.update(0, 2, 2)
    assert st.query(0, 2) == 6
    assert st.query(0, 4) == 8


def test_build_correctness(tree, values):
    for i, value in enumerate(values):
        assert tree.query(i, i) == value
    assert tree.query(0, len(values) - 1) == sum(values)


def test_sum_additivity(tree, values):
    n = len(values)
    for l in range(n):
        for r in range(l + 1, n):
            for m in range(l, r):
                assert tree.query(l, m) + tree.query(m + 1, r) == tree.query(l, r)


def test_range_assignment(tree, values):
    tree.update(3, 7, 11)
    for i in range(len(values)):
        expected = 11 if 3 <= i <= 7 else values[i]
        assert tree.query(i, i) == expected


def test_idempotent_update(values):
    once = LazySegmentTree(len(values))
    once.build(values)
    once.update(2, 9, -4)

    twice = LazySegmentTree(len(values))
    twice.build(values)
    twice.update(2, 9, -4)
    twice.update(2, 9, -4)

    assert np.array_equal(once.values(), twice.values())
    assert once.query(0, len(values) - 1) == twice.query(0, len(values) - 1)


def test_nested_overlapping_updates():
    n = 8
    st = LazySegmentTree(n)
    st.build(list(range(n)))
    st.update(0, n - 1, 5)
    st.update(2, 4, 9)
    assert st.query(0, 1) == 10
    assert st.query(2, 4) == 27
    assert st.query(0, n - 1) == 5 * (n - 3) + 27


def test_pending_assignment_is_overridden():
    st = LazySegmentTree(6)
    st.build([0] * 6)
    st.update(0, 5, 3)
    st.update(1, 4, 7)
    st.update(0, 2, 1)
    assert st.values().tolist() == [1, 1, 1, 7, 7, 3]
    assert st.query(0, 5) == 20


def test_point_update():
    st = LazySegmentTree(6)
    st.build([1, 3, 5, 7, 9, 11])
    assert st.query(0, 2) == 9
    assert st.query(1, 3) == 15
    st.update(2, 2, 10)
    assert st.query(0, 2) == 14
    assert st.query(1, 3) == 20


def test_single_element():
    st = LazySegmentTree(1)
    st.build([42])
    assert st.query(0, 0) == 42
    st.update(0, 0, -1)
    assert st.query(0, 0) == -1
    assert len(st) == 1


def test_rebuild_discards_pending_assignments(values):
    st = LazySegmentTree(len(values))
    st.build(values)
    st.update(0, len(values) - 1, 100)
    st.build(values)
    assert st.values().tolist() == values


@pytest.mark.parametrize('n', [1, 2, 3, 7, 16, 33])
def test_random_operations_match_naive_model(n):
    rng = np.random.default_rng(n)
    initial = rng.integers(-50, 51, size=n)
    st = LazySegmentTree(n)
    st.build(initial)
    model = NaiveArray(initial)

    for _ in range(300):
        left, right = random_range(rng, n)
        if rng.random() < 0.5:
            value = int(rng.integers(-50, 51))
            st.update(left, right, value)
            model.assign(left, right, value)
        else:
            assert st.query(left, right) == model.sum(left, right)
        assert st.query(0, n - 1) == model.sum(0, n - 1)
    assert np.array_equal(st.values(), model.values)


def test_invalid_size():
    with pytest.raises(InvalidSize):
        LazySegmentTree(0)
    with pytest.raises(InvalidSize):
        LazySegmentTree(-3)


def test_length_mismatch():
    st = LazySegmentTree(4)
    with pytest.raises(LengthMismatch) as excinfo:
        st.build([1, 2, 3])
    assert excinfo.value.details == {'expected': 4, 'actual': 3}


@pytest.mark.parametrize('left, right', [(-1, 2), (0, 11), (5, 4), (11, 11)])
def test_out_of_range(tree, left, right):
    with pytest.raises(IndexOutOfRange):
        tree.query(left, right)
    with pytest.raises(IndexOutOfRange):
        tree.update(left, right, 1)


def test_rejected_update_leaves_state_untouched(tree, values):
    with pytest.raises(RangeQueryError):
        tree.update(3, 20, 0)
    assert tree.values().tolist() == values


def test_errors_are_builtin_subclasses():
    assert issubclass(IndexOutOfRange, IndexError)
    assert issubclass(LengthMismatch, ValueError)
    assert issubclass(InvalidSize, ValueError)


@pytest.mark.parametrize('left, right', [(0.5, 2), (0, 2.0), ('1', 2)])
def test_non_integer_range(tree, left, right):
    with pytest.raises(IndexOutOfRange):
        tree.query(left, right)
    with pytest.raises(IndexOutOfRange):
        tree.update(left, right, 1)


def test_numpy_integer_range(tree, values):
    assert tree.query(np.int64(1), np.int32(3)) == sum(values[1:4])


def test_fractional_value_is_rejected():
    st = LazySegmentTree(3)
    st.build([0, 0, 0])
    with pytest.raises(TypeError):
        st.update(0, 2, 2.5)
    assert st.query(0, 2) == 0
    assert st.values().tolist() == [0, 0, 0]


def test_oversized_value_is_rejected(tree, values):
    with pytest.raises(OverflowError):
        tree.update(0, 5, 2 ** 70)
    assert tree.values().tolist() == values


def test_failed_rebuild_keeps_previous_state(tree, values):
    tree.update(2, 8, 3)
    before = tree.values().tolist()
    bad = list(values)
    bad[5] = 2 ** 70
    with pytest.raises(OverflowError):
        tree.build(bad)
    bad[5] = 1.5
    with pytest.raises(TypeError):
        tree.build(bad)
    assert tree.values().tolist() == before
    assert tree.query(0, len(values) - 1) == sum(before)


@pytest.mark.parametrize('length', [2.5, 3.0, '4', None])
def test_non_integer_size(length):
    with pytest.raises(InvalidSize):
        LazySegmentTree(length)
