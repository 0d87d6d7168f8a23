import argparse
from typing import List

from zoo.fenwick import FenwickTree
from zoo.lazy_segment_tree import LazySegmentTree


def fenwick_demo() -> List[int]:
    """Prefix and range sums over 1..9, before and after adding 6 at index 3"""
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    ft = FenwickTree(len(values))
    ft.build(values)

    results = [ft.query(0, 4), ft.query(0, 0), ft.query(0, 8)]
    ft.update(3, 6)
    results.append(ft.query(0, 4))
    return results


def lazy_segment_tree_demo() -> List[int]:
    """Range sum over five ones, before and after assigning 2 to [0, 2]"""
    values = [1, 1, 1, 1, 1]
    st = LazySegmentTree(len(values))
    st.build(values)

    results = [st.query(0, 2)]
    st.update(0, 2, 2)
    results.append(st.query(0, 2))
    return results


def point_update_demo() -> List[int]:
    """Point update expressed as a single-element range assignment"""
    values = [1, 3, 5, 7, 9, 11]
    st = LazySegmentTree(len(values))
    st.build(values)

    results = [st.query(0, 2), st.query(1, 3)]
    st.update(2, 2, 10)
    results += [st.query(0, 2), st.query(1, 3)]
    return results


DEMOS = {
    'fenwick': ('Fenwick Tree', fenwick_demo),
    'lazy-segment-tree': ('Segment Tree with Lazy Propagation', lazy_segment_tree_demo),
    'point-update': ('Segment Tree with point update', point_update_demo)
}


def demo(args) -> None:
    names = list(DEMOS) if args.structure == 'all' else [args.structure]
    for name in names:
        title, fn = DEMOS[name]
        print(title)
        for result in fn():
            print(result)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Range-query structure demonstrations')
    parser.add_argument('--structure', type=str, default='all',
                        choices=['all'] + list(DEMOS),
                        help='Demonstration to run')
    args = parser.parse_args()
    demo(args)
