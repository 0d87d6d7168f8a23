import argparse, json
import os.path as osp
from types import SimpleNamespace
from typing import List, Tuple

import numpy as np

from common.utils import make_structure


def load(log_dir: str):
    """Rebuild the structure saved by a benchmark run in :param log_dir:"""
    with open(osp.join(log_dir, 'config.json')) as f:
        config = json.load(f, object_hook=lambda d: SimpleNamespace(**d))
    values = np.load(osp.join(log_dir, 'values.npy'))
    structure = make_structure(config.structure, len(values))
    structure.build(values)
    return structure


def query_saved(args) -> List[Tuple[int, int, int]]:
    ranges = args.ranges
    assert len(ranges) % 2 == 0, 'Ranges must be given as pairs of boundaries'
    structure = load(args.log_dir)

    results = []
    for left, right in zip(ranges[::2], ranges[1::2]):
        result = structure.query(left, right)
        print('Range: [%d, %d]\tSum: %d' % (left, right, result))
        results.append((left, right, result))
    return results


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Query a saved structure')
    parser.add_argument('--log-dir', type=str, required=True,
                        help='Path to the log directory, which stores values file, config file, etc')
    parser.add_argument('--ranges', type=int, nargs='+', required=True,
                        help='Inclusive ranges to query, as pairs: l1 r1 l2 r2 ...')
    args = parser.parse_args()
    query_saved(args)
