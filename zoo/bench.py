import argparse, os, time

import numpy as np

from common.utils import set_seed, make_structure, random_range, NaiveArray
from common.logger import Logger


class Benchmark:
    """
    Randomized benchmark of a range-query structure, cross-checked against a naive array

    :param structure: (str) Structure ID, 'fenwick' or 'lazy-segment-tree'
    :param exp_name: (str) Experiment name.
    :param seed: (int) Seed for RNG.
    :param length: (int) Number of elements.
    :param epochs: (int) Number of epochs.
    :param ops_per_epoch: (int) Number of operations per epoch.
    :param update_ratio: (float) Probability that an operation is an update rather than a query.
    :param max_value: (int) Values and deltas are sampled from [-max_value, max_value].
    :param log_dir: (str) Directory for saving results, derived from exp_name when not given.
    :param save: (bool) Whether to save the final values of the structure.
    :param plot: (bool) Whether to plot the benchmark statistics.
    """

    def __init__(self, args) -> None:
        set_seed(args.seed)
        self.rng = np.random.default_rng(args.seed)
        self.structure_name = args.structure
        self.structure = make_structure(args.structure, args.length)
        self.length = args.length
        self.epochs = args.epochs
        self.ops_per_epoch = args.ops_per_epoch
        self.update_ratio = args.update_ratio
        self.max_value = args.max_value
        self.save = args.save
        self.plot = args.plot
        log_dir = getattr(args, 'log_dir', None)
        if log_dir is None and args.exp_name:
            exp_name = args.exp_name
            log_dir = os.path.join(os.getcwd(), 'data', exp_name, f'{exp_name}_s{args.seed}')
        config_dict = dict(vars(args))
        config_dict['log_dir'] = log_dir
        self.logger = Logger(log_dir=log_dir)
        self.logger.save_config(config_dict)
        self.logger.set_saver(self.structure)


    def sample_value(self) -> int:
        return int(self.rng.integers(-self.max_value, self.max_value + 1))


    def update(self, model: NaiveArray) -> None:
        """Perform a random update on both the structure and :param model:

        Fenwick tree receives an additive point update, lazy segment tree a range assignment
        """
        value = self.sample_value()
        if self.structure_name == 'fenwick':
            index = int(self.rng.integers(0, self.length))
            start = time.perf_counter()
            self.structure.update(index, value)
            elapsed = time.perf_counter() - start
            model.add(index, value)
        else:
            left, right = random_range(self.rng, self.length)
            start = time.perf_counter()
            self.structure.update(left, right, value)
            elapsed = time.perf_counter() - start
            model.assign(left, right, value)
        self.logger.add({'update-time': elapsed})


    def query(self, model: NaiveArray) -> int:
        """Perform a random range query, return 1 if it disagrees with :param model:"""
        left, right = random_range(self.rng, self.length)
        start = time.perf_counter()
        result = self.structure.query(left, right)
        elapsed = time.perf_counter() - start

        start = time.perf_counter()
        expected = model.sum(left, right)
        naive_elapsed = time.perf_counter() - start

        self.logger.add({
            'query-time': elapsed,
            'naive-query-time': naive_elapsed
        })
        return int(result != expected)


    def run(self) -> int:
        values = self.rng.integers(-self.max_value, self.max_value + 1, size=self.length)
        self.structure.build(values)
        model = NaiveArray(values)
        total_ops = 0
        total_mismatches = 0

        for epoch in range(1, self.epochs + 1):
            mismatches = 0
            for _ in range(self.ops_per_epoch):
                if self.rng.random() < self.update_ratio:
                    self.update(model)
                else:
                    mismatches += self.query(model)
            total_ops += self.ops_per_epoch
            full_range_sum = self.structure.query(0, self.length - 1)
            mismatches += int(full_range_sum != model.sum(0, self.length - 1))
            total_mismatches += mismatches

            # an epoch made only of updates (or only of queries) has nothing to average
            for key in ('update-time', 'query-time', 'naive-query-time'):
                if not self.logger.raw_epochs_dict[key]:
                    self.logger.add({key: 0.0})

            self.logger.log_epoch('epoch', epoch)
            self.logger.log_epoch('update-time', need_optima=True)
            self.logger.log_epoch('query-time', need_optima=True)
            self.logger.log_epoch('naive-query-time')
            self.logger.log_epoch('mismatches', mismatches)
            self.logger.log_epoch('full-range-sum', full_range_sum)
            self.logger.log_epoch('total-ops', total_ops)
            self.logger.dump_epoch()

        assert total_mismatches == 0, f'{total_mismatches} results disagree with the naive model'
        assert np.array_equal(self.structure.values(), model.values), 'Final values disagree with the naive model'
        if self.save:
            self.logger.save_state(msg=True)
        if self.plot:
            self.logger.plot()
        return total_ops


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Range-query structure benchmark')
    parser.add_argument('--structure', type=str, default='lazy-segment-tree',
                        choices=['fenwick', 'lazy-segment-tree'],
                        help='Structure to benchmark')
    parser.add_argument('--exp-name', type=str, default='bench',
                        help='Experiment name')
    parser.add_argument('--log-dir', type=str,
                        help='Directory for saving results, overrides --exp-name')
    parser.add_argument('--seed', type=int, default=0,
                        help='Seed for RNG')
    parser.add_argument('--length', type=int, default=1000,
                        help='Number of elements')
    parser.add_argument('--epochs', type=int, default=20,
                        help='Number of epochs')
    parser.add_argument('--ops-per-epoch', type=int, default=1000,
                        help='Number of operations for each epoch')
    parser.add_argument('--update-ratio', type=float, default=0.5,
                        help='Probability that an operation is an update')
    parser.add_argument('--max-value', type=int, default=100,
                        help='Bound on the absolute value of sampled values')
    parser.add_argument('--save', action='store_true',
                        help='Whether to save the final values')
    parser.add_argument('--plot', action='store_true',
                        help='Whether to plot the benchmark statistics')
    return parser


if __name__ == '__main__':
    args = get_parser().parse_args()
    bench = Benchmark(args)
    bench.run()
