import argparse, json, os.path as osp
from typing import Dict, List, Tuple

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd


QUERY_COLUMNS = {
    'average-query-time': 'structure',
    'average-naive-query-time': 'naive array'
}


def to_frame(data) -> pd.DataFrame:
    """Epoch statistics as a DataFrame, from a Logger's epochs dict or a progress table"""
    return data if isinstance(data, pd.DataFrame) else pd.DataFrame.from_dict(dict(data))


def plot_query_times(frame: pd.DataFrame, ax) -> None:
    """Average query time of the structure against the naive array, over total operations"""
    long = frame.melt(id_vars='total-ops', value_vars=list(QUERY_COLUMNS),
                    var_name='model', value_name='seconds')
    long['model'] = long['model'].map(QUERY_COLUMNS)
    sns.lineplot(data=long, x='total-ops', y='seconds', hue='model', marker='o', ax=ax)
    ax.set_title('Range query')
    ax.set_xlabel('Total ops')
    ax.set_ylabel('Seconds')


def plot_update_times(frame: pd.DataFrame, ax) -> None:
    """Average update time, shaded between the fastest and slowest update of each epoch"""
    x = frame['total-ops']
    sns.lineplot(x=x, y=frame['average-update-time'], marker='o', ax=ax)
    ax.fill_between(x, frame['min-update-time'], frame['max-update-time'], alpha=0.2)
    ax.set_title('Update')
    ax.set_xlabel('Total ops')
    ax.set_ylabel('Seconds')


def plot(data, structure: str=None):
    """Draw query and update timings of a benchmark run side by side

    :param data: epoch statistics, see `to_frame`
    :param structure: structure ID, used as the figure title
    :return fig: the matplotlib figure
    """
    frame = to_frame(data)
    sns.set_theme()
    fig, (query_ax, update_ax) = plt.subplots(1, 2, figsize=(12, 5))
    plot_query_times(frame, query_ax)
    plot_update_times(frame, update_ax)
    if structure is not None:
        fig.suptitle(structure)
    fig.tight_layout()
    return fig


def load_progress(log_dir: str) -> Tuple[pd.DataFrame, Dict]:
    """Read `progress.txt` and `config.json` written by a benchmark run"""
    frame = pd.read_table(osp.join(log_dir, 'progress.txt'))
    with open(osp.join(log_dir, 'config.json')) as f:
        config = json.load(f)
    return frame, config


def make_plots(log_dirs: List[str], savedir: str=None) -> List[str]:
    saved = []
    for log_dir in log_dirs:
        frame, config = load_progress(log_dir)
        fig = plot(frame, config.get('structure'))
        if savedir is not None:
            name = f"{config.get('exp_name') or 'exp'}_s{config.get('seed', 0)}.png"
            savepath = osp.join(savedir, name)
            fig.savefig(savepath)
            saved.append(savepath)
            print(f'Plotting result is saved at {osp.abspath(savepath)}.')
        else:
            plt.show()
        plt.close(fig)
    return saved


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark results plotting')
    parser.add_argument('--log-dirs', type=str, nargs='+', required=True,
                        help='Directories of benchmark runs')
    parser.add_argument('-s', '--savedir', type=str,
                        help='Directory to save plotting results')
    args = parser.parse_args()
    make_plots(args.log_dirs, args.savedir)
