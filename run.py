import os, sys
import subprocess
import os.path as osp


if __name__ == '__main__':
    structures = ['bench']
    utils = ['plot', 'demo', 'query_saved']

    assert len(sys.argv) > 1, 'Invalid command'
    cmd = sys.argv[1]
    assert cmd in structures + utils, f'Available commands are {structures + utils}'
    runner = sys.executable if sys.executable else 'python'

    env = os.environ.copy()
    root = osp.abspath(osp.dirname(__file__))
    env['PYTHONPATH'] = os.pathsep.join(filter(None, [root, env.get('PYTHONPATH')]))

    n_runs = None
    module = ('common.' if cmd in utils else 'zoo.') + cmd
    if cmd in structures and len(sys.argv) > 2 and sys.argv[2] == '-n':
        n_runs = int(sys.argv[3])

    if n_runs:
        args = sys.argv[4:] if len(sys.argv) > 4 else []
        for seed in range(n_runs):
            subprocess.check_call([runner, '-m', module] + args + ['--seed', str(seed)], env=env)
    else:
        args = sys.argv[2:] if len(sys.argv) > 2 else []
        subprocess.check_call([runner, '-m', module] + args, env=env)
