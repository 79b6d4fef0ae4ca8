import os

import pytest

import utils
import solve

from logger     import Logger
from yparams    import YParams
from defaults   import DEFAULT_PARAMS, PHASES
from exceptions import InvariantViolation
from utils      import BatchStats, get_logf, solve_batch


PARAMS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'params')


def write_params(tmp_path, text):
    path = tmp_path / 'params.yaml'
    path.write_text(text)
    return str(path)


def test_yparams_defaults():
    params = YParams()
    assert params.kw == DEFAULT_PARAMS
    assert params.retry_cap == 6
    assert params.loop_ceiling == 8
    assert params.seed is None


def test_yparams_from_file(tmp_path):
    path = write_params(tmp_path, 'num_cubes: 3\nseed: 17\nverbose: true\n')
    params = YParams(path)
    assert params.num_cubes == 3
    assert params.seed == 17
    assert params.verbose is True
    assert params.scramble_turns == DEFAULT_PARAMS['scramble_turns']


def test_yparams_overrides(tmp_path):
    path = write_params(tmp_path, 'num_cubes: 3\n')
    params = YParams(path, {'num_cubes': 5, 'seed': None})
    assert params.num_cubes == 5
    assert params.seed is None


def test_shipped_params_file_is_valid():
    params = YParams(os.path.join(PARAMS_DIR, 'solve.yaml'))
    assert params.retry_cap == 6
    assert params.num_cubes > 0


@pytest.mark.parametrize('text', [
    'num_cubes: many\n',
    'num_cubes: 0\n',
    'retry_cap: true\n',
    'scramble_turns: -1\n',
    'seed: -1\n',
    'unknown_key: 1\n',
    '- 1\n- 2\n',
])
def test_yparams_rejects_malformed(tmp_path, text):
    with pytest.raises(ValueError):
        YParams(write_params(tmp_path, text))


def test_yparams_display():
    lines = []
    YParams().display(lines.append)
    assert 'retry_cap: 6' in lines
    assert len(lines) == len(DEFAULT_PARAMS)


def test_logger_writes_file(tmp_path):
    logger = Logger(log_dir=str(tmp_path / 'logs'), log_filename='solve.log', clear=True)
    logger.tqdmlog('hello', to_file=True, attention=True)
    logger.tqdmlog('console only')
    with open(logger.filepath) as f:
        assert f.read() == 'hello\n'


def test_get_logf(tmp_path):
    assert get_logf(None) is None
    logger = Logger(log_dir=str(tmp_path), log_filename='trace.log')
    get_logf(logger)('message')
    with open(logger.filepath) as f:
        assert 'message' in f.read()


def test_solve_batch_statistics():
    params = YParams(overrides={'num_cubes': 5, 'seed': 3})
    stats = solve_batch(params)
    assert stats.count == 5
    assert stats.min_moves <= stats.average_moves <= stats.max_moves
    assert set(stats.average_phase_moves) == set(PHASES)
    assert sum(stats.average_phase_moves.values()) == pytest.approx(stats.average_moves)
    assert stats.elapsed >= 0
    assert stats.average_baseline_moves is None


def test_solve_batch_is_reproducible():
    params = YParams(overrides={'num_cubes': 4, 'seed': 99})
    assert solve_batch(params).average_moves == solve_batch(params).average_moves


def test_solve_batch_logs_cubes(tmp_path):
    params = YParams(overrides={'num_cubes': 2, 'seed': 1, 'show_cubes': True, 'verbose': True})
    logger = Logger(log_dir=str(tmp_path), log_filename='batch.log')
    solve_batch(params, logger)
    with open(logger.filepath) as f:
        text = f.read()
    assert 'Scrambled cube #0' in text
    assert 'Solved cube #1' in text
    assert 'phase last_corners' in text


def test_solve_batch_verbose_lines_carry_cube_number(tmp_path):
    params = YParams(overrides={'num_cubes': 1, 'seed': 4, 'verbose': True})
    logger = Logger(log_dir=str(tmp_path), log_filename='trace.log')
    solve_batch(params, logger)
    with open(logger.filepath) as f:
        lines = f.read().splitlines()
    assert '    0 | phase first_cross' in lines


def test_solve_batch_closes_bar_on_fault(monkeypatch, tmp_path):
    closed = []

    class RecordingBar(utils.tqdm):
        def close(self):
            closed.append(True)
            super().close()

    def broken_solver(cube, params=None, logf=None):
        raise InvariantViolation('first_cross', 'cross not reached')
    monkeypatch.setattr(utils, 'tqdm', RecordingBar)
    monkeypatch.setattr(utils, 'run_solver', broken_solver)

    params = YParams(overrides={'num_cubes': 3, 'seed': 2})
    with pytest.raises(InvariantViolation):
        solve_batch(params, Logger(log_dir=str(tmp_path), log_filename='fault.log'))
    assert closed


def test_solve_batch_with_baseline():
    params = YParams(overrides={'num_cubes': 1, 'seed': 8, 'scramble_turns': 6, 'compare_baseline': True})
    stats = solve_batch(params)
    assert stats.average_baseline_moves is not None
    assert stats.average_baseline_moves >= 0


def test_report():
    stats = BatchStats(2, 100.0, {name: 20.0 for name in PHASES}, 90, 110, 0.5, 120.0)
    report = stats.report()
    assert report.startswith('Solved 2 cubes.')
    assert 'rubik.solve.Solver average moves: 120.000' in report
    assert 'Fewest moves: 90, most moves: 110' in report


def test_cli_solves(capsys):
    assert solve.main(['-n', '2', '--seed', '5', '--scramble-turns', '20']) == 0
    assert 'Solved 2 cubes.' in capsys.readouterr().out


def test_cli_reports_fault(monkeypatch, capsys):
    def broken_solver(cube, params=None, logf=None):
        raise InvariantViolation('last_cross', 'UP cross not reached')
    monkeypatch.setattr(utils, 'run_solver', broken_solver)
    assert solve.main(['-n', '1']) == solve.EXIT_FAULT
    assert 'FAULT: last_cross: UP cross not reached' in capsys.readouterr().err


def test_cli_fault_status_differs_from_usage_error():
    assert solve.EXIT_FAULT == 3


@pytest.mark.parametrize('argv', [
    ['-n', '0'],
    ['-n', '1', '--seed', '-5'],
])
def test_cli_rejects_bad_params(argv, capsys):
    with pytest.raises(SystemExit) as e:
        solve.main(argv)
    assert e.value.code == 2
    assert 'Traceback' not in capsys.readouterr().err
