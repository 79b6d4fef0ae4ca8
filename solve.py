import sys
import argparse

from logger     import Logger
from yparams    import YParams
from exceptions import InvariantViolation
from utils      import BatchStats, solve_batch


EXIT_FAULT = 3  # argparse uses 2 for command line errors


def start_solving(params : YParams) -> BatchStats:
    """
    Solve a batch of scrambled cubes and print the summary

    Parameters
    ----------
    `params` : YParams
        solving parameters
    """
    logger = Logger(log_dir=params.log_path, log_filename=params.log_filename, clear=True)

    logger.tqdmlog('='*60)
    params.display(lambda message: logger.tqdmlog(message, to_file=True))
    logger.tqdmlog('='*60)

    stats = solve_batch(params, logger)
    logger.tqdmlog(stats.report(), to_file=True)
    return stats


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Solve scrambled 3x3x3 cubes by the layered method')
    parser.add_argument('-p', '--params_path', type=str, default=None,
        help='path to yaml file with solving parameters, defaults are used if omitted')
    parser.add_argument('-n', '--num_cubes', type=int, default=None,
        help='amount of cubes to scramble and solve')
    parser.add_argument('--seed', type=int, default=None,
        help='seed of the scramble random generator')
    parser.add_argument('--scramble_turns', '--scramble-turns', type=int, default=None,
        help='amount of random turns in every scramble')
    parser.add_argument('--verbose', action='store_true', default=None,
        help='log every located piece and applied sequence')
    parser.add_argument('--show_cubes', '--show-cubes', action='store_true', default=None,
        help='print scrambled and solved cubes')
    parser.add_argument('--baseline', action='store_true', default=None, dest='compare_baseline',
        help='compare move counts with rubik.solve.Solver')

    args = parser.parse_args(argv)
    overrides = vars(args)
    params_path = overrides.pop('params_path')

    try:
        params = YParams(params_path, overrides)
    except ValueError as e:
        parser.error(str(e))

    try:
        start_solving(params)
    except InvariantViolation as e:
        print(f'FAULT: {e}', file=sys.stderr)
        return EXIT_FAULT
    return 0


if __name__ == '__main__':
    sys.exit(main())
