import time
import typing

import numpy as np

from tqdm import tqdm
from rubik.solve import Solver

from ecube      import ECube
from logger     import Logger
from solver     import run_solver
from yparams    import YParams
from defaults   import PHASES
from cubetyping import LogFunction


def get_logf(logger : Logger, to_file : bool = True, pbar : tqdm = None) -> LogFunction:
    if logger:
        return lambda message, f=to_file, a=False, e=True: logger.tqdmlog(message, pbar=pbar, to_file=f, attention=a, add_iter_num=e)
    return None


def baseline_moves(cube : ECube) -> int:
    """
    Amount of moves `rubik.solve.Solver` needs to solve the cube
    """
    solver = Solver(cube.to_Cube())
    solver.solve()
    return len(solver.moves)


class BatchStats(typing.NamedTuple):
    """
    Statistics of solving a batch of cubes

    Attributes
    ----------
    `count` : int
        Amount of solved cubes
    `average_moves` : float
        Average total amount of moves per cube
    `average_phase_moves` : dict
        Average amount of moves per cube used by every phase
    `min_moves`, `max_moves` : int
        The least and the most moves used for one cube
    `elapsed` : float
        Wall time of the batch in seconds
    `average_baseline_moves` : float, optional
        Average amount of moves of `rubik.solve.Solver`, None if not compared
    """
    count                  : int
    average_moves          : float
    average_phase_moves    : typing.Dict[str, float]
    min_moves              : int
    max_moves              : int
    elapsed                : float
    average_baseline_moves : typing.Optional[float] = None

    def report(self) -> str:
        width = max(len(name) for name in PHASES)
        lines = [
            f'Solved {self.count} cubes.',
            'Move count averages:',
            f'--> {"total":{width}} : {self.average_moves:.3f}',
        ]
        for name in PHASES:
            lines.append(f'--> {name:{width}} : {self.average_phase_moves.get(name, 0.0):.3f}')
        lines.append(f'Fewest moves: {self.min_moves}, most moves: {self.max_moves}')
        if self.average_baseline_moves is not None:
            lines.append(f'rubik.solve.Solver average moves: {self.average_baseline_moves:.3f}')
        lines.append(f'Elapsed time: {self.elapsed:.6f} seconds')
        return '\n'.join(lines)


def solve_batch(params : YParams, logger : Logger = None) -> BatchStats:
    """
    Scramble and solve `params.num_cubes` cubes and collect move statistics

    Parameters
    ----------
    `params` : YParams
        Solving parameters
    `logger` : Logger, optional
        Logger to report scrambled and solved cubes and, if `params.verbose`, every solving step

    Returns
    -------
    `stats` : BatchStats
        Statistics of the batch
    """
    rng = np.random.default_rng(params.seed)

    totals          = []
    phase_totals    = {name: [] for name in PHASES}
    baseline_totals = []

    start = time.perf_counter()
    pbar  = tqdm(range(params.num_cubes), disable=logger is None)
    logf  = get_logf(logger, pbar=pbar) if params.verbose else None
    try:
        for i in pbar:
            cube = ECube.get_default_cube().scramble(params.scramble_turns, rng)
            if logger and params.show_cubes:
                logger.cubelog(f'Scrambled cube #{i}', cube, pbar)

            solved = run_solver(cube, params, logf)
            totals.append(solved.moves)
            for name in PHASES:
                phase_totals[name].append(solved.phase_moves.get(name, 0))
            if params.compare_baseline:
                baseline_totals.append(baseline_moves(cube))

            if logger and params.show_cubes:
                logger.cubelog(f'Solved cube #{i} in {solved.moves} moves', solved, pbar)
    finally:
        pbar.close()
    elapsed = time.perf_counter() - start

    totals = np.array(totals)
    return BatchStats(
        count=len(totals),
        average_moves=float(totals.mean()) if len(totals) else 0.0,
        average_phase_moves={name: float(np.mean(moves)) if moves else 0.0 for name, moves in phase_totals.items()},
        min_moves=int(totals.min()) if len(totals) else 0,
        max_moves=int(totals.max()) if len(totals) else 0,
        elapsed=elapsed,
        average_baseline_moves=float(np.mean(baseline_totals)) if baseline_totals else None,
    )
