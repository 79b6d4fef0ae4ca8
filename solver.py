import typing

from ecube      import ECube
from yparams    import YParams
from cubetyping import LogFunction
from exceptions import InvariantViolation
from defaults   import (PHASE_FIRST_CROSS, PHASE_FIRST_CORNERS, PHASE_MIDDLE_EDGES, PHASE_LAST_CROSS, PHASE_LAST_CORNERS,
                        DEFAULT_RETRY_CAP, DEFAULT_LOOP_CEILING)
from phases     import (solve_first_cross, solve_first_corners, solve_middle_edges, solve_last_cross, solve_last_corners)


class LayerSolver:
    """
    Solver of the cube by the layered method.
    Runs five phases one after another and counts the moves every phase used.

    Parameters
    ----------
    `retry_cap` : int, optional
        Maximal number of corner insert and twist sequences in a row
    `loop_ceiling` : int, optional
        Maximal number of iterations of classifying and aligning loops
    `logf` : LogFunction, optional
        Function to report the progress
    """
    def __init__(self, retry_cap : int = DEFAULT_RETRY_CAP, loop_ceiling : int = DEFAULT_LOOP_CEILING, logf : LogFunction = None):
        self.retry_cap    = retry_cap
        self.loop_ceiling = loop_ceiling
        self.logf         = logf

    @staticmethod
    def from_params(params : YParams = None, logf : LogFunction = None) -> "LayerSolver":
        if params is None:
            return LayerSolver(logf=logf)
        return LayerSolver(params.retry_cap, params.loop_ceiling, logf)

    def phases(self) -> typing.List[typing.Tuple[str, typing.Callable[[ECube], ECube]]]:
        """
        Phases in the order they are applied, each as a pair of name and function of a cube
        """
        logf = self.logf
        return [
            (PHASE_FIRST_CROSS,   lambda cube: solve_first_cross(cube, logf)),
            (PHASE_FIRST_CORNERS, lambda cube: solve_first_corners(cube, self.retry_cap, logf)),
            (PHASE_MIDDLE_EDGES,  lambda cube: solve_middle_edges(cube, logf)),
            (PHASE_LAST_CROSS,    lambda cube: solve_last_cross(cube, self.loop_ceiling, logf)),
            (PHASE_LAST_CORNERS,  lambda cube: solve_last_corners(cube, self.retry_cap, self.loop_ceiling, logf)),
        ]

    def solve_(self, cube : ECube) -> ECube:
        """
        Solve the cube in place

        Parameters
        ----------
        `cube` : ECube
            Cube to solve

        Returns
        -------
        `cube` : ECube
            The same cube, solved. Its `phase_moves` holds the moves used by every phase.
        """
        for name, phase in self.phases():
            if self.logf:
                self.logf(f'phase {name}')
            before = cube.moves
            phase(cube)
            cube.phase_moves[name] = cube.moves - before
            if self.logf:
                self.logf(f'phase {name} done in {cube.phase_moves[name]} moves')

        if not cube.is_solved():
            raise InvariantViolation('solver', 'cube is not solved after the last phase')
        return cube

    def solve(self, cube : ECube) -> ECube:
        """
        Solve a copy of the cube, see `solve_`
        """
        return self.solve_(cube.copy())


def run_solver(cube : ECube, params : YParams = None, logf : LogFunction = None) -> ECube:
    """
    Solve a copy of the cube by the layered method

    Parameters
    ----------
    `cube` : ECube
        Cube to solve, left unchanged
    `params` : YParams, optional
        Solving parameters, `retry_cap` and `loop_ceiling` are used. Defaults if None.
    `logf` : LogFunction, optional
        Function to report the progress

    Returns
    -------
    `solved` : ECube
        Solved copy of the cube with move counters
    """
    return LayerSolver.from_params(params, logf).solve(cube)
