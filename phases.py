"""
Five phases of the layered (beginner's) method.

Every phase works on the cube in place: it locates a piece, moves it with a
slot-indexed table of turn sequences, checks the result by comparing tiles
and repeats a corrective sequence a bounded number of times.
Running out of attempts or missing a post-condition raises InvariantViolation.
"""
import enum
import functools
import typing

from ecube      import ECube
from cubetyping import Color, Face, LogFunction, Move
from exceptions import InvariantViolation
from pieces     import (EdgeSlot, CornerSlot, EDGE_TILES, CORNER_TILES, MIDDLE_RING, TOP_RING, TOP_CORNERS,
                        locate_edge, locate_corner, slot_colors, slot_matches)
from defaults   import (C_UP, C_BACK, C_LEFT, C_FRONT, C_RIGHT, C_DOWN,
                        PHASE_FIRST_CROSS, PHASE_FIRST_CORNERS, PHASE_MIDDLE_EDGES, PHASE_LAST_CROSS, PHASE_LAST_CORNERS,
                        DEFAULT_RETRY_CAP, DEFAULT_LOOP_CEILING)


SIDE_FACES = (Face.BACK, Face.LEFT, Face.FRONT, Face.RIGHT)


def _silent(message : str):
    pass


def _apply(cube : ECube, turns : str, logf : LogFunction, what : str):
    if turns:
        logf(f'{what}: {turns}')
        cube.turn_(turns)


def _repeat_until(cube : ECube, done : typing.Callable[[ECube], bool], turns : str,
                  ceiling : int, phase : str, what : str, logf : LogFunction) -> int:
    """
    Apply `turns` until `done(cube)` holds

    Parameters
    ----------
    `cube` : ECube
        Cube to work on, changed in place
    `done` : Callable
        Predicate on the cube which stops the loop
    `turns` : str
        Corrective sequence applied on every iteration
    `ceiling` : int
        Maximal number of applications
    `phase` : str
        Name of the phase, used in the fault message
    `what` : str
        Description of the goal, used in log and fault messages

    Returns
    -------
    `applied` : int
        How many times the sequence was applied
    """
    applied = 0
    while not done(cube):
        if applied >= ceiling:
            raise InvariantViolation(phase, f'{what} not reached after {ceiling} applications of {turns}')
        _apply(cube, turns, logf, what)
        applied += 1
    return applied


def _lookup(table : dict, slot, phase : str, piece : str) -> str:
    if slot not in table:
        raise InvariantViolation(phase, f'{piece} found in unexpected slot {slot.name}')
    return table[slot]


def _piece_name(*colors : Color) -> str:
    return '/'.join(c.name for c in colors)


def _layer_solved(cube : ECube, rows : typing.Iterable[int]) -> bool:
    """
    DOWN face is solved and given rows of every side face have its home color
    """
    if not (cube.tiles[Face.DOWN] == C_DOWN).all():
        return False
    return all((cube.tiles[face, row] == face).all() for face in SIDE_FACES for row in rows)


########################################################################################################################
# Phase 1: first-layer cross

FIRST_CROSS_CASES = (
    (C_FRONT, EdgeSlot.CROSS_FRONT, {
        EdgeSlot.CROSS_FRONT:        "",
        EdgeSlot.CROSS_LEFT:         "D",
        EdgeSlot.CROSS_BACK:         "D D",
        EdgeSlot.CROSS_RIGHT:        "D'",
        EdgeSlot.MIDDLE_FRONT_LEFT:  "F'",
        EdgeSlot.MIDDLE_BACK_LEFT:   "L' D",
        EdgeSlot.MIDDLE_BACK_RIGHT:  "R D'",
        EdgeSlot.MIDDLE_FRONT_RIGHT: "F",
        EdgeSlot.TOP_FRONT:          "F F",
        EdgeSlot.TOP_LEFT:           "L L D",
        EdgeSlot.TOP_BACK:           "U U F F",
        EdgeSlot.TOP_RIGHT:          "R' R' D'",
    }, "F' D R' D'"),
    (C_LEFT, EdgeSlot.CROSS_LEFT, {
        EdgeSlot.CROSS_LEFT:         "",
        EdgeSlot.CROSS_BACK:         "B' L'",
        EdgeSlot.CROSS_RIGHT:        "R' B B L'",
        EdgeSlot.MIDDLE_FRONT_LEFT:  "L",
        EdgeSlot.MIDDLE_BACK_LEFT:   "L'",
        EdgeSlot.MIDDLE_BACK_RIGHT:  "B U' L L",
        EdgeSlot.MIDDLE_FRONT_RIGHT: "R U U L L",
        EdgeSlot.TOP_FRONT:          "U L L",
        EdgeSlot.TOP_LEFT:           "L L",
        EdgeSlot.TOP_BACK:           "U' L L",
        EdgeSlot.TOP_RIGHT:          "U U L L",
    }, "L' D F' D'"),
    (C_RIGHT, EdgeSlot.CROSS_RIGHT, {
        EdgeSlot.CROSS_BACK:         "B R",
        EdgeSlot.CROSS_RIGHT:        "",
        EdgeSlot.MIDDLE_FRONT_LEFT:  "L' U' L U' R' R'",
        EdgeSlot.MIDDLE_BACK_LEFT:   "B' U R' R'",
        EdgeSlot.MIDDLE_BACK_RIGHT:  "R",
        EdgeSlot.MIDDLE_FRONT_RIGHT: "R'",
        EdgeSlot.TOP_FRONT:          "U' R' R'",
        EdgeSlot.TOP_LEFT:           "U' U' R' R'",
        EdgeSlot.TOP_BACK:           "U R' R'",
        EdgeSlot.TOP_RIGHT:          "R' R'",
    }, "R' D B' D'"),
    (C_BACK, EdgeSlot.CROSS_BACK, {
        EdgeSlot.CROSS_BACK:         "",
        EdgeSlot.MIDDLE_FRONT_LEFT:  "L' U L B B",
        EdgeSlot.MIDDLE_BACK_LEFT:   "B",
        EdgeSlot.MIDDLE_BACK_RIGHT:  "B'",
        EdgeSlot.MIDDLE_FRONT_RIGHT: "R U' R' B B",
        EdgeSlot.TOP_FRONT:          "U U B B",
        EdgeSlot.TOP_LEFT:           "U B B",
        EdgeSlot.TOP_BACK:           "B B",
        EdgeSlot.TOP_RIGHT:          "U' B B",
    }, "B' D L' D'"),
)


def first_cross_done(cube : ECube) -> bool:
    """
    DOWN edge tiles and the bottom-middle tile of every side face have their home colors
    """
    return all(slot_matches(cube, EDGE_TILES[slot], (side, C_DOWN)) for side, slot, _, _ in FIRST_CROSS_CASES)


def solve_first_cross(cube : ECube, logf : LogFunction = None) -> ECube:
    """
    Phase 1: build the cross of DOWN color on the DOWN face

    Parameters
    ----------
    `cube` : ECube
        Cube to solve, changed in place
    `logf` : LogFunction, optional
        Function to report the progress

    Returns
    -------
    `cube` : ECube
        The cube itself
    """
    logf = logf or _silent
    for side, target, table, flip in FIRST_CROSS_CASES:
        piece = _piece_name(C_DOWN, side)
        slot  = locate_edge(cube, C_DOWN, side)
        logf(f'{piece} edge found at {slot.name}')
        _apply(cube, _lookup(table, slot, PHASE_FIRST_CROSS, piece), logf, f'move {piece} to {target.name}')

        if slot_matches(cube, EDGE_TILES[target], (C_DOWN, side)):
            _apply(cube, flip, logf, f'flip {piece}')
        if not slot_matches(cube, EDGE_TILES[target], (side, C_DOWN)):
            raise InvariantViolation(PHASE_FIRST_CROSS, f'{piece} edge is not placed at {target.name}')

    if not first_cross_done(cube):
        raise InvariantViolation(PHASE_FIRST_CROSS, 'cross on DOWN face is not complete')
    return cube


########################################################################################################################
# Phase 2: first-layer corners

FIRST_CORNERS_CASES = (
    ((C_FRONT, C_LEFT, C_DOWN), CornerSlot.BOTTOM_FRONT_LEFT, {
        CornerSlot.BOTTOM_FRONT_LEFT:  "",
        CornerSlot.BOTTOM_BACK_LEFT:   "B' U' B",
        CornerSlot.BOTTOM_BACK_RIGHT:  "B U U B'",
        CornerSlot.BOTTOM_FRONT_RIGHT: "R U R'",
        CornerSlot.TOP_FRONT_LEFT:     "",
        CornerSlot.TOP_BACK_LEFT:      "U'",
        CornerSlot.TOP_BACK_RIGHT:     "U' U'",
        CornerSlot.TOP_FRONT_RIGHT:    "U",
    }, "L' U' L U"),
    ((C_BACK, C_LEFT, C_DOWN), CornerSlot.BOTTOM_BACK_LEFT, {
        CornerSlot.BOTTOM_BACK_LEFT:   "",
        CornerSlot.BOTTOM_BACK_RIGHT:  "B U B' U U",
        CornerSlot.BOTTOM_FRONT_RIGHT: "R U' U' R'",
        CornerSlot.TOP_FRONT_LEFT:     "U",
        CornerSlot.TOP_BACK_LEFT:      "",
        CornerSlot.TOP_BACK_RIGHT:     "U'",
        CornerSlot.TOP_FRONT_RIGHT:    "U U",
    }, "B' U' B U"),
    ((C_BACK, C_RIGHT, C_DOWN), CornerSlot.BOTTOM_BACK_RIGHT, {
        CornerSlot.BOTTOM_BACK_RIGHT:  "",
        CornerSlot.BOTTOM_FRONT_RIGHT: "R U U R' U",
        CornerSlot.TOP_FRONT_LEFT:     "U U",
        CornerSlot.TOP_BACK_LEFT:      "U",
        CornerSlot.TOP_BACK_RIGHT:     "",
        CornerSlot.TOP_FRONT_RIGHT:    "U'",
    }, "R' U' R U"),
    ((C_FRONT, C_RIGHT, C_DOWN), CornerSlot.BOTTOM_FRONT_RIGHT, {
        CornerSlot.BOTTOM_FRONT_RIGHT: "",
        CornerSlot.TOP_FRONT_LEFT:     "U'",
        CornerSlot.TOP_BACK_LEFT:      "U U",
        CornerSlot.TOP_BACK_RIGHT:     "U",
        CornerSlot.TOP_FRONT_RIGHT:    "",
    }, "F' U' F U"),
)


def first_layer_done(cube : ECube) -> bool:
    return _layer_solved(cube, rows=(2,))


def solve_first_corners(cube : ECube, retry_cap : int = DEFAULT_RETRY_CAP, logf : LogFunction = None) -> ECube:
    """
    Phase 2: put the four DOWN corners into place, which completes the first layer

    Parameters
    ----------
    `cube` : ECube
        Cube with solved DOWN cross, changed in place
    `retry_cap` : int, optional
        Maximal number of insert sequences per corner
    `logf` : LogFunction, optional
        Function to report the progress
    """
    logf = logf or _silent
    for colors, target, table, insert in FIRST_CORNERS_CASES:
        piece = _piece_name(*colors)
        slot  = locate_corner(cube, *colors)
        logf(f'{piece} corner found at {slot.name}')
        _apply(cube, _lookup(table, slot, PHASE_FIRST_CORNERS, piece), logf, f'move {piece} next to {target.name}')

        tiles = CORNER_TILES[target]
        _repeat_until(cube, lambda c: slot_matches(c, tiles, colors), insert,
                      retry_cap, PHASE_FIRST_CORNERS, f'insert {piece} into {target.name}', logf)

    if not first_layer_done(cube):
        raise InvariantViolation(PHASE_FIRST_CORNERS, 'first layer is not solved')
    return cube


########################################################################################################################
# Phase 3: middle-layer edges

"""
Sequences which push the top front (or top back) edge into a middle slot and so bring the edge from that slot up
"""
MIDDLE_EXTRACT = {
    EdgeSlot.MIDDLE_FRONT_LEFT:  "U' L' U L U F U' F'",
    EdgeSlot.MIDDLE_BACK_LEFT:   "U L U' L' U' B' U B",
    EdgeSlot.MIDDLE_BACK_RIGHT:  "U' R' U R U B U' B'",
    EdgeSlot.MIDDLE_FRONT_RIGHT: "U R U' R' U' F' U F",
}

ALIGN_TOP_FRONT = {
    EdgeSlot.TOP_FRONT: "",
    EdgeSlot.TOP_LEFT:  "U'",
    EdgeSlot.TOP_BACK:  "U U",
    EdgeSlot.TOP_RIGHT: "U",
}

ALIGN_TOP_BACK = {
    EdgeSlot.TOP_FRONT: "U U",
    EdgeSlot.TOP_LEFT:  "U",
    EdgeSlot.TOP_BACK:  "",
    EdgeSlot.TOP_RIGHT: "U'",
}

# colors, destination, alignment above it, face whose top-middle tile picks the insert, both inserts
MIDDLE_EDGES_CASES = (
    ((C_FRONT, C_LEFT), EdgeSlot.MIDDLE_FRONT_LEFT, ALIGN_TOP_FRONT, Face.FRONT,
     "U' L' U L U F U' F'", "U U F U' F' U' L' U L"),
    ((C_FRONT, C_RIGHT), EdgeSlot.MIDDLE_FRONT_RIGHT, ALIGN_TOP_FRONT, Face.FRONT,
     "U R U' R' U' F' U F", "U' U' F' U F U R U' R'"),
    ((C_BACK, C_LEFT), EdgeSlot.MIDDLE_BACK_LEFT, ALIGN_TOP_BACK, Face.BACK,
     "U L U' L' U' B' U B", "U' U' B' U B U L U' L'"),
    ((C_BACK, C_RIGHT), EdgeSlot.MIDDLE_BACK_RIGHT, ALIGN_TOP_BACK, Face.BACK,
     "U' R' U R U B U' B'", "U U B U' B' U' R' U R"),
)


def middle_layer_done(cube : ECube) -> bool:
    return _layer_solved(cube, rows=(1, 2))


def solve_middle_edges(cube : ECube, logf : LogFunction = None) -> ECube:
    """
    Phase 3: put the four middle-layer edges into place, which completes the first two layers

    Parameters
    ----------
    `cube` : ECube
        Cube with solved first layer, changed in place
    `logf` : LogFunction, optional
        Function to report the progress
    """
    logf = logf or _silent
    for colors, target, align, side_face, insert_side, insert_up in MIDDLE_EDGES_CASES:
        piece = _piece_name(*colors)
        if slot_matches(cube, EDGE_TILES[target], colors):
            logf(f'{piece} edge already seated')
            continue

        slot = locate_edge(cube, *colors)
        logf(f'{piece} edge found at {slot.name}')
        if slot in MIDDLE_RING:
            _apply(cube, MIDDLE_EXTRACT[slot], logf, f'extract {piece} from {slot.name}')
            slot = locate_edge(cube, *colors)
            if slot not in TOP_RING:
                raise InvariantViolation(PHASE_MIDDLE_EDGES, f'{piece} edge is not in the top ring after extraction')

        _apply(cube, _lookup(align, slot, PHASE_MIDDLE_EDGES, piece), logf, f'align {piece} above {target.name}')
        insert = insert_side if cube.tile_color(side_face, 0, 1) == colors[0] else insert_up
        _apply(cube, insert, logf, f'insert {piece} into {target.name}')

        if not slot_matches(cube, EDGE_TILES[target], colors):
            raise InvariantViolation(PHASE_MIDDLE_EDGES, f'{piece} edge is not seated at {target.name}')

    if not middle_layer_done(cube):
        raise InvariantViolation(PHASE_MIDDLE_EDGES, 'first two layers are not solved')
    return cube


########################################################################################################################
# Phase 4: last-layer cross

class LastCrossState(enum.Enum):
    NONE          = 'none'
    L_FRONT_LEFT  = 'l_front_left'
    L_BACK_LEFT   = 'l_back_left'
    L_BACK_RIGHT  = 'l_back_right'
    L_FRONT_RIGHT = 'l_front_right'
    LINE_H        = 'line_h'
    LINE_V        = 'line_v'
    CROSS         = 'cross'


# checked in order, the first state whose UP edge tiles all have UP color wins
LAST_CROSS_PATTERNS = (
    (LastCrossState.CROSS,         ((0, 1), (1, 0), (1, 2), (2, 1))),
    (LastCrossState.LINE_H,        ((1, 0), (1, 2))),
    (LastCrossState.LINE_V,        ((0, 1), (2, 1))),
    (LastCrossState.L_FRONT_LEFT,  ((1, 0), (2, 1))),
    (LastCrossState.L_BACK_LEFT,   ((1, 0), (0, 1))),
    (LastCrossState.L_BACK_RIGHT,  ((0, 1), (1, 2))),
    (LastCrossState.L_FRONT_RIGHT, ((1, 2), (2, 1))),
)

LAST_CROSS_TURNS = {
    LastCrossState.NONE:          "F R U R' U' F'",
    LastCrossState.L_FRONT_LEFT:  "R B U B' U' R'",
    LastCrossState.L_BACK_LEFT:   "F R U R' U' F'",
    LastCrossState.L_BACK_RIGHT:  "L F U F' U' L'",
    LastCrossState.L_FRONT_RIGHT: "B L U L' U' B'",
    LastCrossState.LINE_H:        "F R U R' U' F'",
    LastCrossState.LINE_V:        "L F U F' U' L'",
}

EDGES_CYCLE        = "R U R' U R U U R'"  # cycles TOP_LEFT, TOP_RIGHT, TOP_BACK, keeps TOP_FRONT
EDGES_CYCLE_MIRROR = "F U F' U F U U F'"  # cycles TOP_BACK, TOP_FRONT, TOP_RIGHT, keeps TOP_LEFT


def classify_last_cross(cube : ECube) -> LastCrossState:
    """
    Classify the pattern of UP colored edge tiles on the UP face
    """
    up = cube.tiles[Face.UP]
    for state, cells in LAST_CROSS_PATTERNS:
        if all(up[row, col] == C_UP for row, col in cells):
            return state
    return LastCrossState.NONE


def last_cross_done(cube : ECube) -> bool:
    """
    Four top edges are placed and oriented on top of the solved first two layers
    """
    return middle_layer_done(cube) and all(
        slot_matches(cube, EDGE_TILES[slot], (Color(int(face)), C_UP))
        for slot, face in zip(TOP_RING, (Face.FRONT, Face.LEFT, Face.BACK, Face.RIGHT)))


def solve_last_cross(cube : ECube, loop_ceiling : int = DEFAULT_LOOP_CEILING, logf : LogFunction = None) -> ECube:
    """
    Phase 4: build the cross of UP color and put the top edges into their slots

    Parameters
    ----------
    `cube` : ECube
        Cube with solved first two layers, changed in place
    `loop_ceiling` : int, optional
        Maximal number of iterations of every loop of the phase
    `logf` : LogFunction, optional
        Function to report the progress
    """
    logf = logf or _silent

    applied = 0
    state = classify_last_cross(cube)
    while state is not LastCrossState.CROSS:
        if applied >= loop_ceiling:
            raise InvariantViolation(PHASE_LAST_CROSS, f'UP cross not reached after {loop_ceiling} sequences')
        _apply(cube, LAST_CROSS_TURNS[state], logf, f'UP edges {state.name}')
        state = classify_last_cross(cube)
        applied += 1

    at = lambda slot, color: lambda c: locate_edge(c, C_UP, color) == slot
    _repeat_until(cube, at(EdgeSlot.TOP_FRONT, C_FRONT), "U",
                  loop_ceiling, PHASE_LAST_CROSS, f'{_piece_name(C_UP, C_FRONT)} at TOP_FRONT', logf)
    _repeat_until(cube, at(EdgeSlot.TOP_RIGHT, C_RIGHT), EDGES_CYCLE,
                  loop_ceiling, PHASE_LAST_CROSS, f'{_piece_name(C_UP, C_RIGHT)} at TOP_RIGHT', logf)

    if at(EdgeSlot.TOP_LEFT, C_BACK)(cube) and at(EdgeSlot.TOP_BACK, C_LEFT)(cube):
        logf('UP/BACK and UP/LEFT edges are swapped')
        swapped = lambda c: (at(EdgeSlot.TOP_FRONT, C_LEFT)(c) and at(EdgeSlot.TOP_RIGHT, C_FRONT)(c)
                             and at(EdgeSlot.TOP_BACK, C_RIGHT)(c))
        _repeat_until(cube, swapped, EDGES_CYCLE_MIRROR,
                      loop_ceiling, PHASE_LAST_CROSS, 'top edges one turn away', logf)
        _apply(cube, "U", logf, 'turn top edges home')

    if not last_cross_done(cube):
        raise InvariantViolation(PHASE_LAST_CROSS, 'top edges are not placed and oriented')
    return cube


########################################################################################################################
# Phase 5: last-layer corners

CORNERS_CYCLE = {
    CornerSlot.TOP_FRONT_LEFT:  "U F U' B' U F' U' B",
    CornerSlot.TOP_BACK_LEFT:   "U L U' R' U L' U' R",
    CornerSlot.TOP_BACK_RIGHT:  "U B U' F' U B' U' F",
    CornerSlot.TOP_FRONT_RIGHT: "U R U' L' U R' U' L",
}

CORNER_TWIST = {
    CornerSlot.TOP_FRONT_LEFT:  "F' D' F D",
    CornerSlot.TOP_BACK_LEFT:   "L' D' L D",
    CornerSlot.TOP_BACK_RIGHT:  "B' D' B D",
    CornerSlot.TOP_FRONT_RIGHT: "R' D' R D",
}


@functools.lru_cache(maxsize=None)
def corner_view(piece : CornerSlot, slot : CornerSlot) -> typing.Tuple[Color, ...]:
    """
    Colors the tiles of top `slot` show when the top corner whose home is `piece` sits there
    correctly oriented, that is when UP turns alone have moved it from its home

    Parameters
    ----------
    `piece` : CornerSlot
        Home slot of the top corner
    `slot` : CornerSlot
        Top slot the corner sits in

    Returns
    -------
    `colors` : tuple
        Colors in the order of CORNER_TILES[slot]
    """
    # one U' moves every top corner one index down
    shift = (TOP_CORNERS.index(piece) - TOP_CORNERS.index(slot)) % len(TOP_CORNERS)
    cube  = ECube.get_default_cube().turn_([Move.Ui] * shift)
    return slot_colors(cube, CORNER_TILES[slot])


def corner_in_place(cube : ECube, slot : CornerSlot) -> bool:
    """
    Top corner at `slot` belongs there, maybe twisted
    """
    return sorted(slot_colors(cube, CORNER_TILES[slot])) == sorted(corner_view(slot, slot))


def corner_solved(cube : ECube, slot : CornerSlot) -> bool:
    return slot_colors(cube, CORNER_TILES[slot]) == corner_view(slot, slot)


def solve_last_corners(cube : ECube, retry_cap : int = DEFAULT_RETRY_CAP,
                       loop_ceiling : int = DEFAULT_LOOP_CEILING, logf : LogFunction = None) -> ECube:
    """
    Phase 5: put the top corners into their slots, twist them and turn the top layer home

    Parameters
    ----------
    `cube` : ECube
        Cube with everything but the top corners solved, changed in place
    `retry_cap` : int, optional
        Maximal number of twist sequences per corner
    `loop_ceiling` : int, optional
        Maximal number of iterations of the placing and aligning loops
    `logf` : LogFunction, optional
        Function to report the progress
    """
    logf = logf or _silent

    any_in_place = lambda c: any(corner_in_place(c, slot) for slot in TOP_CORNERS)
    all_in_place = lambda c: all(corner_in_place(c, slot) for slot in TOP_CORNERS)

    _repeat_until(cube, any_in_place, CORNERS_CYCLE[CornerSlot.TOP_FRONT_RIGHT],
                  loop_ceiling, PHASE_LAST_CORNERS, 'a top corner in place', logf)
    fixed = next(slot for slot in TOP_CORNERS if corner_in_place(cube, slot))
    logf(f'top corner at {fixed.name} is in place')
    _repeat_until(cube, all_in_place, CORNERS_CYCLE[fixed],
                  loop_ceiling, PHASE_LAST_CORNERS, 'all top corners in place', logf)

    twisted = [slot for slot in TOP_CORNERS if not corner_solved(cube, slot)]
    if twisted:
        logf(f'twisted top corners: {", ".join(slot.name for slot in twisted)}')
        working = twisted[0]
        twist   = CORNER_TWIST[working]
        for current, following in zip(twisted, twisted[1:] + [None]):
            view = corner_view(current, working)
            _repeat_until(cube, lambda c: slot_colors(c, CORNER_TILES[working]) == view, twist,
                          retry_cap, PHASE_LAST_CORNERS, f'twist corner from {current.name}', logf)
            if following is not None:
                gap = TOP_CORNERS.index(following) - TOP_CORNERS.index(current)
                _apply(cube, ' '.join(["U'"] * gap), logf, f'bring corner from {following.name} to {working.name}')

    _repeat_until(cube, lambda c: c.tile_color(Face.FRONT, 0, 1) == C_FRONT, "U",
                  loop_ceiling, PHASE_LAST_CORNERS, 'top layer turned home', logf)

    if not cube.is_solved():
        raise InvariantViolation(PHASE_LAST_CORNERS, 'cube is not solved')
    return cube
