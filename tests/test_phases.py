import numpy as np
import pytest

from ecube      import ECube
from cubetyping import Color, Face
from exceptions import InvariantViolation
from pieces     import CornerSlot, CORNER_TILES, TOP_CORNERS, slot_colors
from phases     import (solve_first_cross, solve_first_corners, solve_middle_edges, solve_last_cross, solve_last_corners,
                        first_cross_done, first_layer_done, middle_layer_done, last_cross_done,
                        classify_last_cross, corner_view, LastCrossState, _repeat_until)


SEEDS = range(10)


def scrambled(seed : int) -> ECube:
    return ECube().scramble(40, np.random.default_rng(seed))


@pytest.mark.parametrize('seed', SEEDS)
def test_phase_post_conditions(seed):
    cube = scrambled(seed)
    solve_first_cross(cube)
    assert first_cross_done(cube)
    solve_first_corners(cube)
    assert first_layer_done(cube)
    solve_middle_edges(cube)
    assert middle_layer_done(cube)
    solve_last_cross(cube)
    assert last_cross_done(cube)
    solve_last_corners(cube)
    assert cube.is_solved()


def test_phases_do_nothing_on_solved_cube():
    cube = ECube()
    for phase in (solve_first_cross, solve_first_corners, solve_middle_edges, solve_last_cross, solve_last_corners):
        phase(cube)
    assert cube.is_solved()
    assert cube.moves == 0


def test_phases_report_progress():
    messages = []
    cube = scrambled(100)
    solve_first_cross(cube, logf=messages.append)
    assert any('GREEN/WHITE edge found at' in m for m in messages)


def test_last_cross_classification():
    assert classify_last_cross(ECube()) is LastCrossState.CROSS

    cube = ECube()
    cube.tiles[Face.UP, 0, 1] = Color.RED
    cube.tiles[Face.UP, 2, 1] = Color.RED
    assert classify_last_cross(cube) is LastCrossState.LINE_H

    cube.tiles[Face.UP, 1, 2] = Color.RED
    assert classify_last_cross(cube) is LastCrossState.NONE

    cube.tiles[Face.UP, 2, 1] = Color.BLUE
    assert classify_last_cross(cube) is LastCrossState.L_FRONT_LEFT


def test_swapped_top_edges_are_fixed():
    # only TOP_LEFT and TOP_BACK edges are swapped, both oriented
    cube = ECube()
    cube.tiles[Face.LEFT, 0, 1] = Color.YELLOW
    cube.tiles[Face.BACK, 0, 1] = Color.ORANGE
    solve_last_cross(cube)
    assert last_cross_done(cube)
    assert cube.tile_color(Face.LEFT, 0, 1) is Color.ORANGE
    assert cube.tile_color(Face.BACK, 0, 1) is Color.YELLOW
    assert cube.moves > 0


def test_twisted_top_corners_are_fixed():
    # two top corners twisted in opposite directions, everything else solved
    cube = ECube().turn("F' D' F D F' D' F D U' F' D' F D F' D' F D F' D' F D F' D' F D U")
    assert not cube.is_solved()
    assert middle_layer_done(cube) and last_cross_done(cube)
    twisted = [slot for slot in TOP_CORNERS if slot_colors(cube, CORNER_TILES[slot]) != corner_view(slot, slot)]
    assert twisted == [CornerSlot.TOP_FRONT_LEFT, CornerSlot.TOP_BACK_LEFT]

    cube.reset_counters()
    solve_last_corners(cube)
    assert cube.is_solved()
    assert cube.moves == 4*6 + 1 + 1


def test_single_twisted_corner_is_a_fault():
    cube = ECube()
    tiles = CORNER_TILES[CornerSlot.TOP_FRONT_RIGHT]
    for (face, row, col), color in zip(tiles, (Color.BLUE, Color.WHITE, Color.RED)):
        cube.tiles[face, row, col] = color
    with pytest.raises(InvariantViolation) as e:
        solve_last_corners(cube)
    assert e.value.phase == 'last_corners'


def test_corner_view():
    solved = ECube()
    for slot in TOP_CORNERS:
        assert corner_view(slot, slot) == slot_colors(solved, CORNER_TILES[slot])
    # back right corner brought to front left by two U' turns
    assert corner_view(CornerSlot.TOP_BACK_RIGHT, CornerSlot.TOP_FRONT_LEFT) == (Color.YELLOW, Color.RED, Color.BLUE)


def test_bounded_loop_raises():
    cube = ECube()
    with pytest.raises(InvariantViolation) as e:
        _repeat_until(cube, lambda c: False, 'U', 3, 'probe', 'never', print)
    assert e.value.phase == 'probe'
    assert cube.moves == 3


def test_bounded_loop_stops_when_done():
    cube = ECube().turn("U'")
    applied = _repeat_until(cube, lambda c: c.is_solved(), 'U', 8, 'probe', 'solved', lambda m: None)
    assert applied == 1
    assert cube.is_solved()


def test_flipped_cross_edges_are_flipped_back():
    cube = ECube()
    cube.tiles[Face.DOWN, 0, 1] = Color.WHITE
    cube.tiles[Face.FRONT, 2, 1] = Color.GREEN
    cube.tiles[Face.DOWN, 1, 0] = Color.ORANGE
    cube.tiles[Face.LEFT, 2, 1] = Color.GREEN
    solve_first_cross(cube)
    assert first_cross_done(cube)
    assert cube.moves == 8


def test_first_cross_rejects_missing_piece():
    cube = ECube()
    cube.tiles[Face.FRONT, 2, 1] = Color.GREEN
    with pytest.raises(InvariantViolation):
        solve_first_cross(cube)
