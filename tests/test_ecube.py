import numpy as np
import pytest

from ecube      import ECube, new_solved_cube, move_count, phase_move_counts
from cubetyping import Color, Face, Move
from defaults   import DEFAULT_CUBE_STR


def test_default_cube_is_solved():
    cube = ECube.get_default_cube()
    assert cube.is_solved()
    assert cube.flat_str() == DEFAULT_CUBE_STR
    assert move_count(cube) == 0
    assert phase_move_counts(cube) == {}


def test_cube_string_roundtrip():
    cube = new_solved_cube().turn("R U R' U' F2 D")
    assert ECube(cube.flat_str()) == cube
    assert ECube(str(cube)) == cube


def test_cube_string_layout():
    cube = ECube()
    s = cube.flat_str()
    assert s[:9] == 'B'*9
    assert s[9:21] == 'OOOWWWRRRYYY'
    assert s[45:] == 'G'*9


@pytest.mark.parametrize('cube_str', ['B'*53, 'B'*55, 'X'*54])
def test_malformed_cube_string(cube_str):
    with pytest.raises(ValueError):
        ECube(cube_str)


@pytest.mark.parametrize('turns,expected', [
    ("R U R' U'", [Move.R, Move.U, Move.Ri, Move.Ui]),
    ('Ri Di',     [Move.Ri, Move.Di]),
    ('U2 F',      [Move.U, Move.U, Move.F]),
    ("RU'",       [Move.R, Move.Ui]),
    ([Move.B, "L'"], [Move.B, Move.Li]),
    (Move.D,      [Move.D]),
])
def test_prepare_turns(turns, expected):
    assert ECube._prepare_turns(turns) == expected


@pytest.mark.parametrize('turns', ['X', 'r', "U''", 'M'])
def test_unknown_turn_notation(turns):
    with pytest.raises(ValueError):
        ECube().turn(turns)


def test_apply_move_rejects_several_turns():
    with pytest.raises(ValueError):
        ECube().apply_move('R U')


def test_turn_returns_copy():
    cube = ECube()
    turned = cube.turn("F R")
    assert cube.is_solved()
    assert not turned.is_solved()
    assert turned.moves == 2
    assert cube.moves == 0


def test_reverse_turns():
    assert ECube.reverse_turns("R U F'") == [Move.F, Move.Ui, Move.Ri]
    turns = "L D' B2 R U"
    assert ECube().turn(turns).turn(ECube.reverse_turns(turns)).is_solved()


def test_scramble_is_reproducible():
    first  = ECube().scramble(40, np.random.default_rng(42))
    second = ECube().scramble(40, np.random.default_rng(42))
    assert first == second
    assert first.moves == 0
    assert ECube.get_scramble_turns(10, np.random.default_rng(1)) == ECube.get_scramble_turns(10, np.random.default_rng(1))


def test_scramble_keeps_counters_on_request():
    cube = ECube().scramble(12, np.random.default_rng(3), reset_counters=False)
    assert cube.moves == 12


def test_copy_is_independent():
    cube = ECube().turn('U')
    cube.phase_moves['first_cross'] = 3
    copy = cube.copy()
    copy.turn_('R')
    copy.phase_moves['first_cross'] = 5
    assert cube.moves == 1
    assert cube.phase_moves == {'first_cross': 3}
    assert cube != copy


def test_net_rendering():
    lines = str(ECube()).split('\n')
    assert len(lines) == 9
    assert lines[0] == '    BBB'
    assert lines[4] == 'OOO WWW RRR YYY'
    assert lines[8] == '    GGG'


def test_to_rubik_cube_roundtrip():
    cube = ECube().turn("R U2 F' L")
    assert ECube(cube.to_Cube().flat_str()) == cube


def test_tile_color_and_letters():
    cube = ECube()
    assert cube.tile_color(Face.FRONT, 0, 0) is Color.WHITE
    assert Color.from_letter('G') is Color.GREEN
    assert Color.RED.letter == 'R'
    with pytest.raises(ValueError):
        Color.from_letter('Q')
