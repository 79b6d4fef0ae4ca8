import re
import typing
import numpy as np

from rubik.cube   import Cube

from numpy.typing import ArrayLike
from cubetyping   import Color, CubeStr, Face, Move, TurnLike

from defaults     import CUBE_TURNS, SCRAMBLE_MOVES, DEFAULT_CUBE_STR, NET_SIDE_FACES
from rotation     import rotate_tiles


TURN_PATTERN = re.compile(rf"([{''.join(CUBE_TURNS)}])([0-9]*)(['i]?)")

class ECube:
    """
    Rubik's cube 3x3x3 as six 3x3 grids of tile colors.

    The tiles are kept in `tiles` array of shape (6,3,3) indexed by Face, row and column.
    Besides the tiles the cube counts every quarter turn applied to it (`moves`)
    and keeps how many of them each solving phase used (`phase_moves`).

    Parameters
    ----------
    `cube_str` : CubeStr, optional
        String with colors of the cube, see CubeStr. Solved cube by default.
    """
    def __init__(self, cube_str : CubeStr = DEFAULT_CUBE_STR):
        self.tiles       = ECube._parse_cube_str(cube_str)
        self.moves       = 0
        self.phase_moves = {}

    @staticmethod
    def _parse_cube_str(cube_str : CubeStr) -> ArrayLike:
        """
        Build tiles array from cube string
        """
        letters = ''.join(cube_str.split())
        if len(letters) != 54:
            raise ValueError(f'Cube string must have 54 colors, got {len(letters)}')
        colors = np.array([Color.from_letter(l) for l in letters], dtype=np.int8)
        tiles  = np.zeros((6, 3, 3), dtype=np.int8)
        tiles[Face.UP]   = colors[:9].reshape(3, 3)
        tiles[Face.DOWN] = colors[45:].reshape(3, 3)
        for row in range(3):
            row_colors = colors[9 + row*12 : 21 + row*12]
            for i, face in enumerate(NET_SIDE_FACES):
                tiles[face, row] = row_colors[i*3 : i*3 + 3]
        return tiles

    def flat_str(self) -> CubeStr:
        """
        Get cube string of the cube. The cube built from this string equals the cube.
        """
        letter = lambda c: Color(int(c)).letter
        up   = ''.join(letter(c) for c in self.tiles[Face.UP].ravel())
        down = ''.join(letter(c) for c in self.tiles[Face.DOWN].ravel())
        rows = ''.join(letter(c) for row in range(3) for face in NET_SIDE_FACES for c in self.tiles[face, row])
        return CubeStr(up + rows + down)

    def __str__(self):
        s = self.flat_str()
        lines = []
        for row in range(3):
            lines.append(' '*4 + s[row*3 : row*3 + 3])
        for row in range(3):
            side = s[9 + row*12 : 21 + row*12]
            lines.append(' '.join(side[i*3 : i*3 + 3] for i in range(4)))
        for row in range(3):
            lines.append(' '*4 + s[45 + row*3 : 48 + row*3])
        return '\n'.join(lines)

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other : "ECube") -> bool:
        if not isinstance(other, ECube):
            return NotImplemented
        return bool(np.array_equal(self.tiles, other.tiles))

    def to_Cube(self) -> Cube:
        """
        Get rubik.cube.Cube version of ECube object

        Returns
        -------
        cube : Cube
            Cube class object
        """
        return Cube(self.flat_str())

    @staticmethod
    def get_default_cube() -> "ECube":
        """
        Get solved version of cube with default colors.
        Default cube is
            BBB
            BBB
            BBB
        OOO WWW RRR YYY
        OOO WWW RRR YYY
        OOO WWW RRR YYY
            GGG
            GGG
            GGG

        Returns
        -------
        cube : ECube
            Solved version of cube.
        """
        return ECube(DEFAULT_CUBE_STR)

    def copy(self) -> "ECube":
        """
        Get a copy of cube together with its move counters
        """
        cube = ECube.__new__(ECube)
        cube.tiles       = self.tiles.copy()
        cube.moves       = self.moves
        cube.phase_moves = dict(self.phase_moves)
        return cube

    def reset_counters(self):
        """
        Forget moves made so far
        """
        self.moves       = 0
        self.phase_moves = {}

    def tile_color(self, face : Face, row : int, col : int) -> Color:
        return Color(int(self.tiles[face, row, col]))

    def is_solved(self) -> bool:
        return bool((self.tiles == np.arange(6, dtype=np.int8).reshape(6, 1, 1)).all())

    def color_counts(self) -> typing.Dict[Color, int]:
        """
        Count tiles of every color
        """
        counts = np.bincount(self.tiles.ravel(), minlength=6)
        return {Color(i): int(n) for i, n in enumerate(counts)}

    def apply_move(self, move : TurnLike) -> "ECube":
        """
        Apply a single quarter turn to the cube itself

        Parameters
        ----------
        `move` : Move | str
            Turn to apply

        Returns
        -------
        `cube` : ECube
            The cube itself
        """
        if not isinstance(move, Move):
            turns = ECube._prepare_turns(move)
            if len(turns) != 1:
                raise ValueError(f'Expected a single quarter turn, got {move!r}')
            move = turns[0]
        rotate_tiles(self.tiles, move)
        self.moves += 1
        return self

    @staticmethod
    def get_scramble_turns(n_turns : int, rng : np.random.Generator = None) -> typing.List[Move]:
        """
        Get N random scramble turns

        Parameters
        ----------
        `n_turns` : int
            Amount of random turns
        `rng` : np.random.Generator, optional
            Source of random numbers. Fresh unseeded generator if None.

        Returns
        -------
        `scramble` : list
            List of turns to scramble cube
        """
        if rng is None:
            rng = np.random.default_rng()
        idx = rng.integers(0, len(SCRAMBLE_MOVES), size=n_turns)
        return [SCRAMBLE_MOVES[i] for i in idx]

    @staticmethod
    def reverse_turns(turns : typing.Iterable[TurnLike] | TurnLike) -> typing.List[Move]:
        """
        For each turn get reversed one in reversed order

        Parameters
        ----------
        `turns` : str | Iterable
            One turn or list of turns to reverse

        Returns
        -------
        `reversed_turns` : list
            List of reversed turns
        """
        return [turn.inverse for turn in reversed(ECube._prepare_turns(turns))]

    def scramble(self, n_turns : int, rng : np.random.Generator = None, reset_counters : bool = True) -> "ECube":
        """
        Returns scrambled copy of cube by N random turns

        Parameters
        ----------
        `n_turns` : int
            Amount of random turns
        `rng` : np.random.Generator, optional
            Source of random numbers
        `reset_counters` : bool, optional
            If True, scramble turns are not counted as moves of the cube

        Returns
        -------
        `cube` : ECube
            Scrambled cube
        """
        cube = self.copy()
        cube.scramble_(n_turns, rng, reset_counters)
        return cube

    def scramble_(self, n_turns : int, rng : np.random.Generator = None, reset_counters : bool = True):
        """
        Applies scramble to cube by N random turns, see `scramble`
        """
        self.turn_(ECube.get_scramble_turns(n_turns, rng))
        if reset_counters:
            self.reset_counters()

    @staticmethod
    def _prepare_turns(turns : typing.Iterable[TurnLike] | TurnLike) -> typing.List[Move]:
        """
        Translate turns notation to list of moves
        """
        if isinstance(turns, Move):
            return [turns]
        if not isinstance(turns, str):
            turns = ' '.join(str(turn) for turn in turns)
        moves = []
        for token in turns.split():
            position = 0
            while position < len(token):
                match = TURN_PATTERN.match(token, position)
                if match is None:
                    raise ValueError(f'Unknown turn notation {token!r}')
                letter, repetitions, inverted = match.groups()
                move = Move[letter + ('i' if inverted else '')]
                moves.extend([move] * (int(repetitions) if repetitions else 1))
                position = match.end()
        return moves

    def turn(self, turns : typing.Iterable[TurnLike] | TurnLike) -> "ECube":
        """
        Apply turns to copy of cube and return it

        Parameters
        ----------
        `turns` : list | str
            Single turn or list of turns in letter notation to perform on cube in it's current state

        Returns
        -------
        `cube` : ECube
            Cube with applied moves
        """
        cube = self.copy()
        cube.turn_(turns)
        return cube

    def turn_(self, turns : typing.Iterable[TurnLike] | TurnLike) -> "ECube":
        """
        Apply turns to cube itself

        Parameters
        ----------
        `turns` : list | str
            Single turn or list of turns in letter notation to perform on cube in it's current state
        """
        for move in ECube._prepare_turns(turns):
            self.apply_move(move)
        return self


def new_solved_cube() -> ECube:
    return ECube.get_default_cube()


def apply_move(cube : ECube, move : TurnLike) -> ECube:
    return cube.apply_move(move)


def tile_color(cube : ECube, face : Face, row : int, col : int) -> Color:
    return cube.tile_color(face, row, col)


def move_count(cube : ECube) -> int:
    return cube.moves


def phase_move_counts(cube : ECube) -> typing.Dict[str, int]:
    return dict(cube.phase_moves)
