import enum
import typing


class Face(enum.IntEnum):
    """
    Side of the cube. The value is the index of the face in the cube tiles array.
    """
    UP    = 0
    BACK  = 1
    LEFT  = 2
    FRONT = 3
    RIGHT = 4
    DOWN  = 5


class Color(enum.IntEnum):
    """
    Tile color. The value of a color equals the value of its home face,
    so Color(face) is the color of that face on the solved cube.
    """
    BLUE   = 0
    YELLOW = 1
    ORANGE = 2
    WHITE  = 3
    RED    = 4
    GREEN  = 5

    @property
    def letter(self) -> str:
        return 'BYOWRG'[self.value]

    @staticmethod
    def from_letter(letter : str) -> "Color":
        idx = 'BYOWRG'.find(letter)
        if idx < 0 or len(letter) != 1:
            raise ValueError(f'Unknown color letter {letter!r}')
        return Color(idx)


class Move(enum.Enum):
    """
    Elementary quarter turn of one face.
    Clockwise turns are named after the face letter, counter-clockwise turns get `i` suffix.
    The value of a move is its notation string.
    """
    U  = "U"
    Ui = "U'"
    B  = "B"
    Bi = "B'"
    L  = "L"
    Li = "L'"
    F  = "F"
    Fi = "F'"
    R  = "R"
    Ri = "R'"
    D  = "D"
    Di = "D'"

    @property
    def face(self) -> Face:
        return {
            'U': Face.UP,
            'B': Face.BACK,
            'L': Face.LEFT,
            'F': Face.FRONT,
            'R': Face.RIGHT,
            'D': Face.DOWN,
        }[self.name[0]]

    @property
    def is_ccw(self) -> bool:
        return self.name.endswith('i')

    @property
    def inverse(self) -> "Move":
        return Move[self.name[:-1]] if self.is_ccw else Move[self.name + 'i']

    def __str__(self):
        return self.value


# Position of a single tile: face, row and column. Row 0 is the top row of the face
# as drawn on the unfolded net, column 0 is the left column.
Tile = typing.Tuple[Face, int, int]

CubeStr = typing.NewType('CubeStr', str)
CubeStr.__doc__ = \
    """
    String representation of the cube: 54 color letters in unfolded net order
        UP rows,
        three rows of LEFT FRONT RIGHT BACK,
        DOWN rows.
    Whitespace is ignored.
    """

TurnStr = typing.NewType('TurnStr', str)
TurnStr.__doc__ = \
    """
    String representation of cube turn. The face letter of the turn.
    Possible values for clockwise turns:
        U - up,
        D - down,
        R - right,
        L - left,
        F - front,
        B - back.
    For counter-clockwise turns add ' sign or i at the end of the turn:
        U' or Ui - up counter-clockwise turn,
        R' or Ri - right counter-clockwise turn,
    etc.
    A digit after the turn repeats it, e.g. U2 is U U.
    """

TurnLike = typing.Union[TurnStr, Move]

LogFunction = typing.Callable[[str], None]
