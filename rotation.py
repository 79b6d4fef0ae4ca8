"""
Rotation engine: quarter turns of the cube faces.

Each turn rotates the tiles of the turned face around its center and moves
the border strips of the four neighbour faces one step along a fixed cycle.
"""
import typing
import numpy as np

from numpy.typing import ArrayLike
from cubetyping   import Face, Move


# strip of three tiles on one face: face, rows, columns
Strip = typing.Tuple[Face, typing.Tuple[int, int, int], typing.Tuple[int, int, int]]

"""
Border strips around each face, listed in the direction tiles travel on a clockwise turn:
the content of strip k moves to strip k+1, tile by tile.
"""
NEIGHBOUR_STRIPS : typing.Dict[Face, typing.Tuple[Strip, Strip, Strip, Strip]] = {
    Face.UP: (
        (Face.FRONT, (0, 0, 0), (0, 1, 2)),
        (Face.LEFT,  (0, 0, 0), (0, 1, 2)),
        (Face.BACK,  (0, 0, 0), (0, 1, 2)),
        (Face.RIGHT, (0, 0, 0), (0, 1, 2)),
    ),
    Face.DOWN: (
        (Face.FRONT, (2, 2, 2), (0, 1, 2)),
        (Face.RIGHT, (2, 2, 2), (0, 1, 2)),
        (Face.BACK,  (2, 2, 2), (0, 1, 2)),
        (Face.LEFT,  (2, 2, 2), (0, 1, 2)),
    ),
    Face.FRONT: (
        (Face.UP,    (2, 2, 2), (0, 1, 2)),
        (Face.RIGHT, (0, 1, 2), (0, 0, 0)),
        (Face.DOWN,  (0, 0, 0), (2, 1, 0)),
        (Face.LEFT,  (2, 1, 0), (2, 2, 2)),
    ),
    Face.BACK: (
        (Face.UP,    (0, 0, 0), (2, 1, 0)),
        (Face.LEFT,  (0, 1, 2), (0, 0, 0)),
        (Face.DOWN,  (2, 2, 2), (0, 1, 2)),
        (Face.RIGHT, (2, 1, 0), (2, 2, 2)),
    ),
    Face.LEFT: (
        (Face.UP,    (0, 1, 2), (0, 0, 0)),
        (Face.FRONT, (0, 1, 2), (0, 0, 0)),
        (Face.DOWN,  (0, 1, 2), (0, 0, 0)),
        (Face.BACK,  (2, 1, 0), (2, 2, 2)),
    ),
    Face.RIGHT: (
        (Face.UP,    (0, 1, 2), (2, 2, 2)),
        (Face.BACK,  (2, 1, 0), (0, 0, 0)),
        (Face.DOWN,  (0, 1, 2), (2, 2, 2)),
        (Face.FRONT, (0, 1, 2), (2, 2, 2)),
    ),
}

_missing = set(Face) - set(NEIGHBOUR_STRIPS)
if _missing:
    raise RuntimeError(f'No neighbour strips for faces {sorted(f.name for f in _missing)}')


def rotate_tiles(tiles : ArrayLike, move : Move) -> ArrayLike:
    """
    Apply a quarter turn to the tiles array in place

    Parameters
    ----------
    `tiles` : ArrayLike
        Array of shape (6,3,3) with color of each tile, indexed by Face
    `move` : Move
        Turn to apply

    Returns
    -------
    `tiles` : ArrayLike
        The same array after the turn
    """
    face = move.face
    # np.rot90 turns counter-clockwise for positive k
    tiles[face] = np.rot90(tiles[face], k=1 if move.is_ccw else -1).copy()

    strips = NEIGHBOUR_STRIPS[face]
    saved  = [tiles[f][list(rows), list(cols)].copy() for f, rows, cols in strips]
    step   = -1 if move.is_ccw else 1
    for k, (f, rows, cols) in enumerate(strips):
        tiles[f][list(rows), list(cols)] = saved[(k - step) % 4]
    return tiles
