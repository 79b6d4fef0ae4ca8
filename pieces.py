"""
Static tables of edge and corner slots and the piece locator.

A slot is a fixed place on the cube given by the tiles its stickers land on.
A piece is found by its colors: the slot whose tiles hold exactly these colors.
"""
import enum
import typing

from ecube      import ECube
from cubetyping import Color, Face, Tile
from exceptions import InvariantViolation


class EdgeSlot(enum.IntEnum):
    CROSS_FRONT        = 0
    CROSS_LEFT         = 1
    CROSS_BACK         = 2
    CROSS_RIGHT        = 3
    MIDDLE_FRONT_LEFT  = 4
    MIDDLE_BACK_LEFT   = 5
    MIDDLE_BACK_RIGHT  = 6
    MIDDLE_FRONT_RIGHT = 7
    TOP_FRONT          = 8
    TOP_LEFT           = 9
    TOP_BACK           = 10
    TOP_RIGHT          = 11


class CornerSlot(enum.IntEnum):
    BOTTOM_FRONT_LEFT  = 0
    BOTTOM_BACK_LEFT   = 1
    BOTTOM_BACK_RIGHT  = 2
    BOTTOM_FRONT_RIGHT = 3
    TOP_FRONT_LEFT     = 4
    TOP_BACK_LEFT      = 5
    TOP_BACK_RIGHT     = 6
    TOP_FRONT_RIGHT    = 7


CROSS_RING  = (EdgeSlot.CROSS_FRONT, EdgeSlot.CROSS_LEFT, EdgeSlot.CROSS_BACK, EdgeSlot.CROSS_RIGHT)
MIDDLE_RING = (EdgeSlot.MIDDLE_FRONT_LEFT, EdgeSlot.MIDDLE_BACK_LEFT, EdgeSlot.MIDDLE_BACK_RIGHT, EdgeSlot.MIDDLE_FRONT_RIGHT)
TOP_RING    = (EdgeSlot.TOP_FRONT, EdgeSlot.TOP_LEFT, EdgeSlot.TOP_BACK, EdgeSlot.TOP_RIGHT)

BOTTOM_CORNERS = (CornerSlot.BOTTOM_FRONT_LEFT, CornerSlot.BOTTOM_BACK_LEFT, CornerSlot.BOTTOM_BACK_RIGHT, CornerSlot.BOTTOM_FRONT_RIGHT)
TOP_CORNERS    = (CornerSlot.TOP_FRONT_LEFT, CornerSlot.TOP_BACK_LEFT, CornerSlot.TOP_BACK_RIGHT, CornerSlot.TOP_FRONT_RIGHT)

"""
Tiles of every edge slot: side face tile first, then the tile on the neighbouring face
"""
EDGE_TILES : typing.Dict[EdgeSlot, typing.Tuple[Tile, Tile]] = {
    EdgeSlot.CROSS_FRONT:        ((Face.FRONT, 2, 1), (Face.DOWN,  0, 1)),
    EdgeSlot.CROSS_LEFT:         ((Face.LEFT,  2, 1), (Face.DOWN,  1, 0)),
    EdgeSlot.CROSS_BACK:         ((Face.BACK,  2, 1), (Face.DOWN,  2, 1)),
    EdgeSlot.CROSS_RIGHT:        ((Face.RIGHT, 2, 1), (Face.DOWN,  1, 2)),
    EdgeSlot.MIDDLE_FRONT_LEFT:  ((Face.FRONT, 1, 0), (Face.LEFT,  1, 2)),
    EdgeSlot.MIDDLE_BACK_LEFT:   ((Face.BACK,  1, 2), (Face.LEFT,  1, 0)),
    EdgeSlot.MIDDLE_BACK_RIGHT:  ((Face.BACK,  1, 0), (Face.RIGHT, 1, 2)),
    EdgeSlot.MIDDLE_FRONT_RIGHT: ((Face.FRONT, 1, 2), (Face.RIGHT, 1, 0)),
    EdgeSlot.TOP_FRONT:          ((Face.FRONT, 0, 1), (Face.UP,    2, 1)),
    EdgeSlot.TOP_LEFT:           ((Face.LEFT,  0, 1), (Face.UP,    1, 0)),
    EdgeSlot.TOP_BACK:           ((Face.BACK,  0, 1), (Face.UP,    0, 1)),
    EdgeSlot.TOP_RIGHT:          ((Face.RIGHT, 0, 1), (Face.UP,    1, 2)),
}

"""
Tiles of every corner slot: front or back face tile, left or right face tile, down or up face tile
"""
CORNER_TILES : typing.Dict[CornerSlot, typing.Tuple[Tile, Tile, Tile]] = {
    CornerSlot.BOTTOM_FRONT_LEFT:  ((Face.FRONT, 2, 0), (Face.LEFT,  2, 2), (Face.DOWN, 0, 0)),
    CornerSlot.BOTTOM_BACK_LEFT:   ((Face.BACK,  2, 2), (Face.LEFT,  2, 0), (Face.DOWN, 2, 0)),
    CornerSlot.BOTTOM_BACK_RIGHT:  ((Face.BACK,  2, 0), (Face.RIGHT, 2, 2), (Face.DOWN, 2, 2)),
    CornerSlot.BOTTOM_FRONT_RIGHT: ((Face.FRONT, 2, 2), (Face.RIGHT, 2, 0), (Face.DOWN, 0, 2)),
    CornerSlot.TOP_FRONT_LEFT:     ((Face.FRONT, 0, 0), (Face.LEFT,  0, 2), (Face.UP,   2, 0)),
    CornerSlot.TOP_BACK_LEFT:      ((Face.BACK,  0, 2), (Face.LEFT,  0, 0), (Face.UP,   0, 0)),
    CornerSlot.TOP_BACK_RIGHT:     ((Face.BACK,  0, 0), (Face.RIGHT, 0, 2), (Face.UP,   0, 2)),
    CornerSlot.TOP_FRONT_RIGHT:    ((Face.FRONT, 0, 2), (Face.RIGHT, 0, 0), (Face.UP,   2, 2)),
}

if set(EDGE_TILES) != set(EdgeSlot) or set(CORNER_TILES) != set(CornerSlot):
    raise RuntimeError('Slot tables do not cover every slot')


def slot_colors(cube : ECube, tiles : typing.Iterable[Tile]) -> typing.Tuple[Color, ...]:
    """
    Colors currently on the tiles of a slot, in the order of the slot table
    """
    return tuple(cube.tile_color(*tile) for tile in tiles)


def _locate(cube : ECube, table : dict, colors : typing.Tuple[Color, ...], kind : str):
    target = sorted(colors)
    found  = [slot for slot, tiles in table.items() if sorted(slot_colors(cube, tiles)) == target]
    if len(found) != 1:
        names = '/'.join(c.name for c in colors)
        raise InvariantViolation('locator', f'{kind} {names} found in {len(found)} slots')
    return found[0]


def locate_edge(cube : ECube, color_a : Color, color_b : Color) -> EdgeSlot:
    """
    Find the slot of the edge piece with two given colors

    Parameters
    ----------
    `cube` : ECube
        Cube to search
    `color_a`, `color_b` : Color
        Colors of the piece in any order

    Returns
    -------
    `slot` : EdgeSlot
        The only slot holding these colors
    """
    return _locate(cube, EDGE_TILES, (color_a, color_b), 'edge')


def locate_corner(cube : ECube, color_a : Color, color_b : Color, color_c : Color) -> CornerSlot:
    """
    Find the slot of the corner piece with three given colors.
    Orientation of the piece is not taken into account.

    Parameters
    ----------
    `cube` : ECube
        Cube to search
    `color_a`, `color_b`, `color_c` : Color
        Colors of the piece in any order

    Returns
    -------
    `slot` : CornerSlot
        The only slot holding these colors
    """
    return _locate(cube, CORNER_TILES, (color_a, color_b, color_c), 'corner')


def slot_matches(cube : ECube, tiles : typing.Iterable[Tile], colors : typing.Iterable[Color]) -> bool:
    """
    Check that tiles of a slot hold exactly given colors in the given order
    """
    return slot_colors(cube, tiles) == tuple(colors)
