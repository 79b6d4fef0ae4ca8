from cubetyping import Color, Face, Move

"""
Possible cube turns notations
"""
CUBE_TURNS = ('U', 'B', 'L', 'F', 'R', 'D') # face letters of clock-wise turns
SCRAMBLE_MOVES = tuple(Move) # moves a scramble is drawn from

"""
Default colors of cube
"""
C_UP    = Color.BLUE
C_BACK  = Color.YELLOW
C_LEFT  = Color.ORANGE
C_FRONT = Color.WHITE
C_RIGHT = Color.RED
C_DOWN  = Color.GREEN

"""
Order of side faces in the rows of the cube string, between UP and DOWN rows
"""
NET_SIDE_FACES  = (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)

"""
Predefined default cube string with default colors
"""
DEFAULT_CUBE_STR = C_UP.letter*9 + (C_LEFT.letter*3 + C_FRONT.letter*3 + C_RIGHT.letter*3 + C_BACK.letter*3)*3 + C_DOWN.letter*9

"""
Names of solving phases in the order they are applied
"""
PHASE_FIRST_CROSS   = 'first_cross'
PHASE_FIRST_CORNERS = 'first_corners'
PHASE_MIDDLE_EDGES  = 'middle_edges'
PHASE_LAST_CROSS    = 'last_cross'
PHASE_LAST_CORNERS  = 'last_corners'
PHASES = (PHASE_FIRST_CROSS, PHASE_FIRST_CORNERS, PHASE_MIDDLE_EDGES, PHASE_LAST_CROSS, PHASE_LAST_CORNERS)

"""
Default solving parameters. Values of the yaml parameters file override them.
"""
DEFAULT_SCRAMBLE_TURNS = 40
DEFAULT_RETRY_CAP      = 6  # sexy move has period 6, so 6 inserts cover every corner twist
DEFAULT_LOOP_CEILING   = 8

DEFAULT_PARAMS = {
    'num_cubes'        : 1,
    'scramble_turns'   : DEFAULT_SCRAMBLE_TURNS,
    'seed'             : None,
    'retry_cap'        : DEFAULT_RETRY_CAP,
    'loop_ceiling'     : DEFAULT_LOOP_CEILING,
    'log_path'         : '',
    'log_filename'     : '',
    'verbose'          : False,
    'show_cubes'       : False,
    'compare_baseline' : False,
}
