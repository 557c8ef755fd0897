import pytest

from amphipod_sorter.game.burrow import Burrow

EXAMPLE = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""

SOLVED = """\
#############
#...........#
###A#B#C#D###
  #A#B#C#D#
  #########
"""

# One Amber left in the hallway, eight steps from home
ONE_MOVE = """\
#############
#.........A.#
###.#B#C#D###
  #A#B#C#D#
  #########
"""

# Single-row rooms with Amber and Bronze swapped
SHALLOW_SWAP = """\
#############
#...........#
###B#A#C#D###
  #########
"""

# The Amber room is walled off and already holds a Bronze
SEALED = """\
#############
#...........#
#####B#C#D###
  #B#A#C#D#
  #########
"""


@pytest.fixture
def example_text():
    return EXAMPLE


@pytest.fixture
def example_burrow():
    return Burrow.from_str(EXAMPLE)


@pytest.fixture
def solved_burrow():
    return Burrow.from_str(SOLVED)


@pytest.fixture
def one_move_burrow():
    return Burrow.from_str(ONE_MOVE)


@pytest.fixture
def shallow_swap_burrow():
    return Burrow.from_str(SHALLOW_SWAP)


@pytest.fixture
def sealed_burrow():
    return Burrow.from_str(SEALED)
