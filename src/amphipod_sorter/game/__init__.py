"""
Burrow grid, room layout and the movement rules of amphipods.
"""

from .burrow import Amphipod, Burrow, CellType, ParseError
from .moves import Move, MoveRules
from .movement import PathFinder
from .topology import Topology, TopologyError, unfold

__all__ = [
    "Amphipod",
    "Burrow",
    "CellType",
    "ParseError",
    "Move",
    "MoveRules",
    "PathFinder",
    "Topology",
    "TopologyError",
    "unfold",
]
