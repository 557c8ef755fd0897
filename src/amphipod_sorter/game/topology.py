"""
Static room and hallway layout of the burrow.

Rooms hang below the hallway at fixed columns; only their depth varies
between the folded (2-deep) and unfolded (4-deep) diagrams.
"""

from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from .burrow import Amphipod, Burrow

BURROW_WIDTH = 13
HALLWAY_Y = 1
FIRST_ROOM_Y = 2

ROOM_X: Dict[Amphipod, int] = {
    Amphipod.AMBER: 3,
    Amphipod.BRONZE: 5,
    Amphipod.COPPER: 7,
    Amphipod.DESERT: 9,
}
ROOM_OWNERS: Dict[int, Amphipod] = {x: amphipod for amphipod, x in ROOM_X.items()}

# Cells right above a room mouth are passable but never a resting place
HALLWAY_STOP_X = (1, 2, 4, 6, 8, 10, 11)

FOLDED_LINES = ("  #D#C#B#A#", "  #D#B#A#C#")


class TopologyError(ValueError):
    """Raised when a burrow grid cannot hold the room layout."""


class Topology:
    """Room and hallway classification for rooms of a given depth."""

    def __init__(self, depth: int = 2):
        if depth < 1:
            raise ValueError(f"Room depth must be positive, got {depth}")
        self.depth = depth
        self._room_cells: Dict[Amphipod, List[Tuple[int, int]]] = {
            amphipod: [
                (x, y) for y in reversed(range(FIRST_ROOM_Y, FIRST_ROOM_Y + depth))
            ]
            for amphipod, x in ROOM_X.items()
        }
        self._target: Optional[Burrow] = None

    @classmethod
    def from_burrow(cls, burrow: Burrow) -> "Topology":
        """Shared topology for the burrow's room depth, derived from its height."""
        depth = burrow.height - 3
        if depth < 1 or burrow.width != BURROW_WIDTH:
            raise TopologyError(
                f"A {burrow.width}x{burrow.height} grid does not match the burrow layout"
            )
        return topology_for_depth(depth)

    def is_room(self, x: int, y: int) -> bool:
        return x in ROOM_OWNERS and FIRST_ROOM_Y <= y < FIRST_ROOM_Y + self.depth

    def is_hallway_stop(self, x: int, y: int) -> bool:
        return y == HALLWAY_Y and x in HALLWAY_STOP_X

    def room_owner(self, x: int, y: int) -> Optional[Amphipod]:
        if not self.is_room(x, y):
            return None
        return ROOM_OWNERS[x]

    def room_cells(self, amphipod: Amphipod) -> List[Tuple[int, int]]:
        """Cells of ``amphipod``'s room, innermost first."""
        return self._room_cells[amphipod]

    def target(self) -> Burrow:
        """The sorted arrangement; built once and shared, so never mutate it."""
        if self._target is None:
            self._target = Burrow.from_str(self.target_text())
        return self._target

    def target_text(self) -> str:
        room_row = "#A#B#C#D#"
        lines = ["#" * BURROW_WIDTH, "#" + "." * (BURROW_WIDTH - 2) + "#"]
        lines.append("##" + room_row + "##")
        lines.extend("  " + room_row for _ in range(self.depth - 1))
        lines.append("  " + "#" * (len(room_row)))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Topology):
            return NotImplemented
        return self.depth == other.depth

    def __hash__(self) -> int:
        return hash(self.depth)

    def __repr__(self) -> str:
        return f"Topology(depth={self.depth})"


@lru_cache(maxsize=None)
def topology_for_depth(depth: int) -> Topology:
    return Topology(depth)


def unfold(text: str) -> str:
    """Insert the two folded rows below the first room row of a 2-deep diagram."""
    lines = text.splitlines()
    if len(lines) < 3:
        raise TopologyError("Burrow text has no room row to unfold")
    return "\n".join(lines[:3] + list(FOLDED_LINES) + lines[3:])
