"""
Legal amphipod moves and their energy cost.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from .burrow import Amphipod, Burrow, CellType
from .movement import PathFinder
from .topology import Topology


@dataclass(frozen=True)
class Move:
    """A single amphipod walking from ``source`` to ``destination``."""

    amphipod: Amphipod
    source: Tuple[int, int]
    destination: Tuple[int, int]
    steps: int

    @property
    def energy(self) -> int:
        return self.steps * self.amphipod.energy


class MoveRules:
    """Decides which reachable cells an amphipod may actually move to."""

    def __init__(self, topology: Topology):
        self.topology = topology

    def is_settled(self, burrow: Burrow, x: int, y: int, amphipod: Amphipod) -> bool:
        """True when the amphipod sits in its own room above only its own kind."""
        for cx, cy in self.topology.room_cells(amphipod):
            if (cx, cy) == (x, y):
                return True
            if burrow.get_cell(cx, cy) != amphipod:
                return False
        return False

    def entry_cell(self, burrow: Burrow, amphipod: Amphipod) -> Optional[Tuple[int, int]]:
        """Deepest empty cell of the amphipod's room, if the room may be entered.

        A room holding any other kind (or a blocked cell) can't be entered.
        """
        for x, y in self.topology.room_cells(amphipod):
            cell = burrow.get_cell(x, y)
            if cell == amphipod:
                continue
            if cell == CellType.EMPTY:
                return (x, y)
            return None
        return None

    def is_legal(
        self,
        burrow: Burrow,
        amphipod: Amphipod,
        source: Tuple[int, int],
        destination: Tuple[int, int],
    ) -> bool:
        if source == destination:
            return False
        if self.is_settled(burrow, source[0], source[1], amphipod):
            return False

        return self.allows(source, destination, self.entry_cell(burrow, amphipod))

    def allows(
        self,
        source: Tuple[int, int],
        destination: Tuple[int, int],
        entry: Optional[Tuple[int, int]],
    ) -> bool:
        """Destination check for an unsettled mover whose room entry is ``entry``."""
        if destination == entry:
            return True
        # Only a room dweller may stop in the hallway
        return self.topology.is_room(*source) and self.topology.is_hallway_stop(
            *destination
        )

    def legal_moves(self, burrow: Burrow) -> Iterator[Move]:
        entry_cells: Dict[Amphipod, Optional[Tuple[int, int]]] = {}

        for x, y, amphipod in burrow.find_amphipods():
            if self.is_settled(burrow, x, y, amphipod):
                continue

            if amphipod not in entry_cells:
                entry_cells[amphipod] = self.entry_cell(burrow, amphipod)
            entry = entry_cells[amphipod]

            for nx, ny, steps in PathFinder.reachable_cells(burrow, x, y):
                if self.allows((x, y), (nx, ny), entry):
                    yield Move(amphipod, (x, y), (nx, ny), steps)

    @staticmethod
    def apply(burrow: Burrow, move: Move) -> Burrow:
        """Return a copy of ``burrow`` with ``move`` carried out."""
        new_burrow = burrow.copy()
        assert new_burrow.is_empty(*move.destination), f"{move} lands on an occupied cell"
        cell = new_burrow.take_cell(*move.source)
        assert cell == move.amphipod, f"{move} starts from {cell!r}"
        new_burrow.set_cell(*move.destination, cell)
        return new_burrow
