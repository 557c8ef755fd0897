from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple, Union

import numpy as np


class CellType(IntEnum):
    EMPTY = 0
    WALL = 1
    SPACE = 2


class Amphipod(IntEnum):
    AMBER = 3
    BRONZE = 4
    COPPER = 5
    DESERT = 6

    @property
    def energy(self) -> int:
        """Energy spent per step: 1, 10, 100, 1000."""
        return 10 ** (self - Amphipod.AMBER)

    @property
    def symbol(self) -> str:
        return "ABCD"[self - Amphipod.AMBER]


Cell = Union[CellType, Amphipod]

AMPHIPOD_BASE = int(Amphipod.AMBER)

CELL_SYMBOLS = {
    CellType.EMPTY: ".",
    CellType.WALL: "#",
    CellType.SPACE: " ",
    Amphipod.AMBER: "A",
    Amphipod.BRONZE: "B",
    Amphipod.COPPER: "C",
    Amphipod.DESERT: "D",
}
SYMBOL_CELLS = {symbol: cell for cell, symbol in CELL_SYMBOLS.items()}


class ParseError(ValueError):
    """Raised when burrow text contains a character with no cell mapping."""

    def __init__(self, char: str, x: int, y: int):
        super().__init__(f"Invalid cell {char!r} at ({x}, {y})")
        self.char = char
        self.x = x
        self.y = y


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


NEIGHBOR_DELTAS = tuple((direction.dx, direction.dy) for direction in Direction)
EMPTY = int(CellType.EMPTY)


def decode_cell(value: int) -> Cell:
    if value >= AMPHIPOD_BASE:
        return Amphipod(value)
    return CellType(value)


class Burrow:
    """One arrangement of amphipods in the burrow grid.

    Cells are stored row-major in a numpy ``int8`` array, so two burrows
    compare and hash by their raw bytes.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid = np.full((height, width), CellType.SPACE, dtype=np.int8)
        self._key: Optional[bytes] = None

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        if not self.is_valid_position(x, y):
            return None
        return decode_cell(self.grid.item(y, x))

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        if not self.is_valid_position(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} burrow")
        self.grid[y, x] = cell
        self._key = None

    def take_cell(self, x: int, y: int) -> Cell:
        cell = self.get_cell(x, y)
        if cell is None:
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} burrow")
        self.set_cell(x, y, CellType.EMPTY)
        return cell

    def is_empty(self, x: int, y: int) -> bool:
        return self.is_valid_position(x, y) and self.grid.item(y, x) == EMPTY

    def get_empty_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        neighbors = []
        for dx, dy in NEIGHBOR_DELTAS:
            nx, ny = x + dx, y + dy
            if self.is_empty(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def find_amphipods(self) -> Iterator[Tuple[int, int, Amphipod]]:
        """Yield ``(x, y, amphipod)`` for every occupied cell in row-major order."""
        for y, x in np.argwhere(self.grid >= AMPHIPOD_BASE):
            yield int(x), int(y), Amphipod(self.grid.item(y, x))

    def count_amphipods(self) -> Dict[Amphipod, int]:
        counts = {amphipod: 0 for amphipod in Amphipod}
        for _, _, amphipod in self.find_amphipods():
            counts[amphipod] += 1
        return counts

    def copy(self) -> "Burrow":
        new_burrow = Burrow(self.width, self.height)
        new_burrow.grid = self.grid.copy()
        new_burrow._key = self._key
        return new_burrow

    def key(self) -> bytes:
        if self._key is None:
            self._key = self.grid.tobytes()
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Burrow):
            return NotImplemented
        return self.grid.shape == other.grid.shape and self.key() == other.key()

    def __hash__(self) -> int:
        return hash((self.grid.shape, self.key()))

    @classmethod
    def from_str(cls, text: str) -> "Burrow":
        """Parse burrow text; short rows are padded with non-playable space."""
        lines = [line.rstrip(" ") for line in text.splitlines()]
        while lines and not lines[-1]:
            lines.pop()

        width = max((len(line) for line in lines), default=0)
        burrow = cls(width, len(lines))
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                cell = SYMBOL_CELLS.get(char)
                if cell is None:
                    raise ParseError(char, x, y)
                burrow.grid[y, x] = cell
        return burrow

    def __str__(self) -> str:
        result = []
        for y in range(self.height):
            row = [CELL_SYMBOLS[decode_cell(int(value))] for value in self.grid[y]]
            result.append("".join(row).rstrip())
        return "\n".join(result)

    def __repr__(self) -> str:
        return f"Burrow({self.width}x{self.height})"
