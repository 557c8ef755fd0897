from collections import deque
from typing import List, Optional, Tuple

from .burrow import EMPTY, NEIGHBOR_DELTAS, Burrow


class PathFinder:
    @staticmethod
    def reachable_cells(burrow: Burrow, x: int, y: int) -> List[Tuple[int, int, int]]:
        """Every empty cell reachable from ``(x, y)`` with its minimum step count.

        The starting cell itself is never included.
        """
        rows = burrow.grid.tolist()
        width, height = burrow.width, burrow.height

        queue = deque([(x, y, 0)])
        visited = {(x, y)}
        reachable = []

        while queue:
            cx, cy, steps = queue.popleft()

            for dx, dy in NEIGHBOR_DELTAS:
                nx, ny = cx + dx, cy + dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                if rows[ny][nx] != EMPTY or (nx, ny) in visited:
                    continue
                visited.add((nx, ny))
                queue.append((nx, ny, steps + 1))
                reachable.append((nx, ny, steps + 1))

        return reachable

    @staticmethod
    def distance(
        burrow: Burrow, start: Tuple[int, int], goal: Tuple[int, int]
    ) -> Optional[int]:
        """Steps from ``start`` to the empty cell ``goal``, or None if blocked."""
        for nx, ny, steps in PathFinder.reachable_cells(burrow, *start):
            if (nx, ny) == goal:
                return steps
        return None
