"""
Dijkstra solver for the minimum energy needed to sort a burrow.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set

from ..game.burrow import Burrow
from ..game.moves import MoveRules
from ..game.topology import Topology
from ..logger import logger
from .config import SolverConfig
from .frontier import FrontierQueue

log = logger.bind(component="solver")


class SearchStatus(Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    TIMED_OUT = "timed_out"


@dataclass
class SearchResult:
    """Result of a Dijkstra search."""

    energy: Optional[int]
    status: SearchStatus
    nodes_expanded: int
    nodes_generated: int
    stale_skipped: int
    time_taken_ms: float

    @property
    def success(self) -> bool:
        return self.status == SearchStatus.SOLVED


class DijkstraSolver:
    """Lazy-deletion Dijkstra over burrow arrangements."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    def solve(self, burrow: Burrow) -> SearchResult:
        """Find the minimum energy that sorts ``burrow``.

        Args:
            burrow: Initial arrangement

        Returns:
            SearchResult whose energy is None when the target is unreachable
            or the configured timeout ran out first
        """
        start_time = time.perf_counter()
        topology = Topology.from_burrow(burrow)
        rules = MoveRules(topology)
        target = topology.target()

        frontier: FrontierQueue[Burrow] = FrontierQueue()
        frontier.push(burrow, 0)
        visited: Set[Burrow] = set()
        nodes_expanded = 0
        nodes_generated = 1
        stale_skipped = 0

        log.info("Solving {}-deep burrow:\n{}", topology.depth, burrow)

        def finish(energy: Optional[int], status: SearchStatus) -> SearchResult:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            log.info(
                "{} after {} expansions in {:.1f}ms (energy={})",
                status.value,
                nodes_expanded,
                elapsed_ms,
                energy,
            )
            return SearchResult(
                energy=energy,
                status=status,
                nodes_expanded=nodes_expanded,
                nodes_generated=nodes_generated,
                stale_skipped=stale_skipped,
                time_taken_ms=elapsed_ms,
            )

        while frontier:
            if self.config.timeout_ms is not None:
                elapsed_ms = (time.perf_counter() - start_time) * 1000
                if elapsed_ms > self.config.timeout_ms:
                    return finish(None, SearchStatus.TIMED_OUT)

            current, energy = frontier.pop()
            if current == target:
                return finish(energy, SearchStatus.SOLVED)
            if current in visited:
                stale_skipped += 1
                continue

            visited.add(current)
            nodes_expanded += 1
            if nodes_expanded % self.config.log_every == 0:
                log.debug(
                    "{} expanded, {} queued, energy {}",
                    nodes_expanded,
                    len(frontier),
                    energy,
                )

            for move in rules.legal_moves(current):
                child = rules.apply(current, move)
                if child in visited:
                    continue
                frontier.push(child, energy + move.energy)
                nodes_generated += 1

        return finish(None, SearchStatus.UNSOLVABLE)


def minimum_energy(burrow: Burrow, config: Optional[SolverConfig] = None) -> Optional[int]:
    """Minimum energy to sort ``burrow``, or None when it can't be sorted."""
    return DijkstraSolver(config).solve(burrow).energy
