"""
Dijkstra solver for sorting amphipods into their rooms.
"""

from .config import SolverConfig
from .dijkstra import DijkstraSolver, SearchResult, SearchStatus, minimum_energy
from .frontier import FrontierQueue

__all__ = [
    "DijkstraSolver",
    "SearchResult",
    "SearchStatus",
    "SolverConfig",
    "FrontierQueue",
    "minimum_energy",
]
