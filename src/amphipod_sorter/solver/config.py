"""
Configuration for the Dijkstra solver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Configuration for a single search run."""

    # Caller-imposed cutoff; None runs until the target is found or the frontier empties
    timeout_ms: Optional[float] = None

    log_every: int = 10_000  # Expansions between progress logs

    def __post_init__(self):
        """Validate configuration."""
        if self.timeout_ms is not None and self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        if self.log_every <= 0:
            raise ValueError("log_every must be positive")
