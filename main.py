#!/usr/bin/env python3
"""
Amphipod Sorter

Computes the least energy needed to move every amphipod in a burrow
diagram into its own room.
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from amphipod_sorter.game.burrow import Burrow
from amphipod_sorter.game.topology import TopologyError, unfold
from amphipod_sorter.logger import setup_logging
from amphipod_sorter.solver.config import SolverConfig
from amphipod_sorter.solver.dijkstra import DijkstraSolver, SearchStatus

log = logger.bind(component="cli")


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Amphipod burrow sorter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py burrow.txt            # Folded 2-deep diagram
  python main.py burrow.txt --unfold   # Insert the hidden rows first
        """,
    )

    parser.add_argument("input", type=Path, help="Burrow diagram file")
    parser.add_argument(
        "--unfold", action="store_true", help="Unfold the diagram to 4-deep rooms"
    )
    parser.add_argument(
        "--timeout-ms", type=float, default=None, help="Give up after this long"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log search progress"
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        config = SolverConfig(timeout_ms=args.timeout_ms)
    except ValueError as e:
        log.error("Invalid option: {}", e)
        return 1

    try:
        text = args.input.read_text()
        if args.unfold:
            text = unfold(text)
        burrow = Burrow.from_str(text)
    except OSError as e:
        log.error("Cannot read {}: {}", args.input, e)
        return 1
    except ValueError as e:
        # ParseError, TopologyError and undecodable bytes
        log.error("Unusable burrow in {}: {}", args.input, e)
        return 1

    try:
        result = DijkstraSolver(config).solve(burrow)
    except TopologyError as e:
        log.error("Unusable burrow in {}: {}", args.input, e)
        return 1

    if result.status == SearchStatus.SOLVED:
        print(result.energy)
        return 0
    if result.status == SearchStatus.TIMED_OUT:
        print("Search timed out")
        return 2
    print("No solution")
    return 1


if __name__ == "__main__":
    sys.exit(main())
