import sys

from loguru import logger

PALETTE = {
    "solver": "green",
    "cli": "blue",
}

LEVEL_PER_COMPONENT = {
    "solver": "INFO",
}


def component_filter(record):
    min_level = LEVEL_PER_COMPONENT.get(record["extra"].get("component", ""), "DEBUG")
    return record["level"].no >= logger.level(min_level).no


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")
    return (
        "{time:HH:mm:ss} | <level>{level:<7}</level> | "
        f"<{colour}>{comp:<6}</> | "
        "{message}\n"
    )


def setup_logging(verbose: bool = False, sink=sys.stderr, colorize=None) -> None:
    """Swap the installed handler; ``verbose`` lets solver progress through."""
    LEVEL_PER_COMPONENT["solver"] = "DEBUG" if verbose else "INFO"
    logger.remove()
    logger.add(sink, format=formatter, filter=component_filter, colorize=colorize)


setup_logging()
