"""Console logging setup for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "trifused"


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route ``trifused`` log records to a Rich handler on stderr.

    Library code only creates loggers; handlers are installed here, once, by
    the CLI.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
