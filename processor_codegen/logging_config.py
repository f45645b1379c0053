"""Logging setup for processor_codegen.

Library modules only call ``get_logger(__name__)``; handlers are installed
by the CLI through ``setup_logging``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "processor_codegen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package hierarchy."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: int | str = logging.WARNING, use_rich: bool = True
) -> logging.Logger:
    """Configure the package root logger.

    Args:
        level: Logging level name or number.
        use_rich: Use a RichHandler on stderr instead of a plain StreamHandler.

    Returns:
        The configured package root logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root.addHandler(handler)
    root.propagate = False
    return root
