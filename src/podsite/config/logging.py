"""Logging setup for the podsite CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are noisy at INFO/DEBUG
QUIET_LOGGERS = ("urllib3", "requests")


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "INFO",
) -> logging.Logger:
    """Configure the ``podsite`` logger.

    Console output goes to stderr through rich so that stdout stays clean
    for command output (tables, JSON, builder output).

    Args:
        verbose: Log at DEBUG level
        log_file: Optional file to also write logs to
        level: Level used when not verbose

    Returns:
        The package logger
    """
    logger = logging.getLogger("podsite")
    logger.setLevel(logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO))

    # Re-running setup (tests, repeated CLI invocations) replaces handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    if not verbose:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    else:
        logger.debug("Verbose logging enabled")

    return logger
