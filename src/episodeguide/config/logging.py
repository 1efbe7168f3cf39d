"""Logging setup for the episodeguide CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Libraries that log every request at INFO/DEBUG
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "WARNING",
) -> None:
    """Configure root logging for a CLI invocation.

    Console output goes to stderr through rich so it never mixes with
    command output on stdout.

    Args:
        verbose: Force DEBUG level on the console
        log_file: Optional path that receives a plain-text copy of all records
        level: Console level when not verbose
    """
    console_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(console_level)
    root.addHandler(rich_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    root.setLevel(logging.DEBUG if (verbose or log_file) else console_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
