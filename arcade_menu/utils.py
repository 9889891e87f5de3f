import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "arcade_menu"
CONSOLE_HANDLER_NAME = "arcade_menu.console"


def setup_logging(
    log_path: Path,
    level: str = "INFO",
    console: Optional[Console] = None
) -> logging.Logger:
    """
    Configures and returns the package logger.

    Everything goes to `log_path`. With a console, warnings and errors
    are also shown there, except while the menu owns the screen (see
    `console_logging_paused`).
    """
    logger = logging.getLogger(LOGGER_NAME)

    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplication
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Failed to setup log file handler: {e}")

    if console is not None:
        console_handler = RichHandler(console=console, show_path=False, level=logging.WARNING)
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        logger.addHandler(console_handler)

    return logger


@contextmanager
def console_logging_paused() -> Iterator[None]:
    """Silence the console handler while a Live display owns the screen."""
    handlers = [
        h for h in logging.getLogger(LOGGER_NAME).handlers
        if h.get_name() == CONSOLE_HANDLER_NAME
    ]
    levels = [h.level for h in handlers]
    for handler in handlers:
        handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for handler, level in zip(handlers, levels):
            handler.setLevel(level)
