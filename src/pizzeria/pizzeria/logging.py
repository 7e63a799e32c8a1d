"""Log sinks for the pizzeria CLI.

Modules log through ``loguru.logger`` directly; only the entry point calls
``setup_logging`` to decide where those records go. Payment confirmations,
finalized orders and feedback all flow through here.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path(__file__).resolve().parents[3] / "logs"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str = "INFO", log_to_file: bool = False) -> None:
    """Route pizzeria logs to stderr, and to logs/pizzeria.log if asked.

    Replaces any sinks added earlier, so calling it twice is safe.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        # One file per day of shop activity, kept for a week
        logger.add(
            LOG_DIR / "pizzeria.log",
            level=level,
            format=FILE_FORMAT,
            rotation="00:00",
            retention="7 days",
        )
