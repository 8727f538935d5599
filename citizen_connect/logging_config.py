import logging
import os
import sys

LOGGER_NAME = "citizen_connect"

def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("CITIZEN_CONNECT_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.INFO
    return level

def setup_logging(level: int | str | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger  # already configured
    logger.setLevel(_resolve_level(level))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    return logger
