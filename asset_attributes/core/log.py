import sys
from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"

def setup_logging(level: str = "INFO") -> None:
    """
    Replace loguru's default sink with a single stderr sink.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=True,
    )
