import logging
import sys

from .constants import LOGGER_NAME


class IgnoreHttpxRequestLines(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # httpx logs every request at INFO; the pipeline already logs them
        return record.msg != 'HTTP Request: %s %s "%s %d %s"'


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Attaches a single stream handler to the ``petsave`` logger. Calling it
    again only adjusts the level.

    Args:
        debug: Log at DEBUG level when True, WARNING otherwise.

    Returns:
        The configured ``petsave`` logger.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_petsave", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        handler._petsave = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logging.getLogger("httpx").addFilter(IgnoreHttpxRequestLines())

    return logger
