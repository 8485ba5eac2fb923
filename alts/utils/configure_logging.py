"""Configure the unified alts logfile."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_BACKUP_COUNT, LOG_FORMAT, LOG_MAX_BYTES

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path, filename: str = "alts.log", level: str = "INFO") -> Path:
    """Attach a rotating file handler to the ``alts`` logger.

    Modules log through ``logging.getLogger(__name__)`` and propagate here.
    Subsequent calls only adjust the level.

    Args:
        home: alts home directory; created if missing
        filename: Logfile name under ``home``
        level: Logging level name

    Returns:
        Path to the logfile
    """
    global _CONFIGURED

    log_file = home / filename
    root_logger = logging.getLogger("alts")
    root_logger.setLevel(getattr(logging, level))

    if _CONFIGURED:
        return log_file

    home.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
    return log_file
