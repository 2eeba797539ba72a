import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import SMOKEGEN_HOME_EXT

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(smokegen_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified smokegen logging.

    Args:
        smokegen_home: Path to the smokegen home directory. If None, derived from environment.
        level: Level name as used in the config file (DEBUG, INFO, WARN, ERROR)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if smokegen_home is None:
        env_home = os.environ.get("SMOKEGEN_HOME")
        smokegen_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / SMOKEGEN_HOME_EXT

    # Ensure directory exists
    smokegen_home.mkdir(parents=True, exist_ok=True)
    log_file = smokegen_home / "smokegen.log"

    root_logger = logging.getLogger("smokegen")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
