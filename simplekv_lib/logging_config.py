from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from simplekv_lib.config.config import load_settings

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for an embedding process.

    Takes `log_level` from the YAML settings file when one exists and
    reconfigures the root logger with it. An unreadable or invalid file
    falls back to WARNING. Returns a module logger for the caller.
    """
    level = logging.WARNING
    try:
        level = getattr(logging, load_settings(config_path).log_level)
    except (OSError, ValueError) as e:
        logging.getLogger(__name__).warning('Failed to read log level: %s', e)

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.info('[simplekv]: Log level set to: %s', logging.getLevelName(level))

    return logger
