from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from common_lib.config import load_config

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging from the `log_level` in the YAML config.

    Falls back to WARNING when the config can't be read or names an
    unknown level. Returns a module logger for the caller.
    """
    level = logging.WARNING
    try:
        _lvl = load_config(config_path).log_level
        if isinstance(_lvl, str):
            _numeric = getattr(logging, _lvl.upper(), None)
            if isinstance(_numeric, int):
                level = _numeric
    except ValueError:
        logging.getLogger(__name__).exception('Failed to load configuration for logging setup')

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.debug("Log level set to: %s", logging.getLevelName(level))
    return logger
