from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Optional

from crudstore.config import DEFAULT_CONFIG_PATH

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for an application embedding crudstore.

    The level is read from `log_level` in the store config file and falls
    back to WARNING when the file is missing, unreadable or names an unknown
    level. Existing root handlers are replaced. Returns a module logger for
    the caller.
    """
    level = logging.WARNING

    cfg_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if cfg_path.exists():
        try:
            with cfg_path.open('r', encoding='utf-8') as _f:
                _cfg = yaml.safe_load(_f) or {}
            _lvl = _cfg.get('log_level')
            if isinstance(_lvl, str):
                _numeric = getattr(logging, _lvl.upper(), None)
                if isinstance(_numeric, int):
                    level = _numeric
        except (OSError, yaml.YAMLError, AttributeError):
            # If config parse fails, fall back to default level
            level = logging.WARNING

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.info("crudstore log level set to %s", logging.getLevelName(level))
    return logger
