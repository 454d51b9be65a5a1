"""Store configuration loaded from YAML.

The configuration file is optional; a missing file or an empty document
yields the defaults below. Example `data/config/store_config.yml`::

    base_directory: ./data
    file_extension: json
    auto_close: true
    log_level: INFO
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('data/config/store_config.yml')


class StoreConfig(BaseModel):
    backend: Literal['file', 'memory'] = 'file'
    base_directory: str = './data'
    file_extension: str = 'json'
    auto_close: bool = True
    log_level: str = 'WARNING'


def load_config(config_path: Optional[Path] = None) -> StoreConfig:
    """Load a `StoreConfig` from `config_path` (or the default location).

    Invalid YAML raises `yaml.YAMLError`; invalid values raise
    `pydantic.ValidationError`.
    """
    cfg_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug("No store config at %s; using defaults", cfg_path)
        return StoreConfig()
    with cfg_path.open('r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}
    logger.debug("Loaded store config from %s", cfg_path)
    return StoreConfig(**raw)
