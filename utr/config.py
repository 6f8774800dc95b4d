"""Client configuration management."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .schemas import AppConfig
from .utils import load_json

CONFIG_ENV_VAR = 'UTR_CONFIG'
logger = logging.getLogger('utr.config')


def get_config_path(config_path: Optional[str] = None) -> Path:
    """
    Resolve which config file to read.

    An explicit path wins, then $UTR_CONFIG, then ~/.config/utr/config.json.
    """
    if config_path:
        return Path(config_path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / '.config' / 'utr' / 'config.json'


@lru_cache(maxsize=4)
def get_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load client configuration.

    Configuration is cached after first load. A missing file is not an
    error: every setting has a default.

    Returns:
        AppConfig object with validated settings

    Raises:
        json.JSONDecodeError: If the config file is not valid JSON
        ValueError: If config file has invalid structure

    Example:
        from utr.config import get_config
        config = get_config()
        print(f"API: {config.base_url}")
    """
    path = get_config_path(config_path)
    if not path.exists():
        logger.debug(f'No config file at {path}, using defaults')
        return AppConfig()
    return load_json(path, schema=AppConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
