"""Library configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .registry import Registry

load_dotenv()

# Handlers belong to the host bot; stay quiet unless it configures logging.
logging.getLogger("nicknamedb").addHandler(logging.NullHandler())

_RAW_CONFIG = load_raw_config()

registry = Registry(_RAW_CONFIG)


class Config:
    registry = registry


__all__ = ["registry", "load_raw_config", "Config"]
