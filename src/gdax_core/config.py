"""Client configuration: in-code defaults, optional YAML overrides, env credentials."""
from __future__ import annotations
import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from gdax_core.errors import ConfigError
from gdax_core.types import Credentials

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "base_url": "https://api.gdax.com",
    "user_agent": "gdax-client/1.2.0",
    "timeout_s": 10.0,
    "log_level": "INFO",
}

CONFIG_ENV = "GDAX_CONFIG"
KEY_ENV = "CB_KEY"
SECRET_ENV = "CB_SECRET"
PASSPHRASE_ENV = "CB_PASSPHRASE"


def load_config(path: Optional[str] = None) -> dict:
    """Return DEFAULTS overlaid with the YAML file at ``path`` (or $GDAX_CONFIG)."""
    config = dict(DEFAULTS)
    path = path or os.environ.get(CONFIG_ENV)
    if not path:
        return config
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    config.update(data)
    log.debug("Loaded config from %s", path)
    return config


def load_credentials(env: Optional[Mapping[str, str]] = None) -> Credentials:
    """Read CB_KEY / CB_SECRET / CB_PASSPHRASE, loading a .env file first."""
    if env is None:
        load_dotenv()
        env = os.environ
    values = {name: env.get(name, "") for name in (KEY_ENV, SECRET_ENV, PASSPHRASE_ENV)}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigError(f"Missing {', '.join(missing)} in environment")
    return Credentials(
        key=values[KEY_ENV],
        secret=values[SECRET_ENV],
        passphrase=values[PASSPHRASE_ENV],
    )
