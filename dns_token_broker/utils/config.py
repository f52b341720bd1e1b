"""
Configuration loading and logging setup.
"""

import copy
import logging
import os
import sys
from typing import Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/config.yaml"

# environment variable -> (section, key, cast)
ENV_OVERRIDES = {
    "HOST": ("http", "host", str),
    "PORT": ("http", "port", int),
    "DATA_DIR": ("storage", "data_dir", str),
    "DDNS_ZONE": ("ddns", "zone", str),
    "DDNS_SERVER": ("ddns", "server", str),
    "LOG_LEVEL": ("logging", "level", str),
}


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "http": {"host": "127.0.0.1", "port": 8080},
        "storage": {"backend": "file", "data_dir": "./data"},
        "ddns": {"zone": "example.com.", "server": "127.0.0.1"},
        "default_provider": "nsupdate",
        "dns_providers": {
            "nsupdate": {"command": "nsupdate", "key_file": "", "timeout": None},
            "dnspython": {"port": 53, "key_file": "", "key_name": "", "timeout": 30},
            "mock": {"fail": False},
        },
        "logging": {"level": "INFO", "file": ""},
    }


def _merge(base: Dict, overrides: Dict) -> Dict:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def apply_env_overrides(config: Dict, environ=None) -> Dict:
    """Overlay the HOST/PORT/DATA_DIR/DDNS_* environment variables."""
    environ = os.environ if environ is None else environ

    for name, (section, key, cast) in ENV_OVERRIDES.items():
        if environ.get(name):
            config.setdefault(section, {})[key] = cast(environ[name])

    if environ.get("DDNS_PROVIDER"):
        config["default_provider"] = environ["DDNS_PROVIDER"]

    return config


def load_config(config_path: str = DEFAULT_CONFIG_PATH, environ=None) -> Dict:
    """Load configuration from YAML file, falling back to defaults."""
    config = copy.deepcopy(get_default_config())
    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
        _merge(config, loaded)
        logger.info(f"Configuration loaded from {config_path}")
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(1)

    return apply_env_overrides(config, environ)


def config_logger(config: Dict):
    """Configure logging."""
    logging_config = config.get("logging", {})
    log_level = logging_config.get("level", "INFO")
    log_file = logging_config.get("file", "")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
