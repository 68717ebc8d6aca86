"""YAML config loader with .env support and dotted-key lookup."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from skycast.config.schema import SkycastConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None, env_file: str | Path | None = ".env") -> SkycastConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. Variables from ``env_file``
    are loaded into the environment without overriding ones already set,
    and IPSTACK_KEY fills ``ipstack.access_key`` when the YAML leaves it out.
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    elif path is not None:
        logger.debug("Config file %s not found, using defaults", path)

    ipstack = raw.setdefault("ipstack", {}) or {}
    raw["ipstack"] = ipstack
    if not ipstack.get("access_key") and os.environ.get("IPSTACK_KEY"):
        ipstack["access_key"] = os.environ["IPSTACK_KEY"]

    return SkycastConfig(**raw)


def get_config_value(config: SkycastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'output.path'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
