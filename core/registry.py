"""
Config loading and store construction. The root directory comes from
config (storage.root_dir) or the PAIR_STORE_ROOT_DIR environment variable.
"""
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from storage.record_store import RecordStore

logger = logging.getLogger("pair_store")

ROOT_DIR_ENV = "PAIR_STORE_ROOT_DIR"
DEFAULT_ROOT_DIR = "./data"


def load_config(config_path: str | Path) -> dict[str, Any]:
    """Load config.yaml; a missing file is an error, an empty one is {}."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_root_dir(config: dict[str, Any]) -> str:
    env_root = os.environ.get(ROOT_DIR_ENV)
    if env_root:
        return env_root
    return (config.get("storage") or {}).get("root_dir", DEFAULT_ROOT_DIR)


def build_store_from_config(config: str | Path | dict[str, Any]) -> RecordStore:
    """Build a RecordStore from a config dict or a path to config.yaml."""
    if not isinstance(config, dict):
        config = load_config(config)
    root = get_root_dir(config)
    logger.debug("Record store root: %s", root)
    return RecordStore(root)
