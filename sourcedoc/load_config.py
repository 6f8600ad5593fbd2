"""Logic for reading the run configuration."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from sourcedoc.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "modules": [],
    "separate_global_declarations": False,
    "hide_declarations": "",
    "min_acl": "public",
    "abstract_glob": [],
    "api_root": "",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Return the defaults, overlaid with the YAML file at ``path`` if it exists."""
    defaults = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return defaults
    p = Path(path)
    if not p.exists():
        logger.info("Config file %s not found; using defaults", p)
        return defaults
    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(user_config, dict):
        msg = f"Config file {p} must contain a mapping"
        raise SystemExit(msg)
    return deep_merge(defaults, user_config)
