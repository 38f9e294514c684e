"""CLI configuration loading."""
from __future__ import annotations
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CFG_PATH = "configs/squash.yaml"

DEFAULTS: dict[str, Any] = {
    "ollama_address": "http://localhost:11434",
    "model": "llama3",
    "keep_alive": "30s",
    "timeout": None,
    "webhook_url": None,
    "log_level": "INFO",
}

def load_cfg(path: str = DEFAULT_CFG_PATH) -> dict[str, Any]:
    """
    Load a YAML config file merged over the built-in defaults.

    Args:
        path: Config path. A missing file yields the defaults.
    """
    cfg = dict(DEFAULTS)
    p = Path(path)
    if not p.exists():
        return cfg
    with open(p, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    cfg.update({k: v for k, v in loaded.items() if v is not None})
    return cfg
