"""YAML config loader."""

from pathlib import Path

import yaml

from rainviewer.config.schema import ClientConfig


def load_config(path: str | Path | None = None) -> ClientConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return ClientConfig()
    path = Path(path)
    if not path.exists():
        return ClientConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return ClientConfig(**raw)
