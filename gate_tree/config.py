"""
Configuration files for gate-tree.

Reads and writes GateConfig as JSON, only at paths the caller names.
Nothing is read implicitly: GateRunner uses built-in defaults unless
handed a config. Trees themselves are never read from or written to disk.
"""

import json

from pathlib import Path

from .types import GateConfig


def load_config(config_path: str) -> GateConfig:
    """
    Load configuration from `config_path`.

    Returns built-in defaults if the file does not exist.
    """
    path = Path(config_path)

    if path.exists():
        with open(path) as f:
            data = json.load(f)
        return GateConfig.from_dict(data)

    return GateConfig()


def save_config(config: GateConfig, config_path: str) -> None:
    """
    Save configuration to `config_path`, creating parent directories.
    """
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
