"""YAML configuration for common_lib.

The configuration file is optional: a missing file yields the defaults.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Optional
import logging
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("data/config/common_config.yml")


@dataclass
class CommonConfig:
    log_level: str = "WARNING"
    autoload_root: str = "."
    autoload_namespace: Optional[str] = None


def load_config(path: Optional[Path] = None) -> CommonConfig:
    """Load a `CommonConfig` from YAML.

    Raises `ValueError` if the file exists but is not a YAML mapping.
    Unknown keys are ignored.
    """
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug("No config at %s, using defaults", cfg_path)
        return CommonConfig()
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError("invalid config format: parse error") from e
    if not isinstance(data, dict):
        raise ValueError("invalid config format: expected mapping")

    known = {f.name for f in fields(CommonConfig)}
    return CommonConfig(**{k: v for k, v in data.items() if k in known})


def dump_config(cfg: CommonConfig) -> str:
    return yaml.safe_dump(asdict(cfg), sort_keys=False)


def save_config(cfg: CommonConfig, path: Optional[Path] = None) -> Path:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    tmp = cfg_path.with_suffix(cfg_path.suffix + ".tmp")
    tmp.write_text(dump_config(cfg), encoding="utf-8")
    tmp.replace(cfg_path)
    return cfg_path
