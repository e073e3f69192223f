# config.py
import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import ValidationError as SchemaError, validate

from onde_estou.errors import ConfigError

SCHEMA_DIR = Path(__file__).parent / "schemas"
LOG_LEVEL_ENV = "ONDE_ESTOU_LOG_LEVEL"


@dataclass
class AppConfig:
    permission: str = "granted"
    location: Optional[Dict[str, float]] = None
    region_delta: float = 0.01
    overlay_map: bool = True
    tiles: str = "OpenStreetMap.Mapnik"
    zoom: int | None = None
    log_level: str = "INFO"

    def effective_log_level(self) -> str:
        return os.environ.get(LOG_LEVEL_ENV, self.log_level).upper()


def load_json(path: str | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise ConfigError(f"config not found: {path}")
    try:
        with p.open("r", encoding="utf-8") as f: data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a JSON object, got {type(data).__name__}")
    return data


def build_config(data: Dict[str, Any], overrides: Dict[str, Any] | None = None) -> AppConfig:
    """JSONをデフォルトに、CLI引数（None 以外）で上書きしてスキーマ検証する"""
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a JSON object, got {type(data).__name__}")
    merged = dict(data)
    for k, v in (overrides or {}).items():
        if v is not None: merged[k] = v

    schema = json.loads((SCHEMA_DIR / "app_config.schema.json").read_text(encoding="utf-8"))
    try:
        validate(instance=merged, schema=schema)
    except SchemaError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigError(f"invalid config at {where}: {e.message}") from e
    return AppConfig(**merged)


def load_config(path: str | None, overrides: Dict[str, Any] | None = None) -> AppConfig:
    return build_config(load_json(path), overrides)


def config_to_dict(cfg: AppConfig) -> Dict[str, Any]:
    return asdict(cfg)
