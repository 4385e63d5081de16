"""
Pydantic configuration models with YAML loading and env overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from touchpos.core.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("config") / "touchpos.yaml"


class AppConfig(BaseModel):
    default_screen: str = "home"
    container_id: str = "pos-app"
    title_suffix: str = "POS System"
    theme: Optional[Literal["evolution", "restaurant", "express", "oblivion"]] = None
    event_log: Literal["memory", "logging", "none"] = "memory"


class StorageConfig(BaseModel):
    # JSON file for persisted keys; None keeps everything in memory
    path: Optional[str] = None
    # YAML catalog seed (categories/products/settings)
    catalog_path: Optional[str] = None


class CartConfig(BaseModel):
    tax_rate: float = Field(default=0.1, ge=0, le=1)
    currency: str = "USD"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TouchPosConfig(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    cart: CartConfig = Field(default_factory=CartConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    raw: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TouchPosConfig":
        try:
            return cls(
                app=AppConfig(**(data.get("app") or {})),
                storage=StorageConfig(**(data.get("storage") or {})),
                cart=CartConfig(**(data.get("cart") or {})),
                logging=LoggingConfig(**(data.get("logging") or {})),
                raw=data,
            )
        except ValidationError as e:
            raise ConfigError(message=f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TouchPosConfig":
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise ConfigError(message=f"Config file not found: {file_path}")
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config root must be a mapping: {file_path}")
        return cls.from_dict(data)


def _apply_env_overrides(config: TouchPosConfig) -> TouchPosConfig:
    if os.getenv("TOUCHPOS_LOG_LEVEL"):
        config.logging.level = os.environ["TOUCHPOS_LOG_LEVEL"].upper()
    if os.getenv("TOUCHPOS_STORAGE_PATH"):
        config.storage.path = os.environ["TOUCHPOS_STORAGE_PATH"]
    if os.getenv("TOUCHPOS_DEFAULT_SCREEN"):
        config.app.default_screen = os.environ["TOUCHPOS_DEFAULT_SCREEN"]
    return config


def load_config(path: Optional[str | Path] = None) -> TouchPosConfig:
    """
    Load configuration.

    An explicit path must exist; without one, ``config/touchpos.yaml`` is used
    when present and defaults otherwise.
    """
    if path is not None:
        config = TouchPosConfig.from_yaml(path)
    elif DEFAULT_CONFIG_PATH.exists():
        config = TouchPosConfig.from_yaml(DEFAULT_CONFIG_PATH)
    else:
        config = TouchPosConfig()
    return _apply_env_overrides(config)
