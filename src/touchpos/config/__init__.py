from .models import (
    TouchPosConfig,
    AppConfig,
    StorageConfig,
    CartConfig,
    LoggingConfig,
    load_config,
)

__all__ = [
    "TouchPosConfig",
    "AppConfig",
    "StorageConfig",
    "CartConfig",
    "LoggingConfig",
    "load_config",
]
