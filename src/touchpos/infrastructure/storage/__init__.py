from .storage_manager import StorageManager
from .catalog import DEFAULT_CATALOG, default_catalog, load_catalog

__all__ = ["StorageManager", "DEFAULT_CATALOG", "default_catalog", "load_catalog"]
