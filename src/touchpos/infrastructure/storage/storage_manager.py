"""
Key/value storage with an optional JSON file behind it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from touchpos.core.errors import StorageError

from .catalog import default_catalog, load_catalog

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Persistent key/value store plus the product catalog.

    Features:
    - ``get``/``set`` on plain JSON-serializable values
    - optional JSON file persistence (written on every ``set``)
    - catalog seed from YAML or built-in defaults
    """

    def __init__(
        self,
        path: Optional[str | Path] = None,
        *,
        catalog_path: Optional[str | Path] = None,
        settings_overrides: Optional[Dict[str, Any]] = None,
    ):
        self.path = Path(path).expanduser() if path else None
        self.catalog_path = catalog_path
        self._settings_overrides = dict(settings_overrides or {})
        self._data: Dict[str, Any] = {}
        self._catalog: Dict[str, Any] = {}
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    async def init(self) -> None:
        """Load catalog and persisted values. Safe to call twice."""
        if self._ready:
            return

        self._catalog = load_catalog(self.catalog_path) if self.catalog_path else default_catalog()
        self._catalog["settings"].update(self._settings_overrides)

        if self.path and self.path.exists():
            try:
                self._data = json.loads(self.path.read_text(encoding="utf-8")) or {}
            except json.JSONDecodeError as e:
                raise StorageError(
                    message=f"Corrupted storage file {self.path}: {e}",
                    context={"path": str(self.path)},
                ) from e
            if not isinstance(self._data, dict):
                raise StorageError(message=f"Storage file must hold an object: {self.path}")

        self._ready = True
        logger.info(
            f"Storage ready ({len(self._data)} keys, {len(self._catalog['products'])} products)"
        )

    def _require_ready(self) -> None:
        if not self._ready:
            raise StorageError(message="StorageManager used before init()")

    # ------------------ key/value ------------------
    def get(self, key: str, default: Any = None) -> Any:
        self._require_ready()
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._require_ready()
        self._data[key] = value
        self._flush()

    def delete(self, key: str) -> None:
        self._require_ready()
        if self._data.pop(key, None) is not None:
            self._flush()

    def _flush(self) -> None:
        if not self.path:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(message=f"Failed to persist storage: {e}", context={"path": str(self.path)}) from e

    # ------------------ catalog ------------------
    def get_products(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        self._require_ready()
        products = self._catalog["products"]
        if category:
            products = [p for p in products if p.get("category") == category]
        return [dict(p) for p in products]

    def get_product(self, product_id: str) -> Optional[Dict[str, Any]]:
        self._require_ready()
        for product in self._catalog["products"]:
            if product.get("id") == product_id:
                return dict(product)
        return None

    def get_categories(self) -> List[Dict[str, Any]]:
        self._require_ready()
        return [dict(c) for c in self._catalog["categories"]]

    def get_settings(self) -> Dict[str, Any]:
        self._require_ready()
        return dict(self._catalog["settings"])
