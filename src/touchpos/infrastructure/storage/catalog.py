"""
Built-in catalog seed used when no catalog file is configured.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

from touchpos.core.errors import StorageError

DEFAULT_CATALOG: Dict[str, Any] = {
    "categories": [
        {"id": "coffee", "name": "Coffee"},
        {"id": "bakery", "name": "Bakery"},
        {"id": "drinks", "name": "Cold Drinks"},
    ],
    "products": [
        {"id": "p-espresso", "name": "Espresso", "price": "2.50", "category": "coffee", "barcode": "400100"},
        {"id": "p-latte", "name": "Latte", "price": "3.80", "category": "coffee", "barcode": "400101"},
        {"id": "p-croissant", "name": "Croissant", "price": "2.20", "category": "bakery", "barcode": "400200"},
        {"id": "p-muffin", "name": "Blueberry Muffin", "price": "2.90", "category": "bakery", "barcode": "400201"},
        {"id": "p-lemonade", "name": "Lemonade", "price": "3.10", "category": "drinks", "barcode": "400300"},
    ],
    "settings": {
        "tax_rate": 0.1,
        "currency": "USD",
        "store_name": "TouchPOS",
    },
}


def default_catalog() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_CATALOG)


def load_catalog(path: str | Path) -> Dict[str, Any]:
    """Load a YAML catalog; missing sections fall back to the defaults."""
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise StorageError(message=f"Catalog file not found: {file_path}")
    data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise StorageError(message=f"Catalog root must be a mapping: {file_path}")

    catalog = default_catalog()
    for section in ("categories", "products"):
        if section in data:
            catalog[section] = list(data[section] or [])
    catalog["settings"].update(data.get("settings") or {})
    return catalog
