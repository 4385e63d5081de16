# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src to sys.path so `import touchpos` works without installing, and
provides recording collaborators for coordinator tests.
"""

import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from touchpos.core.errors import ScreenNotFoundError, StorageError  # noqa: E402


class RecordingStorage:
    """Storage double; every step is appended to the shared call log."""

    def __init__(self, calls: List[str], fail: bool = False):
        self.calls = calls
        self.fail = fail
        self.data: Dict[str, Any] = {}

    async def init(self) -> None:
        self.calls.append("storage.init:start")
        await asyncio.sleep(0)
        if self.fail:
            raise StorageError(message="disk unavailable")
        self.calls.append("storage.init:end")

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


class RecordingCart:
    def __init__(self, calls: List[str], fail: bool = False):
        self.calls = calls
        self.fail = fail
        self.storage = None
        self.mutations: List[tuple] = []

    async def init(self, storage) -> None:
        self.calls.append("cart.init:start")
        await asyncio.sleep(0)
        if self.fail:
            raise RuntimeError("cart restore failed")
        self.storage = storage
        self.calls.append("cart.init:end")

    def add_item(self, product):
        self.mutations.append(("add_item", product))

    def update_quantity(self, item_id, quantity):
        self.mutations.append(("update_quantity", item_id, quantity))

    def remove_item(self, item_id):
        self.mutations.append(("remove_item", item_id))

    def clear(self):
        self.mutations.append(("clear",))


class RecordingScreenManager:
    def __init__(self, calls: List[str], fail_init: bool = False, unknown: Optional[set] = None):
        self.calls = calls
        self.fail_init = fail_init
        self.unknown = set(unknown or ())
        self.app = None
        self.shown: List[tuple] = []

    def init(self, app) -> None:
        self.calls.append("screens.init")
        if self.fail_init:
            raise RuntimeError("POS app container not found")
        self.app = app

    async def show_screen(self, name: str, data=None) -> None:
        self.calls.append(f"show_screen:{name}")
        self.shown.append((name, data))
        await asyncio.sleep(0)
        if name in self.unknown:
            raise ScreenNotFoundError(message=f"Screen not found: {name}")


@pytest.fixture
def calls() -> List[str]:
    return []


@pytest.fixture
def storage(calls):
    return RecordingStorage(calls)


@pytest.fixture
def cart(calls):
    return RecordingCart(calls)


@pytest.fixture
def screens(calls):
    return RecordingScreenManager(calls, unknown={"unknown"})


@pytest.fixture
def coordinator(storage, cart, screens):
    from touchpos.application.coordinator import AppCoordinator

    return AppCoordinator(storage=storage, cart=cart, screen_manager=screens)


@pytest.fixture
def real_coordinator(tmp_path):
    """Coordinator wired with the default collaborators and a temp storage file."""
    from touchpos.application.coordinator import AppCoordinator
    from touchpos.config import TouchPosConfig

    config = TouchPosConfig.from_dict({"storage": {"path": str(tmp_path / "store.json")}})
    return AppCoordinator(config=config)
