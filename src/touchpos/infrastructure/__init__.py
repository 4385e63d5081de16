"""
Default collaborator implementations: storage, cart, display, event log.
"""

from .storage import StorageManager
from .cart import CartManager, CartItem
from .display import AppContainer, ScreenManager
from .event_log import InMemoryEventLog, LoggingEventLog, create_event_log

__all__ = [
    "StorageManager",
    "CartManager",
    "CartItem",
    "AppContainer",
    "ScreenManager",
    "InMemoryEventLog",
    "LoggingEventLog",
    "create_event_log",
]
