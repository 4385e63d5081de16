from .collaborators import StoragePort, CartPort, ScreenManagerPort, ScreenPort
from .event_log_port import EventLogPort

__all__ = [
    "StoragePort",
    "CartPort",
    "ScreenManagerPort",
    "ScreenPort",
    "EventLogPort",
]
