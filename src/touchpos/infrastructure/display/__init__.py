from .container import AppContainer
from .screen_manager import ScreenManager, LOADING_MARKUP, ERROR_MARKUP

__all__ = ["AppContainer", "ScreenManager", "LOADING_MARKUP", "ERROR_MARKUP"]
