# src/touchpos/core/state.py
"""
Application state owned by the coordinator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ApplicationState:
    """Current screen and startup flag; collaborators never write here."""
    current_screen: Optional[str] = None
    is_initialized: bool = False
    history: List[str] = field(default_factory=list)
    active_theme: Optional[str] = None

    def mark_navigating(self, screen_name: str) -> None:
        """Record the target before the screen is mounted."""
        self.current_screen = screen_name
        self.history.append(screen_name)

    def mark_initialized(self) -> None:
        self.is_initialized = True

    def mark_theme(self, theme: str) -> None:
        self.active_theme = theme

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_screen": self.current_screen,
            "is_initialized": self.is_initialized,
            "history": list(self.history),
            "active_theme": self.active_theme,
        }
