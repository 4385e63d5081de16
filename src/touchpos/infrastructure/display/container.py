from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppContainer:
    """
    Root element the screens are mounted into.

    Holds the current markup and document title; ``mount_count`` counts
    full content replacements.
    """
    element_id: str = "pos-app"
    inner_html: str = ""
    title: str = ""
    mount_count: int = 0

    def replace(self, markup: str) -> None:
        self.inner_html = markup
        self.mount_count += 1
