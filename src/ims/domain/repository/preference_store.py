"""Abstract key/value store for UI preferences (sort key, theme)."""

from __future__ import annotations

from abc import ABC, abstractmethod

SORT_KEY = "sortKey"
THEME_KEY = "theme"


class PreferenceStore(ABC):

    @abstractmethod
    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the stored value for ``key``, or ``default``."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Persist ``value`` under ``key``."""
