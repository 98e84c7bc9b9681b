"""JSON-file-backed implementation of PreferenceStore."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ims.domain.repository.preference_store import PreferenceStore

logger = logging.getLogger(__name__)


class JsonPreferenceStore(PreferenceStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PreferenceStore interface --------------------------------------------

    def get(self, key: str, default: str | None = None) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self._persist(values)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, object]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable preferences file %s: %s", self._file_path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed preferences file %s", self._file_path)
            return {}
        return raw

    def _persist(self, values: dict[str, object]) -> None:
        self._file_path.write_text(
            json.dumps(values, indent=2, sort_keys=True) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
