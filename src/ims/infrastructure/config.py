"""Runtime settings read from the environment.

CLI options override these values; see ``cli/main.py``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from ims.domain.exceptions import ConfigurationError

DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def preferences_file(self) -> Path:
        return self.data_dir / "preferences.json"

    def override(self, **values) -> Settings:
        """Copy with the given values replaced; None means "keep"."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_timeout = env.get("IMS_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"IMS_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from exc
        if timeout <= 0:
            raise ConfigurationError("IMS_REQUEST_TIMEOUT must be greater than zero")

        log_level = env.get("IMS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown IMS_LOG_LEVEL {log_level!r}")

        data_dir = env.get("IMS_DATA_DIR")
        return Settings(
            api_url=env.get("IMS_API_URL", DEFAULT_API_URL).rstrip("/"),
            request_timeout=timeout,
            data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
            log_level=log_level,
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
