"""Process-wide formatting defaults.

Provides centralized configuration using environment variables. Every delimit
default is optional: an unset variable leaves the built-in default in place.

    NUMBER_DELIMIT_DELIMITER=" "
    NUMBER_DELIMIT_SEPARATOR=","
    NUMBER_DELIMIT_PRECISION=3
"""
from __future__ import annotations

from functools import lru_cache
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# (namespace, key) -> {option name: settings field}
_DEFAULTS_FIELDS = {
    ("number", "delimit"): {
        "delimiter": "NUMBER_DELIMIT_DELIMITER",
        "separator": "NUMBER_DELIMIT_SEPARATOR",
        "precision": "NUMBER_DELIMIT_PRECISION",
    },
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Delimit defaults (None = not configured)
    NUMBER_DELIMIT_DELIMITER: Optional[str] = None
    NUMBER_DELIMIT_SEPARATOR: Optional[str] = None
    NUMBER_DELIMIT_PRECISION: Optional[int] = None

    LOG_LEVEL: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment with type coercion and defaults."""
        def _get_int(name: str) -> Optional[int]:
            raw = os.getenv(name)
            if raw is None or raw.strip() == "":
                return None
            try:
                return int(raw)
            except ValueError:
                logger.warning("Ignoring invalid integer for %s: %r", name, raw)
                return None

        return cls(
            NUMBER_DELIMIT_DELIMITER=os.getenv("NUMBER_DELIMIT_DELIMITER"),
            NUMBER_DELIMIT_SEPARATOR=os.getenv("NUMBER_DELIMIT_SEPARATOR"),
            NUMBER_DELIMIT_PRECISION=_get_int("NUMBER_DELIMIT_PRECISION"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def get_defaults(self, namespace: str, key: str) -> Dict[str, Any]:
        """Return the configured defaults for ``namespace``/``key``.

        Only keys that were actually configured are included, so callers can
        layer the result over their own defaults.
        """
        fields = _DEFAULTS_FIELDS.get((namespace, key), {})
        return {
            option: getattr(self, field)
            for option, field in fields.items()
            if getattr(self, field) is not None
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (singleton pattern)."""
    return Settings.load()


__all__ = ["Settings", "get_settings"]
