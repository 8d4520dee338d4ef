from __future__ import annotations

from typing import Any, Dict
import os
import json
import re


_LITERALS: Dict[str, Any] = {
    'true': True,
    'false': False,
    'null': None,
    'none': None,
    '': None,
}

_NUMBER = re.compile(r'-?[0-9]+(\.[0-9]+)?')


def _convert_env_value(value: str) -> Any:
    """Cast a raw environment string to a bool, None, int, float or JSON value.

    Anything that is none of those is returned unchanged.
    """
    text = value.strip()
    if text.lower() in _LITERALS:
        return _LITERALS[text.lower()]

    if _NUMBER.fullmatch(text):
        return float(text) if '.' in text else int(text)

    if text[:1] in ('{', '['):
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return value

    return value


def env(key: str, default: Any = None) -> Any:
    """Get environment variable with type conversion."""
    value = os.getenv(key)
    if value is None:
        return default

    converted = _convert_env_value(value)
    return default if converted is None else converted


class Settings:
    """Collection settings, read from the environment."""

    # Default for the `strict` flag of where()/where_equals()/where_contains()
    STRICT_COMPARISON: bool = bool(env("COLLECTION_STRICT_COMPARISON", True))

    # Logging
    LOG_LEVEL: str = str(env("COLLECTION_LOG_LEVEL", "WARNING")).upper()
    LOG_FORMAT: str = os.getenv(
        "COLLECTION_LOG_FORMAT",
        "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"
    )
    LOG_DATE_FORMAT: str = os.getenv("COLLECTION_LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")

    def all(self) -> Dict[str, Any]:
        """Get every setting as a dictionary."""
        return {
            key: getattr(self, key)
            for key in dir(self)
            if key.isupper()
        }


settings = Settings()
