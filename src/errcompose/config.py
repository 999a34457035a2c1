"""
Runtime settings for errcompose.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import SettingsError
from .utils.logging import get_logger

logger = get_logger("config")

STRICT_EXTRAS_ENV = "ERRCOMPOSE_STRICT_EXTRAS"
LOG_IGNORED_EXTRAS_ENV = "ERRCOMPOSE_LOG_IGNORED_EXTRAS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise SettingsError(f"Invalid boolean value for '{key}': {value!r}")


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    value = environ.get(key)
    if value is None or not value.strip():
        return default
    return _parse_bool(value, key=key)


@dataclass(frozen=True)
class Settings:
    """
    Behaviour switches consulted while composing errors.

    ``strict_extras`` turns unrecognized extras into a returned
    ``UnsupportedTypeError``; otherwise they are dropped and, when
    ``log_ignored_extras`` is set, reported as a warning.
    """

    strict_extras: bool = False
    log_ignored_extras: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            strict_extras=_env_bool(env, STRICT_EXTRAS_ENV, False),
            log_ignored_extras=_env_bool(env, LOG_IGNORED_EXTRAS_ENV, True),
        )


_default_settings: Settings | None = None


def load_settings() -> Settings:
    """
    Return cached settings, reading the environment on first use.

    Malformed environment values fall back to defaults with a warning, so
    composing an error never fails because of configuration.
    """
    global _default_settings
    if _default_settings is None:
        try:
            _default_settings = Settings.from_env()
        except SettingsError as exc:
            logger.warning("Using default settings: %s", exc)
            _default_settings = Settings()
    return _default_settings


def set_default_settings(settings: Settings) -> None:
    global _default_settings
    _default_settings = settings


def reset_default_settings() -> None:
    """Forget cached settings so the next ``load_settings`` re-reads the environment."""
    global _default_settings
    _default_settings = None
