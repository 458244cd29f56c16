# regcode/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging, os

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """
    Runtime settings for the CLI shell.

    The core codec takes no settings; key paths, log routing and the password
    capability flag only matter to the shell that wraps it.
    """
    public_key_path: str = "public.key"
    private_key_path: str = "private.key"
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    passwords_enabled: bool = True
    default_days: int = 30


def load_settings(config: dict | None = None) -> Settings:
    """
    Resolve settings from an explicit dict first, then REGCODE_* environment
    variables, then defaults.
    """
    config = config or {}

    def pick(key: str, env: str, default):
        value = config.get(key)
        if value is None:
            value = os.getenv(env, default)
        return value

    log_level = str(pick("log_level", "REGCODE_LOG_LEVEL", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level}")

    days = pick("default_days", "REGCODE_DEFAULT_DAYS", 30)
    try:
        default_days = int(days)
    except (TypeError, ValueError) as e:
        raise ValueError(f"default_days must be an integer, got {days!r}") from e

    enabled = pick("passwords_enabled", "REGCODE_ENABLE_PASSWORDS", "1")
    if not isinstance(enabled, bool):
        enabled = str(enabled).strip().lower() in _TRUE

    return Settings(
        public_key_path=pick("public_key_path", "REGCODE_PUBLIC_KEY", "public.key"),
        private_key_path=pick("private_key_path", "REGCODE_PRIVATE_KEY", "private.key"),
        log_level=log_level,
        log_file=pick("log_file", "REGCODE_LOG_FILE", None) or None,
        passwords_enabled=enabled,
        default_days=default_days,
    )
