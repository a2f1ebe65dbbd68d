"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

DEFAULT_SESSION_ID = "rpg_chat_mvp_v1"
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "RpgChat"
        return Path.home() / "RpgChat"
    return Path.home() / ".config" / "rpgchat"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_save_dir() -> Path:
    """Return the per-user session directory."""
    return get_user_data_dir() / "sessions"


def default_config() -> Dict[str, str]:
    return {"session_id": DEFAULT_SESSION_ID, "log_level": DEFAULT_LOG_LEVEL}


def normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return DEFAULT_LOG_LEVEL


def _normalize_session_id(value: object) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_SESSION_ID


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return {
        "session_id": _normalize_session_id(raw.get("session_id")),
        "log_level": normalize_log_level(raw.get("log_level")),
    }
