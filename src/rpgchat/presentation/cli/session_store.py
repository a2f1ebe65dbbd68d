"""File-system storage for the one snapshot each session id owns."""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict

from rpgchat.presentation.cli import config

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class SessionStore:
    """Whole-snapshot persistence keyed by session id."""

    def __init__(self, base_dir: Path | str | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else config.get_save_dir()

    def exists(self, session_id: str) -> bool:
        return self._session_path(session_id).exists()

    def read(self, session_id: str) -> Dict[str, Any] | None:
        """Return the stored payload, or None when absent or unreadable."""
        path = self._session_path(session_id)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Session file %s could not be read: %s", path, exc)
            return None
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning("Session file %s is not valid JSON: %s", path, exc)
            return None
        if not isinstance(payload, dict):
            logger.warning("Session file %s does not hold a JSON object", path)
            return None
        return payload

    def write(self, session_id: str, payload: Dict[str, Any]) -> None:
        """Replace the stored snapshot; readers never see a partial file."""
        self._base_dir.mkdir(parents=True, exist_ok=True)
        path = self._session_path(session_id)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, ensure_ascii=False, indent=2)
            handle.write("\n")
        tmp_path.replace(path)

    def delete(self, session_id: str) -> None:
        """Delete the stored snapshot if it exists."""
        try:
            self._session_path(session_id).unlink()
        except FileNotFoundError:
            return

    def _session_path(self, session_id: str) -> Path:
        safe_id = _UNSAFE_CHARS.sub("_", session_id.strip())
        if not safe_id:
            raise ValueError("Session id must not be empty.")
        return self._base_dir / f"{safe_id}.json"
