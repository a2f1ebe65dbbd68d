import json
from pathlib import Path

from rpgchat.presentation.cli import config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "config.json") == {
        "session_id": "rpg_chat_mvp_v1",
        "log_level": "WARNING",
    }


def test_invalid_config_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("not json", encoding="utf-8")
    assert config.load_config(path) == config.default_config()


def test_load_normalizes_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"session_id": " my_run ", "log_level": "debug"}), encoding="utf-8")

    assert config.load_config(path) == {"session_id": "my_run", "log_level": "DEBUG"}


def test_unknown_log_level_falls_back() -> None:
    assert config.normalize_log_level("LOUD") == "WARNING"
    assert config.normalize_log_level(None) == "WARNING"


def test_user_data_dir_on_posix(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.os, "name", "posix")
    monkeypatch.setattr(config.Path, "home", classmethod(lambda cls: tmp_path))
    assert config.get_user_data_dir() == tmp_path / ".config" / "rpgchat"
    assert config.get_save_dir() == tmp_path / ".config" / "rpgchat" / "sessions"
