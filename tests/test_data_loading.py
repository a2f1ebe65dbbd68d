import json
from pathlib import Path

import pytest

from rpgchat.core.types import Universe
from rpgchat.data.content import ContentLibrary, get_default_content
from rpgchat.data.errors import DataLoadError, DataReferenceError, DataValidationError
from rpgchat.data.repositories import (
    ClassesRepository,
    EnemiesRepository,
    ItemsRepository,
    RacesRepository,
    UniversesRepository,
)
from rpgchat.domain.entities import ArmorItem, WeaponItem

_ENEMY = {
    "name": "Тестовый враг",
    "hp": 10,
    "evasion": 1,
    "defense": 1,
    "attack_icons": ["🗡️"],
    "dmg_min": 1,
    "dmg_max": 2,
}


def test_default_tables_have_expected_sizes() -> None:
    content = get_default_content()
    assert len(content.races.all()) == 15
    assert len(content.classes.all()) == 15
    assert len(content.backgrounds.all()) == 6
    assert len(content.enemies.all()) == 3
    assert len(content.universes.all()) == len(Universe)


def test_tables_keep_definition_order() -> None:
    content = get_default_content()
    assert content.races.ids()[:3] == ["r1", "r2", "r3"]
    assert content.backgrounds.ids() == ["b1", "b2", "b3", "b4", "b5", "b6"]


def test_default_enemy_templates_match_universes() -> None:
    content = get_default_content()
    assert content.enemies.get("dark_scavenger").hp == 26
    assert content.enemies.get("isekai_slime").hp == 22
    assert content.enemies.get("classic_bandit").hp == 24
    assert content.universe_def(Universe.DARK_FANTASY).enemy_id == "dark_scavenger"
    assert content.universe_def(Universe.ANIME_ISEKAI).enemy_id == "isekai_slime"
    assert content.universe_def(Universe.CUSTOM).enemy_id == "classic_bandit"


def test_items_repo_builds_typed_items() -> None:
    items = get_default_content().items
    assert isinstance(items.get("w_dagger"), WeaponItem)
    assert isinstance(items.get("a_tunic"), ArmorItem)
    assert items.get("c_potion").type == "consumable"


def test_universe_labels() -> None:
    content = get_default_content()
    assert content.universe_title(None) == "—"
    assert content.universe_title(Universe.CANON, None) == "Канон: без названия"
    assert content.universe_title(Universe.CANON, "Метро 2033") == "Канон: Метро 2033"
    assert content.currency(None) == "¤"
    assert content.safe_hub(Universe.CLASSIC_FANTASY) == "Трактир «Три Факела»"


def test_unknown_id_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_default_content().races.get("r99")


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    repo = RacesRepository(base_path=tmp_path)
    with pytest.raises(DataLoadError):
        repo.all()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "classes.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        ClassesRepository(base_path=tmp_path).all()


def test_unknown_attribute_in_bonuses_is_rejected(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "races.json",
        {"x": {"name": "X", "desc": "", "bonuses": {"WIS": 1}, "weakness": "", "world_impact": ""}},
    )
    with pytest.raises(DataValidationError):
        RacesRepository(base_path=tmp_path).get("x")


def test_extra_field_is_rejected(tmp_path: Path) -> None:
    _write_json(tmp_path / "enemies.json", {"e": {**_ENEMY, "speed": 3}})
    with pytest.raises(DataValidationError):
        EnemiesRepository(base_path=tmp_path).all()


def test_item_slots_outside_range_are_rejected(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "items.json",
        {"rock": {"rarity": "⚪", "name": "Камень", "type": "material", "weight": 9, "slots": 4}},
    )
    with pytest.raises(DataValidationError):
        ItemsRepository(base_path=tmp_path).all()


def test_universe_with_missing_enemy_is_a_reference_error(tmp_path: Path) -> None:
    _write_json(tmp_path / "enemies.json", {"e": _ENEMY})
    _write_json(tmp_path / "universes.json", _universes(enemy_id="ghost"))
    repo = UniversesRepository(enemies_repo=EnemiesRepository(base_path=tmp_path), base_path=tmp_path)
    with pytest.raises(DataReferenceError):
        repo.all()


def test_universes_must_cover_every_member(tmp_path: Path) -> None:
    _write_json(tmp_path / "enemies.json", {"e": _ENEMY})
    universes = _universes(enemy_id="e")
    del universes["CUSTOM"]
    _write_json(tmp_path / "universes.json", universes)
    repo = UniversesRepository(enemies_repo=EnemiesRepository(base_path=tmp_path), base_path=tmp_path)
    with pytest.raises(DataValidationError):
        repo.all()


def test_content_library_from_custom_path(tmp_path: Path) -> None:
    _write_json(tmp_path / "enemies.json", {"e": _ENEMY})
    _write_json(tmp_path / "universes.json", _universes(enemy_id="e"))
    content = ContentLibrary.from_path(tmp_path)
    assert content.safe_hub(Universe.DARK_FANTASY) == "Хаб DARK_FANTASY"


def _universes(enemy_id: str) -> dict:
    return {
        member.value: {
            "title": member.value,
            "currency": "¤",
            "safe_hub": f"Хаб {member.value}",
            "enemy_id": enemy_id,
        }
        for member in Universe
    }


def _write_json(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
