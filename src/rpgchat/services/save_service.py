"""Serialization helpers for session snapshots."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Type, TypeVar

from rpgchat.core.types import CanonMode, Node, Phase, Role, Universe, WearMode
from rpgchat.data.content import ContentLibrary
from rpgchat.domain.entities import (
    STAT_NAMES,
    ArmorItem,
    Durability,
    Effect,
    Enemy,
    Equipment,
    Item,
    Stats,
    WeaponItem,
)
from rpgchat.domain.state import GameState, LogEntry, make_initial_state
from rpgchat.services.errors import SaveLoadError

logger = logging.getLogger(__name__)

SavePayload = Dict[str, Any]
E = TypeVar("E", bound=Enum)

_ITEM_KINDS = ("item", "weapon", "armor")


class SaveService:
    """Converts a GameState to/from a validated, versioned payload."""

    SAVE_VERSION = 1

    def __init__(self, content: ContentLibrary) -> None:
        self._content = content

    def serialize(self, state: GameState) -> SavePayload:
        """Return a JSON-serializable payload for the whole state."""
        return {
            "save_version": self.SAVE_VERSION,
            "metadata": self._build_metadata(state),
            "state": self._serialize_state(state),
        }

    def deserialize(self, payload: Any) -> GameState:
        """Rebuild a GameState from ``payload`` or raise SaveLoadError."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        version = payload.get("save_version")
        if version != self.SAVE_VERSION:
            raise SaveLoadError(f"Unsupported save version: {version!r}.")
        data = payload.get("state")
        if not isinstance(data, Mapping):
            raise SaveLoadError("Save data is missing the state section.")

        return GameState(
            phase=self._require_enum(Phase, data.get("phase"), "state.phase"),
            node=self._require_enum(Node, data.get("node"), "state.node"),
            wear=self._require_enum(WearMode, data.get("wear"), "state.wear"),
            universe=self._coerce_optional_enum(Universe, data.get("universe"), "state.universe"),
            canon_title=self._coerce_optional_str(data.get("canon_title"), "state.canon_title"),
            canon_mode=self._coerce_optional_enum(CanonMode, data.get("canon_mode"), "state.canon_mode"),
            custom_rules=self._coerce_optional_str(data.get("custom_rules"), "state.custom_rules"),
            day=self._require_positive_int(data.get("day"), "state.day"),
            hour=self._require_hour(data.get("hour")),
            weather=self._require_str(data.get("weather"), "state.weather"),
            location=self._require_str(data.get("location"), "state.location"),
            journal_path=self._require_str(data.get("journal_path"), "state.journal_path"),
            sex=self._coerce_optional_str(data.get("sex"), "state.sex"),
            name=self._coerce_optional_str(data.get("name"), "state.name"),
            race=self._coerce_reference(self._content.races, data.get("race_id"), "state.race_id"),
            char_class=self._coerce_reference(self._content.classes, data.get("class_id"), "state.class_id"),
            background=self._coerce_reference(
                self._content.backgrounds, data.get("background_id"), "state.background_id"
            ),
            level=self._require_positive_int(data.get("level"), "state.level"),
            xp=self._require_non_negative_int(data.get("xp"), "state.xp"),
            xp_to_next=self._require_positive_int(data.get("xp_to_next"), "state.xp_to_next"),
            hp_cur=self._require_non_negative_int(data.get("hp_cur"), "state.hp_cur"),
            hp_max=self._require_positive_int(data.get("hp_max"), "state.hp_max"),
            mp_cur=self._require_non_negative_int(data.get("mp_cur"), "state.mp_cur"),
            mp_max=self._require_positive_int(data.get("mp_max"), "state.mp_max"),
            stats=self._coerce_stats(data.get("stats")),
            equipped=self._coerce_equipment(data.get("equipped")),
            backpack=tuple(self._coerce_item_list(data.get("backpack"), "state.backpack")),
            money=self._require_non_negative_int(data.get("money"), "state.money"),
            effects=self._coerce_effects(data.get("effects")),
            loot_journal=tuple(self._coerce_str_list(data.get("loot_journal"), "state.loot_journal")),
            log=self._coerce_log(data.get("log")),
            enemy=self._coerce_enemy(data.get("enemy")),
        )

    def load_or_new(self, payload: Any) -> GameState:
        """Return the saved state, or a fresh one when the payload is unusable."""
        if payload is None:
            return make_initial_state()
        try:
            return self.deserialize(payload)
        except SaveLoadError as exc:
            logger.warning("Discarding unreadable save: %s", exc)
            return make_initial_state()

    def dumps(self, state: GameState) -> str:
        return json.dumps(self.serialize(state), ensure_ascii=False, indent=2)

    def loads(self, raw: str) -> GameState:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SaveLoadError(f"Save data is not valid JSON: {exc}") from exc
        return self.deserialize(payload)

    # -----------------------
    # Serialization
    # -----------------------
    def _build_metadata(self, state: GameState) -> Dict[str, Any]:
        return {
            "name": state.name,
            "phase": state.phase.value,
            "universe": state.universe.value if state.universe else None,
            "level": state.level,
            "day": state.day,
            "hour": state.hour,
            "saved_at": datetime.now(timezone.utc).isoformat(),
        }

    def _serialize_state(self, state: GameState) -> Dict[str, Any]:
        return {
            "phase": state.phase.value,
            "node": state.node.value,
            "wear": state.wear.value,
            "universe": state.universe.value if state.universe else None,
            "canon_title": state.canon_title,
            "canon_mode": state.canon_mode.value if state.canon_mode else None,
            "custom_rules": state.custom_rules,
            "day": state.day,
            "hour": state.hour,
            "weather": state.weather,
            "location": state.location,
            "journal_path": state.journal_path,
            "sex": state.sex,
            "name": state.name,
            "race_id": state.race.id if state.race else None,
            "class_id": state.char_class.id if state.char_class else None,
            "background_id": state.background.id if state.background else None,
            "level": state.level,
            "xp": state.xp,
            "xp_to_next": state.xp_to_next,
            "hp_cur": state.hp_cur,
            "hp_max": state.hp_max,
            "mp_cur": state.mp_cur,
            "mp_max": state.mp_max,
            "stats": state.stats.as_dict(),
            "equipped": self._serialize_equipment(state.equipped),
            "backpack": [self._serialize_item(item) for item in state.backpack],
            "money": state.money,
            "effects": [
                {"icon": effect.icon, "name": effect.name, "turns_left": effect.turns_left}
                for effect in state.effects
            ],
            "loot_journal": list(state.loot_journal),
            "log": [{"role": entry.role.value, "text": entry.text} for entry in state.log],
            "enemy": self._serialize_enemy(state.enemy),
        }

    def _serialize_equipment(self, equipment: Equipment) -> Dict[str, Any]:
        durability = None
        if equipment.durability is not None:
            durability = {
                key: {"cur": value.cur, "max": value.max}
                for key, value in equipment.durability.items()
            }
        return {
            "weapon": self._serialize_item(equipment.weapon) if equipment.weapon else None,
            "armor": self._serialize_item(equipment.armor) if equipment.armor else None,
            "accessories": [self._serialize_item(item) for item in equipment.accessories],
            "durability": durability,
        }

    @staticmethod
    def _serialize_item(item: Item) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "kind": "item",
            "id": item.id,
            "rarity": item.rarity,
            "name": item.name,
            "type": item.type,
            "weight": item.weight,
            "slots": item.slots,
            "qty": item.qty,
            "tags": list(item.tags),
            "notes": item.notes,
        }
        if isinstance(item, WeaponItem):
            payload.update(
                kind="weapon",
                dmg_min=item.dmg_min,
                dmg_max=item.dmg_max,
                dmg_icons=list(item.dmg_icons),
                req_str=item.req_str,
                req_dex=item.req_dex,
            )
        elif isinstance(item, ArmorItem):
            payload.update(
                kind="armor",
                defense=item.defense,
                bonuses=dict(item.bonuses),
                penalties=dict(item.penalties),
            )
        return payload

    @staticmethod
    def _serialize_enemy(enemy: Enemy | None) -> Dict[str, Any] | None:
        if enemy is None:
            return None
        return {
            "enemy_id": enemy.enemy_id,
            "name": enemy.name,
            "hp_cur": enemy.hp_cur,
            "hp_max": enemy.hp_max,
            "evasion": enemy.evasion,
            "defense": enemy.defense,
            "attack_icons": list(enemy.attack_icons),
            "dmg_min": enemy.dmg_min,
            "dmg_max": enemy.dmg_max,
            "weak": enemy.weak,
            "resist": enemy.resist,
        }

    # -----------------------
    # Deserialization
    # -----------------------
    def _coerce_stats(self, value: Any) -> Stats:
        mapping = self._require_dict(value, "state.stats")
        expected = set(STAT_NAMES)
        actual = set(mapping.keys())
        if actual != expected:
            missing = expected - actual
            extra = actual - expected
            msg_parts: list[str] = []
            if missing:
                msg_parts.append(f"missing keys: {sorted(missing)}")
            if extra:
                msg_parts.append(f"unknown keys: {sorted(extra)}")
            raise SaveLoadError(f"state.stats has schema issues ({'; '.join(msg_parts)}).")
        values = {
            name: self._require_positive_int(mapping[name], f"state.stats.{name}") for name in STAT_NAMES
        }
        return Stats(**values)

    def _coerce_equipment(self, value: Any) -> Equipment:
        mapping = self._require_dict(value, "state.equipped")
        weapon = self._coerce_optional_item(mapping.get("weapon"), "state.equipped.weapon")
        armor = self._coerce_optional_item(mapping.get("armor"), "state.equipped.armor")
        if weapon is not None and not isinstance(weapon, WeaponItem):
            raise SaveLoadError("state.equipped.weapon must be a weapon.")
        if armor is not None and not isinstance(armor, ArmorItem):
            raise SaveLoadError("state.equipped.armor must be armor.")
        return Equipment(
            weapon=weapon,
            armor=armor,
            accessories=tuple(
                self._coerce_item_list(mapping.get("accessories"), "state.equipped.accessories")
            ),
            durability=self._coerce_durability(mapping.get("durability")),
        )

    def _coerce_durability(self, value: Any) -> Dict[str, Durability] | None:
        if value is None:
            return None
        mapping = self._require_dict(value, "state.equipped.durability")
        result: Dict[str, Durability] = {}
        for key, entry in mapping.items():
            context = f"state.equipped.durability.{key}"
            entry_map = self._require_dict(entry, context)
            result[key] = Durability(
                cur=self._require_non_negative_int(entry_map.get("cur"), f"{context}.cur"),
                max=self._require_non_negative_int(entry_map.get("max"), f"{context}.max"),
            )
        return result

    def _coerce_item_list(self, value: Any, context: str) -> List[Item]:
        if not isinstance(value, list):
            raise SaveLoadError(f"{context} must be a list.")
        return [self._coerce_item(entry, f"{context}[{index}]") for index, entry in enumerate(value)]

    def _coerce_optional_item(self, value: Any, context: str) -> Item | None:
        if value is None:
            return None
        return self._coerce_item(value, context)

    def _coerce_item(self, value: Any, context: str) -> Item:
        mapping = self._require_dict(value, context)
        kind = mapping.get("kind")
        if kind not in _ITEM_KINDS:
            raise SaveLoadError(f"{context}.kind must be one of {list(_ITEM_KINDS)}.")
        slots = self._require_int(mapping.get("slots"), f"{context}.slots")
        if not 1 <= slots <= 3:
            raise SaveLoadError(f"{context}.slots must be between 1 and 3.")
        qty = mapping.get("qty")
        if qty is not None:
            qty = self._require_non_negative_int(qty, f"{context}.qty")
        common: Dict[str, Any] = {
            "id": self._require_str(mapping.get("id"), f"{context}.id"),
            "rarity": self._require_str(mapping.get("rarity"), f"{context}.rarity"),
            "name": self._require_str(mapping.get("name"), f"{context}.name"),
            "type": self._require_str(mapping.get("type"), f"{context}.type"),
            "weight": self._require_number(mapping.get("weight"), f"{context}.weight"),
            "slots": slots,
            "qty": qty,
            "tags": tuple(self._coerce_str_list(mapping.get("tags", []), f"{context}.tags")),
            "notes": self._coerce_optional_str(mapping.get("notes"), f"{context}.notes"),
        }
        if kind == "weapon":
            return WeaponItem(
                **common,
                dmg_min=self._coerce_optional_int(mapping.get("dmg_min"), f"{context}.dmg_min"),
                dmg_max=self._coerce_optional_int(mapping.get("dmg_max"), f"{context}.dmg_max"),
                dmg_icons=tuple(self._coerce_str_list(mapping.get("dmg_icons", []), f"{context}.dmg_icons")),
                req_str=self._coerce_optional_int(mapping.get("req_str"), f"{context}.req_str"),
                req_dex=self._coerce_optional_int(mapping.get("req_dex"), f"{context}.req_dex"),
            )
        if kind == "armor":
            return ArmorItem(
                **common,
                defense=self._coerce_optional_int(mapping.get("defense"), f"{context}.defense"),
                bonuses=self._coerce_int_dict(mapping.get("bonuses", {}), f"{context}.bonuses"),
                penalties=self._coerce_int_dict(mapping.get("penalties", {}), f"{context}.penalties"),
            )
        return Item(**common)

    def _coerce_effects(self, value: Any) -> tuple[Effect, ...]:
        if not isinstance(value, list):
            raise SaveLoadError("state.effects must be a list.")
        effects: list[Effect] = []
        for index, entry in enumerate(value):
            context = f"state.effects[{index}]"
            mapping = self._require_dict(entry, context)
            effects.append(
                Effect(
                    icon=self._require_str(mapping.get("icon"), f"{context}.icon"),
                    name=self._require_str(mapping.get("name"), f"{context}.name"),
                    turns_left=self._require_non_negative_int(mapping.get("turns_left"), f"{context}.turns_left"),
                )
            )
        return tuple(effects)

    def _coerce_log(self, value: Any) -> tuple[LogEntry, ...]:
        if not isinstance(value, list):
            raise SaveLoadError("state.log must be a list.")
        entries: list[LogEntry] = []
        for index, entry in enumerate(value):
            context = f"state.log[{index}]"
            mapping = self._require_dict(entry, context)
            entries.append(
                LogEntry(
                    role=self._require_enum(Role, mapping.get("role"), f"{context}.role"),
                    text=self._require_str(mapping.get("text"), f"{context}.text"),
                )
            )
        return tuple(entries)

    def _coerce_enemy(self, value: Any) -> Enemy | None:
        if value is None:
            return None
        mapping = self._require_dict(value, "state.enemy")
        return Enemy(
            enemy_id=self._require_str(mapping.get("enemy_id"), "state.enemy.enemy_id"),
            name=self._require_str(mapping.get("name"), "state.enemy.name"),
            hp_cur=self._require_non_negative_int(mapping.get("hp_cur"), "state.enemy.hp_cur"),
            hp_max=self._require_positive_int(mapping.get("hp_max"), "state.enemy.hp_max"),
            evasion=self._require_int(mapping.get("evasion"), "state.enemy.evasion"),
            defense=self._require_int(mapping.get("defense"), "state.enemy.defense"),
            attack_icons=tuple(self._coerce_str_list(mapping.get("attack_icons"), "state.enemy.attack_icons")),
            dmg_min=self._require_int(mapping.get("dmg_min"), "state.enemy.dmg_min"),
            dmg_max=self._require_int(mapping.get("dmg_max"), "state.enemy.dmg_max"),
            weak=self._coerce_optional_str(mapping.get("weak"), "state.enemy.weak"),
            resist=self._coerce_optional_str(mapping.get("resist"), "state.enemy.resist"),
        )

    def _coerce_reference(self, repo: Any, value: Any, context: str) -> Any:
        if value is None:
            return None
        ref_id = self._require_str(value, context)
        try:
            return repo.get(ref_id)
        except KeyError as exc:
            raise SaveLoadError(f"{context} references unknown id '{ref_id}'.") from exc

    # -----------------------
    # Primitive validators
    # -----------------------
    @staticmethod
    def _require_enum(enum_cls: Type[E], value: Any, context: str) -> E:
        try:
            return enum_cls(value)
        except (TypeError, ValueError) as exc:
            raise SaveLoadError(f"Invalid {context} value: {value!r}") from exc

    def _coerce_optional_enum(self, enum_cls: Type[E], value: Any, context: str) -> E | None:
        if value is None:
            return None
        return self._require_enum(enum_cls, value, context)

    @staticmethod
    def _require_dict(value: Any, context: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise SaveLoadError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_number(value: Any, context: str) -> float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise SaveLoadError(f"{context} must be a number.")
        return float(value)

    def _require_non_negative_int(self, value: Any, context: str) -> int:
        value_int = self._require_int(value, context)
        if value_int < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return value_int

    def _require_positive_int(self, value: Any, context: str) -> int:
        value_int = self._require_int(value, context)
        if value_int < 1:
            raise SaveLoadError(f"{context} must be a positive integer.")
        return value_int

    def _require_hour(self, value: Any) -> int:
        hour = self._require_int(value, "state.hour")
        if not 0 <= hour <= 23:
            raise SaveLoadError("state.hour must be between 0 and 23.")
        return hour

    def _coerce_optional_int(self, value: Any, context: str) -> int | None:
        if value is None:
            return None
        return self._require_int(value, context)

    def _coerce_optional_str(self, value: Any, context: str) -> str | None:
        if value is None:
            return None
        return self._require_str(value, context)

    def _coerce_str_list(self, value: Any, context: str) -> List[str]:
        if not isinstance(value, list):
            raise SaveLoadError(f"{context} must be a list.")
        result: List[str] = []
        for entry in value:
            if not isinstance(entry, str):
                raise SaveLoadError(f"{context} entries must be strings.")
            result.append(entry)
        return result

    def _coerce_int_dict(self, value: Any, context: str) -> Dict[str, int]:
        mapping = self._require_dict(value, context)
        result: Dict[str, int] = {}
        for key, entry in mapping.items():
            if key not in STAT_NAMES:
                raise SaveLoadError(f"{context} has unknown stat '{key}'.")
            result[key] = self._require_int(entry, f"{context}.{key}")
        return result
