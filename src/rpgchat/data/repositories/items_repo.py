"""Item templates repository (starter gear and consumables)."""
from __future__ import annotations

from typing import Dict, get_args

from rpgchat.data.errors import DataValidationError
from rpgchat.data.repositories.base import RepositoryBase
from rpgchat.domain.entities import ArmorItem, Item, ItemType, WeaponItem

_ITEM_TYPES = set(get_args(ItemType))
_BASE_FIELDS = {"rarity", "name", "type", "weight", "slots"}
_COMMON_OPTIONAL = {"qty", "tags", "notes"}
_WEAPON_FIELDS = {"dmg_min", "dmg_max", "dmg_icons", "req_str", "req_dex"}
_ARMOR_FIELDS = {"defense", "bonuses", "penalties"}


class ItemsRepository(RepositoryBase[Item]):
    """Loads item templates; weapons and armor keep their combat fields."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Item]:
        items: Dict[str, Item] = {}
        for raw_id, payload in raw.items():
            context = f"item '{raw_id}'"
            data = self._require_mapping(payload, context)
            item_type = self._require_str(data.get("type"), f"{context} type")
            if item_type not in _ITEM_TYPES:
                raise DataValidationError(f"{context} has unknown type '{item_type}'.")
            extra = _WEAPON_FIELDS if item_type == "weapon" else _ARMOR_FIELDS if item_type == "armor" else set()
            self._assert_exact_fields(data, _BASE_FIELDS, context, optional_fields=_COMMON_OPTIONAL | extra)

            slots = self._require_int(data["slots"], f"{context} slots")
            if not 1 <= slots <= 3:
                raise DataValidationError(f"{context} slots must be between 1 and 3.")
            common = dict(
                id=raw_id,
                rarity=self._require_str(data["rarity"], f"{context} rarity"),
                name=self._require_str(data["name"], f"{context} name"),
                type=item_type,
                weight=self._require_number(data["weight"], f"{context} weight"),
                slots=slots,
                qty=self._optional_int(data.get("qty"), f"{context} qty"),
                tags=tuple(self._require_str_list(data.get("tags", []), f"{context} tags")),
                notes=self._require_optional_str(data.get("notes"), f"{context} notes"),
            )
            if item_type == "weapon":
                items[raw_id] = WeaponItem(
                    **common,
                    dmg_min=self._optional_int(data.get("dmg_min"), f"{context} dmg_min"),
                    dmg_max=self._optional_int(data.get("dmg_max"), f"{context} dmg_max"),
                    dmg_icons=tuple(self._require_str_list(data.get("dmg_icons", []), f"{context} dmg_icons")),
                    req_str=self._optional_int(data.get("req_str"), f"{context} req_str"),
                    req_dex=self._optional_int(data.get("req_dex"), f"{context} req_dex"),
                )
            elif item_type == "armor":
                items[raw_id] = ArmorItem(
                    **common,
                    defense=self._optional_int(data.get("defense"), f"{context} defense"),
                    bonuses=self._require_stat_map(data.get("bonuses", {}), f"{context} bonuses"),
                    penalties=self._require_stat_map(data.get("penalties", {}), f"{context} penalties"),
                )
            else:
                items[raw_id] = Item(**common)
        return items

    @classmethod
    def _optional_int(cls, value: object, context: str) -> int | None:
        if value is None:
            return None
        return cls._require_int(value, context)
