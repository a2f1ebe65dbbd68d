"""Backpack and equipment item models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal

ItemType = Literal["weapon", "armor", "accessory", "consumable", "material", "quest"]


@dataclass(frozen=True, slots=True)
class Item:
    """A carried item. A missing quantity counts as one."""

    id: str
    rarity: str
    name: str
    type: ItemType
    weight: float
    slots: int
    qty: int | None = None
    tags: tuple[str, ...] = ()
    notes: str | None = None

    @property
    def count(self) -> int:
        return self.qty if self.qty is not None else 1


@dataclass(frozen=True, slots=True)
class WeaponItem(Item):
    dmg_min: int | None = None
    dmg_max: int | None = None
    dmg_icons: tuple[str, ...] = ()
    req_str: int | None = None
    req_dex: int | None = None


@dataclass(frozen=True, slots=True)
class ArmorItem(Item):
    defense: int | None = None
    bonuses: Dict[str, int] = field(default_factory=dict)
    penalties: Dict[str, int] = field(default_factory=dict)
