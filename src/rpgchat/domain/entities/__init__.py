"""Runtime entity exports."""

from .effect import Effect
from .enemy import Enemy
from .equipment import Durability, Equipment
from .item import ArmorItem, Item, ItemType, WeaponItem
from .stats import BASE_STAT_VALUE, STAT_FLOOR, STAT_NAMES, Stats

__all__ = [
    "ArmorItem",
    "BASE_STAT_VALUE",
    "Durability",
    "Effect",
    "Enemy",
    "Equipment",
    "Item",
    "ItemType",
    "STAT_FLOOR",
    "STAT_NAMES",
    "Stats",
    "WeaponItem",
]
