"""Backpack accounting helpers.

Capacity is advisory: nothing here refuses an item because the backpack is
over its slot count.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from rpgchat.domain.entities import Item

BACKPACK_SLOT_CAPACITY = 10


def sum_weight(items: Iterable[Item]) -> float:
    """Total weight, counting each entry max(qty, 1) times."""
    return sum(item.weight * max(item.count, 1) for item in items)


def sum_slots(items: Iterable[Item]) -> int:
    """Total slot cost, counting each entry max(qty, 1) times."""
    return sum(item.slots * max(item.count, 1) for item in items)


def find_consumable(items: Sequence[Item], item_id: str) -> int | None:
    """Return the index of the first entry of ``item_id`` with units left."""
    for index, item in enumerate(items):
        if item.id == item_id and item.count > 0:
            return index
    return None


def consume_one(items: Sequence[Item], index: int) -> tuple[Item, ...]:
    """Return a new backpack with one unit of ``items[index]`` used up."""
    item = items[index]
    remaining = item.count - 1
    updated = list(items)
    if remaining <= 0:
        del updated[index]
    else:
        updated[index] = replace(item, qty=remaining)
    return tuple(updated)
