"""Finalization: turns creation selections into a playable character."""
from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from rpgchat.core.types import Node, Phase
from rpgchat.data.content import ContentLibrary
from rpgchat.domain.attribute_scaling import apply_bonuses, derive_hp_max, derive_mp_max
from rpgchat.domain.defs import BackgroundDef
from rpgchat.domain.entities import ArmorItem, Equipment, Item, Stats, WeaponItem
from rpgchat.domain.state import GameState
from rpgchat.domain.timekeeping import format_clock
from rpgchat.services.errors import FactoryError

STARTING_MONEY = 40
STARTER_WEAPON_ID = "w_dagger"
STARTER_ARMOR_ID = "a_tunic"
STARTER_POTION_ID = "c_potion"
STARTER_POTION_QTY = 2


def compute_final_stats(state: GameState, background: BackgroundDef) -> Stats:
    """Fold race, class and background bonuses onto the base 3s."""
    stats = Stats.uniform()
    stats = apply_bonuses(stats, state.race.bonuses if state.race else None)
    stats = apply_bonuses(stats, state.char_class.bonuses if state.char_class else None)
    return apply_bonuses(stats, background.bonus)


def build_starter_kit(content: ContentLibrary) -> Tuple[WeaponItem, ArmorItem, Tuple[Item, ...]]:
    """Return the starting weapon, armor and backpack."""
    weapon = _get_item(content, STARTER_WEAPON_ID)
    armor = _get_item(content, STARTER_ARMOR_ID)
    potion = _get_item(content, STARTER_POTION_ID)
    if not isinstance(weapon, WeaponItem):
        raise FactoryError(f"Starter weapon '{STARTER_WEAPON_ID}' is not a weapon.")
    if not isinstance(armor, ArmorItem):
        raise FactoryError(f"Starter armor '{STARTER_ARMOR_ID}' is not armor.")
    return weapon, armor, (replace(potion, qty=STARTER_POTION_QTY),)


def finalize_character(
    state: GameState, background: BackgroundDef, content: ContentLibrary
) -> GameState:
    """Apply the background and move the session into PLAY."""
    stats = compute_final_stats(state, background)
    hp_max = derive_hp_max(stats)
    mp_max = derive_mp_max(stats)
    location = content.safe_hub(state.universe)
    weapon, armor, backpack = build_starter_kit(content)

    stamp = f"[{format_clock(state.day, state.hour)}]"
    loot_journal = state.loot_journal + tuple(
        f"{stamp} + {_describe_acquisition(item)} — старт" for item in (weapon, armor, *backpack)
    )
    return replace(
        state,
        background=background,
        stats=stats,
        hp_max=hp_max,
        hp_cur=hp_max,
        mp_max=mp_max,
        mp_cur=mp_max,
        location=location,
        journal_path=f"Старт → {location}",
        money=STARTING_MONEY,
        equipped=replace(state.equipped, weapon=weapon, armor=armor),
        backpack=backpack,
        loot_journal=loot_journal,
        phase=Phase.PLAY,
        node=Node.HUB,
    )


def _get_item(content: ContentLibrary, item_id: str) -> Item:
    try:
        return content.items.get(item_id)
    except KeyError as exc:
        raise FactoryError(f"Item '{item_id}' not found.") from exc


def _describe_acquisition(item: Item) -> str:
    suffix = f" x{item.qty}" if item.qty else ""
    return f"{item.rarity} {item.name}{suffix}"
