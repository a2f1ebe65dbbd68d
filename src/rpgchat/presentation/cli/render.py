"""Shared CLI rendering helpers.

``format_*`` helpers build lines and never print; ``render_*`` helpers print
through an injectable ``print_func``.
"""
from __future__ import annotations

import textwrap
from typing import Callable, Iterable, Mapping, Sequence

from rpgchat.core.types import Role
from rpgchat.data.content import ContentLibrary
from rpgchat.domain.defs import BackgroundDef, ClassDef, RaceDef
from rpgchat.domain.inventory import BACKPACK_SLOT_CAPACITY, sum_slots, sum_weight
from rpgchat.domain.state import PLACEHOLDER, GameState, LogEntry
from rpgchat.domain.timekeeping import format_clock
from rpgchat.services.scene_service import Scene

PrintFunc = Callable[[str], None]

DEFAULT_WIDTH = 78
STAT_ICONS: Mapping[str, str] = {
    "STR": "💪",
    "DEX": "🎯",
    "END": "🛡️",
    "INT": "🧠",
    "CHA": "🗣️",
    "LUCK": "🍀",
}
_ROLE_PREFIX = {Role.SYSTEM: "» ", Role.PLAYER: "Вы: "}
LOOT_PREVIEW_COUNT = 2


def wrap_text(text: str, width: int = DEFAULT_WIDTH, *, indent_continuation: bool = True) -> list[str]:
    """
    Wrap text on word boundaries, keeping explicit line breaks.

    Args:
        text: The text to wrap
        width: Maximum width per line
        indent_continuation: If True, indent continuation lines with 2 spaces

    Returns:
        List of wrapped lines
    """
    if not text or width <= 0:
        return [text] if text else [""]
    subsequent_indent = "  " if indent_continuation else ""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if not paragraph:
            lines.append("")
            continue
        lines.extend(
            textwrap.wrap(
                paragraph,
                width=width,
                subsequent_indent=subsequent_indent,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )
    return lines


def format_bonuses(bonuses: Mapping[str, int] | None) -> str:
    """Return '💪+1 🎯+2' style text, or a dash when nothing is granted."""
    if not bonuses:
        return PLACEHOLDER
    parts = [f"{icon}+{bonuses[name]}" for name, icon in STAT_ICONS.items() if bonuses.get(name)]
    return " ".join(parts) if parts else PLACEHOLDER


def format_race_or_class(entry: RaceDef | ClassDef) -> str:
    return (
        f"{entry.name}: {entry.desc}\n"
        f"Бонусы: {format_bonuses(entry.bonuses)} | Слабость: {entry.weakness} | "
        f"Влияние: {entry.world_impact}"
    )


def format_background(entry: BackgroundDef) -> str:
    return f"{entry.name}: {entry.desc}\nБонус: {format_bonuses(entry.bonus)} | Перк: {entry.perk}"


def format_hud(state: GameState, content: ContentLibrary) -> list[str]:
    """Return the status panel shown during play."""
    stats = state.stats
    weapon = state.equipped.weapon
    armor = state.equipped.armor
    weapon_line = PLACEHOLDER
    if weapon is not None:
        dmg_min = weapon.dmg_min if weapon.dmg_min is not None else PLACEHOLDER
        dmg_max = weapon.dmg_max if weapon.dmg_max is not None else PLACEHOLDER
        weapon_line = f"{weapon.rarity} {weapon.name} ({dmg_min}–{dmg_max})"
    armor_line = f"{armor.rarity} {armor.name}" if armor is not None else PLACEHOLDER
    race = state.race.name if state.race else PLACEHOLDER
    char_class = state.char_class.name if state.char_class else PLACEHOLDER
    loot = state.loot_journal[:LOOT_PREVIEW_COUNT]
    return [
        f"🕒 Время: {format_clock(state.day, state.hour)} | 🌦️ {state.weather}",
        f"📍 Локация: {state.location}",
        f"🧑 Персонаж: {state.name or PLACEHOLDER} — {race}/{char_class}",
        f"🏅 Уровень: {state.level} | ⭐ Опыт: {state.xp} / {state.xp_to_next}",
        f"❤️ HP: {state.hp_cur}/{state.hp_max} | 🔷 MP: {state.mp_cur}/{state.mp_max}",
        f"💪 {stats.STR}  🎯 {stats.DEX}  🛡️ {stats.END}  🧠 {stats.INT}  🗣️ {stats.CHA}  🍀 {stats.LUCK}",
        f"⚔️ Оружие: {weapon_line} | Броня: {armor_line}",
        (
            f"🎒 Рюкзак: слоты {sum_slots(state.backpack)}/{BACKPACK_SLOT_CAPACITY} | "
            f"вес {sum_weight(state.backpack):.1f} кг"
        ),
        f"💰 Деньги: {state.money} {content.currency(state.universe)}",
        f"🧭 Журнал пути: {state.journal_path}",
        f"📒 Добыча: {' | '.join(loot) if loot else PLACEHOLDER}",
    ]


def format_enemy_panel(state: GameState) -> list[str]:
    enemy = state.enemy
    if enemy is None:
        return []
    return [
        f"👹 {enemy.name}",
        f"❤️ HP: {enemy.hp_cur}/{enemy.hp_max}",
        f"🌀 УКЛ: {enemy.evasion} | 🧱 ЗАЩ: {enemy.defense}",
        f"Слабость: {enemy.weak or PLACEHOLDER} | Сопротивление: {enemy.resist or PLACEHOLDER}",
        f"Атаки: {' '.join(enemy.attack_icons)} ({enemy.dmg_min}–{enemy.dmg_max})",
    ]


def format_log_entry(entry: LogEntry) -> list[str]:
    prefix = _ROLE_PREFIX[entry.role]
    lines = entry.text.split("\n")
    return [prefix + lines[0], *("   " + line for line in lines[1:])]


def format_scene(scene: Scene, width: int = DEFAULT_WIDTH) -> list[str]:
    lines = wrap_text(scene.text, width, indent_continuation=False)
    lines.extend(f"{choice.id}) {choice.icon}  {choice.label}" for choice in scene.choices)
    return lines


def render_heading(title: str, print_func: PrintFunc = print) -> None:
    """Print a consistent section heading."""
    print_func(f"\n=== {title} ===")


def render_lines(lines: Iterable[str], print_func: PrintFunc = print) -> None:
    for line in lines:
        print_func(line)


def render_menu(title: str, options: Sequence[str], print_func: PrintFunc = print) -> None:
    """Display a menu section with numbered options."""
    render_heading(title, print_func)
    for idx, label in enumerate(options, start=1):
        print_func(f"{idx}) {label}")


def render_log(entries: Iterable[LogEntry], print_func: PrintFunc = print) -> None:
    for entry in entries:
        render_lines(format_log_entry(entry), print_func)
