"""Scene query: narrative text and the four choices for the current state.

Scenes are never stored. ``build_scene`` derives them from the state every
time it is asked.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from rpgchat.core.types import Node, Phase
from rpgchat.data.content import ContentLibrary
from rpgchat.domain.inventory import BACKPACK_SLOT_CAPACITY, sum_slots, sum_weight
from rpgchat.domain.state import GameState


@dataclass(frozen=True, slots=True)
class SceneChoice:
    id: int
    icon: str
    label: str


@dataclass(frozen=True, slots=True)
class Scene:
    text: str
    choices: Tuple[SceneChoice, ...]


_CUSTOM_CHOICE = SceneChoice(4, "◦", "Свой вариант (описать)")

COMBAT_CHOICES: Tuple[SceneChoice, ...] = (
    SceneChoice(1, "⚔", "Атака оружием"),
    SceneChoice(2, "🛡", "Осторожная стойка"),
    SceneChoice(3, "✦", "Расходник / умение"),
    _CUSTOM_CHOICE,
)


def build_scene(state: GameState, content: ContentLibrary) -> Scene | None:
    """Return the scene for ``state``, or None before play starts."""
    if state.phase is not Phase.PLAY:
        return None
    if state.enemy is not None:
        return Scene(
            text=(
                f"Перед вами {state.enemy.name} — шаги звучат слишком близко. "
                "Секунда тянется, и вы чувствуете, что сейчас решает один ход. "
                "В воздухе пахнет металлом и сыростью."
            ),
            choices=COMBAT_CHOICES,
        )
    return _NODE_SCENES[state.node](state, content)


def _prefix(state: GameState, content: ContentLibrary) -> str:
    return f"({content.universe_title(state.universe, state.canon_title)}) {state.weather}."


def _back_choice(hub: str) -> SceneChoice:
    return SceneChoice(3, "◦", f"Вернуться: {hub}")


def _hub_scene(state: GameState, content: ContentLibrary) -> Scene:
    hub = content.safe_hub(state.universe)
    text = (
        f"{_prefix(state, content)} Вы у входа в {hub}. "
        "На доске объявлений свежая записка, рядом скомканная карта с пометкой “опасно”. "
        "Кто-то шепчет про “странный след” в двух часах пути и обещает награду. "
        "Первый шаг задаст тон всей истории."
    )
    return Scene(
        text=text,
        choices=(
            SceneChoice(1, "◦", "Читать доску объявлений"),
            SceneChoice(2, "◦", "Поговорить с тем, кто шепчет"),
            SceneChoice(3, "◦", "Проверить экипировку/инвентарь"),
            _CUSTOM_CHOICE,
        ),
    )


def _board_scene(state: GameState, content: ContentLibrary) -> Scene:
    hub = content.safe_hub(state.universe)
    text = (
        f"{_prefix(state, content)} Доска объявлений у дверей: {hub}. "
        "Записка просит проверить тракт, где видели “странный след”. "
        "Завсегдатаи косятся на карту с пометкой “опасно”."
    )
    return Scene(
        text=text,
        choices=(
            SceneChoice(1, "◦", "Взять заказ и выйти на тракт"),
            SceneChoice(2, "◦", "Расспросить завсегдатаев о записке"),
            _back_choice(hub),
            _CUSTOM_CHOICE,
        ),
    )


def _whisper_scene(state: GameState, content: ContentLibrary) -> Scene:
    hub = content.safe_hub(state.universe)
    text = (
        f"{_prefix(state, content)} В углу ({hub}) незнакомец в капюшоне говорит вполголоса. "
        "Он то и дело оглядывается на дверь."
    )
    return Scene(
        text=text,
        choices=(
            SceneChoice(1, "◦", "Проследить, на кого он оглядывается"),
            SceneChoice(2, "◦", "Расспросить о странном следе"),
            _back_choice(hub),
            _CUSTOM_CHOICE,
        ),
    )


def _check_scene(state: GameState, content: ContentLibrary) -> Scene:
    hub = content.safe_hub(state.universe)
    weapon = state.equipped.weapon.name if state.equipped.weapon else "—"
    armor = state.equipped.armor.name if state.equipped.armor else "—"
    text = (
        f"{_prefix(state, content)} Вы раскладываете снаряжение. "
        f"Оружие: {weapon}. Броня: {armor}. "
        f"Рюкзак: слоты {sum_slots(state.backpack)}/{BACKPACK_SLOT_CAPACITY}, "
        f"вес {sum_weight(state.backpack):.1f} кг."
    )
    return Scene(
        text=text,
        choices=(
            SceneChoice(1, "◦", "Осмотреться вокруг"),
            SceneChoice(2, "◦", "Спросить трактирщика о новостях"),
            _back_choice(hub),
            _CUSTOM_CHOICE,
        ),
    )


def _road_scene(state: GameState, content: ContentLibrary) -> Scene:
    hub = content.safe_hub(state.universe)
    text = (
        f"{_prefix(state, content)} Тракт уходит от ворот к холмам. "
        "В двух часах пути, говорят, начинается “странный след”."
    )
    return Scene(
        text=text,
        choices=(
            SceneChoice(1, "◦", "Идти по странному следу"),
            SceneChoice(2, "◦", "Окликнуть путников"),
            _back_choice(hub),
            _CUSTOM_CHOICE,
        ),
    )


_NODE_SCENES: Dict[Node, Callable[[GameState, ContentLibrary], Scene]] = {
    Node.HUB: _hub_scene,
    Node.BOARD: _board_scene,
    Node.WHISPER: _whisper_scene,
    Node.CHECK: _check_scene,
    Node.ROAD: _road_scene,
}
