"""Exploration outside combat: node routing and chance checks.

Routing wins over resolution. A choice listed in ``NODE_ROUTES`` for the
current node moves the player and logs the arrival; only a choice with no
route falls through to the resolution keyed on its id.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Mapping

from rpgchat.core.rng import RNG
from rpgchat.core.types import Node
from rpgchat.data.content import ContentLibrary
from rpgchat.domain.state import GameState, log_system
from rpgchat.domain.timekeeping import advance_hour, weather_for_roll
from rpgchat.services.battle_service import BattleService

logger = logging.getLogger(__name__)

NODE_ROUTES: Mapping[Node, Mapping[int, Node]] = {
    Node.HUB: {1: Node.BOARD, 2: Node.WHISPER, 3: Node.CHECK},
    Node.BOARD: {1: Node.ROAD, 3: Node.HUB},
    Node.WHISPER: {3: Node.HUB},
    Node.CHECK: {3: Node.HUB},
    Node.ROAD: {3: Node.HUB},
}

AMBUSH_THRESHOLD = 25
CONVERSATION_THRESHOLD = 50

ARRIVAL_TEXT: Mapping[Node, str] = {
    Node.BOARD: "Вы подходите к доске объявлений. Свежая записка, рядом карта с пометкой «опасно».",
    Node.WHISPER: "Вы подсаживаетесь к тому, кто шепчет про странный след.",
    Node.CHECK: "Вы проверяете ремни и карманы. Всё на месте.",
    Node.ROAD: "Вы выходите на тракт. До странного следа около двух часов пути.",
}
EQUIPMENT_CHECK_PATH = "Проверка снаряжения"
TIP_FOUND_PATH = "Получена наводка на тайник"
TALK_FAILED_PATH = "Срыв разговора"


def advance_clock(state: GameState, rng: RNG) -> GameState:
    """Move the world clock forward one hour and resample the weather."""
    day, hour = advance_hour(state.day, state.hour)
    return replace(state, day=day, hour=hour, weather=weather_for_roll(rng.roll_percent()))


class ExplorationService:
    """Narrative state machine over the five exploration nodes."""

    def __init__(self, content: ContentLibrary, battle_service: BattleService) -> None:
        self._content = content
        self._battle_service = battle_service

    def choose(self, state: GameState, choice: int, text: str | None, rng: RNG) -> GameState:
        target = NODE_ROUTES[state.node].get(choice)
        if target is not None:
            logger.debug("Node %s -> %s", state.node.value, target.value)
            return self._enter_node(state, target)
        if choice == 1:
            return self._lookout_check(state, rng)
        if choice == 2:
            return self._conversation_check(state, rng)
        return log_system(state, f'◦ Ваш вариант: "{text or ""}".')

    def _enter_node(self, state: GameState, node: Node) -> GameState:
        state = replace(state, node=node)
        if node is Node.HUB:
            return log_system(state, f"Вы возвращаетесь: {self._content.safe_hub(state.universe)}.")
        if node is Node.CHECK:
            state = replace(state, journal_path=EQUIPMENT_CHECK_PATH)
        return log_system(state, ARRIVAL_TEXT[node])

    def _lookout_check(self, state: GameState, rng: RNG) -> GameState:
        roll = rng.roll_percent()
        spotted = roll <= AMBUSH_THRESHOLD
        outcome = "⚠️ подозрительная тень" if spotted else "тишина"
        state = log_system(state, f"Вы осматриваетесь. Проверка случая: {roll}/100 → {outcome}")
        if spotted:
            return self._battle_service.start_combat(state)
        return state

    def _conversation_check(self, state: GameState, rng: RNG) -> GameState:
        roll = rng.roll_percent()
        success = roll <= CONVERSATION_THRESHOLD
        outcome = "✅ наводка на тайник" if success else "❌ собеседник ушёл"
        state = replace(state, journal_path=TIP_FOUND_PATH if success else TALK_FAILED_PATH)
        return log_system(state, f"Разговор. Проверка случая: {roll}/100 → {outcome}")
