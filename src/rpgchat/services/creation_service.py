"""Character creation: the onboarding phases before play starts."""
from __future__ import annotations

import logging
from dataclasses import replace

from rpgchat.core.types import CanonMode, Phase, Universe, WearMode
from rpgchat.data.content import ContentLibrary
from rpgchat.domain.state import GameState, log_player, log_system
from rpgchat.services.errors import FactoryError
from rpgchat.services.factories import finalize_character

logger = logging.getLogger(__name__)

SEX_OPTIONS: tuple[str, ...] = ("Мужской", "Женский", "Не важно")
DEFAULT_NAME = "Безымянный"
DEFAULT_CANON_TITLE = "Без названия"
DEFAULT_CUSTOM_RULES = "Правила не заданы"
CHARACTER_READY_TEXT = "Персонаж создан. Игра началась."

_UNIVERSE_NEXT_PHASE = {
    Universe.CANON: Phase.CANON_MODE,
    Universe.CUSTOM: Phase.CUSTOM_RULES,
}


def wear_label(wear: WearMode) -> str:
    return "✅ ВКЛ" if wear is WearMode.ON else "❌ ВЫКЛ"


def canon_mode_label(mode: CanonMode) -> str:
    return "A" if mode is CanonMode.A_STORYLIKE else "B"


class CharacterCreationService:
    """Applies one onboarding selection at a time.

    Callers are expected to route by phase; every method assumes the state is
    in the phase it handles and returns a new state with the player's line
    logged.
    """

    def __init__(self, content: ContentLibrary) -> None:
        self._content = content

    def select_wear(self, state: GameState, wear: WearMode) -> GameState:
        state = replace(state, wear=wear)
        return log_player(state, f"A) Износ: {wear_label(wear)}")

    def select_universe(self, state: GameState, universe: Universe) -> GameState:
        next_phase = _UNIVERSE_NEXT_PHASE.get(universe, Phase.CHAR_SEX)
        state = replace(state, universe=universe, phase=next_phase)
        return log_player(state, f"B) Вселенная: {self._content.universe_title(universe)}")

    def submit_canon(self, state: GameState, title: str, mode: CanonMode) -> GameState:
        canon_title = title.strip() or DEFAULT_CANON_TITLE
        state = replace(state, canon_title=canon_title, canon_mode=mode, phase=Phase.CHAR_SEX)
        return log_player(state, f"Канон: {canon_title} | Режим: {canon_mode_label(mode)}")

    def submit_custom_rules(self, state: GameState, text: str) -> GameState:
        rules = text.strip() or DEFAULT_CUSTOM_RULES
        state = replace(state, custom_rules=rules, phase=Phase.CHAR_SEX)
        return log_player(state, f"Правила мира: {rules}")

    def select_sex(self, state: GameState, sex: str) -> GameState:
        state = replace(state, sex=sex, phase=Phase.CHAR_NAME)
        return log_player(state, f"Пол: {sex}")

    def submit_name(self, state: GameState, text: str) -> GameState:
        name = text.strip() or DEFAULT_NAME
        state = replace(state, name=name, phase=Phase.CHAR_RACE)
        return log_player(state, f"Имя: {name}")

    def select_race(self, state: GameState, race_id: str) -> GameState:
        try:
            race = self._content.races.get(race_id)
        except KeyError as exc:
            raise FactoryError(f"Race '{race_id}' not found.") from exc
        state = replace(state, race=race, phase=Phase.CHAR_CLASS)
        return log_player(state, f"Раса: {race.name}")

    def select_class(self, state: GameState, class_id: str) -> GameState:
        try:
            class_def = self._content.classes.get(class_id)
        except KeyError as exc:
            raise FactoryError(f"Class '{class_id}' not found.") from exc
        state = replace(state, char_class=class_def, phase=Phase.CHAR_BG)
        return log_player(state, f"Класс: {class_def.name}")

    def select_background(self, state: GameState, background_id: str) -> GameState:
        """Pick a background and finalize the character."""
        try:
            background = self._content.backgrounds.get(background_id)
        except KeyError as exc:
            raise FactoryError(f"Background '{background_id}' not found.") from exc
        state = finalize_character(state, background, self._content)
        logger.info(
            "Character finalized: %s (%s/%s/%s) in %s",
            state.name,
            state.race.name if state.race else "?",
            state.char_class.name if state.char_class else "?",
            background.name,
            state.universe.value if state.universe else "?",
        )
        state = log_player(state, f"Предыстория: {background.name}")
        return log_system(state, CHARACTER_READY_TEXT)
