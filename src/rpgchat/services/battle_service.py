"""Turn-based combat against a single enemy.

One player choice resolves a full round: the player's action, a victory
check, the enemy's counter-attack and a defeat check. Hit chances and damage
are fixed numbers; equipped item stats are not consulted.
"""
from __future__ import annotations

import logging
from dataclasses import replace

from rpgchat.core.rng import RNG
from rpgchat.core.types import Node
from rpgchat.data.content import ContentLibrary
from rpgchat.domain.attribute_scaling import compute_xp_to_next
from rpgchat.domain.inventory import consume_one, find_consumable
from rpgchat.domain.state import GameState, log_system
from rpgchat.services.factories import create_enemy_for_universe

logger = logging.getLogger(__name__)

PLAYER_HIT_CHANCE = 60
PLAYER_DAMAGE = 8
ENEMY_HIT_CHANCE = 55
ENEMY_DAMAGE = 6
VICTORY_XP = 60
HEALTH_POTION_ID = "c_potion"
POTION_HEAL = 14

ATTACK_CHOICE = 1
CONSUMABLE_CHOICE = 3


class BattleService:
    """Combat state machine: no enemy <-> enemy present."""

    def __init__(self, content: ContentLibrary) -> None:
        self._content = content

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_combat(self, state: GameState) -> GameState:
        """Spawn the universe's enemy and enter combat."""
        enemy = create_enemy_for_universe(state.universe, self._content)
        logger.info("Combat started against %s", enemy.enemy_id)
        state = replace(state, enemy=enemy)
        return log_system(state, f"⚠️ {enemy.name} выходит из тени!")

    def resolve_round(self, state: GameState, choice: int, rng: RNG) -> GameState:
        """Resolve one full round for the given choice."""
        if state.enemy is None:
            raise ValueError("Cannot resolve a combat round without an enemy.")

        if choice == ATTACK_CHOICE:
            state = self._player_attack(state, rng)
            if state.enemy is not None and not state.enemy.is_alive:
                return self._finalize_victory(state)
        elif choice == CONSUMABLE_CHOICE:
            state = self._drink_potion(state)
        else:
            state = log_system(state, "🛡/◦ Вы действуете осторожно, выбирая позицию.")

        state = self._enemy_attack(state, rng)
        if state.hp_cur <= 0:
            return self._finalize_defeat(state)
        return state

    # -----------------------
    # Player Actions
    # -----------------------
    def _player_attack(self, state: GameState, rng: RNG) -> GameState:
        assert state.enemy is not None
        roll = rng.roll_percent()
        if roll > PLAYER_HIT_CHANCE:
            return log_system(state, f"⚔️ Промах. Шанс {PLAYER_HIT_CHANCE}% | Проверка {roll}/100")
        enemy = replace(state.enemy, hp_cur=max(0, state.enemy.hp_cur - PLAYER_DAMAGE))
        state = replace(state, enemy=enemy)
        return log_system(
            state,
            f"⚔️ Попадание. Шанс {PLAYER_HIT_CHANCE}% | Проверка {roll}/100\n"
            f"Итоговый урон: {PLAYER_DAMAGE} | ❤️ HP врага: {enemy.hp_cur}/{enemy.hp_max}",
        )

    def _drink_potion(self, state: GameState) -> GameState:
        index = find_consumable(state.backpack, HEALTH_POTION_ID)
        if index is None:
            return log_system(state, "✦ Нет зелья в рюкзаке")
        hp_cur = min(state.hp_max, state.hp_cur + POTION_HEAL)
        state = replace(state, backpack=consume_one(state.backpack, index), hp_cur=hp_cur)
        return log_system(state, f"✦ Лечение: +{POTION_HEAL} HP → ❤️ {state.hp_cur}/{state.hp_max}")

    # -----------------------
    # Enemy AI
    # -----------------------
    def _enemy_attack(self, state: GameState, rng: RNG) -> GameState:
        roll = rng.roll_percent()
        if roll > ENEMY_HIT_CHANCE:
            return log_system(state, f"Ответ врага: промах. Проверка {roll}/100")
        state = replace(state, hp_cur=max(0, state.hp_cur - ENEMY_DAMAGE))
        return log_system(
            state,
            f"Ответ врага: попадание. Проверка {roll}/100\n"
            f"Урон: {ENEMY_DAMAGE} | Ваше ❤️ {state.hp_cur}/{state.hp_max}",
        )

    # -----------------------
    # Outcomes
    # -----------------------
    def _finalize_victory(self, state: GameState) -> GameState:
        assert state.enemy is not None
        logger.info("Combat won against %s", state.enemy.enemy_id)
        state = replace(state, xp=state.xp + VICTORY_XP, enemy=None)
        state = log_system(state, f"🏁 Победа! ⭐ XP +{VICTORY_XP}")
        if state.xp >= state.xp_to_next:
            level = state.level + 1
            state = replace(
                state,
                level=level,
                xp=state.xp - state.xp_to_next,
                xp_to_next=compute_xp_to_next(level),
            )
            state = log_system(state, f"🏅 УРОВЕНЬ ПОВЫШЕН! LV {level}")
        return state

    def _finalize_defeat(self, state: GameState) -> GameState:
        logger.info("Combat lost; returning to the safe hub")
        state = log_system(state, "☠️ Вы пали. Возврат в безопасную точку. Рюкзак потерян.")
        return replace(
            state,
            backpack=(),
            hp_cur=state.hp_max,
            location=self._content.safe_hub(state.universe),
            node=Node.HUB,
            enemy=None,
        )
