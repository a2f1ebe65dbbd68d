"""Read-only slash commands available during play."""
from __future__ import annotations

import logging
from typing import Callable, Dict

from rpgchat.data.content import ContentLibrary
from rpgchat.domain.entities import Item
from rpgchat.domain.state import PLACEHOLDER, GameState, log_player, log_system
from rpgchat.services.creation_service import wear_label

logger = logging.getLogger(__name__)

HELP_TEXT = "Команды: /статы /экип /инвентарь /настройки /помощь"
UNKNOWN_COMMAND_TEXT = "Неизвестная команда. /помощь"
EMPTY_BACKPACK_TEXT = "Рюкзак пуст."


def is_command(text: str) -> bool:
    return text.strip().startswith("/")


class CommandService:
    """Answers slash commands by appending text to the log.

    A command never changes anything but the log.
    """

    def __init__(self, content: ContentLibrary) -> None:
        self._content = content
        handlers: Dict[str, Callable[[GameState], str]] = {
            "/помощь": self._help,
            "/статы": self._stats,
            "/инвентарь": self._inventory,
            "/экип": self._equipment,
            "/настройки": self._settings,
        }
        aliases = {
            "/help": "/помощь",
            "/stats": "/статы",
            "/inventory": "/инвентарь",
            "/equipment": "/экип",
            "/settings": "/настройки",
        }
        for alias, target in aliases.items():
            handlers[alias] = handlers[target]
        self._handlers = handlers

    def execute(self, state: GameState, text: str) -> GameState:
        command = text.strip()
        state = log_player(state, command)
        handler = self._handlers.get(command.lower())
        if handler is None:
            logger.debug("Unknown command %r", command)
            return log_system(state, UNKNOWN_COMMAND_TEXT)
        return log_system(state, handler(state))

    @staticmethod
    def _help(state: GameState) -> str:
        return HELP_TEXT

    @staticmethod
    def _stats(state: GameState) -> str:
        s = state.stats
        return f"💪 {s.STR} 🎯 {s.DEX} 🛡️ {s.END} 🧠 {s.INT} 🗣️ {s.CHA} 🍀 {s.LUCK}"

    @staticmethod
    def _inventory(state: GameState) -> str:
        if not state.backpack:
            return EMPTY_BACKPACK_TEXT
        return "\n".join(_describe_item(item) for item in state.backpack)

    @staticmethod
    def _equipment(state: GameState) -> str:
        weapon = state.equipped.weapon
        armor = state.equipped.armor
        return (
            f"Оружие: {_label(weapon)}\n"
            f"Броня: {_label(armor)}"
        )

    def _settings(self, state: GameState) -> str:
        title = self._content.universe_title(state.universe, state.canon_title)
        return f"Износ: {wear_label(state.wear)}\nВселенная: {title}"


def _label(item: Item | None) -> str:
    if item is None:
        return PLACEHOLDER
    return f"{item.rarity} {item.name}"


def _describe_item(item: Item) -> str:
    qty = f" x{item.qty}" if item.qty else ""
    return f"— {item.rarity} {item.name}{qty} ({item.weight:g}кг, слоты {item.slots})"
