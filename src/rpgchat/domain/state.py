"""Root game-state aggregate.

``GameState`` is frozen. Services build a successor with
``dataclasses.replace`` so untouched tuples and records are shared with the
previous state instead of copied.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

from rpgchat.core.types import CanonMode, Node, Phase, Role, Universe, WearMode
from rpgchat.domain.attribute_scaling import XP_FIRST_THRESHOLD
from rpgchat.domain.defs import BackgroundDef, ClassDef, RaceDef
from rpgchat.domain.entities import Effect, Enemy, Equipment, Item, Stats
from rpgchat.domain.timekeeping import CLEAR_WEATHER

PLACEHOLDER = "—"
WELCOME_TEXT = "Игра готова. Выберите настройки старта (износ + вселенная)."


@dataclass(frozen=True, slots=True)
class LogEntry:
    role: Role
    text: str


@dataclass(frozen=True, slots=True)
class GameState:
    """Everything a session needs to resume play."""

    phase: Phase = Phase.SETTINGS
    node: Node = Node.HUB
    wear: WearMode = WearMode.OFF
    universe: Universe | None = None
    canon_title: str | None = None
    canon_mode: CanonMode | None = None
    custom_rules: str | None = None

    day: int = 1
    hour: int = 8
    weather: str = CLEAR_WEATHER
    location: str = PLACEHOLDER
    journal_path: str = PLACEHOLDER

    sex: str | None = None
    name: str | None = None
    race: RaceDef | None = None
    char_class: ClassDef | None = None
    background: BackgroundDef | None = None

    level: int = 1
    xp: int = 0
    xp_to_next: int = XP_FIRST_THRESHOLD

    hp_cur: int = 30
    hp_max: int = 30
    mp_cur: int = 15
    mp_max: int = 15

    stats: Stats = field(default_factory=Stats.uniform)
    equipped: Equipment = field(default_factory=Equipment)
    backpack: Tuple[Item, ...] = ()
    money: int = 0

    effects: Tuple[Effect, ...] = ()
    loot_journal: Tuple[str, ...] = ()
    log: Tuple[LogEntry, ...] = ()

    enemy: Enemy | None = None

    @property
    def in_combat(self) -> bool:
        return self.enemy is not None


def make_initial_state() -> GameState:
    """Return the fresh SETTINGS-phase state a new session starts from."""
    return GameState(log=(LogEntry(Role.SYSTEM, WELCOME_TEXT),))


def append_log(state: GameState, role: Role, text: str) -> GameState:
    """Return ``state`` with one more log line."""
    return replace(state, log=state.log + (LogEntry(role, text),))


def log_player(state: GameState, text: str) -> GameState:
    return append_log(state, Role.PLAYER, text)


def log_system(state: GameState, text: str) -> GameState:
    return append_log(state, Role.SYSTEM, text)
