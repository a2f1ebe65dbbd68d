"""UI-agnostic session controller: one action in, one new state out."""
from __future__ import annotations

import logging
from typing import Callable, Dict

from rpgchat.core.rng import RNG
from rpgchat.core.types import Phase
from rpgchat.data.content import ContentLibrary, get_default_content
from rpgchat.domain.actions import (
    Action,
    PickChoice,
    SelectBackground,
    SelectClass,
    SelectRace,
    SelectSex,
    SelectUniverse,
    SelectWear,
    SubmitCanon,
    SubmitText,
)
from rpgchat.domain.state import GameState, log_player, log_system, make_initial_state
from rpgchat.services.battle_service import BattleService
from rpgchat.services.command_service import CommandService, is_command
from rpgchat.services.creation_service import SEX_OPTIONS, CharacterCreationService
from rpgchat.services.exploration_service import ExplorationService, advance_clock
from rpgchat.services.scene_service import Scene, build_scene

logger = logging.getLogger(__name__)

CHOICE_IDS = (1, 2, 3, 4)
CUSTOM_CHOICE = 4
DESCRIBE_PROMPT = "Введите свой вариант текстом."

PhaseHandler = Callable[[GameState, Action], GameState]


class SessionController:
    """
    Routes a player action to the sub-machine that owns the current phase.

    Responsibilities:
    - Reject actions that do not fit the current phase (state returned as is)
    - Parse typed input during play into commands or numbered choices
    - Advance the world clock once per numbered choice
    - Send numbered choices to combat or exploration

    Non-responsibilities (handled by the presentation layer):
    - Rendering the log, HUD and scene
    - Persisting the state
    """

    def __init__(self, content: ContentLibrary | None = None, rng: RNG | None = None) -> None:
        self._content = content or get_default_content()
        self._rng = rng or RNG()
        self._creation = CharacterCreationService(self._content)
        self._battle = BattleService(self._content)
        self._exploration = ExplorationService(self._content, self._battle)
        self._commands = CommandService(self._content)
        self._handlers: Dict[Phase, PhaseHandler] = {
            Phase.SETTINGS: self._handle_settings,
            Phase.CANON_MODE: self._handle_canon_mode,
            Phase.CUSTOM_RULES: self._handle_custom_rules,
            Phase.CHAR_SEX: self._handle_sex,
            Phase.CHAR_NAME: self._handle_name,
            Phase.CHAR_RACE: self._handle_race,
            Phase.CHAR_CLASS: self._handle_class,
            Phase.CHAR_BG: self._handle_background,
            Phase.PLAY: self._handle_play,
        }
        missing = set(Phase) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for phases: {sorted(p.value for p in missing)}")

    @property
    def content(self) -> ContentLibrary:
        return self._content

    def new_session(self) -> GameState:
        return make_initial_state()

    def scene(self, state: GameState) -> Scene | None:
        return build_scene(state, self._content)

    def dispatch(self, state: GameState, action: Action) -> GameState:
        """Apply ``action`` and return the resulting state."""
        return self._handlers[state.phase](state, action)

    # -----------------------
    # Creation phases
    # -----------------------
    def _handle_settings(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SelectWear):
            return self._creation.select_wear(state, action.wear)
        if isinstance(action, SelectUniverse):
            return self._creation.select_universe(state, action.universe)
        return self._ignore(state, action)

    def _handle_canon_mode(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SubmitCanon):
            return self._creation.submit_canon(state, action.title, action.mode)
        return self._ignore(state, action)

    def _handle_custom_rules(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SubmitText):
            return self._creation.submit_custom_rules(state, action.text)
        return self._ignore(state, action)

    def _handle_sex(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SelectSex) and action.sex in SEX_OPTIONS:
            return self._creation.select_sex(state, action.sex)
        return self._ignore(state, action)

    def _handle_name(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SubmitText):
            return self._creation.submit_name(state, action.text)
        return self._ignore(state, action)

    def _handle_race(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SelectRace):
            return self._creation.select_race(state, action.race_id)
        return self._ignore(state, action)

    def _handle_class(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SelectClass):
            return self._creation.select_class(state, action.class_id)
        return self._ignore(state, action)

    def _handle_background(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SelectBackground):
            return self._creation.select_background(state, action.background_id)
        return self._ignore(state, action)

    # -----------------------
    # Play
    # -----------------------
    def _handle_play(self, state: GameState, action: Action) -> GameState:
        if isinstance(action, SubmitText):
            return self._handle_play_text(state, action.text)
        if isinstance(action, PickChoice) and action.choice in CHOICE_IDS:
            return self._pick(state, action.choice, action.text)
        return self._ignore(state, action)

    def _handle_play_text(self, state: GameState, raw: str) -> GameState:
        text = raw.strip()
        if not text:
            return state
        if is_command(text):
            return self._commands.execute(state, text)
        if text in ("1", "2", "3"):
            return self._pick(state, int(text), None)
        if text == "4":
            return log_system(state, DESCRIBE_PROMPT)
        return self._pick(state, CUSTOM_CHOICE, text)

    def _pick(self, state: GameState, choice: int, text: str | None) -> GameState:
        description = text.strip() if text else ""
        if choice == CUSTOM_CHOICE and description:
            state = log_player(state, f"{choice}) ◦ {description}")
        else:
            state = log_player(state, f"{choice})")
        state = advance_clock(state, self._rng)
        if state.in_combat:
            return self._battle.resolve_round(state, choice, self._rng)
        return self._exploration.choose(state, choice, description or None, self._rng)

    @staticmethod
    def _ignore(state: GameState, action: Action) -> GameState:
        logger.debug("Ignoring %s during phase %s", type(action).__name__, state.phase.value)
        return state
