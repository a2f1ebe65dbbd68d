"""Console-driven UI loop for rpgchat."""
from __future__ import annotations

import argparse
import logging
import secrets
from pathlib import Path
from typing import Callable, List, Sequence, TypeVar

from rpgchat.core.rng import RNG
from rpgchat.core.types import CanonMode, Phase, Universe, WearMode
from rpgchat.data.content import ContentLibrary, get_default_content
from rpgchat.domain.actions import (
    Action,
    SelectBackground,
    SelectClass,
    SelectRace,
    SelectSex,
    SelectUniverse,
    SelectWear,
    SubmitCanon,
    SubmitText,
)
from rpgchat.domain.state import GameState
from rpgchat.presentation.cli import config
from rpgchat.presentation.cli.render import (
    PrintFunc,
    format_background,
    format_enemy_panel,
    format_hud,
    format_race_or_class,
    format_scene,
    render_heading,
    render_lines,
    render_log,
    render_menu,
)
from rpgchat.presentation.cli.session_store import SessionStore
from rpgchat.services.controllers import SessionController
from rpgchat.services.creation_service import SEX_OPTIONS, wear_label
from rpgchat.services.save_service import SaveService

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
T = TypeVar("T")

_MAX_RANDOM_SEED = 2**31 - 1
PAGE_SIZE = 5
PAGE_PREV = "<"
PAGE_NEXT = ">"
QUIT_COMMANDS = ("/выход", "/quit")

_SETTINGS_OPTIONS: tuple[tuple[str, Action], ...] = (
    (f"Износ: {wear_label(WearMode.ON)}", SelectWear(WearMode.ON)),
    (f"Износ: {wear_label(WearMode.OFF)}", SelectWear(WearMode.OFF)),
    ("Вселенная: Классическое фэнтези", SelectUniverse(Universe.CLASSIC_FANTASY)),
    ("Вселенная: Тёмное фэнтези", SelectUniverse(Universe.DARK_FANTASY)),
    ("Вселенная: Аниме-исэкай", SelectUniverse(Universe.ANIME_ISEKAI)),
    ("Вселенная: Канон", SelectUniverse(Universe.CANON)),
    ("Вселенная: Своя вселенная", SelectUniverse(Universe.CUSTOM)),
)
_CANON_MODE_OPTIONS: tuple[tuple[str, CanonMode], ...] = (
    ("Режим A: аналогичный сюжет", CanonMode.A_STORYLIKE),
    ("Режим B: только мир/стиль", CanonMode.B_WORLDONLY),
)


class QuitRequested(Exception):
    """Raised by the prompt layer when the player leaves the session."""


def parse_menu_choice(raw: str, option_count: int) -> int | None:
    """Return the zero-based index picked by ``raw``, or None when invalid."""
    value = raw.strip()
    if not value.isdigit():
        return None
    index = int(value) - 1
    if 0 <= index < option_count:
        return index
    return None


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, -(-total // page_size))


def page_slice(entries: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> Sequence[T]:
    start = page * page_size
    return entries[start:start + page_size]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rpgchat", description="Text RPG session in the console")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (random when omitted)")
    parser.add_argument("--save-dir", type=Path, default=None, help="directory for session snapshots")
    parser.add_argument("--reset", action="store_true", help="discard the stored session and start over")
    parser.add_argument("--log-level", type=str, default=None, help="logging level (DEBUG, INFO, ...)")
    return parser


class ConsoleSession:
    """Interactive loop that feeds typed input to a SessionController.

    After every applied action the whole state is written to the store.
    """

    def __init__(
        self,
        controller: SessionController,
        save_service: SaveService,
        store: SessionStore,
        session_id: str,
        *,
        input_func: InputFunc | None = None,
        print_func: PrintFunc | None = None,
    ) -> None:
        self._controller = controller
        self._save_service = save_service
        self._store = store
        self._session_id = session_id
        self._input = input_func or input
        self._print = print_func or print
        self._race_page = 0
        self._class_page = 0

    @property
    def content(self) -> ContentLibrary:
        return self._controller.content

    def run(self, state: GameState) -> GameState:
        """Play until the player quits or input runs out; return the last state."""
        shown = 0
        while True:
            render_log(state.log[shown:], self._print)
            shown = len(state.log)
            try:
                action = self._prompt_action(state)
            except (QuitRequested, EOFError):
                break
            if action is None:
                continue
            state = self._controller.dispatch(state, action)
            self.save(state)
        self._print("До встречи!")
        return state

    def save(self, state: GameState) -> None:
        self._store.write(self._session_id, self._save_service.serialize(state))

    # -----------------------
    # Prompts
    # -----------------------
    def _prompt_action(self, state: GameState) -> Action | None:
        prompts = {
            Phase.SETTINGS: self._prompt_settings,
            Phase.CANON_MODE: self._prompt_canon,
            Phase.CUSTOM_RULES: self._prompt_custom_rules,
            Phase.CHAR_SEX: self._prompt_sex,
            Phase.CHAR_NAME: self._prompt_name,
            Phase.CHAR_RACE: self._prompt_race,
            Phase.CHAR_CLASS: self._prompt_class,
            Phase.CHAR_BG: self._prompt_background,
            Phase.PLAY: self._prompt_play,
        }
        return prompts[state.phase](state)

    def _read(self, prompt: str) -> str:
        raw = self._input(prompt)
        if raw.strip().lower() in QUIT_COMMANDS:
            raise QuitRequested
        return raw

    def _prompt_settings(self, state: GameState) -> Action | None:
        render_menu(
            f"Старт — настройки (износ сейчас: {wear_label(state.wear)})",
            [label for label, _ in _SETTINGS_OPTIONS],
            self._print,
        )
        index = parse_menu_choice(self._read("Выбор: "), len(_SETTINGS_OPTIONS))
        if index is None:
            self._print("Введите номер пункта.")
            return None
        return _SETTINGS_OPTIONS[index][1]

    def _prompt_canon(self, state: GameState) -> Action | None:
        render_heading("Канон — название и режим", self._print)
        title = self._read("Название канона: ")
        render_menu("Режим", [label for label, _ in _CANON_MODE_OPTIONS], self._print)
        index = parse_menu_choice(self._read("Выбор: "), len(_CANON_MODE_OPTIONS))
        if index is None:
            self._print("Введите 1 или 2.")
            return None
        return SubmitCanon(title=title, mode=_CANON_MODE_OPTIONS[index][1])

    def _prompt_custom_rules(self, state: GameState) -> Action:
        render_heading("Своя вселенная — правила", self._print)
        return SubmitText(self._read("Опишите 2–3 правила мира: "))

    def _prompt_sex(self, state: GameState) -> Action | None:
        render_menu("A) Пол", list(SEX_OPTIONS), self._print)
        index = parse_menu_choice(self._read("Выбор: "), len(SEX_OPTIONS))
        if index is None:
            self._print("Введите номер пункта.")
            return None
        return SelectSex(SEX_OPTIONS[index])

    def _prompt_name(self, state: GameState) -> Action:
        render_heading("B) Имя", self._print)
        return SubmitText(self._read("Введите имя: "))

    def _prompt_race(self, state: GameState) -> Action | None:
        races = self.content.races.all()
        index, self._race_page = self._prompt_paged("C) Раса", races, self._race_page)
        if index is None:
            return None
        return SelectRace(races[index].id)

    def _prompt_class(self, state: GameState) -> Action | None:
        classes = self.content.classes.all()
        index, self._class_page = self._prompt_paged("D) Класс", classes, self._class_page)
        if index is None:
            return None
        return SelectClass(classes[index].id)

    def _prompt_background(self, state: GameState) -> Action | None:
        backgrounds = self.content.backgrounds.all()
        render_menu("E) Предыстория", [format_background(bg) for bg in backgrounds], self._print)
        index = parse_menu_choice(self._read("Выбор: "), len(backgrounds))
        if index is None:
            self._print("Введите номер пункта.")
            return None
        return SelectBackground(backgrounds[index].id)

    def _prompt_paged(self, title: str, entries: List, page: int) -> tuple[int | None, int]:
        """Show one page of ``entries``; return (absolute index or None, new page)."""
        pages = page_count(len(entries))
        visible = page_slice(entries, page)
        render_menu(f"{title} (стр. {page + 1}/{pages})", [format_race_or_class(e) for e in visible], self._print)
        self._print(f"{PAGE_PREV} назад | {PAGE_NEXT} дальше")
        raw = self._read("Выбор: ").strip()
        if raw == PAGE_PREV:
            return None, max(0, page - 1)
        if raw == PAGE_NEXT:
            return None, min(pages - 1, page + 1)
        index = parse_menu_choice(raw, len(visible))
        if index is None:
            self._print("Введите номер пункта или листайте страницы.")
            return None, page
        return page * PAGE_SIZE + index, page

    def _prompt_play(self, state: GameState) -> Action | None:
        render_heading("HUD", self._print)
        render_lines(format_hud(state, self.content), self._print)
        enemy_lines = format_enemy_panel(state)
        if enemy_lines:
            render_heading("Враг", self._print)
            render_lines(enemy_lines, self._print)
        scene = self._controller.scene(state)
        if scene is not None:
            render_heading("Сцена", self._print)
            render_lines(format_scene(scene), self._print)
        raw = self._read("Введите 1–4, свой вариант, или команду (/помощь): ")
        if not raw.strip():
            return None
        return SubmitText(raw)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the interactive CLI session."""
    args = build_arg_parser().parse_args(argv)
    user_config = config.load_config()
    log_level = config.normalize_log_level(args.log_level or user_config["log_level"])
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    seed = args.seed if args.seed is not None else secrets.randbelow(_MAX_RANDOM_SEED)
    content = get_default_content()
    controller = SessionController(content, RNG(seed))
    save_service = SaveService(content)
    store = SessionStore(args.save_dir)
    session_id = user_config["session_id"]

    if args.reset:
        store.delete(session_id)
        logger.info("Session %s reset", session_id)
    state = save_service.load_or_new(store.read(session_id))
    logger.info("Session %s started with seed %s in phase %s", session_id, seed, state.phase.value)

    print("=== Text RPG ===")
    session = ConsoleSession(controller, save_service, store, session_id)
    try:
        session.run(state)
    except KeyboardInterrupt:
        print("\nДо встречи!")
