import pytest

from rpgchat.core.types import CanonMode, Phase, Role, Universe, WearMode
from rpgchat.data.content import get_default_content
from rpgchat.domain.state import make_initial_state
from rpgchat.services.creation_service import CharacterCreationService
from rpgchat.services.errors import FactoryError


@pytest.fixture
def service() -> CharacterCreationService:
    return CharacterCreationService(get_default_content())


def test_initial_state_has_welcome_line() -> None:
    state = make_initial_state()
    assert state.phase is Phase.SETTINGS
    assert [(entry.role, entry.text) for entry in state.log] == [
        (Role.SYSTEM, "Игра готова. Выберите настройки старта (износ + вселенная)."),
    ]


def test_wear_selection_keeps_phase(service: CharacterCreationService) -> None:
    state = service.select_wear(make_initial_state(), WearMode.ON)
    assert state.wear is WearMode.ON
    assert state.phase is Phase.SETTINGS
    assert state.log[-1].role is Role.PLAYER
    assert state.log[-1].text == "A) Износ: ✅ ВКЛ"


@pytest.mark.parametrize(
    ("universe", "phase"),
    [
        (Universe.CANON, Phase.CANON_MODE),
        (Universe.CUSTOM, Phase.CUSTOM_RULES),
        (Universe.CLASSIC_FANTASY, Phase.CHAR_SEX),
        (Universe.DARK_FANTASY, Phase.CHAR_SEX),
        (Universe.ANIME_ISEKAI, Phase.CHAR_SEX),
    ],
)
def test_universe_selects_next_phase(service: CharacterCreationService, universe: Universe, phase: Phase) -> None:
    state = service.select_universe(make_initial_state(), universe)
    assert state.universe is universe
    assert state.phase is phase


def test_canon_blank_title_gets_default(service: CharacterCreationService) -> None:
    state = service.select_universe(make_initial_state(), Universe.CANON)
    state = service.submit_canon(state, "   ", CanonMode.B_WORLDONLY)
    assert state.canon_title == "Без названия"
    assert state.canon_mode is CanonMode.B_WORLDONLY
    assert state.phase is Phase.CHAR_SEX
    assert state.log[-1].text == "Канон: Без названия | Режим: B"


def test_custom_rules_blank_gets_default(service: CharacterCreationService) -> None:
    state = service.select_universe(make_initial_state(), Universe.CUSTOM)
    state = service.submit_custom_rules(state, "")
    assert state.custom_rules == "Правила не заданы"
    assert state.phase is Phase.CHAR_SEX


def test_name_is_trimmed_and_defaulted(service: CharacterCreationService) -> None:
    state = service.select_universe(make_initial_state(), Universe.CLASSIC_FANTASY)
    state = service.select_sex(state, "Женский")
    named = service.submit_name(state, "  Ария  ")
    blank = service.submit_name(state, "   ")
    assert named.name == "Ария"
    assert blank.name == "Безымянный"
    assert named.phase is Phase.CHAR_RACE


def test_background_finalizes_and_logs_player_then_system(service: CharacterCreationService) -> None:
    state = service.select_universe(make_initial_state(), Universe.DARK_FANTASY)
    state = service.select_sex(state, "Не важно")
    state = service.submit_name(state, "Тень")
    state = service.select_race(state, "r2")
    state = service.select_class(state, "c3")
    state = service.select_background(state, "b4")

    assert state.phase is Phase.PLAY
    assert state.location == "Постоялый двор «Глухой Колокол»"
    assert [(entry.role, entry.text) for entry in state.log[-2:]] == [
        (Role.PLAYER, "Предыстория: Книжник"),
        (Role.SYSTEM, "Персонаж создан. Игра началась."),
    ]


def test_unknown_race_raises_factory_error(service: CharacterCreationService) -> None:
    with pytest.raises(FactoryError):
        service.select_race(make_initial_state(), "r99")


def test_unknown_background_raises_factory_error(service: CharacterCreationService) -> None:
    with pytest.raises(FactoryError):
        service.select_background(make_initial_state(), "b99")
