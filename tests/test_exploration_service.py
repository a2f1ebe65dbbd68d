from dataclasses import replace

import pytest

from rpgchat.core.types import Node, Universe
from rpgchat.data.content import get_default_content
from rpgchat.domain.state import GameState
from rpgchat.services.battle_service import BattleService
from rpgchat.services.exploration_service import ExplorationService, advance_clock
from tests.helpers.builders import make_controller, play_state
from tests.helpers.scripted_rng import ScriptedRNG


@pytest.fixture
def service() -> ExplorationService:
    content = get_default_content()
    return ExplorationService(content, BattleService(content))


@pytest.fixture
def hub_state() -> GameState:
    controller, _ = make_controller()
    return play_state(controller)


@pytest.mark.parametrize(
    ("start", "choice", "target"),
    [
        (Node.HUB, 1, Node.BOARD),
        (Node.HUB, 2, Node.WHISPER),
        (Node.HUB, 3, Node.CHECK),
        (Node.BOARD, 1, Node.ROAD),
        (Node.BOARD, 3, Node.HUB),
        (Node.WHISPER, 3, Node.HUB),
        (Node.CHECK, 3, Node.HUB),
        (Node.ROAD, 3, Node.HUB),
    ],
)
def test_routes_move_without_rolling(
    service: ExplorationService, hub_state: GameState, start: Node, choice: int, target: Node
) -> None:
    rng = ScriptedRNG([])
    after = service.choose(replace(hub_state, node=start), choice, None, rng)
    assert after.node is target
    assert after.enemy is None


def test_arrival_at_check_records_equipment_check(service: ExplorationService, hub_state: GameState) -> None:
    after = service.choose(hub_state, 3, None, ScriptedRNG([]))
    assert after.journal_path == "Проверка снаряжения"
    assert after.log[-1].text == "Вы проверяете ремни и карманы. Всё на месте."


def test_lookout_check_low_roll_starts_combat(service: ExplorationService, hub_state: GameState) -> None:
    state = replace(hub_state, node=Node.WHISPER)
    after = service.choose(state, 1, None, ScriptedRNG([25]))

    assert after.enemy is not None
    assert after.enemy.enemy_id == "classic_bandit"
    assert after.node is Node.WHISPER


def test_lookout_check_high_roll_stays_quiet(service: ExplorationService, hub_state: GameState) -> None:
    state = replace(hub_state, node=Node.CHECK)
    after = service.choose(state, 1, None, ScriptedRNG([26]))

    assert after.enemy is None
    assert after.log[-1].text.endswith("26/100 → тишина")


@pytest.mark.parametrize(("roll", "path"), [(50, "Получена наводка на тайник"), (51, "Срыв разговора")])
def test_conversation_check_sets_journal_path(
    service: ExplorationService, hub_state: GameState, roll: int, path: str
) -> None:
    state = replace(hub_state, node=Node.BOARD)
    after = service.choose(state, 2, None, ScriptedRNG([roll]))

    assert after.journal_path == path
    assert after.node is Node.BOARD


def test_custom_choice_echoes_text(service: ExplorationService, hub_state: GameState) -> None:
    after = service.choose(hub_state, 4, "осмотреть камин", ScriptedRNG([]))
    assert after.node is Node.HUB
    assert after.log[-1].text == '◦ Ваш вариант: "осмотреть камин".'


def test_dark_fantasy_lookout_spawns_scavenger(service: ExplorationService) -> None:
    controller, _ = make_controller()
    state = replace(play_state(controller, Universe.DARK_FANTASY), node=Node.ROAD)
    after = service.choose(state, 1, None, ScriptedRNG([1]))
    assert after.enemy is not None and after.enemy.hp_max == 26


def test_advance_clock_rolls_day_and_weather(hub_state: GameState) -> None:
    after = advance_clock(replace(hub_state, day=2, hour=23), ScriptedRNG([15]))
    assert (after.day, after.hour, after.weather) == (3, 0, "Ветер")
