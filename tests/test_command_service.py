from dataclasses import replace

import pytest

from rpgchat.core.types import Role
from rpgchat.data.content import get_default_content
from rpgchat.services.command_service import CommandService
from tests.helpers.builders import make_controller, play_state


@pytest.fixture
def service() -> CommandService:
    return CommandService(get_default_content())


def _play():
    controller, _ = make_controller()
    return play_state(controller)


def test_help_logs_player_line_then_command_list(service: CommandService) -> None:
    state = _play()
    after = service.execute(state, "/помощь")
    assert [(e.role, e.text) for e in after.log[len(state.log):]] == [
        (Role.PLAYER, "/помощь"),
        (Role.SYSTEM, "Команды: /статы /экип /инвентарь /настройки /помощь"),
    ]


def test_english_alias_matches_russian_command(service: CommandService) -> None:
    state = _play()
    assert service.execute(state, "/stats").log[-1] == service.execute(state, "/статы").log[-1]


def test_stats_line(service: CommandService) -> None:
    after = service.execute(_play(), "/статы")
    assert after.log[-1].text == "💪 5 🎯 3 🛡️ 4 🧠 3 🗣️ 4 🍀 5"


def test_inventory_lists_backpack(service: CommandService) -> None:
    after = service.execute(_play(), "/инвентарь")
    assert after.log[-1].text == "— ⚪ Зелье лечения x2 (0.3кг, слоты 1)"


def test_inventory_empty(service: CommandService) -> None:
    after = service.execute(replace(_play(), backpack=()), "/inventory")
    assert after.log[-1].text == "Рюкзак пуст."


def test_equipment_and_settings(service: CommandService) -> None:
    state = _play()
    assert service.execute(state, "/экип").log[-1].text == "Оружие: ⚪ Кинжал путника\nБроня: ⚪ Кожаная куртка"
    assert service.execute(state, "/настройки").log[-1].text == "Износ: ❌ ВЫКЛ\nВселенная: Классическое фэнтези"


def test_unknown_command(service: CommandService) -> None:
    after = service.execute(_play(), "/танец")
    assert after.log[-1].text == "Неизвестная команда. /помощь"


def test_commands_only_touch_the_log(service: CommandService) -> None:
    state = _play()
    after = service.execute(state, "/статы")
    assert replace(after, log=state.log) == state
