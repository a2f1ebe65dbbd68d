from dataclasses import replace

import pytest

from rpgchat.core.types import Node, Universe
from rpgchat.data.content import get_default_content
from rpgchat.domain.state import GameState
from rpgchat.services.battle_service import BattleService
from tests.helpers.builders import make_controller, play_state
from tests.helpers.scripted_rng import ScriptedRNG


def _combat_state(universe: Universe = Universe.CLASSIC_FANTASY) -> tuple[BattleService, GameState]:
    controller, _ = make_controller()
    service = BattleService(get_default_content())
    state = service.start_combat(play_state(controller, universe))
    return service, state


def _system_texts(before: GameState, after: GameState) -> list[str]:
    return [entry.text for entry in after.log[len(before.log):]]


def test_start_combat_spawns_universe_enemy() -> None:
    _, state = _combat_state(Universe.ANIME_ISEKAI)
    assert state.enemy is not None
    assert state.enemy.name == "Слизень ранга E"
    assert state.log[-1].text == "⚠️ Слизень ранга E выходит из тени!"


def test_bandit_dies_after_three_hits_and_grants_xp() -> None:
    service, state = _combat_state()
    rng = ScriptedRNG([10, 100, 10, 100, 10])

    for _ in range(3):
        state = service.resolve_round(state, 1, rng)

    assert state.enemy is None
    assert state.xp == 60
    assert state.log[-1].text == "🏁 Победа! ⭐ XP +60"
    assert rng.remaining == 0


def test_hit_and_counter_attack_log_lines() -> None:
    service, state = _combat_state()
    after = service.resolve_round(state, 1, ScriptedRNG([60, 55]))

    assert after.enemy is not None and after.enemy.hp_cur == 16
    assert after.hp_cur == state.hp_cur - 6
    assert _system_texts(state, after) == [
        "⚔️ Попадание. Шанс 60% | Проверка 60/100\nИтоговый урон: 8 | ❤️ HP врага: 16/24",
        f"Ответ врага: попадание. Проверка 55/100\nУрон: 6 | Ваше ❤️ {after.hp_cur}/{after.hp_max}",
    ]


def test_miss_leaves_enemy_untouched() -> None:
    service, state = _combat_state()
    after = service.resolve_round(state, 1, ScriptedRNG([61, 56]))

    assert after.enemy == state.enemy
    assert after.hp_cur == state.hp_cur
    assert _system_texts(state, after) == [
        "⚔️ Промах. Шанс 60% | Проверка 61/100",
        "Ответ врага: промах. Проверка 56/100",
    ]


def test_victory_levels_up_once() -> None:
    service, state = _combat_state()
    state = replace(state, xp=250, enemy=replace(state.enemy, hp_cur=8))

    after = service.resolve_round(state, 1, ScriptedRNG([1]))

    assert after.level == 2
    assert after.xp == 10
    assert after.xp_to_next == 360
    assert after.log[-1].text == "🏅 УРОВЕНЬ ПОВЫШЕН! LV 2"


def test_potion_heals_capped_and_consumes_one() -> None:
    service, state = _combat_state()
    state = replace(state, hp_cur=state.hp_max - 5)

    after = service.resolve_round(state, 3, ScriptedRNG([100]))

    assert after.hp_cur == after.hp_max
    assert after.backpack[0].qty == 1
    assert _system_texts(state, after)[0] == f"✦ Лечение: +14 HP → ❤️ {after.hp_max}/{after.hp_max}"


def test_potion_without_stock_logs_failure() -> None:
    service, state = _combat_state()
    state = replace(state, backpack=(), hp_cur=10)

    after = service.resolve_round(state, 3, ScriptedRNG([100]))

    assert after.hp_cur == 10
    assert _system_texts(state, after)[0] == "✦ Нет зелья в рюкзаке"


def test_potion_with_zero_quantity_is_refused() -> None:
    service, state = _combat_state()
    potion = replace(state.backpack[0], qty=0)
    state = replace(state, backpack=(potion,), hp_cur=10)

    after = service.resolve_round(state, 3, ScriptedRNG([100]))

    assert after.hp_cur == 10
    assert after.backpack == (potion,)
    assert _system_texts(state, after)[0] == "✦ Нет зелья в рюкзаке"


def test_third_potion_is_refused_after_stock_runs_out() -> None:
    service, state = _combat_state()
    state = replace(state, hp_cur=1, hp_max=100)

    state = service.resolve_round(state, 3, ScriptedRNG([100]))
    state = service.resolve_round(state, 3, ScriptedRNG([100]))
    assert state.hp_cur == 29
    assert all(item.id != "c_potion" for item in state.backpack)

    after = service.resolve_round(state, 3, ScriptedRNG([100]))

    assert after.hp_cur == 29
    assert _system_texts(state, after)[0] == "✦ Нет зелья в рюкзаке"


def test_cautious_stance_only_rolls_for_enemy() -> None:
    service, state = _combat_state()
    rng = ScriptedRNG([90])
    after = service.resolve_round(state, 2, rng)

    assert rng.remaining == 0
    assert _system_texts(state, after)[0] == "🛡/◦ Вы действуете осторожно, выбирая позицию."


def test_defeat_clears_backpack_and_restores_at_hub() -> None:
    service, state = _combat_state()
    state = replace(state, hp_cur=6, node=Node.ROAD, location="Тракт")

    after = service.resolve_round(state, 2, ScriptedRNG([1]))

    assert after.enemy is None
    assert after.backpack == ()
    assert after.hp_cur == after.hp_max
    assert after.node is Node.HUB
    assert after.location == "Трактир «Три Факела»"
    assert after.log[-1].text == "☠️ Вы пали. Возврат в безопасную точку. Рюкзак потерян."


def test_resolve_round_requires_enemy() -> None:
    controller, _ = make_controller()
    with pytest.raises(ValueError):
        BattleService(get_default_content()).resolve_round(play_state(controller), 1, ScriptedRNG([]))
