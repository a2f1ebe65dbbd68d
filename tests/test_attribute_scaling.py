import pytest

from rpgchat.domain.attribute_scaling import (
    apply_bonuses,
    compute_xp_to_next,
    derive_hp_max,
    derive_mp_max,
)
from rpgchat.domain.entities import STAT_NAMES, Stats


def test_apply_bonuses_adds_and_subtracts_per_field() -> None:
    result = apply_bonuses(Stats.uniform(), {"STR": 2, "LUCK": 1}, {"CHA": 1})

    assert result == Stats(STR=5, DEX=3, END=3, INT=3, CHA=2, LUCK=4)


def test_apply_bonuses_without_modifiers_is_identity() -> None:
    base = Stats(STR=1, DEX=2, END=3, INT=4, CHA=5, LUCK=6)
    assert apply_bonuses(base) == base


@pytest.mark.parametrize("penalty", [2, 3, 10, 100])
def test_apply_bonuses_floors_every_attribute_at_one(penalty: int) -> None:
    penalties = {name: penalty for name in STAT_NAMES}
    result = apply_bonuses(Stats.uniform(), {"STR": 1}, penalties)

    assert all(value >= 1 for value in result.as_dict().values())
    assert result.DEX == max(1, 3 - penalty)


def test_apply_bonuses_has_no_ceiling() -> None:
    result = apply_bonuses(Stats.uniform(), {"INT": 50})
    assert result.INT == 53


def test_apply_bonuses_rejects_unknown_attribute() -> None:
    with pytest.raises(ValueError):
        apply_bonuses(Stats.uniform(), {"WIS": 1})


def test_xp_threshold_values() -> None:
    assert compute_xp_to_next(0) == 300
    assert compute_xp_to_next(1) == 300
    assert compute_xp_to_next(2) == 360
    assert compute_xp_to_next(3) == 430


def test_xp_threshold_is_multiple_of_ten_and_non_decreasing() -> None:
    thresholds = [compute_xp_to_next(level) for level in range(1, 30)]
    assert all(value % 10 == 0 for value in thresholds)
    assert thresholds == sorted(thresholds)


def test_derived_pools_follow_end_and_int() -> None:
    stats = Stats(STR=3, DEX=3, END=4, INT=5, CHA=3, LUCK=3)
    assert derive_hp_max(stats) == 28 + 16
    assert derive_mp_max(stats) == 12 + 15
