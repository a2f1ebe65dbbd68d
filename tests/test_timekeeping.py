import pytest

from rpgchat.domain.timekeeping import advance_hour, format_clock, weather_for_roll


def test_hour_advances_within_day() -> None:
    assert advance_hour(1, 5) == (1, 6)


def test_hour_wraps_to_next_day() -> None:
    assert advance_hour(3, 23) == (4, 0)


@pytest.mark.parametrize(
    ("roll", "expected"),
    [(1, "Морось"), (10, "Морось"), (11, "Ветер"), (20, "Ветер"), (21, "Туман"), (25, "Туман"), (26, "Ясно"), (100, "Ясно")],
)
def test_weather_thresholds_are_cumulative(roll: int, expected: str) -> None:
    assert weather_for_roll(roll) == expected


def test_format_clock_pads_hour() -> None:
    assert format_clock(2, 7) == "День 2, 07:00"
