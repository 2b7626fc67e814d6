import pytest

from gamification.domain.levels import calculate_level, calculate_xp_stats


@pytest.mark.parametrize("xp,level", [
    (0, 1), (74, 1), (75, 2), (174, 2), (175, 3), (1599, 9),
    (1600, 10), (1949, 10), (1950, 11), (1600 + 350 * 5, 15),
])
def test_calculate_level(xp, level):
    assert calculate_level(xp) == level


def test_level_is_monotonic():
    levels = [calculate_level(xp) for xp in range(0, 5000, 7)]
    assert levels == sorted(levels)


def test_xp_stats_inside_threshold_table():
    assert calculate_xp_stats(100) == {
        "total": 100,
        "level": 2,
        "current_level_xp": 25,
        "next_level_xp": 100,
        "progress": 25,
    }


def test_xp_stats_beyond_level_ten():
    stats = calculate_xp_stats(1600 + 350 + 175)
    assert stats["level"] == 11
    assert stats["current_level_xp"] == 175
    assert stats["next_level_xp"] == 350
    assert stats["progress"] == 50
