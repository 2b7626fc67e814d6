from ..config import LEVEL_THRESHOLDS, XP_PER_LEVEL_AFTER_10


def calculate_level(total_xp: int) -> int:
    """Level for a lifetime XP total. Never decreases as XP grows."""
    last = len(LEVEL_THRESHOLDS) - 1
    if total_xp >= LEVEL_THRESHOLDS[last]:
        return len(LEVEL_THRESHOLDS) + (total_xp - LEVEL_THRESHOLDS[last]) // XP_PER_LEVEL_AFTER_10
    for i in range(last - 1, -1, -1):
        if total_xp >= LEVEL_THRESHOLDS[i]:
            return i + 1
    return 1


def calculate_xp_stats(total_xp: int) -> dict:
    level = calculate_level(total_xp)
    if level < len(LEVEL_THRESHOLDS):
        level_floor = LEVEL_THRESHOLDS[level - 1]
        level_ceiling = LEVEL_THRESHOLDS[level]
    else:
        level_floor = LEVEL_THRESHOLDS[-1] + (level - len(LEVEL_THRESHOLDS)) * XP_PER_LEVEL_AFTER_10
        level_ceiling = level_floor + XP_PER_LEVEL_AFTER_10

    into_level = total_xp - level_floor
    span = level_ceiling - level_floor
    return {
        "total": total_xp,
        "level": level,
        "current_level_xp": into_level,
        "next_level_xp": span,
        "progress": min(100, int(into_level * 100 / span + 0.5)),
    }
