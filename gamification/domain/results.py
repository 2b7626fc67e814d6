from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class RecordResult:
    xp_earned: int
    streak_updated: bool
    new_streak: int
    already_credited: bool
    level_up: bool
    new_level: int

    @classmethod
    def credited_before(cls, current_streak: int, level: int) -> "RecordResult":
        return cls(
            xp_earned=0,
            streak_updated=False,
            new_streak=current_streak,
            already_credited=True,
            level_up=False,
            new_level=level,
        )

    def as_dict(self) -> dict:
        return asdict(self)
