from enum import Enum, IntEnum


class Quality(IntEnum):
    FORGOT = 0
    STRUGGLED = 3
    GOT_IT = 4
    TOO_EASY = 5


class CardStatus(str, Enum):
    DUE = "due"
    LEARNING = "learning"
    REVIEWING = "reviewing"
    MASTERED = "mastered"


QUALITY_LABELS = {
    Quality.FORGOT: "Forgot",
    Quality.STRUGGLED: "Struggled",
    Quality.GOT_IT: "Got it",
    Quality.TOO_EASY: "Too easy",
}

STATUS_LABELS = {
    CardStatus.DUE: "Due now",
    CardStatus.LEARNING: "Learning",
    CardStatus.REVIEWING: "Reviewing",
    CardStatus.MASTERED: "Mastered",
}


def quality_label(quality: int) -> str:
    # 1 and 2 are lapses too
    if quality < Quality.STRUGGLED:
        return QUALITY_LABELS[Quality.FORGOT]
    return QUALITY_LABELS[Quality(quality)]
