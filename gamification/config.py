FLASHCARD_XP = 1           # per card, paid once per user for its lifetime
ITEM_TYPE_FLASHCARD = "flashcard"

LEVEL_THRESHOLDS = [
    0,     # level 1
    75,
    175,
    300,
    450,
    625,
    825,
    1050,
    1300,
    1600,  # level 10
]
XP_PER_LEVEL_AFTER_10 = 350

DEFAULT_DAILY_GOAL = 20
RECENT_ACTIVITY_DAYS = 7

XP_PER_QUESTION = 1
QUIZ_MAX_PAID_QUESTIONS = 20
ITEM_TYPE_QUIZ = "quiz"        # paid once per deck per local day
