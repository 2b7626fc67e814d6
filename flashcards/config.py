MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3        # below this a rating is a lapse

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
LAPSE_INTERVAL_DAYS = 1    # review again tomorrow
FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6

MASTERED_INTERVAL_DAYS = 14

# Typed-answer matching
KEYWORD_COVERAGE_THRESHOLD = 0.8
TEXT_SIMILARITY_THRESHOLD = 0.7
WORD_SIMILARITY_THRESHOLD = 0.75
FUZZY_MIN_WORD_LENGTH = 3
