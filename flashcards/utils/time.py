import math
from datetime import datetime


def format_next_review(next_review: datetime, now: datetime) -> str:
    days = math.ceil((next_review - now).total_seconds() / 86400)
    if days <= 0:
        return "Now"
    if days == 1:
        return "Tomorrow"
    if days < 7:
        return f"{days} days"
    if days < 30:
        return f"{math.ceil(days / 7)} weeks"
    return f"{math.ceil(days / 30)} months"
