from datetime import datetime, time, timedelta, timezone as dt_tz


def local_now(now_utc: datetime, offset_minutes: int) -> datetime:
    """
    Shift a UTC instant into the user's wall clock. The offset follows the
    browser convention: minutes behind UTC, so UTC-5 is +300.
    """
    return now_utc.astimezone(dt_tz.utc) - timedelta(minutes=offset_minutes)


def local_today(now_utc: datetime, offset_minutes: int):
    return local_now(now_utc, offset_minutes).date()


def local_midnight_utc(now_utc: datetime, offset_minutes: int) -> datetime:
    """The UTC instant at which the user's current local day started."""
    midnight = datetime.combine(local_today(now_utc, offset_minutes), time.min, tzinfo=dt_tz.utc)
    return midnight + timedelta(minutes=offset_minutes)


def year_month(now_utc: datetime) -> str:
    return now_utc.astimezone(dt_tz.utc).strftime("%Y-%m")
