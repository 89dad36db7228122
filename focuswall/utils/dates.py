# focuswall/utils/dates.py
from datetime import date, datetime, timedelta
from typing import List, Optional


def now_local() -> datetime:
    """Current time as an aware datetime in the local time zone."""
    return datetime.now().astimezone()


def to_local(moment: datetime) -> datetime:
    # Naive timestamps from older data are taken to be local already
    return moment.astimezone()


def local_date(moment: datetime) -> date:
    return to_local(moment).date()


def last_n_days(n: int, today: Optional[date] = None) -> List[date]:
    """The last ``n`` calendar days ending with ``today``, oldest first."""
    today = today or now_local().date()
    return [today - timedelta(days=offset) for offset in range(n - 1, -1, -1)]
