import time
from datetime import datetime, timedelta, timezone
TZ = timezone.utc

DAY_S = 24 * 60 * 60

def now_ts() -> int:
    return int(time.time())

def resolve(now: int | None) -> int:
    return now_ts() if now is None else int(now)

def today_key(now: int | None = None, reset_hour: int = 0) -> str:
    dt = datetime.fromtimestamp(resolve(now), TZ)
    if dt.hour < reset_hour:
        dt = dt - timedelta(days=1)
    return dt.date().isoformat()  # "YYYY-MM-DD"
