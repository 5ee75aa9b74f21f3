from datetime import datetime
import zoneinfo
from .config import settings
from .cycles import WallClockTime

TZ = zoneinfo.ZoneInfo(settings.CLOCK_TZ)

def now_wall_clock(now: datetime | None = None) -> WallClockTime:
    # single clock read, taken right before the engine is called
    now = now or datetime.now(TZ)
    if now.tzinfo is None:
        # naive snapshots are already wall-clock time in CLOCK_TZ
        now = now.replace(tzinfo=TZ)
    now = now.astimezone(TZ)
    return WallClockTime(now.hour, now.minute)

def from_12_hour(hour: int, minute: int, period: str) -> WallClockTime:
    period = period.upper()
    if period not in ("AM", "PM"):
        raise ValueError(f"period must be AM or PM, got {period!r}")
    if not 1 <= hour <= 12:
        raise ValueError(f"hour must be 1-12, got {hour}")
    hours = 0 if hour == 12 else hour
    if period == "PM":
        hours += 12
    return WallClockTime(hours, minute)
