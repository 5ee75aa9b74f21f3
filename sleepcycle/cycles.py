"""
Sleep-cycle arithmetic on wall-clock times.

Everything here is pure: no clock reads, no storage. Times carry no date and
wrap every 24 hours.
"""
from dataclasses import dataclass
from typing import NamedTuple

CYCLE_LENGTH_MINUTES = 90
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR
DEFAULT_SLEEP_ONSET_DELAY_MINUTES = 15

MIN_CYCLES = 2
MAX_CYCLES = 7
CYCLE_RANGE = range(MIN_CYCLES, MAX_CYCLES + 1)

@dataclass(frozen=True)
class WallClockTime:
    hours: int
    minutes: int

    def __post_init__(self):
        if not 0 <= self.hours < HOURS_PER_DAY:
            raise ValueError(f"hours must be 0-23, got {self.hours}")
        if not 0 <= self.minutes < MINUTES_PER_HOUR:
            raise ValueError(f"minutes must be 0-59, got {self.minutes}")

    @classmethod
    def from_minutes(cls, total: int) -> "WallClockTime":
        # Python's % is a floor modulo, so negative totals land on the previous day
        total = total % MINUTES_PER_DAY
        return cls(total // MINUTES_PER_HOUR, total % MINUTES_PER_HOUR)

    def to_minutes(self) -> int:
        return self.hours * MINUTES_PER_HOUR + self.minutes

    def __str__(self):
        return format_time(self.hours, self.minutes)

class SleepDuration(NamedTuple):
    hours: int
    minutes: int

    def to_minutes(self) -> int:
        return self.hours * MINUTES_PER_HOUR + self.minutes

class SleepQuality(NamedTuple):
    rating: str
    description: str

# (lower bound in cycles, rating, description), checked from the top down
QUALITY_BUCKETS = [
    (6, "Excellent", "This provides ample rest for most adults."),
    (5, "Very Good", "This is the ideal amount of sleep for most adults."),
    (4, "Good", "A good amount of sleep that works well for some adults."),
    (3, "Fair", "This amount may help you get through the day, but isn't optimal long-term."),
]
POOR = SleepQuality("Poor", "Less than 4.5 hours of sleep is insufficient for most adults.")

def add_minutes(time: WallClockTime, delta: int) -> WallClockTime:
    return WallClockTime.from_minutes(time.to_minutes() + delta)

def compute_wake_up_times(
    bedtime: WallClockTime,
    sleep_onset_delay: int = DEFAULT_SLEEP_ONSET_DELAY_MINUTES,
) -> list[WallClockTime]:
    """
    Wake-up candidates for 2..7 cycles after falling asleep.

    Ordered by ascending cycle count (index 0 = 2 cycles), not by clock time:
    a bedtime near midnight can make later entries read "earlier". Note this
    is the opposite order from compute_bed_times.
    """
    asleep_at = add_minutes(bedtime, sleep_onset_delay)
    return [add_minutes(asleep_at, c * CYCLE_LENGTH_MINUTES) for c in CYCLE_RANGE]

def compute_bed_times(
    wake_up_time: WallClockTime,
    sleep_onset_delay: int = DEFAULT_SLEEP_ONSET_DELAY_MINUTES,
) -> list[WallClockTime]:
    """
    Bedtime candidates that allow 2..7 full cycles before waking.

    Returned in DESCENDING cycle count: index 0 = 7 cycles (earliest
    bedtime), index 5 = 2 cycles. Callers rely on this being the reverse of
    compute_wake_up_times.
    """
    bed_times = [
        add_minutes(wake_up_time, -(c * CYCLE_LENGTH_MINUTES + sleep_onset_delay))
        for c in CYCLE_RANGE
    ]
    bed_times.reverse()
    return bed_times

def format_time(hours: int, minutes: int) -> str:
    period = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{minutes:02d} {period}"

def get_sleep_duration(bedtime: WallClockTime, wake_up_time: WallClockTime) -> SleepDuration:
    bed = bedtime.to_minutes()
    wake = wake_up_time.to_minutes()
    if wake < bed:
        wake += MINUTES_PER_DAY
    total = wake - bed
    return SleepDuration(total // MINUTES_PER_HOUR, total % MINUTES_PER_HOUR)

def get_sleep_cycles(bedtime: WallClockTime, wake_up_time: WallClockTime) -> int:
    return get_sleep_duration(bedtime, wake_up_time).to_minutes() // CYCLE_LENGTH_MINUTES

def get_sleep_quality(cycles: int) -> SleepQuality:
    for lower, rating, description in QUALITY_BUCKETS:
        if cycles >= lower:
            return SleepQuality(rating, description)
    return POOR
