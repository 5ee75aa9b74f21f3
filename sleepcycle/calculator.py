import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .cycles import (
    CYCLE_LENGTH_MINUTES, MAX_CYCLES, MIN_CYCLES, MINUTES_PER_HOUR,
    DEFAULT_SLEEP_ONSET_DELAY_MINUTES, WallClockTime,
    compute_bed_times, compute_wake_up_times, format_time,
)
from .utils_time import now_wall_clock

logger = logging.getLogger(__name__)

HOURS_PER_CYCLE = CYCLE_LENGTH_MINUTES / MINUTES_PER_HOUR

class Mode(str, Enum):
    WAKEUP = "wakeup"    # bedtime given, find wake-up times
    BEDTIME = "bedtime"  # wake-up time given, find bedtimes
    NOW = "now"          # going to bed right now

@dataclass(frozen=True)
class CycleOption:
    time: WallClockTime
    cycles: int

    @property
    def hours_of_sleep(self) -> float:
        return self.cycles * HOURS_PER_CYCLE

    @property
    def label(self) -> str:
        return format_time(self.time.hours, self.time.minutes)

def label_cycles(mode: Mode, times: list[WallClockTime]) -> list[CycleOption]:
    """Pair engine output with its cycle count, keeping the engine's order."""
    if mode == Mode.BEDTIME:
        # compute_bed_times starts at the most cycles
        return [CycleOption(t, MAX_CYCLES - i) for i, t in enumerate(times)]
    return [CycleOption(t, MIN_CYCLES + i) for i, t in enumerate(times)]

def sort_by_cycles_desc(options: list[CycleOption]) -> list[CycleOption]:
    return sorted(options, key=lambda o: o.cycles, reverse=True)

def calculate(
    mode: Mode,
    time: WallClockTime | None = None,
    sleep_delay: int = DEFAULT_SLEEP_ONSET_DELAY_MINUTES,
    now: datetime | None = None,
) -> tuple[WallClockTime, list[CycleOption]]:
    """
    Run one calculation and return (reference time, labelled options).

    For Mode.NOW the reference is a clock snapshot and `time` is ignored;
    `now` overrides the clock read.
    """
    mode = Mode(mode)
    if mode == Mode.NOW:
        time = now_wall_clock(now)
    elif time is None:
        raise ValueError(f"a time is required for mode {mode.value!r}")

    if mode == Mode.BEDTIME:
        results = compute_bed_times(time, sleep_delay)
    else:
        results = compute_wake_up_times(time, sleep_delay)

    logger.debug(f"calculate mode={mode.value} ref={time} delay={sleep_delay}")
    return time, label_cycles(mode, results)
