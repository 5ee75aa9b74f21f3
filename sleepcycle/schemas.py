from datetime import date as ddate, datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, model_validator
from .calculator import CycleOption, Mode
from .config import settings
from .cycles import WallClockTime, format_time
from .utils_time import from_12_hour

Quality = Literal["Poor", "Fair", "Good", "Excellent"]

class TimeIn(BaseModel):
    model_config = ConfigDict(extra="forbid")
    hours: int = Field(ge=0, le=23)
    minutes: int = Field(ge=0, le=59)
    # set for 12-hour input, where hours must be 1-12
    period: Literal["AM", "PM"] | None = None

    @model_validator(mode="after")
    def check_12_hour(self):
        if self.period and not 1 <= self.hours <= 12:
            raise ValueError("hours must be 1-12 when period is given")
        return self

    def to_wall_clock(self) -> WallClockTime:
        if self.period:
            return from_12_hour(self.hours, self.minutes, self.period)
        return WallClockTime(self.hours, self.minutes)

class TimeOut(BaseModel):
    hours: int
    minutes: int
    display: str

    @classmethod
    def of(cls, t: WallClockTime) -> "TimeOut":
        return cls(hours=t.hours, minutes=t.minutes, display=format_time(t.hours, t.minutes))

class CycleOptionOut(BaseModel):
    time: TimeOut
    cycles: int
    hours_of_sleep: float

    @classmethod
    def of(cls, o: CycleOption) -> "CycleOptionOut":
        return cls(
            time=TimeOut(hours=o.time.hours, minutes=o.time.minutes, display=o.label),
            cycles=o.cycles,
            hours_of_sleep=o.hours_of_sleep,
        )

class CalculateRequest(BaseModel):
    mode: Mode
    time: TimeIn | None = None
    sleep_delay: int = Field(
        default=settings.DEFAULT_SLEEP_DELAY,
        ge=settings.MIN_SLEEP_DELAY,
        le=settings.MAX_SLEEP_DELAY,
    )
    # "engine" keeps the calculator order, "most_cycles_first" sorts 7 down to 2
    order: Literal["engine", "most_cycles_first"] = "engine"

class CalculateResponse(BaseModel):
    mode: Mode
    sleep_delay: int
    reference: TimeOut
    results: list[CycleOptionOut]

class QualityOut(BaseModel):
    rating: str
    description: str

class DurationResponse(BaseModel):
    hours: int
    minutes: int
    cycles: int
    quality: QualityOut

class SleepRecordIn(BaseModel):
    date: ddate
    hours_slept: float = Field(ge=0, le=24)
    quality: Quality
    woke_up_during_night: bool = False
    notes: str | None = None

class SleepRecordOut(SleepRecordIn):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None = None

class SleepStats(BaseModel):
    count: int
    average_hours: float
    woke_up_count: int
    quality_counts: dict[str, int]
