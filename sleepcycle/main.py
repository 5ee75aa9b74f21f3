import logging
from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from .config import settings
from .db import engine, get_session
from . import models
from .calculator import Mode, calculate, sort_by_cycles_desc
from .cycles import WallClockTime, get_sleep_duration, get_sleep_cycles, get_sleep_quality
from .records import add_record, list_records, remove_record, clear_records, record_stats
from .schemas import (
    CalculateRequest, CalculateResponse, CycleOptionOut, DurationResponse,
    QualityOut, SleepRecordIn, SleepRecordOut, SleepStats, TimeOut,
)

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

models.Base.metadata.create_all(bind=engine)

app = FastAPI(title="Sleep Cycle Calculator API")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

def _respond(
    mode: Mode,
    sleep_delay: int,
    time: WallClockTime | None = None,
    most_cycles_first: bool = False,
) -> CalculateResponse:
    try:
        reference, options = calculate(mode, time, sleep_delay)
    except ValueError as e:
        logger.warning(f"Rejected {mode.value} calculation: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    if most_cycles_first:
        options = sort_by_cycles_desc(options)
    return CalculateResponse(
        mode=mode,
        sleep_delay=sleep_delay,
        reference=TimeOut.of(reference),
        results=[CycleOptionOut.of(o) for o in options],
    )

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.post("/calculate", response_model=CalculateResponse)
def calculate_times(req: CalculateRequest):
    time = req.time.to_wall_clock() if req.time else None
    first = req.order == "most_cycles_first"
    return _respond(req.mode, req.sleep_delay, time, most_cycles_first=first)

@app.get("/calculate/wake-up", response_model=CalculateResponse)
def wake_up_times(
    hours: int = Query(..., ge=0, le=23),
    minutes: int = Query(..., ge=0, le=59),
    sleep_delay: int = Query(settings.DEFAULT_SLEEP_DELAY, ge=settings.MIN_SLEEP_DELAY, le=settings.MAX_SLEEP_DELAY),
):
    return _respond(Mode.WAKEUP, sleep_delay, WallClockTime(hours, minutes))

@app.get("/calculate/bedtime", response_model=CalculateResponse)
def bed_times(
    hours: int = Query(..., ge=0, le=23),
    minutes: int = Query(..., ge=0, le=59),
    sleep_delay: int = Query(settings.DEFAULT_SLEEP_DELAY, ge=settings.MIN_SLEEP_DELAY, le=settings.MAX_SLEEP_DELAY),
):
    return _respond(Mode.BEDTIME, sleep_delay, WallClockTime(hours, minutes))

@app.get("/calculate/now", response_model=CalculateResponse)
def sleep_now(
    sleep_delay: int = Query(settings.DEFAULT_SLEEP_DELAY, ge=settings.MIN_SLEEP_DELAY, le=settings.MAX_SLEEP_DELAY),
):
    return _respond(Mode.NOW, sleep_delay)

@app.get("/duration", response_model=DurationResponse)
def duration(
    bed_hours: int = Query(..., ge=0, le=23),
    bed_minutes: int = Query(..., ge=0, le=59),
    wake_hours: int = Query(..., ge=0, le=23),
    wake_minutes: int = Query(..., ge=0, le=59),
):
    bed = WallClockTime(bed_hours, bed_minutes)
    wake = WallClockTime(wake_hours, wake_minutes)
    d = get_sleep_duration(bed, wake)
    cycles = get_sleep_cycles(bed, wake)
    q = get_sleep_quality(cycles)
    return DurationResponse(
        hours=d.hours,
        minutes=d.minutes,
        cycles=cycles,
        quality=QualityOut(rating=q.rating, description=q.description),
    )

@app.post("/records", response_model=SleepRecordOut, status_code=201)
def create_record(body: SleepRecordIn, db: Session = Depends(get_session)):
    return add_record(
        db,
        body.date,
        body.hours_slept,
        body.quality,
        woke_up_during_night=body.woke_up_during_night,
        notes=body.notes,
    )

@app.get("/records", response_model=list[SleepRecordOut])
def get_records(db: Session = Depends(get_session)):
    return list_records(db)

@app.get("/records/stats", response_model=SleepStats)
def get_stats(db: Session = Depends(get_session)):
    return record_stats(db)

@app.delete("/records/{record_id}")
def delete_record(record_id: int, db: Session = Depends(get_session)):
    if not remove_record(db, record_id):
        raise HTTPException(404, "record not found")
    return {"ok": True, "id": record_id}

@app.delete("/records")
def delete_all_records(db: Session = Depends(get_session)):
    removed = clear_records(db)
    return {"ok": True, "removed": removed}
