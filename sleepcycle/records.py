import logging
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy import func, case
from .models import SleepRecord, QUALITY_RATINGS

logger = logging.getLogger(__name__)

def add_record(
    db: Session,
    d: date,
    hours_slept: float,
    quality: str,
    woke_up_during_night: bool = False,
    notes: str | None = None,
) -> SleepRecord:
    if quality not in QUALITY_RATINGS:
        raise ValueError(f"quality must be one of {QUALITY_RATINGS}")
    rec = SleepRecord(
        date=d,
        hours_slept=hours_slept,
        quality=quality,
        woke_up_during_night=woke_up_during_night,
        notes=notes,
    )
    db.add(rec)
    db.commit()
    db.refresh(rec)
    logger.info(f"Saved sleep record {rec.id} for {d}")
    return rec

def list_records(db: Session) -> list[SleepRecord]:
    return db.query(SleepRecord).order_by(SleepRecord.id).all()

def remove_record(db: Session, record_id: int) -> bool:
    rec = db.get(SleepRecord, record_id)
    if not rec:
        return False
    db.delete(rec)
    db.commit()
    logger.info(f"Removed sleep record {record_id}")
    return True

def clear_records(db: Session) -> int:
    removed = db.query(SleepRecord).delete()
    db.commit()
    logger.info(f"Cleared {removed} sleep records")
    return removed

def record_stats(db: Session) -> dict:
    woke = func.sum(case((SleepRecord.woke_up_during_night == True, 1), else_=0))
    row = db.query(
        func.count(SleepRecord.id).label("count"),
        func.avg(SleepRecord.hours_slept).label("avg_hours"),
        woke.label("woke_up"),
    ).one()

    by_quality = dict.fromkeys(QUALITY_RATINGS, 0)
    for quality, n in db.query(SleepRecord.quality, func.count(SleepRecord.id)).group_by(SleepRecord.quality):
        by_quality[quality] = n

    return {
        "count": row.count,
        "average_hours": round(row.avg_hours or 0, 1),
        "woke_up_count": int(row.woke_up or 0),
        "quality_counts": by_quality,
    }
