# sleepcycle/models.py
from datetime import datetime, date
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Integer, Boolean, Date, DateTime, Float, Text, Index, func

QUALITY_RATINGS = ("Poor", "Fair", "Good", "Excellent")

class Base(DeclarativeBase):
    pass

class SleepRecord(Base):
    __tablename__ = "sleep_records"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[date] = mapped_column(Date)
    hours_slept: Mapped[float] = mapped_column(Float)
    quality: Mapped[str] = mapped_column(String(16))
    woke_up_during_night: Mapped[bool] = mapped_column(Boolean, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_sleep_records_date", "date"),
    )
