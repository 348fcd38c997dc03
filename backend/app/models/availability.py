# backend/app/models/availability.py
#
# Scheduling tables. They are part of the schema so artists' data has a home,
# but no booking operation reads them: requests are accepted for any date.

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey

from .base import BaseModel


class AvailabilityWindow(BaseModel):
    """Recurring weekly availability for an artist."""

    __tablename__ = "availability_windows"

    id = Column(Integer, primary_key=True, index=True)
    artist_id = Column(Integer, ForeignKey("artist_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False, index=True)  # 0-6, 0 = Sunday
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)  # HH:MM
    timezone = Column(String(64), nullable=False)  # IANA name
    is_active = Column(Boolean, nullable=False, default=True)


class SlotLock(BaseModel):
    """Short-lived hold on a slot while a client completes a request."""

    __tablename__ = "slot_locks"

    id = Column(Integer, primary_key=True, index=True)
    artist_id = Column(Integer, ForeignKey("artist_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    start_time = Column(String(5), nullable=False)  # HH:MM
    duration_minutes = Column(Integer, nullable=False)
    locked_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)


class ArtistSettings(BaseModel):
    __tablename__ = "artist_settings"

    id = Column(Integer, primary_key=True, index=True)
    artist_id = Column(Integer, ForeignKey("artist_profiles.id", ondelete="CASCADE"), unique=True, nullable=False)
    booking_buffer_minutes = Column(Integer, nullable=False, default=0)
    advance_booking_days = Column(Integer, nullable=False, default=30)
    cancellation_policy = Column(Text, nullable=True)


class BlackoutDate(BaseModel):
    __tablename__ = "blackout_dates"

    id = Column(Integer, primary_key=True, index=True)
    artist_id = Column(Integer, ForeignKey("artist_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    reason = Column(String(255), nullable=True)
