import datetime as dt
from typing import Optional
from uuid import UUID

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'bookings'
    __table_args__ = (
        CheckConstraint('guests_count >= 1', name='ck_bookings_guests_positive'),
        CheckConstraint('duration >= 1', name='ck_bookings_duration_positive'),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)  # UUID7
    restaurant_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('restaurants.id', ondelete='CASCADE'), nullable=False, index=True
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    slot_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid, ForeignKey('availability.id', ondelete='SET NULL'), nullable=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=120)  # minutes
    guests_count: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False, index=True)
    comment: Mapped[str] = mapped_column(Text, nullable=False, default='')
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    confirmed_at: Mapped[Optional[dt.datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    rejected_at: Mapped[Optional[dt.datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    completed_at: Mapped[Optional[dt.datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class BookingAlternativeModel(Base):
    __tablename__ = 'booking_alternatives'
    __table_args__ = (
        CheckConstraint(
            'accepted_at IS NULL OR rejected_at IS NULL', name='ck_alternatives_single_decision'
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)  # UUID7
    booking_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('bookings.id', ondelete='CASCADE'), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[str] = mapped_column(String(5), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False, default='')
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    accepted_at: Mapped[Optional[dt.datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    rejected_at: Mapped[Optional[dt.datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
