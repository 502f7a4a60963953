import datetime as dt
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class AvailabilityModel(Base):
    __tablename__ = 'availability'
    __table_args__ = (
        UniqueConstraint('restaurant_id', 'date', 'time_slot', name='uq_availability_slot'),
        CheckConstraint('capacity >= 1', name='ck_availability_capacity_positive'),
        CheckConstraint(
            'reserved >= 0 AND reserved <= capacity', name='ck_availability_reserved_range'
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)  # UUID7
    restaurant_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('restaurants.id', ondelete='CASCADE'), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time_slot: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    reserved: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
