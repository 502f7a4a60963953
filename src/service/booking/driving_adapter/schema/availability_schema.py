import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot


class PublishSlotRequest(BaseModel):
    restaurant_id: UUID
    date: dt.date
    time_slot: str  # HH:MM
    capacity: int

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'restaurant_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'date': '2025-04-15',
                'time_slot': '19:00',
                'capacity': 20,
            }
        }
    )


class AdjustReservedSeatsRequest(BaseModel):
    delta: int  # positive reserves, negative releases

    model_config = ConfigDict(json_schema_extra={'example': {'delta': 4}})


class SlotResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'restaurant_id': '01936d8f-5e73-7c4e-a9c5-000000000001',
                'date': '2025-04-15',
                'time_slot': '19:00',
                'capacity': 20,
                'reserved': 4,
                'available_seats': 16,
                'availability_status': 'available',
                'updated_at': '2025-04-01T10:30:00Z',
            }
        }
    )

    id: UUID
    restaurant_id: UUID
    date: dt.date
    time_slot: str
    capacity: int
    reserved: int
    available_seats: int
    availability_status: str
    updated_at: Optional[dt.datetime] = None

    @classmethod
    def from_entity(cls, slot: AvailabilitySlot) -> 'SlotResponse':
        return cls(
            id=slot.id,
            restaurant_id=slot.restaurant_id,
            date=slot.date,
            time_slot=slot.time_slot,
            capacity=slot.capacity,
            reserved=slot.reserved,
            available_seats=slot.available_seats,
            availability_status=slot.availability_status(),
            updated_at=slot.updated_at,
        )


class CheckAvailabilityResponse(BaseModel):
    available: bool

    model_config = ConfigDict(json_schema_extra={'example': {'available': True}})
