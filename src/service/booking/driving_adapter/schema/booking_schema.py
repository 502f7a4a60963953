import datetime as dt
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class BookingCreateRequest(BaseModel):
    restaurant_id: UUID
    user_id: UUID
    date: dt.date
    time: str  # HH:MM, must match a published slot
    guests_count: int
    duration: Optional[int] = None  # minutes, defaults to 120
    comment: str = ''

    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {
                    'restaurant_id': '01936d8f-5e73-7c4e-a9c5-000000000001',
                    'user_id': '01936d8f-5e73-7c4e-a9c5-000000000002',
                    'date': '2025-04-15',
                    'time': '19:00',
                    'guests_count': 4,
                    'duration': 120,
                    'comment': 'Window table please',
                },
                {
                    'restaurant_id': '01936d8f-5e73-7c4e-a9c5-000000000001',
                    'user_id': '01936d8f-5e73-7c4e-a9c5-000000000002',
                    'date': '2025-04-15',
                    'time': '19:00',
                    'guests_count': 2,
                },
            ]
        }
    )


class IdResponse(BaseModel):
    id: UUID

    model_config = ConfigDict(
        json_schema_extra={'example': {'id': '01936d8f-5e73-7c4e-a9c5-123456789abc'}}
    )


class RejectBookingRequest(BaseModel):
    reason: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={'example': {'reason': 'Fully booked'}})


class AlternativeCreateRequest(BaseModel):
    date: dt.date
    time: str
    message: str = ''

    model_config = ConfigDict(
        json_schema_extra={
            'example': {'date': '2025-04-16', 'time': '20:30', 'message': 'How about tomorrow?'}
        }
    )


class AlternativeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    booking_id: UUID
    date: dt.date
    time: str
    message: str
    created_at: Optional[dt.datetime] = None
    accepted_at: Optional[dt.datetime] = None
    rejected_at: Optional[dt.datetime] = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'restaurant_id': '01936d8f-5e73-7c4e-a9c5-000000000001',
                'user_id': '01936d8f-5e73-7c4e-a9c5-000000000002',
                'date': '2025-04-15',
                'time': '19:00',
                'duration': 120,
                'guests_count': 4,
                'status': 'pending',
                'comment': '',
                'created_at': '2025-04-01T10:30:00Z',
                'updated_at': '2025-04-01T10:30:00Z',
                'confirmed_at': None,
                'rejected_at': None,
                'completed_at': None,
                'alternatives': [],
            }
        },
    )

    id: UUID
    restaurant_id: UUID
    user_id: UUID
    date: dt.date
    time: str
    duration: int
    guests_count: int
    status: str
    comment: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    confirmed_at: Optional[dt.datetime] = None
    rejected_at: Optional[dt.datetime] = None
    completed_at: Optional[dt.datetime] = None
    alternatives: List[AlternativeResponse] = []
