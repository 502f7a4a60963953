import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'recipient_type': 'user',
                'recipient_id': '01936d8f-5e73-7c4e-a9c5-000000000002',
                'type': 'booking_confirmed',
                'title': 'Booking confirmed',
                'message': (
                    'Your booking on 15.04.2025 at 19:00 has been confirmed by the restaurant.'
                ),
                'related_id': '01936d8f-5e73-7c4e-a9c5-000000000003',
                'is_read': False,
                'created_at': '2025-04-01T10:30:00Z',
            }
        },
    )

    id: UUID
    recipient_type: str
    recipient_id: UUID
    type: str
    title: str
    message: str
    related_id: Optional[UUID] = None
    is_read: bool
    created_at: Optional[dt.datetime] = None
