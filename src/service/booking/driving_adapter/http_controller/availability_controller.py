import datetime as dt
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.context.request_context import RequestContext, get_request_context
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.adjust_reserved_seats_use_case import (
    AdjustReservedSeatsUseCase,
)
from src.service.booking.app.command.publish_slot_use_case import PublishSlotUseCase
from src.service.booking.app.query.check_availability_use_case import CheckAvailabilityUseCase
from src.service.booking.app.query.get_slots_use_case import GetSlotsUseCase
from src.service.booking.driving_adapter.schema.availability_schema import (
    AdjustReservedSeatsRequest,
    CheckAvailabilityResponse,
    PublishSlotRequest,
    SlotResponse,
)


router = APIRouter()


@router.get('/{restaurant_id}', response_model=List[SlotResponse])
@Logger.io
async def get_slots(
    restaurant_id: UUID,
    date: dt.date,
    context: RequestContext = Depends(get_request_context),
    use_case: GetSlotsUseCase = Depends(GetSlotsUseCase.depends),
) -> List[SlotResponse]:
    slots = await use_case.execute(restaurant_id=restaurant_id, date=date, context=context)
    return [SlotResponse.from_entity(slot) for slot in slots]


@router.put('', status_code=status.HTTP_200_OK)
@Logger.io
async def publish_slot(
    request: PublishSlotRequest,
    context: RequestContext = Depends(get_request_context),
    use_case: PublishSlotUseCase = Depends(PublishSlotUseCase.depends),
) -> SlotResponse:
    slot = await use_case.execute(
        restaurant_id=request.restaurant_id,
        date=request.date,
        time_slot=request.time_slot,
        capacity=request.capacity,
        context=context,
    )
    return SlotResponse.from_entity(slot)


@router.patch('/{slot_id}/reserved')
@Logger.io
async def adjust_reserved_seats(
    slot_id: UUID,
    request: AdjustReservedSeatsRequest,
    context: RequestContext = Depends(get_request_context),
    use_case: AdjustReservedSeatsUseCase = Depends(AdjustReservedSeatsUseCase.depends),
) -> SlotResponse:
    slot = await use_case.execute(slot_id=slot_id, delta=request.delta, context=context)
    return SlotResponse.from_entity(slot)


@router.get('/{restaurant_id}/check')
@Logger.io
async def check_availability(
    restaurant_id: UUID,
    date: dt.date,
    time_slot: str,
    guests_count: int,
    context: RequestContext = Depends(get_request_context),
    use_case: CheckAvailabilityUseCase = Depends(CheckAvailabilityUseCase.depends),
) -> CheckAvailabilityResponse:
    available = await use_case.execute(
        restaurant_id=restaurant_id,
        date=date,
        time_slot=time_slot,
        guests_count=guests_count,
        context=context,
    )
    return CheckAvailabilityResponse(available=available)
