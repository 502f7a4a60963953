from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.context.request_context import RequestContext, get_request_context
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.accept_alternative_use_case import AcceptAlternativeUseCase
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.reject_alternative_use_case import RejectAlternativeUseCase
from src.service.booking.app.command.suggest_alternative_time_use_case import (
    SuggestAlternativeTimeUseCase,
)
from src.service.booking.app.command.update_booking_status_to_cancelled_use_case import (
    UpdateBookingStatusToCancelledUseCase,
)
from src.service.booking.app.command.update_booking_status_to_completed_use_case import (
    UpdateBookingStatusToCompletedUseCase,
)
from src.service.booking.app.command.update_booking_status_to_confirmed_use_case import (
    UpdateBookingStatusToConfirmedUseCase,
)
from src.service.booking.app.command.update_booking_status_to_rejected_use_case import (
    UpdateBookingStatusToRejectedUseCase,
)
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.booking.driving_adapter.schema.booking_schema import (
    AlternativeCreateRequest,
    AlternativeResponse,
    BookingCreateRequest,
    BookingResponse,
    IdResponse,
    RejectBookingRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    context: RequestContext = Depends(get_request_context),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> IdResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('request.id', context.request_id)
        booking = await use_case.execute(
            restaurant_id=request.restaurant_id,
            user_id=request.user_id,
            date=request.date,
            time=request.time,
            guests_count=request.guests_count,
            duration=request.duration,
            comment=request.comment,
            context=context,
        )
        return IdResponse(id=booking.id)


# Static prefixes are registered before '/{booking_id}' so they are matched first


@router.get('/restaurant/{restaurant_id}', response_model=List[BookingResponse])
@Logger.io
async def list_restaurant_bookings(
    restaurant_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_restaurant_bookings(
        restaurant_id=restaurant_id, context=context
    )
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get('/user/{user_id}', response_model=List[BookingResponse])
@Logger.io
async def list_user_bookings(
    user_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_user_bookings(user_id=user_id, context=context)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get('/alternative/{alternative_id}')
@Logger.io
async def get_alternative(
    alternative_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> AlternativeResponse:
    alternative = await use_case.get_alternative(alternative_id=alternative_id, context=context)
    return AlternativeResponse.model_validate(alternative)


@router.post('/alternative/{alternative_id}/accept')
@Logger.io
async def accept_alternative(
    alternative_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: AcceptAlternativeUseCase = Depends(AcceptAlternativeUseCase.depends),
) -> BookingResponse:
    booking = await use_case.execute(alternative_id=alternative_id, context=context)
    return BookingResponse.model_validate(booking)


@router.post('/alternative/{alternative_id}/reject')
@Logger.io
async def reject_alternative(
    alternative_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: RejectAlternativeUseCase = Depends(RejectAlternativeUseCase.depends),
) -> AlternativeResponse:
    alternative = await use_case.execute(alternative_id=alternative_id, context=context)
    return AlternativeResponse.model_validate(alternative)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id, context=context)
    return BookingResponse.model_validate(booking)


@router.post('/{booking_id}/confirm')
@Logger.io
async def confirm_booking(
    booking_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: UpdateBookingStatusToConfirmedUseCase = Depends(
        UpdateBookingStatusToConfirmedUseCase.depends
    ),
) -> BookingResponse:
    booking = await use_case.execute(booking_id=booking_id, context=context)
    return BookingResponse.model_validate(booking)


@router.post('/{booking_id}/reject')
@Logger.io
async def reject_booking(
    booking_id: UUID,
    request: RejectBookingRequest | None = None,
    context: RequestContext = Depends(get_request_context),
    use_case: UpdateBookingStatusToRejectedUseCase = Depends(
        UpdateBookingStatusToRejectedUseCase.depends
    ),
) -> BookingResponse:
    booking = await use_case.execute(
        booking_id=booking_id,
        reason=request.reason if request else None,
        context=context,
    )
    return BookingResponse.model_validate(booking)


@router.post('/{booking_id}/cancel')
@Logger.io
async def cancel_booking(
    booking_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: UpdateBookingStatusToCancelledUseCase = Depends(
        UpdateBookingStatusToCancelledUseCase.depends
    ),
) -> BookingResponse:
    booking = await use_case.execute(booking_id=booking_id, context=context)
    return BookingResponse.model_validate(booking)


@router.post('/{booking_id}/complete')
@Logger.io
async def complete_booking(
    booking_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: UpdateBookingStatusToCompletedUseCase = Depends(
        UpdateBookingStatusToCompletedUseCase.depends
    ),
) -> BookingResponse:
    booking = await use_case.execute(booking_id=booking_id, context=context)
    return BookingResponse.model_validate(booking)


@router.post('/{booking_id}/alternative', status_code=status.HTTP_201_CREATED)
@Logger.io
async def suggest_alternative_time(
    booking_id: UUID,
    request: AlternativeCreateRequest,
    context: RequestContext = Depends(get_request_context),
    use_case: SuggestAlternativeTimeUseCase = Depends(SuggestAlternativeTimeUseCase.depends),
) -> IdResponse:
    alternative = await use_case.execute(
        booking_id=booking_id,
        date=request.date,
        time=request.time,
        message=request.message,
        context=context,
    )
    return IdResponse(id=alternative.id)
