from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.context.request_context import RequestContext, get_request_context
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.mark_notification_as_read_use_case import (
    MarkNotificationAsReadUseCase,
)
from src.service.booking.app.query.list_notifications_use_case import ListNotificationsUseCase
from src.service.booking.driving_adapter.schema.notification_schema import NotificationResponse


router = APIRouter()


@router.get('/user/{user_id}', response_model=List[NotificationResponse])
@Logger.io
async def list_user_notifications(
    user_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: ListNotificationsUseCase = Depends(ListNotificationsUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_user_notifications(user_id=user_id, context=context)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.get('/restaurant/{restaurant_id}', response_model=List[NotificationResponse])
@Logger.io
async def list_restaurant_notifications(
    restaurant_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: ListNotificationsUseCase = Depends(ListNotificationsUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_restaurant_notifications(
        restaurant_id=restaurant_id, context=context
    )
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.post('/{notification_id}/read', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def mark_notification_as_read(
    notification_id: UUID,
    context: RequestContext = Depends(get_request_context),
    use_case: MarkNotificationAsReadUseCase = Depends(MarkNotificationAsReadUseCase.depends),
) -> None:
    await use_case.execute(notification_id=notification_id, context=context)
