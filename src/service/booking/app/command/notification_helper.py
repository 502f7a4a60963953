"""
Post-commit notification helper.

A notification is a side effect of a state change that has already committed,
so delivery failures are logged and counted but never reach the caller.
"""

import anyio

from src.platform.context.request_context import RequestContext
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.interface.i_notification_dispatcher import INotificationDispatcher
from src.service.booking.domain.enum.notification_type import RecipientType
from src.service.booking.domain.value_object.notification_message import NotificationMessage


NOTIFY_TIMEOUT_SECONDS = 5.0


@Logger.io
async def dispatch_notification(
    *,
    dispatcher: INotificationDispatcher,
    message: NotificationMessage,
    context: RequestContext,
) -> None:
    try:
        with anyio.fail_after(NOTIFY_TIMEOUT_SECONDS):
            if message.recipient_type == RecipientType.USER:
                await dispatcher.notify_user(
                    user_id=message.recipient_id,
                    type=message.type,
                    title=message.title,
                    message=message.message,
                    related_id=message.related_id,
                )
            else:
                await dispatcher.notify_restaurant(
                    restaurant_id=message.recipient_id,
                    type=message.type,
                    title=message.title,
                    message=message.message,
                    related_id=message.related_id,
                )
    except Exception:
        metrics.record_notification(notification_type=message.type, result='error')
        context.logger.exception(
            f'📭 [NOTIFY] Failed to deliver {message.type} to '
            f'{message.recipient_type} {message.recipient_id}'
        )
        return

    metrics.record_notification(notification_type=message.type, result='success')
    context.logger.info(
        f'📬 [NOTIFY] {message.type} -> {message.recipient_type} {message.recipient_id}'
    )
