"""Mock email sender: writes the mail to the log instead of an SMTP server."""

from collections import deque
from datetime import datetime, timezone
from typing import Deque

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_notification_dispatcher import IEmailSender


SENT_EMAILS_HISTORY = 100


class MockEmailSender(IEmailSender):
    def __init__(self, *, enabled: bool = True, history: int = SENT_EMAILS_HISTORY) -> None:
        self.enabled = enabled
        # Most recent emails only; the DI container keeps one sender per process
        self.sent_emails: Deque[dict] = deque(maxlen=history)

    @Logger.io
    async def send_email(self, *, to: str, subject: str, body: str) -> None:
        if not self.enabled:
            return

        email_data = {
            'to': to,
            'subject': subject,
            'body': body,
            'sent_at': datetime.now(timezone.utc),
        }
        self.sent_emails.append(email_data)

        Logger.base.info(f'📧 [MOCK EMAIL] To: {to}\nSubject: {subject}\nBody: {body}')
