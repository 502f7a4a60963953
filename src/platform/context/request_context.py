"""
Per-request context passed explicitly through the call chain.

Carries the request id (bound onto every log line written for the request)
and the caller's deadline. Use cases receive it as a keyword argument; nothing
request-scoped lives in module globals.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from time import monotonic
from typing import TYPE_CHECKING

import anyio
import attrs
from fastapi import Request

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DeadlineExceededError
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7 import new_uuid7


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger


REQUEST_ID_HEADER = 'X-Request-ID'
REQUEST_TIMEOUT_HEADER = 'X-Request-Timeout'


def _default_request_id() -> str:
    return str(new_uuid7())


def _default_timeout() -> float:
    return settings.REQUEST_TIMEOUT_SECONDS


@attrs.define(frozen=True)
class RequestContext:
    request_id: str = attrs.field(factory=_default_request_id)
    timeout: float = attrs.field(factory=_default_timeout)
    started_at: float = attrs.field(factory=monotonic)

    @timeout.validator
    def _check_timeout(self, attribute: attrs.Attribute, value: float) -> None:
        if value <= 0:
            raise ValueError('timeout must be positive')

    @property
    def logger(self) -> 'LoguruLogger':
        return Logger.for_request(self.request_id)

    @property
    def remaining(self) -> float:
        return max(self.timeout - (monotonic() - self.started_at), 0.0)

    @contextmanager
    def deadline(self) -> Iterator[None]:
        """
        Run the enclosed block under what is left of the caller's deadline.

        On expiry the in-flight database call is cancelled, the surrounding unit
        of work rolls back, and DeadlineExceededError is raised instead of the
        bare TimeoutError so callers can tell it apart from business errors.
        """
        try:
            with anyio.fail_after(self.remaining):
                yield
        except TimeoutError as e:
            raise DeadlineExceededError(
                f'Operation exceeded its {self.timeout:g}s deadline'
            ) from e


def get_request_context(request: Request) -> RequestContext:
    """FastAPI dependency: build the context from request headers."""
    request_id = getattr(request.state, 'request_id', None) or request.headers.get(
        REQUEST_ID_HEADER
    )
    timeout = settings.REQUEST_TIMEOUT_SECONDS
    if raw_timeout := request.headers.get(REQUEST_TIMEOUT_HEADER):
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f'{REQUEST_TIMEOUT_HEADER} must be a number of seconds') from e
        if timeout <= 0:
            raise ValueError(f'{REQUEST_TIMEOUT_HEADER} must be positive')
        timeout = min(timeout, settings.MAX_REQUEST_TIMEOUT_SECONDS)

    return RequestContext(request_id=request_id or _default_request_id(), timeout=timeout)
