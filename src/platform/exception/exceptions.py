class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    code: str = 'error'

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    code = 'domain_error'

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    code = 'not_found'

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    code = 'conflict'

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


# =============================================================================
# Booking lifecycle
# =============================================================================


class InvalidBookingStatusError(CustomBaseError):
    """Requested transition is not legal from the booking's current status."""

    code = 'invalid_booking_status'

    def __init__(self, message: str = 'Invalid booking status') -> None:
        super().__init__(message, 422)


class NoAvailabilityError(CustomBaseError):
    """No slot matches the requested time, or it has too few free seats."""

    code = 'no_availability'

    def __init__(self, message: str = 'No availability for this time') -> None:
        super().__init__(message, 422)


class InsufficientCapacityError(CustomBaseError):
    """Seat adjustment would push a slot's reserved count above its capacity."""

    code = 'insufficient_capacity'

    def __init__(self, message: str = 'Insufficient capacity') -> None:
        super().__init__(message, 422)


class AlternativeNotFoundError(NotFoundError):
    """Alternative is unknown or has already been accepted or rejected."""

    code = 'alternative_not_found'

    def __init__(self, message: str = 'Alternative not found or already processed') -> None:
        super().__init__(message)


# =============================================================================
# Infrastructure (retryable by the caller)
# =============================================================================


class DeadlineExceededError(CustomBaseError):
    code = 'deadline_exceeded'

    def __init__(self, message: str = 'Operation deadline exceeded') -> None:
        super().__init__(message, 504)


class TransientStoreError(CustomBaseError):
    code = 'transient_store_error'

    def __init__(self, message: str = 'Storage temporarily unavailable') -> None:
        super().__init__(message, 503)
