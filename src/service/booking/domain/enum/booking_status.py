from enum import StrEnum


class BookingStatus(StrEnum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    REJECTED = 'rejected'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset(
    {BookingStatus.REJECTED, BookingStatus.CANCELLED, BookingStatus.COMPLETED}
)


class BookingAction(StrEnum):
    CONFIRM = 'confirm'
    REJECT = 'reject'
    CANCEL = 'cancel'
    COMPLETE = 'complete'
    PROPOSE_ALTERNATIVE = 'propose_alternative'
