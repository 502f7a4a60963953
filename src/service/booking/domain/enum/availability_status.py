from enum import StrEnum


class AvailabilityStatus(StrEnum):
    AVAILABLE = 'available'
    LIMITED = 'limited'
    FULLY_BOOKED = 'fully_booked'
