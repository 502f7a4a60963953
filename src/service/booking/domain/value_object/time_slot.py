import re

from src.platform.exception.exceptions import DomainError


_TIME_SLOT_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


def validate_time_slot(value: str, *, field_name: str = 'time_slot') -> str:
    """Slots and booking times are zero-padded 24h ``HH:MM`` strings."""
    if not isinstance(value, str) or not _TIME_SLOT_PATTERN.match(value):
        raise DomainError(f'{field_name} must be in HH:MM format, got {value!r}')
    return value
