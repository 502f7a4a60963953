"""Unit tests for the booking operation metric helper"""

import pytest
from prometheus_client import REGISTRY

from src.platform.exception.exceptions import NoAvailabilityError
from src.platform.metrics.booking_metrics import metrics


pytestmark = pytest.mark.unit


def _count(operation: str, result: str) -> float:
    value = REGISTRY.get_sample_value(
        'booking_operations_total', {'operation': operation, 'result': result}
    )
    return value or 0.0


class TestTrackBookingOperation:
    def test_success_is_counted(self) -> None:
        before = _count('metric_check', 'success')

        with metrics.track_booking_operation('metric_check'):
            pass

        assert _count('metric_check', 'success') == before + 1

    def test_domain_error_is_counted_by_code(self) -> None:
        before = _count('metric_check', 'no_availability')

        with pytest.raises(NoAvailabilityError):
            with metrics.track_booking_operation('metric_check'):
                raise NoAvailabilityError()

        assert _count('metric_check', 'no_availability') == before + 1

    def test_unexpected_error_is_counted_as_error(self) -> None:
        before = _count('metric_check', 'error')

        with pytest.raises(KeyError):
            with metrics.track_booking_operation('metric_check'):
                raise KeyError('boom')

        assert _count('metric_check', 'error') == before + 1
