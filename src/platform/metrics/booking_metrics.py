import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

from src.platform.exception.exceptions import CustomBaseError


class BookingMetrics:
    """
    Booking engine metrics collector

    Tracks booking lifecycle operations, seat ledger adjustments and
    notification delivery outcomes.
    """

    def __init__(self):
        # ========== Booking Lifecycle Metrics ==========
        self.booking_operations = Counter(
            'booking_operations_total',
            'Total booking state machine operations',
            ['operation', 'result'],  # result: success / error code
        )

        self.booking_operation_duration = Histogram(
            'booking_operation_duration_seconds',
            'Booking operation processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0],
        )

        # ========== Availability Ledger Metrics ==========
        self.seat_adjustments = Counter(
            'seat_adjustments_total',
            'Reserved seat adjustments against availability slots',
            ['direction', 'result'],  # direction: reserve/release
        )

        # ========== Notification Metrics ==========
        self.notifications = Counter(
            'booking_notifications_total',
            'Notifications dispatched after committed state changes',
            ['type', 'result'],
        )

    # ========== Helper Methods ==========

    def record_booking_operation(self, *, operation: str, result: str, duration: float):
        self.booking_operations.labels(operation=operation, result=result).inc()
        self.booking_operation_duration.labels(operation=operation).observe(duration)

    @contextmanager
    def track_booking_operation(self, operation: str) -> Iterator[None]:
        """Count and time the enclosed block; failures are labelled with their error code."""
        start_time = time.perf_counter()
        try:
            yield
        except CustomBaseError as e:
            self.record_booking_operation(
                operation=operation, result=e.code, duration=time.perf_counter() - start_time
            )
            raise
        except Exception:
            self.record_booking_operation(
                operation=operation, result='error', duration=time.perf_counter() - start_time
            )
            raise
        self.record_booking_operation(
            operation=operation, result='success', duration=time.perf_counter() - start_time
        )

    def record_seat_adjustment(self, *, delta: int, result: str):
        direction = 'reserve' if delta >= 0 else 'release'
        self.seat_adjustments.labels(direction=direction, result=result).inc()

    def record_notification(self, *, notification_type: str, result: str):
        self.notifications.labels(type=notification_type, result=result).inc()


# Global metrics instance
metrics = BookingMetrics()
