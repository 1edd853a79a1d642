"""Retrying feature-report transactions.

USB scheduling contention makes individual BlinkStick transfers fail now
and then. Every transaction therefore goes through ``FeatureTransport``:

::

    attempt x immediate_attempts   (back to back)
          | all failed
    sleep retry_backoff
          |
    final attempt
          | failed
    raise FeatureSendError / FeatureGetError

There is no exponential backoff and no jitter. This is the only place that
inspects transport exceptions; everything above it sees
``FeatureReportError`` or success.
"""

import logging
import time
from typing import Callable, Optional, TypeVar

from stickfx.exceptions import FeatureGetError, FeatureSendError

from .channel import FeatureChannel

logger = logging.getLogger(__name__)

T = TypeVar('T')

# hidapi raises OSError for failed transfers and ValueError once closed
TRANSPORT_ERRORS = (OSError, ValueError)


class FeatureTransport:
    """Send and receive feature reports with bounded retry."""

    def __init__(
        self,
        channel: FeatureChannel,
        immediate_attempts: int = 5,
        retry_backoff: float = 0.01,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize transport.

        Args:
            channel: Underlying feature-report channel
            immediate_attempts: Attempts made back to back before backing off
            retry_backoff: Seconds to sleep before the single final attempt
            sleep: Sleep function (injectable for tests)
        """
        self.channel = channel
        self.immediate_attempts = immediate_attempts
        self.retry_backoff = retry_backoff
        self._sleep = sleep

    @property
    def total_attempts(self) -> int:
        """Attempts made for one transaction before it is reported as failed."""
        return self.immediate_attempts + 1

    def send(self, frame: bytes) -> None:
        """
        Send a complete feature report.

        Args:
            frame: Report bytes, report id in byte 0

        Raises:
            FeatureSendError: If every attempt failed
        """
        report_id = frame[0]
        _, error = self._attempt(lambda: self.channel.send_feature_report(frame), "send", report_id)
        if error is not None:
            raise FeatureSendError(report_id, self.total_attempts, original_error=str(error)) from error

    def receive(self, report_id: int, length: int) -> bytes:
        """
        Read a feature report.

        Args:
            report_id: Report to read
            length: Read buffer length in bytes

        Returns:
            Report bytes, report id in byte 0

        Raises:
            FeatureGetError: If every attempt failed
        """
        data, error = self._attempt(
            lambda: self.channel.get_feature_report(report_id, length), "get", report_id
        )
        if error is not None:
            raise FeatureGetError(report_id, self.total_attempts, original_error=str(error)) from error
        return data

    def _attempt(
        self, operation: Callable[[], T], direction: str, report_id: int
    ) -> tuple[Optional[T], Optional[Exception]]:
        """Run ``operation`` under the retry policy; return (result, last_error)."""
        last_error: Optional[Exception] = None

        for attempt in range(1, self.immediate_attempts + 1):
            try:
                return operation(), None
            except TRANSPORT_ERRORS as e:
                last_error = e
                logger.debug(
                    f"Feature report 0x{report_id:x} {direction} attempt "
                    f"{attempt}/{self.total_attempts} failed: {e}"
                )

        logger.warning(
            f"Feature report 0x{report_id:x} {direction} failed {self.immediate_attempts} times, "
            f"retrying once after {self.retry_backoff * 1000:.0f} ms"
        )
        self._sleep(self.retry_backoff)

        try:
            return operation(), None
        except TRANSPORT_ERRORS as e:
            logger.error(
                f"Feature report 0x{report_id:x} {direction} failed after {self.total_attempts} attempts: {e}"
            )
            return None, e
