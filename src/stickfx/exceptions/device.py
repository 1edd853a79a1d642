"""Device-related exceptions.

This module defines exceptions for the HID device and its feature reports:
- DeviceError: Base class for device errors
- DeviceNotFoundError: No matching device could be opened
- UnsupportedDeviceError: Device reported a layout we cannot drive
- FeatureReportError: A feature report transaction failed after all retries
- FeatureSendError / FeatureGetError: Direction-specific transaction failures
"""

from typing import Optional

from .base import StickFxError


class DeviceError(StickFxError):
    """HID device initialization or operation failed."""

    pass


class DeviceNotFoundError(DeviceError):
    """No device with the requested vendor/product id could be opened."""

    def __init__(self, vendor_id: int, product_id: int, original_error: Optional[str] = None):
        """
        Initialize device-not-found error.

        Args:
            vendor_id: USB vendor id that was requested
            product_id: USB product id that was requested
            original_error: The original error message from hidapi
        """
        user_msg = f"No BlinkStick found (vendor 0x{vendor_id:04x}, product 0x{product_id:04x})."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        recovery = (
            "Check that the device is plugged in and that your user may access "
            "hidraw devices (udev rules on Linux). Run 'stickfx list' to see connected devices."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=recovery,
        )
        self.vendor_id = vendor_id
        self.product_id = product_id


class UnsupportedDeviceError(DeviceError):
    """Device reported a feature report too short to address any LED."""

    def __init__(self, report_size: int):
        super().__init__(
            user_message=f"Device reported {report_size} bytes for the LED report; no LEDs can be addressed.",
        )
        self.report_size = report_size


class FeatureReportError(DeviceError):
    """A feature report transaction failed after exhausting all retries."""

    direction = "transfer"

    def __init__(self, report_id: int, attempts: int, original_error: Optional[str] = None):
        """
        Initialize feature report error.

        Args:
            report_id: Report id of the failed transaction
            attempts: Number of attempts made before giving up
            original_error: Last error raised by the transport
        """
        user_msg = f"Could not {self.direction} feature report 0x{report_id:x}."
        tech_msg = f"Feature report 0x{report_id:x} {self.direction} failed after {attempts} attempts"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint="Reconnect the device and try again.",
        )
        self.report_id = report_id
        self.attempts = attempts


class FeatureSendError(FeatureReportError):
    """Sending a feature report failed."""

    direction = "send"


class FeatureGetError(FeatureReportError):
    """Reading a feature report failed."""

    direction = "get"
