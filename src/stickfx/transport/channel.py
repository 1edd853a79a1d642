"""HID feature-report channel.

The channel is the only code that talks to hidapi. It exposes exactly the
two operations the rest of the library needs (send a feature report, read
a feature report) and raises hidapi's own exceptions unchanged; retrying
and classifying failures is the job of ``FeatureTransport``.
"""

from __future__ import annotations

import logging
from typing import Protocol

import hid

from stickfx.exceptions import wrap_hid_error
from stickfx.models import DeviceConfig

logger = logging.getLogger(__name__)


class FeatureChannel(Protocol):
    """Protocol for a duplex feature-report transport."""

    def send_feature_report(self, data: bytes) -> None:
        """
        Send one feature report.

        Args:
            data: Complete report, report id in byte 0

        Raises:
            OSError: If the transfer failed
        """
        ...

    def get_feature_report(self, report_id: int, length: int) -> bytes:
        """
        Read one feature report.

        Args:
            report_id: Report to read
            length: Maximum number of bytes to read (including the report id)

        Returns:
            Bytes read, report id in byte 0

        Raises:
            OSError: If the transfer failed
        """
        ...

    def close(self) -> None:
        """Release the underlying device."""
        ...


class HidChannel:
    """Feature-report channel backed by a ``hid.device``."""

    def __init__(self, device: hid.device, config: DeviceConfig):
        """
        Wrap an already opened hidapi device.

        Args:
            device: Opened hidapi device handle
            config: Configuration the device was opened with
        """
        self._device = device
        self.config = config

    @classmethod
    def open(cls, config: DeviceConfig) -> HidChannel:
        """
        Open the first device matching ``config``.

        Raises:
            DeviceNotFoundError: If no matching device could be opened
            DeviceError: For any other open failure
        """
        device = hid.device()
        try:
            device.open(config.vendor_id, config.product_id, config.serial_number)
        except (OSError, ValueError) as e:
            raise wrap_hid_error(e, config.vendor_id, config.product_id) from e

        logger.info(f"Opened HID device {config.device_label}")
        return cls(device, config)

    def send_feature_report(self, data: bytes) -> None:
        written = self._device.send_feature_report(data)
        # Older hidapi builds signal failure through the return value
        if written < 0:
            raise OSError(f"send_feature_report returned {written}")

    def get_feature_report(self, report_id: int, length: int) -> bytes:
        return bytes(self._device.get_feature_report(report_id, length))

    def close(self) -> None:
        self._device.close()
        logger.info(f"Closed HID device {self.config.device_label}")


def list_devices(config: DeviceConfig | None = None) -> list[dict]:
    """
    Enumerate connected devices matching the configured vendor/product id.

    Returns:
        One dict per device with 'path', 'serial_number', 'manufacturer'
        and 'product' keys
    """
    config = config or DeviceConfig()
    devices = []
    for info in hid.enumerate(config.vendor_id, config.product_id):
        path = info.get("path", b"")
        devices.append({
            "path": path.decode(errors="replace") if isinstance(path, bytes) else str(path),
            "serial_number": info.get("serial_number") or "",
            "manufacturer": info.get("manufacturer_string") or "",
            "product": info.get("product_string") or "",
        })
    logger.debug(f"Found {len(devices)} device(s) matching {config.device_label}")
    return devices
