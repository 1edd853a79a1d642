"""Device configuration model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

BLINKSTICK_VENDOR_ID = 0x20A0
BLINKSTICK_PRODUCT_ID = 0x41E5


class DeviceConfig(BaseModel):
    """
    Settings used to open and talk to one BlinkStick.

    Passed explicitly to ``BlinkStick.open()``; the defaults match the
    BlinkStick USB identity so most callers never construct one. Nothing
    here is persisted.
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    vendor_id: int = Field(
        default=BLINKSTICK_VENDOR_ID, ge=0, le=0xFFFF, description="USB vendor id"
    )
    product_id: int = Field(
        default=BLINKSTICK_PRODUCT_ID, ge=0, le=0xFFFF, description="USB product id"
    )
    serial_number: Optional[str] = Field(
        default=None,
        description="Serial number to select one of several connected devices (None = first found)",
    )

    # Transaction retry
    immediate_attempts: int = Field(
        default=5, ge=1, description="Attempts made back to back before backing off"
    )
    retry_backoff: float = Field(
        default=0.01, ge=0.0, description="Sleep before the final attempt (seconds)"
    )

    # Discovery
    max_report_size: int = Field(
        default=100,
        ge=5,
        description=(
            "Read buffer length for the LED report. The largest BlinkStick "
            "(Flex, 32 LEDs) needs 32 * 3 + 2 = 98 bytes."
        ),
    )
    turn_off_on_open: bool = Field(
        default=True, description="Turn every LED off right after opening the device"
    )

    @property
    def device_label(self) -> str:
        """Human-readable vendor:product pair (e.g. '20a0:41e5')."""
        return f"{self.vendor_id:04x}:{self.product_id:04x}"
