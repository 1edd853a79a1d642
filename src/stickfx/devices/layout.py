"""LED address space of a connected device."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from stickfx.exceptions import LedOutOfRangeError, UnsupportedDeviceError

# Report 0x6 starts with the report id and one metadata byte
HEADER_SIZE = 2
BYTES_PER_LED = 3


class LedLayout(BaseModel):
    """
    How many LEDs a device has and how large its LED report is.

    Derived once when the device is opened from the size of the LED
    report it returns: ``max_leds = (reported_bytes - 2) // 3``.
    """

    model_config = ConfigDict(frozen=True)

    max_leds: int = Field(ge=1, description="Number of addressable LEDs")

    @classmethod
    def from_report_size(cls, reported_bytes: int) -> "LedLayout":
        """
        Derive the layout from the byte count of the LED report.

        Example:
            >>> LedLayout.from_report_size(98).max_leds
            32

        Raises:
            UnsupportedDeviceError: If the report cannot hold a single LED
        """
        max_leds = (reported_bytes - HEADER_SIZE) // BYTES_PER_LED
        if max_leds < 1:
            raise UnsupportedDeviceError(reported_bytes)
        return cls(max_leds=max_leds)

    @property
    def report_length(self) -> int:
        """Length in bytes of a full LED report."""
        return self.max_leds * BYTES_PER_LED + HEADER_SIZE

    @property
    def leds(self) -> range:
        """Every valid LED index."""
        return range(self.max_leds)

    def offset(self, led: int) -> int:
        """Byte offset of ``led``'s triplet within the LED report."""
        return led * BYTES_PER_LED + HEADER_SIZE

    def validate(self, led: int) -> None:
        """
        Check a single LED index.

        Raises:
            LedOutOfRangeError: If led is not in 0..max_leds-1
        """
        if not 0 <= led < self.max_leds:
            raise LedOutOfRangeError(led, self.max_leds)

    def validate_all(self, leds: Iterable[int]) -> None:
        """
        Check every LED index, stopping at the first invalid one.

        Raises:
            LedOutOfRangeError: For the first index outside the device
        """
        for led in leds:
            self.validate(led)
