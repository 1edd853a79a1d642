"""LED addressing exceptions."""

from .base import StickFxError


class LedOutOfRangeError(StickFxError):
    """An LED index outside the device's address space was supplied."""

    def __init__(self, led: int, max_leds: int):
        """
        Initialize out-of-range error.

        Args:
            led: The offending LED index
            max_leds: Number of LEDs the device exposes
        """
        super().__init__(
            user_message=(
                f"BlinkStick device does not contain led {led}. "
                f"Valid leds are 0-{max_leds - 1} (zero-indexed)"
            ),
            recovery_hint="Run 'stickfx info' to see how many LEDs the device has.",
        )
        self.led = led
        self.max_leds = max_leds

    @property
    def valid_range(self) -> range:
        """Range of LED indices the device accepts."""
        return range(self.max_leds)
