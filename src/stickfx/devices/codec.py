"""
Byte layout of BlinkStick LED feature reports.

Two reports carry colors::

    Report 0x5 (single LED, write only), 6 bytes:

        [0x05, 0x00, led, R, G, B]

    Report 0x6 (every LED, read and write), max_leds * 3 + 2 bytes:

        [0x06, meta, G0, R0, B0, G1, R1, B1, ...]
                     └─ led 0 ┘  └─ led 1 ┘

LED ``n``'s triplet starts at byte ``n * 3 + 2``. Multi-LED reports store
each triplet in **G, R, B** order while the single-LED report uses R, G, B.
This is how the firmware reads the bytes and must not be "fixed".

In a 0x6 write every LED that is not in the mapping is sent as zero, so
it turns off.
"""

from collections.abc import Mapping

from stickfx.models import Color, FrameScope

from .layout import LedLayout

SINGLE_LED_REPORT_ID = 0x5
LED_REPORT_ID = 0x6
SINGLE_LED_REPORT_LENGTH = 6


class FrameCodec:
    """Convert {led: Color} mappings to report bytes and back."""

    def __init__(self, layout: LedLayout):
        self.layout = layout

    def encode(self, colors: Mapping[int, Color], scope: FrameScope) -> bytes:
        """
        Build the report for ``colors``.

        Args:
            colors: LED index to color
            scope: ONE for the single-LED report, MANY/ALL for the LED report

        Returns:
            Report bytes ready to send

        Raises:
            LedOutOfRangeError: If an index is outside the device
            ValueError: If ONE is used with anything but one LED, or ALL
                does not cover every LED
        """
        self.layout.validate_all(colors)

        if scope is FrameScope.ONE:
            if len(colors) != 1:
                raise ValueError(f"Single-LED frame needs exactly one LED, got {len(colors)}")
            (led, color), = colors.items()
            return self.encode_single(led, color)

        if scope is FrameScope.ALL and len(colors) != self.layout.max_leds:
            raise ValueError(
                f"Frame for all LEDs needs {self.layout.max_leds} colors, got {len(colors)}"
            )

        frame = bytearray(self.layout.report_length)
        frame[0] = LED_REPORT_ID
        for led, color in colors.items():
            offset = self.layout.offset(led)
            frame[offset] = color.g
            frame[offset + 1] = color.r
            frame[offset + 2] = color.b
        return bytes(frame)

    def encode_single(self, led: int, color: Color) -> bytes:
        """Build the 6-byte single-LED report (R, G, B order)."""
        self.layout.validate(led)
        return bytes([SINGLE_LED_REPORT_ID, 0, led, color.r, color.g, color.b])

    def decode(self, buffer: bytes) -> dict[int, Color]:
        """
        Read every LED color out of an LED report.

        Args:
            buffer: Bytes returned for report 0x6

        Raises:
            ValueError: If the buffer is shorter than the layout requires
        """
        if len(buffer) < self.layout.report_length:
            raise ValueError(
                f"LED report too short: {len(buffer)} bytes, expected {self.layout.report_length}"
            )

        colors = {}
        for led in self.layout.leds:
            offset = self.layout.offset(led)
            g, r, b = buffer[offset:offset + 3]
            colors[led] = Color(r=r, g=g, b=b)
        return colors
