"""BlinkStick device: address space, report codec and facade."""

from .codec import LED_REPORT_ID, SINGLE_LED_REPORT_ID, FrameCodec
from .device import BlinkStick
from .layout import LedLayout

__all__ = [
    "BlinkStick",
    "FrameCodec",
    "LED_REPORT_ID",
    "LedLayout",
    "SINGLE_LED_REPORT_ID",
]
