"""Data models for stickfx."""

from .color import Color
from .config import BLINKSTICK_PRODUCT_ID, BLINKSTICK_VENDOR_ID, DeviceConfig
from .enums import FrameScope

__all__ = [
    "BLINKSTICK_PRODUCT_ID",
    "BLINKSTICK_VENDOR_ID",
    "Color",
    "DeviceConfig",
    "FrameScope",
]
