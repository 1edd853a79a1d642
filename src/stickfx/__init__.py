"""stickfx: color and animation control for BlinkStick USB LED devices."""

__version__ = "0.1.0"

from .colors import COLORS, gradient
from .devices import BlinkStick
from .models import Color, DeviceConfig

__all__ = [
    "BlinkStick",
    "COLORS",
    "Color",
    "DeviceConfig",
    "gradient",
]
