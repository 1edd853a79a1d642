"""CLI commands for stickfx."""

from .animate import animate_commands
from .color import color_commands
from .device import device_commands

__all__ = ["animate_commands", "color_commands", "device_commands"]
