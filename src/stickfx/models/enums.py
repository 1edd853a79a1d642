"""Enumerations for stickfx."""

from enum import Enum


class FrameScope(Enum):
    """Which LEDs a frame addresses."""

    ONE = "one"  # single-LED report 0x5
    MANY = "many"  # LED report 0x6, a subset of LEDs
    ALL = "all"  # LED report 0x6, every LED
