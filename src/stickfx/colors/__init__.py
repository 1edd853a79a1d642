"""Color constants and helpers.

All colors are standard 8-bit RGB ``Color`` objects. Named constants live
on ``COLORS`` so that CLI arguments and scripts can refer to them by name::

    from stickfx.colors import COLORS, gradient, lookup

    fade = gradient(COLORS.RED, COLORS.BLUE, 10)
    orange = lookup("orange")
"""

from typing import Optional

from stickfx.models import Color

from .gradient import gradient


class COLORS:
    """Standard color constants - 8-bit RGB (0-255)."""

    # ============================================================================
    # PRIMARY COLORS (Full saturation)
    # ============================================================================

    RED: Color = Color(r=255, g=0, b=0)
    GREEN: Color = Color(r=0, g=255, b=0)
    BLUE: Color = Color(r=0, g=0, b=255)
    YELLOW: Color = Color(r=255, g=255, b=0)
    MAGENTA: Color = Color(r=255, g=0, b=255)
    CYAN: Color = Color(r=0, g=255, b=255)
    WHITE: Color = Color(r=255, g=255, b=255)

    BLACK: Color = Color(r=0, g=0, b=0)
    """Black (off)"""

    # ============================================================================
    # SECONDARY COLORS
    # ============================================================================

    ORANGE: Color = Color(r=255, g=128, b=0)
    PURPLE: Color = Color(r=128, g=0, b=255)
    PINK: Color = Color(r=255, g=0, b=128)
    TEAL: Color = Color(r=0, g=255, b=128)

    # ============================================================================
    # DIM VARIANTS
    # ============================================================================
    # BlinkStick LEDs are very bright at full duty; these are comfortable
    # defaults for desk use.

    DIM_RED: Color = Color(r=50, g=0, b=0)
    DIM_GREEN: Color = Color(r=0, g=50, b=0)
    DIM_BLUE: Color = Color(r=0, g=0, b=50)
    DIM_WHITE: Color = Color(r=50, g=50, b=50)


def names() -> list[str]:
    """All color constant names, lower-cased."""
    return sorted(name.lower() for name, value in vars(COLORS).items() if isinstance(value, Color))


def lookup(name: str) -> Optional[Color]:
    """Find a color constant by case-insensitive name ('red', 'dim-blue')."""
    value = getattr(COLORS, name.strip().upper().replace("-", "_"), None)
    return value if isinstance(value, Color) else None


__all__ = ["COLORS", "gradient", "lookup", "names"]
