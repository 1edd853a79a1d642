"""Color model for LED control."""

import random

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Colors are always expressed in R, G, B field order. The device's
    G, R, B byte order for multi-LED reports is handled by the frame
    codec, never here.

    The model is frozen so colors compare by value and can be used as
    dict keys.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def random(cls) -> "Color":
        """Create a color with each channel sampled uniformly from 0-255."""
        return cls(r=random.randint(0, 255), g=random.randint(0, 255), b=random.randint(0, 255))

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create color from a CSS hex string ('#FF8000' or 'ff8000').

        Raises:
            ValueError: If the string is not six hex digits
        """
        digits = value.strip().lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected six hex digits, got {value!r}")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Invalid hex color {value!r}") from None
        return cls(r=r, g=g, b=b)

    @property
    def is_off(self) -> bool:
        """True when every channel is zero."""
        return self.r == 0 and self.g == 0 and self.b == 0

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
