"""Click parameter types for colors and USB ids."""

import click

from stickfx.colors import lookup
from stickfx.models import Color


class ColorType(click.ParamType):
    """
    Accepts '#ff8000', 'ff8000', '255,128,0', a color name ('orange')
    or 'random'.
    """

    name = "color"

    def convert(self, value, param, ctx):
        if isinstance(value, Color):
            return value

        text = value.strip()
        if text.lower() == "random":
            return Color.random()

        named = lookup(text)
        if named is not None:
            return named

        try:
            if "," in text:
                r, g, b = (int(part) for part in text.split(","))
                return Color(r=r, g=g, b=b)
            return Color.from_hex(text)
        except ValueError:
            self.fail(
                f"{value!r} is not a color. Use a name, '#RRGGBB' or 'R,G,B' (0-255).",
                param,
                ctx,
            )


class UsbIdType(click.ParamType):
    """Accepts a USB id in hex ('0x20a0', '20a0') or decimal."""

    name = "usb-id"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value, 16) if any(c in "abcdef" for c in value.lower()) else int(value)
        except ValueError:
            self.fail(f"{value!r} is not a USB id", param, ctx)


COLOR = ColorType()
USB_ID = UsbIdType()
