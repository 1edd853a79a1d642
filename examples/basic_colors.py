"""Basic example: light LEDs one by one, then fade and pulse them."""

from stickfx import COLORS, BlinkStick
from stickfx.exceptions import StickFxError


def main():
    """Walk through the static color and animation calls."""

    print("Opening BlinkStick...")
    try:
        stick = BlinkStick.open()
    except StickFxError as e:
        print(f"Error: {e.get_full_message()}")
        return

    with stick:
        print(f"Found a device with {stick.max_leds} LEDs\n")

        # Light each LED in turn with a single-LED report
        palette = [COLORS.DIM_RED, COLORS.DIM_GREEN, COLORS.DIM_BLUE, COLORS.DIM_WHITE]
        for led in range(min(stick.max_leds, 8)):
            color = palette[led % len(palette)]
            stick.set_led_color(led, color)
            print(f"  LED {led}: {color.to_hex()}")

        print("\nReading colors back:")
        for led, color in enumerate(stick.get_all_led_colors()[:8]):
            print(f"  LED {led}: {color.to_hex()}")

        print("\nFading everything to orange...")
        stick.transform_all_leds_color(1.0, 50, COLORS.ORANGE)

        print("Pulsing LED 0 blue...")
        stick.pulse_led_color(0, 1.0, 25, COLORS.BLUE)

        print("Carousel...")
        stick.carousel(COLORS.RED, COLORS.BLUE, 0.05)

        if stick.overrun_count:
            print(f"\n{stick.overrun_count} animation step(s) ran late")

    print("\nDone, LEDs are off.")


if __name__ == "__main__":
    main()
