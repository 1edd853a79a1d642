"""Animation commands."""

import click

from ..params import COLOR
from ..session import device_session
from .color import LED_OPTION


@click.command(name="blink")
@click.argument('color', type=COLOR)
@LED_OPTION
@click.option('--delay', '-d', type=click.FloatRange(min=0), default=0.5, show_default=True,
              help='Seconds on and seconds off per blink')
@click.option('--count', '-n', type=click.IntRange(min=0), default=3, show_default=True,
              help='Number of blinks')
@click.pass_context
def blink_command(ctx, color, leds, delay, count):
    """Blink LEDs in COLOR."""
    with device_session(ctx) as stick:
        if len(leds) == 1:
            stick.blink_led_color(leds[0], delay, count, color)
        elif leds:
            stick.blink_multiple_leds_color(leds, delay, count, color)
        else:
            stick.blink_all_leds_color(delay, count, color)


@click.command(name="fade")
@click.argument('color', type=COLOR)
@LED_OPTION
@click.option('--duration', '-t', type=click.FloatRange(min=0), default=1.0, show_default=True,
              help='Seconds the fade takes')
@click.option('--steps', '-s', type=click.IntRange(min=1), default=50, show_default=True,
              help='Number of color updates')
@click.pass_context
def fade_command(ctx, color, leds, duration, steps):
    """Fade LEDs from their current color to COLOR and leave them lit."""
    with device_session(ctx, keep_lit=True) as stick:
        if len(leds) == 1:
            stick.transform_led_color(leds[0], duration, steps, color)
        elif leds:
            stick.transform_multiple_leds_color(leds, duration, steps, color)
        else:
            stick.transform_all_leds_color(duration, steps, color)
        if stick.overrun_count:
            click.echo(f"{stick.overrun_count} step(s) ran late; try fewer --steps.", err=True)


@click.command(name="pulse")
@click.argument('color', type=COLOR)
@LED_OPTION
@click.option('--duration', '-t', type=click.FloatRange(min=0), default=1.0, show_default=True,
              help='Seconds for one pulse (there and back)')
@click.option('--steps', '-s', type=click.IntRange(min=1), default=25, show_default=True,
              help='Color updates per half pulse')
@click.option('--repeat', '-n', type=click.IntRange(min=1), default=1, show_default=True,
              help='Number of pulses')
@click.pass_context
def pulse_command(ctx, color, leds, duration, steps, repeat):
    """Pulse LEDs to COLOR and back."""
    with device_session(ctx, keep_lit=True) as stick:
        for _ in range(repeat):
            if len(leds) == 1:
                stick.pulse_led_color(leds[0], duration, steps, color)
            elif leds:
                stick.pulse_multiple_leds_color(leds, duration, steps, color)
            else:
                stick.pulse_all_leds_color(duration, steps, color)


@click.command(name="carousel")
@click.argument('start_color', type=COLOR)
@click.argument('target_color', type=COLOR)
@click.option('--delay', '-d', type=click.FloatRange(min=0), default=0.05, show_default=True,
              help='Seconds each LED stays lit')
@click.option('--repeat', '-n', type=click.IntRange(min=1), default=1, show_default=True,
              help='Number of carousels')
@click.pass_context
def carousel_command(ctx, start_color, target_color, delay, repeat):
    """Sweep one lit LED around the device, START_COLOR to TARGET_COLOR and back."""
    with device_session(ctx) as stick:
        for _ in range(repeat):
            stick.carousel(start_color, target_color, delay)


animate_commands = [blink_command, fade_command, pulse_command, carousel_command]
