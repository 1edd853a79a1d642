"""Static color commands."""

import click

from ..params import COLOR
from ..session import device_session

LED_OPTION = click.option(
    '--led', '-l',
    'leds',
    type=int,
    multiple=True,
    help='LED index (repeatable; default: all LEDs)'
)


@click.command(name="get")
@click.argument('led', type=int, required=False)
@click.pass_context
def get_command(ctx, led):
    """Print the color of LED, or of every LED."""
    with device_session(ctx, keep_lit=True) as stick:
        if led is not None:
            click.echo(stick.get_led_color(led).to_hex())
            return
        for index, color in enumerate(stick.get_all_led_colors()):
            click.echo(f"{index:3d}  {color.to_hex()}")


@click.command(name="set")
@click.argument('color', type=COLOR)
@LED_OPTION
@click.pass_context
def set_command(ctx, color, leds):
    """
    Set LEDs to COLOR.

    With one --led only that LED changes. With several, LEDs not listed
    are turned off.
    """
    with device_session(ctx, keep_lit=True) as stick:
        if len(leds) == 1:
            stick.set_led_color(leds[0], color)
        elif leds:
            stick.set_multiple_leds_color(leds, color)
        else:
            stick.set_all_leds_color(color)


@click.command(name="off")
@LED_OPTION
@click.pass_context
def off_command(ctx, leds):
    """Turn LEDs off."""
    with device_session(ctx, keep_lit=True) as stick:
        if len(leds) == 1:
            stick.turn_off_led(leds[0])
        elif leds:
            stick.turn_off_multiple_leds(leds)
        else:
            stick.turn_off_all_leds()


color_commands = [get_command, set_command, off_command]
