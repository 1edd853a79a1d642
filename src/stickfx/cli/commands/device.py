"""Device discovery commands."""

import click

from stickfx.exceptions import StickFxError
from stickfx.transport import list_devices

from ..session import device_session, fail


@click.command(name="list")
@click.pass_context
def list_command(ctx):
    """List connected BlinkStick devices."""
    config = ctx.obj["config"]
    try:
        devices = list_devices(config)
    except (OSError, StickFxError) as e:
        fail(e)

    if not devices:
        click.echo(f"No devices found matching {config.device_label}.")
        return

    click.echo(f"Devices matching {config.device_label}:\n")
    for i, device in enumerate(devices):
        name = " ".join(part for part in (device["manufacturer"], device["product"]) if part) or "Unknown"
        click.echo(f"  [{i}] {name}  serial={device['serial_number'] or '-'}  path={device['path']}")


@click.command(name="info")
@click.pass_context
def info_command(ctx):
    """Show LED count and report size of the device."""
    with device_session(ctx, keep_lit=True) as stick:
        click.echo(f"Device:        {stick.config.device_label}")
        click.echo(f"LEDs:          {stick.max_leds}")
        click.echo(f"Report length: {stick.report_length} bytes")


device_commands = [list_command, info_command]
