"""Open the device for one CLI command and report errors cleanly."""

import contextlib
import logging
from collections.abc import Iterator

import click

from stickfx.devices import BlinkStick
from stickfx.exceptions import StickFxError, format_error_for_display
from stickfx.models import DeviceConfig

logger = logging.getLogger(__name__)


def fail(error: Exception) -> None:
    """Print ``error`` for the user and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    raise click.exceptions.Exit(1)


@contextlib.contextmanager
def device_session(ctx: click.Context, keep_lit: bool = False) -> Iterator[BlinkStick]:
    """
    Yield an open BlinkStick for the duration of one command.

    The device is opened without blanking it, so commands can read and
    modify what is already lit. On a normal exit the LEDs are turned off
    unless ``keep_lit`` is set; on any error or Ctrl+C they are always
    turned off.
    """
    config: DeviceConfig = ctx.obj["config"].model_copy(update={"turn_off_on_open": False})
    try:
        stick = BlinkStick.open(config)
        try:
            yield stick
        except BaseException:
            stick.close()
            raise
        stick.close(turn_off=not keep_lit)
    except StickFxError as e:
        logger.debug("Command failed", exc_info=True)
        fail(e)
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        raise click.exceptions.Exit(130)
