"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from stickfx import __version__
from stickfx.models import BLINKSTICK_PRODUCT_ID, BLINKSTICK_VENDOR_ID, DeviceConfig

from .commands import animate_commands, color_commands, device_commands
from .params import USB_ID

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> None:
    """
    Configure logging for the command line.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG regardless of verbosity
        log_file: Write to this rotating file instead of stderr
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        # Keeps last 3 files, max 1MB each
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3
        )
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="stickfx")
@click.option(
    '--vendor-id',
    type=USB_ID,
    default=BLINKSTICK_VENDOR_ID,
    show_default="0x20a0",
    help='USB vendor id of the device'
)
@click.option(
    '--product-id',
    type=USB_ID,
    default=BLINKSTICK_PRODUCT_ID,
    show_default="0x41e5",
    help='USB product id of the device'
)
@click.option(
    '--serial',
    type=str,
    default=None,
    help='Serial number of the device to use (default: first found)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
def cli(
    ctx,
    vendor_id: int,
    product_id: int,
    serial: Optional[str],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
):
    """
    stickfx - colors and animations for BlinkStick USB LED devices.

    \b
    Examples:
      # Show connected devices
      stickfx list

      # Light LED 3 orange
      stickfx set orange --led 3

      # Fade every LED to blue over two seconds
      stickfx fade '#0000ff' --duration 2

      # Pulse LEDs 0 and 1 five times
      stickfx pulse 50,0,50 --led 0 --led 1 --repeat 5

      # Debug USB retries
      stickfx -vv blink red
    """
    setup_logging(verbose, debug, log_file)
    ctx.ensure_object(dict)
    ctx.obj["config"] = DeviceConfig(
        vendor_id=vendor_id,
        product_id=product_id,
        serial_number=serial,
    )


for command in (*device_commands, *color_commands, *animate_commands):
    cli.add_command(command)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
