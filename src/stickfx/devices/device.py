"""BlinkStick device facade."""

from __future__ import annotations

import logging
import threading
import time
import weakref
from collections.abc import Mapping, Sequence
from typing import Callable, Optional

from stickfx.animation import Animator
from stickfx.exceptions import ErrorContext, handle_errors
from stickfx.models import Color, DeviceConfig, FrameScope
from stickfx.transport import FeatureChannel, FeatureTransport, HidChannel

from .codec import LED_REPORT_ID, FrameCodec
from .layout import LedLayout

logger = logging.getLogger(__name__)


@handle_errors(operation_name="turn off LEDs on close", re_raise=False, log_level=logging.WARNING)
def _blank(transport: FeatureTransport, codec: FrameCodec) -> None:
    off = Color.off()
    transport.send(codec.encode({led: off for led in codec.layout.leds}, FrameScope.ALL))


@handle_errors(operation_name="close device channel", re_raise=False, log_level=logging.WARNING)
def _release(channel: FeatureChannel) -> None:
    channel.close()


def _teardown(transport: FeatureTransport, codec: FrameCodec, channel: FeatureChannel) -> None:
    """Turn every LED off, then close the channel. Never raises."""
    _blank(transport, codec)
    _release(channel)


class BlinkStick:
    """
    One connected BlinkStick.

    Open it with ``BlinkStick.open()``, preferably as a context manager so
    every LED is switched off however the block exits::

        with BlinkStick.open() as stick:
            stick.set_led_color(0, COLORS.DIM_RED)
            stick.pulse_all_leds_color(2.0, 50, COLORS.DIM_BLUE)

    Every LED index is validated against the LED count the device reported
    before anything is sent; a bad index raises ``LedOutOfRangeError``.
    Failed transactions raise ``FeatureReportError`` after retrying.
    A BlinkStick that is garbage-collected or still open at interpreter
    exit is torn down the same way as ``close()``.

    Animations block the calling thread until they finish. They return
    True when they ran to completion and False when ``stop`` was set.
    A device must only be used from one thread at a time.
    """

    def __init__(
        self,
        channel: FeatureChannel,
        config: Optional[DeviceConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Attach to an open channel and discover the LED layout.

        Prefer ``BlinkStick.open()``; use this directly to supply a custom
        channel.

        Args:
            channel: Open feature-report channel, owned by this object from now on
            config: Device configuration (defaults to DeviceConfig())
            sleep: Sleep function for retries and animations
            clock: Monotonic clock for animation pacing

        Raises:
            FeatureGetError: If the LED report could not be read
            UnsupportedDeviceError: If the LED report holds no LEDs
        """
        self.config = config or DeviceConfig()
        self._channel = channel
        self._closed = False
        self._transport = FeatureTransport(
            channel,
            immediate_attempts=self.config.immediate_attempts,
            retry_backoff=self.config.retry_backoff,
            sleep=sleep,
        )

        report = self._transport.receive(LED_REPORT_ID, self.config.max_report_size)
        self.layout = LedLayout.from_report_size(len(report))
        self._codec = FrameCodec(self.layout)
        self._animator = Animator(self, sleep=sleep, clock=clock)
        logger.info(f"BlinkStick has {self.max_leds} LEDs (report length {self.report_length})")

        if self.config.turn_off_on_open:
            self.turn_off_all_leds()

        # Holds no reference to self so an unclosed device can still be collected
        self._finalizer = weakref.finalize(self, _teardown, self._transport, self._codec, channel)

    @classmethod
    def open(cls, config: Optional[DeviceConfig] = None, **kwargs) -> BlinkStick:
        """
        Open the first BlinkStick matching ``config``.

        Args:
            config: Device configuration (defaults to DeviceConfig())
            **kwargs: Passed through to the constructor (sleep, clock)

        Raises:
            DeviceNotFoundError: If no device could be opened
            FeatureGetError: If the LED report could not be read
        """
        config = config or DeviceConfig()
        with ErrorContext(f"open BlinkStick {config.device_label}", logger_instance=logger):
            channel = HidChannel.open(config)
            try:
                return cls(channel, config, **kwargs)
            except Exception:
                channel.close()
                raise

    # =================================================================
    # Lifetime
    # =================================================================

    def close(self, turn_off: bool = True) -> None:
        """
        Release the device, turning every LED off first. Never raises.

        Turning the LEDs off is the default teardown, also run when the
        object is garbage-collected. ``turn_off=False`` departs from it and
        is meant for callers that deliberately leave a color showing, such
        as the ``set`` and ``fade`` commands.

        Args:
            turn_off: Leave the LEDs as they are when False
        """
        if self._closed:
            return
        self._closed = True
        if turn_off:
            self._finalizer()
        else:
            self._finalizer.detach()
            _release(self._channel)

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> BlinkStick:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =================================================================
    # Topology
    # =================================================================

    @property
    def max_leds(self) -> int:
        """Number of addressable LEDs."""
        return self.layout.max_leds

    @property
    def report_length(self) -> int:
        """Length in bytes of the LED report."""
        return self.layout.report_length

    @property
    def overrun_count(self) -> int:
        """Animation steps that took longer than their interval so far."""
        return self._animator.overrun_count

    # =================================================================
    # Frames
    # =================================================================

    def write_frame(self, colors: Mapping[int, Color], scope: FrameScope) -> None:
        """Encode ``colors`` and send them in one transaction."""
        self._transport.send(self._codec.encode(colors, scope))

    def read_frame(self) -> dict[int, Color]:
        """Read the current color of every LED."""
        report = self._transport.receive(LED_REPORT_ID, self.config.max_report_size)
        return self._codec.decode(report)

    # =================================================================
    # Static colors
    # =================================================================

    def set_led_color(self, led: int, color: Color) -> None:
        """Set one LED, leaving all others untouched."""
        self.write_frame({led: color}, FrameScope.ONE)

    def set_multiple_leds_color(self, leds: Sequence[int], color: Color) -> None:
        """Set ``leds`` to one color; every other LED turns off."""
        self.write_frame({led: color for led in leds}, FrameScope.MANY)

    def set_leds_colors(self, colors: Mapping[int, Color]) -> None:
        """Set each LED in ``colors`` to its own color; every other LED turns off."""
        self.write_frame(colors, FrameScope.MANY)

    def set_all_leds_color(self, color: Color) -> None:
        """Set every LED to one color."""
        self.write_frame({led: color for led in self.layout.leds}, FrameScope.ALL)

    def set_all_leds_colors(self, colors: Sequence[Color]) -> None:
        """
        Set every LED to its own color.

        Args:
            colors: One color per LED, index 0 first

        Raises:
            ValueError: If ``colors`` does not hold exactly max_leds colors
        """
        if len(colors) != self.max_leds:
            raise ValueError(f"Expected {self.max_leds} colors, got {len(colors)}")
        self.write_frame(dict(enumerate(colors)), FrameScope.ALL)

    def get_led_color(self, led: int) -> Color:
        """Read the current color of one LED."""
        self.layout.validate(led)
        return self.read_frame()[led]

    def get_all_led_colors(self) -> list[Color]:
        """Read the current color of every LED, index 0 first."""
        colors = self.read_frame()
        return [colors[led] for led in self.layout.leds]

    # =================================================================
    # Off
    # =================================================================

    def turn_off_led(self, led: int) -> None:
        self.set_led_color(led, Color.off())

    def turn_off_multiple_leds(self, leds: Sequence[int]) -> None:
        self.set_multiple_leds_color(leds, Color.off())

    def turn_off_all_leds(self) -> None:
        self.set_all_leds_color(Color.off())

    # =================================================================
    # Blink
    # =================================================================

    def blink_led_color(
        self, led: int, delay: float, blinks: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Blink one LED.

        Args:
            led: LED index
            delay: Seconds on, then seconds off, per blink
            blinks: Number of blinks
            color: Color while on
            stop: Optional event that ends the animation early
        """
        self.layout.validate(led)
        return self._animator.blink([led], delay, blinks, color, FrameScope.ONE, stop=stop)

    def blink_multiple_leds_color(
        self, leds: Sequence[int], delay: float, blinks: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """Blink several LEDs together; LEDs not listed are off meanwhile."""
        self.layout.validate_all(leds)
        return self._animator.blink(leds, delay, blinks, color, FrameScope.MANY, stop=stop)

    def blink_all_leds_color(
        self, delay: float, blinks: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """Blink every LED."""
        return self._animator.blink(self.layout.leds, delay, blinks, color, FrameScope.ALL, stop=stop)

    # =================================================================
    # Transform
    # =================================================================

    def transform_led_color(
        self, led: int, duration: float, steps: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Fade one LED from its current color to ``color``.

        Args:
            led: LED index
            duration: Seconds the whole fade should take
            steps: Number of color updates (>= 1)
            color: Final color
            stop: Optional event that ends the animation early
        """
        self.layout.validate(led)
        return self._animator.transform({led: color}, duration, steps, FrameScope.ONE, stop=stop)

    def transform_multiple_leds_color(
        self, leds: Sequence[int], duration: float, steps: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Fade several LEDs to one color on a shared timeline.

        Every frame is a multi-LED report, so LEDs not listed in ``leds``
        are turned off by the first step and stay off.
        """
        self.layout.validate_all(leds)
        targets = {led: color for led in leds}
        return self._animator.transform(targets, duration, steps, FrameScope.MANY, stop=stop)

    def transform_all_leds_color(
        self, duration: float, steps: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """Fade every LED to one color."""
        targets = {led: color for led in self.layout.leds}
        return self._animator.transform(targets, duration, steps, FrameScope.ALL, stop=stop)

    def transform_all_leds_colors(
        self, duration: float, steps: int, colors: Sequence[Color],
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Fade every LED to its own color.

        Raises:
            ValueError: If ``colors`` does not hold exactly max_leds colors
        """
        if len(colors) != self.max_leds:
            raise ValueError(f"Expected {self.max_leds} colors, got {len(colors)}")
        return self._animator.transform(dict(enumerate(colors)), duration, steps, FrameScope.ALL, stop=stop)

    # =================================================================
    # Pulse
    # =================================================================

    def pulse_led_color(
        self, led: int, duration: float, steps: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Fade one LED to ``color`` and back to its current color.

        ``duration`` covers both halves; each half uses ``steps`` steps.
        """
        self.layout.validate(led)
        return self._animator.pulse([led], duration, steps, color, FrameScope.ONE, stop=stop)

    def pulse_multiple_leds_color(
        self, leds: Sequence[int], duration: float, steps: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Pulse several LEDs together, each returning to its own color.

        Every frame is a multi-LED report, so LEDs not listed in ``leds``
        are turned off by the first step and stay off.
        """
        self.layout.validate_all(leds)
        return self._animator.pulse(leds, duration, steps, color, FrameScope.MANY, stop=stop)

    def pulse_all_leds_color(
        self, duration: float, steps: int, color: Color,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        return self._animator.pulse(self.layout.leds, duration, steps, color, FrameScope.ALL, stop=stop)

    # =================================================================
    # Carousel
    # =================================================================

    def carousel(
        self, start_color: Color, target_color: Color, delay: float,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Sweep one lit LED from the first LED to the last, twice.

        Colors follow a gradient from ``start_color`` to ``target_color``
        on the first lap and back on the second. Ends with every LED off.
        """
        return self._animator.carousel(start_color, target_color, delay, stop=stop)
