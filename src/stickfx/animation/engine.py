"""
Animation engine: blink, transform, pulse and carousel.

Every animation is a list of frames written one transaction at a time.
Gradients are computed in full before the first frame goes out, so a
frame never waits on a device read. Transform and pulse frames are paced
against the wall clock:

::

    for each frame:
        t0 = clock()
        write frame                      (may be slow, may retry)
        remaining = interval - (clock() - t0)
        remaining > 0  -> sleep(remaining)
        remaining <= 0 -> no sleep, count an overrun, carry on

An overrun never stops an animation. A zero interval (``duration == 0``)
means as fast as possible and never counts as an overrun. A failed write
does stop it: the ``FeatureReportError`` propagates immediately and nothing
is rolled back.

Callers can pass a ``threading.Event`` as ``stop``. It is checked before
every frame and pacing sleeps wait on it, so setting it ends the
animation after the transaction in flight. A stopped animation returns
False instead of True.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping, Sequence
from typing import Callable, Optional, Protocol

from stickfx.colors import gradient
from stickfx.models import Color, FrameScope

logger = logging.getLogger(__name__)

Frame = Mapping[int, Color]


class LedSurface(Protocol):
    """What the animator needs from a device."""

    @property
    def max_leds(self) -> int:
        ...

    def write_frame(self, colors: Frame, scope: FrameScope) -> None:
        """Write one frame in a single transaction."""
        ...

    def read_frame(self) -> dict[int, Color]:
        """Read the current color of every LED."""
        ...


class Animator:
    """Drive timed color sequences on an ``LedSurface``."""

    def __init__(
        self,
        surface: LedSurface,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize animator.

        Args:
            surface: Device to animate
            sleep: Sleep function (injectable for tests)
            clock: Monotonic clock in seconds (injectable for tests)
        """
        self.surface = surface
        self._sleep = sleep
        self._clock = clock
        self.overrun_count = 0

    # =================================================================
    # Animations
    # =================================================================

    def blink(
        self,
        leds: Sequence[int],
        delay: float,
        blinks: int,
        color: Color,
        scope: FrameScope,
        off_color: Optional[Color] = None,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Switch ``leds`` between ``color`` and ``off_color`` ``blinks`` times.

        Each blink is: color, wait ``delay``, off, wait ``delay``.
        """
        _check_non_negative(delay=delay, blinks=blinks)
        off_color = off_color or Color.off()
        on_frame = {led: color for led in leds}
        off_frame = {led: off_color for led in leds}

        logger.debug(f"Blink {list(leds)} {blinks}x with {color.to_hex()} every {delay}s")
        for _ in range(blinks):
            for frame in (on_frame, off_frame):
                if _is_set(stop):
                    logger.info("Blink stopped")
                    return False
                self.surface.write_frame(frame, scope)
                self._pause(delay, stop)
        return True

    def transform(
        self,
        targets: Frame,
        duration: float,
        steps: int,
        scope: FrameScope,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Fade each LED in ``targets`` from its current color to its target.

        All LEDs share one timeline: one frame, and one transaction, per step.
        The last frame is exactly ``targets``.
        """
        _check_steps(steps)
        _check_non_negative(duration=duration)
        current = self.surface.read_frame()
        frames = _frames(current, targets, steps)

        logger.debug(f"Transform {len(targets)} LED(s) over {duration}s in {steps} steps")
        return self._play(frames, duration / steps, scope, stop)

    def pulse(
        self,
        leds: Sequence[int],
        duration: float,
        steps: int,
        color: Color,
        scope: FrameScope,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Fade ``leds`` to ``color`` and back to where they started.

        Each half takes ``duration / 2`` and ``steps`` steps. Both halves
        are computed before the first frame is written.
        """
        _check_steps(steps)
        _check_non_negative(duration=duration)
        current = self.surface.read_frame()
        originals = {led: current[led] for led in leds}
        peak = {led: color for led in leds}
        frames = _frames(originals, peak, steps) + _frames(peak, originals, steps)

        logger.debug(f"Pulse {list(leds)} to {color.to_hex()} over {duration}s")
        return self._play(frames, (duration / 2) / steps, scope, stop)

    def carousel(
        self,
        start_color: Color,
        target_color: Color,
        delay: float,
        stop: Optional[threading.Event] = None,
    ) -> bool:
        """
        Sweep a single lit LED across the device twice.

        The first lap colors LED ``n`` with step ``n`` of a gradient from
        ``start_color`` to ``target_color``; the second lap uses the same
        gradient reversed. Every LED is off when the carousel finishes.
        """
        _check_non_negative(delay=delay)
        max_leds = self.surface.max_leds
        colors = gradient(start_color, target_color, max_leds)
        off = Color.off()

        logger.debug(f"Carousel {start_color.to_hex()} -> {target_color.to_hex()} every {delay}s")
        for lap in (colors, colors[::-1]):
            for led, color in enumerate(lap):
                if _is_set(stop):
                    logger.info("Carousel stopped")
                    return False
                if led > 0:
                    self.surface.write_frame({led - 1: off}, FrameScope.ONE)
                self.surface.write_frame({led: color}, FrameScope.ONE)
                self._pause(delay, stop)
            self.surface.write_frame({max_leds - 1: off}, FrameScope.ONE)
        return True

    # =================================================================
    # Pacing
    # =================================================================

    def _play(
        self,
        frames: Sequence[Frame],
        interval: float,
        scope: FrameScope,
        stop: Optional[threading.Event],
    ) -> bool:
        for step, frame in enumerate(frames, start=1):
            if _is_set(stop):
                logger.info(f"Animation stopped at step {step}/{len(frames)}")
                return False

            started = self._clock()
            self.surface.write_frame(frame, scope)
            elapsed = self._clock() - started

            remaining = interval - elapsed
            if remaining > 0:
                self._pause(remaining, stop)
            elif interval > 0 and elapsed > interval:
                self.overrun_count += 1
                logger.warning(
                    f"Step {step}/{len(frames)} took {elapsed * 1000:.1f} ms, "
                    f"interval is {interval * 1000:.1f} ms; continuing without delay"
                )
        return True

    def _pause(self, seconds: float, stop: Optional[threading.Event]) -> None:
        if stop is None:
            self._sleep(seconds)
        else:
            stop.wait(seconds)


def _frames(start: Frame, targets: Frame, steps: int) -> list[dict[int, Color]]:
    """Transpose one gradient per LED into one frame per step."""
    per_led = {led: gradient(start[led], target, steps) for led, target in targets.items()}
    return [{led: colors[step] for led, colors in per_led.items()} for step in range(steps)]


def _is_set(stop: Optional[threading.Event]) -> bool:
    return stop is not None and stop.is_set()


def _check_steps(steps: int) -> None:
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")


def _check_non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
