"""Pytest fixtures for tests.

Nothing here touches hardware. ``FakeStickChannel`` behaves like a
BlinkStick's feature-report interface and ``FakeClock`` replaces
``time.monotonic``/``time.sleep`` so animations run instantly.
"""

from typing import Callable, Optional

import pytest

from stickfx.devices import BlinkStick
from stickfx.models import Color, DeviceConfig


class FakeClock:
    """Manual clock: ``sleep`` advances ``time`` and is recorded."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeStickChannel:
    """In-memory BlinkStick speaking reports 0x5 and 0x6."""

    def __init__(
        self,
        max_leds: int = 32,
        clock: Optional[FakeClock] = None,
        latency: float = 0.0,
        on_send: Optional[Callable[[bytes], None]] = None,
    ):
        self.max_leds = max_leds
        self.leds: list[tuple[int, int, int]] = [(0, 0, 0)] * max_leds
        self.clock = clock
        self.latency = latency
        self.on_send = on_send
        self.sent: list[bytes] = []
        self.get_calls: list[tuple[int, int]] = []
        self.send_failures = 0
        self.get_failures = 0
        self.closed = False

    def send_feature_report(self, data: bytes) -> None:
        if self.send_failures:
            self.send_failures -= 1
            raise OSError("write error")

        data = bytes(data)
        self.sent.append(data)
        if self.clock is not None:
            self.clock.now += self.latency

        if data[0] == 0x5:
            _, _, led, r, g, b = data
            self.leds[led] = (r, g, b)
        elif data[0] == 0x6:
            for led in range(self.max_leds):
                offset = led * 3 + 2
                g, r, b = data[offset:offset + 3]
                self.leds[led] = (r, g, b)

        if self.on_send is not None:
            self.on_send(data)

    def get_feature_report(self, report_id: int, length: int) -> bytes:
        self.get_calls.append((report_id, length))
        if self.get_failures:
            self.get_failures -= 1
            raise OSError("read error")

        buf = bytearray([0x6, 0])
        for r, g, b in self.leds:
            buf += bytes([g, r, b])
        return bytes(buf[:length])

    def close(self) -> None:
        self.closed = True

    def color(self, led: int) -> Color:
        r, g, b = self.leds[led]
        return Color(r=r, g=g, b=b)

    def sent_colors(self) -> list[tuple[int, int, int]]:
        """(r, g, b) of each single-LED report sent, in order."""
        return [tuple(frame[3:6]) for frame in self.sent if frame[0] == 0x5]


@pytest.fixture
def clock():
    """Manual clock shared by channel latency and device pacing."""
    return FakeClock()


@pytest.fixture
def channel(clock):
    """Fake 32-LED BlinkStick."""
    return FakeStickChannel(max_leds=32, clock=clock)


@pytest.fixture
def config():
    """Default device configuration."""
    return DeviceConfig()


@pytest.fixture
def stick(channel, config, clock):
    """BlinkStick on the fake channel; the all-off sent at open is cleared."""
    device = BlinkStick(channel, config, sleep=clock.sleep, clock=clock.time)
    channel.sent.clear()
    clock.sleeps.clear()
    return device


@pytest.fixture
def small_channel(clock):
    """Fake 4-LED BlinkStick."""
    return FakeStickChannel(max_leds=4, clock=clock)


@pytest.fixture
def small_stick(small_channel, config, clock):
    """BlinkStick with 4 LEDs."""
    device = BlinkStick(small_channel, config, sleep=clock.sleep, clock=clock.time)
    small_channel.sent.clear()
    clock.sleeps.clear()
    return device
