"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and drive the device as expected.
Uses Click's CliRunner with BlinkStick.open patched to return a fake
device, so no hardware is needed.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from stickfx.cli.main import cli
from stickfx.colors import COLORS
from stickfx.devices import BlinkStick
from stickfx.exceptions import DeviceNotFoundError
from stickfx.models import Color


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_open(channel, clock):
    """Patch BlinkStick.open to attach to the fake channel."""
    configs = []

    def open_fake(config):
        configs.append(config)
        return BlinkStick(channel, config, sleep=clock.sleep, clock=clock.time)

    with patch.object(BlinkStick, "open", side_effect=open_fake):
        yield configs


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'BlinkStick' in result.output
        assert '--vendor-id' in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ["list", "info", "get", "set", "off", "blink", "fade", "pulse", "carousel"])
    def test_command_help(self, runner, command):
        """Test every command has help."""
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestListCommand:
    """Test the list command."""

    def test_list_devices(self, runner):
        devices = [{
            "path": "/dev/hidraw3",
            "serial_number": "BS000001-3.0",
            "manufacturer": "Agile Innovative Ltd",
            "product": "BlinkStick",
        }]
        with patch("stickfx.cli.commands.device.list_devices", return_value=devices):
            result = runner.invoke(cli, ['list'])

        assert result.exit_code == 0
        assert 'BS000001-3.0' in result.output
        assert '/dev/hidraw3' in result.output

    def test_list_nothing_found(self, runner):
        with patch("stickfx.cli.commands.device.list_devices", return_value=[]):
            result = runner.invoke(cli, ['list'])

        assert result.exit_code == 0
        assert 'No devices found matching 20a0:41e5' in result.output

    def test_list_hid_failure(self, runner):
        with patch("stickfx.cli.commands.device.list_devices", side_effect=OSError("hid broken")):
            result = runner.invoke(cli, ['list'])

        assert result.exit_code == 1
        assert 'ERROR: OSError: hid broken' in result.output


@pytest.mark.integration
class TestDeviceCommands:
    """Test commands that open the device."""

    def test_info(self, runner, fake_open):
        result = runner.invoke(cli, ['info'])

        assert result.exit_code == 0
        assert '32' in result.output
        assert '98 bytes' in result.output

    def test_options_reach_config(self, runner, fake_open):
        """Test global options build the device configuration."""
        result = runner.invoke(cli, ['--vendor-id', '0x1234', '--product-id', '42', '--serial', 'ABC', 'info'])

        assert result.exit_code == 0
        config = fake_open[0]
        assert config.vendor_id == 0x1234
        assert config.product_id == 42
        assert config.serial_number == 'ABC'
        assert config.turn_off_on_open is False

    def test_set_single_led_stays_lit(self, runner, fake_open, channel):
        result = runner.invoke(cli, ['set', 'red', '--led', '3'])

        assert result.exit_code == 0
        assert channel.color(3) == COLORS.RED
        assert channel.closed

    def test_set_multiple_leds(self, runner, fake_open, channel):
        result = runner.invoke(cli, ['set', '10,20,30', '-l', '0', '-l', '5'])

        assert result.exit_code == 0
        assert channel.sent[0][0] == 0x6
        assert channel.color(5) == Color(r=10, g=20, b=30)

    def test_set_all_with_hex(self, runner, fake_open, channel):
        result = runner.invoke(cli, ['set', '#00ff00'])

        assert result.exit_code == 0
        assert channel.leds == [(0, 255, 0)] * 32

    def test_get_one_led(self, runner, fake_open, channel):
        channel.leds[2] = (255, 0, 0)

        result = runner.invoke(cli, ['get', '2'])

        assert result.exit_code == 0
        assert result.output.strip() == '#FF0000'
        assert channel.sent == []

    def test_get_all_leds(self, runner, fake_open):
        result = runner.invoke(cli, ['get'])

        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 32

    def test_off(self, runner, fake_open, channel):
        channel.leds = [(5, 5, 5)] * 32

        result = runner.invoke(cli, ['off', '--led', '1'])

        assert result.exit_code == 0
        assert channel.color(1) == Color.off()
        assert channel.color(0) == Color(r=5, g=5, b=5)

    def test_blink_leaves_leds_off(self, runner, fake_open, channel, clock):
        result = runner.invoke(cli, ['blink', 'blue', '--count', '2', '--delay', '0.1'])

        assert result.exit_code == 0
        assert clock.sleeps == [0.1] * 4
        assert channel.leds == [(0, 0, 0)] * 32

    def test_fade_keeps_target(self, runner, fake_open, channel):
        result = runner.invoke(cli, ['fade', 'white', '--led', '0', '--steps', '5'])

        assert result.exit_code == 0
        assert channel.color(0) == COLORS.WHITE

    def test_pulse_repeats(self, runner, fake_open, channel):
        result = runner.invoke(cli, ['pulse', 'cyan', '-l', '1', '-s', '4', '--repeat', '3'])

        assert result.exit_code == 0
        assert len(channel.sent) == 3 * 8
        assert channel.color(1) == Color.off()

    def test_carousel(self, runner, fake_open, channel):
        result = runner.invoke(cli, ['carousel', 'red', 'blue', '--delay', '0'])

        assert result.exit_code == 0
        assert channel.leds == [(0, 0, 0)] * 32


@pytest.mark.integration
class TestErrors:
    """Test errors are reported with a message and exit code."""

    def test_device_not_found(self, runner):
        with patch.object(BlinkStick, "open", side_effect=DeviceNotFoundError(0x20A0, 0x41E5)):
            result = runner.invoke(cli, ['info'])

        assert result.exit_code == 1
        assert 'ERROR: No BlinkStick found' in result.output

    def test_led_out_of_range(self, runner, fake_open, channel):
        result = runner.invoke(cli, ['set', 'red', '--led', '40'])

        assert result.exit_code == 1
        assert 'does not contain led 40' in result.output
        assert channel.closed

    def test_invalid_color(self, runner):
        result = runner.invoke(cli, ['set', 'notacolor'])

        assert result.exit_code == 2
        assert 'is not a color' in result.output

    def test_invalid_usb_id(self, runner):
        result = runner.invoke(cli, ['--vendor-id', 'zz', 'list'])

        assert result.exit_code == 2
