"""Unit tests for the LED address space."""

import pytest

from stickfx.devices import LedLayout
from stickfx.exceptions import LedOutOfRangeError, UnsupportedDeviceError


class TestLedLayout:
    """Test LED count derivation and index validation."""

    @pytest.mark.unit
    def test_flex_report_size(self):
        """Test a 98-byte report means 32 LEDs."""
        layout = LedLayout.from_report_size(98)
        assert layout.max_leds == 32
        assert layout.report_length == 98

    @pytest.mark.unit
    def test_square_report_size(self):
        """Test a 26-byte report means 8 LEDs."""
        layout = LedLayout.from_report_size(26)
        assert layout.max_leds == 8
        assert layout.report_length == 26

    @pytest.mark.unit
    def test_partial_triplet_is_ignored(self):
        """Test trailing bytes that do not form a full LED are dropped."""
        layout = LedLayout.from_report_size(100)
        assert layout.max_leds == 32
        assert layout.report_length == 98

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [0, 2, 4])
    def test_too_short_report(self, size):
        """Test reports without room for one LED are rejected."""
        with pytest.raises(UnsupportedDeviceError):
            LedLayout.from_report_size(size)

    @pytest.mark.unit
    def test_offsets(self):
        """Test triplet offsets skip the two header bytes."""
        layout = LedLayout(max_leds=8)
        assert layout.offset(0) == 2
        assert layout.offset(1) == 5
        assert layout.offset(7) == 23

    @pytest.mark.unit
    def test_validate_accepts_every_led(self):
        """Test all indices in range pass."""
        layout = LedLayout(max_leds=8)
        for led in layout.leds:
            layout.validate(led)
        layout.validate_all(range(8))

    @pytest.mark.unit
    @pytest.mark.parametrize("led", [8, 9, 255, -1])
    def test_validate_rejects_out_of_range(self, led):
        """Test the error names the LED and the valid range."""
        layout = LedLayout(max_leds=8)

        with pytest.raises(LedOutOfRangeError) as exc_info:
            layout.validate(led)

        error = exc_info.value
        assert error.led == led
        assert error.max_leds == 8
        assert error.valid_range == range(0, 8)
        assert f"led {led}" in str(error)
        assert "0-7" in str(error)

    @pytest.mark.unit
    def test_validate_all_reports_first_bad_led(self):
        """Test validate_all stops at the first invalid index."""
        layout = LedLayout(max_leds=8)

        with pytest.raises(LedOutOfRangeError) as exc_info:
            layout.validate_all([0, 2, 12, 20])

        assert exc_info.value.led == 12
