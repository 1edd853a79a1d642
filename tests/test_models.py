"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from stickfx.models import BLINKSTICK_PRODUCT_ID, BLINKSTICK_VENDOR_ID, Color, DeviceConfig


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = Color(r=100, g=50, b=25)
        assert color.r == 100
        assert color.g == 50
        assert color.b == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValidationError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_colors_compare_by_value(self):
        """Test structural equality and hashing."""
        assert Color(r=1, g=2, b=3) == Color(r=1, g=2, b=3)
        assert Color(r=1, g=2, b=3) != Color(r=3, g=2, b=1)
        assert len({Color(r=1, g=2, b=3), Color(r=1, g=2, b=3)}) == 1

    @pytest.mark.unit
    def test_color_is_frozen(self):
        """Test that colors cannot be mutated."""
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 10

    @pytest.mark.unit
    def test_preset_color_off(self):
        """Test off color factory method."""
        assert Color.off() == Color(r=0, g=0, b=0)
        assert Color.off().is_off
        assert not Color(r=0, g=0, b=1).is_off

    @pytest.mark.unit
    def test_to_rgb_tuple(self):
        """Test RGB tuple conversion."""
        assert Color(r=10, g=20, b=30).to_rgb_tuple() == (10, 20, 30)

    @pytest.mark.unit
    def test_hex_conversion(self):
        """Test hex formatting and parsing."""
        assert Color(r=255, g=128, b=0).to_hex() == "#FF8000"
        assert Color.from_hex("#ff8000") == Color(r=255, g=128, b=0)
        assert Color.from_hex("0a0B0c") == Color(r=10, g=11, b=12)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["#fff", "12345678", "#gg0000", ""])
    def test_from_hex_rejects_malformed(self, value):
        """Test that malformed hex strings raise ValueError."""
        with pytest.raises(ValueError):
            Color.from_hex(value)

    @pytest.mark.unit
    def test_random_is_valid(self):
        """Test random colors stay in range."""
        for _ in range(20):
            color = Color.random()
            assert all(0 <= channel <= 255 for channel in color.to_rgb_tuple())


class TestDeviceConfig:
    """Test DeviceConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test the defaults match the BlinkStick and the retry policy."""
        config = DeviceConfig()
        assert config.vendor_id == BLINKSTICK_VENDOR_ID == 0x20A0
        assert config.product_id == BLINKSTICK_PRODUCT_ID == 0x41E5
        assert config.serial_number is None
        assert config.immediate_attempts == 5
        assert config.retry_backoff == 0.01
        assert config.max_report_size == 100
        assert config.turn_off_on_open is True

    @pytest.mark.unit
    def test_device_label(self):
        """Test vendor:product label formatting."""
        assert DeviceConfig().device_label == "20a0:41e5"
        assert DeviceConfig(vendor_id=1, product_id=0xABCD).device_label == "0001:abcd"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field, value",
        [
            ("vendor_id", 0x10000),
            ("product_id", -1),
            ("immediate_attempts", 0),
            ("retry_backoff", -0.1),
            ("max_report_size", 4),
        ],
    )
    def test_validation(self, field, value):
        """Test invalid values are rejected."""
        with pytest.raises(ValidationError):
            DeviceConfig(**{field: value})
