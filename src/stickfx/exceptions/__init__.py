"""
Custom exception hierarchy for stickfx.

## Exception Hierarchy

```
StickFxError (base)
├── DeviceError
│   ├── DeviceNotFoundError
│   ├── UnsupportedDeviceError
│   └── FeatureReportError
│       ├── FeatureSendError
│       └── FeatureGetError
└── LedOutOfRangeError
```

## Usage

### Example: LED index outside the device

```python
from stickfx.exceptions import LedOutOfRangeError

try:
    stick.set_led_color(40, COLORS.RED)
except LedOutOfRangeError as e:
    print(e.led, e.valid_range)   # 40 range(0, 32)
```

### Example: Flaky USB transaction

```python
from stickfx.exceptions import FeatureReportError

try:
    stick.pulse_all_leds_color(2.0, 50, COLORS.BLUE)
except FeatureReportError as e:
    logger.error(e.technical_message)   # includes report id and attempt count
```

See `stickfx.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .address import LedOutOfRangeError
from .base import StickFxError
from .device import (
    DeviceError,
    DeviceNotFoundError,
    FeatureGetError,
    FeatureReportError,
    FeatureSendError,
    UnsupportedDeviceError,
)
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_hid_error,
)

__all__ = [
    # Base
    "StickFxError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "UnsupportedDeviceError",
    "FeatureReportError",
    "FeatureSendError",
    "FeatureGetError",
    # Addressing
    "LedOutOfRangeError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "handle_errors",
    "wrap_hid_error",
]
