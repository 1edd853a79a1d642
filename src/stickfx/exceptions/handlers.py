"""
Centralized error handling utilities.

| Scenario | Use This |
|----------|----------|
| Device could not be opened | `wrap_hid_error(e, vendor_id, product_id)` |
| Log and swallow (teardown paths) | `@handle_errors(operation_name="...", re_raise=False)` |
| Critical section with auto-logging | `with ErrorContext("open device"): ...` |
| Show an error on the command line | `format_error_for_display(e)` |

Each layer translates errors to be more useful at the next level up:
hidapi raises `OSError`/`ValueError`, the transport turns those into
`FeatureReportError`, and the CLI shows `user_message` plus `recovery_hint`.
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import StickFxError
from .device import DeviceError, DeviceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator for consistent error handling.

    Args:
        operation_name: Name of the operation for logging (e.g., "turn off LEDs")
        fallback_value: Value to return if error occurs and re_raise=False
        re_raise: Whether to re-raise the exception after handling
        log_level: Logging level for the error (default: ERROR)

    Example:
        ```python
        @handle_errors(operation_name="turn off LEDs", re_raise=False)
        def _blank(self):
            self.turn_off_all_leds()
        ```
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except StickFxError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")
                if re_raise:
                    raise
                return fallback_value

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("open BlinkStick") as ctx:
            channel = HidChannel.open(config)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, StickFxError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        # True suppresses, False re-raises
        return not self.re_raise


def wrap_hid_error(error: Exception, vendor_id: int, product_id: int) -> StickFxError:
    """
    Convert a hidapi open failure to a stickfx exception.

    hidapi reports almost every open failure as ``OSError('open failed')``;
    permission problems surface with a different message on some platforms.

    Args:
        error: The original exception from hidapi
        vendor_id: Vendor id that was being opened
        product_id: Product id that was being opened

    Returns:
        A DeviceError with appropriate type and message
    """
    error_msg = str(error)

    if "open failed" in error_msg.lower() or "not found" in error_msg.lower():
        return DeviceNotFoundError(vendor_id, product_id, original_error=error_msg)

    if "permission" in error_msg.lower() or "access" in error_msg.lower():
        return DeviceError(
            user_message="Permission denied while opening the BlinkStick.",
            technical_message=f"Opening 0x{vendor_id:04x}:0x{product_id:04x} failed: {error_msg}",
            recoverable=True,
            recovery_hint="Install a udev rule granting access to the device, or run with elevated privileges.",
        )

    return DeviceError(
        user_message=f"Device error: {error_msg}",
        technical_message=f"Opening 0x{vendor_id:04x}:0x{product_id:04x} failed: {error_msg}",
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, StickFxError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
