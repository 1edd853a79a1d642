"""Device channel and retrying feature-report transport."""

from .channel import FeatureChannel, HidChannel, list_devices
from .feature import FeatureTransport

__all__ = ["FeatureChannel", "FeatureTransport", "HidChannel", "list_devices"]
