"""
Feature managers for modem functionality.

- DeviceManager: Device initialization, info and status
"""

from .device_info import DeviceManager

__all__ = [
    "DeviceManager",
]
