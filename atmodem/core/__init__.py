"""
Core modem infrastructure.

Provides low-level building blocks for modem communication:
- Transport: Serial and byte stream communication abstraction
- Protocol: AT command execution
- ModemCore: Coordination of all core components
"""

from .transport import Transport, SerialTransport, StreamTransport, MockTransport
from .protocol import ATProtocol
from .modem import ModemCore

__all__ = [
    "Transport",
    "SerialTransport",
    "StreamTransport",
    "MockTransport",
    "ATProtocol",
    "ModemCore",
]
