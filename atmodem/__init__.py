"""
atmodem - Python library for AT command cellular modems.
"""

from .version import __version__
from .modem import ATModem
from .core import MockTransport, SerialTransport, StreamTransport

from .types import (
    Info,
    Status,
    AntennaPath,
    ValueKind,
)

from .exceptions import (
    ATModemError,
    ATTimeoutError,
    CommandError,
    TransportError,
    DeviceDisconnectedError,
    ModemClosedError,
    ATParseError,
    EmptyResponseError,
    EmptyInputError,
    MalformedLineError,
    UnexpectedSegmentCountError,
    ConversionError,
    AmbiguousFieldError,
)

__all__ = [
    "__version__",
    "ATModem",
    "MockTransport",
    "SerialTransport",
    "StreamTransport",
    "Info",
    "Status",
    "AntennaPath",
    "ValueKind",
    "ATModemError",
    "ATTimeoutError",
    "CommandError",
    "TransportError",
    "DeviceDisconnectedError",
    "ModemClosedError",
    "ATParseError",
    "EmptyResponseError",
    "EmptyInputError",
    "MalformedLineError",
    "UnexpectedSegmentCountError",
    "ConversionError",
    "AmbiguousFieldError",
]
