"""
Response parsers for AT command responses.

Provides type-safe parsing of modem responses into structured data.
"""

from .base import ResponseParser, ValueParser
from .info import InfoParser, INFO_FIELDS
from .status import StatusParser, STATUS_FIELDS

__all__ = [
    "ResponseParser",
    "ValueParser",
    "InfoParser",
    "INFO_FIELDS",
    "StatusParser",
    "STATUS_FIELDS",
]
