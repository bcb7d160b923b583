"""
Base parser classes and utilities.

Provides reusable parsing functionality for AT command responses.
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Generic, Optional, Sequence, TypeVar

from ..exceptions import ATParseError, ConversionError, EmptyInputError
from ..types import ValueKind

logger = logging.getLogger(__name__)

T = TypeVar('T')

_INT_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_NON_FINITE = ("inf", "infinity", "nan")


class ResponseParser(ABC, Generic[T]):
    """
    Abstract base class for response parsers.

    Parsers convert raw AT command responses into typed data structures.
    """

    @abstractmethod
    def parse(self, response: list[str]) -> T:
        """
        Parse AT command response.

        Args:
            response: List of response lines from modem

        Returns:
            Parsed data structure

        Raises:
            ATParseError: If response cannot be parsed
        """
        pass


class ValueParser:
    """
    Typed value extractor for the value half of a key/value pair.

    Every extraction method records the first conversion failure and
    returns the zero value of its type from then on, so a caller can issue
    several extractions and check ``err`` once afterwards:

    .. code-block:: python

        vp = ValueParser(["-84"])
        rssi = vp.to_int()
        if vp.err is not None:
            raise vp.err
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        """
        Initialize value parser.

        Args:
            tokens: Value tokens, at least one

        Raises:
            EmptyInputError: If no tokens are given
        """
        if len(tokens) == 0:
            raise EmptyInputError("No key/value pair values provided for parsing")

        self._tokens = [t.strip() for t in tokens]
        self._err: Optional[ATParseError] = None

    @property
    def err(self) -> Optional[ATParseError]:
        """The first parsing error, if there is one."""
        return self._err

    def last_error(self) -> Optional[ATParseError]:
        """Return the first parsing error, if there is one."""
        return self._err

    def to_int(self) -> int:
        """Parse the first token as a base-10 signed 64-bit integer."""
        if self._err is not None:
            return 0

        value = self._tokens[0]
        # int64 has at most 19 digits; also keeps int() clear of its digit limit
        if not _INT_RE.fullmatch(value) or len(value.lstrip("+-").lstrip("0")) > 19:
            self._fail(ValueKind.INTEGER, value)
            return 0

        result = int(value)
        if not INT64_MIN <= result <= INT64_MAX:
            self._fail(ValueKind.INTEGER, value)
            return 0

        return result

    def to_float(self) -> float:
        """
        Parse the first token as a decimal floating point value.

        Values out of float range fail; "inf" and "nan" spelled out are kept.
        """
        if self._err is not None:
            return 0.0

        value = self._tokens[0]
        try:
            result = float(value)
        except ValueError:
            self._fail(ValueKind.FLOAT, value)
            return 0.0

        if not math.isfinite(result) and value.lstrip("+-").lower() not in _NON_FINITE:
            self._fail(ValueKind.FLOAT, value)
            return 0.0

        return result

    def to_duration(self) -> timedelta:
        """Parse the first token as a whole number of seconds."""
        seconds = self.to_int()
        if self._err is not None:
            return timedelta(0)

        try:
            return timedelta(seconds=seconds)
        except OverflowError:
            self._fail(ValueKind.DURATION, self._tokens[0])
            return timedelta(0)

    def to_string(self) -> str:
        """Join all tokens with single spaces."""
        if self._err is not None:
            return ""

        return " ".join(self._tokens)

    def to_list(self, sep: str = ",") -> list[str]:
        """Split the joined tokens on a separator."""
        if self._err is not None:
            return []

        return self.to_string().split(sep)

    def convert(self, kind: ValueKind):
        """
        Extract the value as the given kind.

        Args:
            kind: Target ValueKind

        Returns:
            Converted value, or the zero value of the kind on error
        """
        extractors = {
            ValueKind.INTEGER: self.to_int,
            ValueKind.FLOAT: self.to_float,
            ValueKind.DURATION: self.to_duration,
            ValueKind.STRING: self.to_string,
            ValueKind.LIST: self.to_list,
        }
        return extractors[kind]()

    def _fail(self, kind: ValueKind, value: str) -> None:
        logger.debug(f"Failed to parse {kind.value} from {value!r}")
        self._err = ConversionError(kind, value)
