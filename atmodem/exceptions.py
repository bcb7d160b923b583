"""
Exceptions for the atmodem library.

Provides detailed error information for debugging modem communication
and response parsing issues.
"""

from typing import Optional


class ATModemError(Exception):
    """
    Base exception for AT modem errors.

    All atmodem exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        response: Optional[list[str]] = None
    ) -> None:
        """
        Initialize exception with context.

        Args:
            message: Error description
            command: AT command that caused the error (if applicable)
            response: Modem response (if applicable)
        """
        self.command = command
        self.response = response
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with context."""
        parts = [super().__str__()]

        if self.command:
            parts.append(f"Command: {self.command}")

        if self.response:
            parts.append(f"Response: {self.response}")

        return " | ".join(parts)


class ATTimeoutError(ATModemError):
    """
    Raised when an AT command times out.

    This typically indicates:
    - Modem is not responding
    - Serial connection issue
    - Command takes longer than timeout
    """
    pass


class CommandError(ATModemError):
    """
    Raised when the modem answers a command with ERROR, +CME ERROR
    or +CMS ERROR.
    """
    pass


class TransportError(ATModemError):
    """
    Raised when transport layer fails.

    This indicates:
    - Serial port issues
    - Connection lost
    - Hardware communication failure
    """
    pass


class DeviceDisconnectedError(TransportError):
    """
    Raised when device is disconnected during operation.

    This is a fatal error that requires closing and reopening the connection.
    """
    pass


class ModemClosedError(ATModemError):
    """Raised when a command is sent on a modem that has been closed."""
    pass


class ATParseError(ATModemError):
    """
    Raised when an AT command response cannot be parsed.

    Base class of every response parsing failure. A parse error always
    aborts the whole record; partial records are never returned.
    """
    pass


class EmptyResponseError(ATParseError):
    """Raised when a command returned no response lines."""
    pass


class EmptyInputError(ATParseError):
    """Raised when a key/value pair has no value tokens."""
    pass


class MalformedLineError(ATParseError):
    """Raised when an info line is not of the form ``key: value``."""

    def __init__(self, line: str, **kwargs) -> None:
        self.line = line
        super().__init__(f"Malformed line: {line!r}", **kwargs)


class UnexpectedSegmentCountError(ATParseError):
    """
    Raised when a status line holds zero, or more than two,
    key/value pairs.
    """

    def __init__(self, line: str, count: int, **kwargs) -> None:
        self.line = line
        self.count = count
        super().__init__(
            f"Expected 1 or 2 key/value pairs, got {count}: {line!r}",
            **kwargs
        )


class ConversionError(ATParseError):
    """
    Raised when a value token cannot be converted to its field's type.

    Attributes:
        kind: Target ValueKind (integer, float, ...)
        value: The offending token
    """

    def __init__(self, kind, value: str, **kwargs) -> None:
        self.kind = kind
        self.value = value
        super().__init__(
            f"Failed to parse {getattr(kind, 'value', kind)}: {value!r}",
            **kwargs
        )


class AmbiguousFieldError(ATParseError):
    """
    Raised when a key whose target depends on an earlier key appears
    before that earlier key.
    """

    def __init__(self, key: str, line: str, **kwargs) -> None:
        self.key = key
        self.line = line
        super().__init__(
            f"Cannot resolve field for key {key!r} in line {line!r}",
            **kwargs
        )
