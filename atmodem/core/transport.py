"""
Transport layer abstraction for modem communication.

Provides serial, generic stream and mock transports behind one interface.
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Optional
import serial
from serial import SerialException

from ..exceptions import TransportError, DeviceDisconnectedError

logger = logging.getLogger(__name__)

# Substrings of pyserial errors raised when the device goes away.
DISCONNECT_PHRASES = (
    "device disconnected",
    "device reports readiness to read but returned no data",
    "no such device",
    "device not configured",
    "input/output error",
)


class Transport(ABC):
    """Abstract base class for modem transport."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """
        Write data to the transport.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes written

        Raises:
            TransportError: If write fails
        """
        pass

    @abstractmethod
    def read_until(self, terminator: bytes = b"\r\n", timeout: Optional[float] = None) -> bytes:
        """
        Read from transport until terminator is found.

        Args:
            terminator: Byte sequence marking end of data
            timeout: Optional timeout in seconds

        Returns:
            Bytes read including terminator, or b"" if nothing arrived

        Raises:
            TransportError: If read fails
        """
        pass

    @abstractmethod
    def reset_input_buffer(self) -> None:
        """Clear the input buffer."""
        pass

    @abstractmethod
    def is_open(self) -> bool:
        """Check if transport is open."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the transport."""
        pass


class SerialTransport(Transport):
    """
    Transport over a pyserial port.

    ``port`` is anything ``serial.serial_for_url`` accepts: a device path
    such as ``/dev/ttyUSB2`` or a URL such as ``loop://`` or
    ``socket://host:port``.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 1.0
    ) -> None:
        """
        Open the port.

        Raises:
            TransportError: If the port cannot be opened
        """
        self.port = port
        try:
            self._serial = serial.serial_for_url(port, baudrate=baudrate, timeout=timeout)
        except (SerialException, ValueError) as e:
            logger.error(f"Cannot open {port}: {e}")
            raise TransportError(f"Cannot open {port}: {e}") from e

        logger.info(f"Opened {port} at {baudrate} baud")

    def write(self, data: bytes) -> int:
        try:
            return self._serial.write(data)
        except SerialException as e:
            raise self._translate(e, "write") from e

    def read_until(self, terminator: bytes = b"\r\n", timeout: Optional[float] = None) -> bytes:
        """Read one terminated line; ``timeout`` overrides the port timeout for this call."""
        saved = self._serial.timeout
        if timeout is not None:
            self._serial.timeout = timeout
        try:
            return self._serial.read_until(terminator)
        except SerialException as e:
            raise self._translate(e, "read") from e
        finally:
            self._serial.timeout = saved

    def reset_input_buffer(self) -> None:
        try:
            self._serial.reset_input_buffer()
        except SerialException as e:
            raise self._translate(e, "reset") from e

    def is_open(self) -> bool:
        return self._serial.is_open

    def close(self) -> None:
        if self._serial.is_open:
            self._serial.close()
            logger.info(f"Closed {self.port}")

    def _translate(self, error: SerialException, op: str) -> TransportError:
        """Map a pyserial error to DeviceDisconnectedError or TransportError."""
        text = str(error)
        logger.error(f"Serial {op} on {self.port} failed: {text}")
        if any(phrase in text.lower() for phrase in DISCONNECT_PHRASES):
            return DeviceDisconnectedError(f"Serial device disconnected: {text}", response=[text])
        return TransportError(f"Serial {op} failed: {text}")


class StreamTransport(Transport):
    """
    Transport over an arbitrary byte stream.

    Wraps any object with ``read(n)`` and ``write(data)`` methods, such as a
    socket file or a pseudo-terminal. If the stream also has a ``close()``
    method it is called when the transport is closed.
    """

    def __init__(self, stream) -> None:
        """
        Initialize stream transport.

        Args:
            stream: Readable and writable byte stream
        """
        self._stream = stream
        self._open = True
        logger.info(f"Opened stream transport over {type(stream).__name__}")

    def write(self, data: bytes) -> int:
        """Write data to the stream."""
        if not self._open:
            raise DeviceDisconnectedError("Stream transport is closed")

        try:
            written = self._stream.write(data)
            if hasattr(self._stream, "flush"):
                self._stream.flush()
        except OSError as e:
            logger.error(f"Stream write failed: {e}")
            raise TransportError(f"Stream write failed: {e}") from e

        logger.debug(f"Wrote {written} bytes: {data}")
        return written if written is not None else len(data)

    def read_until(self, terminator: bytes = b"\r\n", timeout: Optional[float] = None) -> bytes:
        """
        Read from the stream one byte at a time until terminator.

        Timeouts are those of the underlying stream.
        """
        if not self._open:
            raise DeviceDisconnectedError("Stream transport is closed")

        data = bytearray()
        try:
            while not data.endswith(terminator):
                chunk = self._stream.read(1)
                if not chunk:
                    break
                data += chunk
        except OSError as e:
            logger.error(f"Stream read failed: {e}")
            raise TransportError(f"Stream read failed: {e}") from e

        if data:
            logger.debug(f"Read {len(data)} bytes: {bytes(data)}")

        return bytes(data)

    def reset_input_buffer(self) -> None:
        """Streams have no input buffer to discard."""
        pass

    def is_open(self) -> bool:
        """Check if stream transport is open."""
        return self._open

    def close(self) -> None:
        """Close the stream, if it can be closed."""
        if not self._open:
            return

        self._open = False
        close = getattr(self._stream, "close", None)
        if callable(close):
            close()
        logger.info("Closed stream transport")


class MockTransport(Transport):
    """
    Mock transport for testing.

    Simulates a modem that answers each written AT command with the next
    queued response. Writes that are not AT commands (such as the escape
    sequence sent on initialization) are recorded but not answered.
    """

    def __init__(self) -> None:
        """Initialize mock transport."""
        self._open = True
        self._input_buffer: list[bytes] = []
        self._response_queue: list[list[str]] = []
        self._lock = threading.Lock()
        self.writes: list[bytes] = []
        logger.info("Initialized MockTransport")

    def add_response(self, lines: list[str]) -> None:
        """
        Queue a response to the next AT command.

        Args:
            lines: List of response lines (e.g., ["Manufacturer: huawei", "OK"])
        """
        with self._lock:
            self._response_queue.append(list(lines))
            logger.debug(f"Added mock response: {lines}")

    def write(self, data: bytes) -> int:
        """Record written data and release the next response for AT commands."""
        if not self._open:
            raise DeviceDisconnectedError(
                "MockTransport is closed (simulating device disconnection)",
                response=["MockTransport closed"]
            )

        logger.debug(f"Mock write: {data}")
        with self._lock:
            self.writes.append(data)
            if data.upper().startswith(b"AT") and self._response_queue:
                for line in self._response_queue.pop(0):
                    self._input_buffer.append((line + "\r\n").encode("utf-8"))

        return len(data)

    def read_until(self, terminator: bytes = b"\r\n", timeout: Optional[float] = None) -> bytes:
        """
        Simulate reading from modem.

        Returns released response lines one at a time, or b"" after a short
        wait when none are available.
        """
        if not self._open:
            raise DeviceDisconnectedError(
                "MockTransport is closed (simulating device disconnection)",
                response=["MockTransport closed"]
            )

        with self._lock:
            if self._input_buffer:
                result = self._input_buffer.pop(0)
                logger.debug(f"Mock read: {result}")
                return result

        time.sleep(0.005)
        return b""

    def reset_input_buffer(self) -> None:
        """Clear mock input buffer."""
        with self._lock:
            self._input_buffer.clear()

    def is_open(self) -> bool:
        """Check if mock transport is open."""
        return self._open

    def close(self) -> None:
        """Close mock transport."""
        self._open = False
        logger.info("Closed MockTransport")

    def clear_responses(self) -> None:
        """Clear all queued responses."""
        with self._lock:
            self._response_queue.clear()
            logger.debug("Cleared mock response queue")
