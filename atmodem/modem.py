"""
Main ATModem class.

User-facing API that coordinates the core and feature managers.
"""

import logging
from typing import Callable, Optional

from .core import ModemCore, SerialTransport, StreamTransport, Transport
from .features import DeviceManager
from .types import Info, Status

logger = logging.getLogger(__name__)


class ATModem:
    """
    Main interface for AT command modems.

    Example usage:

    .. code-block:: python

        with ATModem.dial("/dev/ttyUSB2") as modem:
            info = modem.info()
            print(f"Model: {info.manufacturer} {info.model}")

            status = modem.status()
            print(f"Temperature: {status.temperature} C")

    Example usage with manual lifecycle management:

    .. code-block:: python

        modem = ATModem(port="/dev/ttyUSB2")
        modem.device.initialize()
        # ... use modem ...
        modem.close()
    """

    def __init__(
        self,
        port: Optional[str] = None,
        transport: Optional[Transport] = None,
        baudrate: int = 115200,
        timeout: float = 1.0,
        on_disconnect: Optional[Callable[[Exception], None]] = None
    ) -> None:
        """
        Initialize ATModem.

        Args:
            port: Serial port path (e.g., "/dev/ttyUSB2"). Either port or transport required.
            transport: Custom transport instance. Overrides port if provided.
            baudrate: Serial port baud rate (default: 115200)
            timeout: AT command timeout in seconds (default: 1.0)
            on_disconnect: Optional callback function called when device disconnects.
                          Signature: callback(exception: Exception) -> None

        Raises:
            ValueError: If neither port nor transport is provided
            TransportError: If serial port cannot be opened
        """
        if transport is None and port is None:
            raise ValueError("Either 'port' or 'transport' must be provided")

        if transport is None:
            transport = SerialTransport(
                port=port,
                baudrate=baudrate,
                timeout=timeout
            )
            logger.info(f"Created serial transport for {port}")

        self._core = ModemCore(
            transport=transport,
            timeout=timeout,
            on_disconnect=on_disconnect
        )

        self.device = DeviceManager(self._core)

        logger.info("Initialized ATModem")

    @classmethod
    def dial(
        cls,
        port: str,
        baudrate: int = 115200,
        timeout: float = 1.0,
        **kwargs
    ) -> "ATModem":
        """
        Open a serial port and initialize the device.

        Args:
            port: Serial port path
            baudrate: Serial port baud rate
            timeout: Serial read and AT command timeout in seconds

        Returns:
            Initialized ATModem
        """
        transport = SerialTransport(port=port, baudrate=baudrate, timeout=timeout)
        return cls.open(transport, timeout=timeout, **kwargs)

    @classmethod
    def open(cls, transport, timeout: float = 1.0, **kwargs) -> "ATModem":
        """
        Open a modem over an existing transport and initialize the device.

        Args:
            transport: Transport instance, or a raw byte stream with
                       read(n)/write(data) which is wrapped in a StreamTransport
            timeout: AT command timeout in seconds

        Returns:
            Initialized ATModem
        """
        if not isinstance(transport, Transport):
            transport = StreamTransport(transport)

        modem = cls(transport=transport, timeout=timeout, **kwargs)
        try:
            modem.device.initialize()
        except Exception:
            modem.close()
            raise

        return modem

    def close(self) -> None:
        """Close the modem connection and its transport."""
        self._core.close()
        logger.info("Modem closed")

    def info(self) -> Info:
        """Request device information (ATI)."""
        return self.device.get_info()

    def status(self) -> Status:
        """Request device status (AT!GSTATUS?)."""
        return self.device.get_status()

    def send_raw_at(
        self,
        cmd: str,
        strip_ok: bool = False,
        remove_cmd_prefix: bool = False,
        timeout: Optional[float] = None
    ) -> list[str]:
        """
        Send a raw AT command.

        Args:
            cmd: AT command (e.g., "AT+CGMR" or "+CGMR")
            strip_ok: Remove "OK" from response
            remove_cmd_prefix: Remove command prefix from first response line
            timeout: Command timeout in seconds (uses default if None)

        Returns:
            List of response lines

        Raises:
            ATTimeoutError: If command times out
            CommandError: If command returns an error result code
        """
        return self._core.send_at(
            cmd=cmd,
            strip_ok=strip_ok,
            remove_cmd_prefix=remove_cmd_prefix,
            timeout=timeout
        )

    @property
    def is_open(self) -> bool:
        """True until the modem is closed."""
        return self._core.is_open()

    @property
    def is_disconnected(self) -> bool:
        """True if the device was disconnected."""
        return self._core.is_disconnected()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, *exc):
        """
        Context manager exit.

        Automatically closes the modem connection.
        """
        self.close()

    def __repr__(self) -> str:
        """String representation of modem."""
        status = "open" if self.is_open else "closed"
        return f"<ATModem status={status}>"
